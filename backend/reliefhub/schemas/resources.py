"""
ReliefHub Backend — Resource Record Types
===========================================

What:  Pydantic models for the bodies accepted by the resource routes.
How:   Each model names the fields the frontend sends, all optional and
       typed Any so no value is rejected or coerced, and allows extra keys.
       ``to_document()`` returns exactly what the client sent (declared and
       extra keys alike) so documents are stored verbatim.

Record types:
    SupplyIn          POST /api/v1/supply
    SupplyUpdate      PUT  /api/v1/supply/{id} (only whitelisted fields)
    DonorIn           POST /api/v1/donor
    CommunityPostIn   POST /api/v1/community
    VolunteerIn       POST /api/v1/volunteer
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class DocumentModel(BaseModel):
    """Base for client-shaped documents that keep unknown fields."""

    model_config = ConfigDict(extra="allow")

    def to_document(self) -> Dict[str, Any]:
        document = self.model_dump(exclude_unset=True)
        document.update(self.model_extra or {})
        return document


class SupplyIn(DocumentModel):
    img: Optional[Any] = None
    title: Optional[Any] = None
    category: Optional[Any] = None
    price: Optional[Any] = None
    description: Optional[Any] = None


class SupplyUpdate(BaseModel):
    """
    Partial supply. Keys outside the whitelist are dropped, so an update
    can never touch ``_id`` or fields another client added.
    """

    model_config = ConfigDict(extra="ignore")

    img: Optional[Any] = None
    title: Optional[Any] = None
    category: Optional[Any] = None
    price: Optional[Any] = None
    description: Optional[Any] = None

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class DonorIn(DocumentModel):
    name: Optional[Any] = None
    email: Optional[Any] = None
    image: Optional[Any] = None
    amount: Optional[Any] = None


class CommunityPostIn(DocumentModel):
    name: Optional[Any] = None
    email: Optional[Any] = None
    image: Optional[Any] = None
    comment: Optional[Any] = None


class VolunteerIn(DocumentModel):
    name: Optional[Any] = None
    email: Optional[Any] = None
    phone: Optional[Any] = None
    location: Optional[Any] = None
