"""
ReliefHub Backend — Service Dependencies
==========================================

What:  FastAPI dependency providers that build services from the app's store.
How:   Each provider takes the DocumentStore from ``get_store`` and passes the
       collection it needs into the service constructor. Tests replace the
       store on ``app.state`` and every service follows.
"""

from fastapi import Depends

from reliefhub.config import settings
from reliefhub.database import (
    COMMUNITIES,
    DONORS,
    SUPPLIES,
    USERS,
    VOLUNTEERS,
    DocumentStore,
    get_store,
)
from reliefhub.services.credential_service import AuthService
from reliefhub.services.resource_service import ResourceService, SupplyService
from reliefhub.services.token_service import TokenIssuer


def get_token_issuer() -> TokenIssuer:
    return TokenIssuer.from_settings(settings)


def get_auth_service(
    store: DocumentStore = Depends(get_store),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(store.collection(USERS), token_issuer, rounds=settings.bcrypt_rounds)


def get_supply_service(store: DocumentStore = Depends(get_store)) -> SupplyService:
    return SupplyService(store.collection(SUPPLIES))


def get_donor_service(store: DocumentStore = Depends(get_store)) -> ResourceService:
    return ResourceService(store.collection(DONORS), resource="donor")


def get_community_service(store: DocumentStore = Depends(get_store)) -> ResourceService:
    return ResourceService(store.collection(COMMUNITIES), resource="community post")


def get_volunteer_service(store: DocumentStore = Depends(get_store)) -> ResourceService:
    return ResourceService(store.collection(VOLUNTEERS), resource="volunteer")
