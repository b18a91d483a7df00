"""
ReliefHub Backend — Resource Services
=======================================

What:  One service per collection, each operation mapping to one store call.
How:   ResourceService implements list/create/get over any collection;
       SupplyService adds update and delete for the ``supplies`` collection.
Who:   Route handlers receive instances through FastAPI dependencies.

Operation → store call:
    list_all()            → find({}).to_list()
    create(document)      → insert_one(document)
    get(id)               → find_one({"_id": ObjectId(id)})
    update(id, changes)   → update_one({"_id": ...}, {"$set": changes})
                          (find_one when no whitelisted key is present)
    delete(id)            → delete_one({"_id": ...})

Identifiers are converted with ObjectId(); a malformed id raises
bson.errors.InvalidId, which the catch-all handler turns into a 500.
A missing document is returned as None, never as an error.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.results import UpdateResult

from reliefhub.services.serializers import (
    serialize_delete_result,
    serialize_document,
    serialize_insert_result,
    serialize_update_result,
)

logger = logging.getLogger(__name__)


class ResourceService:
    """
    Thin CRUD facade over a single collection.

    Args:
        collection:  Async pymongo collection holding the resource
        resource:    Name used in log messages ("donor", "volunteer", ...)
    """

    def __init__(self, collection: Any, resource: str):
        self.collection = collection
        self.resource = resource

    @staticmethod
    def _by_id(document_id: str) -> Dict[str, ObjectId]:
        return {"_id": ObjectId(document_id)}

    async def list_all(self) -> List[Dict[str, Any]]:
        documents = await self.collection.find({}).to_list(None)
        logger.debug("Listed %d %s documents", len(documents), self.resource)
        return [serialize_document(document) for document in documents]

    async def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        # insert_one adds the generated _id to the dict it is given
        result = await self.collection.insert_one(dict(document))
        logger.info("Created %s %s", self.resource, result.inserted_id)
        return serialize_insert_result(result)

    async def get(self, document_id: str) -> Optional[Dict[str, Any]]:
        document = await self.collection.find_one(self._by_id(document_id))
        return serialize_document(document)


class SupplyService(ResourceService):
    """Supplies are the only resource clients can edit and remove."""

    UPDATABLE_FIELDS = ("img", "title", "category", "price", "description")

    def __init__(self, collection: Any):
        super().__init__(collection, resource="supply")

    async def update(self, document_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        """
        Overwrite whitelisted fields on one supply.

        Fields outside UPDATABLE_FIELDS are ignored. Zero matched documents
        is reported in the acknowledgement, not raised.
        """
        fields = {key: value for key, value in changes.items() if key in self.UPDATABLE_FIELDS}
        if fields:
            result = await self.collection.update_one(
                self._by_id(document_id), {"$set": fields}
            )
        else:
            # Servers before 5.0 reject an empty $set
            matched = await self.collection.find_one(self._by_id(document_id))
            result = UpdateResult({"n": int(matched is not None), "nModified": 0}, True)
        logger.info(
            "Updated supply %s: matched=%d modified=%d",
            document_id, result.matched_count, result.modified_count,
        )
        return serialize_update_result(result)

    async def delete(self, document_id: str) -> Dict[str, Any]:
        result = await self.collection.delete_one(self._by_id(document_id))
        logger.info("Deleted supply %s: deleted=%d", document_id, result.deleted_count)
        return serialize_delete_result(result)
