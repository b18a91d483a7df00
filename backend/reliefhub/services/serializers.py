"""
ReliefHub Backend — Document Serializers
==========================================

What:  Converts store documents and write results into JSON-safe dicts.
How:   ObjectIds become 24-char hex strings at any depth. Write results keep
       the camelCase keys the frontend reads (``insertedId``,
       ``modifiedCount``, ``deletedCount``...).
"""

from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


def serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: serialize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return value


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if document is None:
        return None
    return serialize_value(document)


def serialize_insert_result(result: InsertOneResult) -> Dict[str, Any]:
    if not result.acknowledged:
        return {"acknowledged": False}
    return {
        "acknowledged": True,
        "insertedId": serialize_value(result.inserted_id),
    }


def serialize_update_result(result: UpdateResult) -> Dict[str, Any]:
    if not result.acknowledged:
        return {"acknowledged": False}
    upserted_id = result.upserted_id
    return {
        "acknowledged": True,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedCount": 0 if upserted_id is None else 1,
        "upsertedId": serialize_value(upserted_id),
    }


def serialize_delete_result(result: DeleteResult) -> Dict[str, Any]:
    if not result.acknowledged:
        return {"acknowledged": False}
    return {
        "acknowledged": True,
        "deletedCount": result.deleted_count,
    }
