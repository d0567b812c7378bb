from typing import Any, Dict, Iterable, List, Optional
from datetime import datetime

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.database import Database

from studynotion.config.database import get_mongo_db


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Returns an ObjectId for ``value`` or None when it cannot be one."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def as_ref(value: Any) -> Any:
    # references are stored as ObjectId when they look like one, raw otherwise
    oid = to_object_id(value)
    return oid if oid is not None else value


class MongoRepository:
    def __init__(self, collection_name: str, db: Optional[Database] = None):
        # tests hand in their own database; the app uses the global one
        db = db if db is not None else get_mongo_db()
        self.col = db[collection_name]

    @classmethod
    def _stringify_ids(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        if isinstance(value, dict):
            return {k: cls._stringify_ids(v) for k, v in value.items()}
        if isinstance(value, list):
            return [cls._stringify_ids(v) for v in value]
        return value

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.utcnow()
        data.setdefault("createdAt", now)
        data.setdefault("updatedAt", now)
        res = self.col.insert_one(data)
        created = self.col.find_one({"_id": res.inserted_id})
        return self._stringify_ids(created)

    def find_one(self, _id: Any) -> Optional[Dict[str, Any]]:
        oid = to_object_id(_id)
        if oid is None:
            return None
        doc = self.col.find_one({"_id": oid})
        return self._stringify_ids(doc) if doc else None

    def find(self, query: Dict[str, Any], projection: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        return [self._stringify_ids(d) for d in self.col.find(query, projection)]

    def find_by_ids(
        self,
        ids: Iterable[Any],
        query: Optional[Dict[str, Any]] = None,
        projection: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Expands a list of references into their documents.

        Keeps the order of ``ids`` and silently drops references that do not
        exist or do not match ``query`` (e.g. unpublished courses).
        """
        ids = [str(i) for i in ids or []]
        oids = [oid for oid in (to_object_id(i) for i in ids) if oid is not None]
        if not oids:
            return []
        q: Dict[str, Any] = {"_id": {"$in": oids}}
        q.update(query or {})
        found = {d["_id"]: d for d in self.find(q, projection)}
        return [found[i] for i in ids if i in found]

    def add_to_set(self, _id: Any, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Atomic ``$addToSet``; returns the updated document or None if absent."""
        oid = to_object_id(_id)
        if oid is None:
            return None
        doc = self.col.find_one_and_update(
            {"_id": oid},
            {"$addToSet": fields, "$set": {"updatedAt": datetime.utcnow()}},
            return_document=ReturnDocument.AFTER,
        )
        return self._stringify_ids(doc) if doc else None

