"""
MongoDB Service Module for storing users, snippets and tags.
"""

import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from codeshelf.shared.config import settings
from codeshelf.shared.exceptions import ConflictError

logger = logging.getLogger(__name__)


class MongoDBService:
    """
    Service for interacting with MongoDB.
    Owns the client and exposes thin document level helpers per collection.
    """

    def __init__(self, uri: Optional[str] = None, db_name: Optional[str] = None):
        self._uri = uri or settings.mongodb_uri
        self._db_name = db_name or settings.mongodb_db_name
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None
        self._connected = False

    @property
    def connected(self) -> bool:
        return self._connected

    async def connect(self):
        """Establish connection to MongoDB."""
        try:
            self.client = AsyncIOMotorClient(self._uri)
            self.db = self.client[self._db_name]

            await self.client.admin.command("ping")
            self._connected = True

            logger.info(f"Connected to MongoDB: {self._db_name}")

            await self._create_indexes()

        except PyMongoError as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    async def disconnect(self):
        """Close MongoDB connection."""
        if self.client:
            self.client.close()
            self._connected = False
            logger.info("Disconnected from MongoDB")

    async def _create_indexes(self):
        """Create necessary indexes for collections."""
        await self.db.users.create_index("id", unique=True)
        await self.db.users.create_index("email", unique=True)
        await self.db.users.create_index("username", unique=True)
        await self.db.snippets.create_index("id", unique=True)
        await self.db.snippets.create_index("author_id")
        await self.db.snippets.create_index("created_at")
        await self.db.tags.create_index("id", unique=True)
        await self.db.tags.create_index("slug", unique=True)

    async def insert(self, collection: str, document: Dict[str, Any]) -> None:
        try:
            await self.db[collection].insert_one(dict(document))
        except DuplicateKeyError as e:
            raise _conflict(collection, e) from e

    async def find_one(self, collection: str, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        doc = await self.db[collection].find_one(query)
        if doc:
            doc.pop("_id", None)
        return doc

    async def find_many(
        self,
        collection: str,
        query: Optional[Dict[str, Any]] = None,
        sort_field: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        cursor = self.db[collection].find(query or {})
        if sort_field:
            cursor = cursor.sort(sort_field, 1)
        docs = await cursor.to_list(length=None)
        for doc in docs:
            doc.pop("_id", None)
        return docs

    async def replace(self, collection: str, record_id: str, document: Dict[str, Any]) -> bool:
        try:
            result = await self.db[collection].replace_one({"id": record_id}, dict(document))
        except DuplicateKeyError as e:
            raise _conflict(collection, e) from e
        return result.matched_count > 0

    async def delete(self, collection: str, record_id: str) -> bool:
        result = await self.db[collection].delete_one({"id": record_id})
        return result.deleted_count > 0

    async def count(self, collection: str) -> int:
        return await self.db[collection].count_documents({})


def _conflict(collection: str, error: DuplicateKeyError) -> ConflictError:
    fields = list((error.details or {}).get("keyValue", {}))
    logger.warning(f"Duplicate key in {collection}: {fields}")
    return ConflictError(
        f"Duplicate value for {', '.join(fields) or 'unique field'}",
        details={"collection": collection, "fields": fields},
    )


mongodb_service = MongoDBService()
