"""Base MongoDB repository with reusable patterns.

Provides common functionality for all MongoDB repositories:
- Collection binding on an injected database handle
- Document mapping (domain ↔ MongoDB)
- Unique index creation on first use
- Error logging

All concrete MongoDB repositories should inherit from MongoBaseRepository.
The database handle is owned by MongoConnection; repositories never open
or close the client themselves.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, TypeVar

import structlog
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult
from pymongo.write_concern import WriteConcern

TEntity = TypeVar("TEntity")

logger = structlog.get_logger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - unique_key: Field carrying the record identity (unique index)
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    Example:
        class MongoUserRepository(MongoBaseRepository[User]):
            collection_name = "users"
            unique_key = "email"

            def to_document(self, user: User) -> Dict[str, Any]:
                ...

            def from_document(self, doc: Dict[str, Any]) -> User:
                ...
    """

    collection_name: str
    unique_key: str

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        """
        Initialize repository on an injected database handle.

        Args:
            db: Motor database instance
        """
        self._db = db
        self._collection = db[self.collection_name]
        self._indexes_created = False

        logger.debug(
            "mongo.repository_initialized",
            repository=self.__class__.__name__,
            collection=self.collection_name,
        )

    # ============================================================
    # Abstract Methods (must be implemented)
    # ============================================================

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """
        Convert domain entity to MongoDB document.

        Args:
            entity: Domain entity

        Returns:
            MongoDB document (dict)
        """
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Args:
            doc: MongoDB document

        Returns:
            Domain entity

        Raises:
            KeyError: If document is missing required fields
        """
        pass

    # ============================================================
    # Protected Utility Methods (for subclasses)
    # ============================================================

    @property
    def collection(self) -> AsyncIOMotorCollection:
        """Get MongoDB collection handle."""
        return self._collection

    async def _ensure_indexes(self) -> None:
        """Create the unique index on `unique_key` if not already created."""
        if self._indexes_created:
            return

        await self._collection.create_index(
            [(self.unique_key, 1)],
            unique=True,
            name=f"unique_{self.unique_key}",
        )
        self._indexes_created = True

    async def _find_one(
        self,
        filter_dict: Dict[str, Any],
        projection: Optional[Dict[str, int]] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Find single document with error handling.

        Args:
            filter_dict: MongoDB filter
            projection: Optional projection

        Returns:
            Document dict or None if not found

        Raises:
            PyMongoError: If MongoDB operation fails (logged and re-raised)
        """
        try:
            await self._ensure_indexes()
            return await self._collection.find_one(filter_dict, projection)
        except Exception as e:
            logger.error(
                "mongo.find_one_failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    async def _insert_one(
        self,
        document: Dict[str, Any],
        write_concern: Optional[WriteConcern] = None,
    ) -> InsertOneResult:
        """
        Insert single document with error handling.

        Args:
            document: MongoDB document to insert
            write_concern: Optional write concern overriding the collection default

        Returns:
            Driver insert result

        Raises:
            PyMongoError: If MongoDB operation fails (logged and re-raised)
        """
        collection = self._collection
        if write_concern is not None:
            collection = collection.with_options(write_concern=write_concern)
        try:
            await self._ensure_indexes()
            return await collection.insert_one(document)
        except Exception as e:
            logger.error(
                "mongo.insert_one_failed",
                collection=self.collection_name,
                error=str(e),
            )
            raise

    async def _update_one(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
        upsert: bool = False,
    ) -> UpdateResult:
        """
        Update single document with error handling.

        Args:
            filter_dict: MongoDB filter
            update_dict: Update operations (e.g., {"$set": {...}})
            upsert: Create document if not found

        Returns:
            Driver update result

        Raises:
            PyMongoError: If MongoDB operation fails (logged and re-raised)
        """
        try:
            await self._ensure_indexes()
            return await self._collection.update_one(filter_dict, update_dict, upsert=upsert)
        except Exception as e:
            logger.error(
                "mongo.update_one_failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> DeleteResult:
        """
        Delete single document with error handling.

        Args:
            filter_dict: MongoDB filter

        Returns:
            Driver delete result

        Raises:
            PyMongoError: If MongoDB operation fails (logged and re-raised)
        """
        try:
            await self._ensure_indexes()
            return await self._collection.delete_one(filter_dict)
        except Exception as e:
            logger.error(
                "mongo.delete_one_failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

