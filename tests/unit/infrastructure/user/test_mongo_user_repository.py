"""
Unit tests for MongoDB user repository.

Uses AsyncMock for Motor (MongoDB async driver) to avoid real DB dependencies.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError, WriteConcernError, WriteError
from pymongo.write_concern import WriteConcern

from accounts.domain.user.core.entities.user import User
from accounts.domain.user.core.exceptions.user_errors import DuplicateOrWriteError
from accounts.domain.user.core.value_objects.user_preferences import UserPreferences
from accounts.infrastructure.user.mongo_user_repository import MongoUserRepository


@pytest.fixture
def mock_collection() -> AsyncMock:
    """Mock motor collection; majority-concern writes go to `majority` attribute."""
    collection = AsyncMock()
    majority = AsyncMock()
    collection.with_options = MagicMock(return_value=majority)
    collection.majority = majority
    return collection


@pytest.fixture
def mock_db(mock_collection: AsyncMock) -> MagicMock:
    """Mock Motor AsyncIOMotorDatabase."""
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def repository(mock_db: MagicMock) -> MongoUserRepository:
    """Repository instance with mocked database."""
    return MongoUserRepository(mock_db)


class TestMongoUserRepository:
    """Test suite for MongoDB user repository."""

    def test_init_binds_users_collection(self, mock_db: MagicMock, mock_collection: AsyncMock):
        repo = MongoUserRepository(mock_db)

        mock_db.__getitem__.assert_called_once_with("users")
        assert repo.collection is mock_collection

    @pytest.mark.asyncio
    async def test_unique_email_index_created_once(
        self, repository: MongoUserRepository, mock_collection: AsyncMock
    ):
        mock_collection.find_one.return_value = None

        await repository.find_by_email("a@x.com")
        await repository.find_by_email("b@x.com")

        mock_collection.create_index.assert_awaited_once_with(
            [("email", 1)], unique=True, name="unique_email"
        )

    @pytest.mark.asyncio
    async def test_add_uses_majority_write_concern(
        self, repository: MongoUserRepository, mock_collection: AsyncMock, alice: User
    ):
        await repository.add(alice)

        mock_collection.with_options.assert_called_once_with(
            write_concern=WriteConcern(w="majority")
        )
        mock_collection.majority.insert_one.assert_awaited_once_with(
            {
                "email": "alice@x.com",
                "name": "Alice",
                "password": "$2b$12$opaque",
                "preferences": {"theme": "dark"},
            }
        )
        mock_collection.insert_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_add_duplicate_raises_with_user_name(
        self, repository: MongoUserRepository, mock_collection: AsyncMock, alice: User
    ):
        mock_collection.majority.insert_one.side_effect = DuplicateKeyError(
            "E11000 duplicate key error collection: accounts.users index: unique_email",
            code=11000,
        )

        with pytest.raises(DuplicateOrWriteError) as exc_info:
            await repository.add(alice)

        assert exc_info.value.identifier == "Alice"
        assert "E11000" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, DuplicateKeyError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            WriteError("document failed validation", code=121),
            WriteConcernError("waiting for replication timed out", code=64),
        ],
    )
    async def test_add_write_rejection_raises(
        self, repository: MongoUserRepository, mock_collection: AsyncMock, alice: User, error
    ):
        mock_collection.majority.insert_one.side_effect = error

        with pytest.raises(DuplicateOrWriteError):
            await repository.add(alice)

    @pytest.mark.asyncio
    async def test_find_by_email(self, repository: MongoUserRepository, mock_collection: AsyncMock):
        mock_collection.find_one.return_value = {
            "_id": "65f0c0ffee",
            "email": "alice@x.com",
            "name": "Alice",
            "password": "hash",
            "preferences": {"theme": "dark"},
        }

        user = await repository.find_by_email("alice@x.com")

        assert user is not None
        assert user.email == "alice@x.com"
        assert user.name == "Alice"
        assert user.preferences.data == {"theme": "dark"}
        mock_collection.find_one.assert_awaited_once_with({"email": "alice@x.com"}, None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("stored", [{}, {"preferences": None}])
    async def test_find_by_email_without_preferences(
        self, repository: MongoUserRepository, mock_collection: AsyncMock, stored
    ):
        """Absent or null preferences read as an empty mapping."""
        mock_collection.find_one.return_value = {
            "email": "bob@x.com",
            "name": "Bob",
            "password": "hash",
            **stored,
        }

        user = await repository.find_by_email("bob@x.com")

        assert user.preferences.data == {}

    @pytest.mark.asyncio
    async def test_find_by_email_not_found(
        self, repository: MongoUserRepository, mock_collection: AsyncMock
    ):
        mock_collection.find_one.return_value = None

        assert await repository.find_by_email("ghost@x.com") is None

    @pytest.mark.asyncio
    async def test_update_preferences_sets_full_mapping(
        self, repository: MongoUserRepository, mock_collection: AsyncMock
    ):
        mock_collection.update_one.return_value = MagicMock(acknowledged=True)
        prefs = UserPreferences(data={"theme": "light", "lang": "en"})

        assert await repository.update_preferences("alice@x.com", prefs) is True

        mock_collection.update_one.assert_awaited_once_with(
            {"email": "alice@x.com"},
            {"$set": {"preferences": {"theme": "light", "lang": "en"}}},
            upsert=False,
        )

    @pytest.mark.asyncio
    async def test_update_preferences_write_error_raises(
        self, repository: MongoUserRepository, mock_collection: AsyncMock
    ):
        mock_collection.update_one.side_effect = WriteError("document failed validation", code=121)

        with pytest.raises(DuplicateOrWriteError) as exc_info:
            await repository.update_preferences("alice@x.com", UserPreferences.default())

        assert exc_info.value.identifier == "alice@x.com"

    @pytest.mark.asyncio
    async def test_delete_by_email(self, repository: MongoUserRepository, mock_collection: AsyncMock):
        mock_collection.delete_one.return_value = MagicMock(acknowledged=True, deleted_count=0)

        assert await repository.delete_by_email("ghost@x.com") is True
        mock_collection.delete_one.assert_awaited_once_with({"email": "ghost@x.com"})

    @pytest.mark.asyncio
    async def test_delete_unacknowledged(
        self, repository: MongoUserRepository, mock_collection: AsyncMock
    ):
        mock_collection.delete_one.return_value = MagicMock(acknowledged=False)

        assert await repository.delete_by_email("alice@x.com") is False

    @pytest.mark.asyncio
    async def test_delete_write_error_raises(
        self, repository: MongoUserRepository, mock_collection: AsyncMock
    ):
        mock_collection.delete_one.side_effect = WriteError("not primary", code=10107)

        with pytest.raises(DuplicateOrWriteError):
            await repository.delete_by_email("alice@x.com")
