"""
Unit tests for MongoUserRepository against a mocked motor collection.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from bloglist.domain.models.user import User
from bloglist.infrastructure.db.mongo_user_repository import MongoUserRepository


USER_ID = ObjectId()


def _document(**overrides):
    document = {
        "_id": USER_ID,
        "username": "mluukkai",
        "name": "Matti Luukkainen",
        "password_hash": "$2b$04$hash",
    }
    document.update(overrides)
    return document


def _cursor(documents):
    cursor = MagicMock()
    cursor.__aiter__.return_value = documents
    return cursor


@pytest.fixture
def collection():
    return AsyncMock()


class TestFindByUsername:

    @pytest.mark.asyncio
    async def test_empty_username_is_none_without_query(self, collection):
        repo = MongoUserRepository(user_collection=collection)
        assert await repo.find_by_username("") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_document_is_mapped(self, collection):
        collection.find_one.return_value = _document()
        repo = MongoUserRepository(user_collection=collection)

        user = await repo.find_by_username("mluukkai")

        assert user == User(
            id=str(USER_ID),
            username="mluukkai",
            name="Matti Luukkainen",
            password_hash="$2b$04$hash",
        )
        collection.find_one.assert_called_once_with({"username": "mluukkai"})

    @pytest.mark.asyncio
    async def test_unknown_username_is_none(self, collection):
        collection.find_one.return_value = None
        repo = MongoUserRepository(user_collection=collection)
        assert await repo.find_by_username("nobody") is None


class TestFindById:

    @pytest.mark.asyncio
    async def test_malformed_id_is_none_without_query(self, collection):
        repo = MongoUserRepository(user_collection=collection)
        assert await repo.find_by_id("not-an-id") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_name_defaults_to_empty_string(self, collection):
        document = _document()
        del document["name"]
        collection.find_one.return_value = document
        repo = MongoUserRepository(user_collection=collection)

        user = await repo.find_by_id(str(USER_ID))

        assert user.id == str(USER_ID)
        assert user.name == ""


class TestFindByIds:

    @pytest.mark.asyncio
    async def test_only_valid_ids_are_queried(self, collection):
        collection.find = MagicMock(return_value=_cursor([_document()]))
        repo = MongoUserRepository(user_collection=collection)

        users = await repo.find_by_ids([str(USER_ID), "not-an-id", None])

        assert [u.username for u in users] == ["mluukkai"]
        query = collection.find.call_args.args[0]
        assert query == {"_id": {"$in": [USER_ID]}}

    @pytest.mark.asyncio
    async def test_no_valid_ids_skips_query(self, collection):
        collection.find = MagicMock()
        repo = MongoUserRepository(user_collection=collection)

        assert await repo.find_by_ids(["not-an-id", ""]) == []
        collection.find.assert_not_called()


class TestSave:

    @pytest.mark.asyncio
    async def test_save_inserts_without_id(self, collection):
        collection.insert_one.return_value = MagicMock(inserted_id=USER_ID)
        collection.find_one.return_value = _document()
        repo = MongoUserRepository(user_collection=collection)

        saved = await repo.save(User(id=None, username="mluukkai", name="Matti Luukkainen", password_hash="$2b$04$hash"))

        inserted = collection.insert_one.call_args.args[0]
        assert inserted == {"username": "mluukkai", "name": "Matti Luukkainen", "password_hash": "$2b$04$hash"}
        assert saved.id == str(USER_ID)
        collection.update_one.assert_not_called()
