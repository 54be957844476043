"""
Unit tests for the Mongo repositories' document mapping (mocked collections, no DB).
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError

from devconnect.domain.exceptions import RepositoryError
from devconnect.domain.models.post import Comment, Like, Post
from devconnect.domain.models.profile import Education, Profile, SocialLinks
from devconnect.infrastructure.db.mongo_post_repository import MongoPostRepository
from devconnect.infrastructure.db.mongo_profile_repository import MongoProfileRepository
from devconnect.infrastructure.db.mongo_user_repository import MongoUserRepository

USER_ID = ObjectId()
POSTED_AT = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def collection():
    mock = MagicMock()
    mock.find_one = AsyncMock()
    mock.insert_one = AsyncMock()
    mock.replace_one = AsyncMock()
    mock.delete_one = AsyncMock()
    mock.delete_many = AsyncMock()
    return mock


class TestMongoPostRepository:
    """Tests for MongoPostRepository"""

    @pytest.mark.asyncio
    async def test_malformed_id_is_not_found(self, collection):
        repo = MongoPostRepository(collection)
        assert await repo.find_by_id("not-an-object-id") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_document_to_post(self, collection):
        post_id, comment_id = ObjectId(), ObjectId()
        collection.find_one.return_value = {
            "_id": post_id,
            "user": USER_ID,
            "text": "Hello",
            "name": "Ada",
            "avatar": "ada.png",
            "date": POSTED_AT,
            "likes": [{"user": USER_ID}],
            "comments": [{"_id": comment_id, "user": USER_ID, "text": "Nice", "date": POSTED_AT}],
        }

        post = await MongoPostRepository(collection).find_by_id(str(post_id))

        assert post.id == str(post_id)
        assert post.user == str(USER_ID)
        assert post.likes == [Like(user=str(USER_ID))]
        assert post.comments[0].id == str(comment_id)

    @pytest.mark.asyncio
    async def test_save_assigns_comment_ids_and_references(self, collection):
        inserted_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)
        collection.find_one.return_value = {"_id": inserted_id, "user": USER_ID, "text": "Hello"}

        post = Post(
            id=None,
            user=str(USER_ID),
            text="Hello",
            likes=[Like(user=str(USER_ID))],
            comments=[Comment(id=None, user=str(USER_ID), text="First")],
        )
        saved = await MongoPostRepository(collection).save(post)

        stored = collection.insert_one.call_args.args[0]
        assert stored["user"] == USER_ID
        assert stored["likes"] == [{"user": USER_ID}]
        assert isinstance(stored["comments"][0]["_id"], ObjectId)
        assert saved.id == str(inserted_id)

    @pytest.mark.asyncio
    async def test_driver_failure_becomes_repository_error(self, collection):
        collection.find_one.side_effect = PyMongoError("boom")
        with pytest.raises(RepositoryError):
            await MongoPostRepository(collection).find_by_id(str(ObjectId()))


class TestMongoProfileRepository:
    """Tests for MongoProfileRepository"""

    @pytest.mark.asyncio
    async def test_save_replaces_existing_document(self, collection):
        profile_id = ObjectId()
        collection.replace_one.return_value = MagicMock(matched_count=1)
        collection.find_one.return_value = {
            "_id": profile_id,
            "user": USER_ID,
            "status": "Dev",
            "skills": ["go"],
            "githubusername": "octo",
            "social": {"linkedIn": "https://linkedin.com/in/octo"},
            "education": [{"_id": ObjectId(), "school": "MIT", "degree": "BSc", "from": POSTED_AT}],
        }

        profile = Profile(
            id=str(profile_id),
            user=str(USER_ID),
            status="Dev",
            skills=["go"],
            github_username="octo",
            social=SocialLinks(linkedin="https://linkedin.com/in/octo"),
            education=[Education(id=None, school="MIT", degree="BSc", from_date=POSTED_AT)],
        )
        saved = await MongoProfileRepository(collection).save(profile)

        query, stored = collection.replace_one.call_args.args
        assert query == {"_id": profile_id}
        assert stored["githubusername"] == "octo"
        assert stored["social"] == {"linkedIn": "https://linkedin.com/in/octo"}
        assert isinstance(stored["education"][0]["_id"], ObjectId)
        assert saved.social.linkedin == "https://linkedin.com/in/octo"
        assert saved.education[0].from_date == POSTED_AT


class TestMongoUserRepository:
    """Tests for MongoUserRepository"""

    @pytest.mark.asyncio
    async def test_find_by_email(self, collection):
        user_id = ObjectId()
        collection.find_one.return_value = {
            "_id": user_id,
            "name": "Ada",
            "email": "ada@example.com",
            "password": "$2b$04$hash",
        }
        user = await MongoUserRepository(collection).find_by_email("ada@example.com")
        assert user.id == str(user_id)
        assert user.hashed_password == "$2b$04$hash"
        collection.find_one.assert_awaited_once_with({"email": "ada@example.com"})
