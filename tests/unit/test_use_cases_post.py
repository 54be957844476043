"""
Unit tests for post, like and comment use cases.
"""
from unittest.mock import AsyncMock

import pytest
from devconnect.application.use_cases.post import (
    AddCommentUseCase,
    CreatePostUseCase,
    DeleteCommentUseCase,
    DeletePostUseCase,
    EditCommentUseCase,
    EditPostUseCase,
    GetPostUseCase,
    LikePostUseCase,
    ListUserPostsUseCase,
    UnlikePostUseCase,
)
from devconnect.domain.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from devconnect.domain.models.post import Comment, Like, Post
from devconnect.domain.models.user import User


def make_post(**overrides) -> Post:
    values = dict(id="post-1", user="author", text="Hello world", name="Author", avatar="a.png")
    values.update(overrides)
    return Post(**values)


@pytest.fixture
def mock_post_repo():
    """Mock PostRepository whose save returns the post it was given."""
    repo = AsyncMock()
    repo.save.side_effect = lambda post: post
    return repo


@pytest.fixture
def mock_user_repo():
    repo = AsyncMock()
    repo.find_by_id.return_value = User(
        id="reader",
        name="Reader",
        email="reader@example.com",
        hashed_password="hash",
        avatar="reader.png",
    )
    return repo


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase"""

    @pytest.mark.asyncio
    async def test_snapshots_author(self, mock_post_repo, mock_user_repo):
        use_case = CreatePostUseCase(mock_post_repo, mock_user_repo)
        result = await use_case.execute(user_id="reader", text="First post")

        assert result.text == "First post"
        assert result.name == "Reader"
        assert result.avatar == "reader.png"
        assert result.likes == []
        assert result.comments == []
        assert result.date is not None

    @pytest.mark.asyncio
    async def test_text_stored_as_given(self, mock_post_repo, mock_user_repo):
        use_case = CreatePostUseCase(mock_post_repo, mock_user_repo)
        result = await use_case.execute(user_id="reader", text="  indented\n  code  ")

        assert result.text == "  indented\n  code  "
        assert mock_post_repo.save.call_args.args[0].text == "  indented\n  code  "

    @pytest.mark.asyncio
    async def test_blank_text_rejected(self, mock_post_repo, mock_user_repo):
        use_case = CreatePostUseCase(mock_post_repo, mock_user_repo)
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(user_id="reader", text="   ")
        assert exc_info.value.errors == [{"param": "text", "msg": "Text is required"}]
        mock_post_repo.save.assert_not_called()


class TestGetAndListPosts:
    """Tests for GetPostUseCase and ListUserPostsUseCase"""

    @pytest.mark.asyncio
    async def test_unknown_post_not_found(self, mock_post_repo):
        mock_post_repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError, match="Post not found"):
            await GetPostUseCase(mock_post_repo).execute("missing")

    @pytest.mark.asyncio
    async def test_user_without_posts_gets_empty_list(self, mock_post_repo):
        mock_post_repo.find_by_owner.return_value = []
        assert await ListUserPostsUseCase(mock_post_repo).execute("reader") == []


class TestEditAndDeletePost:
    """Tests for EditPostUseCase and DeletePostUseCase"""

    @pytest.mark.asyncio
    async def test_owner_edits_text(self, mock_post_repo):
        mock_post_repo.find_by_id.return_value = make_post()
        result = await EditPostUseCase(mock_post_repo).execute("post-1", "author", "Edited")
        assert result.text == "Edited"
        assert result.name == "Author"

    @pytest.mark.asyncio
    async def test_non_owner_cannot_edit(self, mock_post_repo):
        mock_post_repo.find_by_id.return_value = make_post()
        with pytest.raises(ForbiddenError):
            await EditPostUseCase(mock_post_repo).execute("post-1", "intruder", "Edited")
        mock_post_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_owner_deletes(self, mock_post_repo):
        post = make_post()
        mock_post_repo.find_by_id.return_value = post
        result = await DeletePostUseCase(mock_post_repo).execute("post-1", "author")
        assert result.msg == "Post removed"
        mock_post_repo.remove.assert_awaited_once_with(post)

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, mock_post_repo):
        mock_post_repo.find_by_id.return_value = make_post()
        with pytest.raises(ForbiddenError, match="User not authorized"):
            await DeletePostUseCase(mock_post_repo).execute("post-1", "intruder")
        mock_post_repo.remove.assert_not_called()


class TestLikes:
    """Tests for LikePostUseCase and UnlikePostUseCase"""

    @pytest.mark.asyncio
    async def test_like_prepends(self, mock_post_repo):
        mock_post_repo.find_by_id.return_value = make_post(likes=[Like(user="earlier")])
        likes = await LikePostUseCase(mock_post_repo).execute("post-1", "reader")
        assert [like.user for like in likes] == ["reader", "earlier"]

    @pytest.mark.asyncio
    async def test_like_twice_conflicts(self, mock_post_repo):
        post = make_post()
        mock_post_repo.find_by_id.return_value = post
        use_case = LikePostUseCase(mock_post_repo)

        await use_case.execute("post-1", "reader")
        with pytest.raises(ConflictError, match="Post already liked"):
            await use_case.execute("post-1", "reader")
        assert len(post.likes) == 1

    @pytest.mark.asyncio
    async def test_unlike_removes_only_own_like(self, mock_post_repo):
        mock_post_repo.find_by_id.return_value = make_post(
            likes=[Like(user="other"), Like(user="reader")]
        )
        likes = await UnlikePostUseCase(mock_post_repo).execute("post-1", "reader")
        assert [like.user for like in likes] == ["other"]

    @pytest.mark.asyncio
    async def test_unlike_without_like_conflicts(self, mock_post_repo):
        mock_post_repo.find_by_id.return_value = make_post(likes=[Like(user="other")])
        with pytest.raises(ConflictError, match="Post has not yet been liked"):
            await UnlikePostUseCase(mock_post_repo).execute("post-1", "reader")
        mock_post_repo.save.assert_not_called()


class TestComments:
    """Tests for AddCommentUseCase, EditCommentUseCase and DeleteCommentUseCase"""

    @pytest.mark.asyncio
    async def test_newest_comment_first(self, mock_post_repo, mock_user_repo):
        mock_post_repo.find_by_id.return_value = make_post()
        use_case = AddCommentUseCase(mock_post_repo, mock_user_repo)

        await use_case.execute("post-1", "reader", "C1")
        comments = await use_case.execute("post-1", "reader", "C2")

        assert [comment.text for comment in comments] == ["C2", "C1"]
        assert comments[0].name == "Reader"
        assert comments[0].avatar == "reader.png"

    @pytest.mark.asyncio
    async def test_comment_text_stored_as_given(self, mock_post_repo, mock_user_repo):
        mock_post_repo.find_by_id.return_value = make_post()
        comments = await AddCommentUseCase(mock_post_repo, mock_user_repo).execute(
            "post-1", "reader", "  spaced reply "
        )
        assert comments[0].text == "  spaced reply "

    @pytest.mark.asyncio
    async def test_comment_on_missing_post(self, mock_post_repo, mock_user_repo):
        mock_post_repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await AddCommentUseCase(mock_post_repo, mock_user_repo).execute("nope", "reader", "Hi")

    @pytest.mark.asyncio
    async def test_edit_changes_only_text(self, mock_post_repo):
        original = Comment(id="c1", user="reader", text="Old", name="Reader", avatar="r.png")
        mock_post_repo.find_by_id.return_value = make_post(comments=[original])

        comments = await EditCommentUseCase(mock_post_repo).execute("post-1", "c1", "reader", "New")

        assert comments[0].text == "New"
        assert comments[0].id == "c1"
        assert comments[0].name == "Reader"
        assert comments[0].avatar == "r.png"

    @pytest.mark.asyncio
    async def test_edit_someone_elses_comment(self, mock_post_repo):
        mock_post_repo.find_by_id.return_value = make_post(
            comments=[Comment(id="c1", user="other", text="Theirs")]
        )
        with pytest.raises(ForbiddenError):
            await EditCommentUseCase(mock_post_repo).execute("post-1", "c1", "reader", "Mine now")

    @pytest.mark.asyncio
    async def test_delete_removes_requested_comment_only(self, mock_post_repo):
        mock_post_repo.find_by_id.return_value = make_post(
            comments=[
                Comment(id="c3", user="reader", text="Third"),
                Comment(id="c2", user="reader", text="Second"),
                Comment(id="c1", user="reader", text="First"),
            ]
        )
        comments = await DeleteCommentUseCase(mock_post_repo).execute("post-1", "c2", "reader")
        assert [comment.id for comment in comments] == ["c3", "c1"]

    @pytest.mark.asyncio
    async def test_delete_unknown_comment(self, mock_post_repo):
        post = make_post(comments=[Comment(id="c1", user="reader", text="First")])
        mock_post_repo.find_by_id.return_value = post
        with pytest.raises(NotFoundError, match="Comment not found"):
            await DeleteCommentUseCase(mock_post_repo).execute("post-1", "c9", "reader")
        assert len(post.comments) == 1

    @pytest.mark.asyncio
    async def test_delete_someone_elses_comment(self, mock_post_repo):
        mock_post_repo.find_by_id.return_value = make_post(
            comments=[Comment(id="c1", user="other", text="Theirs")]
        )
        with pytest.raises(ForbiddenError):
            await DeleteCommentUseCase(mock_post_repo).execute("post-1", "c1", "reader")
        mock_post_repo.save.assert_not_called()
