"""
Blog Backend: Post Service Unit Tests
=======================================

What:  Tests for PostService (list, get, create) against a mocked session.

What we test:
    ✅ Rows are converted to PostResponse unchanged
    ✅ Empty table gives an empty list
    ✅ Missing row, bad id and failing query all raise StorageError
    ✅ StorageError carries the underlying message
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError

from blog_backend.exceptions import StorageError
from blog_backend.models.post import Post
from blog_backend.schemas.post import PostCreate
from blog_backend.services.post_service import PostService


class TestPostServiceList:
    """Tests for list_posts."""

    def setup_method(self):
        self.service = PostService()

    @pytest.mark.asyncio
    async def test_list_posts_empty(self, mock_db_session):
        """Empty table should return an empty list."""
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_posts(mock_db_session)

        assert result == []
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_list_posts_with_rows(self, mock_db_session):
        """Every row is returned, in storage order."""
        rows = [
            Post(
                id=i,
                title=f"Post {i}",
                content=f"Body {i}",
                created_at=datetime.now(timezone.utc),
            )
            for i in (3, 1, 2)
        ]
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = rows
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_posts(mock_db_session)

        assert [p.id for p in result] == [3, 1, 2]
        assert result[0].title == "Post 3"
        assert result[0].content == "Body 3"

    @pytest.mark.asyncio
    async def test_list_posts_storage_failure(self, mock_db_session):
        """A failing query raises StorageError with the driver message."""
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("connection refused"))
        )

        with pytest.raises(StorageError) as exc_info:
            await self.service.list_posts(mock_db_session)

        assert exc_info.value.message == "connection refused"
        assert exc_info.value.operation == "list_posts"


class TestPostServiceGet:
    """Tests for get_post."""

    def setup_method(self):
        self.service = PostService()

    @pytest.mark.asyncio
    async def test_get_post_found(self, mock_db_session, sample_post_data):
        """Existing post should come back field for field."""
        mock_result = MagicMock()
        mock_result.scalar_one.return_value = Post(**sample_post_data)
        mock_db_session.execute.return_value = mock_result

        result = await self.service.get_post(mock_db_session, sample_post_data["id"])

        assert result.id == sample_post_data["id"]
        assert result.title == sample_post_data["title"]
        assert result.content == sample_post_data["content"]
        assert result.created_at == sample_post_data["created_at"]

    @pytest.mark.asyncio
    async def test_get_post_accepts_string_id(self, mock_db_session, sample_post_data):
        """Path segments arrive as strings; numeric ones are looked up normally."""
        mock_result = MagicMock()
        mock_result.scalar_one.return_value = Post(**sample_post_data)
        mock_db_session.execute.return_value = mock_result

        result = await self.service.get_post(mock_db_session, "1")

        assert result.id == 1

    @pytest.mark.asyncio
    async def test_get_post_missing_row_is_storage_error(self, mock_db_session):
        """No matching row is reported the same way as any storage failure."""
        mock_result = MagicMock()
        mock_result.scalar_one.side_effect = NoResultFound(
            "No row was found when one was required"
        )
        mock_db_session.execute.return_value = mock_result

        with pytest.raises(StorageError, match="No row was found"):
            await self.service.get_post(mock_db_session, 404)

    @pytest.mark.asyncio
    async def test_get_post_non_integer_id(self, mock_db_session):
        """A non-numeric id fails without reaching the database."""
        with pytest.raises(StorageError) as exc_info:
            await self.service.get_post(mock_db_session, "abc")

        assert exc_info.value.context["post_id"] == "abc"
        mock_db_session.execute.assert_not_awaited()


class TestPostServiceCreate:
    """Tests for create_post."""

    def setup_method(self):
        self.service = PostService()

    @pytest.mark.asyncio
    async def test_create_post_returns_stored_row(self, mock_db_session):
        """Inserted post comes back with the id and timestamp assigned on flush."""
        created_at = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

        async def assign_identity():
            added = mock_db_session.add.call_args.args[0]
            added.id = 7
            added.created_at = created_at

        mock_db_session.flush = AsyncMock(side_effect=assign_identity)

        result = await self.service.create_post(
            mock_db_session, PostCreate(title="Title", content="Content")
        )

        assert result.id == 7
        assert result.title == "Title"
        assert result.content == "Content"
        assert result.created_at == created_at
        mock_db_session.add.assert_called_once()
        mock_db_session.flush.assert_awaited_once()
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_post_commit_failure(self, mock_db_session):
        """A commit that fails after a successful flush is still a StorageError."""
        async def assign_identity():
            added = mock_db_session.add.call_args.args[0]
            added.id = 1
            added.created_at = datetime.now(timezone.utc)

        mock_db_session.flush = AsyncMock(side_effect=assign_identity)
        mock_db_session.commit = AsyncMock(
            side_effect=OperationalError("COMMIT", {}, Exception("connection reset"))
        )

        with pytest.raises(StorageError) as exc_info:
            await self.service.create_post(
                mock_db_session, PostCreate(title="T", content="C")
            )

        assert exc_info.value.message == "connection reset"

    @pytest.mark.asyncio
    async def test_create_post_passes_fields_through(self, mock_db_session):
        """No trimming or defaulting happens before the insert."""
        async def assign_identity():
            added = mock_db_session.add.call_args.args[0]
            added.id = 1
            added.created_at = datetime.now(timezone.utc)

        mock_db_session.flush = AsyncMock(side_effect=assign_identity)

        result = await self.service.create_post(
            mock_db_session, PostCreate(title="  spaced  ", content="")
        )

        added = mock_db_session.add.call_args.args[0]
        assert added.title == "  spaced  "
        assert added.content == ""
        assert result.title == "  spaced  "

    @pytest.mark.asyncio
    async def test_create_post_constraint_violation(self, mock_db_session):
        """A NOT NULL violation surfaces as StorageError with the raw message."""
        mock_db_session.flush = AsyncMock(
            side_effect=IntegrityError(
                "INSERT", {}, Exception("NOT NULL constraint failed: posts.title")
            )
        )

        with pytest.raises(StorageError) as exc_info:
            await self.service.create_post(mock_db_session, PostCreate(content="Body"))

        assert exc_info.value.message == "NOT NULL constraint failed: posts.title"
        assert exc_info.value.operation == "create_post"
