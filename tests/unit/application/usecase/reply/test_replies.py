"""Unit tests for reply use cases."""

import pytest
import pytest_asyncio

from forum.application.usecase.reply import (
    CreateDraftReplyRequest,
    CreateDraftReplyUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    GetThreadRepliesRequest,
    GetThreadRepliesUseCase,
    InstallReplyRequest,
    InstallReplyUseCase,
    ListRepliesRequest,
    ListRepliesUseCase,
    UpdateReplyRequest,
    UpdateReplyUseCase,
)
from forum.application.usecase.section import (
    CreateSectionRequest,
    CreateSectionUseCase,
)
from forum.application.usecase.thread import CreateThreadRequest, CreateThreadUseCase
from forum.domain.error import (
    InvalidArgumentError,
    NotFoundError,
    NotSupportedError,
)
from forum.domain.repository import PostRepository
from forum.domain.value import PostId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest_asyncio.fixture
async def thread_path(unit_env) -> list[str]:
    create_section = await unit_env.get(CreateSectionUseCase)
    create_thread = await unit_env.get(CreateThreadUseCase)
    section = await create_section.execute(
        CreateSectionRequest(subject="General", index=1, author_id="admin")
    )
    thread = await create_thread.execute(
        CreateThreadRequest(
            section_id=section.section_id,
            subject="Hello",
            body="First post",
            author_id="alice",
        )
    )
    return thread.path


async def reply_to(unit_env, parent_path: list[str], author_id: str = "bob") -> list[str]:
    use_case = await unit_env.get(CreateReplyUseCase)
    response = await use_case.execute(
        CreateReplyRequest(
            parent_path=parent_path,
            subject="Hello",
            body="Agreed",
            author_id=author_id,
        )
    )
    return response.path


class TestCreateReplyUseCase:
    """Tests for CreateReplyUseCase."""

    @pytest.mark.asyncio
    async def test_reply_header_and_propagation(self, unit_env, thread_path):
        # Arrange
        repo = await unit_env.get(PostRepository)

        # Act
        path = await reply_to(unit_env, thread_path)

        # Assert
        assert path[:-1] == thread_path
        reply = await repo.find_by_id(PostId(path[-1]))
        assert reply.header == "Re: Hello"

        section = await repo.find_by_id(PostId(thread_path[0]))
        thread = await repo.find_by_id(PostId(thread_path[1]))
        assert section.descendant_count == 2
        assert thread.child_count == 1
        assert section.bump.author.id == "bob"
        assert thread.bump.head == "Re: Hello"

    @pytest.mark.asyncio
    async def test_nested_reply(self, unit_env, thread_path):
        repo = await unit_env.get(PostRepository)
        first = await reply_to(unit_env, thread_path)

        nested = await reply_to(unit_env, first, author_id="carol")

        assert len(nested) == 4
        thread = await repo.find_by_id(PostId(thread_path[1]))
        assert thread.child_count == 1
        assert thread.descendant_count == 2
        assert thread.bump.author.id == "carol"

    @pytest.mark.asyncio
    async def test_reply_to_unknown_parent_fails(self, unit_env, thread_path):
        with pytest.raises(NotFoundError):
            await reply_to(unit_env, [*thread_path, "missing"])

    @pytest.mark.asyncio
    async def test_reply_through_wrong_section_fails(self, unit_env, thread_path):
        create_section = await unit_env.get(CreateSectionUseCase)
        other = await create_section.execute(
            CreateSectionRequest(subject="Other", index=2, author_id="admin")
        )

        with pytest.raises(InvalidArgumentError):
            await reply_to(unit_env, [other.section_id, thread_path[-1]])


class TestGetThreadRepliesUseCase:
    """Tests for GetThreadRepliesUseCase."""

    @pytest.mark.asyncio
    async def test_thread_read_oldest_first(self, unit_env, thread_path):
        # Arrange
        c1 = await reply_to(unit_env, thread_path)
        c2 = await reply_to(unit_env, thread_path)
        g1 = await reply_to(unit_env, c1)
        use_case = await unit_env.get(GetThreadRepliesUseCase)

        # Act
        response = await use_case.execute(
            GetThreadRepliesRequest(thread_id=thread_path[-1])
        )

        # Assert
        assert [r.post_id for r in response.replies] == [
            thread_path[-1],
            c1[-1],
            c2[-1],
            g1[-1],
        ]
        assert response.replies[3].parent_id == c1[-1]
        assert response.next_cursor is None

    @pytest.mark.asyncio
    async def test_thread_read_in_pages(self, unit_env, thread_path):
        replies = [(await reply_to(unit_env, thread_path))[-1] for _ in range(3)]
        use_case = await unit_env.get(GetThreadRepliesUseCase)

        first = await use_case.execute(
            GetThreadRepliesRequest(thread_id=thread_path[-1], limit=2)
        )
        second = await use_case.execute(
            GetThreadRepliesRequest(
                thread_id=thread_path[-1], cursor=first.next_cursor, limit=2
            )
        )

        assert [r.post_id for r in first.replies] == [thread_path[-1], replies[0]]
        assert [r.post_id for r in second.replies] == replies[1:]


class TestUnsupportedReplyOperations:
    """Reply operations without an implementation yet."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "use_case_type,request_obj",
        [
            (ListRepliesUseCase, ListRepliesRequest(parent_id="p")),
            (
                CreateDraftReplyUseCase,
                CreateDraftReplyRequest(parent_path=["p"], author_id="alice"),
            ),
            (UpdateReplyUseCase, UpdateReplyRequest(reply_id="r", body="x")),
            (
                DeleteReplyUseCase,
                DeleteReplyRequest(reply_id="r", user_id="mod", reason="spam"),
            ),
            (InstallReplyUseCase, InstallReplyRequest(draft_id="d")),
        ],
    )
    async def test_raises_not_supported(self, unit_env, use_case_type, request_obj):
        use_case = await unit_env.get(use_case_type)

        with pytest.raises(NotSupportedError):
            await use_case.execute(request_obj)
