"""Unit tests for section use cases."""

import pytest
from pydantic import ValidationError

from forum.application.usecase.section import (
    CreateSectionRequest,
    CreateSectionUseCase,
    DeleteSectionRequest,
    DeleteSectionUseCase,
    ListSectionsRequest,
    ListSectionsUseCase,
)
from forum.domain.error import InvalidArgumentError, NotFoundError
from forum.domain.value import MAX_INDEX, MIN_INDEX
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def create_section(unit_env, subject: str, index: int) -> str:
    use_case = await unit_env.get(CreateSectionUseCase)
    response = await use_case.execute(
        CreateSectionRequest(
            subject=subject,
            description=f"All about {subject}",
            index=index,
            author_id="admin",
        )
    )
    return response.section_id


class TestCreateSectionUseCase:
    """Tests for CreateSectionUseCase."""

    @pytest.mark.asyncio
    async def test_create_section(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateSectionUseCase)
        request = CreateSectionRequest(
            subject="Physics",
            description="Forces and fields",
            index=1,
            author_id="admin",
            author_name="Admin",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.path == [response.section_id]
        assert len(response.section_id) == 20

    @pytest.mark.asyncio
    async def test_create_section_without_author_fails(self, unit_env):
        use_case = await unit_env.get(CreateSectionUseCase)

        with pytest.raises(InvalidArgumentError):
            await use_case.execute(
                CreateSectionRequest(subject="Physics", index=1, author_id="")
            )

    @pytest.mark.parametrize("index", [MIN_INDEX, MIN_INDEX - 5, MAX_INDEX + 1])
    def test_index_outside_storage_range_is_rejected(self, index):
        with pytest.raises(ValidationError):
            CreateSectionRequest(subject="Physics", index=index, author_id="admin")


class TestListSectionsUseCase:
    """Tests for ListSectionsUseCase."""

    @pytest.mark.asyncio
    async def test_sections_listed_in_index_order(self, unit_env):
        # Arrange
        chemistry = await create_section(unit_env, "Chemistry", 2)
        physics = await create_section(unit_env, "Physics", 1)
        biology = await create_section(unit_env, "Biology", 3)
        use_case = await unit_env.get(ListSectionsUseCase)

        # Act
        response = await use_case.execute(ListSectionsRequest())

        # Assert
        assert [s.post_id for s in response.sections] == [physics, chemistry, biology]
        assert [s.header for s in response.sections] == [
            "Physics",
            "Chemistry",
            "Biology",
        ]
        assert response.next_cursor is None

    @pytest.mark.asyncio
    async def test_sections_can_be_paged(self, unit_env):
        ids = [await create_section(unit_env, f"S{i}", i) for i in range(3)]
        use_case = await unit_env.get(ListSectionsUseCase)

        first = await use_case.execute(ListSectionsRequest(limit=2))
        second = await use_case.execute(
            ListSectionsRequest(cursor=first.next_cursor, limit=2)
        )

        assert [s.post_id for s in first.sections] == ids[:2]
        assert [s.post_id for s in second.sections] == ids[2:]
        assert second.next_cursor is None

    @pytest.mark.asyncio
    async def test_bad_cursor_token_fails(self, unit_env):
        use_case = await unit_env.get(ListSectionsUseCase)

        with pytest.raises(InvalidArgumentError):
            await use_case.execute(ListSectionsRequest(cursor="garbage"))


class TestDeleteSectionUseCase:
    """Tests for DeleteSectionUseCase."""

    @pytest.mark.asyncio
    async def test_deleted_section_is_not_listed(self, unit_env):
        # Arrange
        keep = await create_section(unit_env, "Keep", 1)
        drop = await create_section(unit_env, "Drop", 2)
        delete = await unit_env.get(DeleteSectionUseCase)
        list_sections = await unit_env.get(ListSectionsUseCase)

        # Act
        response = await delete.execute(
            DeleteSectionRequest(section_id=drop, user_id="admin", reason="merged")
        )

        # Assert
        assert response.section_id == drop
        listed = await list_sections.execute(ListSectionsRequest())
        assert [s.post_id for s in listed.sections] == [keep]

    @pytest.mark.asyncio
    async def test_delete_unknown_section_fails(self, unit_env):
        delete = await unit_env.get(DeleteSectionUseCase)

        with pytest.raises(NotFoundError):
            await delete.execute(
                DeleteSectionRequest(section_id="nope", user_id="admin", reason="x")
            )
