"""Tests for the category service."""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from healthblog.errors import ConflictError, NotFoundError
from healthblog.repositories import CategoryRepository
from healthblog.schemas import CategoryCreate, CategoryUpdate
from healthblog.services import CategoryService


@pytest.fixture
def service(session: AsyncSession) -> CategoryService:
    return CategoryService(CategoryRepository(session))


class TestCategoryService:
    """Test cases for CategoryService."""

    async def test_create_and_get(self, service: CategoryService) -> None:
        """Test creating a category and reading it back."""
        created = await service.create_category(
            CategoryCreate(name="  Nutrition ", description="Food"),
        )

        found = await service.get_category_by_id(created.id)

        assert found.name == "Nutrition"
        assert found.description == "Food"

    async def test_duplicate_name(self, service: CategoryService) -> None:
        """Test that names are unique."""
        await service.create_category(CategoryCreate(name="Sleep"))

        with pytest.raises(ConflictError, match="Category already exists"):
            await service.create_category(CategoryCreate(name="Sleep"))

    async def test_list_is_alphabetical(self, service: CategoryService) -> None:
        """Test that categories are listed by name."""
        for name in ("Sleep", "Exercise", "Mental Health"):
            await service.create_category(CategoryCreate(name=name))

        categories = await service.get_all_categories()

        assert [category.name for category in categories] == ["Exercise", "Mental Health", "Sleep"]

    async def test_update(self, service: CategoryService) -> None:
        """Test renaming and keeping the same name."""
        created = await service.create_category(CategoryCreate(name="Sleep"))

        renamed = await service.update_category(created.id, CategoryUpdate(name="Rest"))
        same = await service.update_category(
            created.id,
            CategoryUpdate(name="Rest", description="Recovery"),
        )

        assert renamed.name == "Rest"
        assert same.description == "Recovery"

    async def test_rename_onto_existing(self, service: CategoryService) -> None:
        """Test that renaming onto another category's name is a conflict."""
        await service.create_category(CategoryCreate(name="Sleep"))
        other = await service.create_category(CategoryCreate(name="Exercise"))

        with pytest.raises(ConflictError):
            await service.update_category(other.id, CategoryUpdate(name="Sleep"))

    async def test_missing(self, service: CategoryService) -> None:
        """Test get, update and delete on an unknown id."""
        with pytest.raises(NotFoundError, match="Category not found"):
            await service.get_category_by_id(uuid4())
        with pytest.raises(NotFoundError):
            await service.update_category(uuid4(), CategoryUpdate(description="x"))
        with pytest.raises(NotFoundError):
            await service.delete_category(uuid4())

    async def test_delete(self, service: CategoryService) -> None:
        """Test that a deleted category is gone."""
        created = await service.create_category(CategoryCreate(name="Sleep"))

        await service.delete_category(created.id)

        assert await service.get_all_categories() == []
