"""Category service."""

from uuid import UUID

from healthblog.errors import ConflictError, NotFoundError
from healthblog.monitoring import get_logger
from healthblog.repositories import CategoryRepository
from healthblog.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate

logger = get_logger(__name__)

CATEGORY_EXISTS = "Category already exists"
CATEGORY_NOT_FOUND = "Category not found"


class CategoryService:
    def __init__(self, category_repo: CategoryRepository) -> None:
        self.category_repo = category_repo

    async def create_category(self, data: CategoryCreate) -> CategoryResponse:
        """
        Raises:
            ConflictError: If a category with the same name exists
        """
        if await self.category_repo.find_by_name(data.name):
            raise ConflictError(CATEGORY_EXISTS)
        category = await self.category_repo.create(data)
        logger.info("Category created", category_id=str(category.id), name=category.name)
        return CategoryResponse.model_validate(category)

    async def get_all_categories(self) -> list[CategoryResponse]:
        """All categories in alphabetical order."""
        categories = await self.category_repo.find_many(sort="name", descending=False)
        return [CategoryResponse.model_validate(category) for category in categories]

    async def get_category_by_id(self, category_id: UUID) -> CategoryResponse:
        category = await self.category_repo.find_by_id(category_id)
        if not category:
            raise NotFoundError(CATEGORY_NOT_FOUND)
        return CategoryResponse.model_validate(category)

    async def update_category(
        self,
        category_id: UUID,
        data: CategoryUpdate,
    ) -> CategoryResponse:
        """
        Rename or re-describe a category.

        Posts keep the category text they were created with.

        Raises:
            NotFoundError: If the category does not exist
            ConflictError: If renaming onto another category's name
        """
        if data.name is not None:
            clash = await self.category_repo.find_by_name(data.name)
            if clash and clash.id != category_id:
                raise ConflictError(CATEGORY_EXISTS)

        category = await self.category_repo.update_by_id(
            category_id,
            data.model_dump(exclude_unset=True),
        )
        if not category:
            raise NotFoundError(CATEGORY_NOT_FOUND)
        return CategoryResponse.model_validate(category)

    async def delete_category(self, category_id: UUID) -> CategoryResponse:
        """
        Delete a category. Posts filed under it are left untouched.

        Raises:
            NotFoundError: If the category does not exist
        """
        category = await self.category_repo.delete_by_id(category_id)
        if not category:
            raise NotFoundError(CATEGORY_NOT_FOUND)
        logger.info("Category deleted", category_id=str(category_id))
        return CategoryResponse.model_validate(category)
