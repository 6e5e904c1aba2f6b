from healthblog.models.category import CategoryDB
from healthblog.repositories.base import BaseRepository
from healthblog.schemas.category import CategoryCreate, CategoryUpdate


class CategoryRepository(BaseRepository[CategoryDB, CategoryCreate, CategoryUpdate]):
    """Repository for blog categories."""

    model = CategoryDB

    async def find_by_name(self, name: str) -> CategoryDB | None:
        return await self.find_one({"name": name.strip()})
