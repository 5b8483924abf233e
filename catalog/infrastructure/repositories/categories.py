import catalog.domain.repositories as repo
import catalog.domain.models as domain
import catalog.domain.exceptions as domexc
from .base import JsonCollectionRepository

__all__ = ['JsonCategoryRepository']


class JsonCategoryRepository(JsonCollectionRepository[domain.Category], repo.ICategoryRepository):
    collection = 'categories'
    entity = 'Category'
    model = domain.Category
    not_found = domexc.CategoryDoesNotExist

    def _check_unique(self, item: domain.Category, existing: list[domain.Category]) -> None:
        if any(c.name.casefold() == item.name.casefold() for c in existing):
            raise domexc.CategoryAlreadyExists(f"Category '{item.name}' already exists")

    async def list(self) -> list[domain.Category]:
        return await self._load()

    async def get_by_id(self, category_id: int) -> domain.Category | None:
        return await self._get(category_id)

    async def create(self, category: domain.Category) -> domain.Category:
        return await self._insert(category)

    async def delete(self, category_id: int) -> None:
        await self._remove(category_id)
