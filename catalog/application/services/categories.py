import catalog.domain.repositories as repos
import catalog.domain.models as dmod
import catalog.domain.exceptions as domexc
import catalog.presentation.schemas as schemas

import logging

logger = logging.getLogger('catalog')

__all__ = ['CategoryService']


class CategoryService:

    def __init__(self, category_repo: repos.ICategoryRepository):
        self.category_repo = category_repo

    async def list(self) -> list[schemas.CategoryDTO]:
        return [schemas.CategoryDTO.model_validate(c) for c in await self.category_repo.list()]

    async def create(self, data: schemas.CategoryCreationModel) -> schemas.CategoryDTO:
        name = (data.name or '').strip()
        if not name:
            raise domexc.ValidationError('Category name is required')
        category = await self.category_repo.create(
            dmod.Category(name=name, description=(data.description or '').strip())
        )
        logger.info(f"[CATEGORIES] Category #{category.id} '{category.name}' created")
        return schemas.CategoryDTO.model_validate(category)

    async def delete(self, category_id: int) -> None:
        await self.category_repo.delete(category_id)
        logger.info(f'[CATEGORIES] Category #{category_id} deleted')
