from abc import abstractmethod, ABC
import catalog.domain.models as domain

__all__ = ['ICategoryRepository']

class ICategoryRepository(ABC):

    @abstractmethod
    async def list(self) -> list[domain.Category]: ...

    @abstractmethod
    async def get_by_id(self, category_id: int) -> domain.Category | None: ...

    @abstractmethod
    async def create(self, category: domain.Category) -> domain.Category: ...

    @abstractmethod
    async def delete(self, category_id: int) -> None: ...
