from abc import abstractmethod, ABC
import catalog.domain.models as domain

__all__ = ['IArtworkRepository']

class IArtworkRepository(ABC):

    @abstractmethod
    async def list(self, status: domain.ModerationStatus | None = None) -> list[domain.Artwork]: ...

    @abstractmethod
    async def get_by_id(self, artwork_id: int) -> domain.Artwork | None: ...

    @abstractmethod
    async def create(self, artwork: domain.Artwork) -> domain.Artwork: ...

    @abstractmethod
    async def delete(self, artwork_id: int) -> None: ...
