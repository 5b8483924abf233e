import catalog.domain.repositories as repo
import catalog.domain.models as domain
import catalog.domain.exceptions as domexc
from .base import JsonCollectionRepository

__all__ = ['JsonArtworkRepository']


class JsonArtworkRepository(JsonCollectionRepository[domain.Artwork], repo.IArtworkRepository):
    collection = 'artworks'
    entity = 'Artwork'
    model = domain.Artwork
    not_found = domexc.ArtworkDoesNotExist

    async def list(self, status: domain.ModerationStatus | None = None) -> list[domain.Artwork]:
        return [a for a in await self._load() if status is None or a.status == status]

    async def get_by_id(self, artwork_id: int) -> domain.Artwork | None:
        return await self._get(artwork_id)

    async def create(self, artwork: domain.Artwork) -> domain.Artwork:
        return await self._insert(artwork)

    async def delete(self, artwork_id: int) -> None:
        await self._remove(artwork_id)
