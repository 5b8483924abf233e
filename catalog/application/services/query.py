import catalog.domain.repositories as repos
import catalog.domain.models as dmod
import catalog.domain.exceptions as domexc
import catalog.application.models as mapp
import catalog.presentation.schemas as schemas
from catalog.common.config import Config

import math

__all__ = ['QueryService']


class QueryService:
    """Read side of the catalog. Nothing is cached; every call reads the collections again."""

    def __init__(
        self,
        artwork_repo: repos.IArtworkRepository,
        submission_repo: repos.ISubmissionRepository,
        user_repo: repos.IUserRepository,
    ):
        self.artwork_repo = artwork_repo
        self.submission_repo = submission_repo
        self.user_repo = user_repo

    async def _approved(self) -> list[dmod.Artwork]:
        return await self.artwork_repo.list(status=dmod.ModerationStatus.APPROVED)

    async def list_approved(self, page: int, page_size: int) -> schemas.ArtworkPage:
        '''`page` and `page_size` must already be positive'''
        artworks = await self._approved()
        offset = (page - 1) * page_size
        return schemas.ArtworkPage(
            artworks=[schemas.ArtworkDTO.model_validate(a) for a in artworks[offset:offset + page_size]],
            pagination=schemas.PaginationInfo(
                current_page=page,
                total_pages=math.ceil(len(artworks) / page_size),
                total_items=len(artworks),
                per_page=page_size,
            ),
        )

    async def get_with_similar(self, artwork_id: int, limit: int = Config.SIMILAR_LIMIT) -> schemas.ArtworkDetail:
        artworks = await self._approved()
        artwork = next((a for a in artworks if a.id == artwork_id), None)
        if artwork is None:
            raise domexc.ArtworkDoesNotExist('Artwork not found')
        similar = [a for a in artworks if a.type == artwork.type and a.id != artwork.id][:limit]
        return schemas.ArtworkDetail(
            artwork=schemas.ArtworkDTO.model_validate(artwork),
            similar=[schemas.ArtworkDTO.model_validate(a) for a in similar],
        )

    async def search(self, query: str = '', type: str | None = None, period: str | None = None) -> schemas.ArtworkList:
        results = await self._approved()
        if query:
            results = [a for a in results if a.matches(query)]
        if type:
            results = [a for a in results if a.type == type]
        if period:
            results = [a for a in results if period.casefold() in a.period.casefold()]
        return schemas.ArtworkList(artworks=[schemas.ArtworkDTO.model_validate(a) for a in results])

    async def list_submissions(self, viewer: mapp.UserSession, status: str | None = None) -> schemas.SubmissionList:
        """Admins see every submission, everybody else only their own."""
        try:
            wanted = dmod.ModerationStatus(status) if status else None
        except ValueError:
            raise domexc.ValidationError(f"Unknown submission status '{status}'")
        submissions = await self.submission_repo.list(
            status=wanted,
            submitted_by=None if viewer.is_admin else viewer.user_id,
        )
        return schemas.SubmissionList(submissions=[schemas.SubmissionDTO.model_validate(s) for s in submissions])

    async def stats(self) -> schemas.StatsDTO:
        return schemas.StatsDTO(
            pending_submissions=len(await self.submission_repo.list(status=dmod.ModerationStatus.PENDING)),
            total_users=await self.user_repo.count(),
            total_artworks=len(await self._approved()),
        )
