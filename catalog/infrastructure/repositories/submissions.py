import catalog.domain.repositories as repo
import catalog.domain.models as domain
import catalog.domain.exceptions as domexc
from .base import JsonCollectionRepository
import typing as t

__all__ = ['JsonSubmissionRepository']


class JsonSubmissionRepository(JsonCollectionRepository[domain.Submission], repo.ISubmissionRepository):
    collection = 'submissions'
    entity = 'Submission'
    model = domain.Submission
    not_found = domexc.SubmissionDoesNotExist

    async def list(self, status: domain.ModerationStatus | None = None, submitted_by: int | None = None) -> list[domain.Submission]:
        return [
            s for s in await self._load()
            if (status is None or s.status == status)
            and (submitted_by is None or s.submitted_by == submitted_by)
        ]

    async def get_by_id(self, submission_id: int) -> domain.Submission | None:
        return await self._get(submission_id)

    async def create(self, submission: domain.Submission) -> domain.Submission:
        return await self._insert(submission)

    async def change_status(
        self,
        submission_id: int,
        mutate: t.Callable[[domain.Submission], t.Awaitable[None]],
    ) -> domain.Submission:
        return await self._update(submission_id, mutate)
