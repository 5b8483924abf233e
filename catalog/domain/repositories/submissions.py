from abc import abstractmethod, ABC
import typing as t
import catalog.domain.models as domain

__all__ = ['ISubmissionRepository']

class ISubmissionRepository(ABC):

    @abstractmethod
    async def list(self, status: domain.ModerationStatus | None = None, submitted_by: int | None = None) -> list[domain.Submission]: ...

    @abstractmethod
    async def get_by_id(self, submission_id: int) -> domain.Submission | None: ...

    @abstractmethod
    async def create(self, submission: domain.Submission) -> domain.Submission: ...

    @abstractmethod
    async def change_status(
        self,
        submission_id: int,
        mutate: t.Callable[[domain.Submission], t.Awaitable[None]],
    ) -> domain.Submission:
        """Loads the submission, awaits `mutate` on it and writes it back, all under the collection lock.
        If `mutate` raises, nothing is written."""
