import catalog.domain.repositories as repos
import catalog.domain.models as dmod
import catalog.presentation.schemas as schemas
from .content import validate_content
from catalog.common.exceptions import format_exception_string

import logging

logger = logging.getLogger('catalog')

__all__ = ['ModerationService']


class ModerationService:
    """Submission lifecycle: pending -> approved | rejected.

    Approving copies the submission content into a fresh artwork. The submission row
    stays where it is, with its status updated, for audit.
    """

    def __init__(self, submission_repo: repos.ISubmissionRepository, artwork_repo: repos.IArtworkRepository):
        self.submission_repo = submission_repo
        self.artwork_repo = artwork_repo

    async def create_submission(self, user_id: int, data: schemas.ArtworkInputModel) -> schemas.SubmissionDTO:
        content = validate_content(data)
        submission = await self.submission_repo.create(
            dmod.Submission(**content.content(), submitted_by=user_id)
        )
        logger.info(f'[MODERATION] Submission #{submission.id} created by user #{user_id}')
        return schemas.SubmissionDTO.model_validate(submission)

    async def set_status(self, admin_id: int, submission_id: int, new_status: str) -> schemas.ModerationResult:
        published: list[dmod.Artwork] = []

        async def apply(submission: dmod.Submission) -> None:
            submission.transition(new_status, reviewer_id=admin_id)
            if submission.status == dmod.ModerationStatus.APPROVED:
                published.append(await self.artwork_repo.create(submission.to_artwork()))

        try:
            submission = await self.submission_repo.change_status(submission_id, apply)
        except Exception:
            #submission is still pending on disk, the copy must go too
            for orphan in published:
                await self._withdraw(orphan)
            raise
        artwork = published[0] if published else None
        logger.info(
            f'[MODERATION] Submission #{submission_id} {submission.status.value} by admin #{admin_id}'
            + (f', published as artwork #{artwork.id}' if artwork else '')
        )
        return schemas.ModerationResult(
            submission=schemas.SubmissionDTO.model_validate(submission),
            artwork=schemas.ArtworkDTO.model_validate(artwork) if artwork else None,
        )

    async def _withdraw(self, artwork: dmod.Artwork) -> None:
        '''Removes an artwork published by a failed approval. Its id stays burned'''
        try:
            await self.artwork_repo.delete(artwork.id)
        except Exception as e:
            logger.error(format_exception_string(
                e, source='MODERATION', comment=f'Artwork #{artwork.id} stays published without an approved submission',
            ))
        else:
            logger.warning(f'[MODERATION] Artwork #{artwork.id} withdrawn, submission was not saved')

    async def import_artwork(self, admin_id: int, data: schemas.ArtworkInputModel) -> schemas.ArtworkDTO:
        'Admin-only shortcut that publishes an artwork without a submission'
        content = validate_content(data)
        artwork = await self.artwork_repo.create(
            dmod.Artwork(**content.content(), status=dmod.ModerationStatus.APPROVED, submitted_by=admin_id)
        )
        logger.info(f'[MODERATION] Artwork #{artwork.id} imported by admin #{admin_id}')
        return schemas.ArtworkDTO.model_validate(artwork)
