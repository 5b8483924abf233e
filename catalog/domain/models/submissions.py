import pydantic as p
import datetime as dt
from .artworks import ArtworkContent, Artwork, ModerationStatus
from .users import utcnow
import catalog.domain.exceptions as domexc

__all__ = ['TRANSITIONS', 'Submission']


#Approved and rejected are terminal
TRANSITIONS: dict[ModerationStatus, frozenset[ModerationStatus]] = {
    ModerationStatus.PENDING: frozenset({ModerationStatus.APPROVED, ModerationStatus.REJECTED}),
    ModerationStatus.APPROVED: frozenset(),
    ModerationStatus.REJECTED: frozenset(),
}


class Submission(ArtworkContent):
    model_config = p.ConfigDict(validate_assignment=True)

    id: int|None = None
    status: ModerationStatus = ModerationStatus.PENDING
    submitted_by: int
    created_at: dt.datetime = p.Field(default_factory=utcnow)
    reviewed_by: int|None = None
    reviewed_at: dt.datetime|None = None

    @property
    def is_pending(self):
        return self.status == ModerationStatus.PENDING

    def transition(self, new_status: ModerationStatus | str, reviewer_id: int|None = None) -> ModerationStatus:
        """Moves the submission to `new_status`. The submission is left untouched if the move is not allowed."""
        try:
            target = ModerationStatus(new_status)
        except ValueError:
            raise domexc.InvalidTransition(f"'{new_status}' is not a moderation status")
        if target not in TRANSITIONS[self.status]:
            raise domexc.InvalidTransition(
                f"Submission {self.id} cannot move from '{self.status.value}' to '{target.value}'"
            )
        self.status = target
        self.reviewed_by = reviewer_id
        self.reviewed_at = utcnow()
        return target

    def to_artwork(self) -> Artwork:
        '''Copy of the content as a new, not yet stored, approved artwork'''
        return Artwork(
            **self.content(),
            status=ModerationStatus.APPROVED,
            submitted_by=self.submitted_by,
        )
