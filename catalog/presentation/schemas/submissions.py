import pydantic as p
import datetime as dt
from catalog.domain.models import ArtworkContent, ModerationStatus
from .artworks import ArtworkDTO

__all__ = ['SubmissionDTO', 'SubmissionList', 'StatusChangeModel', 'ModerationResult']


class SubmissionDTO(ArtworkContent):
    model_config = p.ConfigDict(from_attributes=True)

    id: int
    status: ModerationStatus
    submitted_by: int
    created_at: dt.datetime
    reviewed_by: int | None = None
    reviewed_at: dt.datetime | None = None


class SubmissionList(p.BaseModel):
    submissions: list[SubmissionDTO]


class StatusChangeModel(p.BaseModel):
    status: str = p.Field(description="approved or rejected")


class ModerationResult(p.BaseModel):
    submission: SubmissionDTO
    artwork: ArtworkDTO | None = p.Field(default=None, description="Artwork published by this approval, if any")
