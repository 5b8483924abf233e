import pydantic as p
import datetime as dt
from catalog.domain.models import ArtworkContent, ModerationStatus

__all__ = [
    'ArtworkInputModel', 'ArtworkDTO', 'PaginationInfo', 'ArtworkPage',
    'ArtworkDetail', 'ArtworkList', 'StatsDTO',
]


class ArtworkInputModel(p.BaseModel):
    '''Content of a new submission or a directly imported artwork'''
    title: str | None = None
    type: str | None = None
    artist: str | None = None
    period: str | None = None
    description: str | None = None
    location: str | None = None
    image_url: str | None = None
    condition_note: str | None = None


class ArtworkDTO(ArtworkContent):
    model_config = p.ConfigDict(from_attributes=True)

    id: int
    status: ModerationStatus
    submitted_by: int | None = None
    created_at: dt.datetime


class PaginationInfo(p.BaseModel):
    current_page: int
    total_pages: int
    total_items: int
    per_page: int


class ArtworkPage(p.BaseModel):
    artworks: list[ArtworkDTO]
    pagination: PaginationInfo


class ArtworkDetail(p.BaseModel):
    artwork: ArtworkDTO
    similar: list[ArtworkDTO]


class ArtworkList(p.BaseModel):
    artworks: list[ArtworkDTO]


class StatsDTO(p.BaseModel):
    pending_submissions: int
    total_users: int
    total_artworks: int
