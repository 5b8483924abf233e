import pydantic as p
import datetime as dt
from enum import Enum
from .users import utcnow

__all__ = ['ModerationStatus', 'ArtworkContent', 'Artwork']


class ModerationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ArtworkContent(p.BaseModel):
    """Descriptive fields shared by published artworks and user submissions."""
    title: str
    type: str
    artist: str = "Unknown"
    period: str = ""
    description: str
    location: str = ""
    image_url: str = ""
    condition_note: str = ""

    def content(self) -> dict:
        return self.model_dump(include=set(ArtworkContent.model_fields))


class Artwork(ArtworkContent):
    id: int|None = None
    status: ModerationStatus = ModerationStatus.APPROVED
    submitted_by: int|None = None
    created_at: dt.datetime = p.Field(default_factory=utcnow)

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match against title, description and artist."""
        q = query.casefold()
        return any(q in field.casefold() for field in (self.title, self.description, self.artist))
