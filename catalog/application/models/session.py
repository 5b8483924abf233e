import pydantic as p, uuid
import datetime as dt
from catalog.domain.models import Role, utcnow

__all__ = ['UserSession']

class UserSession(p.BaseModel):
    token: str = p.Field(default_factory=lambda: uuid.uuid4().hex)
    user_id: int
    username: str
    role: Role
    created_at: dt.datetime = p.Field(default_factory=utcnow)

    @property
    def is_admin(self):
        return self.role == Role.ADMIN
