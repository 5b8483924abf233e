import pydantic as p
import datetime as dt
from catalog.domain.models import Role, UserStatus

__all__ = [
    'UserDTO', 'UserList', 'RegistrationModel', 'UserLoginModel', 'AuthResponse',
    'RoleUpdateModel', 'StatusUpdateModel', 'MessageResponse',
]

class UserDTO(p.BaseModel):
    '''Public view of a user. Never carries the password hash'''
    model_config = p.ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: Role
    status: UserStatus
    created_at: dt.datetime

    @property
    def is_admin(self):
        return self.role == Role.ADMIN


class UserList(p.BaseModel):
    users: list[UserDTO]


class RegistrationModel(p.BaseModel):
    """Fields are loosely typed on purpose: every violation is collected by the auth service and reported at once."""
    username: str | None = None
    email: str | None = None
    password: str | None = None
    confirm_password: str | None = None
    role: str | None = p.Field(default=None, description="general or researcher. Anything else falls back to general")


class UserLoginModel(p.BaseModel):
    username: str | None = p.Field(default=None, description="Username or email")
    password: str | None = None


class AuthResponse(p.BaseModel):
    message: str
    user: UserDTO
    token: str


class RoleUpdateModel(p.BaseModel):
    role: str

class StatusUpdateModel(p.BaseModel):
    status: str


class MessageResponse(p.BaseModel):
    message: str
