import pydantic as p
import datetime as dt
from enum import Enum
from catalog.common.config import Config
from catalog.domain.services import IPasswordHasherAsync
import catalog.domain.exceptions as domexc

__all__ = ['Role', 'UserStatus', 'User', 'utcnow']


def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc).replace(microsecond=0)


class Role(str, Enum):
    GENERAL = "general"
    ADMIN = "admin"
    RESEARCHER = "researcher"

class UserStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"

class User(p.BaseModel):
    model_config = p.ConfigDict(validate_assignment=True)

    id: int|None = None
    username: str = p.Field(min_length=1)
    email: str = p.Field(min_length=3)
    password_hash: str = p.Field(exclude=True, repr=False)
    role: Role = Role.GENERAL
    status: UserStatus = UserStatus.ACTIVE
    created_at: dt.datetime = p.Field(default_factory=utcnow)

    @staticmethod
    async def _hash_password(password: str, hasher: IPasswordHasherAsync):
        if len(password) < Config.MIN_PASSWORD_LENGTH:
            raise domexc.ValidationError(f"Password must be at least {Config.MIN_PASSWORD_LENGTH} characters")
        return await hasher.hash(password)

    @property
    def is_admin(self):
        return self.role == Role.ADMIN

    @property
    def is_active(self):
        return self.status == UserStatus.ACTIVE

    def set_status(self, status: UserStatus | str):
        try:
            self.status = UserStatus(status)
        except ValueError:
            raise domexc.ValidationError(f"Given status '{status}' is not a valid status!")

    def set_role(self, role: Role | str):
        try:
            self.role = Role(role)
        except ValueError:
            raise domexc.ValidationError(f"Given role '{role}' is not a valid role!")

    def to_record(self) -> dict:
        '''Flat JSON-ready dict for the record store. The only place where the hash leaves the model'''
        return self.model_dump(mode='json') | {'password_hash': self.password_hash}

    @staticmethod
    async def create(username: str, email: str, password: str, role: Role, hasher: IPasswordHasherAsync):
        password_hash = await User._hash_password(password, hasher)
        return User(
            username=username.strip(),
            email=email.strip().lower(),
            password_hash=password_hash,
            role=role,
            status=UserStatus.ACTIVE
        )

    async def check_password(self, password: str, hasher: IPasswordHasherAsync) -> bool:
        return await hasher.verify(password, self.password_hash)
