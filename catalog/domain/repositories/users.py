from abc import abstractmethod, ABC
import catalog.domain.models as domain

__all__ = ['IUserRepository']

class IUserRepository(ABC):
    """Abstract base for UserRepository. Specific implementations must inherit this base class."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> domain.User | None: ...

    @abstractmethod
    async def get_by_login(self, username_or_email: str) -> domain.User | None: ...

    @abstractmethod
    async def list(self, status: domain.UserStatus | None = None) -> list[domain.User]: ...

    @abstractmethod
    async def create(self, user: domain.User) -> domain.User: ...

    @abstractmethod
    async def update_role(self, user_id: int, role: domain.Role) -> domain.User: ...

    @abstractmethod
    async def update_status(self, user_id: int, status: domain.UserStatus) -> domain.User: ...

    @abstractmethod
    async def count(self) -> int: ...
