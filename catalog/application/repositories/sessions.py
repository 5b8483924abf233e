from abc import abstractmethod, ABC
import catalog.application.models as m

__all__ = ['SessionRepository']

class SessionRepository(ABC):
    """Server-side session state keyed by an opaque token. Sessions live until deleted."""

    @abstractmethod
    async def create(self, session: m.UserSession) -> str: ...

    @abstractmethod
    async def delete(self, token: str) -> None: ...

    @abstractmethod
    async def get_session(self, token: str) -> m.UserSession | None: ...
