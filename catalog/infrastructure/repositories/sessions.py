import catalog.application.repositories as apprepo
import catalog.application.models as m
from redis.asyncio import Redis

__all__ = ['InMemorySessionRepository', 'RedisSessionRepository']


class InMemorySessionRepository(apprepo.SessionRepository):
    '''Process-local sessions. Everything is lost on restart'''
    def __init__(self):
        self._sessions: dict[str, m.UserSession] = {}

    async def create(self, session: m.UserSession) -> str:
        self._sessions[session.token] = session
        return session.token

    async def delete(self, token: str) -> None:
        self._sessions.pop(token, None)

    async def get_session(self, token: str) -> m.UserSession | None:
        return self._sessions.get(token)


class RedisSessionRepository(apprepo.SessionRepository):
    def __init__(self, redis: Redis):
        self.redis = redis

    async def create(self, session: m.UserSession) -> str:
        await self.redis.set(f'session:{session.token}', session.model_dump_json())
        return session.token

    async def delete(self, token: str) -> None:
        await self.redis.delete(f'session:{token}')

    async def get_session(self, token: str) -> m.UserSession | None:
        sess = await self.redis.get(f'session:{token}')
        return m.UserSession.model_validate_json(sess) if sess else None
