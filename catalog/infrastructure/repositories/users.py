import catalog.domain.repositories as repo
import catalog.domain.models as domain
import catalog.domain.exceptions as domexc
from .base import JsonCollectionRepository

__all__ = ['JsonUserRepository']


class JsonUserRepository(JsonCollectionRepository[domain.User], repo.IUserRepository):
    """Users collection. Username and email are unique, compared case-insensitively."""
    collection = 'users'
    entity = 'User'
    model = domain.User
    not_found = domexc.UserDoesNotExist

    def _to_record(self, item: domain.User) -> dict:
        return item.to_record()

    def _check_unique(self, item: domain.User, existing: list[domain.User]) -> None:
        for user in existing:
            if user.username.casefold() == item.username.casefold():
                raise domexc.UserAlreadyExists("Another user with this username already exists")
            if user.email.casefold() == item.email.casefold():
                raise domexc.UserAlreadyExists("Another user with this email already exists")

    async def get_by_id(self, user_id: int) -> domain.User | None:
        return await self._get(user_id)

    async def get_by_login(self, username_or_email: str) -> domain.User | None:
        login = username_or_email.strip().casefold()
        return next(
            (u for u in await self._load() if login in (u.username.casefold(), u.email.casefold())),
            None,
        )

    async def list(self, status: domain.UserStatus | None = None) -> list[domain.User]:
        users = await self._load()
        return [u for u in users if status is None or u.status == status]

    async def count(self) -> int:
        return len(await self.store.load(self.collection))

    async def create(self, user: domain.User) -> domain.User:
        return await self._insert(user)

    async def update_role(self, user_id: int, role: domain.Role) -> domain.User:
        return await self._update(user_id, lambda user: user.set_role(role))

    async def update_status(self, user_id: int, status: domain.UserStatus) -> domain.User:
        return await self._update(user_id, lambda user: user.set_status(status))
