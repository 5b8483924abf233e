import catalog.domain.repositories as repos
import catalog.presentation.schemas as schemas
import catalog.domain.models as domain
import catalog.domain.exceptions as domexc

import logging

logger = logging.getLogger('catalog')

__all__ = ['UserService']


class UserService:
    '''Admin-side user management. Callers are expected to be authorized as admin already'''

    def __init__(self, user_repo: repos.IUserRepository) -> None:
        self.user_repo = user_repo

    async def list(self) -> list[schemas.UserDTO]:
        users = await self.user_repo.list()
        return [schemas.UserDTO.model_validate(user) for user in users]

    async def get_user(self, user_id: int) -> schemas.UserDTO:
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise domexc.UserDoesNotExist("User with the provided ID does not exist")
        return schemas.UserDTO.model_validate(user)

    async def update_role(self, admin_id: int, target_user_id: int, role: str) -> schemas.UserDTO:
        try:
            new_role = domain.Role(role)
        except ValueError:
            raise domexc.ValidationError(f"Invalid role '{role}'. Expected one of: {', '.join(r.value for r in domain.Role)}")
        if admin_id == target_user_id and new_role != domain.Role.ADMIN:
            raise domexc.ActionNotAllowedForRole("Admins are not allowed to change their own role.")

        user = await self.user_repo.update_role(target_user_id, new_role)
        logger.info(f'[USERS] Admin #{admin_id} set role of user #{target_user_id} to {new_role.value}')
        return schemas.UserDTO.model_validate(user)

    async def update_status(self, admin_id: int, target_user_id: int, status: str) -> schemas.UserDTO:
        try:
            new_status = domain.UserStatus(status)
        except ValueError:
            raise domexc.ValidationError(f"Invalid status '{status}'. Expected one of: {', '.join(s.value for s in domain.UserStatus)}")
        if admin_id == target_user_id and new_status != domain.UserStatus.ACTIVE:
            raise domexc.ActionNotAllowedForRole("Admins cannot suspend their own account")

        user = await self.user_repo.update_status(target_user_id, new_status)
        logger.info(f'[USERS] Admin #{admin_id} set status of user #{target_user_id} to {new_status.value}')
        return schemas.UserDTO.model_validate(user)
