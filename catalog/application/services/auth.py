import catalog.application.repositories as apprepo
import catalog.application.exceptions as appexc
import catalog.application.models as mapp
import catalog.domain.repositories as repos
import catalog.domain.exceptions as domexc
import catalog.domain.models as dmod
import catalog.domain.services as domsvc
import catalog.presentation.schemas as schemas
from catalog.common.config import Config

from email_validator import validate_email, EmailNotValidError
import logging

logger = logging.getLogger('catalog')

__all__ = ['AuthService', 'SELF_ASSIGNABLE_ROLES']

#Roles a visitor may pick for themself at registration
SELF_ASSIGNABLE_ROLES = frozenset({dmod.Role.GENERAL, dmod.Role.RESEARCHER})


class AuthService:
    """Credential checks and session issuance.

    Sessions are kept in the injected `SessionRepository`; the token returned by
    `register`/`login` is the only handle a caller gets.
    """

    def __init__(
        self,
        user_repo: repos.IUserRepository,
        session_repo: apprepo.SessionRepository,
        password_hasher: domsvc.IPasswordHasherAsync,
    ):
        self.user_repo = user_repo
        self.session_repo = session_repo
        self._hasher = password_hasher

    @staticmethod
    def _validate_registration(data: schemas.RegistrationModel) -> list[str]:
        errors = []
        if not (data.username or '').strip():
            errors.append('Username is required')
        try:
            validate_email(data.email or '', check_deliverability=False)
        except EmailNotValidError:
            errors.append('Valid email is required')
        if len(data.password or '') < Config.MIN_PASSWORD_LENGTH:
            errors.append(f'Password must be at least {Config.MIN_PASSWORD_LENGTH} characters')
        if data.password != data.confirm_password:
            errors.append('Passwords do not match')
        return errors

    @staticmethod
    def _trusted_role(requested: str | None) -> dmod.Role:
        try:
            role = dmod.Role(requested)
        except ValueError:
            return dmod.Role.GENERAL
        return role if role in SELF_ASSIGNABLE_ROLES else dmod.Role.GENERAL

    async def _open_session(self, user: dmod.User) -> str:
        session = mapp.UserSession(user_id=user.id, username=user.username, role=user.role)
        return await self.session_repo.create(session)

    async def register(self, data: schemas.RegistrationModel) -> schemas.AuthResponse:
        'Self-signup. The new account is logged in right away'
        if errors := self._validate_registration(data):
            raise domexc.ValidationError(errors)

        user = await dmod.User.create(
            username=data.username,
            email=data.email,
            password=data.password,
            role=self._trusted_role(data.role),
            hasher=self._hasher,
        )
        user = await self.user_repo.create(user)
        token = await self._open_session(user)
        logger.info(f'[AUTH] User #{user.id} ({user.username}) registered as {user.role.value}')
        return schemas.AuthResponse(
            message='Registration successful',
            user=schemas.UserDTO.model_validate(user),
            token=token,
        )

    async def login(self, data: schemas.UserLoginModel) -> schemas.AuthResponse:
        if not (data.username and data.password):
            raise domexc.ValidationError('Username and password are required')

        user = await self.user_repo.get_by_login(data.username)
        if not user or not await user.check_password(data.password, self._hasher):
            logger.warning(f"[AUTH] Failed login for '{data.username}'")
            raise appexc.CredentialsException('Invalid credentials')
        if not user.is_active:
            logger.warning(f'[AUTH] Login refused for inactive user #{user.id}')
            raise appexc.AccountInactive('Account is not active')

        token = await self._open_session(user)
        logger.info(f'[AUTH] User #{user.id} logged in')
        return schemas.AuthResponse(
            message='Login successful',
            user=schemas.UserDTO.model_validate(user),
            token=token,
        )

    async def logout(self, token: str | None) -> None:
        if token:
            await self.session_repo.delete(token)

    async def session(self, token: str | None) -> mapp.UserSession:
        '''Resolves the session behind `token` or fails with NotAuthenticated'''
        session = await self.session_repo.get_session(token) if token else None
        if not session:
            raise appexc.NotAuthenticated('Authentication required')
        return session

    async def _live_user(self, token: str | None) -> tuple[mapp.UserSession, dmod.User]:
        """Session plus the user as stored right now. The session is destroyed once the user
        is gone or no longer active, so role and status changes apply to open sessions too."""
        session = await self.session(token)
        user = await self.user_repo.get_by_id(session.user_id)
        if not user:
            await self.session_repo.delete(session.token)
            raise domexc.UserDoesNotExist('User not found')
        if not user.is_active:
            await self.session_repo.delete(session.token)
            logger.warning(f'[AUTH] Session of inactive user #{user.id} closed')
            raise appexc.AccountInactive('Account is not active')
        return session, user

    async def active_session(self, token: str | None) -> mapp.UserSession:
        '''Session with the role refreshed from the users collection'''
        session, user = await self._live_user(token)
        return session.model_copy(update={'role': user.role})

    async def current_user(self, token: str | None) -> schemas.UserDTO:
        _, user = await self._live_user(token)
        return schemas.UserDTO.model_validate(user)

    async def require_auth(self, token: str | None) -> int:
        _, user = await self._live_user(token)
        return user.id

    async def require_admin(self, token: str | None) -> int:
        _, user = await self._live_user(token)
        if not user.is_admin:
            raise appexc.Forbidden('Admin access required')
        return user.id
