import pytest
import catalog.application.services as svc
import catalog.application.exceptions as appexc
import catalog.domain.exceptions as domexc
import catalog.domain.models as dmod
import catalog.presentation.schemas as schemas
from tests.helpers.catalog import create_user


def registration(**overrides) -> schemas.RegistrationModel:
    fields = dict(username='alice', email='alice@example.com', password='secret1', confirm_password='secret1')
    return schemas.RegistrationModel(**(fields | overrides))


@pytest.mark.asyncio
async def test_register_logs_user_in(auth_service: svc.AuthService, session_repo):
    result = await auth_service.register(registration())
    assert result.user.id == 1
    assert result.user.role == dmod.Role.GENERAL
    assert result.user.status == dmod.UserStatus.ACTIVE

    session = await session_repo.get_session(result.token)
    assert (session.user_id, session.username, session.role) == (1, 'alice', dmod.Role.GENERAL)
    assert 'password' not in result.model_dump_json()


@pytest.mark.asyncio
async def test_register_stores_only_the_hash(auth_service: svc.AuthService, store):
    await auth_service.register(registration())
    raw = (await store.load('users'))[0]
    assert 'password' not in raw
    assert raw['password_hash'] == 'hashed:secret1'


@pytest.mark.asyncio
async def test_register_reports_every_violation(auth_service: svc.AuthService, store):
    data = registration(username='  ', email='not-an-email', password='123', confirm_password='456')
    with pytest.raises(domexc.ValidationError) as exc_info:
        await auth_service.register(data)
    assert exc_info.value.errors == [
        'Username is required',
        'Valid email is required',
        'Password must be at least 6 characters',
        'Passwords do not match',
    ]
    assert await store.load('users') == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
   "second, match",
   [
       (dict(username='alice', email='other@example.com'), 'username'),
       (dict(username='bob', email='alice@example.com'), 'email'),
   ],
)
async def test_register_duplicate_is_conflict(auth_service: svc.AuthService, second, match):
    await auth_service.register(registration())
    with pytest.raises(domexc.UserAlreadyExists, match=match):
        await auth_service.register(registration(**second))


@pytest.mark.asyncio
@pytest.mark.parametrize(
   "requested, expected",
   [
       (None, dmod.Role.GENERAL),
       ('researcher', dmod.Role.RESEARCHER),
       ('admin', dmod.Role.GENERAL),
       ('wizard', dmod.Role.GENERAL),
   ],
)
async def test_register_role_is_untrusted(auth_service: svc.AuthService, requested, expected):
    result = await auth_service.register(registration(role=requested))
    assert result.user.role == expected


@pytest.mark.asyncio
@pytest.mark.parametrize("login", ['alice', 'alice@example.com'])
async def test_login_by_username_or_email(auth_service: svc.AuthService, user_repo, login):
    await create_user(user_repo, username='alice', email='alice@example.com', password='secret1')
    result = await auth_service.login(schemas.UserLoginModel(username=login, password='secret1'))
    assert result.user.username == 'alice'
    assert 'password' not in result.user.model_dump()
    assert 'password_hash' not in result.model_dump_json()
    assert await auth_service.require_auth(result.token) == result.user.id


@pytest.mark.asyncio
@pytest.mark.parametrize(
   "login, password",
   [
       ('alice', 'wrong-password'),
       ('alice', 'Secret1'),
       ('nobody', 'secret1'),
   ],
)
async def test_login_invalid_credentials(auth_service: svc.AuthService, user_repo, session_repo, login, password):
    await create_user(user_repo, username='alice', password='secret1')
    with pytest.raises(appexc.CredentialsException, match='Invalid credentials'):
        await auth_service.login(schemas.UserLoginModel(username=login, password=password))
    assert session_repo._sessions == {}


@pytest.mark.asyncio
async def test_login_requires_both_fields(auth_service: svc.AuthService):
    with pytest.raises(domexc.ValidationError):
        await auth_service.login(schemas.UserLoginModel(username='alice'))


@pytest.mark.asyncio
async def test_login_suspended_account(auth_service: svc.AuthService, user_repo):
    user = await create_user(user_repo, username='alice', password='secret1')
    await user_repo.update_status(user.id, dmod.UserStatus.SUSPENDED)
    with pytest.raises(appexc.AccountInactive):
        await auth_service.login(schemas.UserLoginModel(username='alice', password='secret1'))


@pytest.mark.asyncio
async def test_logout_invalidates_session(auth_service: svc.AuthService):
    result = await auth_service.register(registration())
    assert (await auth_service.current_user(result.token)).username == 'alice'

    await auth_service.logout(result.token)
    with pytest.raises(appexc.NotAuthenticated):
        await auth_service.current_user(result.token)
    await auth_service.logout(None)


@pytest.mark.asyncio
@pytest.mark.parametrize("token", [None, '', 'made-up-token'])
async def test_unknown_token_is_unauthenticated(auth_service: svc.AuthService, token):
    with pytest.raises(appexc.NotAuthenticated):
        await auth_service.require_auth(token)
    with pytest.raises(appexc.NotAuthenticated):
        await auth_service.require_admin(token)


@pytest.mark.asyncio
async def test_require_admin(auth_service: svc.AuthService, user_repo):
    await create_user(user_repo, username='root', password='secret1', role=dmod.Role.ADMIN)
    await create_user(user_repo, username='alice', password='secret1')

    admin = await auth_service.login(schemas.UserLoginModel(username='root', password='secret1'))
    general = await auth_service.login(schemas.UserLoginModel(username='alice', password='secret1'))

    assert await auth_service.require_admin(admin.token) == admin.user.id
    with pytest.raises(appexc.Forbidden):
        await auth_service.require_admin(general.token)


@pytest.mark.asyncio
async def test_current_user_for_vanished_user(mocker, session_repo, hasher):
    user_repo = mocker.AsyncMock()
    user_repo.get_by_id.return_value = None
    service = svc.AuthService(user_repo, session_repo, hasher)
    user = dmod.User(id=5, username='ghost', email='ghost@example.com', password_hash='h')
    token = await service._open_session(user)

    with pytest.raises(domexc.UserDoesNotExist):
        await service.current_user(token)
    assert await session_repo.get_session(token) is None


@pytest.mark.asyncio
async def test_suspension_closes_open_sessions(auth_service: svc.AuthService, user_repo, session_repo):
    result = await auth_service.register(registration())
    await user_repo.update_status(result.user.id, dmod.UserStatus.SUSPENDED)

    with pytest.raises(appexc.AccountInactive):
        await auth_service.require_auth(result.token)
    assert await session_repo.get_session(result.token) is None
    with pytest.raises(appexc.NotAuthenticated):
        await auth_service.require_auth(result.token)


@pytest.mark.asyncio
async def test_role_changes_apply_to_open_sessions(auth_service: svc.AuthService, user_repo):
    await create_user(user_repo, username='root', password='secret1', role=dmod.Role.ADMIN)
    await create_user(user_repo, username='alice', password='secret1')
    admin = await auth_service.login(schemas.UserLoginModel(username='root', password='secret1'))
    general = await auth_service.login(schemas.UserLoginModel(username='alice', password='secret1'))

    await user_repo.update_role(admin.user.id, dmod.Role.RESEARCHER)
    await user_repo.update_role(general.user.id, dmod.Role.ADMIN)

    with pytest.raises(appexc.Forbidden):
        await auth_service.require_admin(admin.token)
    assert (await auth_service.active_session(admin.token)).role == dmod.Role.RESEARCHER
    assert await auth_service.require_admin(general.token) == general.user.id
