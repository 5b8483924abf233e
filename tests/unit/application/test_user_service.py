import pytest
from pytest_mock import MockerFixture
import catalog.application.services as svc
import catalog.domain.models as dmod
import catalog.domain.exceptions as domexc
import catalog.presentation.schemas as schemas


@pytest.fixture
def user_data():
    return dict(
        id=2,
        username='user1',
        email='user1@example.com',
        role=dmod.Role.GENERAL,
        status=dmod.UserStatus.ACTIVE,
        created_at='2024-01-01T00:00:00Z',
    )


@pytest.mark.asyncio
async def test_user_service_get_user(mocker: MockerFixture, user_data):
    mock_user_repo = mocker.AsyncMock()
    mock_user_repo.get_by_id.return_value = dmod.User(**user_data, password_hash='somehash')
    service = svc.UserService(mock_user_repo)

    user = await service.get_user(2)
    assert user == schemas.UserDTO.model_validate(user_data)
    mock_user_repo.get_by_id.assert_called_once_with(2)

    mock_user_repo.get_by_id.return_value = None
    with pytest.raises(domexc.UserDoesNotExist):
        await service.get_user(3)


@pytest.mark.asyncio
async def test_user_service_list(mocker: MockerFixture, user_data):
    mock_user_repo = mocker.AsyncMock()
    mock_user_repo.list.return_value = [dmod.User(**user_data, password_hash='somehash')]
    service = svc.UserService(mock_user_repo)

    users = await service.list()
    assert users == [schemas.UserDTO.model_validate(user_data)]
    assert 'password_hash' not in users[0].model_dump()


@pytest.mark.asyncio
@pytest.mark.parametrize(
   "admin_id, target_id, role, exc, exc_text",
   [
       (1, 2, 'researcher', None, None),
       (1, 2, 'admin', None, None),
       (1, 2, 'superuser', domexc.ValidationError, 'Invalid role'),
       (1, 1, 'general', domexc.ActionNotAllowedForRole, 'their own role'),
   ],
)
async def test_user_service_update_role(mocker: MockerFixture, user_data, admin_id, target_id, role, exc, exc_text):
    mock_user_repo = mocker.AsyncMock()
    mock_user_repo.update_role.return_value = dmod.User(**(user_data | {'role': role}), password_hash='h') if not exc else None
    service = svc.UserService(mock_user_repo)

    if exc:
        with pytest.raises(exc, match=exc_text):
            await service.update_role(admin_id, target_id, role)
        mock_user_repo.update_role.assert_not_called()
    else:
        user = await service.update_role(admin_id, target_id, role)
        assert user.role == dmod.Role(role)
        mock_user_repo.update_role.assert_called_once_with(target_id, dmod.Role(role))


@pytest.mark.asyncio
@pytest.mark.parametrize(
   "admin_id, target_id, status, exc",
   [
       (1, 2, 'suspended', None),
       (1, 2, 'active', None),
       (1, 2, 'banned', domexc.ValidationError),
       (1, 1, 'suspended', domexc.ActionNotAllowedForRole),
   ],
)
async def test_user_service_update_status(mocker: MockerFixture, user_data, admin_id, target_id, status, exc):
    mock_user_repo = mocker.AsyncMock()
    mock_user_repo.update_status.return_value = dmod.User(**(user_data | {'status': status}), password_hash='h') if not exc else None
    service = svc.UserService(mock_user_repo)

    if exc:
        with pytest.raises(exc):
            await service.update_status(admin_id, target_id, status)
        mock_user_repo.update_status.assert_not_called()
    else:
        user = await service.update_status(admin_id, target_id, status)
        assert user.status == dmod.UserStatus(status)


@pytest.mark.asyncio
async def test_user_service_unknown_target(user_repo):
    service = svc.UserService(user_repo)
    with pytest.raises(domexc.UserDoesNotExist):
        await service.update_role(1, 77, 'researcher')
