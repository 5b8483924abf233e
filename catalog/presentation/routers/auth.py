#Fastapi
from fastapi import APIRouter, Response, status

#Project files
import catalog.presentation.schemas as schemas
import catalog.application.dependencies as appdeps
from catalog.common.config import Config

import logging

logger = logging.getLogger('catalog')
router = APIRouter(
    prefix="/auth",
    tags = ["auth"],
    responses={404: {"description": "Requested resource is not found"}}
    )


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(Config.SESSION_COOKIE_NAME, token, httponly=True, samesite='lax')


@router.post("/register", status_code=status.HTTP_201_CREATED, responses={
    400: {"description":"Missing or malformed fields, all violations listed in 'errors'"},
    409: {"description":"Username or email already taken"},
    },
    description='Creates a general (or researcher) account and logs it in')
async def register(auth_service: appdeps.AuthServiceDependency, data: schemas.RegistrationModel, response: Response) -> schemas.AuthResponse:
    result = await auth_service.register(data)
    _set_session_cookie(response, result.token)
    return result


@router.post("/login", responses={
    401: {"description":"Bad credentials"},
    403: {"description":"Account is suspended"},
    },
    description='Accepts username or email. The session token is returned and also set as a cookie')
async def login(auth_service: appdeps.AuthServiceDependency, data: schemas.UserLoginModel, response: Response) -> schemas.AuthResponse:
    result = await auth_service.login(data)
    _set_session_cookie(response, result.token)
    return result


@router.post("/logout", description='Invalidates the current session')
async def logout(auth_service: appdeps.AuthServiceDependency, token: appdeps.SessionToken, response: Response) -> schemas.MessageResponse:
    await auth_service.logout(token)
    response.delete_cookie(Config.SESSION_COOKIE_NAME)
    return schemas.MessageResponse(message='Logout successful')


@router.get("/me", responses={401: {"description":"Not authenticated"}})
async def whoami(current_user: appdeps.CurrentUserDependency) -> schemas.UserDTO:
    return current_user
