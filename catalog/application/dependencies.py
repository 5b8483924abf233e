from fastapi import Depends
from fastapi.security import APIKeyCookie, HTTPBearer, HTTPAuthorizationCredentials
import typing as t

import catalog.infrastructure.dependencies as ideps
import catalog.application.services as services
import catalog.application.models as mapp
import catalog.presentation.schemas as schemas
from catalog.common.config import Config

async def get_auth_service(
        user_repo: ideps.UserRepoDependency,
        session_repo: ideps.SessionRepoDependency,
        hasher: ideps.PasswordHasherDependency,
    ):
    return services.AuthService(user_repo, session_repo, hasher)

async def get_user_service(user_repo: ideps.UserRepoDependency):
    return services.UserService(user_repo)

async def get_moderation_service(submission_repo: ideps.SubmissionRepoDependency, artwork_repo: ideps.ArtworkRepoDependency):
    return services.ModerationService(submission_repo, artwork_repo)

async def get_query_service(
        artwork_repo: ideps.ArtworkRepoDependency,
        submission_repo: ideps.SubmissionRepoDependency,
        user_repo: ideps.UserRepoDependency,
    ):
    return services.QueryService(artwork_repo, submission_repo, user_repo)

async def get_category_service(category_repo: ideps.CategoryRepoDependency):
    return services.CategoryService(category_repo)

AuthServiceDependency = t.Annotated[services.AuthService, Depends(get_auth_service)]
UserServiceDependency = t.Annotated[services.UserService, Depends(get_user_service)]
ModerationServiceDependency = t.Annotated[services.ModerationService, Depends(get_moderation_service)]
QueryServiceDependency = t.Annotated[services.QueryService, Depends(get_query_service)]
CategoryServiceDependency = t.Annotated[services.CategoryService, Depends(get_category_service)]


#Session token: cookie set at login, or "Authorization: Bearer <token>"
SessionCookie = t.Annotated[str | None, Depends(APIKeyCookie(name=Config.SESSION_COOKIE_NAME, auto_error=False))]
BearerCredentials = t.Annotated[HTTPAuthorizationCredentials | None, Depends(HTTPBearer(auto_error=False))]

async def get_session_token(cookie: SessionCookie, bearer: BearerCredentials) -> str | None:
    return bearer.credentials if bearer else cookie

SessionToken = t.Annotated[str | None, Depends(get_session_token)]

async def get_current_session(token: SessionToken, auth_service: AuthServiceDependency) -> mapp.UserSession:
    return await auth_service.active_session(token)

async def get_current_user(token: SessionToken, auth_service: AuthServiceDependency) -> schemas.UserDTO:
    return await auth_service.current_user(token)

async def get_admin_id(token: SessionToken, auth_service: AuthServiceDependency) -> int:
    return await auth_service.require_admin(token)

async def get_user_id(token: SessionToken, auth_service: AuthServiceDependency) -> int:
    return await auth_service.require_auth(token)


CurrentSessionDependency = t.Annotated[mapp.UserSession, Depends(get_current_session)]
CurrentUserDependency = t.Annotated[schemas.UserDTO, Depends(get_current_user)]
UserIdDependency = t.Annotated[int, Depends(get_user_id)]
AdminIdDependency = t.Annotated[int, Depends(get_admin_id)]
