import catalog.domain.exceptions as domexc
import catalog.application.exceptions as appexc
import catalog.infrastructure.exceptions as infexc
from catalog.common.exceptions import format_exception_string
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger('catalog')


def _most_specific(exc: Exception, mapping: dict[type, int], default: int = 500) -> int:
    for cls in type(exc).__mro__:
        if cls in mapping:
            return mapping[cls]
    return default


def register_exception_handlers(app):

    @app.exception_handler(appexc.AuthBaseException)
    async def auth_exception_handler(request, exc: appexc.AuthBaseException):
        mapping = {
            appexc.CredentialsException: 401,
            appexc.NotAuthenticated: 401,
            appexc.AccountInactive: 403,
            appexc.Forbidden: 403,
        }
        status = _most_specific(exc, mapping)
        return JSONResponse({"detail": str(exc)}, status_code=status)


    @app.exception_handler(domexc.DomainLayerException)
    async def domain_exception_handler(request, exc: domexc.DomainLayerException):
        mapping = {
            domexc.ValidationError: 400,
            domexc.ActionNotAllowedForRole: 403,
            domexc.NotFound: 404,
            domexc.UserAlreadyExists: 409,
            domexc.CategoryAlreadyExists: 409,
            domexc.InvalidTransition: 409,
        }
        status = _most_specific(exc, mapping)
        body = {"detail": str(exc)}
        if isinstance(exc, domexc.ValidationError):
            body["errors"] = exc.errors
        return JSONResponse(body, status_code=status)


    @app.exception_handler(infexc.CustomStorageException)
    async def storage_exception_handler(request, exc: infexc.CustomStorageException):
        logger.error(format_exception_string(exc, source='STORAGE', comment=request.url.path))
        return JSONResponse({"detail": "Storage is unavailable, the change was not saved"}, status_code=500)


    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [f"{'.'.join(str(p) for p in e['loc'][1:]) or 'body'}: {e['msg']}" for e in exc.errors()]
        return JSONResponse({"detail": ', '.join(errors), "errors": errors}, status_code=400)
