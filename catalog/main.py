#Fastapi/Asyncio
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

#Project files
from catalog.common.config import Config
from catalog.common.exceptions import format_exception_string
import catalog.common.logs as logs
import catalog.infrastructure.dependencies as ideps
from catalog.infrastructure.store import seed_default_data
from catalog.presentation.exception_handlers import register_exception_handlers
import catalog.presentation.routers as routers

#Logging
import logging



###################
#       App       #
###################

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f'[APP: Startup] Startup began... data dir: {Config.DATA_DIR}')

    if Config.SEED_DEFAULT_DATA:
        seeded = await seed_default_data(ideps.RecordStore, ideps.PasswordHasherType())
        if seeded:
            logger.info(f'[APP: Startup] Seeded default data: {", ".join(seeded)}')

    logger.info(f'[APP: Startup] Startup finished! Session backend: {Config.SESSION_BACKEND}')
    yield
    

logs.init_loggers()
logger = logging.getLogger('catalog')

app = FastAPI(
    title = f'{Config.APP_NAME} commit {Config.GIT_COMMIT}',
    swagger_ui_parameters={
        "defaultModelsExpandDepth": -1,
        "docExpansion": None,
        "displayRequestDuration":True
    },
    lifespan=lifespan, 
)

app.include_router(routers.AuthRouter)
app.include_router(routers.ArtworkRouter)
app.include_router(routers.SubmissionRouter)
app.include_router(routers.AdminRouter)
register_exception_handlers(app)


@app.get("/")
@app.get("/health",include_in_schema=False)
async def read_root():
    """Indicates if the server is alive"""
    return {"status": "ok"}


@app.middleware("http")
async def unhandled_errors_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as e:
        logger.error(format_exception_string(e, source='APP', comment=f'{request.method} {request.url.path}'))
        return JSONResponse(
            status_code=500,
            content={'detail':'Unhandled error'}
        )


if __name__ == '__main__':
    import uvicorn
    uvicorn.run(app, host=Config.UVICORN_HOST, port=Config.UVICORN_PORT, log_config=None)
