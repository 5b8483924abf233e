from fastapi import Depends
import typing as t

import catalog.infrastructure.interfaces as iabc
import catalog.infrastructure.repositories as repos
import catalog.infrastructure.security as security
import catalog.infrastructure.adapters as adap
import catalog.application.repositories as apprepo
import catalog.domain.services as domsvc
from catalog.infrastructure.store import JsonRecordStore
from catalog.common.config import Config

from redis.asyncio import Redis


#Password hashing
_PasswordHasherType = security.BCryptHasher
PasswordHasherType = lambda: adap.AsyncHasher(_PasswordHasherType())


#####################################
#        Record store/sessions      #
#####################################

RecordStoreType = JsonRecordStore
RecordStore = RecordStoreType(Config.DATA_DIR)

def build_session_repo(backend: str = Config.SESSION_BACKEND) -> apprepo.SessionRepository:
    if backend == 'redis':
        return repos.RedisSessionRepository(Redis.from_url(Config.REDIS_URL, decode_responses=True))
    return repos.InMemorySessionRepository()

#Shared process-wide, injected wherever a session is needed
SessionStore = build_session_repo()


def get_store() -> iabc.IRecordStore:
    return RecordStore

def get_session_repo() -> apprepo.SessionRepository:
    return SessionStore

def get_password_hasher() -> domsvc.IPasswordHasherAsync:
    return PasswordHasherType()

StoreDependency = t.Annotated[iabc.IRecordStore, Depends(get_store)]
SessionRepoDependency = t.Annotated[apprepo.SessionRepository, Depends(get_session_repo)]
PasswordHasherDependency = t.Annotated[domsvc.IPasswordHasherAsync, Depends(get_password_hasher)]


#####################################
#            Repositories           # 
#####################################

UserRepository = repos.JsonUserRepository
ArtworkRepository = repos.JsonArtworkRepository
SubmissionRepository = repos.JsonSubmissionRepository
CategoryRepository = repos.JsonCategoryRepository

async def get_user_repo(store: StoreDependency):
    return UserRepository(store)

async def get_artwork_repo(store: StoreDependency):
    return ArtworkRepository(store)

async def get_submission_repo(store: StoreDependency):
    return SubmissionRepository(store)

async def get_category_repo(store: StoreDependency):
    return CategoryRepository(store)


UserRepoDependency = t.Annotated[UserRepository, Depends(get_user_repo)]
ArtworkRepoDependency = t.Annotated[ArtworkRepository, Depends(get_artwork_repo)]
SubmissionRepoDependency = t.Annotated[SubmissionRepository, Depends(get_submission_repo)]
CategoryRepoDependency = t.Annotated[CategoryRepository, Depends(get_category_repo)]
