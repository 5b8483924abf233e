import pytest, typing as t, httpx
import pytest_asyncio as pytestaio

import catalog.infrastructure.dependencies as ideps
import catalog.infrastructure.repositories as repos
import catalog.application.services as svc
import catalog.main as main
from catalog.infrastructure.store import JsonRecordStore, seed_default_data
from tests.helpers.catalog import build_hasher

import logging
logger = logging.getLogger('catalog')


@pytest.fixture
def store(tmp_path) -> JsonRecordStore:
    return JsonRecordStore(tmp_path / 'data')

@pytest.fixture
def hasher():
    return build_hasher()

@pytest.fixture
def session_repo() -> repos.InMemorySessionRepository:
    return repos.InMemorySessionRepository()

@pytest.fixture
def user_repo(store):
    return ideps.UserRepository(store)

@pytest.fixture
def artwork_repo(store):
    return ideps.ArtworkRepository(store)

@pytest.fixture
def submission_repo(store):
    return ideps.SubmissionRepository(store)

@pytest.fixture
def category_repo(store):
    return ideps.CategoryRepository(store)

@pytestaio.fixture
async def seeded_store(store, hasher) -> JsonRecordStore:
    await seed_default_data(store, hasher)
    return store


@pytest.fixture
def auth_service(user_repo, session_repo, hasher) -> svc.AuthService:
    return svc.AuthService(user_repo, session_repo, hasher)

@pytest.fixture
def moderation_service(submission_repo, artwork_repo) -> svc.ModerationService:
    return svc.ModerationService(submission_repo, artwork_repo)

@pytest.fixture
def query_service(artwork_repo, submission_repo, user_repo) -> svc.QueryService:
    return svc.QueryService(artwork_repo, submission_repo, user_repo)


@pytestaio.fixture(scope='function')
async def async_client(seeded_store, session_repo, hasher) -> t.AsyncIterator[httpx.AsyncClient]:
    overrides = {
        ideps.get_store: lambda: seeded_store,
        ideps.get_session_repo: lambda: session_repo,
        ideps.get_password_hasher: lambda: hasher,
    }
    main.app.dependency_overrides.update(overrides)

    transport = httpx.ASGITransport(app=main.app)
    async with httpx.AsyncClient(transport=transport, base_url="http://catalog:8000") as client:
        yield client

    for dependency in overrides:
        del main.app.dependency_overrides[dependency]
