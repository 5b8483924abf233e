import os
import pathlib


class Config():
    #Basic app settings
    APP_NAME = os.getenv("APP_NAME", "catalog")
    UVICORN_PORT = int(os.getenv("UVICORN_PORT", "8000"))
    UVICORN_HOST = '0.0.0.0'
    GIT_COMMIT = os.getenv("GIT_COMMIT", "[commit hash unknown]")
    MODE = os.getenv("MODE", "Local build")
    JSON_LOGS = int(os.getenv("JSON_LOGS", "0"))

    #Record store
    DATA_DIR = pathlib.Path(os.getenv("DATA_DIR", pathlib.Path.cwd() / "data"))
    SEED_DEFAULT_DATA = os.getenv("SEED_DEFAULT_DATA", "1") == "1"

    #Security settings
    DEFAULT_ADMIN_USERNAME = os.getenv("DEFAULT_ADMIN_USERNAME", "admin")
    DEFAULT_ADMIN_EMAIL = os.getenv("DEFAULT_ADMIN_EMAIL", "admin@indigenousart.com")
    DEFAULT_ADMIN_PASSWORD = os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123")
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))
    MIN_PASSWORD_LENGTH = 6

    #Sessions
    SESSION_BACKEND = os.getenv("SESSION_BACKEND", "memory") #memory | redis
    SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "catalog_session")

    #Redis (only used when SESSION_BACKEND == "redis")
    REDIS_PASS = os.getenv("REDIS_PASS")
    REDIS_URL = os.getenv("REDIS_URL", f'redis://:{REDIS_PASS}@redis:6379/0')

    #Catalog browsing
    DEFAULT_PAGE_SIZE = 9
    MAX_PAGE_SIZE = 100
    SIMILAR_LIMIT = 3
