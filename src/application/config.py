"""Runtime configuration loaded from environment variables."""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """
    Transaction service settings.

    Attributes
    ----------
    database_url : str
        SQLAlchemy URL of the durable store.
    redis_url : str
        Redis connection URL of the cache.
    customer_service_url : str
        Base URL of the customer lookup service.
    product_service_url : str
        Base URL of the product lookup service.
    request_timeout : float
        Timeout in seconds for each lookup call.
    cache_timeout : float
        Socket timeout in seconds for Redis.
    db_timeout : float
        Connect and pool timeout in seconds for the database.
    cache_write_strict : bool
        Whether a cache-write failure fails the request.
    log_level : str
        Logging level name.
    host : str
        Bind address of the HTTP server.
    port : int
        Bind port of the HTTP server.
    """

    database_url: str
    redis_url: str = "redis://localhost:6379/0"
    customer_service_url: str = "http://localhost:8081"
    product_service_url: str = "http://localhost:8082"
    request_timeout: float = 5.0
    cache_timeout: float = 2.0
    db_timeout: float = 5.0
    cache_write_strict: bool = True
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8083


def load_settings() -> Settings:
    """
    Load settings from the environment.

    Environment Variables
    ---------------------
    DATABASE_URL : str
        PostgreSQL connection string (required).
    REDIS_URL : str
        Redis connection string (default: 'redis://localhost:6379/0').
    CUSTOMER_SERVICE_URL : str
        Customer service base URL (default: 'http://localhost:8081').
    PRODUCT_SERVICE_URL : str
        Product service base URL (default: 'http://localhost:8082').
    REQUEST_TIMEOUT : float
        Lookup timeout in seconds (default: 5).
    CACHE_TIMEOUT : float
        Redis timeout in seconds (default: 2).
    DB_TIMEOUT : float
        Database connect/pool timeout in seconds (default: 5).
    CACHE_WRITE_STRICT : bool
        Fail requests on cache-write failure (default: true).
    LOG_LEVEL : str
        Logging level (default: 'INFO').
    HOST : str
        Bind address (default: '0.0.0.0').
    PORT : int
        Bind port (default: 8083).

    Raises
    ------
    KeyError
        If DATABASE_URL is not set.
    ValueError
        If a numeric variable does not parse.
    """
    return Settings(
        database_url=os.environ["DATABASE_URL"],
        redis_url=os.getenv("REDIS_URL", "redis://localhost:6379/0"),
        customer_service_url=os.getenv("CUSTOMER_SERVICE_URL", "http://localhost:8081"),
        product_service_url=os.getenv("PRODUCT_SERVICE_URL", "http://localhost:8082"),
        request_timeout=float(os.getenv("REQUEST_TIMEOUT", "5")),
        cache_timeout=float(os.getenv("CACHE_TIMEOUT", "2")),
        db_timeout=float(os.getenv("DB_TIMEOUT", "5")),
        cache_write_strict=_env_flag("CACHE_WRITE_STRICT", "true"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8083")),
    )
