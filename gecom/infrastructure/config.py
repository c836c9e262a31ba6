# gecom/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    duckdb_read_only: bool
    db_connect_retries: int
    db_connect_retry_delay: float
    api_url: str
    host: str
    port: int
    cors_origins: tuple[str, ...]
    debug: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = os.environ.get("CORS_ORIGINS", "*")
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", "gecom.duckdb"),
        duckdb_read_only=os.environ.get("DUCKDB_READ_ONLY", "false").lower() == "true",
        db_connect_retries=int(os.environ.get("DB_CONNECT_RETRIES", "5")),
        db_connect_retry_delay=float(os.environ.get("DB_CONNECT_RETRY_DELAY", "2.0")),
        api_url=os.environ.get("API_URL", "http://localhost:5000/api"),
        host=os.environ.get("HOST", "0.0.0.0"),  # noqa: S104
        port=int(os.environ.get("PORT", "5000")),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
    )
