# favfilms/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional
from pydantic import BaseModel, Field, AliasChoices, field_validator, model_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from favfilms.common.strings.splitters import csv_to_list


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 5000
    prefix: str = ""

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173", "http://localhost:8080"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class DBConfig(BaseModel):
    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    name: str = "filmdb"
    user: str = "favfilms"
    password: str = "favfilms"
    echo: bool = False
    pool_size: int = 10
    max_overflow: int = 20
    pool_pre_ping: bool = True
    pool_recycle: int = 1800
    create_schema: bool = True  # create missing tables at startup

    @computed_field  # type: ignore[misc]
    @property
    def effective_url(self) -> str:
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


DEV_JWT_SECRET = "dev-only-secret"


class CatalogConfig(BaseModel):
    page_size: int = Field(10, ge=1, le=200, description="Fixed page size for GET /films")


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "favfilms"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # Run as an invoked function (no listening socket); lifecycle only.
    serverless: bool = Field(default=False, validation_alias=AliasChoices("SERVERLESS", "VERCEL", "serverless"))

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    db: DBConfig = DBConfig()
    catalog: CatalogConfig = CatalogConfig()

    # Optional single URL (if set, it takes precedence over db.*)
    database_url_override: Optional[str] = Field(default=None, alias="DATABASE_URL")

    # -------- Security --------
    jwt_secret: str = DEV_JWT_SECRET
    jwt_algo: str = "HS256"
    token_ttl_minutes: int = Field(1440, ge=1, description="Fixed lifetime of issued tokens")
    bcrypt_rounds: int = Field(12, ge=4, le=31)

    # -------- Testcontainers / CI toggles --------
    use_testcontainers: bool = False
    test_db_image: str = "postgres:15-alpine"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("serverless", "use_testcontainers", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    @model_validator(mode="after")
    def _require_real_secret(self):
        # the built-in secret is public; only a development run may sign with it
        if self.app_env.lower() != "development" and self.jwt_secret in ("", DEV_JWT_SECRET):
            raise ValueError(f"JWT_SECRET must be set when APP_ENV={self.app_env}")
        return self

    # ===== Convenience: DB URL =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return self.db.effective_url


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from favfilms.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
