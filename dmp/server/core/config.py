"""
DMP server settings.

Values come from the process environment and an optional ``.env`` file in the
working directory, both read by pydantic-settings. Every field is bound to an
explicit, case-sensitive variable name (its alias); ``.env.example`` lists them.

Related variables are also exposed as small read-only groups, e.g.
``settings.auth`` for token verification and ``settings.cors`` for the CORS
middleware.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogFormat = Literal["simple", "detailed", "json"]


class AuthConfig(BaseModel):
    """How bearer tokens are verified."""

    model_config = ConfigDict(frozen=True)

    jwt_secret: str
    jwt_algorithm: str
    jwt_audience: Optional[str] = None
    jwt_issuer: Optional[str] = None


class CORSConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    origins: list[str]
    allow_credentials: bool
    allow_methods: list[str]
    allow_headers: list[str]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # Server and logging
    server_host: str = Field(default="0.0.0.0", alias="DMP_SERVER_HOST", description="Address to bind to")
    server_port: int = Field(default=8000, alias="DMP_SERVER_PORT", description="Port to listen on")
    log_level: str = Field(default="INFO", alias="DMP_LOG_LEVEL", description="Console log level")
    log_format: LogFormat = Field(default="detailed", alias="DMP_LOG_FORMAT", description="simple, detailed or json")
    log_file_enabled: bool = Field(
        default=False, alias="DMP_LOG_FILE_ENABLED", description="Also write logs to <DMP_LOG_FILE_DIR>/dmp.log"
    )
    log_file_dir: str = Field(default="logs", alias="DMP_LOG_FILE_DIR")

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./dmp.db",
        alias="DATABASE_URL",
        description="PostgreSQL or SQLite URL; plain driver names are switched to their async drivers",
    )
    database_auto_create: bool = Field(
        default=False,
        alias="DMP_DATABASE_AUTO_CREATE",
        description="Create missing tables on startup instead of running Alembic migrations",
    )

    # Bearer tokens; the secret is a PEM public key for RS*/ES* algorithms
    auth_jwt_secret: str = Field(default="change-me", alias="DMP_AUTH_JWT_SECRET")
    auth_jwt_algorithm: str = Field(default="HS256", alias="DMP_AUTH_JWT_ALGORITHM")
    auth_jwt_audience: Optional[str] = Field(default=None, alias="DMP_AUTH_JWT_AUDIENCE")
    auth_jwt_issuer: Optional[str] = Field(default=None, alias="DMP_AUTH_JWT_ISSUER")

    # CORS, lists are given as JSON
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def auth(self) -> AuthConfig:
        return AuthConfig(
            jwt_secret=self.auth_jwt_secret,
            jwt_algorithm=self.auth_jwt_algorithm,
            jwt_audience=self.auth_jwt_audience,
            jwt_issuer=self.auth_jwt_issuer,
        )

    @property
    def cors(self) -> CORSConfig:
        return CORSConfig(
            origins=self.cors_origins,
            allow_credentials=self.cors_allow_credentials,
            allow_methods=self.cors_allow_methods,
            allow_headers=self.cors_allow_headers,
        )


settings = Settings()
