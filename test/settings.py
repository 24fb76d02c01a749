"""
Settings for the test suite, read from the environment or ``test/.env``.

By default everything runs against in-memory SQLite and tokens are signed
with a throwaway secret, so no external service is needed.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SuiteSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent / ".env"),
        extra="ignore",
        case_sensitive=True,
    )

    database_url: str = Field(default="sqlite+aiosqlite:///:memory:", alias="TEST_DATABASE_URL")
    jwt_secret: str = Field(default="test-signing-secret-with-enough-length", alias="TEST_AUTH_JWT_SECRET")


test_settings = SuiteSettings()
