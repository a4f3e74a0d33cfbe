import os
from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import URL

BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
ENV_PATH = BASE_DIR / f".env.{ENVIRONMENT}"

# Key of the caller identity in the cookie session
SESSION_USER_KEY = "user"


class Settings(BaseSettings):
    TITLE: str = "Movie Review Service"
    ENVIRONMENT: str = "dev"
    VERSION: str = "1.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Relational store
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str | None = None
    DB_PASSWORD: str | None = None
    DB_NAME: str | None = None
    TEST_DATABASE_URL: str | None = None

    # Document store
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "movie_reviews"

    # Connection retry policy
    STORE_CONNECT_RETRIES: int = 3
    STORE_CONNECT_DELAY_SECONDS: float = 0.5

    # Session cookie
    SESSION_SECRET: str = "1234"

    # Auth (JWT)
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @computed_field
    @property
    def DATABASE_URL(self) -> str:  # noqa: N802
        """Picks the relational store URL based on ENVIRONMENT."""
        if self.ENVIRONMENT == "test":
            if not self.TEST_DATABASE_URL:
                raise ValueError(f"No DATABASE_URL for {self.ENVIRONMENT} env")
            return self.TEST_DATABASE_URL

        if not self.DB_NAME:
            raise ValueError(f"No DATABASE_URL for {self.ENVIRONMENT} env")

        url = URL.create(
            drivername="postgresql+asyncpg",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )
        return url.render_as_string(hide_password=False)


settings = Settings()
