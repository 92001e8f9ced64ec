from typing import ClassVar, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_DB_USERNAME: str = "postgres"
    APP_DB_PASSWORD: str = "postgres"
    APP_DB_NAME: str = "postgres"
    # full SQLAlchemy URL, overrides the credentials above (tests use sqlite)
    DATABASE_URL: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    # fixed, never read from the environment
    DB_HOST: ClassVar[str] = "localhost"
    DB_PORT: ClassVar[int] = 5432
    APP_HOST: ClassVar[str] = "127.0.0.1"
    APP_PORT: ClassVar[int] = 8010

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg2://{quote_plus(self.APP_DB_USERNAME)}:"
            f"{quote_plus(self.APP_DB_PASSWORD)}@{self.DB_HOST}:{self.DB_PORT}/"
            f"{self.APP_DB_NAME}?sslmode=disable"
        )


settings = Settings()
