from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 3000
TEST_PORT = 3001


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///./dogs.db"
    APP_ENV: str = "development"
    HOST: str = "0.0.0.0"
    # Explicit override; otherwise derived from APP_ENV (see `port`).
    PORT: Optional[int] = None

    LOG_LEVEL: str = "INFO"
    # "json" for structured output, "text" for local development.
    LOG_FORMAT: str = "json"

    SQLALCHEMY_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = True

    # Comma-separated allowed origins, or "*" to allow all.
    CORS_ORIGINS: str = "*"

    @property
    def port(self) -> int:
        if self.PORT is not None:
            return self.PORT
        return TEST_PORT if self.APP_ENV == "test" else DEFAULT_PORT

    @property
    def cors_origins_list(self) -> list[str]:
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
