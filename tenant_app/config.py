from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str
    database_pool_size: int = 10
    database_max_overflow: int = 5

    # Platform
    platform_url: str = "https://madebykav.com"
    app_name: str = "MadeByKav"

    # Application
    environment: str = "development"
    log_level: str = "info"

    # CORS
    cors_origins: str = "http://localhost:3000"

    # Auth (JWT issued by the platform)
    jwt_secret_key: str = "CHANGE-ME-IN-PRODUCTION"
    jwt_algorithm: str = "HS256"
    auth_issuer: str = ""
    session_cookie_name: str = "platform_session"

    # Rate limits (slowapi syntax)
    rate_limit_write: str = "30/minute"

    @field_validator("database_url")
    @classmethod
    def _use_asyncpg_driver(cls, value: str) -> str:
        """Hosted platforms hand out plain ``postgres://`` URLs; the engine needs asyncpg."""
        for prefix in ("postgres://", "postgresql://"):
            if value.startswith(prefix):
                return "postgresql+asyncpg://" + value[len(prefix):]
        return value

    @field_validator("platform_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
