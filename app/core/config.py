from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"
    APP_NAME: str = "hr-employee-directory"
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: str = "http://localhost:3000"

    # In-memory SQLite stands in for the real HR database.
    DATABASE_URL: str = "sqlite+pysqlite:///:memory:"
    SEED_DEMO_DATA: bool = True

    PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def is_sqlite_memory(self) -> bool:
        url = self.DATABASE_URL.strip()
        return url.startswith("sqlite") and ":memory:" in url

settings = Settings()
