# funcionarios/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

class Settings(BaseSettings):
    APP_NAME: str = "API de Funcionários"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "API para gerenciamento de funcionários."
    ENVIRONMENT: str = "production"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # MySQL
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_NAME: str = "empresa"
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_CHARSET: str = "utf8mb4"
    DATABASE_URL: str | None = None

    # pool limitado: esgotado, a requisição falha em vez de esperar para sempre
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT: float = 10.0
    DB_POOL_RECYCLE: int = 3600
    DB_CREATE_TABLES: bool = True

    PAGE_LIMIT_DEFAULT: int = 10
    PAGE_LIMIT_MAX: int = 100

    LOG_LEVEL: str = "INFO"
    REQUEST_LOGGING: bool = False
    SERVE_STATIC: bool = False
    STATIC_DIR: str = "./static"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() in {"development", "dev"}

    @property
    def static_path(self) -> Path:
        return Path(self.STATIC_DIR).expanduser().resolve()

    @property
    def sqlalchemy_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
            f"?charset={self.DB_CHARSET}"
        )

@lru_cache
def get_settings() -> Settings:
    return Settings()
