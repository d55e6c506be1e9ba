import json
from pathlib import Path
from typing import Annotated, List, Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Club-Verse'
    VERSION: str = '0.1.0'
    DEBUG: bool = False
    ENVIRONMENT: Literal['development', 'production'] = 'development'

    # Security - no default: the process must not start without a signing secret
    SECRET_KEY: SecretStr
    ALGORITHM: str = 'HS256'
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24
    AUTH_COOKIE_NAME: str = 'token'
    BCRYPT_ROUNDS: int = 10

    @field_validator('SECRET_KEY')
    @classmethod
    def secret_key_not_blank(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError('SECRET_KEY must not be blank')
        return v

    @property
    def COOKIE_SECURE(self) -> bool:
        return self.ENVIRONMENT == 'production'

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.startswith('['):
            return json.loads(v)
        if isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'clubverse'
    DATABASE_URL: str | None = None  # full override, e.g. sqlite+aiosqlite:///./clubverse.db

    DB_POOL_PRE_PING: bool = True
    DB_ECHO: bool = False

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:'
            f'{self.POSTGRES_PASSWORD.get_secret_value()}'
            f'@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )

    # Mail relay
    EMAIL_BACKEND: Literal['smtp', 'console'] = 'smtp'
    SMTP_HOST: str = 'smtp.gmail.com'
    SMTP_PORT: int = 587
    SMTP_TIMEOUT: float = 10.0
    EMAIL_USER: str = ''
    EMAIL_PASSWORD: SecretStr = SecretStr('')

    # Rate limiting: one budget per client IP, shared by every /api route
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT: str = '100 per 15 minutes'
    RATE_LIMIT_STORAGE_URI: str = 'memory://'


settings = Settings()  # type: ignore
