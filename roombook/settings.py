from typing import Optional
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_TITLE: str = "Roombook"
    APP_VERSION: str = "1.0.0"

    DATABASE_URL: SecretStr
    DATABASE_NAME: str = "roombook"

    SESSION_SECRET: SecretStr
    SESSION_COOKIE_NAME: str = "roombook_session"
    SESSION_MAX_AGE: int = 14 * 24 * 60 * 60
    SESSION_HTTPS_ONLY: bool = False

    ALLOWED_ORIGINS: Optional[str] = None

    DEFAULT_FIELD_LABEL: str = "Feld"

    ROOMS_PAGE_SIZE: int = 20
    MAX_ROOM_NAME: int = 255
    MAX_ROOM_LOCATION: int = 255
    MAX_ROOM_NR: int = 10

    MIN_PASSWORD_LENGTH: int = 8
    ADMIN_USERNAME: Optional[str] = None
    ADMIN_PASSWORD: Optional[SecretStr] = None
    MAX_USERNAME: int = 32

    # Schemes the click counter may redirect to, relative URLs are always allowed
    REDIRECT_ALLOWED_SCHEMES: str = "http,https"

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    model_config = SettingsConfigDict(env_file=".env")


settings = Settings(**{})
