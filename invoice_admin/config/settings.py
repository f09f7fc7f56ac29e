"""Application settings using Pydantic Settings."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration settings."""

    # Application
    APP_NAME: str = "Invoice Admin"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite:///./invoices.db"

    # Sessions
    SECRET_KEY: str = "insecure-dev-secret-key"
    SESSION_COOKIE: str = "invoice_admin_session"

    # Routes
    INVOICES_PATH: str = "/dashboard/invoices"
    LOGIN_PATH: str = "/login"
    SIGN_IN_REDIRECT_PATH: str = "/dashboard/invoices"

    # Page cache
    PAGE_CACHE_DIR: str = "./.page_cache"
    PAGE_CACHE_TTL: int = 300

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
