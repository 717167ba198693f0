from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    DATABASE_URL: str = "sqlite:///./portfolio.db"

    # Application
    APP_NAME: str = "Portfolio"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Session cookie holding the login token
    SECRET_KEY: str = "your-secret-key-change-in-production"
    SESSION_COOKIE: str = "portfolio_session"
    SESSION_MAX_AGE: int = 14 * 24 * 60 * 60
    SESSION_SAME_SITE: str = "lax"
    SESSION_HTTPS_ONLY: bool = False

    BACKEND_CORS_ORIGINS: str = (
        "http://3.38.237.211,"
        "http://localhost:8080"
    )

    # Default admin created on first login while the users table is empty
    BOOTSTRAP_ADMIN_ENABLED: bool = False
    BOOTSTRAP_ADMIN_USERNAME: str = "admin"
    BOOTSTRAP_ADMIN_PASSWORD: str = ""

    # Resume footer
    PROFILE_GITHUB_URL: str = ""


settings = Settings()
