from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be configured via .env file or environment variables.
    """

    # Database
    DATABASE_URL: str = "sqlite:///./timetrack_admin.db"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # Application
    APP_NAME: str = "Timetrack Admin API"
    APP_VERSION: str = "0.1.0"
    API_PREFIX: str = ""
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Password hashing (passlib scheme names, first one is used for new hashes)
    PASSWORD_HASH_SCHEMES: str = "pbkdf2_sha256"

    # CORS
    CORS_ORIGINS: str = ""
    CORS_ALLOW_CREDENTIALS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS from comma-separated string"""
        if not self.CORS_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def password_hash_schemes_list(self) -> list[str]:
        return [scheme.strip() for scheme in self.PASSWORD_HASH_SCHEMES.split(",") if scheme.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


# Global settings instance
settings = Settings()
