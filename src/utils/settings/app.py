from pydantic_settings import BaseSettings, SettingsConfigDict

from src.utils.settings.auth import AuthSettings


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENVIRONMENT: str = "DEV"
    API_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # Security settings
    MAX_REQUEST_SIZE: int = 1 * 1024 * 1024  # 1MB

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.upper() == "PROD"

    def validate_prod(self, auth_settings: AuthSettings | None = None) -> None:
        """Sanity checks for production environment."""
        if self.is_production:
            if not self.CORS_ORIGINS:
                raise ValueError("CORS_ORIGINS must be set in production")
            auth_settings = auth_settings or AuthSettings()
            if not auth_settings.SUPABASE_JWT_SECRET.strip():
                raise ValueError("SUPABASE_JWT_SECRET must be set in production")
