"""
Configuration Management
Environment-based settings for the store, JWT verification and the HTTP server
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

from app.models.cliente import ValidationProfileName

logger = structlog.get_logger(__name__)


class Settings(BaseSettings):
    # App config
    app_name: str = "BluePay - Clientes API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    port: int = 3001

    # CORS
    url_frontend: str = "http://localhost:3000"

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""

    # JWT (tokens are issued elsewhere, only verified here)
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_user_claim: str = "id"

    # Which business key the cliente routes enforce
    validation_profile: ValidationProfileName = ValidationProfileName.CRM

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator('port')
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError('PORT must be between 1 and 65535')
        return v

    @property
    def store_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    def log_config(self):
        """Log configuration (without sensitive data)"""
        logger.info(
            "Configuration loaded",
            port=self.port,
            frontend_origin=self.url_frontend,
            supabase_url=self.supabase_url or None,
            jwt_algorithm=self.jwt_algorithm,
            validation_profile=self.validation_profile.value,
        )
        if not self.jwt_secret:
            logger.warning("JWT_SECRET is not set, every authenticated request will be rejected")
        if not self.store_configured:
            logger.warning("Supabase credentials not found in environment")


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
