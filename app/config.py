"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, SecretStr, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class MailBackend(str, Enum):
    """How contact form messages are delivered"""

    CONSOLE = "console"
    SMTP = "smtp"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="Chef Fest", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Database settings
    database_url: str = Field(
        default="postgresql+psycopg2://cheffest@localhost:5432/cheffest",
        description="SQLAlchemy database URL",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_init_attempts: int = Field(
        default=8, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Delay between DB init attempts"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:8000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="/api", description="API route prefix")
    api_title: str = Field(
        default="Chef Fest API", description="API documentation title"
    )
    api_description: str = Field(
        default="Recipe catalog with search, saved recipes and reviews",
        description="API documentation description",
    )

    # Admin panel
    admin_username: str = Field(default="admin", description="Admin login name")
    admin_password: SecretStr = Field(
        default=SecretStr("change-me"), description="Admin login password"
    )
    session_secret_key: SecretStr = Field(
        default=SecretStr("dev-session-secret"),
        description="Secret used to sign the session cookie",
    )
    session_max_age_sec: int = Field(
        default=8 * 60 * 60, ge=60, description="Admin session lifetime"
    )

    # Mail settings (contact form)
    mail_backend: MailBackend = Field(
        default=MailBackend.CONSOLE, description="Contact mail delivery backend"
    )
    smtp_host: str = Field(default="localhost", description="SMTP server host")
    smtp_port: int = Field(default=587, ge=1, le=65535, description="SMTP port")
    smtp_user: Optional[str] = Field(default=None, description="SMTP username")
    smtp_password: Optional[SecretStr] = Field(
        default=None, description="SMTP password"
    )
    smtp_use_tls: bool = Field(default=True, description="Use STARTTLS")
    smtp_timeout_sec: float = Field(
        default=10.0, gt=0, description="SMTP connect/send timeout"
    )
    contact_sender: str = Field(
        default="no-reply@cheffest.local", description="Envelope sender address"
    )
    contact_recipient: str = Field(
        default="contact@cheffest.local",
        description="Where contact form messages are delivered",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("mail_backend", mode="before")
    @classmethod
    def validate_mail_backend(cls, v):
        if isinstance(v, str):
            return MailBackend(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT


# Global settings instance
settings = Settings()
