"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here. Variables use the STATUSPAGE_ prefix.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from statuspage.domain.pages.page import DEFAULT_CONTACT_EMAIL, DEFAULT_FOOTER


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Address the CLI server binds to.
        port: Port the CLI server listens on.
        rate_limit_default: Rate limit applied to the status page route.
        rate_limit_enabled: Turn rate limiting on or off.
        default_status_code: Code rendered when ``code`` is missing or not numeric.
        contact_email: mailto target of the contact control on 5xx pages.
        footer_text: Footer shown on every page.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="STATUSPAGE_"
    )

    project_name: str = "StatusPage"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000
    rate_limit_default: str = "60/minute"
    rate_limit_enabled: bool = True
    default_status_code: int = 404
    contact_email: str = DEFAULT_CONTACT_EMAIL
    footer_text: str = DEFAULT_FOOTER


settings = Settings()
