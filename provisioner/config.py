"""
Configuration management for Domain Provisioner.
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

from .domains.client import DEFAULT_API_BASE


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting platform
    api_base: str = DEFAULT_API_BASE
    api_token: str = ""
    project_id: str = ""
    team_id: str = ""  # empty means no team scoping

    # Guards the tenant-creation hook
    admin_key: str = ""

    # Network
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    # Debug mode
    debug: bool = False

    model_config = {
        "env_prefix": "PROVISIONER_",
        "env_file": ".env",
        "extra": "ignore"
    }

    def validate_required(self) -> bool:
        """Validate that required settings are configured."""
        if not self.api_token:
            raise ValueError(
                "PROVISIONER_API_TOKEN is required. "
                "Create an access token in the hosting platform account settings."
            )
        if not self.admin_key:
            raise ValueError(
                "PROVISIONER_ADMIN_KEY is required. "
                "Generate with: python -c \"import secrets; "
                "print(secrets.token_urlsafe(32))\""
            )
        return True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()
    if not settings.debug:
        try:
            settings.validate_required()
        except ValueError as e:
            logging.warning(f"Configuration warning: {e}")
    return settings
