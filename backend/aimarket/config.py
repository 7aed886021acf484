"""
AI Market Configuration Module

Loads environment variables for the storefront and the PayPal integration.
"""
from pydantic_settings import BaseSettings
from typing import Literal


PAYPAL_SANDBOX_API_BASE = "https://api-m.sandbox.paypal.com"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Missing PayPal credentials are a supported mode: the storefront keeps
    serving the catalog and demo activations, only live checkout is disabled.
    """

    # PayPal REST credentials
    paypal_client_id: str = ""
    paypal_client_secret: str = ""
    paypal_api_base: str = PAYPAL_SANDBOX_API_BASE

    # In-memory history sizes
    activation_log_size: int = 8
    brief_log_size: int = 6

    # Activation tokens
    activation_ttl_hours: int = 72

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def is_live(self) -> bool:
        """True when both PayPal client id and secret are configured."""
        return bool(self.paypal_client_id) and bool(self.paypal_client_secret)


# Global settings instance
settings = Settings()
