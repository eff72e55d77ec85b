"""
Configuration management.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Config:
    """
    Application configuration.

    Loads from environment variables with sensible defaults.
    Missing gateway credentials do not block calculations, only delivery.
    """

    # Server
    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    # Messaging gateway
    gateway_base_url: str = field(
        default_factory=lambda: os.getenv("GHL_API_URL", "https://services.leadconnectorhq.com")
    )
    gateway_api_key: Optional[str] = field(default_factory=lambda: os.getenv("GHL_API_KEY"))
    gateway_location_id: Optional[str] = field(default_factory=lambda: os.getenv("GHL_LOCATION_ID"))
    gateway_api_version: str = field(
        default_factory=lambda: os.getenv("GHL_API_VERSION", "2021-07-28")
    )
    request_timeout: int = field(default_factory=lambda: int(os.getenv("REQUEST_TIMEOUT", "30")))

    # Branding used in reports and messages
    brand_name: str = field(default_factory=lambda: os.getenv("BRAND_NAME", "EnterActDFW"))
    contact_phone: str = field(default_factory=lambda: os.getenv("CONTACT_PHONE", "844-981-2937"))
    contact_email: str = field(
        default_factory=lambda: os.getenv("CONTACT_EMAIL", "info@enteractdfw.com")
    )

    # Data
    reports_dir: str = field(default_factory=lambda: os.getenv("REPORTS_DIR", "./reports"))

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from environment."""
        return cls()

    @property
    def gateway_configured(self) -> bool:
        """Whether the gateway URL, credential and location are all present."""
        return bool(self.gateway_base_url and self.gateway_api_key and self.gateway_location_id)

    def to_dict(self) -> dict:
        """Convert config to dictionary (credential redacted)."""
        return {
            "host": self.host,
            "port": self.port,
            "debug": self.debug,
            "gateway_base_url": self.gateway_base_url,
            "gateway_api_key": "***" if self.gateway_api_key else None,
            "gateway_location_id": self.gateway_location_id,
            "gateway_api_version": self.gateway_api_version,
            "request_timeout": self.request_timeout,
            "brand_name": self.brand_name,
            "contact_phone": self.contact_phone,
            "contact_email": self.contact_email,
            "reports_dir": self.reports_dir,
        }
