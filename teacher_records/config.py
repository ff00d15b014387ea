"""Application configuration."""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        """Initialize settings from environment variables."""
        # API Settings
        self.API_TITLE: str = os.getenv("API_TITLE", "Teacher Records")
        self.API_VERSION: str = os.getenv("API_VERSION", "0.1.0")
        self.DEBUG: bool = _env_flag("DEBUG")

        # Server Settings
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "3000"))

        # Logging Settings
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development").lower()
        self.STORAGE_LOG_LEVEL: str = os.getenv(
            "STORAGE_LOG_LEVEL", self.LOG_LEVEL
        ).upper()

        # Storage Settings
        self.DATA_FILE: str = os.getenv("DATA_FILE", "teachers.json")
        self.STRICT_PERSISTENCE: bool = _env_flag("STRICT_PERSISTENCE")

    @property
    def is_production(self) -> bool:
        """Whether the service runs in the production environment."""
        return self.ENVIRONMENT == "production"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Return the global settings instance."""
    return settings
