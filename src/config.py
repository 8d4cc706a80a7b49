"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # Local asset directory served at the root path when present
    STATIC_DIRECTORY: str = os.getenv("STATIC_DIRECTORY", "public")

    # Day-first local time, e.g. 19.10.2026, 16:04:12
    REQUEST_LOG_TIME_FORMAT: str = os.getenv(
        "REQUEST_LOG_TIME_FORMAT",
        "%d.%m.%Y, %H:%M:%S",
    )

    @property
    def base_url(self) -> str:
        """URL announced when the server starts listening."""
        host = "localhost" if self.HOST in ("0.0.0.0", "") else self.HOST
        return f"http://{host}:{self.PORT}"

    def __init__(self):
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        logging.basicConfig(level=self.log_level)
        self.logger = logging.getLogger(__name__)

        self.logger.debug(
            f"Config initialized with environment={self.ENVIRONMENT}, "
            f"log_level={self.log_level}"
        )


# Create a global settings instance for import
settings = Settings()
