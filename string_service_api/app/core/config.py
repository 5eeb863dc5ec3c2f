"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  Only
ambient concerns (naming, logging) are configurable; the listening
address of the service is fixed.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "String Service API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs go to the console
    # only.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # The service always listens on all interfaces, port 8080.  These
    # are deliberately not read from the environment.
    host: str = "0.0.0.0"
    port: int = 8080


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
