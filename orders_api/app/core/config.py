"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all; override them via
environment variables when deploying.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Orders API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    # ``development`` enables the interactive documentation by default,
    # any other value hides it unless ``ENABLE_DOCS`` is set.
    environment: str = os.getenv("ENVIRONMENT", "development")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    enable_docs: bool = _env_flag("ENABLE_DOCS")

    # Redirect plain HTTP requests to HTTPS.  Off by default because the
    # service is usually run locally behind uvicorn without TLS.
    https_redirect: bool = _env_flag("HTTPS_REDIRECT")

    root_message: str = os.getenv(
        "ROOT_MESSAGE",
        "Orders API is running. Open /docs to browse the endpoints.",
    )

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    @property
    def docs_enabled(self) -> bool:
        """Whether ``/docs`` and ``/openapi.json`` should be served."""
        return self.enable_docs or self.environment.lower() == "development"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
