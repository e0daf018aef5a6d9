"""
Environment configuration for the letter numbering UI.

All settings are read once at import time. Boolean flags accept
"1", "true" or "yes" (case-insensitive).
"""

import os

_TRUTHY = {"1", "true", "yes"}


def env_flag(key: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    return os.getenv(key, "true" if default else "false").lower() in _TRUTHY


def env_int(key: str, default: int) -> int:
    """Read an integer from the environment, falling back on bad values."""
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default


# Service selection: "impl" talks to the REST API, "demo" is in-memory
SERVICE_KIND = os.getenv("SURAT_UI_SERVICE", "impl").lower()

# REST API
API_URL = os.getenv("SURAT_UI_API_URL", "http://localhost:5000/api").rstrip("/")
API_TIMEOUT = float(env_int("SURAT_UI_API_TIMEOUT", 10))

# Letter listing
PAGE_SIZE = env_int("SURAT_UI_PAGE_SIZE", 10)

# Lookup cache (companies, categories, years)
CACHE_TTL = env_int("SURAT_UI_CACHE_TTL", 60 * 5)
CACHE_ENABLED = env_flag("SURAT_UI_CACHE", default=True)

# Branding
APP_TITLE = os.getenv("SURAT_UI_APP_TITLE", "Sistem Penomoran Surat")
APP_SUBTITLE = "Kelola penomoran surat perusahaan secara otomatis."

# Development server
APP_PORT = env_int("SURAT_UI_PORT", 8000)
