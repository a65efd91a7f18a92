"""Environment variable loading and configuration."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")


def get_env(key: str, default: str | None = None) -> str:
    """Get an environment variable or raise if missing and no default."""
    value = os.getenv(key, default)
    if value is None:
        raise ValueError(f"Missing required environment variable: {key}")
    return value


# HTTP transport
HOST = get_env("EXTRACTOR_HOST", "127.0.0.1")
PORT = int(get_env("EXTRACTOR_PORT", "8000"))

# Paths
EXPORT_DIR = Path(get_env("EXTRACTOR_EXPORT_DIR", str(_PROJECT_ROOT / "exports")))

LOG_LEVEL = get_env("LOG_LEVEL", "INFO").upper()
