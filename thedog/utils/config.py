"""Load and validate environment variables. Uses python-dotenv.

This module is intentionally thin and side-effect free except for loading `.env`.
Callers should use the accessor functions below rather than reading `os.environ`
directly, to keep environment handling consistent.
"""

from pathlib import Path

from dotenv import load_dotenv
import os

DEFAULT_BASE_URL = "https://api.thedogapi.com/v1"
DEFAULT_TIMEOUT_SECONDS = 60


def _project_root() -> Path:
    """Resolve project root (the directory holding the thedog package)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Uses override=True to ensure .env values take precedence over existing env vars.
    """
    env_path = _project_root() / ".env"
    load_dotenv(env_path, override=True)


def get_required(key: str) -> str:
    """
    Get required env var. Raises if missing or empty.

    Raises:
        ValueError: If key is missing or empty after trimming.
    """
    load_config()
    val = os.getenv(key, "").strip()
    if not val:
        raise ValueError(
            f"Missing required environment variable: {key}. "
            "Set it in .env or export it."
        )
    return val


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_int(key: str, default: int) -> int:
    """Get optional env var as int; return default if missing or invalid."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# --- Public config accessors ---

def dog_api_key() -> str:
    """Required: TheDogAPI key, sent as the x-api-key header."""
    return get_required("DOG_API_KEY")


def dog_api_base_url() -> str:
    """Optional: API root all request paths are appended to. Default TheDogAPI v1."""
    return get_optional("DOG_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/")


def dog_api_timeout() -> int:
    """Optional: per-request timeout in seconds. Default 60; non-positive values fall back."""
    val = get_optional_int("DOG_API_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)
    return val if val > 0 else DEFAULT_TIMEOUT_SECONDS


def log_level() -> str:
    """Optional: logging level name for setup_logger. Default INFO."""
    return get_optional("THEDOG_LOG_LEVEL", "INFO").upper()


def project_root() -> Path:
    """Project root directory."""
    return _project_root()
