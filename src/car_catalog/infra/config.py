"""Environment-driven configuration.

Each setting is read when asked for, so tests can patch os.environ freely.
"""

from __future__ import annotations

import os

STORE_BACKENDS = ("memory", "postgres")
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_OPENAI_TIMEOUT_SECONDS = 30.0
DEFAULT_STORE_POLL_SECONDS = 2.0


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def store_backend() -> str:
    """Which document store backs the catalog: 'memory' (default) or 'postgres'."""
    backend = os.getenv("CAR_STORE_BACKEND", "memory").strip().lower()

    if backend not in STORE_BACKENDS:
        raise RuntimeError(
            f"CAR_STORE_BACKEND must be one of {', '.join(STORE_BACKENDS)}, got '{backend}'"
        )

    return backend


def store_poll_seconds() -> float:
    """How often the postgres store checks for rows written elsewhere. 0 disables."""
    raw = os.getenv("CAR_STORE_POLL_SECONDS")
    if not raw:
        return DEFAULT_STORE_POLL_SECONDS

    try:
        seconds = float(raw)
    except ValueError as exc:
        raise RuntimeError(f"CAR_STORE_POLL_SECONDS must be a number, got '{raw}'") from exc

    if seconds < 0:
        raise RuntimeError(f"CAR_STORE_POLL_SECONDS cannot be negative, got '{raw}'")

    return seconds


def openai_api_key() -> str | None:
    """API key for the completion service. None disables recommendations."""
    return os.getenv("OPENAI_API_KEY") or None


def openai_model() -> str:
    return os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL)


def openai_timeout_seconds() -> float:
    raw = os.getenv("OPENAI_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_OPENAI_TIMEOUT_SECONDS

    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"OPENAI_TIMEOUT_SECONDS must be a number, got '{raw}'") from exc
