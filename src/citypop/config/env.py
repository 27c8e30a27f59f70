"""Environment variable loaders for configuration."""

from __future__ import annotations

import math
import os
from pathlib import Path
from urllib.parse import urlsplit

from .errors import ConfigurationError


def env_str(name: str, default: str) -> str:
    """Return the environment variable ``name`` or ``default`` when unset/blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def env_float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    above: float | None = None,
) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"Invalid number for {name}: {raw!r}") from exc
    if not math.isfinite(value):
        raise ConfigurationError(f"Invalid number for {name}: {raw!r}")
    if minimum is not None and value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    if above is not None and value <= above:
        raise ConfigurationError(f"{name} must be > {above}, got {value}")
    return value


def env_url(name: str, default: str) -> str:
    """Return an absolute http(s) URL from ``name`` or ``default``."""

    value = env_str(name, default)
    parts = urlsplit(value)
    if parts.scheme not in {"http", "https"} or not parts.netloc:
        raise ConfigurationError(f"{name} must be an absolute http(s) URL, got {value!r}")
    return value


def env_path(name: str, default: Path) -> Path:
    return Path(env_str(name, str(default))).expanduser()
