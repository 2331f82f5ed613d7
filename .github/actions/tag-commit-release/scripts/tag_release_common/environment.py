"""Environment helpers for the tag-commit-release action."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import ReleaseConfigError

__all__ = ["optional_env_path", "require_env"]


def require_env(name: str) -> str:
    """Return the value of ``name`` or raise :class:`ReleaseConfigError`.

    Parameters
    ----------
    name
        Name of the environment variable to fetch.

    Returns
    -------
    str
        The non-empty value of the environment variable.

    Raises
    ------
    ReleaseConfigError
        Raised when the environment variable is unset or empty.
    """
    value = os.environ.get(name)
    if not value:
        msg = f"Environment variable '{name}' is not set."
        raise ReleaseConfigError(msg)
    return value


def optional_env_path(name: str) -> Path | None:
    """Return ``Path`` for ``name`` when set, otherwise ``None``."""
    value = os.environ.get(name, "").strip()
    return Path(value) if value else None
