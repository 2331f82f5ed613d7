"""Shared helpers for GitHub Actions scripts."""

from __future__ import annotations

import os
import sys
import typing as typ

__all__ = ["emit_error", "escape_command_data", "normalize_input_env"]


def normalize_input_env(prefix: str = "INPUT_") -> None:
    """Rewrite dashed ``INPUT_`` keys such as ``INPUT_TAG-FORMAT`` to underscores.

    The runner exports action inputs verbatim, so an input named
    ``tag-format`` arrives as ``INPUT_TAG-FORMAT``. Existing underscore keys
    win; dashed variants are always removed.
    """
    alt_prefix = prefix.replace("_", "-")
    dashed = [
        key
        for key in os.environ
        if key.startswith((prefix, alt_prefix)) and "-" in key
    ]
    for key in dashed:
        value = os.environ.pop(key)
        os.environ.setdefault(key.replace("-", "_"), value)


def escape_command_data(value: str) -> str:
    """Escape ``value`` for use as workflow command data.

    >>> escape_command_data("50%\\ndone")
    '50%25%0Adone'
    """
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return escape_command_data(value).replace(":", "%3A").replace(",", "%2C")


def emit_error(
    message: object, *, title: str | None = None, stream: typ.TextIO | None = None
) -> None:
    """Print an ``::error`` workflow command so the runner annotates the run."""
    target = stream if stream is not None else sys.stderr
    properties = f" title={_escape_property(title)}" if title else ""
    print(f"::error{properties}::{escape_command_data(str(message))}", file=target)
