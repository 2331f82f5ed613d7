"""Utilities for writing workflow outputs and the step summary."""

from __future__ import annotations

import datetime as dt
import typing as typ

from actions_common import escape_command_data

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .pipeline import ReleaseResult

__all__ = [
    "SHORT_SHA_LENGTH",
    "build_outputs",
    "format_iso_timestamp",
    "write_github_output",
    "write_step_summary",
]

SHORT_SHA_LENGTH = 7


def format_iso_timestamp(timestamp: dt.datetime) -> str:
    """Return ``timestamp`` as a UTC ISO 8601 string with millisecond precision.

    >>> format_iso_timestamp(dt.datetime(2024, 4, 26, 14, 30, 45, tzinfo=dt.UTC))
    '2024-04-26T14:30:45.000Z'
    """
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(dt.UTC)
    return timestamp.strftime("%Y-%m-%dT%H:%M:%S.") + f"{timestamp.microsecond // 1000:03d}Z"


def build_outputs(result: ReleaseResult) -> dict[str, str]:
    """Assemble the action outputs describing ``result``."""
    return {
        "tag": result.tag,
        "iso-date": format_iso_timestamp(result.committed_at),
        "short-sha": result.sha[:SHORT_SHA_LENGTH],
        "long-sha": result.sha,
    }


def _format_scalar_output(key: str, value: str) -> str:
    """Format a value for GitHub Actions output with escaping."""
    return f"{key}={escape_command_data(value)}\n"


def write_github_output(file: Path, values: dict[str, str]) -> None:
    """Append ``values`` to the GitHub Actions output ``file``.

    Parameters
    ----------
    file
        Target ``GITHUB_OUTPUT`` file that receives the exported values.
    values
        Mapping of output names to values.
    """
    file.parent.mkdir(parents=True, exist_ok=True)
    with file.open("a", encoding="utf-8") as handle:
        for key, value in values.items():
            handle.write(_format_scalar_output(key, value))


def write_step_summary(file: Path, result: ReleaseResult) -> None:
    """Append a Markdown release summary to ``GITHUB_STEP_SUMMARY``."""
    heading = "## Release summary\n"
    lines = [
        f"- Release: {result.release_name}\n",
        f"- Tag: `{result.tag}`\n",
        f"- Commit: `{result.sha}` ({format_iso_timestamp(result.committed_at)})\n",
    ]
    if result.html_url:
        lines.append(f"- URL: {result.html_url}\n")

    prefix = "\n" if file.exists() and file.stat().st_size > 0 else ""
    file.parent.mkdir(parents=True, exist_ok=True)
    with file.open("a", encoding="utf-8") as fh:
        fh.write(prefix + heading)
        for line in lines:
            fh.write(line)
