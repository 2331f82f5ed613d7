"""Release-notes helpers."""

from __future__ import annotations

__all__ = ["MAX_NOTES_LENGTH", "TRUNCATION_MARKER", "truncate_notes"]

# GitHub rejects release bodies above 125000 characters; leave room for the marker.
MAX_NOTES_LENGTH = 124_900
TRUNCATION_MARKER = "\n\n... (truncated)"


def truncate_notes(body: str, limit: int = MAX_NOTES_LENGTH) -> str:
    """Return ``body`` cut to ``limit`` characters plus a marker when too long."""
    if len(body) <= limit:
        return body
    return body[:limit] + TRUNCATION_MARKER
