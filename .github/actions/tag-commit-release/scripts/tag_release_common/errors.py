"""Error types shared across the tag-commit-release helper package."""

from __future__ import annotations


class ReleaseError(RuntimeError):
    """Raised when the release run cannot continue."""


class ReleaseConfigError(ReleaseError):
    """Raised when an action input or runner variable is missing or invalid."""


class GithubApiError(ReleaseError):
    """Raised when the GitHub API answers with an unexpected response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ReleaseExistsError(ReleaseError):
    """Raised when a release already exists for the computed tag."""

    def __init__(self, tag: str) -> None:
        message = (
            f"Release with tag '{tag}' already exists.\n"
            "This means the commit has already been released."
        )
        super().__init__(message)
        self.tag = tag
