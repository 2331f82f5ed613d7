"""Input models and loaders for the tag-commit-release action."""

from __future__ import annotations

import dataclasses
import os

from .environment import require_env
from .errors import ReleaseConfigError
from .tag_format import DEFAULT_TAG_FORMAT

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_RELEASE_NAME",
    "ReleaseInputs",
    "Repository",
    "load_repository",
    "parse_repository",
    "render_release_name",
]

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_RELEASE_NAME = "Release {tag}"
_TAG_TOKEN = "{tag}"


@dataclasses.dataclass(frozen=True, slots=True)
class Repository:
    """Repository coordinates on the GitHub API."""

    owner: str
    name: str
    api_url: str = DEFAULT_API_URL

    @property
    def full_name(self) -> str:
        """Return ``owner/name``."""
        return f"{self.owner}/{self.name}"


@dataclasses.dataclass(frozen=True, slots=True)
class ReleaseInputs:
    """Action inputs controlling a single release run."""

    commit: str
    tag_format: str = DEFAULT_TAG_FORMAT
    release_name: str = DEFAULT_RELEASE_NAME

    @classmethod
    def from_raw(
        cls,
        *,
        commit: str,
        tag_format: str | None = None,
        release_name: str | None = None,
    ) -> ReleaseInputs:
        """Build inputs from raw action values, applying defaults for blanks.

        The action runner forwards omitted optional inputs as empty strings,
        so whitespace-only values select the defaults as well.
        """
        commit = commit.strip()
        if not commit:
            msg = "Input 'commit' is required."
            raise ReleaseConfigError(msg)
        return cls(
            commit=commit,
            tag_format=_or_default(tag_format, DEFAULT_TAG_FORMAT),
            release_name=_or_default(release_name, DEFAULT_RELEASE_NAME),
        )


def _or_default(value: str | None, default: str) -> str:
    if value is None or not value.strip():
        return default
    return value


def parse_repository(value: str, *, api_url: str = DEFAULT_API_URL) -> Repository:
    """Split an ``owner/repo`` slug into a :class:`Repository`.

    Raises
    ------
    ReleaseConfigError
        Raised when ``value`` is not of the form ``owner/repo``.
    """
    owner, sep, name = value.strip().partition("/")
    if not sep or not owner or not name or "/" in name:
        msg = f"Expected GITHUB_REPOSITORY in 'owner/repo' form, got {value!r}."
        raise ReleaseConfigError(msg)
    return Repository(owner=owner, name=name, api_url=api_url.rstrip("/"))


def load_repository() -> Repository:
    """Resolve the target repository from the runner environment."""
    slug = require_env("GITHUB_REPOSITORY")
    api_url = os.environ.get("GITHUB_API_URL", "").strip() or DEFAULT_API_URL
    return parse_repository(slug, api_url=api_url)


def render_release_name(template: str, tag: str) -> str:
    """Replace every ``{tag}`` in ``template`` with ``tag``."""
    return template.replace(_TAG_TOKEN, tag)
