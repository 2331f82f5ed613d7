"""Helper package for tagging and releasing a commit.

This package renders deterministic tags from commit metadata, talks to the
GitHub REST API to create the release, and writes the GitHub Actions outputs.
"""

from __future__ import annotations

from .config import ReleaseInputs, Repository, load_repository, render_release_name
from .errors import GithubApiError, ReleaseConfigError, ReleaseError, ReleaseExistsError
from .github import CommitInfo, GithubClient
from .output import build_outputs, write_github_output, write_step_summary
from .pipeline import ReleaseResult, release_commit
from .tag_format import DEFAULT_TAG_FORMAT, generate_tag, pad

__all__ = [
    "DEFAULT_TAG_FORMAT",
    "CommitInfo",
    "GithubApiError",
    "GithubClient",
    "ReleaseConfigError",
    "ReleaseError",
    "ReleaseExistsError",
    "ReleaseInputs",
    "ReleaseResult",
    "Repository",
    "build_outputs",
    "generate_tag",
    "load_repository",
    "pad",
    "release_commit",
    "render_release_name",
    "write_github_output",
    "write_step_summary",
]
