"""Tag and release a single commit."""

from __future__ import annotations

import dataclasses
import datetime as dt
import logging
import typing as typ

from .config import render_release_name
from .errors import ReleaseExistsError
from .notes import truncate_notes
from .tag_format import generate_tag

if typ.TYPE_CHECKING:
    from .config import ReleaseInputs
    from .github import GithubClient

__all__ = ["ReleaseResult", "release_commit"]


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class ReleaseResult:
    """Outcome of :func:`release_commit`."""

    tag: str
    release_name: str
    sha: str
    committed_at: dt.datetime
    html_url: str = ""


def release_commit(client: GithubClient, inputs: ReleaseInputs) -> ReleaseResult:
    """Create a release for ``inputs.commit`` under a generated tag.

    Parameters
    ----------
    client
        GitHub client bound to the target repository.
    inputs
        Commit reference and templates for the tag and release name.

    Returns
    -------
    ReleaseResult
        The tag, release name and commit details of the created release.

    Raises
    ------
    ReleaseExistsError
        Raised when a release is already published under the generated tag.
    GithubApiError
        Raised when any API call fails. A failed existence probe other than
        ``404 Not Found`` is propagated unchanged.
    """
    commit = client.get_commit(inputs.commit)
    tag = generate_tag(commit.committed_at, commit.sha, inputs.tag_format)
    logger.info("Resolved %s to %s; tag %s", inputs.commit, commit.sha, tag)

    if client.get_release_by_tag(tag) is not None:
        raise ReleaseExistsError(tag)

    release_name = render_release_name(inputs.release_name, tag)
    notes = client.generate_release_notes(tag, inputs.commit)
    body = truncate_notes(notes)
    if len(body) != len(notes):
        logger.warning(
            "Release notes truncated from %d to %d characters", len(notes), len(body)
        )

    release = client.create_release(
        tag=tag, name=release_name, body=body, target=commit.sha
    )
    html_url = release.get("html_url")
    return ReleaseResult(
        tag=tag,
        release_name=release_name,
        sha=commit.sha,
        committed_at=commit.committed_at,
        html_url=html_url if isinstance(html_url, str) else "",
    )
