"""Minimal GitHub REST client used by the release pipeline."""

from __future__ import annotations

import dataclasses
import datetime as dt
import logging
import typing as typ
from urllib.parse import quote

import httpx

from .errors import GithubApiError

if typ.TYPE_CHECKING:
    from .config import Repository

__all__ = ["CommitInfo", "GithubClient"]

logger = logging.getLogger(__name__)

_ERROR_DETAIL_LIMIT = 1024
_JSON_PAYLOAD_PREVIEW_LIMIT = 500
_TIMEOUT_SECONDS = 30.0
_USER_AGENT = "tag-commit-release-action"

JsonObject = dict[str, typ.Any]


@dataclasses.dataclass(frozen=True, slots=True)
class CommitInfo:
    """Commit metadata needed to compute a release tag."""

    sha: str
    committed_at: dt.datetime


def _truncate_text(value: str, limit: int, *, suffix: str = "…") -> str:
    """Return ``value`` truncated to ``limit`` characters with ``suffix``."""
    if limit <= 0:
        return ""
    if len(value) <= limit:
        return value
    return value[:limit] + suffix


def _extract_error_detail(response: httpx.Response) -> str:
    """Return a truncated error detail string for exceptions."""
    detail = response.text.strip() or response.reason_phrase or ""
    return _truncate_text(detail, _ERROR_DETAIL_LIMIT)


def _raise_for_status(response: httpx.Response, action: str) -> None:
    if response.is_success:
        return
    status = response.status_code
    detail = _extract_error_detail(response) or "Unknown error"
    message = f"GitHub API request to {action} failed with status {status}: {detail}"
    raise GithubApiError(message, status_code=status)


def _decode_object(response: httpx.Response) -> JsonObject:
    try:
        payload = response.json()
    except ValueError as exc:
        preview = _truncate_text(
            response.text, _JSON_PAYLOAD_PREVIEW_LIMIT, suffix="..."
        )
        message = f"GitHub API returned invalid JSON. Raw payload (truncated): {preview}"
        raise GithubApiError(message, status_code=response.status_code) from exc
    if not isinstance(payload, dict):
        message = "GitHub API response was not a JSON object."
        raise GithubApiError(message, status_code=response.status_code)
    return payload


def _parse_commit(payload: JsonObject) -> CommitInfo:
    """Extract the hash and committer date from a commit payload."""
    sha = payload.get("sha")
    commit = payload.get("commit")
    committer = commit.get("committer") if isinstance(commit, dict) else None
    date = committer.get("date") if isinstance(committer, dict) else None
    if not isinstance(sha, str) or not sha:
        message = "GitHub commit response is missing 'sha'."
        raise GithubApiError(message)
    if not isinstance(date, str) or not date:
        message = "GitHub commit response is missing 'commit.committer.date'."
        raise GithubApiError(message)
    try:
        committed_at = dt.datetime.fromisoformat(date)
    except ValueError as exc:
        message = f"GitHub returned an unparseable committer date: {date!r}"
        raise GithubApiError(message) from exc
    if committed_at.tzinfo is None:
        committed_at = committed_at.replace(tzinfo=dt.UTC)
    return CommitInfo(sha=sha, committed_at=committed_at.astimezone(dt.UTC))


class GithubClient:
    """Issue the handful of REST calls the release pipeline needs.

    Requests are made once; failures surface as :class:`GithubApiError` or
    :class:`httpx.HTTPError` without retrying.
    """

    def __init__(
        self,
        repository: Repository,
        token: str,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self.repository = repository
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": _USER_AGENT,
        }
        if client is None:
            client = httpx.Client(timeout=httpx.Timeout(_TIMEOUT_SECONDS))
        client.headers.update(headers)
        self._client = client

    def __enter__(self) -> typ.Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self._client.close()

    def _url(self, *segments: str) -> str:
        repo = self.repository
        path = "/".join(quote(segment, safe="") for segment in segments)
        return f"{repo.api_url}/repos/{repo.owner}/{repo.name}/{path}"

    def _get(self, *segments: str) -> httpx.Response:
        url = self._url(*segments)
        logger.debug("GET %s", url)
        return self._client.get(url, follow_redirects=False)

    def _post(self, payload: JsonObject, *segments: str) -> httpx.Response:
        url = self._url(*segments)
        logger.debug("POST %s", url)
        return self._client.post(url, json=payload, follow_redirects=False)

    def get_commit(self, ref: str) -> CommitInfo:
        """Return the hash and committer date of ``ref``."""
        response = self._get("commits", ref)
        _raise_for_status(response, f"fetch commit '{ref}'")
        return _parse_commit(_decode_object(response))

    def get_release_by_tag(self, tag: str) -> JsonObject | None:
        """Return the release published under ``tag`` or ``None`` if absent."""
        response = self._get("releases", "tags", tag)
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        _raise_for_status(response, f"look up release '{tag}'")
        return _decode_object(response)

    def generate_release_notes(self, tag: str, target: str) -> str:
        """Ask GitHub to generate release notes for ``tag`` at ``target``."""
        payload = {"tag_name": tag, "target_commitish": target}
        response = self._post(payload, "releases", "generate-notes")
        _raise_for_status(response, f"generate release notes for '{tag}'")
        body = _decode_object(response).get("body")
        return body if isinstance(body, str) else ""

    def create_release(self, *, tag: str, name: str, body: str, target: str) -> JsonObject:
        """Create a published release for ``tag`` pointing at ``target``."""
        payload = {
            "tag_name": tag,
            "name": name,
            "body": body,
            "target_commitish": target,
        }
        response = self._post(payload, "releases")
        _raise_for_status(response, f"create release '{tag}'")
        return _decode_object(response)
