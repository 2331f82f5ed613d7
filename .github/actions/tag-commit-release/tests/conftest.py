"""Shared fixtures for the ``tag-commit-release`` action tests."""

from __future__ import annotations

import dataclasses
import json
import sys
import typing as typ
from pathlib import Path

import httpx
import pytest

# Add scripts directory to path
SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"
if str(SCRIPTS_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPTS_DIR))

from tag_release_common import github as github_module
from tag_release_common.config import Repository
from tag_release_common.github import GithubClient

TEST_SHA = "e4f36cb1e382e2779d3609c1336bdbe7cfb0902c"
TEST_DATE = "2024-04-26T14:30:45Z"
RELEASE_PREFIX = "/repos/owner/repo/releases"


@dataclasses.dataclass
class FakeGithubApi:
    """In-memory stand-in for the GitHub REST endpoints used by the action."""

    sha: str = TEST_SHA
    committer_date: str = TEST_DATE
    existing_releases: set[str] = dataclasses.field(default_factory=set)
    release_probe_status: int | None = None
    notes_body: str | None = "## What's Changed\n* Initial release"
    create_status: int = 201
    commit_payload: dict[str, typ.Any] | None = None
    requests: list[httpx.Request] = dataclasses.field(default_factory=list)

    def posted(self, path: str) -> dict[str, typ.Any]:
        """Return the JSON body of the last POST to ``path``."""
        for request in reversed(self.requests):
            if request.method == "POST" and request.url.path == path:
                return json.loads(request.content)
        msg = f"No POST request recorded for {path}"
        raise AssertionError(msg)

    def paths(self) -> list[str]:
        """Return ``METHOD path`` for every recorded request."""
        return [f"{request.method} {request.url.path}" for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        """Route ``request`` to the matching fake endpoint."""
        self.requests.append(request)
        path = request.url.path
        if request.method == "GET" and path.startswith("/repos/owner/repo/commits/"):
            payload = self.commit_payload or {
                "sha": self.sha,
                "commit": {"committer": {"date": self.committer_date}},
            }
            return httpx.Response(200, json=payload)
        if request.method == "GET" and path.startswith(f"{RELEASE_PREFIX}/tags/"):
            if self.release_probe_status is not None:
                return httpx.Response(self.release_probe_status, text="probe failed")
            tag = path.rsplit("/", 1)[-1]
            if tag in self.existing_releases:
                return httpx.Response(200, json={"tag_name": tag, "name": tag})
            return httpx.Response(404, json={"message": "Not Found"})
        if request.method == "POST" and path == f"{RELEASE_PREFIX}/generate-notes":
            return httpx.Response(200, json={"name": "notes", "body": self.notes_body})
        if request.method == "POST" and path == RELEASE_PREFIX:
            payload = json.loads(request.content)
            if self.create_status >= 400:
                return httpx.Response(self.create_status, text="Validation Failed")
            tag = payload["tag_name"]
            release = {
                "id": 1,
                "tag_name": tag,
                "name": payload["name"],
                "html_url": f"https://github.com/owner/repo/releases/tag/{tag}",
            }
            return httpx.Response(self.create_status, json=release)
        return httpx.Response(500, text=f"Unexpected request {request.method} {path}")


@pytest.fixture
def fake_api() -> FakeGithubApi:
    """Provide a fresh fake GitHub API."""
    return FakeGithubApi()


@pytest.fixture
def repository() -> Repository:
    """Repository coordinates matching the fake API routes."""
    return Repository(owner="owner", name="repo")


@pytest.fixture
def github_client(
    fake_api: FakeGithubApi, repository: Repository
) -> typ.Iterator[GithubClient]:
    """Return a client whose transport is served by ``fake_api``."""
    transport = httpx.MockTransport(fake_api.handler)
    with GithubClient(
        repository, "test-token", client=httpx.Client(transport=transport)
    ) as client:
        yield client


@pytest.fixture
def patched_http(monkeypatch: pytest.MonkeyPatch, fake_api: FakeGithubApi) -> FakeGithubApi:
    """Route every ``httpx.Client`` built by the GitHub module to ``fake_api``."""
    real_client = httpx.Client
    transport = httpx.MockTransport(fake_api.handler)

    def _client(**kwargs: object) -> httpx.Client:
        return real_client(transport=transport, **kwargs)

    monkeypatch.setattr(github_module.httpx, "Client", _client)
    return fake_api


@pytest.fixture
def action_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> dict[str, Path]:
    """Export the runner variables the entry point reads."""
    github_output = tmp_path / "github_output"
    summary = tmp_path / "step_summary.md"
    monkeypatch.setenv("GITHUB_REPOSITORY", "owner/repo")
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    monkeypatch.setenv("GITHUB_OUTPUT", str(github_output))
    monkeypatch.setenv("GITHUB_STEP_SUMMARY", str(summary))
    return {"output": github_output, "summary": summary}
