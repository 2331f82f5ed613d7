#!/usr/bin/env -S uv run --script
# fmt: off
# /// script
# requires-python = ">=3.11"
# dependencies = [
#   "cyclopts>=4.0,<6.0",
#   "httpx>=0.28,<0.29",
#   "syspath-hack>=0.4.0,<0.5.0",
# ]
# ///
# fmt: on

"""Command-line entry point for tagging and releasing a commit.

Examples
--------
Release the current ``HEAD`` of ``main`` locally::

    export GITHUB_REPOSITORY=owner/repo
    export GITHUB_OUTPUT="$(mktemp)"
    INPUT_COMMIT=main INPUT_GITHUB_TOKEN="$(gh auth token)" uv run tag_release.py
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
import httpx
from cyclopts import App, Parameter
from syspath_hack import prepend_project_root, prepend_to_syspath

# Add script directory to path for tag_release_common import and the project
# root for actions_common, which the package also uses.
_SCRIPT_DIR = Path(__file__).resolve().parent
prepend_to_syspath(_SCRIPT_DIR)
prepend_project_root(start=_SCRIPT_DIR)

from tag_release_common import (
    GithubClient,
    ReleaseError,
    ReleaseInputs,
    build_outputs,
    load_repository,
    release_commit,
    write_github_output,
    write_step_summary,
)
from tag_release_common.environment import optional_env_path

from actions_common import emit_error, normalize_input_env

app: App = App(
    help="Tag a commit with a timestamp-derived tag and publish a release.",
    config=cyclopts.config.Env("INPUT_", command=False),
)


@app.default
def main(
    *,
    commit: typ.Annotated[str, Parameter(required=True)],
    github_token: typ.Annotated[str, Parameter(required=True)],
    tag_format: str = "",
    release_name: str = "",
) -> None:
    """Create a release for ``commit`` and export the workflow outputs.

    Parameters
    ----------
    commit
        Commit SHA, branch or tag to release.
    github_token
        Token used to authenticate against the GitHub API.
    tag_format
        Tag template. Blank selects ``{YYYY}{MM}{DD}-{HH}{mm}{ss}-{sha:7}``.
    release_name
        Release name template where ``{tag}`` is replaced by the tag. Blank
        selects ``Release {tag}``.

    Raises
    ------
    SystemExit
        Raised with exit code ``1`` when the release already exists or any
        step of the run fails.
    """
    try:
        inputs = ReleaseInputs.from_raw(
            commit=commit, tag_format=tag_format, release_name=release_name
        )
        repository = load_repository()
        with GithubClient(repository, github_token) as github:
            result = release_commit(github, inputs)
        if github_output := optional_env_path("GITHUB_OUTPUT"):
            write_github_output(github_output, build_outputs(result))
        if summary := optional_env_path("GITHUB_STEP_SUMMARY"):
            write_step_summary(summary, result)
    except (ReleaseError, httpx.HTTPError, ValueError, OSError) as exc:
        emit_error(exc, title="Release Failure")
        raise SystemExit(1) from exc
    except Exception as exc:  # noqa: BLE001
        emit_error(f"Unexpected failure: {exc}", title="Release Failure")
        raise SystemExit(1) from exc

    print(f"Created release '{result.release_name}' with tag '{result.tag}'")


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO, format="%(levelname)s %(name)s: %(message)s"
    )
    normalize_input_env()
    app()
