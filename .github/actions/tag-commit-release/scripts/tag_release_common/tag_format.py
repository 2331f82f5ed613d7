"""Render release tags from a commit timestamp and hash.

Templates mix literal text with brace-delimited tokens. Substitution runs in
three passes so that length-qualified hash tokens are consumed before the
bare hash token is considered:

1. ``{sha:N}`` becomes the first ``N`` characters of the hash.
2. ``{sha}`` becomes the full hash.
3. Calendar tokens (``{YYYY}``, ``{MM}``, ``{ss}`` and friends) are replaced
   as exact literal strings.

Anything else in braces is left untouched.

Examples
--------
>>> import datetime as dt
>>> ts = dt.datetime(2024, 4, 26, 14, 30, 45, tzinfo=dt.UTC)
>>> generate_tag(ts, "e4f36cb1e382e2779d3609c1336bdbe7cfb0902c", DEFAULT_TAG_FORMAT)
'20240426-143045-e4f36cb'
"""

from __future__ import annotations

import datetime as dt
import re

__all__ = ["DEFAULT_TAG_FORMAT", "generate_tag", "pad"]

DEFAULT_TAG_FORMAT = "{YYYY}{MM}{DD}-{HH}{mm}{ss}-{sha:7}"

_SHA_PREFIX_PATTERN = re.compile(r"\{sha:([0-9]+)\}")
_SHA_TOKEN = "{sha}"


def pad(value: int, width: int = 2) -> str:
    """Return ``value`` as a decimal string left-padded with zeros to ``width``.

    Values that already have ``width`` digits or more are returned unchanged.

    >>> pad(5)
    '05'
    >>> pad(123)
    '123'
    """
    return str(value).rjust(width, "0")


def _sha_prefix(sha: str, digits: str) -> str:
    """Return the first ``digits`` characters of ``sha``.

    Counts with more significant digits than ``len(sha)`` select the whole
    hash.
    """
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(len(sha))):
        return sha
    return sha[: int(significant)]


def _calendar_tokens(timestamp: dt.datetime) -> list[tuple[str, str]]:
    """Return calendar tokens and their rendered values in substitution order."""
    year = str(timestamp.year)
    return [
        ("{YYYY}", year),
        ("{YY}", year[-2:]),
        ("{MM}", pad(timestamp.month)),
        ("{M}", str(timestamp.month)),
        ("{DD}", pad(timestamp.day)),
        ("{D}", str(timestamp.day)),
        ("{HH}", pad(timestamp.hour)),
        ("{H}", str(timestamp.hour)),
        ("{mm}", pad(timestamp.minute)),
        ("{m}", str(timestamp.minute)),
        ("{ss}", pad(timestamp.second)),
        ("{s}", str(timestamp.second)),
    ]


def _as_utc(timestamp: dt.datetime) -> dt.datetime:
    """Return ``timestamp`` in UTC, treating naive values as already UTC."""
    if timestamp.tzinfo is None:
        return timestamp
    return timestamp.astimezone(dt.UTC)


def generate_tag(timestamp: dt.datetime, sha: str, template: str) -> str:
    """Render ``template`` for a commit made at ``timestamp`` with hash ``sha``.

    Parameters
    ----------
    timestamp
        Committer timestamp. Aware values are converted to UTC.
    sha
        Commit hash, used as an opaque character sequence.
    template
        Tag template containing literal text and placeholder tokens.

    Returns
    -------
    str
        The rendered tag. Unknown placeholders are preserved verbatim.
    """
    tag = _SHA_PREFIX_PATTERN.sub(
        lambda match: _sha_prefix(sha, match.group(1)), template
    )
    tag = tag.replace(_SHA_TOKEN, sha)
    for token, value in _calendar_tokens(_as_utc(timestamp)):
        tag = tag.replace(token, value)
    return tag
