"""Find links to known hosts inside free-form message text.

The matcher only recognises links that carry an explicit ``scheme://`` prefix,
so bare e-mail addresses, phone numbers and scheme-less domains never show up.
Every match remembers where it sat in the source string so callers can splice
replacements back in without searching again.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import re
from typing import Iterator, List, Optional, Tuple
from urllib.parse import SplitResult, urlsplit


_URL_CANDIDATE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*://[^\s<>\"`\x00-\x1f\x7f]+")
_TRAILING_PUNCTUATION = ".,:;!?'\""
_BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}


class LinkFamily(Enum):
    """Allow-lists of hosts, one per bot feature."""

    THREADS = frozenset({"threads.net", "www.threads.net"})
    TWITTER = frozenset({"twitter.com", "mobile.twitter.com", "x.com", "mobile.x.com"})

    @property
    def hosts(self) -> frozenset:
        return self.value


@dataclass(frozen=True, slots=True)
class LinkMatch:
    """A parsed URL and the ``[start, end)`` slice it occupied in the text."""

    url: SplitResult
    start: int
    end: int

    @property
    def span(self) -> Tuple[int, int]:
        return self.start, self.end

    @property
    def host(self) -> str:
        return self.url.hostname or ""


def find_links(text: str, family: LinkFamily) -> List[LinkMatch]:
    """Return links in ``text`` whose host belongs to ``family``, in order."""

    allowed = family.hosts
    return [match for match in _iter_links(text or "") if match.host in allowed]


def _iter_links(text: str) -> Iterator[LinkMatch]:
    for candidate in _URL_CANDIDATE.finditer(text):
        start = candidate.start()
        raw = _trim_candidate(candidate.group(0))
        if not raw:
            continue
        parsed = _parse_url(raw)
        if parsed is None:
            continue
        yield LinkMatch(url=parsed, start=start, end=start + len(raw))


def _trim_candidate(raw: str) -> str:
    """Strip sentence punctuation and unbalanced closing brackets from the end."""

    while raw:
        last = raw[-1]
        if last in _TRAILING_PUNCTUATION:
            raw = raw[:-1]
            continue
        opener = _BRACKET_PAIRS.get(last)
        if opener and raw.count(last) > raw.count(opener):
            raw = raw[:-1]
            continue
        break
    return raw


def _parse_url(raw: str) -> Optional[SplitResult]:
    try:
        parsed = urlsplit(raw)
        # .port validates the port lazily; touch it so bad ports are rejected here
        parsed.port
    except ValueError:
        return None
    if not parsed.hostname:
        return None
    return parsed


__all__ = ["LinkFamily", "LinkMatch", "find_links"]
