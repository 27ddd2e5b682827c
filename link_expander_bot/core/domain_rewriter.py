"""Swap link hosts for embed-friendly mirrors, editing the text in place."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from types import MappingProxyType
from typing import Iterable, Mapping
from urllib.parse import urlsplit

from .link_matcher import LinkMatch


logger = logging.getLogger(__name__)

_HOST_LABELS = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?(?:\.[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?)*$")


class RewriteError(ValueError):
    """Raised when a URL cannot be rebuilt around a new host."""


@dataclass(frozen=True, slots=True)
class RewriteRule:
    """Static source-host -> mirror-host table for one family of links."""

    replacements: Mapping[str, str]
    default_host: str

    def __post_init__(self) -> None:
        sources = set(self.replacements)
        chained = sources.intersection(self.replacements.values())
        if chained:
            raise ValueError(f"Replacement hosts must not be rewritten again: {sorted(chained)}")
        if self.default_host in sources:
            raise ValueError(f"Default host {self.default_host!r} is itself a source host")
        object.__setattr__(self, "replacements", MappingProxyType(dict(self.replacements)))

    def replacement_for(self, host: str) -> str:
        replacement = self.replacements.get(host)
        if replacement is None:
            # TODO: decide whether an allow-listed host without a table entry should fail loudly
            logger.warning(
                "No rewrite entry for host %s; falling back to %s", host, self.default_host
            )
            return self.default_host
        return replacement


TWITTER_REWRITE_RULE = RewriteRule(
    replacements={
        "twitter.com": "fxtwitter.com",
        "mobile.twitter.com": "fxtwitter.com",
        "x.com": "fixupx.com",
        "mobile.x.com": "fixupx.com",
    },
    default_host="fxtwitter.com",
)


def rewrite_url(link: str, new_host: str) -> str:
    """Return ``link`` with its host replaced by ``new_host``.

    Only the host inside the authority changes; credentials, port and every
    character after the authority are copied verbatim, so empty ``?`` or
    ``#`` markers survive. An empty path on an ``http(s)`` URL becomes ``/``,
    matching how browsers serialise such links.
    """

    if not new_host or not _HOST_LABELS.match(new_host):
        raise RewriteError(f"Invalid host {new_host!r}")
    try:
        url = urlsplit(link)
        port = url.port
    except ValueError as exc:
        raise RewriteError(f"Cannot parse {link!r}") from exc
    if not url.hostname:
        raise RewriteError(f"URL {link!r} has no host to replace")

    authority_start = len(url.scheme) + len("://")
    authority_end = authority_start + len(url.netloc)
    if (
        link[:authority_start].lower() != f"{url.scheme}://"
        or link[authority_start:authority_end] != url.netloc
    ):
        raise RewriteError(f"URL {link!r} has no plain authority to rewrite")

    userinfo, at, host_and_port = url.netloc.rpartition("@")
    netloc = new_host
    if port is not None:
        netloc += host_and_port[host_and_port.rfind(":") :]
    if at:
        netloc = f"{userinfo}@{netloc}"

    rest = link[authority_end:]
    if not rest.startswith("/") and url.scheme in {"http", "https"}:
        rest = "/" + rest
    return link[:authority_start] + netloc + rest


def rewrite(
    text: str,
    matches: Iterable[LinkMatch],
    rule: RewriteRule = TWITTER_REWRITE_RULE,
) -> str:
    """Rewrite every matched link in ``text`` according to ``rule``.

    Matches are spliced from the highest start offset down, so a replacement
    of a different length never shifts the offsets of links still waiting to
    be processed. A link that cannot be rebuilt is left as it was.
    """

    result = text
    for match in sorted(matches, key=lambda m: m.start, reverse=True):
        try:
            replacement = rewrite_url(text[match.start : match.end], rule.replacement_for(match.host))
        except RewriteError as exc:
            logger.warning("Leaving link at %s unchanged: %s", match.span, exc)
            continue
        result = result[: match.start] + replacement + result[match.end :]
    return result


__all__ = ["RewriteError", "RewriteRule", "TWITTER_REWRITE_RULE", "rewrite", "rewrite_url"]
