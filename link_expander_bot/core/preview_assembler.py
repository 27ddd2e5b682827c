"""Turn extracted page metadata into an immutable preview record."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from .metadata_extractor import ImageKind, ImageRef, PageMetadata


class EmbedBuildError(RuntimeError):
    """Raised when the page image is not a usable URL."""


@dataclass(frozen=True, slots=True)
class PreviewRecord:
    title: str
    url: str
    description: str
    image: ImageRef


def build_preview(metadata: PageMetadata) -> PreviewRecord:
    """Assemble a :class:`PreviewRecord`; empty text fields are allowed."""

    image = metadata.image_ref
    if image.kind is not ImageKind.NONE and not _is_valid_image_url(image.url or ""):
        raise EmbedBuildError(f"Image URL {image.url!r} is not a valid http(s) URL")
    return PreviewRecord(
        title=metadata.title,
        url=metadata.canonical_url,
        description=metadata.description,
        image=image,
    )


def _is_valid_image_url(url: str) -> bool:
    if not url or any(ch.isspace() for ch in url):
        return False
    try:
        parts = urlsplit(url)
        parts.port
    except ValueError:
        return False
    return parts.scheme in {"http", "https"} and bool(parts.hostname)


__all__ = ["EmbedBuildError", "PreviewRecord", "build_preview"]
