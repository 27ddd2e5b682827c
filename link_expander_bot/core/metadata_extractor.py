"""Pull Open Graph / Twitter card metadata out of a fetched page.

Only a fixed handful of ``<meta>`` tags matter for a preview. Each one is
looked up by exact attribute match and the ``content`` of the *first*
matching tag wins. Missing tags are normal: the field is simply absent.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from bs4 import BeautifulSoup


SUMMARY_CARD_TYPE = "summary"


class MetaKey(Enum):
    """Meta tags read from a page, as ``(attribute, value)`` selectors."""

    TITLE = ("property", "og:title")
    CANONICAL_URL = ("property", "og:url")
    DESCRIPTION = ("property", "og:description")
    IMAGE = ("property", "og:image")
    CARD_TYPE = ("name", "twitter:card")

    @property
    def attribute(self) -> str:
        return self.value[0]

    @property
    def attribute_value(self) -> str:
        return self.value[1]


class ImageKind(Enum):
    THUMBNAIL = "thumbnail"
    CONTENT = "content"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class ImageRef:
    """How (and whether) a preview should show the page image."""

    kind: ImageKind
    url: Optional[str] = None

    @classmethod
    def none(cls) -> "ImageRef":
        return cls(kind=ImageKind.NONE)

    @classmethod
    def thumbnail(cls, url: str) -> "ImageRef":
        return cls(kind=ImageKind.THUMBNAIL, url=url)

    @classmethod
    def content(cls, url: str) -> "ImageRef":
        return cls(kind=ImageKind.CONTENT, url=url)


@dataclass(frozen=True, slots=True)
class PageMetadata:
    title: str = ""
    canonical_url: str = ""
    description: str = ""
    image: str = ""
    card_type: str = ""

    @property
    def image_ref(self) -> ImageRef:
        return classify_image(self.image, self.card_type)


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "html.parser")


def meta_tag_content(document: BeautifulSoup, attr_name: str, attr_value: str) -> Optional[str]:
    """``content`` of the first ``<meta attr_name=attr_value>`` tag, if any.

    The attribute filter compares values verbatim, so quotes or brackets in
    ``attr_value`` need no escaping.
    """

    tag = document.find("meta", attrs={attr_name: attr_value})
    if tag is None:
        return None
    return tag.get("content")


def extract_meta_fields(document: BeautifulSoup) -> Dict[MetaKey, Optional[str]]:
    return {
        key: meta_tag_content(document, key.attribute, key.attribute_value)
        for key in MetaKey
    }


def extract_metadata(document: BeautifulSoup) -> PageMetadata:
    fields = extract_meta_fields(document)
    return PageMetadata(
        title=fields[MetaKey.TITLE] or "",
        canonical_url=fields[MetaKey.CANONICAL_URL] or "",
        description=fields[MetaKey.DESCRIPTION] or "",
        image=fields[MetaKey.IMAGE] or "",
        card_type=fields[MetaKey.CARD_TYPE] or "",
    )


def classify_image(image: Optional[str], card_type: Optional[str]) -> ImageRef:
    """``summary`` cards carry a profile avatar; anything else is content."""

    if not image:
        return ImageRef.none()
    if card_type == SUMMARY_CARD_TYPE:
        return ImageRef.thumbnail(image)
    return ImageRef.content(image)


__all__ = [
    "ImageKind",
    "ImageRef",
    "MetaKey",
    "PageMetadata",
    "classify_image",
    "extract_meta_fields",
    "extract_metadata",
    "meta_tag_content",
    "parse_html",
]
