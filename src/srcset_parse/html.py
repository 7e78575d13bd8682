"""Extraction of srcset attributes from HTML documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from bs4 import BeautifulSoup, Tag

from srcset_parse.candidate import ImageCandidate
from srcset_parse.config import IMAGE_TAGS, SRCSET_ATTRIBUTES
from srcset_parse.parser import parse


@dataclass(frozen=True)
class ImageSource:
    """Parsed srcset of one element attribute.

    Attributes:
        tag: Element name, "img" or "source".
        attribute: Attribute the srcset was read from.
        candidates: Parsed candidates, in attribute order.
    """

    tag: str
    attribute: str
    candidates: tuple[ImageCandidate, ...]


def extract_image_sources(html: str) -> list[ImageSource]:
    """Parse every srcset found on image elements of an HTML document.

    Elements are visited in document order; for each one, the srcset
    attributes are read in configured order. Blank attributes are skipped.
    """
    soup = BeautifulSoup(html, "lxml")
    sources: list[ImageSource] = []

    for element in cast(list[Tag], soup.find_all(list(IMAGE_TAGS))):
        for attribute in SRCSET_ATTRIBUTES:
            value = element.get(attribute)
            if not value or not isinstance(value, str) or not value.strip():
                continue
            sources.append(
                ImageSource(
                    tag=element.name,
                    attribute=attribute,
                    candidates=tuple(parse(value)),
                )
            )

    return sources
