"""Parser for srcset attribute values."""

from __future__ import annotations

import re
import threading

from srcset_parse.candidate import ImageCandidate
from srcset_parse.config import (
    DEFAULT_DESCRIPTOR_VALUE,
    DENSITY_DESCRIPTOR,
    WIDTH_DESCRIPTOR,
)

# Segment pattern, applied repeatedly over the whole input:
# 1. (\S*[^,\s]) is the URL: a run of non-whitespace that does not end
#    on a comma, so trailing commas are dropped and inner ones kept.
# 2. (\s+([\d.]+)(x|w))? is the optional descriptor: a number made of
#    digits and dots, then "x" (density) or "w" (width).
SRCSET_SEGMENT_PATTERN = r"(\S*[^,\s])(\s+([\d.]+)(x|w))?"

_segment_regex: re.Pattern[str] | None = None
_segment_regex_lock = threading.Lock()


def _get_segment_regex() -> re.Pattern[str]:
    """Return the compiled segment pattern, compiling it on first use."""
    global _segment_regex
    regex = _segment_regex
    if regex is None:
        with _segment_regex_lock:
            if _segment_regex is None:
                _segment_regex = re.compile(SRCSET_SEGMENT_PATTERN)
            regex = _segment_regex
    return regex


def parse(srcset: str) -> list[ImageCandidate]:
    """Parse a srcset string into its image candidates.

    Parsing is lenient and never fails: text that cannot start a URL is
    skipped, a segment without descriptor gives a bare candidate, and a
    descriptor number that is not a valid float counts as 0.0.

    Args:
        srcset: Raw srcset attribute value.

    Returns:
        Candidates in the order they appear in the input.

    Example:
        >>> parse("image1.png 1x, /lol")
        [ImageCandidate(url='image1.png', width=None, density=1.0), ImageCandidate(url='/lol', width=None, density=None)]
    """
    candidates: list[ImageCandidate] = []

    for match in _get_segment_regex().finditer(srcset):
        url, _, value, descriptor = match.groups()
        number = _parse_descriptor_value(value) if value is not None else None

        if descriptor == WIDTH_DESCRIPTOR:
            candidates.append(ImageCandidate(url=url, width=number))
        elif descriptor == DENSITY_DESCRIPTOR:
            candidates.append(ImageCandidate(url=url, density=number))
        else:
            candidates.append(ImageCandidate(url=url))

    return candidates


def _parse_descriptor_value(value: str) -> float:
    """Read a descriptor number, falling back to the default value."""
    try:
        return float(value)
    except ValueError:
        return DEFAULT_DESCRIPTOR_VALUE
