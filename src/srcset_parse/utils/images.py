"""Image helpers built on the srcset parser."""

from __future__ import annotations

from srcset_parse.parser import parse


def first_srcset_url(srcset: str) -> str | None:
    """Extract the first URL from a srcset string."""
    candidates = parse(srcset)
    if not candidates:
        return None
    return candidates[0].url
