"""URL helpers for image candidates."""

from __future__ import annotations

from urllib.parse import urljoin

from srcset_parse.config import DEFAULT_IMAGE_SCHEME


def resolve_image_url(base_url: str, url: str) -> str:
    """Resolve a potentially relative image URL to an absolute one.

    Rules:
    - Protocol-relative URLs get the default image scheme.
    - Relative and root-relative paths are joined onto base_url.
    - Absolute URLs are returned unchanged.

    No validation is performed; the result is whatever urljoin builds.
    """
    if url.startswith("//"):
        return f"{DEFAULT_IMAGE_SCHEME}:{url}"
    return urljoin(base_url, url)
