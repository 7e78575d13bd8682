"""Shared image URL utilities."""

from srcset_parse.utils.images import first_srcset_url
from srcset_parse.utils.url import resolve_image_url

__all__ = ["first_srcset_url", "resolve_image_url"]
