"""Parser for the srcset attribute of responsive images."""

from srcset_parse.candidate import ImageCandidate, Ordering, compare
from srcset_parse.html import ImageSource, extract_image_sources
from srcset_parse.parser import parse
from srcset_parse.utils import first_srcset_url, resolve_image_url

__version__ = "0.1.0"

__all__ = [
    "ImageCandidate",
    "ImageSource",
    "Ordering",
    "__version__",
    "compare",
    "extract_image_sources",
    "first_srcset_url",
    "parse",
    "resolve_image_url",
]
