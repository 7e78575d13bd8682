"""Tests for image helpers."""

from __future__ import annotations

import pytest

from srcset_parse.utils import first_srcset_url


class TestFirstSrcsetUrl:
    """Tests for first_srcset_url function."""

    def test_returns_first_url(self) -> None:
        """Test first URL of a multi-candidate srcset."""
        srcset = "https://img.example.com/a.jpg 1x, https://img.example.com/b.jpg 2x"
        assert first_srcset_url(srcset) == "https://img.example.com/a.jpg"

    def test_url_with_comma(self) -> None:
        """Test first URL keeps an inner comma."""
        srcset = "https://foo.bar/w=100,h=200/dog.png 100w, /cat.png 200w"
        assert first_srcset_url(srcset) == "https://foo.bar/w=100,h=200/dog.png"

    def test_single_bare_url(self) -> None:
        """Test srcset with one bare URL."""
        assert first_srcset_url("  /cat.jpg  ") == "/cat.jpg"

    @pytest.mark.parametrize("srcset", ["", "   ", ", ,"])
    def test_no_candidates_returns_none(self, srcset: str) -> None:
        """Test None when nothing can be parsed."""
        assert first_srcset_url(srcset) is None
