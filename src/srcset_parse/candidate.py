"""Image candidate record and its partial order."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Ordering(Enum):
    """Result of comparing two image candidates."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"
    INCOMPARABLE = "incomparable"


@dataclass(frozen=True)
class ImageCandidate:
    """A single candidate of a srcset: a URL plus an optional descriptor.

    At most one of ``width`` and ``density`` is set. Neither being set
    means the candidate had no descriptor.

    Attributes:
        url: The image reference exactly as written, not validated.
        width: Intrinsic width from a ``w`` descriptor. None if absent.
        density: Pixel density from an ``x`` descriptor. None if absent.
    """

    url: str
    width: float | None = None
    density: float | None = None

    def partial_cmp(self, other: ImageCandidate) -> Ordering:
        """Compare with another candidate of the same descriptor kind."""
        return compare(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ImageCandidate):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ImageCandidate):
            return NotImplemented
        return compare(self, other) in (Ordering.LESS, Ordering.EQUAL)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ImageCandidate):
            return NotImplemented
        return compare(self, other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ImageCandidate):
            return NotImplemented
        return compare(self, other) in (Ordering.GREATER, Ordering.EQUAL)


def compare(a: ImageCandidate, b: ImageCandidate) -> Ordering:
    """Compare two candidates under the srcset partial order.

    Candidates are comparable only when both carry a width and no density,
    or both carry a density and no width. Every other pair, including bare
    candidates, is INCOMPARABLE. URLs take no part in the comparison.

    Args:
        a: Left-hand candidate.
        b: Right-hand candidate.

    Returns:
        The ordering of ``a`` relative to ``b``.
    """
    if a.density is None and b.density is None:
        if a.width is not None and b.width is not None:
            return _compare_values(a.width, b.width)
    elif a.width is None and b.width is None:
        if a.density is not None and b.density is not None:
            return _compare_values(a.density, b.density)
    return Ordering.INCOMPARABLE


def _compare_values(left: float, right: float) -> Ordering:
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    if left == right:
        return Ordering.EQUAL
    # NaN on either side
    return Ordering.INCOMPARABLE
