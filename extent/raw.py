"""Trusted access to an extent's stored bounds, for IO and serialization.

An extent stores exactly two integers. The empty extent is stored as the pair
``(1, 0)``, so the raw bounds of an empty extent are not meaningful bounds;
``Extent.low`` / ``Extent.high`` hide this, the functions here do not.

Round-tripping ``(lo_unchecked(e), hi_unchecked(e))`` through
``new_unchecked`` reproduces ``e`` exactly, empty included.

``new_unchecked`` never reorders its arguments. A caller that passes the
bounds of a non-empty range swapped gets the empty extent back, not the
range; only use it with pairs read from a trusted source.
"""

import logging

from extent.core import Extent
from extent.domain import IntDomain, as_domain

_log = logging.getLogger(__name__)


def new_unchecked(lo: int, hi: int, domain: IntDomain | str | None = None) -> Extent:
    """Build an extent from a stored ``(lo, hi)`` pair.

    ``lo <= hi`` is kept as-is; any ``lo > hi`` pair becomes the empty extent.
    """
    domain = as_domain(domain)
    if lo > hi:
        if (lo, hi) != (1, 0):
            _log.debug(
                "normalizing out-of-order pair (%d, %d) to empty %s", lo, hi, domain
            )
        return Extent.empty(domain)
    return Extent(lo=lo, hi=hi, domain=domain)


def lo_unchecked(extent: Extent) -> int:
    """The stored low bound (1 for the empty extent)."""
    return extent.lo


def hi_unchecked(extent: Extent) -> int:
    """The stored high bound (0 for the empty extent)."""
    return extent.hi
