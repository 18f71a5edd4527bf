"""Conversions between extents and other range representations.

``range`` is Python's half-open (exclusive end) range. It cannot describe an
extent that ends at its domain's maximum, because the exclusive end would
not be representable in the domain; ``to_range`` is therefore the only
conversion that can fail.

``ClosedRange`` is the inclusive representation. Converting is lossless in
both directions, with the caveat that the empty extent becomes the
back-to-front ``ClosedRange(start=1, end=0)``.
"""

from typing import Any

from extent.core import Extent
from extent.domain import IntDomain, as_domain
from extent.interval import ClosedRange


class UnrepresentableError(ValueError):
    """An extent cannot be expressed as an exclusive ``range``."""

    def __init__(self, extent: Extent):
        self.extent: Extent = extent
        super().__init__(
            f"{extent} ends at {extent.domain}'s maximum ({extent.domain.max}), "
            f"so its exclusive end is not representable.\n"
            f"Hint: use extent.to_closed() for ranges that reach the domain maximum"
        )


def from_range(r: range, domain: IntDomain | str | None = None) -> Extent:
    """Convert a half-open ``range`` with step 1 to an extent."""
    domain = as_domain(domain)
    if r.step != 1:
        raise ValueError(
            f"Only ranges with step 1 can be converted to an Extent.\n"
            f"Got {r!r} (step {r.step})"
        )
    domain.check(r.start, "range start")
    domain.check(r.stop, "range stop")
    if r.start >= r.stop:
        return Extent.empty(domain)
    return Extent(lo=r.start, hi=r.stop - 1, domain=domain)


def to_range(extent: Extent) -> range:
    """Convert an extent to a half-open ``range``.

    The empty extent becomes ``range(0, 0)``.

    Raises:
        UnrepresentableError: If the high bound is the domain maximum
    """
    if extent.is_empty:
        return range(0, 0)
    if extent.hi == extent.domain.max:
        raise UnrepresentableError(extent)
    return range(extent.lo, extent.hi + 1)


def from_closed(
    c: ClosedRange | tuple[int, int], domain: IntDomain | str | None = None
) -> Extent:
    """Convert a closed range (or ``(start, end)`` pair) to an extent."""
    domain = as_domain(domain)
    if isinstance(c, ClosedRange):
        start, end = c.start, c.end
    else:
        start, end = c
    domain.check(start, "range start")
    domain.check(end, "range end")
    if start > end:
        return Extent.empty(domain)
    return Extent.new(start, end, domain)


def to_closed(extent: Extent) -> ClosedRange:
    """Convert an extent to a closed range, verbatim.

    Note: the empty extent produces ``ClosedRange(start=1, end=0)``, which is
    back-to-front and iterates nothing.
    """
    return ClosedRange(start=extent.lo, end=extent.hi)


def extent(value: Any, domain: IntDomain | str | None = None) -> Extent:
    """Coerce ``value`` into an extent.

    Accepts:
    - Extent: Passed through (``domain`` must match if given)
    - range: Half-open, step 1
    - ClosedRange or (start, end) tuple: Inclusive

    Raises:
        TypeError: If value is an unsupported type or an extent of another domain
    """
    if isinstance(value, Extent):
        if domain is not None and as_domain(domain) != value.domain:
            raise TypeError(
                f"Extent is over {value.domain}, not {as_domain(domain)}.\n"
                f"Hint: rebuild it, e.g. Extent.new(lo, hi, domain=...)"
            )
        return value
    if isinstance(value, range):
        return from_range(value, domain)
    if isinstance(value, ClosedRange):
        return from_closed(value, domain)
    if isinstance(value, tuple) and len(value) == 2:
        return from_closed(value, domain)
    raise TypeError(
        f"Cannot convert {type(value).__name__!r} to an Extent: {value!r}\n"
        f"Examples:\n"
        f"  extent(range(0, 10))  # half-open, 0..=9\n"
        f"  extent(ClosedRange(start=0, end=9))  # inclusive\n"
        f"  extent((0, 9), domain=\"u8\")  # inclusive pair"
    )
