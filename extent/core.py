import sys
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from extent.domain import IntDomain, as_domain

if TYPE_CHECKING:
    from extent.interval import ClosedRange


def _default_domain() -> IntDomain:
    return as_domain(None)


@dataclass(frozen=True, order=True, kw_only=True)
class Extent:
    """Inclusive range ``lo..=hi`` over a fixed-width integer domain.

    An extent is either non-empty with ``lo <= hi``, or the canonical empty
    value ``lo=1, hi=0``. No other ``lo > hi`` pair can be constructed.

    Equality and ordering compare ``lo``, then ``hi``, then ``domain``, so all
    empty extents of a domain are equal to each other.

    Use ``Extent.new`` for ordinary construction. Direct construction via the
    dataclass fields is validated but never reorders; see ``extent.raw`` for
    the trusted IO surface.
    """

    lo: int
    hi: int
    domain: IntDomain = field(default_factory=_default_domain)

    def __post_init__(self) -> None:
        if not isinstance(self.domain, IntDomain):
            raise TypeError(
                f"Extent domain must be an IntDomain.\n"
                f"Got {type(self.domain).__name__!r}: {self.domain!r}\n"
                f"Hint: Extent.new(lo, hi, domain=\"u8\") accepts domain names"
            )
        self.domain.check(self.lo, "low bound")
        self.domain.check(self.hi, "high bound")
        if self.lo > self.hi and (self.lo, self.hi) != (1, 0):
            raise ValueError(
                f"Extent low bound ({self.lo}) must be <= high bound ({self.hi}).\n"
                f"The only out-of-order pair allowed is the empty form lo=1, hi=0.\n"
                f"Hint: Extent.new({self.lo}, {self.hi}) orders the bounds for you;\n"
                f"      extent.raw.new_unchecked() maps out-of-order pairs to empty"
            )

    @classmethod
    def empty(cls, domain: IntDomain | str | None = None) -> "Extent":
        """Return the canonical empty extent (``lo=1, hi=0``)."""
        return cls(lo=1, hi=0, domain=as_domain(domain))

    @classmethod
    def default(cls, domain: IntDomain | str | None = None) -> "Extent":
        return cls.empty(domain)

    @classmethod
    def new(cls, a: int, b: int, domain: IntDomain | str | None = None) -> "Extent":
        """Return the non-empty extent between ``a`` and ``b``, in either order."""
        domain = as_domain(domain)
        domain.check(a, "bound")
        domain.check(b, "bound")
        return cls(lo=min(a, b), hi=max(a, b), domain=domain)

    @classmethod
    def of(cls, value: Any, domain: IntDomain | str | None = None) -> "Extent":
        """Coerce a range, closed range, pair or extent into an ``Extent``."""
        from extent.conversions import extent

        return extent(value, domain)

    @classmethod
    def from_range(cls, r: range, domain: IntDomain | str | None = None) -> "Extent":
        from extent.conversions import from_range

        return from_range(r, domain)

    @classmethod
    def from_closed(
        cls,
        c: "ClosedRange | tuple[int, int]",
        domain: IntDomain | str | None = None,
    ) -> "Extent":
        from extent.conversions import from_closed

        return from_closed(c, domain)

    def to_range(self) -> range:
        from extent.conversions import to_range

        return to_range(self)

    def to_closed(self) -> "ClosedRange":
        from extent.conversions import to_closed

        return to_closed(self)

    @property
    def is_empty(self) -> bool:
        return self.lo > self.hi

    @property
    def low(self) -> int | None:
        """The low bound, or None when empty."""
        return None if self.is_empty else self.lo

    @property
    def high(self) -> int | None:
        """The high bound, or None when empty."""
        return None if self.is_empty else self.hi

    @property
    def size(self) -> int:
        """Number of values covered.

        Python integers do not wrap, so an extent spanning a whole domain
        reports ``2**bits``. ``len()`` delegates here but Python limits it to
        ``sys.maxsize``; use ``size`` for 64-bit and wider domains.
        """
        if self.is_empty:
            return 0
        return self.hi - self.lo + 1

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return not self.is_empty

    def contains(self, n: Any) -> bool:
        if not isinstance(n, int) or isinstance(n, bool):
            return False
        return self.lo <= n <= self.hi

    def __contains__(self, n: Any) -> bool:
        return self.contains(n)

    def _check_operand(self, other: Any, operation: str) -> "Extent":
        if not isinstance(other, Extent):
            raise TypeError(
                f"Cannot {operation} an Extent with {type(other).__name__!r}.\n"
                f"Hint: convert first, e.g. extent.{operation}(Extent.of(range(0, 10)))"
            )
        if other.domain != self.domain:
            raise TypeError(
                f"Cannot {operation} extents over different domains.\n"
                f"Got: {self.domain} and {other.domain}"
            )
        return other

    def union(self, other: "Extent") -> "Extent":
        """Return the smallest extent covering both operands.

        Note: for disjoint operands this is the convex hull (the gap between
        them is included), since an extent is a single contiguous range.
        The empty extent is the identity.
        """
        other = self._check_operand(other, "union")
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        return Extent.new(min(self.lo, other.lo), max(self.hi, other.hi), self.domain)

    def intersect(self, other: "Extent") -> "Extent":
        """Return the values covered by both operands (empty if they don't overlap)."""
        other = self._check_operand(other, "intersect")
        if self.is_empty or other.is_empty:
            return Extent.empty(self.domain)
        lo = max(self.lo, other.lo)
        hi = min(self.hi, other.hi)
        # Disjoint operands leave lo > hi; Extent.new would swap them.
        if lo > hi:
            return Extent.empty(self.domain)
        return Extent(lo=lo, hi=hi, domain=self.domain)

    def __or__(self, other: Any) -> "Extent":
        if not isinstance(other, Extent):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: Any) -> "Extent":
        if not isinstance(other, Extent):
            return NotImplemented
        return self.intersect(other)

    def iter(self) -> "ExtentIter":
        return ExtentIter(self)

    def __iter__(self) -> "ExtentIter":
        return ExtentIter(self)

    def __reversed__(self) -> "ExtentRevIter":
        return ExtentRevIter(self)

    def __str__(self) -> str:
        """Human-friendly string showing bounds and size."""
        if self.is_empty:
            return f"Extent({self.domain}: empty)"
        return f"Extent({self.domain}: {self.lo}..={self.hi}, {self.size} values)"


class ExtentIter(Iterator[int]):
    """Counts up through a copy of an extent; the source extent is untouched."""

    def __init__(self, source: Extent):
        self._extent: Extent = source

    @property
    def remaining(self) -> Extent:
        """The values not yet produced."""
        return self._extent

    @override
    def __next__(self) -> int:
        current = self._extent
        if current.is_empty:
            raise StopIteration
        # The last value empties the cursor instead of stepping past hi, which
        # would leave the domain when hi is its maximum.
        if current.lo == current.hi:
            self._extent = Extent.empty(current.domain)
        else:
            self._extent = replace(current, lo=current.lo + 1)
        return current.lo

    def __length_hint__(self) -> int:
        return min(self._extent.size, sys.maxsize)

    def rev(self) -> "ExtentRevIter":
        """Continue counting down from the high bound over the remaining values."""
        remaining = self._extent
        self._extent = Extent.empty(remaining.domain)
        return ExtentRevIter(remaining)

    def __reversed__(self) -> "ExtentRevIter":
        return self.rev()


class ExtentRevIter(Iterator[int]):
    """Counts down through a copy of an extent."""

    def __init__(self, source: Extent):
        self._extent: Extent = source

    @property
    def remaining(self) -> Extent:
        return self._extent

    @override
    def __next__(self) -> int:
        current = self._extent
        if current.is_empty:
            raise StopIteration
        if current.lo == current.hi:
            self._extent = Extent.empty(current.domain)
        else:
            self._extent = replace(current, hi=current.hi - 1)
        return current.hi

    def __length_hint__(self) -> int:
        return min(self._extent.size, sys.maxsize)
