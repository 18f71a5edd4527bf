"""Fixed-width integer domains.

Python integers are unbounded, so the integer type an extent ranges over is
carried as a value. An ``IntDomain`` knows its width and signedness and
therefore its minimum and maximum representable values.
"""

from dataclasses import dataclass
from typing import Any

_WIDTHS = (8, 16, 32, 64, 128)


@dataclass(frozen=True, order=True)
class IntDomain:
    bits: int
    signed: bool

    def __post_init__(self) -> None:
        if self.bits not in _WIDTHS:
            raise ValueError(
                f"IntDomain bits must be one of {_WIDTHS}, got {self.bits!r}"
            )

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def name(self) -> str:
        return f"{'i' if self.signed else 'u'}{self.bits}"

    def __str__(self) -> str:
        return self.name

    def contains(self, n: int) -> bool:
        return self.min <= n <= self.max

    def check(self, n: Any, what: str = "value") -> int:
        """Return ``n`` unchanged if it is an integer representable in this domain.

        Raises:
            TypeError: If ``n`` is not an ``int`` (``bool`` is rejected too)
            ValueError: If ``n`` lies outside ``[min, max]``
        """
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(
                f"Extent {what} must be an int.\n"
                f"Got {type(n).__name__!r}: {n!r}"
            )
        if not self.contains(n):
            raise ValueError(
                f"Extent {what} {n} is not representable in {self.name}.\n"
                f"{self.name} covers {self.min}..={self.max}\n"
                f"Hint: pick a wider domain, e.g. domain=\"i128\""
            )
        return n

    @classmethod
    def named(cls, name: str) -> "IntDomain":
        """Look up one of the standard domains by name (``"i32"``, ``"u8"``, ...)."""
        try:
            return _BY_NAME[name.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown integer domain {name!r}.\n"
                f"Valid names: {', '.join(_BY_NAME)}"
            ) from None


I8 = IntDomain(8, True)
I16 = IntDomain(16, True)
I32 = IntDomain(32, True)
I64 = IntDomain(64, True)
I128 = IntDomain(128, True)
U8 = IntDomain(8, False)
U16 = IntDomain(16, False)
U32 = IntDomain(32, False)
U64 = IntDomain(64, False)
U128 = IntDomain(128, False)

_BY_NAME = {
    d.name: d for d in (I8, I16, I32, I64, I128, U8, U16, U32, U64, U128)
}

# Domain used by constructors that are not given one explicitly
DEFAULT_DOMAIN = I64


def as_domain(domain: "IntDomain | str | None") -> IntDomain:
    """Coerce a domain argument (instance, name, or None for the default)."""
    if domain is None:
        return DEFAULT_DOMAIN
    if isinstance(domain, IntDomain):
        return domain
    if isinstance(domain, str):
        return IntDomain.named(domain)
    raise TypeError(
        f"domain must be an IntDomain, a domain name, or None.\n"
        f"Got {type(domain).__name__!r}: {domain!r}\n"
        f"Examples:\n"
        f"  Extent.new(0, 5, domain=U8)\n"
        f"  Extent.new(0, 5, domain=\"u8\")"
    )
