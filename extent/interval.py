from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ClosedRange:
    """A closed range ``start..=end`` of integers.

    Unlike ``Extent`` this does not normalize: ``start > end`` is allowed and
    means the range is empty. Converting an empty extent produces the
    back-to-front ``ClosedRange(start=1, end=0)``.
    """

    start: int
    end: int

    @classmethod
    def empty(cls) -> "ClosedRange":
        return cls(start=1, end=0)

    @property
    def is_empty(self) -> bool:
        return self.start > self.end

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    def __str__(self) -> str:
        """Human-friendly string showing range and length."""
        length = max(self.end - self.start + 1, 0)
        return f"ClosedRange({self.start}→{self.end}, {length} values)"
