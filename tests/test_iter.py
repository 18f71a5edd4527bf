import operator

from extent import I8, I64, U8, U64, Extent, ExtentIter, ExtentRevIter


def test_forward() -> None:
    assert list(Extent.from_closed((0, 5)).iter()) == [0, 1, 2, 3, 4, 5]


def test_reverse() -> None:
    assert list(Extent.from_closed((0, 5)).iter().rev()) == [5, 4, 3, 2, 1, 0]
    assert list(reversed(Extent.new(0, 5))) == [5, 4, 3, 2, 1, 0]


def test_empty_yields_nothing() -> None:
    assert list(Extent.empty(U64).iter()) == []
    assert list(reversed(Extent.empty(U64))) == []


def test_single_value() -> None:
    assert list(Extent.new(4, 4)) == [4]
    assert list(reversed(Extent.new(4, 4))) == [4]


def test_source_is_not_consumed() -> None:
    e = Extent.new(1, 3)
    assert list(e) == [1, 2, 3]
    assert list(e) == [1, 2, 3]
    assert e == Extent.new(1, 3)


def test_exhausted_iterator_stays_exhausted() -> None:
    it = Extent.new(1, 2).iter()
    assert list(it) == [1, 2]
    assert list(it) == []
    assert next(it, None) is None


def test_types() -> None:
    e = Extent.new(0, 1)
    assert isinstance(iter(e), ExtentIter)
    assert isinstance(reversed(e), ExtentRevIter)
    assert isinstance(e.iter().rev(), ExtentRevIter)


def test_rev_continues_from_remaining_values() -> None:
    it = Extent.new(0, 5).iter()
    assert next(it) == 0
    assert next(it) == 1
    rev = it.rev()
    assert rev.remaining == Extent.new(2, 5)
    assert list(rev) == [5, 4, 3, 2]
    assert list(it) == []


def test_length_hint() -> None:
    it = Extent.new(0, 5).iter()
    assert operator.length_hint(it) == 6
    next(it)
    assert operator.length_hint(it) == 5
    assert operator.length_hint(Extent.empty().iter()) == 0


def test_length_hint_is_capped_for_huge_extents() -> None:
    it = Extent.new(U64.min, U64.max, domain=U64).iter()
    assert operator.length_hint(it) > 0


class TestDomainBoundaries:
    """Iteration reaching a domain boundary ends after the boundary value."""

    def test_forward_to_max(self) -> None:
        e = Extent.new(U64.max - 2, U64.max, domain=U64)
        assert list(e) == [U64.max - 2, U64.max - 1, U64.max]

    def test_reverse_to_min(self) -> None:
        e = Extent.new(I64.min, I64.min + 2, domain=I64)
        assert list(reversed(e)) == [I64.min + 2, I64.min + 1, I64.min]

    def test_reverse_to_zero_unsigned(self) -> None:
        assert list(reversed(Extent.new(0, 2, domain=U8))) == [2, 1, 0]

    def test_single_value_at_max(self) -> None:
        it = Extent.new(I8.max, I8.max, domain=I8).iter()
        assert next(it) == I8.max
        assert it.remaining.is_empty
        assert list(it) == []

    def test_whole_domain(self) -> None:
        full = Extent.new(U8.min, U8.max, domain=U8)
        assert list(full) == list(range(256))
        assert list(reversed(full)) == list(range(255, -1, -1))
