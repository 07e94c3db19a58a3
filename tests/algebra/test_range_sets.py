"""Tests for join_ranges, intersect_ranges and cleanup_sort."""
from __future__ import annotations

from dayspan.algebra.pairwise import join
from dayspan.algebra.range_sets import cleanup_sort, intersect_ranges, join_ranges
from dayspan.domain.date_range import DateRange


def R(start: str, end: str) -> DateRange:
    return DateRange(start, end)


def assert_normalized(ranges: list[DateRange]) -> None:
    """Sorted, pairwise disjoint, and no two entries still joinable."""
    assert ranges == sorted(ranges)
    for i, a in enumerate(ranges):
        for b in ranges[i + 1:]:
            assert join(a, b) is None, f"{a} and {b} should have been merged"


class TestCleanupSort:
    def test_drops_none_and_sorts(self) -> None:
        a = R("2020-02-01", "2020-02-05")
        b = R("2020-01-01", "2020-01-05")
        assert cleanup_sort([a, None, b, None]) == [b, a]

    def test_empty(self) -> None:
        assert cleanup_sort([]) == []
        assert cleanup_sort([None, None]) == []

    def test_ties_broken_by_end(self) -> None:
        longer = R("2020-01-01", "2020-01-10")
        shorter = R("2020-01-01", "2020-01-02")
        assert cleanup_sort([longer, shorter]) == [shorter, longer]


class TestJoinRanges:
    def test_empty(self) -> None:
        assert join_ranges([]) == []

    def test_single(self) -> None:
        r = R("2020-01-01", "2020-01-10")
        assert join_ranges([r]) == [r]

    def test_chain_of_adjacent(self) -> None:
        result = join_ranges([
            R("2020-01-11", "2020-01-15"),
            R("2020-01-01", "2020-01-05"),
            R("2020-01-06", "2020-01-10"),
        ])
        assert result == [R("2020-01-01", "2020-01-15")]

    def test_bridge_found_later(self) -> None:
        """First entry only becomes joinable with the second after absorbing the third."""
        result = join_ranges([
            R("2020-01-01", "2020-01-02"),
            R("2020-01-05", "2020-01-06"),
            R("2020-01-03", "2020-01-04"),
        ])
        assert result == [R("2020-01-01", "2020-01-06")]

    def test_keeps_gaps(self) -> None:
        a = R("2020-01-01", "2020-01-05")
        b = R("2020-01-08", "2020-01-10")
        assert join_ranges([b, a]) == [a, b]

    def test_duplicates_and_containment(self) -> None:
        outer = R("2020-01-01", "2020-01-31")
        result = join_ranges([
            R("2020-01-10", "2020-01-12"),
            outer,
            R("2020-01-10", "2020-01-12"),
            R("2020-01-31", "2020-01-31"),
        ])
        assert result == [outer]

    def test_ignores_none(self) -> None:
        r = R("2020-01-01", "2020-01-10")
        assert join_ranges([None, r, None]) == [r]

    def test_does_not_modify_input(self) -> None:
        ranges = [R("2020-01-06", "2020-01-10"), R("2020-01-01", "2020-01-05")]
        snapshot = list(ranges)
        join_ranges(ranges)
        assert ranges == snapshot

    def test_normalized_and_same_days(self, rng, random_range, days_of) -> None:
        for _ in range(50):
            ranges = [random_range() for _ in range(rng.randint(0, 15))]
            result = join_ranges(ranges)
            assert_normalized(result)
            assert days_of(result) == days_of(ranges)

    def test_order_insensitive(self, rng, random_range) -> None:
        for _ in range(30):
            ranges = [random_range() for _ in range(10)]
            shuffled = list(ranges)
            rng.shuffle(shuffled)
            assert join_ranges(ranges) == join_ranges(shuffled)


class TestIntersectRanges:
    def test_basic(self) -> None:
        left = [R("2020-01-01", "2020-01-10"), R("2020-01-20", "2020-01-31")]
        right = [R("2020-01-05", "2020-01-25")]
        assert intersect_ranges(left, right) == [
            R("2020-01-05", "2020-01-10"),
            R("2020-01-20", "2020-01-25"),
        ]

    def test_adjacent_fragments_are_joined(self) -> None:
        left = [R("2020-01-01", "2020-01-05"), R("2020-01-06", "2020-01-10")]
        right = [R("2020-01-03", "2020-01-08")]
        assert intersect_ranges(left, right) == [R("2020-01-03", "2020-01-08")]

    def test_nothing_in_common(self) -> None:
        left = [R("2020-01-01", "2020-01-05")]
        right = [R("2020-02-01", "2020-02-05")]
        assert intersect_ranges(left, right) == []

    def test_empty_side(self) -> None:
        assert intersect_ranges([R("2020-01-01", "2020-01-05")], []) == []
        assert intersect_ranges([], [R("2020-01-01", "2020-01-05")]) == []

    def test_accepts_generators(self) -> None:
        left = (r for r in [R("2020-01-01", "2020-01-10")])
        right = (r for r in [R("2020-01-05", "2020-01-06"), R("2020-01-09", "2020-01-20")])
        assert intersect_ranges(left, right) == [
            R("2020-01-05", "2020-01-06"),
            R("2020-01-09", "2020-01-10"),
        ]

    def test_covers_common_days(self, rng, random_range, days_of) -> None:
        for _ in range(50):
            left = [random_range() for _ in range(rng.randint(0, 6))]
            right = [random_range() for _ in range(rng.randint(0, 6))]
            result = intersect_ranges(left, right)
            assert_normalized(result)
            assert days_of(result) == days_of(left) & days_of(right)
