"""Tests for the odd-number index mapping."""

import pytest

from prime_table.core.index_map import numbers_for, to_index, to_number, tracked_count


class TestIndexMap:
    """Tests for to_index / to_number."""

    def test_first_entries(self):
        """Index 0 is 3, index 1 is 5, and so on."""
        assert [to_number(i) for i in range(5)] == [3, 5, 7, 9, 11]
        assert to_index(3) == 0
        assert to_index(71) == 34

    def test_round_trip(self):
        """The mapping is a bijection over tracked odd numbers."""
        for i in range(500):
            assert to_index(to_number(i)) == i
        for n in range(3, 1001, 2):
            assert to_number(to_index(n)) == n

    def test_untracked_numbers_rejected(self):
        """Even numbers and 0, 1, 2 are not tracked."""
        for n in (0, 1, 2, 4, 10):
            with pytest.raises(ValueError):
                to_index(n)
        with pytest.raises(ValueError):
            to_number(-1)

    def test_tracked_count(self):
        """Table capacity counts the odd numbers in [3, max_number]."""
        assert tracked_count(71) == 35
        assert tracked_count(17) == 8
        assert tracked_count(18) == 8
        assert tracked_count(3) == 1
        assert tracked_count(2) == 0
        assert tracked_count(0) == 0

    def test_numbers_for(self):
        """Vectorised mapping agrees with to_number."""
        assert numbers_for(6).tolist() == [to_number(i) for i in range(6)]
