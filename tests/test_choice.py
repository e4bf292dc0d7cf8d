"""
Tests for ordered preset selection.
"""
import dataclasses

import pytest

from planets.choice import Choice, ChoiceSet


@pytest.fixture
def numbers():
    return ChoiceSet([1, 2, 3, 4])


class TestNavigation:

    def test_next_prev_clamp_at_bounds(self, numbers):
        c = numbers.by_index(0)
        assert c.get() == 1
        c = c.next()
        assert c.get() == 2
        c = c.prev().prev().prev()
        assert c.get() == 1
        c = c.next().next().next().next()
        assert c.get() == 4

    def test_circular_wraps(self, numbers):
        c = numbers.by_index(3)
        assert c.circular_next().get() == 1
        assert c.circular_next().circular_prev().get() == 4
        assert numbers.by_index(0).circular_prev().get() == 4

    def test_choices_are_values(self, numbers):
        assert numbers.by_index(2) == numbers.by_index(1).next()
        with pytest.raises(dataclasses.FrozenInstanceError):
            numbers.by_index(0).index = 2


class TestLookup:

    def test_by_value(self, numbers):
        c = numbers.by_value(2)
        assert isinstance(c, Choice)
        assert c.index == 1

    def test_by_value_missing(self, numbers):
        with pytest.raises(ValueError):
            numbers.by_value(7)

    @pytest.mark.parametrize("index", [-1, 4])
    def test_by_index_out_of_range(self, numbers, index):
        with pytest.raises(IndexError):
            numbers.by_index(index)

    def test_empty_set_rejected(self):
        with pytest.raises(ValueError):
            ChoiceSet([])

    def test_sequence_protocol(self, numbers):
        assert len(numbers) == 4
        assert list(numbers) == [1, 2, 3, 4]
        assert numbers[2] == 3
