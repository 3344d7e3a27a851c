import logging

import pytest

from hashset import MISSING, first_repeated, unique


def test_first_repeated_returns_earliest_second_occurrence():
	assert first_repeated([3, 1, 4, 1, 5, 3]) == 1
	assert first_repeated("abcb") == "b"


def test_first_repeated_returns_none_when_distinct():
	assert first_repeated([1, 2, 3]) is None
	assert first_repeated([]) is None


def test_first_repeated_default_tells_repeated_none_from_no_repeat():
	assert first_repeated([None, 1, None], default=MISSING) is None
	assert first_repeated([None, 1], default=MISSING) is MISSING
	assert first_repeated([], default=-1) == -1


def test_first_repeated_stops_scanning_at_the_repeat():
	consumed: list[int] = []

	def gen():
		for i in [1, 2, 1, 9, 9]:
			consumed.append(i)
			yield i

	assert first_repeated(gen()) == 1
	assert consumed == [1, 2, 1]


def test_first_repeated_logs_position(caplog: pytest.LogCaptureFixture):
	caplog.set_level(logging.DEBUG, logger="hashset.dedupe")
	first_repeated(["x", "y", "x"])
	assert "First repeated value 'x' found at index 2" in caplog.text


def test_unique_keeps_first_occurrence_order():
	assert unique([3, 1, 3, 2, 1]) == [3, 1, 2]
	assert unique("banana") == ["b", "a", "n"]
	assert unique([]) == []


def test_unique_propagates_unhashable_values():
	with pytest.raises(TypeError):
		unique([[1], [1]])
