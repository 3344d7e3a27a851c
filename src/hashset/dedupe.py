from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from hashset.hash_set import HashSet

logger = logging.getLogger(__name__)

T = TypeVar("T")


def first_repeated(values: Iterable[T], default: Any = None) -> Any:
	"""Return the first value that was already seen earlier in `values`.

	Scans once, keeping every value seen so far in a HashSet. Returns `default`
	when all values are distinct; pass a sentinel such as `MISSING` when
	`values` may itself contain `None`.
	"""
	seen: HashSet[T] = HashSet()
	for index, value in enumerate(values):
		if seen.include(value):
			logger.debug("First repeated value %r found at index %d", value, index)
			return value
		seen.add(value)
	logger.debug("No repeated value among %d values", seen.size())
	return default


def unique(values: Iterable[T]) -> list[T]:
	"""Drop later duplicates from `values`, keeping first-occurrence order."""
	seen: HashSet[T] = HashSet()
	result: list[T] = []
	for value in values:
		if value in seen:
			continue
		seen.add(value)
		result.append(value)
	return result
