from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from hashset.helpers import PRESENT

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HashSet(Generic[T]):
	"""A set of unique elements backed by a key-presence dict.

	- Each element is a key of `_hash` mapped to `PRESENT`; key existence IS membership
	- `include`, `add` and `delete` are single dict operations, O(1) amortized
	- Mutators return the set itself so calls can be chained
	- Iteration follows insertion order (re-adding an element does not move it)
	- Errors raised by the dict (e.g. unhashable values) propagate unchanged
	"""

	__slots__ = ("_hash",)

	def __init__(self, initial: Iterable[T] | None = None) -> None:
		self._hash: dict[T, Any] = {}
		if initial is not None:
			for value in initial:
				self.add(value)
			logger.debug("Seeded HashSet with %d distinct elements", len(self._hash))

	@classmethod
	def of(cls, *values: T) -> HashSet[T]:
		"""Build a set from positional arguments: `HashSet.of(1, 2, 3)`."""
		return cls(values)

	# --- Core operations ---
	def include(self, value: object) -> bool:
		return value in self._hash

	def add(self, value: T) -> HashSet[T]:
		self._hash[value] = PRESENT
		return self

	def delete(self, value: object) -> HashSet[T]:
		# Absent values are a no-op
		if value in self._hash:
			del self._hash[value]  # type: ignore[index]
		return self

	def size(self) -> int:
		return len(self._hash)

	# --- Bulk and traversal ---
	def clear(self) -> HashSet[T]:
		removed = len(self._hash)
		self._hash.clear()
		logger.debug("Cleared %d elements from HashSet", removed)
		return self

	def each(self, visitor: Callable[[T], Any]) -> HashSet[T]:
		"""Call `visitor` once per element, in insertion order, then return the set.

		The set must not be resized from inside `visitor`; the dict raises
		`RuntimeError` if it is.
		"""
		for value in self._hash:
			visitor(value)
		return self

	def inspect(self) -> str:
		return "Set: {" + ", ".join(repr(value) for value in self._hash) + "}"

	# --- Python protocols ---
	def __contains__(self, value: object) -> bool:
		return self.include(value)

	def __len__(self) -> int:
		return self.size()

	def __iter__(self) -> Iterator[T]:
		return iter(self._hash)

	def __repr__(self) -> str:
		return self.inspect()

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, HashSet):
			return NotImplemented
		return self._hash.keys() == other._hash.keys()

	# Mutable, so not hashable
	__hash__ = None  # type: ignore[assignment]
