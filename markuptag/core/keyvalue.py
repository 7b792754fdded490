#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Generator, Mapping, Optional

from .errors import InvalidNameError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class KeyValueEntry:
	"""A single immutable name-value pair rendered as `name="value"`."""
	name: str
	value: Optional[str] = None

	def __post_init__(self):
		InvalidNameError.check(self.name)
		if self.value is not None and not isinstance(self.value, str):
			raise TypeError(f"The value of {self.name!r} must be a string, got {type(self.value).__name__}.")

	def to_pair(self) -> tuple[str, str]:
		return (self.name, self.value if self.value is not None else "")

	def to_object(self) -> dict[str, Optional[str]]:
		return {self.name: self.value}

	def render(self) -> str:
		name, value = self.to_pair()
		return f'{name}="{value}"'

	def __str__(self) -> str:
		return self.render()

class OrderedUniqueCollection:
	"""
		Insertion-ordered collection of entries with at most one entry per name.

		Entries live in a list, with a name to index lookup beside it, so the
		rendered order is always the order names were first supplied. On
		construction the first occurrence of a name wins and later duplicates
		are dropped; `set()` afterwards overwrites the value in place.

		The collection is a mutable per-tag configuration object. Concurrent
		`set()`/`delete()` on a shared instance must be serialized by the caller.
	"""

	_entry_type: type = KeyValueEntry

	def __init__(self, *items):
		# Build every entry first so a bad item leaves nothing half-committed.
		entries: list[KeyValueEntry] = [self._make_entry(item) for item in items]
		self._entries: list[KeyValueEntry] = []
		self._index: dict[str, int] = {}
		for entry in entries:
			if entry.name in self._index:
				logger.debug(f"Duplicate {entry.name!r} dropped, first value kept.")
				continue
			self._index[entry.name] = len(self._entries)
			self._entries.append(entry)

	def _make_entry(self, item) -> KeyValueEntry:
		if isinstance(item, (tuple, list)) and len(item) == 2:
			name, value = item
			return self._entry_type(name, value)
		raise TypeError(f"Expected a (name, value) pair, got {item!r}.")

	@property
	def value(self) -> str:
		"""The rendered entries separated by a space, with one leading space when not empty."""
		if not self._entries:
			return ""
		return " " + " ".join(entry.render() for entry in self._entries)

	def get(self, name: str) -> Optional[KeyValueEntry]:
		index: Optional[int] = self._index.get(name)
		return self._entries[index] if index is not None else None

	def has(self, name: str) -> bool:
		return name in self._index

	def get_all(self) -> tuple[KeyValueEntry, ...]:
		return tuple(self._entries)

	def for_each(self, func: Callable[[KeyValueEntry], None]) -> "OrderedUniqueCollection":
		for entry in self.get_all():
			func(entry)
		return self

	def set(self, name: str, value: Optional[str] = None) -> "OrderedUniqueCollection":
		entry: KeyValueEntry = self._entry_type(name, value)
		index: Optional[int] = self._index.get(name)
		if index is None:
			self._index[name] = len(self._entries)
			self._entries.append(entry)
			logger.debug(f"Added {name!r}.")
		else:
			self._entries[index] = entry
			logger.debug(f"Overwrote {name!r} at position {index}.")
		return self

	def delete(self, name: str, on_removed: Optional[Callable[[bool], None]] = None) -> "OrderedUniqueCollection":
		index: Optional[int] = self._index.pop(name, None)
		removed: bool = index is not None
		if removed:
			del self._entries[index]
			self._index = {entry.name: i for i, entry in enumerate(self._entries)}
			logger.debug(f"Removed {name!r}.")
		if on_removed is not None:
			on_removed(removed)
		return self

	def to_object(self) -> Mapping[str, Optional[str]]:
		"""Read-only snapshot of the entries as name to value."""
		return MappingProxyType({entry.name: entry.value for entry in self._entries})

	def __contains__(self, name: object) -> bool:
		return name in self._index

	def __len__(self) -> int:
		return len(self._entries)

	def __iter__(self) -> Generator[KeyValueEntry, None, None]:
		for entry in self.get_all():
			yield entry

	def __str__(self) -> str:
		return self.value

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}({[entry.to_pair() for entry in self._entries]})"

if __name__ == "__main__":
	raise ValueError("This script is not meant to be run directly.")
