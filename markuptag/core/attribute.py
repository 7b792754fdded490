#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from dataclasses import dataclass

from .keyvalue import KeyValueEntry, OrderedUniqueCollection

@dataclass(frozen=True)
class Attribute(KeyValueEntry):
	value: str = ""

	def __post_init__(self):
		if self.value is None:
			object.__setattr__(self, "value", "")
		super().__post_init__()

class Attributes(OrderedUniqueCollection):
	"""
		Ordered attribute list of a tag, rendered as ` name="value" name="value"`.

		Built from `(name, value)` pairs, e.g.
		`Attributes(("color", "#333"), ("border", "1px solid #000"))`.
	"""

	_entry_type: type = Attribute

	def get_attributes(self) -> tuple[Attribute, ...]:
		return self.get_all()

if __name__ == "__main__":
	raise ValueError("This script is not meant to be run directly.")
