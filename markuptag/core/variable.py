#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from dataclasses import dataclass

from .keyvalue import KeyValueEntry, OrderedUniqueCollection

@dataclass(frozen=True)
class Variable(KeyValueEntry):
	"""A template variable, rendered bare when it has no value."""

	@property
	def has_value(self) -> bool:
		return self.value is not None

	def render(self) -> str:
		if not self.has_value:
			return self.name
		return super().render()

class Variables(OrderedUniqueCollection):
	"""Ordered variables built from bare names or `(name, value)` pairs."""

	_entry_type: type = Variable

	def _make_entry(self, item) -> Variable:
		if isinstance(item, str):
			return Variable(item)
		return super()._make_entry(item)

	def get_variables(self) -> tuple[Variable, ...]:
		return self.get_all()

if __name__ == "__main__":
	raise ValueError("This script is not meant to be run directly.")
