#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging

from io import StringIO
from typing import Optional

from .attribute import Attribute, Attributes
from .errors import InvalidNameError

logger = logging.getLogger(__name__)

Delimiters = tuple[str, str]

def check_delimiters(delimiters) -> Delimiters:
	if not isinstance(delimiters, (tuple, list)) or len(delimiters) != 2:
		raise ValueError(f"Delimiters must be an (opening, closing) pair, got {delimiters!r}.")
	opening, closing = delimiters
	if not isinstance(opening, str) or not isinstance(closing, str) or not opening or not closing:
		raise ValueError(f"Delimiters must be two non-empty strings, got {delimiters!r}.")
	return (opening, closing)

class OpeningTag:
	"""Renders `<name attr="value">` for a given delimiter pair."""

	def __init__(self, name: str, delimiters: Delimiters):
		self._name: str = InvalidNameError.check(name, "tag name")
		self._delimiters: Delimiters = check_delimiters(delimiters)

	@property
	def name(self) -> str:
		return self._name

	@property
	def delimiters(self) -> Delimiters:
		return self._delimiters

	def render(self, attributes: Optional[Attributes] = None) -> str:
		_buffer = StringIO()
		_buffer.write(self._delimiters[0])
		_buffer.write(self._name)
		if attributes is not None:
			_buffer.write(attributes.value)
		_buffer.write(self._delimiters[1])
		s: str = _buffer.getvalue()
		_buffer.close()
		return s

	def __str__(self) -> str:
		return self.render()

class ClosingTag(OpeningTag):
	"""Renders `</name>` for a given delimiter pair."""

	def render(self, attributes: Optional[Attributes] = None) -> str:
		_buffer = StringIO()
		_buffer.write(self._delimiters[0])
		_buffer.write("/")
		_buffer.write(self._name)
		_buffer.write(self._delimiters[1])
		s: str = _buffer.getvalue()
		_buffer.close()
		return s

class TagWrapper:
	"""
		Holds a tag name, its delimiter pair and its attributes, and renders the
		opening and closing markers from them.

		The markers are rendered on every access, so changes made through
		`attributes.set()` or `attributes.delete()` show up in `opening_tag`
		straight away. `closing_tag` never carries attributes.
	"""

	def __init__(self, name: str, delimiters: Delimiters, *attributes: tuple[str, str]):
		self._opening: OpeningTag = OpeningTag(name, delimiters)
		self._closing: ClosingTag = ClosingTag(name, delimiters)
		self._attributes: Attributes = Attributes(*attributes)

	@property
	def name(self) -> str:
		return self._opening.name

	@property
	def delimiters(self) -> Delimiters:
		return self._opening.delimiters

	@property
	def attributes(self) -> Attributes:
		return self._attributes

	@property
	def opening_tag(self) -> str:
		return self._opening.render(self._attributes)

	@property
	def closing_tag(self) -> str:
		return self._closing.render()

	@property
	def bare_opening_tag(self) -> str:
		"""The opening marker without any attributes."""
		return self._opening.render()

	def get_attribute(self, name: str) -> Optional[Attribute]:
		return self._attributes.get(name)

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}({self.name!r}, {self.delimiters!r}, {self._attributes!r})"

if __name__ == "__main__":
	raise ValueError("This script is not meant to be run directly.")
