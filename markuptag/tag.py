#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import re
import logging

from typing import Optional

from .config import DEFAULT_FLAVORS, get_delimiters
from .core.attribute import Attribute, Attributes
from .core.tag_wrapper import Delimiters, TagWrapper

logger = logging.getLogger(__name__)

def _check_text(text: str) -> str:
	if not isinstance(text, str):
		raise TypeError(f"Text must be a string, got {type(text).__name__}.")
	return text

class Tag:
	"""
		A named tag that wraps text in an opening and a closing marker.

		Scanning works on literal substrings of the markers as currently
		rendered, it is not a markup parser. When the text itself already holds
		a copy of a marker, `remove_tag_in()` and the `replace_*_in()` methods
		act on the first copy they meet, which may not be the one `tag_on()`
		inserted.

		Example:
			tag = Tag("b", ("[", "]"))
			tag.tag_on("bold")  # "[b]bold[/b]"
	"""

	def __init__(self, name: str, delimiters: Delimiters, *attributes: tuple[str, str]):
		self._wrapper: TagWrapper = TagWrapper(name, delimiters, *attributes)

	@property
	def name(self) -> str:
		return self._wrapper.name

	@property
	def delimiters(self) -> Delimiters:
		return self._wrapper.delimiters

	@property
	def attributes(self) -> Attributes:
		return self._wrapper.attributes

	@property
	def opening_tag(self) -> str:
		return self._wrapper.opening_tag

	@property
	def closing_tag(self) -> str:
		return self._wrapper.closing_tag

	def get_name(self) -> str:
		return self.name

	def get_attribute(self, name: str) -> Optional[Attribute]:
		return self._wrapper.get_attribute(name)

	def get_opening_tag(self) -> str:
		return self.opening_tag

	def get_closing_tag(self) -> str:
		return self.closing_tag

	def tag_on(self, text: str) -> str:
		"""Wrap the text in the opening and closing tag, without escaping."""
		return self.opening_tag + _check_text(text) + self.closing_tag

	def is_opening_tag_in(self, text: str) -> bool:
		return self.opening_tag in _check_text(text)

	def is_closing_tag_in(self, text: str) -> bool:
		return self.closing_tag in _check_text(text)

	def replace_opening_tag_in(self, text: str, replacement: str) -> str:
		"""Replace the first opening tag in the text."""
		return self._replace_first(text, self.opening_tag, replacement)

	def replace_closing_tag_in(self, text: str, replacement: str) -> str:
		"""Replace the first closing tag in the text."""
		return self._replace_first(text, self.closing_tag, replacement)

	def replace_tag_in(self, text: str, replacement: str) -> str:
		"""
			Replace every opening and every closing tag in the text, left to right.

			The opening tag matches both as rendered with its attributes and bare,
			without them. The longer marker wins where both start at one place.
		"""
		_check_text(text)
		markers: list[str] = sorted({self.opening_tag, self.value_of(), self.closing_tag}, key=len, reverse=True)
		pattern = re.compile("|".join(re.escape(marker) for marker in markers))
		result, count = pattern.subn(lambda _: replacement, text)
		if count == 0:
			logger.debug(f"No {self.name!r} tags found to replace.")
		return result

	def remove_tag_in(self, text: str) -> str:
		"""
			Remove the first opening and the first closing tag from the text.

			This undoes `tag_on()` as long as the wrapped text held no copy of
			either marker.
		"""
		text = self._replace_first(text, self.opening_tag, "")
		return self._replace_first(text, self.closing_tag, "")

	def _replace_first(self, text: str, marker: str, replacement: str) -> str:
		if marker not in _check_text(text):
			logger.debug(f"Tag {marker!r} not found in text.")
			return text
		return text.replace(marker, replacement, 1)

	def value_of(self) -> str:
		"""The opening tag without its attributes, e.g. `<span>`."""
		return self._wrapper.bare_opening_tag

	def __str__(self) -> str:
		return self.value_of()

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}({self.name!r}, {self.delimiters!r}, {self.attributes!r})"

class TagExtension(Tag):
	"""A tag of any flavor, with its own delimiters or ones read from the flavor config."""

	@classmethod
	def from_flavor(cls, flavor: str, name: str, *attributes: tuple[str, str],
					config: Optional[dict[str, Delimiters]] = None) -> "TagExtension":
		return cls(name, get_delimiters(flavor, config), *attributes)

class Html(Tag):
	"""An HTML tag, e.g. `Html("span", ("color", "#333")).tag_on("text")`."""

	def __init__(self, name: str, *attributes: tuple[str, str]):
		super().__init__(name, DEFAULT_FLAVORS["html"], *attributes)

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}({self.name!r}, {self.attributes!r})"

class BBCode(Tag):
	"""A BBCode tag, e.g. `BBCode("b").tag_on("text")` gives `[b]text[/b]`."""

	def __init__(self, name: str, *attributes: tuple[str, str]):
		super().__init__(name, DEFAULT_FLAVORS["bbcode"], *attributes)

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}({self.name!r}, {self.attributes!r})"

if __name__ == "__main__":
	raise ValueError("This script is not meant to be run directly.")
