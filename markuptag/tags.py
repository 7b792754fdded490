#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging

from typing import Generator

from .tag import Tag

logger = logging.getLogger(__name__)

class Tags:
	"""An ordered group of tags applied together, the first tag outermost."""

	def __init__(self, *tags: Tag):
		self._tags: list[Tag] = []
		for tag in tags:
			self.add(tag)

	def add(self, tag: Tag) -> "Tags":
		if not isinstance(tag, Tag):
			raise TypeError(f"Expected a Tag, got {type(tag).__name__}.")
		if any(existing is tag for existing in self._tags):
			logger.debug(f"Tag {tag.name!r} is already in the group.")
			return self
		self._tags.append(tag)
		return self

	def names(self) -> list[str]:
		return [tag.name for tag in self._tags]

	def tag_on(self, text: str) -> str:
		for tag in reversed(self._tags):
			text = tag.tag_on(text)
		return text

	def remove_tag_in(self, text: str) -> str:
		for tag in reversed(self._tags):
			text = tag.remove_tag_in(text)
		return text

	def __len__(self) -> int:
		return len(self._tags)

	def __iter__(self) -> Generator[Tag, None, None]:
		for tag in self._tags:
			yield tag

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}({self._tags})"

if __name__ == "__main__":
	raise ValueError("This script is not meant to be run directly.")
