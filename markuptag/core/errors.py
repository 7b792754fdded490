#!/usr/bin/env python3
# -*- coding: utf-8 -*-

class InvalidNameError(ValueError):
	"""Raised when an attribute, variable or tag is given an unusable name."""

	def __init__(self, name: object, kind: str = "name"):
		self.name = name
		super().__init__(f"Invalid {kind}: {name!r}. A non-empty string is required.")

	@staticmethod
	def check(name: object, kind: str = "name") -> str:
		if not isinstance(name, str) or not name.strip():
			raise InvalidNameError(name, kind)
		return name

if __name__ == "__main__":
	raise ValueError("This script is not meant to be run directly.")
