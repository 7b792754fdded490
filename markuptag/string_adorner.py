#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from functools import wraps
from typing import Callable

from .tag import BBCode, Html, Tag

class TagAdorner:
	"""Decorators that wrap the string returned by a function in a tag."""

	@staticmethod
	def tag_output(tag: Tag) -> Callable[[Callable[..., str]], Callable[..., str]]:
		def decorator(func: Callable[..., str]) -> Callable[..., str]:
			@wraps(func)
			def wrapper(*args: any, **kwargs: any) -> str:
				original_output = func(*args, **kwargs)
				if not isinstance(original_output, str):
					raise TypeError(f"{func.__name__}() must return a string to be tagged, got {type(original_output).__name__}.")
				return tag.tag_on(original_output)
			return wrapper
		return decorator

	@staticmethod
	def html(name: str, *attributes: tuple[str, str]) -> Callable[[Callable[..., str]], Callable[..., str]]:
		return TagAdorner.tag_output(Html(name, *attributes))

	@staticmethod
	def bbcode(name: str, *attributes: tuple[str, str]) -> Callable[[Callable[..., str]], Callable[..., str]]:
		return TagAdorner.tag_output(BBCode(name, *attributes))

if __name__ == "__main__":
	raise ValueError("This script is not meant to be run directly.")
