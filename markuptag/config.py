#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import json
import logging

from dotenv import load_dotenv
from functools import lru_cache
from typing import Final, Optional

from .core.tag_wrapper import Delimiters, check_delimiters

logger = logging.getLogger(__name__)

ENV_CONFIG_PATH: Final[str] = "MARKUPTAG_CONFIG"
_CONFIG_KEY_FLAVORS: Final[str] = "flavors"

DEFAULT_FLAVORS: Final[dict[str, Delimiters]] = {
	"html": ("<", ">"),
	"bbcode": ("[", "]"),
}

def load_flavors(config_path: Optional[str] = None) -> dict[str, Delimiters]:
	"""
		Load the delimiter pair of every markup flavor.

		The built-in flavors are always present. Extra flavors, or overrides of
		the built-in ones, come from a JSON file shaped like
		`{"flavors": {"wiki": ["{{", "}}"]}}`. When no path is given the
		`MARKUPTAG_CONFIG` environment variable is used, after loading `.env`.
	"""
	if config_path is None:
		load_dotenv()
		config_path = os.getenv(ENV_CONFIG_PATH)

	flavors: dict[str, Delimiters] = dict(DEFAULT_FLAVORS)
	if not config_path:
		return flavors

	if not os.path.exists(config_path):
		raise FileNotFoundError(f"The config file {config_path} does not exist.")

	with open(config_path, "r") as file:
		app_config: dict[str, any] = json.load(file)

	if not isinstance(app_config, dict):
		raise ValueError(f"The config file {config_path} must hold a JSON object.")

	configured = app_config.get(_CONFIG_KEY_FLAVORS, {})
	if not isinstance(configured, dict):
		raise ValueError(f"'{_CONFIG_KEY_FLAVORS}' in {config_path} must map flavor names to delimiter pairs.")

	for flavor, delimiters in configured.items():
		try:
			flavors[flavor.lower()] = check_delimiters(delimiters)
		except ValueError as e:
			raise ValueError(f"Flavor {flavor!r} in {config_path}: {e}") from e

	logger.info(f"Loaded {len(configured)} flavor(s) from {config_path}.")
	return flavors

@lru_cache(maxsize=1)
def default_flavors() -> dict[str, Delimiters]:
	"""The flavors from `.env` and `MARKUPTAG_CONFIG`, loaded once per process."""
	return load_flavors()

def get_delimiters(flavor: str, flavors: Optional[dict[str, Delimiters]] = None) -> Delimiters:
	if flavors is None:
		flavors = default_flavors()
	else:
		flavors = {name.lower(): delimiters for name, delimiters in flavors.items()}
	try:
		return flavors[flavor.lower()]
	except KeyError:
		raise KeyError(f"Unknown markup flavor {flavor!r}. Known flavors: {', '.join(sorted(flavors))}.") from None

if __name__ == "__main__":
	raise ValueError("This script is not meant to be run directly.")
