#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import unittest
import json
import logging
from unittest.mock import patch, mock_open
from markuptag.config import DEFAULT_FLAVORS, ENV_CONFIG_PATH, default_flavors, get_delimiters, load_flavors
from markuptag.logging_config import setup_logging

class TestLoadFlavors(unittest.TestCase):

	@patch("markuptag.config.load_dotenv")
	@patch.dict("os.environ", {}, clear=True)
	def test_builtin_flavors_without_config(self, mock_load_dotenv):
		flavors = load_flavors()
		mock_load_dotenv.assert_called_once()
		self.assertEqual(flavors, DEFAULT_FLAVORS)
		self.assertIsNot(flavors, DEFAULT_FLAVORS)

	@patch("markuptag.config.load_dotenv")
	@patch("os.path.exists", return_value=True)
	@patch("builtins.open", new_callable=mock_open, read_data=json.dumps({"flavors": {"Wiki": ["{{", "}}"]}}))
	def test_config_path_from_environment(self, mock_open_file, mock_exists, mock_load_dotenv):
		with patch.dict("os.environ", {ENV_CONFIG_PATH: "config/flavors.json"}):
			flavors = load_flavors()
		mock_open_file.assert_called_once_with("config/flavors.json", "r")
		self.assertEqual(flavors["wiki"], ("{{", "}}"))
		self.assertEqual(flavors["html"], ("<", ">"))

	@patch("os.path.exists", return_value=True)
	@patch("builtins.open", new_callable=mock_open, read_data=json.dumps({"flavors": {"html": ["&lt;", "&gt;"]}}))
	def test_override_builtin(self, mock_open_file, mock_exists):
		flavors = load_flavors("flavors.json")
		self.assertEqual(flavors["html"], ("&lt;", "&gt;"))
		self.assertEqual(DEFAULT_FLAVORS["html"], ("<", ">"))

	@patch("os.path.exists", return_value=True)
	@patch("builtins.open", new_callable=mock_open, read_data=json.dumps({"flavors": {"broken": ["<"]}}))
	def test_malformed_flavor(self, mock_open_file, mock_exists):
		with self.assertRaises(ValueError) as context:
			load_flavors("flavors.json")
		self.assertIn("broken", str(context.exception))

	@patch("os.path.exists", return_value=True)
	@patch("builtins.open", new_callable=mock_open, read_data=json.dumps(["<", ">"]))
	def test_config_must_be_object(self, mock_open_file, mock_exists):
		with self.assertRaises(ValueError):
			load_flavors("flavors.json")

	@patch("os.path.exists", return_value=False)
	def test_missing_file(self, mock_exists):
		with self.assertRaises(FileNotFoundError):
			load_flavors("missing.json")

class TestGetDelimiters(unittest.TestCase):

	def setUp(self):
		default_flavors.cache_clear()

	def tearDown(self):
		default_flavors.cache_clear()

	def test_known_flavor(self):
		self.assertEqual(get_delimiters("BBCode", DEFAULT_FLAVORS), ("[", "]"))

	def test_unknown_flavor(self):
		with self.assertRaises(KeyError):
			get_delimiters("markdown", DEFAULT_FLAVORS)

	@patch("markuptag.config.load_flavors", return_value={"html": ("<", ">")})
	def test_loads_flavors_when_not_given(self, mock_load_flavors):
		self.assertEqual(get_delimiters("html"), ("<", ">"))
		mock_load_flavors.assert_called_once_with()

	@patch("markuptag.config.load_flavors", return_value={"html": ("<", ">"), "bbcode": ("[", "]")})
	def test_default_flavors_loaded_once(self, mock_load_flavors):
		get_delimiters("html")
		get_delimiters("bbcode")
		mock_load_flavors.assert_called_once_with()

	def test_given_flavors_are_case_insensitive(self):
		flavors = {"Wiki": ("{{", "}}")}
		self.assertEqual(get_delimiters("wiki", flavors), ("{{", "}}"))
		self.assertEqual(get_delimiters("WIKI", flavors), ("{{", "}}"))
		self.assertIn("Wiki", flavors)

class TestSetupLogging(unittest.TestCase):

	@patch("logging.basicConfig")
	def test_stream_only(self, mock_basic_config):
		setup_logging(log_level=logging.DEBUG)
		kwargs = mock_basic_config.call_args.kwargs
		self.assertEqual(kwargs["level"], logging.DEBUG)
		self.assertEqual(len(kwargs["handlers"]), 1)

	@patch("logging.FileHandler")
	@patch("logging.basicConfig")
	def test_with_file(self, mock_basic_config, mock_file_handler):
		setup_logging("markuptag.log")
		mock_file_handler.assert_called_once_with("markuptag.log")
		self.assertEqual(len(mock_basic_config.call_args.kwargs["handlers"]), 2)

if __name__ == "__main__":
	unittest.main()
