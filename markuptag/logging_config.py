# /markuptag/logging_config.py
# -*- coding: utf-8 -*-

import logging

from typing import Optional

def setup_logging(log_file_path: Optional[str] = None, log_level: int = logging.INFO) -> None:
	handlers: list[logging.Handler] = [logging.StreamHandler()]
	if log_file_path:
		handlers.append(logging.FileHandler(log_file_path))
	logging.basicConfig(
		level=log_level,
		format="%(asctime)s %(name)s %(levelname)s: %(message)s",
		handlers=handlers
	)
