# LaxURL — Logging configuration for the laxurl logger tree
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import logging.handlers
import os
import sys
from typing import Optional


LOGGER_NAME = "laxurl"
LOG_FORMAT = "%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s"


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> logging.Logger:
	"""Attach handlers to the "laxurl" logger and return it.

	Records go to stderr so CLI output on stdout stays parseable, and to
	log_dir/laxurl.log when log_dir is given. Calling again replaces the
	handlers installed by the previous call; the root logger is left alone.
	"""
	logger = logging.getLogger(LOGGER_NAME)
	logger.setLevel(getattr(logging, level.upper(), logging.INFO))
	logger.propagate = False

	for h in list(logger.handlers):
		logger.removeHandler(h)
		h.close()

	formatter = logging.Formatter(LOG_FORMAT)
	stream = logging.StreamHandler(sys.stderr)
	stream.setFormatter(formatter)
	logger.addHandler(stream)

	if log_dir:
		os.makedirs(log_dir, exist_ok=True)
		file_handler = logging.handlers.RotatingFileHandler(
			os.path.join(log_dir, f"{LOGGER_NAME}.log"), maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8"
		)
		file_handler.setFormatter(formatter)
		logger.addHandler(file_handler)
	return logger
