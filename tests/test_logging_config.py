import logging

from laxurl.logging_config import LOGGER_NAME, configure_logging


def test_stderr_only_by_default():
	logger = configure_logging(level="warning")
	assert logger.name == LOGGER_NAME
	assert logger.level == logging.WARNING
	assert not logger.propagate
	assert [type(h) for h in logger.handlers] == [logging.StreamHandler]


def test_reconfigure_replaces_handlers():
	root_handlers = list(logging.getLogger().handlers)
	configure_logging()
	logger = configure_logging(level="DEBUG")
	assert len(logger.handlers) == 1
	assert logging.getLogger().handlers == root_handlers


def test_rotating_file(tmp_path):
	log_dir = tmp_path / "logs"
	logger = configure_logging(level="DEBUG", log_dir=str(log_dir))
	logging.getLogger("laxurl.core.parse").debug("hello")
	for h in logger.handlers:
		h.flush()
	assert "hello" in (log_dir / "laxurl.log").read_text(encoding="utf-8")
	configure_logging()
