"""Tests for logging setup."""

import io
import logging

from poco2csla.config.models import LoggingConfig
from poco2csla.utils.logging_utils import get_logger, setup_from_config, setup_logger


class TestLoggingSetup:
    def test_module_loggers_inherit_handlers(self):
        stream = io.StringIO()
        setup_logger("poco2csla", level="INFO", format_string="%(levelname)s %(message)s", stream=stream)

        get_logger("poco2csla.core.generator").info("Wrote CustomerBO.cs")

        assert stream.getvalue() == "INFO Wrote CustomerBO.cs\n"

    def test_setup_replaces_handlers(self):
        setup_logger("poco2csla")
        logger = setup_logger("poco2csla")

        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "poco2csla.log"

        logger = setup_from_config(LoggingConfig(file=str(log_file)))
        logger.warning("ambiguous class")
        for handler in logger.handlers:
            handler.flush()

        assert "ambiguous class" in log_file.read_text(encoding="utf-8")

    def test_verbose_forces_debug(self):
        logger = setup_from_config(LoggingConfig(level="ERROR"), verbose=True)

        assert logger.level == logging.DEBUG

    def test_reconfiguring_closes_previous_file_handler(self, tmp_path):
        first = setup_from_config(LoggingConfig(file=str(tmp_path / "first.log")))
        file_handler = next(h for h in first.handlers if isinstance(h, logging.FileHandler))

        setup_from_config(LoggingConfig(file=str(tmp_path / "second.log")))

        assert file_handler.stream is None
