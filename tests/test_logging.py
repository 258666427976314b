"""Tests for the logging helpers."""

import logging

from html_ast_utils.utils.config import Config
from html_ast_utils.utils.logging import (
    LogFormatter, log_exception, setup_logging, setup_logging_from_config
)


class TestSetupLogging:
    def test_console_handler(self, clean_logger):
        logger = setup_logging(console_level="WARNING", component=clean_logger("console"))
        assert logger.name == "html_ast_utils.console"
        stream_handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(stream_handlers) == 1
        assert stream_handlers[0].level == logging.WARNING

    def test_idempotent(self, clean_logger):
        component = clean_logger("twice")
        first = setup_logging(component=component)
        handler_count = len(first.handlers)
        second = setup_logging(component=component)
        assert second is first
        assert len(second.handlers) == handler_count

    def test_file_handler(self, tmp_path, clean_logger):
        log_file = tmp_path / "logs" / "html.log"
        logger = setup_logging(log_file=str(log_file), component=clean_logger("file"))
        logger.debug("written to file")
        for handler in logger.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text()

    def test_from_config(self, tmp_path):
        config = Config(overrides={"logging.log_file": str(tmp_path / "cfg.log")})
        logger = setup_logging_from_config(config)
        # The package root logger; tidy it up by hand
        try:
            assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        finally:
            for handler in list(logger.handlers):
                if not isinstance(handler, logging.NullHandler):
                    logger.removeHandler(handler)
                    handler.close()


class TestLogFormatter:
    def test_plain(self):
        formatter = LogFormatter(colored=False, fmt="[%(levelname)s] %(message)s")
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        assert formatter.format(record) == "[ERROR] boom"

    def test_colored(self, monkeypatch):
        monkeypatch.setattr("sys.platform", "linux")
        formatter = LogFormatter(colored=True, fmt="[%(levelname)s] %(message)s")
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        assert "\033[31mERROR\033[0m" in formatter.format(record)


class TestLogException:
    def test_logs_with_traceback(self, caplog):
        logger = logging.getLogger("html_ast_utils.tests")
        try:
            raise ValueError("bad shape")
        except ValueError as e:
            with caplog.at_level(logging.ERROR, logger="html_ast_utils.tests"):
                log_exception(logger, e, "Conversion failed")

        assert "Conversion failed: bad shape" in caplog.text
        assert caplog.records[0].exc_info is not None
