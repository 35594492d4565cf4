"""Tests for log sink configuration."""
import logging

from rich.logging import RichHandler

from ignite.core.logger import get_logger, setup_logging


def _ignite_handlers():
    return list(logging.getLogger("ignite").handlers)


class TestLogging:
    """Test setup_logging and get_logger."""

    def test_file_sink(self, tmp_path):
        log_file = tmp_path / "logs" / ".logs"

        resolved = setup_logging(str(log_file))
        get_logger("ignite.test").info("Creating file: demo")

        for handler in _ignite_handlers():
            handler.flush()
        assert resolved == log_file.resolve()
        assert "Creating file: demo" in log_file.read_text()
        assert not any(isinstance(h, RichHandler) for h in _ignite_handlers())

    def test_verbose_mirrors_to_console(self, tmp_path):
        setup_logging(str(tmp_path / ".logs"), verbose=True)

        handlers = _ignite_handlers()
        assert any(isinstance(h, RichHandler) for h in handlers)
        assert any(isinstance(h, logging.FileHandler) for h in handlers)
        assert logging.getLogger("ignite").level == logging.DEBUG

    def test_setup_replaces_previous_handlers(self, tmp_path):
        setup_logging(str(tmp_path / "first.log"), verbose=True)
        setup_logging(str(tmp_path / "second.log"))

        handlers = _ignite_handlers()
        file_handlers = [h for h in handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str((tmp_path / "second.log").resolve())

    def test_get_logger_namespaces_foreign_names(self):
        assert get_logger("ignite.scaffold").name == "ignite.scaffold"
        assert get_logger("helper").name == "ignite.helper"
