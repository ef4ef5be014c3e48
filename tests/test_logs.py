import logging
from logging.handlers import RotatingFileHandler

from memstore.logs import setup_logging


def _consoles(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if type(h) is logging.StreamHandler]


def _files(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if isinstance(h, RotatingFileHandler)]


class TestSetupLogging:
    def test_sets_level_and_console(self, root_logger):
        setup_logging("DEBUG")
        assert root_logger.level == logging.DEBUG
        assert len(_consoles(root_logger)) == 1

    def test_unknown_level_falls_back_to_info(self, root_logger):
        setup_logging("chatty")
        assert root_logger.level == logging.INFO

    def test_no_file_handler_by_default(self, root_logger):
        setup_logging("INFO")
        assert _files(root_logger) == []

    def test_file_handler_created(self, root_logger, tmp_path):
        log_file = tmp_path / "logs" / "memstore.log"
        setup_logging("INFO", log_file)
        handlers = _files(root_logger)
        assert len(handlers) == 1
        assert handlers[0].maxBytes == 5 * 1024 * 1024
        assert handlers[0].backupCount == 3
        assert log_file.parent.is_dir()

    def test_repeated_calls_do_not_duplicate(self, root_logger, tmp_path):
        log_file = tmp_path / "memstore.log"
        setup_logging("INFO", log_file)
        setup_logging("WARNING", log_file)
        assert len(_consoles(root_logger)) == 1
        assert len(_files(root_logger)) == 1
        assert root_logger.level == logging.WARNING

    def test_repeated_call_raises_handler_verbosity(self, root_logger, tmp_path):
        log_file = tmp_path / "memstore.log"
        setup_logging("INFO", log_file)
        setup_logging("DEBUG", log_file)
        assert root_logger.level == logging.DEBUG
        assert _consoles(root_logger)[0].level == logging.DEBUG
        assert _files(root_logger)[0].level == logging.DEBUG
