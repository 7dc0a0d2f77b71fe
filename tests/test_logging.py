import logging

import pytest

from tag_builder.utils.config import Config
from tag_builder.utils.logging import (
    LogFormatter,
    get_default_log_file,
    setup_logging,
    setup_logging_from_config,
)


@pytest.fixture
def cleanup_loggers():
    names = []
    yield names
    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            if not isinstance(handler, logging.NullHandler):
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(logging.NOTSET)


def test_setup_logging_with_file(tmp_path, cleanup_loggers):
    log_file = tmp_path / "logs" / "nested" / "builder.log"
    cleanup_loggers.append("tag_builder.file_test")

    logger = setup_logging(log_file=str(log_file), console_level="ERROR",
                           file_level="DEBUG", component="file_test")
    logger.debug("written to file")
    for handler in logger.handlers:
        handler.flush()

    assert logger.name == "tag_builder.file_test"
    assert logger.level == logging.DEBUG
    assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    assert "written to file" in log_file.read_text(encoding="utf-8")


def test_setup_logging_is_idempotent(cleanup_loggers):
    cleanup_loggers.append("tag_builder.idempotent")

    first = setup_logging(component="idempotent")
    handler_count = len(first.handlers)
    second = setup_logging(component="idempotent")

    assert first is second
    assert len(second.handlers) == handler_count == 1


def test_setup_logging_from_config(tmp_path, cleanup_loggers):
    cleanup_loggers.append("tag_builder")
    config = Config(str(tmp_path / "config.json"))
    config.set("logging.console_level", "ERROR")
    config.set("logging.file_level", "INFO")
    config.set("logging.log_file", str(tmp_path / "app.log"))

    logger = setup_logging_from_config(config)

    assert logger.name == "tag_builder"
    assert logger.level == logging.INFO
    levels = sorted(h.level for h in logger.handlers if not isinstance(h, logging.NullHandler))
    assert levels == [logging.INFO, logging.ERROR]


def test_formatter_colors_level_names():
    record = logging.LogRecord("tag_builder", logging.WARNING, __file__, 1, "careful", None, None)

    colored = LogFormatter(colored=True, fmt="[%(levelname)s] %(message)s")
    plain = LogFormatter(colored=False, fmt="[%(levelname)s] %(message)s")

    assert plain.format(record) == "[WARNING] careful"
    if colored.colored:
        assert colored.format(record) == "[\033[33mWARNING\033[0m] careful"


def test_default_log_file_name():
    path = get_default_log_file()

    assert ".tag_builder" in path
    assert path.endswith(".log")
    assert "tag_builder_" in path
