import logging

from analogclock.logging_config import setup_logging
from analogclock.main import parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.debug is False
    assert args.log_file is None


def test_parse_args_flags(tmp_path):
    log_path = str(tmp_path / "clock.log")
    args = parse_args(["--debug", "--log-file", log_path])
    assert args.debug is True
    assert args.log_file == log_path


def test_setup_logging_does_not_stack_handlers(tmp_path):
    log_path = tmp_path / "clock.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_path))
    setup_logging(level=logging.DEBUG, log_file=str(log_path))

    logger = logging.getLogger("analogclock")
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    assert "Logging initialized." in log_path.read_text(encoding="utf-8")
