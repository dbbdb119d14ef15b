import logging
from logging.handlers import RotatingFileHandler

from click.testing import CliRunner

from prism_picker.__main__ import main
from prism_picker.logging_setup import configure_logging


def test_cli_help_lists_catalogs():
    result = CliRunner().invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "dark" in result.output and "other" in result.output
    assert "--log-level" in result.output


def test_cli_rejects_unknown_catalog():
    result = CliRunner().invoke(main, ["neon"])
    assert result.exit_code == 2


def test_configure_logging_adds_one_file_handler(tmp_path):
    logger = logging.getLogger("prism_picker")
    before = list(logger.handlers)
    try:
        path = configure_logging(tmp_path / "logs", "debug")
        configure_logging(tmp_path / "logs", "debug")
        handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(handlers) == 1
        assert path == tmp_path / "logs" / "prism.log"
        assert logger.level == logging.DEBUG
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
                handler.close()
