import json
import logging

import pytest
from rich.logging import RichHandler

from argtoken.utils import setup_logging, trim_indentation


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) in (RichHandler, logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_trim_indentation_first_line():
    assert trim_indentation("    a\n      b\n    c") == "a\n  b\nc"


def test_trim_indentation_leading_newline():
    text = "\n\tUSAGE:\n\ttool\n\n\tOPTIONS:"
    assert trim_indentation(text) == "\nUSAGE:\ntool\n\nOPTIONS:"


def test_trim_indentation_unindented():
    assert trim_indentation("a\n  b") == "a\n  b"
    assert trim_indentation("") == ""


def test_trim_indentation_leaves_shallower_lines():
    assert trim_indentation("    a\n  b") == "a\n  b"


def test_setup_logging_cli():
    setup_logging(mode="cli")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_setup_logging_json_from_env(monkeypatch, capsys):
    monkeypatch.setenv("ARGTOKEN_LOG_MODE", "json")
    setup_logging(console_log_level=logging.INFO)
    logging.getLogger("argtoken").info("classified")
    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "classified"
    assert record["name"] == "argtoken"


def test_setup_logging_file(tmp_path):
    log_file = tmp_path / "argtoken.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    logging.getLogger("argtoken").debug("to file")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "[argtoken] [DEBUG] to file" in log_file.read_text()


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError):
        setup_logging(mode="xml")
