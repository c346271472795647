# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from taskpad.logging_setup import setup_logging


@pytest.fixture()
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_writes_debug_file_and_filters_console(
    tmp_path: Path, restore_root_logger: None
) -> None:
    setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)

    root = logging.getLogger()
    assert len(root.handlers) == 2
    console = next(h for h in root.handlers if not isinstance(h, logging.FileHandler))

    ours = logging.LogRecord("taskpad.tasks.task_store", logging.WARNING, __file__, 1, "x", None, None)
    noisy = logging.LogRecord("urllib3", logging.WARNING, __file__, 1, "x", None, None)
    assert console.filter(ours)
    assert not console.filter(noisy)

    logging.getLogger("taskpad.test").debug("hello file")
    for h in root.handlers:
        h.flush()
    assert "hello file" in (tmp_path / "logs" / "taskpad.log").read_text("utf-8")


def test_setup_logging_without_file(restore_root_logger: None) -> None:
    setup_logging(log_dir=None)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)
