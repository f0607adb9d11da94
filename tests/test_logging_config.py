# tests/test_logging_config.py
import logging

import pytest

from blog_api.app.core import logging_config
from blog_api.app.core.logging_config import LOG_FORMAT, resolve_level, setup_logging


@pytest.fixture
def fake_root(monkeypatch):
    """A standalone logger handed to ``setup_logging`` as the root logger."""
    root = logging.Logger("fake-root")
    real_get_logger = logging.getLogger

    def get_logger(name=None):
        return root if name is None else real_get_logger(name)

    monkeypatch.setattr(logging_config.logging, "getLogger", get_logger)
    yield root
    for handler in root.handlers:
        handler.close()


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("verbose", logging.INFO),
        ("", logging.INFO),
        (None, logging.INFO),
        ("Formatter", logging.INFO),
    ],
)
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected


def test_setup_logging_configures_once(fake_root):
    setup_logging("debug")
    assert fake_root.level == logging.DEBUG
    assert len(fake_root.handlers) == 1
    assert fake_root.handlers[0].formatter._fmt == LOG_FORMAT

    setup_logging("error")
    assert fake_root.level == logging.DEBUG
    assert len(fake_root.handlers) == 1


def test_setup_logging_unknown_level_means_info(fake_root):
    setup_logging("chatty")
    assert fake_root.level == logging.INFO


def test_setup_logging_writes_file(fake_root, tmp_path):
    logfile = tmp_path / "blog.log"
    setup_logging("INFO", str(logfile))
    assert len(fake_root.handlers) == 2
    fake_root.info("hello file")
    for handler in fake_root.handlers:
        handler.flush()
    assert "[INFO] fake-root: hello file" in logfile.read_text(encoding="utf-8")
