# tests/conftest.py
import logging
from logging.handlers import RotatingFileHandler
import pytest
from util.logger import _INIT_FLAG, ConsoleHandler


def _drop_app_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        root.removeHandler(h)
        if isinstance(h, (ConsoleHandler, RotatingFileHandler)):
            h.close()
    if hasattr(root, _INIT_FLAG):
        delattr(root, _INIT_FLAG)


@pytest.fixture
def clean_root():
    """Root logger with no handlers and no init flag; restored afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    _drop_app_handlers(root)
    yield root
    _drop_app_handlers(root)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
