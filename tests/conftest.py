from __future__ import annotations

import logging

import pytest

from src.utils.observability import HANDLER_NAME


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop the CLI's stderr handler so it never outlives pytest's capture stream."""
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if h.get_name() == HANDLER_NAME:
            root.removeHandler(h)
    root.setLevel(level)
