import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logging():
    # scripts call setup_logging, which replaces the root handlers
    root = logging.getLogger()
    saved, level = root.handlers[:], root.level
    yield
    root.handlers = saved
    root.setLevel(level)
