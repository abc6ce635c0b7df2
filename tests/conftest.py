import logging

import pytest


@pytest.fixture(autouse=True)
def reset_pxtext_logging():
    """setup_logging() binds handlers to the current stderr; drop them after each test."""
    root = logging.getLogger("pxtext")
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
