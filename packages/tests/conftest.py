"""Pytest configuration and shared fixtures."""

import logging
from collections.abc import Iterator

import pytest

# The plugin is registered via a ``pytest11`` entry point for external
# consumers.  Our own suite disables it (``-p no:timecounter``) and
# loads it here so coverage measures the import chain.
pytest_plugins = ["timecounter.testing._plugin"]


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo handler changes made by ``configure_logging()``."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers = original_handlers
    root.setLevel(original_level)
