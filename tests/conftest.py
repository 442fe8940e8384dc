"""Shared pytest fixtures for fileglob tests."""
from typing import List

import pytest

from fileglob.core import logger as logger_module


@pytest.fixture
def project_files() -> List[str]:
    """Relative paths of a small node project."""
    return [
        "package.json",
        "node-terminal/docs.txt",
        "node-terminal/examples",
        "node-terminal/examples/clear.js",
        "node-terminal/examples/colors.js",
        "node-terminal/examples/info.js",
        "node-terminal/examples/moving.js",
        "node-terminal/index.js",
        "node-terminal/LICENSE",
        "node-terminal/package.json",
        "node-terminal/README.md",
        "node-terminal/terminal.js",
        "node-terminal/tests",
        "node-terminal/tests/basic.js",
        "node-terminal/tty_test.js",
    ]


@pytest.fixture
def reset_global_logger():
    """Drop the global logger after the test so the next one is rebuilt."""
    yield
    logger_module._global_logger = None
