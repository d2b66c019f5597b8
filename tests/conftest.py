"""Pytest configuration and shared fixtures for the fencelight test suite.

This module provides shared fixtures and test configuration used across
the entire test suite.
"""

import logging
from io import StringIO

import pytest

from fencelight.options import HighlightingOptions
from fencelight.renderers.code_block import CodeBlockRenderer


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def isolated_config_env(monkeypatch):
    """Keep a config file named in the environment out of every test."""
    monkeypatch.delenv("FENCELIGHT_CONFIG", raising=False)


@pytest.fixture
def css_buffer() -> StringIO:
    """Provide an in-memory CSS sink."""
    return StringIO()


@pytest.fixture
def renderer() -> CodeBlockRenderer:
    """Provide a code block renderer with default options."""
    return CodeBlockRenderer(HighlightingOptions())


@pytest.fixture
def sample_markdown() -> str:
    """Provide a markdown document mixing highlighted and plain blocks.

    Returns
    -------
    str
        Markdown with a Python block, a block with line highlights and an
        unlabelled block.

    """
    return '''# Sample Document

Some text with `inline code`.

```python
def hello_world():
    print("Hello, World!")
```

```bash {hl_lines=["2-3"]}
LINE1
LINE2
LINE3
LINE4
```

```
"plain" <text>
```
'''


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers the CLI attaches to the package logger."""
    logger = logging.getLogger("fencelight")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
