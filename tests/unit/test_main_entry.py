"""Unit tests for __main__.py entry point."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys
from unittest.mock import patch

import pytest


@pytest.mark.unit
class TestFencelightMain:
    """Test fencelight/__main__.py entry point."""

    def test_main_module_importable(self):
        import fencelight.__main__  # noqa: F401

    def test_main_with_help(self):
        from fencelight.cli import main

        with patch.object(sys, "argv", ["fencelight", "--help"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 0

    def test_package_exports(self):
        import fencelight

        assert fencelight.__version__
        for name in fencelight.__all__:
            assert hasattr(fencelight, name), name
