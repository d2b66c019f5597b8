"""Unit tests for the fencelight exception hierarchy."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import pytest

from fencelight.exceptions import (
    ConfigError,
    DependencyError,
    FencelightError,
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from fencelight.options import HighlightingOptions


@pytest.mark.unit
class TestExceptionHierarchy:
    """Test inheritance and messages of fencelight exceptions."""

    @pytest.mark.parametrize(
        "exc_class", [ValidationError, InvalidOptionsError, ConfigError, RenderingError, OutputWriteError]
    )
    def test_all_derive_from_base(self, exc_class):
        assert issubclass(exc_class, FencelightError)

    def test_validation_error_details(self):
        error = ValidationError("bad style", parameter_name="style", parameter_value="")
        assert isinstance(error, ValueError)
        assert error.message == "bad style"
        assert error.parameter_name == "style"

    def test_invalid_options_message(self):
        error = InvalidOptionsError("code_block", HighlightingOptions, dict)
        assert "HighlightingOptions" in str(error)
        assert "dict" in str(error)
        assert error.parameter_name == "options"

    def test_output_write_error(self):
        cause = OSError("disk full")
        error = OutputWriteError("css", original_error=cause)

        assert isinstance(error, RenderingError)
        assert error.rendering_stage == "write"
        assert error.sink == "css"
        assert "css" in str(error)
        assert "disk full" in str(error)

    def test_dependency_error_message(self):
        error = DependencyError(
            "markdown",
            missing_packages=[("mistune", ">=3.0.0")],
            version_mismatches=[("pygments", ">=2.13", "2.10")],
        )
        message = str(error)

        assert "markdown support requires" in message
        assert "requires >=2.13, but 2.10 is installed" in message
        assert 'pip install --upgrade "mistune>=3.0.0" "pygments>=2.13"' in message

    def test_dependency_error_custom_install_command(self):
        error = DependencyError("markdown", [("mistune", "")], install_command="pip install fencelight[markdown]")
        assert str(error).endswith("Install with: pip install fencelight[markdown]")
