"""Test utilities for the fencelight test suite.

Helpers for recording wrapper calls and simulating failing output sinks.
"""

from io import StringIO

from fencelight.highlighting.wrappers import WrapperRenderer


class FailingWriter(StringIO):
    """Output sink whose writes always fail."""

    def write(self, s):
        raise OSError("disk full")


class RecordingWrapper(WrapperRenderer):
    """Wrapper renderer that records every call and writes simple markers."""

    OPEN = "<wrap>"
    CLOSE = "</wrap>\n"

    def __init__(self):
        self.calls = []

    def render(self, writer, context, entering):
        self.calls.append((entering, context))
        writer.write(self.OPEN if entering else self.CLOSE)

    @property
    def entering_flags(self):
        return [entering for entering, _ in self.calls]
