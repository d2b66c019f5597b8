"""Unit tests for plain rendering of blocks that are not highlighted."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from io import StringIO

import pytest
from utils import RecordingWrapper

from fencelight.highlighting.fallback import render_plain
from fencelight.nodes import CodeBlockContext
from fencelight.options import HighlightingOptions


def _render(lines, context, options=None, **kwargs):
    writer = StringIO()
    render_plain(writer, lines, context, options or HighlightingOptions(), **kwargs)
    return writer.getvalue()


@pytest.mark.unit
class TestRenderPlain:
    """Test plain, escaped block output."""

    def test_no_language(self):
        html = _render(['"hi" <b>\n'], CodeBlockContext())
        assert html == "<pre><code>&quot;hi&quot; &lt;b&gt;\n</code></pre>\n"

    def test_language_class(self):
        html = _render(["x\n"], CodeBlockContext(language="zzz"))
        assert html == '<pre><code class="language-zzz">x\n</code></pre>\n'

    def test_lines_written_in_order(self):
        html = _render(["a\n", "b\n", "c"], CodeBlockContext())
        assert html == "<pre><code>a\nb\nc</code></pre>\n"

    def test_host_escaper(self):
        html = _render(["a&b\n"], CodeBlockContext(), escape=lambda text: text.upper())
        assert html == "<pre><code>A&B\n</code></pre>\n"

    def test_wrapper_renderer(self):
        wrapper = RecordingWrapper()
        html = _render(["x\n"], CodeBlockContext(language="zzz"), HighlightingOptions(wrapper_renderer=wrapper))

        assert html == "<wrap>x\n</wrap>\n"
        assert wrapper.entering_flags == [True, False]
        assert all(not context.highlighted for _, context in wrapper.calls)
