"""Unit tests for tokenizing and formatting a single block."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from io import StringIO
from unittest.mock import MagicMock, patch

import pytest
from utils import FailingWriter, RecordingWrapper

from fencelight.exceptions import OutputWriteError
from fencelight.highlighting.attributes import HighlightAttributes
from fencelight.highlighting.config import build_highlight_config
from fencelight.highlighting.executor import highlight_block
from fencelight.highlighting.formatter import with_classes
from fencelight.options import HighlightingOptions

GO_SOURCE = 'package main\n\nfunc main() {\n\tprintln("hi")\n}\n'


def _run(text, attributes, options=None, writer=None):
    options = options or HighlightingOptions()
    writer = writer if writer is not None else StringIO()
    config = build_highlight_config(options, attributes)
    return highlight_block(writer, text, attributes, config, options), writer


@pytest.mark.unit
class TestHighlightBlock:
    """Test the highlighted path and its fallbacks."""

    def test_highlights_known_language(self):
        done, writer = _run(GO_SOURCE, HighlightAttributes(language="go"))
        html = writer.getvalue()

        assert done is True
        assert html.startswith('<div class="highlight"')
        assert '<code class="language-go">' in html
        assert "println" in html

    def test_nohl_writes_nothing(self):
        done, writer = _run(GO_SOURCE, HighlightAttributes(language="go", attributes={"nohl": True}))
        assert done is False
        assert writer.getvalue() == ""

    def test_unknown_language_writes_nothing(self):
        done, writer = _run(GO_SOURCE, HighlightAttributes(language="not-a-language"))
        assert done is False
        assert writer.getvalue() == ""

    def test_no_language_without_guessing(self):
        done, writer = _run("#!/bin/bash\necho hi\n", HighlightAttributes())
        assert done is False
        assert writer.getvalue() == ""

    def test_guess_language(self):
        options = HighlightingOptions(guess_language=True)
        done, writer = _run("#!/bin/bash\necho hi\n", HighlightAttributes(), options)

        assert done is True
        assert '<code class="language-' in writer.getvalue()

    def test_tokenizer_failure_falls_back(self):
        lexer = MagicMock()
        lexer.get_tokens.side_effect = RuntimeError("lexer exploded")

        with patch("fencelight.highlighting.executor.lookup_lexer", return_value=lexer):
            done, writer = _run(GO_SOURCE, HighlightAttributes(language="go"))

        assert done is False
        assert writer.getvalue() == ""

    def test_formatter_failure_falls_back(self):
        with patch("fencelight.highlighting.executor.CodeHtmlFormatter", side_effect=ValueError("bad option")):
            done, writer = _run(GO_SOURCE, HighlightAttributes(language="go"))

        assert done is False
        assert writer.getvalue() == ""

    def test_highlighted_lines_with_classes(self):
        options = HighlightingOptions(format_options=(with_classes(),))
        attrs = HighlightAttributes(language="bash", attributes={"hl_lines": ["2-3"]})
        done, writer = _run("LINE1\nLINE2\nLINE3\nLINE4\n", attrs, options)
        html = writer.getvalue()

        assert done is True
        assert '<span class="hll">LINE2' in html
        assert '<span class="hll">LINE3' in html
        assert '<span class="hll">LINE1' not in html
        assert '<span class="hll">LINE4' not in html

    def test_code_block_options_hook(self):
        seen = []

        def hook(context):
            seen.append(context)
            return [("cssclass", "custom")]

        options = HighlightingOptions(code_block_options=hook)
        done, writer = _run(GO_SOURCE, HighlightAttributes(language="go", attributes={"x": 1}), options)

        assert done is True
        assert writer.getvalue().startswith('<div class="custom"')
        assert len(seen) == 1
        assert seen[0].language == "go"
        assert seen[0].highlighted is True
        assert seen[0].get_attribute("x") == 1


@pytest.mark.unit
class TestWrapperAndCss:
    """Test wrapper renderer calls and CSS output."""

    def test_wrapper_called_once_each_way(self):
        wrapper = RecordingWrapper()
        options = HighlightingOptions(wrapper_renderer=wrapper)
        done, writer = _run(GO_SOURCE, HighlightAttributes(language="go"), options)
        html = writer.getvalue()

        assert done is True
        assert wrapper.entering_flags == [True, False]
        assert all(context.highlighted and context.language == "go" for _, context in wrapper.calls)
        assert html.startswith(RecordingWrapper.OPEN)
        assert html.endswith(RecordingWrapper.CLOSE)

    def test_wrapper_suppresses_formatter_container(self):
        options = HighlightingOptions(wrapper_renderer=RecordingWrapper())
        _, writer = _run(GO_SOURCE, HighlightAttributes(language="go"), options)
        html = writer.getvalue()

        assert "<pre" not in html
        assert "<div" not in html

    def test_wrapper_not_called_when_not_highlighted(self):
        wrapper = RecordingWrapper()
        options = HighlightingOptions(wrapper_renderer=wrapper)
        done, _ = _run(GO_SOURCE, HighlightAttributes(language="not-a-language"), options)

        assert done is False
        assert wrapper.calls == []

    def test_css_written_once_per_block(self, css_buffer):
        options = HighlightingOptions(format_options=(with_classes(),), css_writer=css_buffer)
        _run(GO_SOURCE, HighlightAttributes(language="go"), options)
        first = css_buffer.getvalue()
        _run(GO_SOURCE, HighlightAttributes(language="go"), options)

        assert ".highlight" in first
        assert first.endswith("\n")
        assert css_buffer.getvalue() == first * 2

    def test_css_not_written_for_plain_blocks(self, css_buffer):
        options = HighlightingOptions(css_writer=css_buffer)
        _run(GO_SOURCE, HighlightAttributes(language="go", attributes={"nohl": True}), options)
        assert css_buffer.getvalue() == ""

    def test_css_write_failure(self):
        options = HighlightingOptions(css_writer=FailingWriter())
        with pytest.raises(OutputWriteError) as exc_info:
            _run(GO_SOURCE, HighlightAttributes(language="go"), options)

        assert exc_info.value.sink == "css"
        assert isinstance(exc_info.value.original_error, OSError)
