"""Unit tests for formatter options and pygments registry lookups."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import pytest
from pygments import highlight
from pygments.lexers import get_lexer_by_name

from fencelight.highlighting.formatter import (
    CodeHtmlFormatter,
    available_styles,
    base_line_number,
    guess_language_lexer,
    highlight_lines,
    line_numbers_in_table,
    lookup_lexer,
    lookup_style,
    merge_format_options,
    prevent_surrounding_pre,
    style_exists,
    tab_width,
    with_classes,
    with_css_class,
    with_line_numbers,
)


@pytest.mark.unit
class TestFormatOptionHelpers:
    """Test the (name, value) option builders."""

    def test_with_classes(self):
        assert with_classes() == ("noclasses", False)
        assert with_classes(False) == ("noclasses", True)

    def test_highlight_lines_expands_ranges(self):
        assert highlight_lines([(2, 3), (5, 5)]) == ("hl_lines", [2, 3, 5])

    def test_highlight_lines_inverted_range(self):
        assert highlight_lines([(3, 1)]) == ("hl_lines", [])

    def test_simple_helpers(self):
        assert prevent_surrounding_pre() == ("nowrap", True)
        assert with_line_numbers() == ("linenos", "inline")
        assert line_numbers_in_table() == ("linenos", "table")
        assert base_line_number(7) == ("linenostart", 7)
        assert with_css_class("code") == ("cssclass", "code")
        assert tab_width(4) == ("tabsize", 4)

    def test_merge_later_entries_win(self):
        merged = merge_format_options([("noclasses", True), ("linenos", "inline"), ("noclasses", False)])
        assert merged == {"noclasses": False, "linenos": "inline"}


@pytest.mark.unit
class TestLexerLookup:
    """Test exact alias lexer lookup."""

    def test_known_language(self):
        lexer = lookup_lexer("go")
        assert lexer is not None
        assert "go" in lexer.aliases

    def test_lexer_keeps_newlines(self):
        assert lookup_lexer("python").stripnl is False

    def test_lookup_is_case_sensitive(self):
        assert lookup_lexer("Go") is None

    @pytest.mark.parametrize("language", ["not-a-language", "", None])
    def test_unknown_language(self, language):
        assert lookup_lexer(language) is None

    def test_guess_from_shebang(self):
        lexer = guess_language_lexer("#!/bin/bash\necho hello\n")
        assert lexer is not None
        assert lexer.aliases

    def test_guess_empty_text(self):
        assert guess_language_lexer("  \n") is None


@pytest.mark.unit
class TestStyleLookup:
    """Test style lookup with fallback."""

    def test_known_style(self):
        name, style = lookup_style("monokai")
        assert name == "monokai"
        assert style.background_color

    @pytest.mark.parametrize("name", ["no-such-style", "", None])
    def test_unknown_style_falls_back(self, name):
        assert lookup_style(name)[0] == "default"

    def test_style_exists(self):
        assert style_exists("default")
        assert not style_exists("no-such-style")
        assert not style_exists(None)

    def test_available_styles(self):
        styles = available_styles()
        assert "default" in styles
        assert "github-dark" in styles
        assert styles == sorted(styles)


@pytest.mark.unit
class TestCodeHtmlFormatter:
    """Test language annotation of the code element."""

    def test_language_class_on_code_element(self):
        formatter = CodeHtmlFormatter(language="go", wrapcode=True)
        html = highlight("x := 1\n", get_lexer_by_name("go"), formatter)

        assert '<code class="language-go">' in html
        assert html.rstrip().endswith("</code></pre></div>")

    def test_code_element_without_language(self):
        formatter = CodeHtmlFormatter(wrapcode=True)
        html = highlight("x := 1\n", get_lexer_by_name("go"), formatter)

        assert "<code>" in html
        assert "language-" not in html

    def test_nowrap_omits_container(self):
        formatter = CodeHtmlFormatter(language="go", wrapcode=True, nowrap=True)
        html = highlight("x := 1\n", get_lexer_by_name("go"), formatter)

        assert "<pre" not in html
        assert "<code" not in html
        assert "<div" not in html

    def test_css_selector(self):
        assert CodeHtmlFormatter().css_selector() == ".highlight"
        assert CodeHtmlFormatter(cssclass="code").css_selector() == ".code"
