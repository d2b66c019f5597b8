"""Integration tests for highlighted code blocks in the mistune pipeline."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import pytest

from fencelight import (
    CodeBlock,
    CodeBlockRenderer,
    DivWrapperRenderer,
    HighlightingOptions,
    create_markdown,
    render_markdown,
    with_classes,
)

mistune = pytest.importorskip("mistune")

GO_DOC = '```go\npackage main\n\nfunc main() {\n\tprintln("hi")\n}\n```\n'


@pytest.mark.integration
class TestMistunePipeline:
    """Test markdown documents rendered through mistune."""

    def test_go_block_is_highlighted(self):
        html = render_markdown(GO_DOC)

        assert '<code class="language-go">' in html
        assert html.startswith('<div class="highlight"')

    def test_matches_direct_rendering(self):
        block = CodeBlock.from_text('package main\n\nfunc main() {\n\tprintln("hi")\n}\n', info="go")
        assert render_markdown(GO_DOC) == CodeBlockRenderer().render_to_string(block)

    def test_highlighted_lines_with_classes(self):
        text = '```bash {hl_lines=["2-3"]}\nLINE1\nLINE2\nLINE3\nLINE4\n```\n'
        html = render_markdown(text, HighlightingOptions(format_options=(with_classes(),)))

        assert '<span class="hll">LINE2' in html
        assert '<span class="hll">LINE3' in html
        assert '<span class="hll">LINE4' not in html

    def test_plain_block_without_language(self):
        html = render_markdown('```\n"hi" <b>\n```\n')
        assert html == "<pre><code>&quot;hi&quot; &lt;b&gt;\n</code></pre>\n"

    def test_unknown_language_matches_mistune_output(self):
        text = "```zzz\n<b> & \"q\"\n```\n"
        assert render_markdown(text) == mistune.html(text)

    def test_nohl_block(self):
        html = render_markdown("```go {nohl}\nx := 1\n```\n")
        assert html == '<pre><code class="language-go">x := 1\n</code></pre>\n'

    def test_other_markdown_is_untouched(self):
        html = render_markdown("# Title\n\nSome *text* and `code`.\n")
        assert html == "<h1>Title</h1>\n<p>Some <em>text</em> and <code>code</code>.</p>\n"

    def test_sample_document(self, sample_markdown):
        html = render_markdown(sample_markdown)

        assert "<h1>Sample Document</h1>" in html
        assert '<code class="language-python">' in html
        assert "<pre><code>&quot;plain&quot; &lt;text&gt;\n</code></pre>" in html

    def test_css_collected_per_highlighted_block(self, css_buffer):
        options = HighlightingOptions(format_options=(with_classes(),), css_writer=css_buffer)
        render_markdown(GO_DOC, options)
        single = css_buffer.getvalue()

        css_buffer.seek(0)
        css_buffer.truncate()
        render_markdown(GO_DOC + "\n" + GO_DOC + "\n```\nplain\n```\n", options)

        assert single
        assert css_buffer.getvalue() == single * 2

    def test_div_wrapper(self):
        html = render_markdown(GO_DOC, HighlightingOptions(wrapper_renderer=DivWrapperRenderer()))

        assert html.startswith('<div class="highlight"><pre class="chroma"><code class="language-go" data-lang="go">')
        assert html.count("<pre") == 1

    def test_reusable_markdown_instance(self):
        markdown = create_markdown(HighlightingOptions(style="monokai"))
        assert markdown(GO_DOC) == markdown(GO_DOC)

    def test_plugins(self):
        text = "| a | b |\n|---|---|\n| 1 | 2 |\n\n```go\nx := 1\n```\n"
        html = render_markdown(text, plugins=["table"])

        assert "<table>" in html
        assert 'class="language-go"' in html
