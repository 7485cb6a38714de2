"""Unit tests for chat bubble text rendering."""

import pytest_check as check

from geminichat.ui.chat_page import markdown_to_html, plain_to_html


class TestMarkdownToHtml:
    def test_escapes_html(self) -> None:
        rendered = markdown_to_html("<script>alert(1)</script>")

        check.is_not_in("<script>", rendered)
        check.is_in("&lt;script&gt;", rendered)

    def test_bold_italic_and_inline_code(self) -> None:
        rendered = markdown_to_html("**Heap** is *fast*: use `heapq`")

        check.is_in("<strong>Heap</strong>", rendered)
        check.is_in("<em>fast</em>", rendered)
        check.is_in('<code class="inline-code">heapq</code>', rendered)

    def test_code_block(self) -> None:
        rendered = markdown_to_html("```python\nx = 1\n```")

        assert rendered.startswith('<pre class="code-block"><code>')
        assert "x = 1" in rendered

    def test_unordered_list(self) -> None:
        rendered = markdown_to_html("Steps:\n- push\n- pop")

        check.is_in("<ul>", rendered)
        check.is_in("<li>push</li>", rendered)
        check.is_in("<li>pop</li>", rendered)
        check.is_in("</ul>", rendered)

    def test_ordered_list_after_unordered(self) -> None:
        rendered = markdown_to_html("- a\n1. first\n2. second")

        check.equal(rendered.count("<ul>"), 1)
        check.equal(rendered.count("<ol>"), 1)
        check.less(rendered.index("</ul>"), rendered.index("<ol>"))

    def test_newlines_become_breaks(self) -> None:
        assert markdown_to_html("line one\nline two") == "line one<br>line two"


class TestPlainToHtml:
    def test_escapes_and_breaks_lines(self) -> None:
        assert plain_to_html("a < b\nb > c") == "a &lt; b<br>b &gt; c"
