from __future__ import annotations

from quizlink.core.markdown_renderer import MarkdownRenderer


def test_render_fragment():
    renderer = MarkdownRenderer()
    assert renderer.render_fragment("What is **2 + 2**?") == "<p>What is <strong>2 + 2</strong>?</p>\n"
    assert renderer.render_fragment("   ") == "<p><em>No content provided.</em></p>"


def test_raw_html_is_escaped():
    html = MarkdownRenderer().render_fragment("<script>alert(1)</script>")
    assert "<script>" not in html


def test_render_quiz(full_quiz):
    rendered = MarkdownRenderer().render_quiz(full_quiz)
    assert len(rendered) == 3
    assert "options_html" not in rendered[0]
    assert rendered[1]["options_html"] == ["Lima", "Quito", "Bogotá"]
