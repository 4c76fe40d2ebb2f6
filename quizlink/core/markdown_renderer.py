"""Markdown rendering for question statements and options.

Statements travel inside share links as raw markdown; the runner asks the
host for HTML fragments so every client renders them the same way. Raw HTML
in the source is disabled because the markdown comes from whoever built the
link.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt

from quizlink.core.models import MultipleChoiceQuestion, Question, Quiz, SingleChoiceQuestion


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown text into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        """Render a short label (an option) without the wrapping paragraph."""

        return self._markdown.renderInline(markdown_text.strip())

    def render_question(self, question: Question) -> dict[str, object]:
        rendered: dict[str, object] = {"statement_html": self.render_fragment(question.statement)}
        if isinstance(question, (SingleChoiceQuestion, MultipleChoiceQuestion)):
            rendered["options_html"] = [self.render_inline(option) for option in question.options]
        return rendered

    def render_quiz(self, quiz: Quiz) -> list[dict[str, object]]:
        return [self.render_question(question) for question in quiz.questions]


# Shared instance; MarkdownIt is safe to reuse for read-only renders.
renderer = MarkdownRenderer()
