"""Markdown rendering with wiki link support.

Converts markdown with Python-Markdown, then rewrites `[[Name]]` tokens in the
resulting HTML into anchors pointing at `/Name`.
"""

import re
from collections.abc import Sequence

import markdown

from welcomepage.core.types import Document, RenderedPage

DEFAULT_EXTENSIONS: tuple[str, ...] = ("tables", "fenced_code")

_WIKI_LINK_RE = re.compile(r"\[\[(.*?)\]\]")


def rewrite_wiki_links(html: str) -> str:
    """Replace every `[[Name]]` with `<a href="/Name">Name</a>`.

    The captured name is used verbatim (no escaping, no trimming).
    """
    return _WIKI_LINK_RE.sub(lambda m: f'<a href="/{m.group(1)}">{m.group(1)}</a>', html)


class MarkdownRenderer:
    """Renders markdown documents to HTML page models."""

    def __init__(self, *, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> None:
        """Initialize renderer.

        Args:
            extensions: Python-Markdown extension names to enable
        """
        self._extensions = list(extensions)

    def render(self, markdown_text: str) -> str:
        """Convert markdown to HTML and rewrite wiki links.

        A fresh converter is used for each call so repeated renders of the
        same text produce identical output.
        """
        html = markdown.markdown(markdown_text, extensions=self._extensions)
        return rewrite_wiki_links(html)

    def render_document(self, document: Document) -> RenderedPage:
        return RenderedPage(title=document.title, content=self.render(document.content))
