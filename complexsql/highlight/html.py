"""HTML rendering of classified SQL tokens."""

from __future__ import annotations

import html
from typing import Dict, Iterable, Mapping, Optional

from complexsql.lang import FUNCTIONS, KEYWORDS, Category, Token, classify

DEFAULT_CSS_CLASSES: Dict[Category, str] = {category: category.value for category in Category}


def _escape(text: str) -> str:
    return html.escape(text, quote=False)


class HTMLRenderer:
    """
    Render token streams as HTML fragments.

    Every classified token becomes ``<span class="...">`` around its escaped
    text; plain text is escaped and emitted as-is. The output is a fragment,
    not a document.

    Args:
        css_classes: Overrides for the category to CSS class mapping
        wrap: Surround the fragment with ``<pre><code>``
        container_class: Class attribute of the ``<pre>`` wrapper
    """

    def __init__(
        self,
        css_classes: Optional[Mapping[Category, str]] = None,
        *,
        wrap: bool = False,
        container_class: str = "sql-code",
    ):
        self.css_classes = dict(DEFAULT_CSS_CLASSES)
        if css_classes:
            self.css_classes.update(css_classes)
        self.wrap = wrap
        self.container_class = container_class

    def render_token(self, token: Token) -> str:
        text = _escape(token.text)
        if token.category is None:
            return text
        css_class = html.escape(self.css_classes[token.category], quote=True)
        return f'<span class="{css_class}">{text}</span>'

    def render(self, tokens: Iterable[Token]) -> str:
        body = "".join(self.render_token(token) for token in tokens)
        if not self.wrap:
            return body
        container = html.escape(self.container_class, quote=True)
        return f'<pre class="{container}"><code>{body}</code></pre>'


def render(tokens: Iterable[Token], css_classes: Optional[Mapping[Category, str]] = None) -> str:
    """Render ``tokens`` as an HTML fragment."""
    return HTMLRenderer(css_classes).render(tokens)


def highlight_sql(
    source: str,
    keywords: Iterable[str] = KEYWORDS,
    functions: Iterable[str] = FUNCTIONS,
    css_classes: Optional[Mapping[Category, str]] = None,
) -> str:
    """
    Classify and render SQL in one call.

    Examples:
        >>> highlight_sql("SELECT 1 < 2")
        '<span class="keyword">SELECT</span> <span class="number">1</span> &lt; <span class="number">2</span>'
    """
    return render(classify(source, keywords, functions), css_classes)


__all__ = ["DEFAULT_CSS_CLASSES", "HTMLRenderer", "render", "highlight_sql"]
