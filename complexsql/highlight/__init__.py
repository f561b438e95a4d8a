"""Markup renderers for classified SQL."""

from .html import DEFAULT_CSS_CLASSES, HTMLRenderer, highlight_sql, render

__all__ = ["DEFAULT_CSS_CLASSES", "HTMLRenderer", "highlight_sql", "render"]
