"""Renderers for scanner output."""

from lit2md.renderers.markdown import MarkdownRenderer
from lit2md.renderers.protocol import LineRenderer

__all__ = ["LineRenderer", "MarkdownRenderer"]
