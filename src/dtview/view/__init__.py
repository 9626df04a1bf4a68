"""Rendering and view state."""

from .controller import ViewController
from .html import render_document, to_html
from .media import MediaKind, media_kind, to_embed_url
from .text import to_text
from .tree import Node, element

__all__ = [
    "ViewController",
    "render_document",
    "to_html",
    "MediaKind",
    "media_kind",
    "to_embed_url",
    "to_text",
    "Node",
    "element",
]
