"""HTML adapter for rendered node trees."""

from html import escape
from typing import List

from .tree import Node

VOID_TAGS = {"area", "br", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}

STYLESHEET = """
body { margin: 0; font-family: system-ui, sans-serif; background: #f5f6fa; color: #1f2330; }
.app { display: grid; grid-template-columns: auto 260px 1fr; min-height: 100vh; }
.journey-board { background: #1f2330; color: #fff; padding: 16px; width: 220px; }
.journey-board.collapsed { width: 48px; overflow: hidden; }
.journey-board.collapsed .board-title, .journey-board.collapsed .board-sub { display: none; }
.sidebar { background: #fff; border-right: 1px solid #e3e5ee; }
.task-list { list-style: none; margin: 0; padding: 8px; }
.task-item { display: flex; gap: 10px; align-items: center; padding: 10px; border-radius: 8px; cursor: pointer; }
.task-item.active { background: #e8edff; font-weight: 600; }
.ticon, .asset-icon { width: 32px; height: 32px; border-radius: 50%; background: #3b5bdb; color: #fff;
  display: flex; align-items: center; justify-content: center; }
.detail { padding: 24px; }
.asset-card { background: #fff; border-radius: 10px; padding: 14px; margin-bottom: 12px; box-shadow: 0 1px 3px rgba(0,0,0,.08); }
.asset-top { display: flex; justify-content: space-between; align-items: center; }
.asset-left { display: flex; gap: 12px; align-items: center; }
.asset-title { margin: 0; font-size: 1rem; }
.asset-sub { color: #6b7080; font-size: .8rem; }
.toggle-arrow { background: none; border: 0; cursor: pointer; }
.arrow { display: inline-block; transition: transform .2s; }
.asset-desc { display: none; margin-top: 10px; }
.asset-desc.open { display: block; }
.asset-desc p { margin: 0; }
.media-wrapper { margin-top: 10px; }
.media-wrapper video, .media-wrapper audio { width: 100%; }
"""


def _attributes(node: Node) -> str:
    parts: List[str] = []
    for name, value in node.attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(str(value), quote=True)}"')
    return "".join(parts)


def to_html(node: Node, indent: int = 0) -> str:
    """Serialize a node tree to indented, escaped HTML."""
    pad = "  " * indent
    open_tag = f"{pad}<{node.tag}{_attributes(node)}>"
    if node.tag in VOID_TAGS:
        return open_tag

    if not node.children:
        return f"{open_tag}{escape(node.text or '')}</{node.tag}>"

    lines = [open_tag]
    if node.text:
        lines.append(f"{pad}  {escape(node.text)}")
    lines.extend(to_html(child, indent + 1) for child in node.children)
    lines.append(f"{pad}</{node.tag}>")
    return "\n".join(lines)


def render_document(root: Node, title: str = "Project") -> str:
    """Wrap a page tree in a standalone HTML document."""
    return "\n".join([
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="utf-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1">',
        f"  <title>{escape(title)}</title>",
        f"  <style>{STYLESHEET}</style>",
        "</head>",
        "<body>",
        to_html(root, 1),
        "</body>",
        "</html>",
        "",
    ])
