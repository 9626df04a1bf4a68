"""Terminal adapter for rendered node trees."""

from typing import List

from .tree import Node


def _media_line(node: Node) -> str:
    src = node.attrs.get("src") or node.attrs.get("href") or ""
    if node.tag == "a":
        return f"↗ {node.text}: {src}"
    label = "embed" if node.tag == "iframe" else node.tag
    return f"[{label}] {src}"


def _lines(node: Node, depth: int, out: List[str]) -> None:
    pad = "  " * depth

    if node.has_class("journey-board"):
        state = "collapsed" if node.has_class("collapsed") else "expanded"
        title = node.by_class("board-title")
        out.append(f"{pad}== {title[0].text if title else ''} (board {state}) ==")
        return

    if node.has_class("task-item"):
        marker = "▸" if node.has_class("active") else " "
        label = node.by_class("ttext")[0].text
        out.append(f"{pad}{marker} {int(node.attrs['data-index']) + 1}. {label}")
        return

    if node.has_class("asset-card") and not node.has_class("empty"):
        expanded = node.by_class("toggle-arrow")[0].attrs["aria-expanded"] == "true"
        icon = node.by_class("asset-icon")[0].text
        title = node.by_class("asset-title")[0].text
        sub = node.by_class("asset-sub")[0].text
        position = int(node.attrs.get("data-position", 0)) + 1
        out.append(f"{pad}[{'-' if expanded else '+'}] {position}. {icon} {title}  ({sub})")
        if expanded:
            for child in node.by_class("asset-desc")[0].walk():
                if child.tag == "p" and child.text:
                    out.append(f"{pad}      {child.text}")
                elif child.tag in ("video", "audio", "iframe", "a"):
                    out.append(f"{pad}      {_media_line(child)}")
        return

    if node.tag == "h2" and node.text:
        out.append(f"{pad}# {node.text}")
        return

    if node.text:
        out.append(f"{pad}{node.text}")
    for child in node.children:
        _lines(child, depth + (1 if node.tag in ("ul", "section") else 0), out)


def to_text(node: Node) -> str:
    """Render a node tree as plain text for the terminal."""
    out: List[str] = []
    _lines(node, 0, out)
    return "\n".join(out)
