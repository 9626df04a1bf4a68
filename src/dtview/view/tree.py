"""Toolkit-independent description of rendered UI."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional


@dataclass
class Node:
    """A UI element: tag, attributes, optional text and child nodes."""

    tag: str
    attrs: Dict[str, Any] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)
    text: Optional[str] = None

    @property
    def classes(self) -> List[str]:
        return str(self.attrs.get("class", "")).split()

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def walk(self) -> Iterator["Node"]:
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, predicate: Callable[["Node"], bool]) -> List["Node"]:
        return [node for node in self.walk() if predicate(node)]

    def by_class(self, name: str) -> List["Node"]:
        """Return all nodes in the subtree carrying the CSS class ``name``."""
        return self.find_all(lambda node: node.has_class(name))

    def by_id(self, element_id: str) -> Optional["Node"]:
        for node in self.walk():
            if node.attrs.get("id") == element_id:
                return node
        return None


def element(
    tag: str,
    *children: Optional[Node],
    cls: Optional[str] = None,
    text: Optional[str] = None,
    attrs: Optional[Dict[str, Any]] = None,
) -> Node:
    """Build a node. ``None`` children are dropped."""
    node_attrs = dict(attrs or {})
    if cls:
        node_attrs["class"] = cls
    return Node(
        tag=tag,
        attrs=node_attrs,
        children=[child for child in children if child is not None],
        text=text,
    )
