"""Document tree nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator


class NodeType(Enum):
    """Kind of a node in the document tree."""

    DOCUMENT = auto()
    ELEMENT = auto()
    TEXT = auto()
    COMMENT = auto()
    DOCTYPE = auto()


@dataclass(eq=False)
class Node:
    """A node of the document tree; equality is identity."""

    type: NodeType
    tag: str = ""
    text: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    parent: Node | None = field(default=None, repr=False)

    def append_child(self, child: Node) -> None:
        """Attach ``child`` as the last child of this node."""
        child.parent = self
        self.children.append(child)

    def get_attribute(self, name: str) -> str:
        """Return the attribute value, or an empty string when it is absent."""
        return self.attributes.get(name, "")

    def has_class(self, class_name: str) -> bool:
        """Tell whether the whitespace-separated class list holds ``class_name``."""
        return class_name in self.attributes.get("class", "").split()

    def text_content(self) -> str:
        """Concatenate the text of this node and all its descendants in document order."""
        return "".join(self._texts())

    def _texts(self) -> Iterator[str]:
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            if node.type is NodeType.TEXT:
                yield node.text
            else:
                stack.extend(reversed(node.children))