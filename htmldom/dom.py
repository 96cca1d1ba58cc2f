"""Document object model: lookup, traversal and serialization."""

from __future__ import annotations

from typing import Iterator

from .node import Node, NodeType
from .utils import escape_html, to_lower

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


class DOM:
    """A parsed document, rooted at a node of type ``NodeType.DOCUMENT``."""

    def __init__(self, root: Node) -> None:
        self.root = root

    def traverse(self) -> Iterator[Node]:
        """Yield every node, the root first, in document (pre-)order."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def _elements(self) -> Iterator[Node]:
        return (node for node in self.traverse() if node.type is NodeType.ELEMENT)

    def get_elements_by_tag_name(self, tag_name: str) -> list[Node]:
        """Return all elements whose tag matches ``tag_name``, ignoring ASCII case."""
        wanted = to_lower(tag_name)
        return [node for node in self._elements() if to_lower(node.tag) == wanted]

    def get_elements_by_class_name(self, class_name: str) -> list[Node]:
        """Return all elements whose class list holds ``class_name``."""
        return [node for node in self._elements() if node.has_class(class_name)]

    def get_element_by_id(self, element_id: str) -> Node | None:
        """Return the first element whose ``id`` attribute equals ``element_id``."""
        return next(
            (
                node
                for node in self._elements()
                if node.attributes.get("id") == element_id
            ),
            None,
        )

    def to_html(self) -> str:
        """Serialize the children of the root back to HTML text."""
        parts: list[str] = []
        # Items on the stack are nodes still to write or closing tags already built.
        stack: list[Node | str] = list(reversed(self.root.children))
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            if item.type is NodeType.ELEMENT:
                parts.append("<" + item.tag)
                parts.extend(
                    f' {name}="{escape_html(value)}"'
                    for name, value in item.attributes.items()
                )
                parts.append(">")
                if to_lower(item.tag) not in VOID_ELEMENTS:
                    stack.append(f"</{item.tag}>")
                    stack.extend(reversed(item.children))
            elif item.type is NodeType.TEXT:
                parts.append(escape_html(item.text))
            elif item.type is NodeType.COMMENT:
                parts.append(f"<!--{item.text}-->")
            elif item.type is NodeType.DOCTYPE:
                parts.append(f"<!DOCTYPE {item.text}>")
        return "".join(parts)