"""A small CSS-like selector engine over the document tree."""

from __future__ import annotations

import re
from typing import Iterator

from .node import Node, NodeType
from .utils import to_lower

_SPACE = frozenset(" \t\n\v\f\r")
_COMBINATORS = frozenset(">+~")
_NAME_END = re.compile(r"[.#\[]")


def _tokenize_selector(selector: str) -> list[str]:
    tokens: list[str] = []
    current = ""
    for char in selector:
        if char in _SPACE or char in _COMBINATORS:
            if current:
                tokens.append(current)
                current = ""
            tokens.append(" " if char in _SPACE else char)
        else:
            current += char
    if current:
        tokens.append(current)
    return tokens


def _name_end(token: str, start: int) -> int:
    found = _NAME_END.search(token, start)
    return found.start() if found else len(token)


def _matches(node: Node, token: str) -> bool:
    if node.type is not NodeType.ELEMENT:
        return False
    position = 0
    while position < len(token):
        char = token[position]
        if char == "[":
            end = token.find("]", position + 1)
            if end == -1:
                return False
            selector = token[position + 1 : end]
            position = end + 1
            name, equals, value = selector.partition("=")
            if equals:
                if value[:1] in ('"', "'") and value:
                    value = value[1:-1]
                if node.get_attribute(name) != value:
                    return False
            elif selector not in node.attributes:
                return False
            continue
        start = position + 1 if char in ".#" else position
        position = _name_end(token, start)
        name = token[start:position]
        if char == ".":
            matched = node.has_class(name)
        elif char == "#":
            matched = node.get_attribute("id") == name
        else:
            matched = to_lower(node.tag) == to_lower(name)
        if not matched:
            return False
    return True


class Query:
    """Runs selectors such as ``p.intro``, ``#title`` or ``input[type=text]``."""

    def __init__(self, root: Node) -> None:
        self.root = root

    def _matching(self, selector: str) -> Iterator[Node]:
        tokens = _tokenize_selector(selector)
        last = len(tokens) - 1
        stack = [(self.root, 0)]
        while stack:
            node, index = stack.pop()
            if index > last:
                continue
            token = tokens[index]
            if token == " ":
                pending = [
                    step
                    for child in node.children
                    for step in ((child, index + 1), (child, index))
                ]
            elif _matches(node, token):
                if index == last:
                    yield node
                    continue
                pending = [(child, index + 1) for child in node.children]
            else:
                pending = [(child, index) for child in node.children]
            stack.extend(reversed(pending))

    def select(self, selector: str) -> list[Node]:
        """Return every node matched by ``selector``, in document order."""
        return list(self._matching(selector))

    def select_first(self, selector: str) -> Node | None:
        """Return the first node matched by ``selector``, or None."""
        return next(self._matching(selector), None)