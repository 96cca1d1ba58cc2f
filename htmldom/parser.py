"""Tree construction from tokens, following a reduced set of insertion modes."""

from __future__ import annotations

from enum import Enum, auto

from .dom import DOM
from .node import Node, NodeType
from .tokenizer import Token, TokenType, tokenize
from .utils import to_lower

_SPACE = frozenset(" \t\n\v\f\r")


class ParseError(RuntimeError):
    """Raised in strict mode when the input is malformed."""


class _Mode(Enum):
    INITIAL = auto()
    BEFORE_HTML = auto()
    BEFORE_HEAD = auto()
    IN_HEAD = auto()
    AFTER_HEAD = auto()
    IN_BODY = auto()


def _is_space(token: Token) -> bool:
    return token.type is TokenType.CHARACTER and token.data[:1] in _SPACE and token.data != ""


def _is_tag(token: Token, kind: TokenType, name: str) -> bool:
    return token.type is kind and to_lower(token.data) == name


class Parser:
    """Builds a document tree; ``html``, ``head`` and ``body`` are created when missing.

    In strict mode an end tag without a matching open element raises
    ``ParseError``; otherwise it is ignored.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict
        self._handlers = {
            _Mode.INITIAL: self._initial,
            _Mode.BEFORE_HTML: self._before_html,
            _Mode.BEFORE_HEAD: self._before_head,
            _Mode.IN_HEAD: self._in_head,
            _Mode.AFTER_HEAD: self._after_head,
            _Mode.IN_BODY: self._in_body,
        }
        self._document = Node(NodeType.DOCUMENT)
        self._open: list[Node] = [self._document]
        self._mode = _Mode.INITIAL

    def parse(self, text: str) -> DOM:
        """Parse ``text`` into a new document."""
        self._document = Node(NodeType.DOCUMENT)
        self._open = [self._document]
        self._mode = _Mode.INITIAL
        for token in tokenize(text):
            self._handlers[self._mode](token)
        return DOM(self._document)

    def _error(self, message: str) -> None:
        if self.strict:
            raise ParseError(f"Parse error: {message}")

    def _insert_element(self, token: Token) -> None:
        element = Node(
            NodeType.ELEMENT, tag=to_lower(token.data), attributes=dict(token.attributes)
        )
        self._open[-1].append_child(element)
        if not token.self_closing:
            self._open.append(element)

    def _insert_character(self, token: Token) -> None:
        self._open[-1].append_child(Node(NodeType.TEXT, text=token.data))

    def _close_element(self, token: Token) -> None:
        tag = to_lower(token.data)
        positions = [depth for depth, node in enumerate(self._open) if node.tag == tag]
        if positions:
            del self._open[positions[-1] :]
        else:
            self._error(f"No matching start tag for end tag: {token.data}")

    def _initial(self, token: Token) -> None:
        if token.type is TokenType.DOCTYPE:
            return
        self._mode = _Mode.BEFORE_HTML
        self._before_html(token)

    def _before_html(self, token: Token) -> None:
        if _is_space(token):
            return
        self._mode = _Mode.BEFORE_HEAD
        if _is_tag(token, TokenType.START_TAG, "html"):
            self._insert_element(token)
        else:
            self._insert_element(Token(TokenType.START_TAG, "html"))
            self._before_head(token)

    def _before_head(self, token: Token) -> None:
        if _is_space(token):
            return
        self._mode = _Mode.IN_HEAD
        if _is_tag(token, TokenType.START_TAG, "head"):
            self._insert_element(token)
        else:
            self._insert_element(Token(TokenType.START_TAG, "head"))
            self._in_head(token)

    def _in_head(self, token: Token) -> None:
        if _is_space(token):
            return
        self._open.pop()
        self._mode = _Mode.AFTER_HEAD
        if not _is_tag(token, TokenType.END_TAG, "head"):
            self._after_head(token)

    def _after_head(self, token: Token) -> None:
        if _is_space(token):
            return
        self._mode = _Mode.IN_BODY
        if _is_tag(token, TokenType.START_TAG, "body"):
            self._insert_element(token)
        else:
            self._insert_element(Token(TokenType.START_TAG, "body"))
            self._in_body(token)

    def _in_body(self, token: Token) -> None:
        if token.type is TokenType.CHARACTER:
            self._insert_character(token)
        elif token.type is TokenType.START_TAG:
            self._insert_element(token)
        elif token.type is TokenType.END_TAG:
            self._close_element(token)


def parse(text: str, strict: bool = False) -> DOM:
    """Parse ``text`` with a fresh parser."""
    return Parser(strict=strict).parse(text)