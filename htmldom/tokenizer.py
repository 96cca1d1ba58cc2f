"""Character-level HTML tokenizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable


class TokenType(Enum):
    """Kind of a token produced by the tokenizer."""

    DOCTYPE = auto()
    START_TAG = auto()
    END_TAG = auto()
    COMMENT = auto()
    CHARACTER = auto()
    EOF = auto()


@dataclass
class Token:
    """A tag or a single character of text."""

    type: TokenType
    data: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    self_closing: bool = False


class _State(Enum):
    DATA = auto()
    TAG_OPEN = auto()
    TAG_NAME = auto()
    END_TAG_OPEN = auto()
    SELF_CLOSING_START_TAG = auto()
    BEFORE_ATTRIBUTE_NAME = auto()
    ATTRIBUTE_NAME = auto()
    AFTER_ATTRIBUTE_NAME = auto()
    BEFORE_ATTRIBUTE_VALUE = auto()
    ATTRIBUTE_VALUE_DOUBLE_QUOTED = auto()
    ATTRIBUTE_VALUE_SINGLE_QUOTED = auto()
    ATTRIBUTE_VALUE_UNQUOTED = auto()
    AFTER_ATTRIBUTE_VALUE_QUOTED = auto()
    AFTER_ATTRIBUTE_VALUE_UNQUOTED = auto()


_WHITESPACE = frozenset(" \t\n\r\f")


def _is_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


class Tokenizer:
    """Turns HTML text into tokens; each text character becomes its own token.

    A tag left unfinished at the end of the input is dropped.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._handlers: dict[_State, Callable[[str], bool]] = {
            _State.DATA: self._data,
            _State.TAG_OPEN: self._tag_open,
            _State.TAG_NAME: self._tag_name,
            _State.END_TAG_OPEN: self._end_tag_open,
            _State.SELF_CLOSING_START_TAG: self._self_closing_start_tag,
            _State.BEFORE_ATTRIBUTE_NAME: self._before_attribute_name,
            _State.ATTRIBUTE_NAME: self._attribute_name,
            _State.AFTER_ATTRIBUTE_NAME: self._after_attribute_name,
            _State.BEFORE_ATTRIBUTE_VALUE: self._before_attribute_value,
            _State.ATTRIBUTE_VALUE_DOUBLE_QUOTED: self._attribute_value_double_quoted,
            _State.ATTRIBUTE_VALUE_SINGLE_QUOTED: self._attribute_value_single_quoted,
            _State.ATTRIBUTE_VALUE_UNQUOTED: self._attribute_value_unquoted,
            _State.AFTER_ATTRIBUTE_VALUE_QUOTED: self._after_attribute_value,
            _State.AFTER_ATTRIBUTE_VALUE_UNQUOTED: self._after_attribute_value,
        }
        self._reset()

    def _reset(self) -> None:
        self._state = _State.DATA
        self._current = Token(TokenType.START_TAG)
        self._attribute_name = ""
        self._attribute_value = ""
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the whole input and return the tokens in order."""
        self._reset()
        for char in self.text:
            # A handler returns True when the character must be consumed again.
            while self._handlers[self._state](char):
                pass
        return self._tokens

    def _emit(self, token: Token) -> None:
        self._tokens.append(token)

    def _commit_attribute(self) -> None:
        self._current.attributes[self._attribute_name] = self._attribute_value
        self._attribute_name = ""
        self._attribute_value = ""

    def _finish_tag(self) -> None:
        self._emit(self._current)
        self._state = _State.DATA

    def _data(self, char: str) -> bool:
        if char == "<":
            self._state = _State.TAG_OPEN
        else:
            self._emit(Token(TokenType.CHARACTER, char))
        return False

    def _tag_open(self, char: str) -> bool:
        if char == "/":
            self._state = _State.END_TAG_OPEN
        elif _is_alpha(char):
            self._current = Token(TokenType.START_TAG, char)
            self._state = _State.TAG_NAME
        else:
            self._state = _State.DATA
            self._emit(Token(TokenType.CHARACTER, "<"))
            return True
        return False

    def _tag_name(self, char: str) -> bool:
        if char in _WHITESPACE:
            self._state = _State.BEFORE_ATTRIBUTE_NAME
        elif char == "/":
            self._state = _State.SELF_CLOSING_START_TAG
        elif char == ">":
            self._finish_tag()
        else:
            self._current.data += char
        return False

    def _end_tag_open(self, char: str) -> bool:
        if _is_alpha(char):
            self._current = Token(TokenType.END_TAG, char)
            self._state = _State.TAG_NAME
        else:
            self._state = _State.DATA
        return False

    def _self_closing_start_tag(self, char: str) -> bool:
        if char == ">":
            self._current.self_closing = True
            self._finish_tag()
            return False
        self._state = _State.BEFORE_ATTRIBUTE_NAME
        return True

    def _before_attribute_name(self, char: str) -> bool:
        if char in _WHITESPACE:
            return False
        if char in "/>":
            self._state = _State.AFTER_ATTRIBUTE_NAME
            return True
        self._attribute_name = ""
        self._attribute_value = ""
        self._state = _State.ATTRIBUTE_NAME
        return True

    def _attribute_name(self, char: str) -> bool:
        if char in _WHITESPACE or char in "/>":
            self._state = _State.AFTER_ATTRIBUTE_NAME
            return True
        if char == "=":
            self._state = _State.BEFORE_ATTRIBUTE_VALUE
        else:
            self._attribute_name += char
        return False

    def _after_attribute_name(self, char: str) -> bool:
        if char in _WHITESPACE:
            return False
        if char == "/":
            self._state = _State.SELF_CLOSING_START_TAG
        elif char == "=":
            self._state = _State.BEFORE_ATTRIBUTE_VALUE
        elif char == ">":
            self._commit_attribute()
            self._finish_tag()
        else:
            self._commit_attribute()
            self._state = _State.ATTRIBUTE_NAME
            return True
        return False

    def _before_attribute_value(self, char: str) -> bool:
        if char in _WHITESPACE:
            return False
        if char == '"':
            self._state = _State.ATTRIBUTE_VALUE_DOUBLE_QUOTED
        elif char == "'":
            self._state = _State.ATTRIBUTE_VALUE_SINGLE_QUOTED
        elif char == ">":
            self._commit_attribute()
            self._finish_tag()
        else:
            self._state = _State.ATTRIBUTE_VALUE_UNQUOTED
            return True
        return False

    def _quoted_value(self, char: str, quote: str) -> bool:
        if char == quote:
            self._commit_attribute()
            self._state = _State.AFTER_ATTRIBUTE_VALUE_QUOTED
        else:
            self._attribute_value += char
        return False

    def _attribute_value_double_quoted(self, char: str) -> bool:
        return self._quoted_value(char, '"')

    def _attribute_value_single_quoted(self, char: str) -> bool:
        return self._quoted_value(char, "'")

    def _attribute_value_unquoted(self, char: str) -> bool:
        if char in _WHITESPACE:
            self._commit_attribute()
            self._state = _State.AFTER_ATTRIBUTE_VALUE_UNQUOTED
        elif char == ">":
            self._commit_attribute()
            self._finish_tag()
        elif char != "\0":
            self._attribute_value += char
        return False

    def _after_attribute_value(self, char: str) -> bool:
        if char in _WHITESPACE:
            self._state = _State.BEFORE_ATTRIBUTE_NAME
        elif char == "/":
            self._state = _State.SELF_CLOSING_START_TAG
        elif char == ">":
            self._finish_tag()
        else:
            self._state = _State.BEFORE_ATTRIBUTE_NAME
            return True
        return False


def tokenize(text: str) -> list[Token]:
    """Tokenize ``text`` in one call."""
    return Tokenizer(text).tokenize()