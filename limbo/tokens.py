"""Tokens of the language, the operators they carry and a stream over them."""

from __future__ import annotations

import operator
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, Iterable, Iterator, Optional

from termcolor import colored

from limbo.errors import IllegalEOF, OperandTypeError, UnexpectedToken
from limbo.location import LocatableValue, Location
from limbo.values import (
    Value,
    add,
    add_sub_type,
    compare_type,
    div,
    format_value,
    logical_and,
    logical_not,
    logical_or,
    logical_type,
    mul,
    mul_div_type,
    neg,
    sub,
)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Keyword(Enum):
    """Reserved words of the language."""

    VAR = "var"
    OUT = "out"
    IF = "if"
    ELSE = "else"

    @classmethod
    def from_word(cls, word: str) -> Optional["Keyword"]:
        """Return the keyword spelled by ``word``, or None."""
        try:
            return cls(word)
        except ValueError:
            return None

    def __str__(self) -> str:
        return colored(self.value, "magenta")


class Symbol(Enum):
    """Operators and punctuation, valued by their spelling."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    AND = "&&"
    OR = "||"
    NOT = "!"
    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS = "<"
    LESS_EQUAL = "<="
    GREAT = ">"
    GREAT_EQUAL = ">="
    ASSIGN = "="
    L_PAREN = "("
    R_PAREN = ")"
    L_BRACE = "{"
    R_BRACE = "}"
    COLON = ":"

    @classmethod
    def from_text(cls, text: str) -> Optional["Symbol"]:
        """Return the symbol spelled by ``text``, or None."""
        try:
            return cls(text)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value

    def unary_operate(self, value: Value, pos: Location) -> Value:
        """Apply this symbol as a prefix operator."""
        if self is Symbol.SUB and _is_number(value):
            return neg(value)
        if self is Symbol.NOT and isinstance(value, bool):
            return logical_not(value)
        raise OperandTypeError(LocatableValue(value, pos))

    def binary_operate(
        self, left: Value, right: Value, left_pos: Location, right_pos: Location
    ) -> Value:
        """Apply this symbol as an infix operator."""
        try:
            return self._apply_binary(left, right)
        except TypeError:
            raise OperandTypeError(
                LocatableValue(left, left_pos), LocatableValue(right, right_pos)
            ) from None

    def _apply_binary(self, left: Value, right: Value) -> Value:
        if self is Symbol.ADD and add_sub_type(left, right):
            return add(left, right)
        if self is Symbol.SUB and add_sub_type(left, right):
            return sub(left, right)
        if self is Symbol.MUL and mul_div_type(left, right):
            return mul(left, right)
        if self is Symbol.DIV and mul_div_type(left, right):
            return div(left, right)
        if self is Symbol.EQUAL and compare_type(left, right):
            return left == right
        if self is Symbol.NOT_EQUAL and compare_type(left, right):
            return left != right
        ordering = _ORDERINGS.get(self)
        if ordering is not None and logical_type(left, right):
            # Numbers and booleans are not ordered against each other.
            if isinstance(left, bool) != isinstance(right, bool):
                return False
            return ordering(left, right)
        if self is Symbol.AND and logical_type(left, right):
            return logical_and(left, right)
        if self is Symbol.OR and logical_type(left, right):
            return logical_or(left, right)
        raise TypeError(f"operator {self.value} does not apply")


_ORDERINGS: Dict[Symbol, Callable[[Value, Value], bool]] = {
    Symbol.LESS: operator.lt,
    Symbol.GREAT: operator.gt,
    Symbol.LESS_EQUAL: operator.le,
    Symbol.GREAT_EQUAL: operator.ge,
}


class TokenKind(Enum):
    """The kinds of token the tokenizer produces."""

    EOL = auto()
    WHITESPACE = auto()
    UNKNOWN = auto()
    SYMBOL = auto()
    LITERAL = auto()
    IDENTIFIER = auto()
    KEYWORD = auto()


@dataclass(frozen=True)
class Token:
    """A token with its payload and position.

    The payload is a whitespace count, the unknown text, a ``Symbol``, a
    literal value, an identifier name or a ``Keyword`` depending on ``kind``.
    """

    kind: TokenKind
    value: object
    pos: Location

    @property
    def text(self) -> str:
        """The token as written, without colouring."""
        if self.kind is TokenKind.EOL:
            return "\\n"
        if self.kind is TokenKind.WHITESPACE:
            return " " * self.value
        if self.kind is TokenKind.LITERAL:
            return format_value(self.value)
        if self.kind in (TokenKind.SYMBOL, TokenKind.KEYWORD):
            return self.value.value
        return str(self.value)

    def end_pos(self) -> Location:
        """The position just past the end of the token."""
        return Location(self.pos.path, self.pos.line, self.pos.offset + len(self.text))

    def locate(self) -> str:
        return str(self.pos)

    def __str__(self) -> str:
        if self.kind is TokenKind.UNKNOWN:
            return colored(self.text, "red", attrs=["underline"])
        if self.kind is TokenKind.IDENTIFIER:
            return colored(self.text, "cyan", attrs=["bold"])
        if self.kind is TokenKind.KEYWORD:
            return str(self.value)
        return self.text


class TokenStream:
    """A consumable sequence of tokens that skips whitespace when read."""

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._tokens: deque[Token] = deque(tokens)
        self.prev: Optional[Token] = None

    def push(self, token: Token) -> None:
        self._tokens.append(token)

    def previous(self) -> Token:
        """The token read last, whitespace included."""
        if self.prev is None:
            raise IndexError("no token has been read yet")
        return self.prev

    def next(self) -> Optional[Token]:
        """Read the next non-whitespace token, or None at the end."""
        while self._tokens:
            token = self._tokens.popleft()
            self.prev = token
            if token.kind is not TokenKind.WHITESPACE:
                return token
        return None

    def expect(self, symbol: Symbol) -> Token:
        """Read the next token, which must be ``symbol``."""
        token = self.next()
        if token is None:
            raise IllegalEOF(self.previous().end_pos())
        if token.kind is not TokenKind.SYMBOL or token.value is not symbol:
            raise UnexpectedToken(token)
        return token

    def undo(self) -> None:
        """Put the token read last back at the front of the stream."""
        self._tokens.appendleft(self.previous())

    def skip_white_space(self) -> None:
        """Drop any whitespace and line ends at the front of the stream."""
        while (token := self.next()) is not None:
            if token.kind is not TokenKind.EOL:
                self.undo()
                break

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next()
        if token is None:
            raise StopIteration
        return token