"""Turning source text into a stream of tokens."""

from __future__ import annotations

from typing import Iterator, Optional

from limbo.errors import BasicError, FloatError, MissingQuote
from limbo.location import Location
from limbo.tokens import Keyword, Symbol, Token, TokenKind, TokenStream
from limbo.values import try_boolean

_QUOTES = ("'", '"')
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "\\": "\\"}


def is_identifier_char(ch: str) -> bool:
    """Whether ``ch`` may continue an identifier."""
    return ch.isascii() and (ch.isalnum() or ch == "_")


def _is_ascii_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_ascii_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


class Source:
    """A character reader over source text that tracks line and column.

    One character can be pushed back with ``undo``; re-reading it does not
    advance the column.
    """

    def __init__(self, text: str, path: str = "<input>") -> None:
        self.path = str(path)
        self._chars = iter(text)
        self._prev = "\0"
        self._cache: Optional[str] = None
        self.line = 1
        self.offset = 0

    @property
    def prev(self) -> str:
        """The character read last."""
        return self._prev

    def next(self) -> Optional[str]:
        """Read one character, or return None at the end of the text."""
        if self._cache is not None:
            self._prev, self._cache = self._cache, None
            return self._prev
        self.offset += 1
        ch = next(self._chars, None)
        if ch is not None:
            self._prev = ch
        return ch

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        ch = self.next()
        if ch is None:
            raise StopIteration
        return ch

    def undo(self) -> None:
        """Push the character read last back to be read again."""
        self._cache = self._prev

    def read_identifier(self) -> str:
        """Read the rest of a word whose first character was just read."""
        chars = [self._prev]
        self._cache = None
        for ch in self:
            if not is_identifier_char(ch):
                self.undo()
                break
            chars.append(ch)
        return "".join(chars)

    def read_number(self) -> float:
        """Read the rest of a number whose first digit was just read.

        Every digit after the decimal point adds a tenth of its value.
        """
        value = float(int(self._prev))
        self._cache = None
        fractional = False
        for ch in self:
            if _is_ascii_digit(ch):
                digit = float(int(ch))
                value = value + digit / 10.0 if fractional else value * 10.0 + digit
            elif ch == ".":
                if fractional:
                    raise FloatError(Location(self.path, self.line, self.offset))
                fractional = True
            else:
                self.undo()
                break
        return value

    def read_string(self) -> str:
        """Read a string literal whose opening quote was just read."""
        chars = []
        for ch in self:
            if ch in _QUOTES:
                break
            if ch == "\\":
                escaped = next(self._chars, None)
                chars.append("\0" if escaped is None else _ESCAPES.get(escaped, escaped))
                continue
            if ch == "\n":
                self.line += 1
                self.offset = 0
            chars.append(ch)
        if self._prev not in _QUOTES:
            raise MissingQuote(Location(self.path, self.line, self.offset))
        return "".join(chars)

    def read_unknown(self) -> str:
        """Read an unrecognised run of characters up to whitespace."""
        chars = [self._prev]
        for ch in self:
            if ch.isspace():
                break
            chars.append(ch)
        return "".join(chars)


def tokenize_text(text: str, path: str = "<input>") -> TokenStream:
    """Split ``text`` into tokens, whitespace and line ends included."""
    src = Source(text, path)
    stream = TokenStream()

    def push(kind: TokenKind, value: object, offset: int) -> None:
        stream.push(Token(kind, value, Location(src.path, src.line, offset)))

    for ch in src:
        if _is_ascii_alpha(ch):
            start = src.offset
            word = src.read_identifier()
            boolean = try_boolean(word)
            keyword = Keyword.from_word(word)
            if boolean is not None:
                push(TokenKind.LITERAL, boolean, start)
            elif keyword is not None:
                push(TokenKind.KEYWORD, keyword, start)
            else:
                push(TokenKind.IDENTIFIER, word, start)
        elif _is_ascii_digit(ch):
            start = src.offset
            push(TokenKind.LITERAL, src.read_number(), start)
        elif ch in _QUOTES:
            start = src.offset
            push(TokenKind.LITERAL, src.read_string(), start)
        elif ch in (" ", "\r", "\t"):
            push(TokenKind.WHITESPACE, 1, src.offset)
        elif ch == "\n":
            push(TokenKind.EOL, None, src.offset)
            src.line += 1
            src.offset = 0
        else:
            start = src.offset
            following = src.next()
            if following is not None:
                pair = Symbol.from_text(ch + following)
                if pair is not None:
                    push(TokenKind.SYMBOL, pair, start)
                    continue
                src.undo()
            symbol = Symbol.from_text(ch)
            if symbol is not None:
                push(TokenKind.SYMBOL, symbol, start)
            else:
                start = src.offset
                push(TokenKind.UNKNOWN, src.read_unknown(), start)
    return stream


def tokenize(path: str) -> TokenStream:
    """Read the file at ``path`` and split it into tokens."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as error:
        raise BasicError(error) from error
    return tokenize_text(text, str(path))