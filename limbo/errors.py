"""Errors reported while compiling or running a program."""

from __future__ import annotations

from typing import Optional, Protocol

from termcolor import colored

from limbo.location import indent


class _Locatable(Protocol):
    def locate(self) -> str: ...

    def __str__(self) -> str: ...


class LimboError(Exception):
    """Base class of every error the interpreter reports."""

    _header = "Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def header(self) -> str:
        return self._header

    def __str__(self) -> str:
        return self.message


class CompileError(LimboError):
    """An error found while reading or parsing the source."""

    _header = "Compile Error"


class _LocatedCompileError(CompileError):
    _detail = ""

    def __init__(self, subject: _Locatable) -> None:
        self.subject = subject
        super().__init__(f"`{subject.locate()}`\n{indent(1)}{self._describe(subject)}")

    def _describe(self, subject: _Locatable) -> str:
        return self._detail


class BasicError(CompileError):
    """A lower-level failure, such as an unreadable file."""

    def __init__(self, error: BaseException) -> None:
        self.error = error
        super().__init__(str(error))


class IllegalEOF(_LocatedCompileError):
    _detail = "here should not be the end of file."


class FloatError(_LocatedCompileError):
    _detail = "here is an extra decimal point."


class UnknownToken(_LocatedCompileError):
    def _describe(self, subject: _Locatable) -> str:
        return f"`{subject}` is a unknown token."


class UnexpectedToken(_LocatedCompileError):
    def _describe(self, subject: _Locatable) -> str:
        return f"`{subject}` is a unexpected token."


class MissingQuote(_LocatedCompileError):
    _detail = "here need a '\"' symbol to terminate the string."


class MissingSemicolon(_LocatedCompileError):
    _detail = "here need a ';' symbol to terminate the if-else statement."


class ExcessOut(_LocatedCompileError):
    _detail = "here is a excess out statement."


class LimboRuntimeError(LimboError):
    """An error raised while evaluating a program."""

    _header = "Runtime Error"


class UndeclaredError(LimboRuntimeError):
    """A name was used or assigned before being declared."""

    def __init__(self, subject: _Locatable) -> None:
        self.subject = subject
        super().__init__(
            f"`{subject.locate()}`\n{indent(1)}`{subject}` is undeclared."
        )


class OperandTypeError(LimboRuntimeError):
    """An operator was applied to values of unsuitable types."""

    def __init__(self, left: _Locatable, right: Optional[_Locatable] = None) -> None:
        self.left = left
        self.right = right
        if right is None:
            message = (
                f"`{left.locate()}`\n{indent(1)}`{left}` can not be operated."
            )
        else:
            message = (
                f"`{left.locate()}` and `{right.locate()}`\n"
                f"{indent(1)}`{left}` and `{right}` can not operated."
            )
        super().__init__(message)


def format_report(error: LimboError) -> str:
    """Build the text printed to stderr for an error."""
    header = colored(error.header(), "red", attrs=["bold"])
    return f"\n{header} at {error}\n\n"