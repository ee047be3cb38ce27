"""Syntax tree of a program.

Expressions are layered by precedence: logic (``&&``, ``||``) over
comparison over ``+``/``-`` over ``*``/``/`` over prefix operators over atoms.
Every binary layer holds a left operand and an optional ``(symbol, rest)``
pair whose rest is the same layer again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from limbo.location import Location
from limbo.tokens import Symbol
from limbo.values import Value, format_value


@dataclass
class BlockNode:
    """A braced block: the statements it holds, in order."""

    seq: List["Statement"] = field(default_factory=list)


@dataclass
class AtomNode:
    """The smallest expression: a literal, a name, a parenthesised
    expression or a block.

    ``content`` holds the literal value, the name, an ``ExprNode`` or a
    ``BlockNode``. ``is_name`` tells a name apart from a string literal.
    """

    content: Union[Value, "ExprNode", BlockNode]
    pos: Location
    is_name: bool = False

    def locate(self) -> str:
        return str(self.pos)

    def __str__(self) -> str:
        if self.is_name:
            return str(self.content)
        if isinstance(self.content, ExprNode):
            return str(self.content)
        if isinstance(self.content, BlockNode):
            return repr(self.content)
        return format_value(self.content)


@dataclass
class UnaryNode:
    """An atom with an optional prefix operator (``-`` or ``!``)."""

    atom: AtomNode
    op: Optional[Symbol] = None

    def __str__(self) -> str:
        if self.op is None:
            return str(self.atom)
        return f"{self.op}{self.atom}"


@dataclass
class TermNode:
    """A chain of ``*`` and ``/`` operations."""

    left_hand: UnaryNode
    right_hand: Optional[Tuple[Symbol, "TermNode"]] = None

    def __str__(self) -> str:
        if self.right_hand is None:
            return str(self.left_hand)
        op, right = self.right_hand
        return f"\n- Term: {self.left_hand},{op},{right}"


@dataclass
class MathNode:
    """A chain of ``+`` and ``-`` operations."""

    left_hand: TermNode
    right_hand: Optional[Tuple[Symbol, "MathNode"]] = None

    def __str__(self) -> str:
        if self.right_hand is None:
            return str(self.left_hand)
        op, right = self.right_hand
        return f"{self.left_hand},{op},{right}"


@dataclass
class CompNode:
    """A chain of comparison operations."""

    left_hand: MathNode
    right_hand: Optional[Tuple[Symbol, "CompNode"]] = None

    def __str__(self) -> str:
        if self.right_hand is None:
            return str(self.left_hand)
        op, right = self.right_hand
        return f"\n- Term: {self.left_hand},{op},{right}"


@dataclass
class LogicNode:
    """A chain of ``&&`` and ``||`` operations."""

    left_hand: CompNode
    right_hand: Optional[Tuple[Symbol, "LogicNode"]] = None

    def __str__(self) -> str:
        if self.right_hand is None:
            return str(self.left_hand)
        op, right = self.right_hand
        return f"\n- Logic: {self.left_hand},{op},{right}"


@dataclass
class ExprNode:
    """A whole expression."""

    inner: LogicNode

    def leading_atom(self) -> AtomNode:
        """The leftmost atom of the expression."""
        return self.inner.left_hand.left_hand.left_hand.left_hand.atom

    def locate(self) -> str:
        return self.leading_atom().locate()

    def __str__(self) -> str:
        return str(self.inner)


@dataclass
class AssignNode:
    """A name bound to an expression, positioned at the ``=``."""

    name: str
    value: ExprNode
    pos: Location

    def locate(self) -> str:
        return str(self.pos)

    def __str__(self) -> str:
        return f"{self.name} = {self.value}"


@dataclass
class VarStmt:
    """``var name = expr``: declares a name in the current scope."""

    inner: AssignNode

    def locate(self) -> str:
        return self.inner.value.locate()

    def __str__(self) -> str:
        return str(self.inner.value)


@dataclass
class AssignStmt:
    """``name = expr``: rebinds a name declared in an enclosing scope."""

    inner: AssignNode

    def locate(self) -> str:
        return self.inner.value.locate()

    def __str__(self) -> str:
        return str(self.inner.value)


@dataclass
class OutStmt:
    """``out expr``: yields the value of a program or block."""

    inner: ExprNode

    def locate(self) -> str:
        return self.inner.locate()

    def __str__(self) -> str:
        return str(self.inner)


@dataclass
class BlockStmt:
    """A block used as a statement."""

    inner: BlockNode

    def __str__(self) -> str:
        return "".join(f"{statement} " for statement in self.inner.seq)


@dataclass
class IfElseStmt:
    """``if cond stmt [else stmt]``."""

    cond: ExprNode
    if_stmt: "Statement"
    else_stmt: Optional["Statement"] = None


Statement = Union[VarStmt, AssignStmt, OutStmt, BlockStmt, IfElseStmt]
Sequence = List[Statement]