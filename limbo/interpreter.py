"""Evaluation of a parsed program."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Tuple, Union

from limbo.ast import (
    AssignStmt,
    AtomNode,
    BlockNode,
    BlockStmt,
    CompNode,
    ExprNode,
    IfElseStmt,
    LogicNode,
    MathNode,
    OutStmt,
    Statement,
    TermNode,
    UnaryNode,
    VarStmt,
)
from limbo.environment import Environment
from limbo.errors import LimboRuntimeError, UndeclaredError
from limbo.location import Location
from limbo.values import Value, format_value, truthy

Result = Tuple[Value, Location]
_BinaryNode = Union[TermNode, MathNode, CompNode, LogicNode]


class Interpreter:
    """Runs statements against a chain of scopes."""

    def __init__(self, prev_env: Optional[Environment] = None) -> None:
        self.env = Environment(prev_env)

    def run(self, statements: Iterable[Statement]) -> Optional[Result]:
        """Run statements in order; return the value of the first ``out``.

        Values produced by ``out`` inside nested block statements or
        if/else branches are not passed on.
        """
        for statement in statements:
            if isinstance(statement, AssignStmt):
                value, _ = self._expr(statement.inner.value)
                if not self.env.overwrite(statement.inner.name, value):
                    raise UndeclaredError(statement.inner)
            elif isinstance(statement, VarStmt):
                value, _ = self._expr(statement.inner.value)
                self.assign(statement.inner.name, value)
            elif isinstance(statement, OutStmt):
                return self._expr(statement.inner)
            elif isinstance(statement, BlockStmt):
                self._block(statement.inner)
            elif isinstance(statement, IfElseStmt):
                cond, _ = self._expr(statement.cond)
                if truthy(cond):
                    self.run([statement.if_stmt])
                elif statement.else_stmt is not None:
                    self.run([statement.else_stmt])
        return None

    def assign(self, name: str, value: Value) -> None:
        """Bind ``name`` in the current scope."""
        self.env.insert(name, value)

    def _block(self, node: BlockNode) -> Optional[Result]:
        self.env = Environment(self.env)
        try:
            return self.run(node.seq)
        finally:
            self.env = self.env.prev

    def _atom(self, node: AtomNode) -> Result:
        content = node.content
        if node.is_name:
            value = self.env.find(content)
            if value is None:
                raise UndeclaredError(node)
            return value, node.pos
        if isinstance(content, ExprNode):
            return self._expr(content)
        if isinstance(content, BlockNode):
            result = self._block(content)
            if result is None:
                raise LimboRuntimeError(
                    f"`{node.locate()}`\n    the block yields no value."
                )
            return result
        return content, node.pos

    def _unary(self, node: UnaryNode) -> Result:
        value, pos = self._atom(node.atom)
        if node.op is None:
            return value, pos
        return node.op.unary_operate(value, pos), pos

    def _binary(self, node: _BinaryNode, operand) -> Result:
        left, left_pos = operand(node.left_hand)
        if node.right_hand is None:
            return left, left_pos
        op, rest = node.right_hand
        right, right_pos = self._binary(rest, operand)
        return op.binary_operate(left, right, left_pos, right_pos), right_pos

    def _term(self, node: TermNode) -> Result:
        return self._binary(node, self._unary)

    def _math(self, node: MathNode) -> Result:
        return self._binary(node, self._term)

    def _comp(self, node: CompNode) -> Result:
        return self._binary(node, self._math)

    def _logic(self, node: LogicNode) -> Result:
        return self._binary(node, self._comp)

    def _expr(self, node: ExprNode) -> Result:
        return self._logic(node.inner)


def compute(
    statements: Iterable[Statement], prev_env: Optional[Environment] = None
) -> Optional[Value]:
    """Run a program and print the value it yields, if any, to stdout."""
    result = Interpreter(prev_env).run(statements)
    if result is None:
        return None
    value, _ = result
    sys.stdout.write(format_value(value))
    sys.stdout.flush()
    return value