"""Recursive-descent parser turning a token stream into a syntax tree."""

from __future__ import annotations

from typing import Callable, FrozenSet, List, Optional, Tuple, TypeVar

from limbo.ast import (
    AssignNode,
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
from limbo.errors import ExcessOut, IllegalEOF, UnexpectedToken, UnknownToken
from limbo.tokens import Keyword, Symbol, Token, TokenKind, TokenStream

_Node = TypeVar("_Node")

_LOGIC_OPERATORS: FrozenSet[Symbol] = frozenset({Symbol.AND, Symbol.OR})
_COMP_OPERATORS: FrozenSet[Symbol] = frozenset(
    {
        Symbol.EQUAL,
        Symbol.NOT_EQUAL,
        Symbol.LESS,
        Symbol.LESS_EQUAL,
        Symbol.GREAT,
        Symbol.GREAT_EQUAL,
    }
)
_MATH_OPERATORS: FrozenSet[Symbol] = frozenset({Symbol.ADD, Symbol.SUB})
_TERM_OPERATORS: FrozenSet[Symbol] = frozenset({Symbol.MUL, Symbol.DIV})


def _is_symbol(token: Token, symbol: Symbol) -> bool:
    return token.kind is TokenKind.SYMBOL and token.value is symbol


def _next_or_eof(tokens: TokenStream, anchor: Token) -> Token:
    """Read the next token; at the end, report an EOF just past ``anchor``."""
    token = tokens.next()
    if token is None:
        raise IllegalEOF(anchor.end_pos())
    return token


def analyze(tokens: TokenStream) -> List[Statement]:
    """Parse a whole program into its list of statements."""
    return parse_sequence(tokens)


def parse_sequence(tokens: TokenStream) -> List[Statement]:
    """Parse statements until the stream runs out."""
    statements: List[Statement] = []
    for token in tokens:
        statements.append(parse_statement(tokens, token))
        tokens.skip_white_space()
    return statements


def parse_statement(tokens: TokenStream, current: Token) -> Statement:
    """Parse the statement that starts with ``current``."""
    kind = current.kind
    if kind is TokenKind.KEYWORD:
        keyword = current.value
        if keyword is Keyword.VAR:
            return VarStmt(parse_assign(tokens, _next_or_eof(tokens, tokens.previous())))
        if keyword is Keyword.OUT:
            return _parse_out(tokens)
        if keyword is Keyword.IF:
            return _parse_if(tokens)
        raise UnexpectedToken(current)
    if kind is TokenKind.SYMBOL:
        if current.value is Symbol.L_BRACE:
            block = parse_block(tokens)
            tokens.skip_white_space()
            return BlockStmt(block)
        raise UnexpectedToken(current)
    if kind is TokenKind.IDENTIFIER:
        return AssignStmt(parse_assign(tokens, current))
    if kind is TokenKind.UNKNOWN:
        raise UnknownToken(current)
    raise UnexpectedToken(current)


def _parse_out(tokens: TokenStream) -> OutStmt:
    value = parse_expr(tokens, _next_or_eof(tokens, tokens.previous()))
    tokens.skip_white_space()
    return OutStmt(value)


def _parse_if(tokens: TokenStream) -> IfElseStmt:
    cond = parse_expr(tokens, _next_or_eof(tokens, tokens.previous()))
    if_stmt = parse_statement(tokens, _next_or_eof(tokens, tokens.previous()))
    else_stmt = _parse_else(tokens)
    tokens.skip_white_space()
    return IfElseStmt(cond, if_stmt, else_stmt)


def _parse_else(tokens: TokenStream) -> Optional[Statement]:
    tokens.skip_white_space()
    token = tokens.next()
    if token is None:
        return None
    if token.kind is TokenKind.KEYWORD and token.value is Keyword.ELSE:
        tokens.skip_white_space()
        return parse_statement(tokens, _next_or_eof(tokens, tokens.previous()))
    tokens.undo()
    return None


def parse_block(tokens: TokenStream) -> BlockNode:
    """Parse statements up to the closing brace; the ``{`` is already read."""
    block = BlockNode()
    has_output = False
    for token in tokens:
        if _is_symbol(token, Symbol.R_BRACE):
            break
        statement = parse_statement(tokens, token)
        if isinstance(statement, OutStmt):
            if has_output:
                raise ExcessOut(statement)
            has_output = True
        block.seq.append(statement)
    return block


def parse_assign(tokens: TokenStream, current: Token) -> AssignNode:
    """Parse ``name = expr`` where ``current`` is the name."""
    if current.kind is not TokenKind.IDENTIFIER:
        raise UnexpectedToken(current)
    equals = tokens.expect(Symbol.ASSIGN)
    value = parse_expr(tokens, _next_or_eof(tokens, equals))
    tokens.skip_white_space()
    return AssignNode(current.value, value, equals.pos)


def parse_expr(tokens: TokenStream, current: Token) -> ExprNode:
    """Parse a whole expression starting at ``current``."""
    return ExprNode(parse_logic(tokens, current))


def _parse_rest(
    tokens: TokenStream,
    current: Token,
    operators: FrozenSet[Symbol],
    parse_self: Callable[[TokenStream, Token], _Node],
) -> Optional[Tuple[Symbol, _Node]]:
    """Parse the ``op rest`` tail of a binary layer, if ``current`` starts one."""
    kind = current.kind
    if kind is TokenKind.SYMBOL:
        if current.value in operators:
            op = current.value
        elif current.value is Symbol.R_PAREN:
            return None
        else:
            tokens.undo()
            return None
    elif kind is TokenKind.KEYWORD:
        tokens.undo()
        return None
    elif kind is TokenKind.EOL:
        return None
    elif kind is TokenKind.UNKNOWN:
        raise UnknownToken(current)
    else:
        raise UnexpectedToken(current)
    return op, parse_self(tokens, _next_or_eof(tokens, current))


def _parse_tail(
    tokens: TokenStream,
    operators: FrozenSet[Symbol],
    parse_self: Callable[[TokenStream, Token], _Node],
) -> Optional[Tuple[Symbol, _Node]]:
    token = tokens.next()
    if token is None:
        return None
    return _parse_rest(tokens, token, operators, parse_self)


def parse_logic(tokens: TokenStream, current: Token) -> LogicNode:
    """Parse a chain of ``&&`` and ``||``."""
    left = parse_comp(tokens, current)
    return LogicNode(left, _parse_tail(tokens, _LOGIC_OPERATORS, parse_logic))


def parse_comp(tokens: TokenStream, current: Token) -> CompNode:
    """Parse a chain of comparisons."""
    left = parse_math(tokens, current)
    return CompNode(left, _parse_tail(tokens, _COMP_OPERATORS, parse_comp))


def parse_math(tokens: TokenStream, current: Token) -> MathNode:
    """Parse a chain of ``+`` and ``-``."""
    left = parse_term(tokens, current)
    return MathNode(left, _parse_tail(tokens, _MATH_OPERATORS, parse_math))


def parse_term(tokens: TokenStream, current: Token) -> TermNode:
    """Parse a chain of ``*`` and ``/``."""
    if current.kind in (TokenKind.IDENTIFIER, TokenKind.LITERAL, TokenKind.SYMBOL):
        left = parse_unary(tokens, current)
    elif current.kind is TokenKind.UNKNOWN:
        raise UnknownToken(current)
    else:
        raise UnexpectedToken(current)
    return TermNode(left, _parse_tail(tokens, _TERM_OPERATORS, parse_term))


def parse_unary(tokens: TokenStream, current: Token) -> UnaryNode:
    """Parse an atom with an optional ``-`` or ``!`` prefix."""
    if (
        current.kind in (TokenKind.IDENTIFIER, TokenKind.LITERAL)
        or _is_symbol(current, Symbol.L_PAREN)
        or _is_symbol(current, Symbol.L_BRACE)
    ):
        return UnaryNode(parse_atom(tokens, current))
    if current.kind is TokenKind.SYMBOL:
        following = _next_or_eof(tokens, current)
        if current.value in (Symbol.SUB, Symbol.NOT):
            return UnaryNode(parse_atom(tokens, following), current.value)
        raise UnexpectedToken(current)
    raise UnexpectedToken(current)


def parse_atom(tokens: TokenStream, current: Token) -> AtomNode:
    """Parse a literal, a name, a parenthesised expression or a block."""
    kind = current.kind
    if kind is TokenKind.IDENTIFIER:
        return AtomNode(current.value, current.pos, is_name=True)
    if kind is TokenKind.LITERAL:
        return AtomNode(current.value, current.pos)
    if _is_symbol(current, Symbol.L_PAREN):
        inner = parse_expr(tokens, _next_or_eof(tokens, current))
        return AtomNode(inner, current.pos)
    if _is_symbol(current, Symbol.L_BRACE):
        return AtomNode(parse_block(tokens), current.pos)
    if kind is TokenKind.UNKNOWN:
        raise UnknownToken(current)
    raise UnexpectedToken(current)