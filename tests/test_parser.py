import pytest

from limbo.ast import (
    AssignStmt,
    BlockNode,
    BlockStmt,
    ExprNode,
    IfElseStmt,
    OutStmt,
    VarStmt,
)
from limbo.errors import ExcessOut, IllegalEOF, UnexpectedToken, UnknownToken
from limbo.parser import (
    analyze,
    parse_assign,
    parse_atom,
    parse_block,
    parse_expr,
    parse_sequence,
    parse_statement,
    parse_term,
    parse_unary,
)
from limbo.tokenizer import tokenize_text
from limbo.tokens import Symbol, TokenKind


def _parse(text):
    return analyze(tokenize_text(text))


def _first(stream):
    return stream.next()


def _token_for(text, symbol):
    return next(
        t
        for t in tokenize_text(text)
        if t.kind is TokenKind.SYMBOL and t.value is symbol
    )


def test_empty_program_has_no_statements():
    assert _parse("") == []


def test_var_statement_records_name_value_and_equals_position():
    text = "var a = 1"
    (stmt,) = _parse(text)
    assert isinstance(stmt, VarStmt)
    assert stmt.inner.name == "a"
    assert stmt.inner.value.leading_atom().content == 1.0
    assert stmt.inner.pos == _token_for(text, Symbol.ASSIGN).pos


def test_assignment_statement_to_identifier():
    (stmt,) = _parse("b = 2")
    assert isinstance(stmt, AssignStmt)
    assert stmt.inner.name == "b"


def test_analyze_and_parse_sequence_agree():
    text = "var a = 1\nvar b = 2\nout a"
    assert analyze(tokenize_text(text)) == parse_sequence(tokenize_text(text))


def test_several_lines_give_several_statements():
    stmts = _parse("var a = 1\nvar b = 2\nout a + b")
    assert [type(s) for s in stmts] == [VarStmt, VarStmt, OutStmt]


def test_multiplication_binds_tighter_than_addition():
    (stmt,) = _parse("out 1 + 2 * 3")
    math = stmt.inner.inner.left_hand.left_hand
    op, rest = math.right_hand
    assert op is Symbol.ADD
    assert math.left_hand.right_hand is None
    term_op, _ = rest.left_hand.right_hand
    assert term_op is Symbol.MUL


def test_parenthesised_expression_becomes_atom():
    (stmt,) = _parse("out (1 + 2) * 3")
    term = stmt.inner.inner.left_hand.left_hand.left_hand
    assert isinstance(term.left_hand.atom.content, ExprNode)
    op, rest = term.right_hand
    assert op is Symbol.MUL
    assert rest.left_hand.atom.content == 3.0


def test_unary_minus_on_name():
    (stmt,) = _parse("out -a")
    unary = stmt.inner.leading_atom()
    node = stmt.inner.inner.left_hand.left_hand.left_hand.left_hand
    assert node.op is Symbol.SUB
    assert unary.is_name
    assert unary.content == "a"


def test_logic_chain():
    (stmt,) = _parse("out true && false || true")
    op, rest = stmt.inner.inner.right_hand
    assert op is Symbol.AND
    inner_op, _ = rest.right_hand
    assert inner_op is Symbol.OR


def test_block_statement_holds_its_statements():
    (stmt,) = _parse("{ var a = 1 out a }")
    assert isinstance(stmt, BlockStmt)
    assert [type(s) for s in stmt.inner.seq] == [VarStmt, OutStmt]


def test_second_out_in_block_is_rejected():
    with pytest.raises(ExcessOut):
        _parse("{ out 1 out 2 }")


def test_if_else_statement():
    (stmt,) = _parse("if a > 1 { out 1 } else { out 2 }")
    assert isinstance(stmt, IfElseStmt)
    op, _ = stmt.cond.inner.left_hand.right_hand
    assert op is Symbol.GREAT
    assert isinstance(stmt.if_stmt, BlockStmt)
    assert isinstance(stmt.else_stmt, BlockStmt)


def test_if_without_else_is_followed_by_next_statement():
    stmts = _parse("if true out 1\nvar b = 2")
    assert len(stmts) == 2
    assert isinstance(stmts[0], IfElseStmt)
    assert stmts[0].else_stmt is None
    assert isinstance(stmts[0].if_stmt, OutStmt)
    assert stmts[1].inner.name == "b"


def test_missing_equals_is_unexpected():
    with pytest.raises(UnexpectedToken):
        _parse("var a 1")


def test_end_after_equals_reports_position_past_equals():
    text = "var a ="
    with pytest.raises(IllegalEOF) as info:
        _parse(text)
    end = _token_for(text, Symbol.ASSIGN).end_pos()
    assert str(info.value).startswith(f"`{end}`")


def test_two_literals_in_a_row_are_unexpected():
    with pytest.raises(UnexpectedToken):
        _parse("out 1 2")


def test_unknown_token_in_expression():
    with pytest.raises(UnknownToken):
        _parse("out $")


def test_open_paren_at_end_is_illegal_eof():
    with pytest.raises(IllegalEOF):
        _parse("out (")


def test_prefix_minus_at_end_is_illegal_eof():
    with pytest.raises(IllegalEOF):
        _parse("out -")


def test_prefix_star_is_unexpected():
    with pytest.raises(UnexpectedToken):
        _parse("out *1")


def test_identifier_after_line_end_inside_expression_is_unexpected():
    with pytest.raises(UnexpectedToken):
        _parse("var x = 1\ny = 2")


def test_stray_closing_brace_is_unexpected():
    with pytest.raises(UnexpectedToken):
        _parse("}")


def test_parse_atom_literal_and_name():
    stream = tokenize_text("x")
    atom = parse_atom(stream, _first(stream))
    assert atom.is_name and atom.content == "x"
    stream = tokenize_text("'hi'")
    atom = parse_atom(stream, _first(stream))
    assert not atom.is_name and atom.content == "hi"


def test_parse_block_consumes_up_to_closing_brace():
    stream = tokenize_text("{ out 1 } var z = 2")
    stream.next()
    block = parse_block(stream)
    assert isinstance(block, BlockNode)
    assert len(block.seq) == 1
    rest = parse_sequence(stream)
    assert rest[0].inner.name == "z"


def test_parse_assign_rejects_non_identifier():
    stream = tokenize_text("1 = 2")
    with pytest.raises(UnexpectedToken):
        parse_assign(stream, _first(stream))


def test_parse_statement_and_expr_directly():
    stream = tokenize_text("out a")
    stmt = parse_statement(stream, _first(stream))
    assert isinstance(stmt, OutStmt)
    stream = tokenize_text("a / b")
    expr = parse_expr(stream, _first(stream))
    op, _ = expr.inner.left_hand.left_hand.left_hand.right_hand
    assert op is Symbol.DIV


def test_parse_unary_not():
    stream = tokenize_text("!flag")
    node = parse_unary(stream, _first(stream))
    assert node.op is Symbol.NOT
    assert node.atom.content == "flag"


def test_parse_term_rejects_keyword_start():
    stream = tokenize_text("var")
    with pytest.raises(UnexpectedToken):
        parse_term(stream, _first(stream))