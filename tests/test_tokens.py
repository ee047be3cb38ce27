import pytest

from limbo.errors import IllegalEOF, OperandTypeError, UnexpectedToken
from limbo.location import Location
from limbo.tokens import Keyword, Symbol, Token, TokenKind, TokenStream

LOC = Location("prog.lb", 1, 1)
LOC2 = Location("prog.lb", 1, 5)


def _tok(kind, value, offset=1, line=1):
    return Token(kind, value, Location("prog.lb", line, offset))


def test_keyword_from_word():
    assert Keyword.from_word("var") is Keyword.VAR
    assert Keyword.from_word("else") is Keyword.ELSE
    assert Keyword.from_word("while") is None


@pytest.mark.parametrize("symbol", list(Symbol))
def test_symbol_round_trip(symbol):
    assert Symbol.from_text(str(symbol)) is symbol


def test_symbol_from_text_unknown():
    assert Symbol.from_text("=>") is None
    assert Symbol.from_text("<=") is Symbol.LESS_EQUAL


def test_unary_operations():
    assert Symbol.SUB.unary_operate(2.0, LOC) == -2.0
    assert Symbol.NOT.unary_operate(True, LOC) is False


@pytest.mark.parametrize(
    "symbol,value", [(Symbol.NOT, 1.0), (Symbol.SUB, "a"), (Symbol.SUB, True)]
)
def test_unary_type_errors(symbol, value):
    with pytest.raises(OperandTypeError):
        symbol.unary_operate(value, LOC)


def test_binary_arithmetic():
    assert Symbol.ADD.binary_operate(1.0, 2.0, LOC, LOC2) == 3.0
    assert Symbol.SUB.binary_operate(5.0, 2.0, LOC, LOC2) == 3.0
    assert Symbol.ADD.binary_operate("a", 1.0, LOC, LOC2) == "a1"
    assert Symbol.ADD.binary_operate("a", "b", LOC, LOC2) == "ab"


def test_binary_comparisons():
    assert Symbol.EQUAL.binary_operate("a", "a", LOC, LOC2) is True
    assert Symbol.NOT_EQUAL.binary_operate(1.0, 2.0, LOC, LOC2) is True
    assert Symbol.LESS.binary_operate(1.0, 2.0, LOC, LOC2) is True
    assert Symbol.GREAT_EQUAL.binary_operate(1.0, 2.0, LOC, LOC2) is False
    assert Symbol.LESS.binary_operate(False, True, LOC, LOC2) is True


def test_mixed_number_bool_ordering_is_false():
    assert Symbol.LESS.binary_operate(0.0, True, LOC, LOC2) is False
    assert Symbol.GREAT_EQUAL.binary_operate(True, 0.0, LOC, LOC2) is False


def test_binary_logic():
    assert Symbol.AND.binary_operate(1.0, False, LOC, LOC2) is False
    assert Symbol.OR.binary_operate(0.0, True, LOC, LOC2) is True


@pytest.mark.parametrize(
    "symbol,left,right",
    [
        (Symbol.ADD, 1.0, "a"),
        (Symbol.SUB, "a", "b"),
        (Symbol.MUL, "a", "b"),
        (Symbol.EQUAL, True, True),
        (Symbol.AND, "a", True),
        (Symbol.LESS, "a", "b"),
        (Symbol.ASSIGN, 1.0, 1.0),
    ],
)
def test_binary_type_errors(symbol, left, right):
    with pytest.raises(OperandTypeError):
        symbol.binary_operate(left, right, LOC, LOC2)


def test_binary_error_mentions_both_locations():
    with pytest.raises(OperandTypeError) as info:
        Symbol.MUL.binary_operate(True, "x", LOC, LOC2)
    assert str(LOC) in str(info.value)
    assert str(LOC2) in str(info.value)


def test_token_end_pos_and_locate():
    token = Token(TokenKind.IDENTIFIER, "abc", Location("f", 2, 4))
    assert token.end_pos() == Location("f", 2, 4 + len("abc"))
    assert token.locate() == str(Location("f", 2, 4))


def test_token_text():
    assert _tok(TokenKind.EOL, None).text == "\\n"
    assert _tok(TokenKind.WHITESPACE, 1).text == " "
    assert _tok(TokenKind.SYMBOL, Symbol.LESS_EQUAL).text == "<="
    assert _tok(TokenKind.KEYWORD, Keyword.OUT).text == "out"
    assert _tok(TokenKind.LITERAL, True).text == "true"
    assert "abc" in str(_tok(TokenKind.IDENTIFIER, "abc"))


def test_stream_skips_whitespace():
    ident = _tok(TokenKind.IDENTIFIER, "a")
    sym = _tok(TokenKind.SYMBOL, Symbol.ADD, 3)
    stream = TokenStream([ident, _tok(TokenKind.WHITESPACE, 1, 2), sym])
    assert list(stream) == [ident, sym]
    assert stream.next() is None


def test_stream_undo():
    ident = _tok(TokenKind.IDENTIFIER, "a")
    stream = TokenStream([ident])
    assert stream.next() == ident
    stream.undo()
    assert stream.next() == ident
    assert stream.previous() == ident


def test_previous_before_reading_raises():
    with pytest.raises(IndexError):
        TokenStream().previous()


def test_skip_white_space_drops_line_ends():
    ident = _tok(TokenKind.IDENTIFIER, "b", 1, 2)
    stream = TokenStream([_tok(TokenKind.EOL, None), _tok(TokenKind.EOL, None, 1, 2), ident])
    stream.skip_white_space()
    assert stream.next() == ident


def test_expect():
    assign = _tok(TokenKind.SYMBOL, Symbol.ASSIGN, 2)
    stream = TokenStream([_tok(TokenKind.WHITESPACE, 1), assign])
    assert stream.expect(Symbol.ASSIGN) == assign


def test_expect_wrong_token():
    stream = TokenStream([_tok(TokenKind.IDENTIFIER, "x")])
    with pytest.raises(UnexpectedToken):
        stream.expect(Symbol.ASSIGN)


def test_expect_at_end():
    stream = TokenStream([_tok(TokenKind.IDENTIFIER, "x")])
    stream.next()
    with pytest.raises(IllegalEOF) as info:
        stream.expect(Symbol.ASSIGN)
    assert str(_tok(TokenKind.IDENTIFIER, "x").end_pos()) in str(info.value)