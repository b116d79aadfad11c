import dataclasses

import pytest

from asciiplot.tokens import Token, TokenType


def test_number_keeps_text():
    tok = Token.number("3.14")
    assert tok.type is TokenType.NUMBER
    assert tok.value == "3.14"
    assert tok.op == ""


def test_number_text_is_truncated_to_31_characters():
    text = "9" * 40
    tok = Token.number(text)
    assert tok.value == text[:31]
    assert len(tok.value) == 31


def test_operator_keeps_symbol():
    tok = Token.operator("~")
    assert tok.type is TokenType.OPERATOR
    assert tok.op == "~"
    assert tok.value == ""


def test_function_keeps_name():
    tok = Token.function("sqrt")
    assert tok.type is TokenType.FUNCTION
    assert tok.value == "sqrt"


@pytest.mark.parametrize(
    "factory, kind",
    [
        (Token.variable, TokenType.VARIABLE),
        (Token.lparen, TokenType.LPAREN),
        (Token.rparen, TokenType.RPAREN),
    ],
)
def test_plain_tokens_carry_no_payload(factory, kind):
    tok = factory()
    assert tok.type is kind
    assert (tok.value, tok.op) == ("", "")


def test_tokens_compare_by_content():
    assert Token.operator("+") == Token.operator("+")
    assert Token.operator("+") != Token.operator("-")
    assert Token.number("1") != Token.function("1")


def test_tokens_are_immutable():
    tok = Token.variable()
    with pytest.raises(dataclasses.FrozenInstanceError):
        tok.value = "y"
    assert tok.value == ""
    assert tok == Token.variable()