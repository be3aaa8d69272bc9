import copy
import pickle

import pytest

from core.errors import InvalidOperatorError
from core.token_system import (
    NAMED_OPERATORS, PRECEDENCE_INDEX, PRECEDENCE_ORDER, SYMBOL_TOKENS, UNARY_OPERATORS,
    Token, TokenKind,
)

STRUCTURAL = {TokenKind.NUMBER, TokenKind.OPENING_PARENTHESES, TokenKind.CLOSING_PARENTHESES}
BINARY = {
    TokenKind.PLUS, TokenKind.MINUS, TokenKind.MULTIPLICATION, TokenKind.DIVISION,
    TokenKind.MODULO, TokenKind.POWER, TokenKind.PERMUTATION, TokenKind.COMBINATION,
}


def make(kind):
    return Token.number(1.0) if kind is TokenKind.NUMBER else Token(kind)


@pytest.mark.parametrize("kind", list(TokenKind))
def test_classification_is_consistent(kind) -> None:
    token = make(kind)
    assert token.is_operator() == (kind not in STRUCTURAL)
    assert token.is_number() == (kind is TokenKind.NUMBER)
    assert token.is_unary_operator() == (kind in UNARY_OPERATORS)
    assert token.is_binary_operator() == (kind in BINARY)
    assert not (token.is_unary_operator() and token.is_binary_operator())


def test_unary_and_binary_partition_the_operators() -> None:
    operators = {kind for kind in TokenKind if kind not in STRUCTURAL}
    assert len(UNARY_OPERATORS) == 11
    assert UNARY_OPERATORS | BINARY == operators
    assert not UNARY_OPERATORS & BINARY


def test_precedence_table_covers_every_operator_once() -> None:
    assert len(PRECEDENCE_ORDER) == 19
    assert set(PRECEDENCE_ORDER) == {kind for kind in TokenKind if kind not in STRUCTURAL}
    assert PRECEDENCE_INDEX[TokenKind.NEGATION] == 0
    assert PRECEDENCE_INDEX[TokenKind.MINUS] == 18


def test_higher_precedence() -> None:
    assert Token(TokenKind.SQUARE_ROOT).has_higher_precedence_than(Token(TokenKind.PLUS))
    assert Token(TokenKind.DIVISION).has_higher_precedence_than(Token(TokenKind.MULTIPLICATION))
    assert Token(TokenKind.PLUS).has_higher_precedence_than(Token(TokenKind.MINUS))
    assert not Token(TokenKind.TAN).has_higher_precedence_than(Token(TokenKind.NEGATION))
    assert not Token(TokenKind.MINUS).has_higher_precedence_than(Token(TokenKind.PLUS))


@pytest.mark.parametrize("kind", [TokenKind.POWER, TokenKind.MINUS, TokenKind.NEGATION])
def test_same_operator_is_not_higher(kind) -> None:
    assert not Token(kind).has_higher_precedence_than(Token(kind))


@pytest.mark.parametrize("kind", sorted(STRUCTURAL, key=lambda k: k.value))
def test_precedence_of_non_operator_fails(kind) -> None:
    with pytest.raises(InvalidOperatorError):
        make(kind).has_higher_precedence_than(Token(TokenKind.PLUS))
    with pytest.raises(ValueError):
        Token(TokenKind.PLUS).has_higher_precedence_than(make(kind))


def test_number_equality_compares_payload() -> None:
    assert Token.number(3) == Token.number(3.0)
    assert Token.number(3) != Token.number(4)
    assert Token.number(3) != Token(TokenKind.PLUS)
    assert Token(TokenKind.PLUS) == Token(TokenKind.PLUS)
    assert len({Token.number(2.0), Token.number(2), Token(TokenKind.SIN)}) == 2


def test_token_is_immutable() -> None:
    token = Token.number(1.0)
    with pytest.raises(AttributeError):
        token.value = 2.0
    with pytest.raises(AttributeError):
        token.kind = TokenKind.PLUS
    assert token.value == 1.0


@pytest.mark.parametrize("token", [Token.number(1.5), Token(TokenKind.SIN), Token(TokenKind.CLOSING_PARENTHESES)])
def test_token_survives_copy_and_pickle(token) -> None:
    assert copy.copy(token) == token
    assert copy.deepcopy(token) == token
    restored = pickle.loads(pickle.dumps(token))
    assert restored == token
    assert repr(restored) == repr(token)
    with pytest.raises(AttributeError):
        restored.value = 2.0


def test_payload_is_checked_at_construction() -> None:
    with pytest.raises(ValueError):
        Token(TokenKind.NUMBER)
    with pytest.raises(ValueError):
        Token(TokenKind.PLUS, 1.0)


def test_repr_matches_debug_rendering() -> None:
    assert repr(Token(TokenKind.PLUS)) == "Plus"
    assert repr(Token(TokenKind.OPENING_PARENTHESES)) == "OpeningParentheses"
    assert repr(Token(TokenKind.ARC_TAN)) == "ArcTan"
    assert repr(Token.number(3)) == "Number(3.0)"
    assert repr(Token.number(0.5)) == "Number(0.5)"


def test_symbol_and_name_tables() -> None:
    assert SYMBOL_TOKENS['~'].kind is TokenKind.NEGATION
    assert SYMBOL_TOKENS['-'].kind is TokenKind.MINUS
    assert NAMED_OPERATORS['ln'].kind is TokenKind.NATURAL_LOGARITHM
    assert NAMED_OPERATORS['log'].kind is TokenKind.LOGARITHM
    assert NAMED_OPERATORS['mod'].kind is TokenKind.MODULO
    assert Token(TokenKind.PLUS).name == 'add'
    assert Token(TokenKind.ARC_TAN).name == 'atan'
