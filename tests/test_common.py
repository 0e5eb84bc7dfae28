import pytest

from arkscript.common import (
    KEYWORDS,
    OPERATORS,
    ArkError,
    ArkSyntaxError,
    ArkTypeError,
    Instruction,
    Keyword,
    OptimizerError,
    Token,
    TokenType,
    keyword_from_name,
    operator_instruction,
)


def test_keyword_from_name_known():
    assert keyword_from_name("let") is Keyword.LET
    assert keyword_from_name("del") is Keyword.DEL


def test_keyword_from_name_unknown():
    assert keyword_from_name("lambda") is None
    assert keyword_from_name("Let") is None


def test_every_keyword_round_trips():
    for spelling in KEYWORDS:
        assert keyword_from_name(spelling).value == spelling


def test_operator_instruction_first_and_last():
    assert operator_instruction("+") is Instruction.ADD
    assert operator_instruction("not") is Instruction.NOT
    assert operator_instruction("@") is Instruction.AT


def test_operator_instruction_unknown():
    assert operator_instruction("list") is None
    assert operator_instruction("") is None


def test_operators_cover_operator_range_in_order():
    opcodes = [int(operator_instruction(op)) for op in OPERATORS]
    expected = list(range(Instruction.FIRST_OPERATOR, Instruction.LAST_OPERATOR + 1))
    assert opcodes == expected


def test_instruction_aliases_share_members():
    assert Instruction(0x20) is Instruction.ADD
    assert Instruction.FIRST_OPERATOR is Instruction.ADD
    assert Instruction.LAST_INSTRUCTION is Instruction.NOT


def test_token_type_labels():
    mismatch = Token(TokenType.MISMATCH, "?", 0, 0)
    shorthand = Token(TokenType.SHORTHAND, "'", 0, 1)
    assert mismatch.type.label == "Mistmatch"
    assert shorthand.type.label == "Shorthand"


def test_token_fields_and_equality():
    tok = Token(TokenType.IDENTIFIER, "foo", 3, 7)
    assert tok == Token(TokenType.IDENTIFIER, "foo", 3, 7)
    assert tok != Token(TokenType.IDENTIFIER, "foo", 3, 8)
    assert (tok.line, tok.col) == (3, 7)


@pytest.mark.parametrize("error", [ArkSyntaxError, OptimizerError, ArkTypeError])
def test_errors_share_base(error):
    err = error("boom")
    assert isinstance(err, ArkError)
    assert str(err) == "boom"


def test_type_error_is_builtin_type_error():
    err = ArkTypeError("Can not compare lists")
    assert isinstance(err, TypeError)
    assert str(err) == "Can not compare lists"