"""Turns ArkScript source code into a list of tokens."""

from __future__ import annotations

import re

from arkscript.common import KEYWORDS, OPERATORS, ArkSyntaxError, Token, TokenType
from arkscript.errorctx import make_token_based_error_ctx

_NUMBER = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_GROUPING = frozenset("()[]{}")
_SEPARATORS = frozenset(" \t\v\n")
_SIMPLE_ESCAPES = {
    '"': '"',
    "n": "\n",
    "a": "\a",
    "b": "\b",
    "t": "\t",
    "r": "\r",
    "f": "\f",
    "\\": "\\",
    "0": "\0",
}


def is_double(value: str) -> bool:
    """True if ``value`` is written as a number: sign, digits, fraction, exponent."""
    return _NUMBER.fullmatch(value) is not None


def is_keyword(value: str) -> bool:
    """True if ``value`` is a language keyword."""
    return value in KEYWORDS


def is_operator(value: str) -> bool:
    """True if ``value`` is a builtin operator."""
    return value in OPERATORS


def is_identifier(value: str) -> bool:
    """True if ``value`` is valid UTF-8 text."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def guess_type(value: str) -> TokenType:
    """Classify a buffered word that is not a grouping, string, shorthand or comment."""
    if not value:
        return TokenType.MISMATCH
    if is_double(value):
        return TokenType.NUMBER
    if is_operator(value):
        return TokenType.OPERATOR
    if is_keyword(value):
        return TokenType.KEYWORD
    if value[0] == "&" and len(value) > 1 and is_identifier(value):
        return TokenType.CAPTURE
    if len(value) > 3 and value.startswith("..."):
        return TokenType.SPREAD
    if value[0] == "." and len(value) > 1 and is_identifier(value):
        return TokenType.GET_FIELD
    if is_identifier(value):
        return TokenType.IDENTIFIER
    return TokenType.MISMATCH


def end_of_control_char(sequence: str, next_char: str) -> bool:
    """True if the escape ``sequence`` (without its backslash) is complete before ``next_char``."""
    if not sequence:
        return False
    lead = sequence[0]
    if lead == "x":
        return next_char not in _HEX_DIGITS
    if lead == "u":
        return len(sequence) == 5
    if lead == "U":
        return len(sequence) == 9
    return lead in _SIMPLE_ESCAPES


def _syntax_error(message: str, match: str, line: int, col: int, code: str) -> ArkSyntaxError:
    return ArkSyntaxError(f"{message}\n{make_token_based_error_ctx(match, line, col, code)}")


def _decode_codepoint(digits: str) -> str | None:
    if not digits or any(c not in _HEX_DIGITS for c in digits):
        return None
    codepoint = int(digits, 16)
    if codepoint == 0 or codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
        return None
    return chr(codepoint)


def _resolve_escape(sequence: str, match: str, line: int, col: int, code: str) -> str:
    """Text an escape sequence stands for inside a string literal."""
    if not sequence:
        raise _syntax_error("empty control character '\\' in string", match, line, col, code)
    unknown = f"unknown control character '\\{sequence}' in string"
    if len(sequence) == 1:
        if sequence not in _SIMPLE_ESCAPES:
            raise _syntax_error(unknown, match, line, col, code)
        return _SIMPLE_ESCAPES[sequence]

    lead = sequence[0]
    if lead == "x":
        return ""
    if lead in ("u", "U"):
        digits = sequence[1:] if lead == "u" else sequence[1:].lstrip("0")
        decoded = _decode_codepoint(digits)
        if decoded is None:
            raise _syntax_error(
                f"invalid escape sequence \\{sequence} in string, expected hexadecimal number "
                f'that in utf8 range, got a "{sequence}"',
                match,
                line,
                col + 1,
                code,
            )
        return decoded
    raise _syntax_error(unknown, match, line, col, code)


class Lexer:
    """Accumulates the tokens of the code it is fed."""

    def __init__(self, debug: int) -> None:
        self._debug = debug
        self._tokens: list[Token] = []

    def tokens(self) -> list[Token]:
        """Every token produced so far."""
        return self._tokens

    def feed(self, code: str) -> None:
        """Tokenize ``code`` and append the result to the token list."""
        line = character = 0
        saved_line = saved_char = 0
        in_string = in_ctrl_char = in_comment = False
        buffer = ""
        ctrl_char = ""

        def flush() -> None:
            nonlocal buffer
            kind = guess_type(buffer)
            if kind is TokenType.MISMATCH:
                raise _syntax_error(f"invalid token '{buffer}'", buffer, line, character, code)
            if kind in (TokenType.CAPTURE, TokenType.GET_FIELD):
                buffer = buffer[1:]
            self._tokens.append(Token(kind, buffer, saved_line, saved_char))
            buffer = ""

        def close_string() -> None:
            nonlocal buffer, in_string
            buffer += '"'
            in_string = False
            self._tokens.append(Token(TokenType.STRING, buffer, saved_line, saved_char))
            buffer = ""

        for pos, current in enumerate(code):
            if self._debug >= 5:
                print(
                    f"buffer: {buffer} - ctrl_char: {ctrl_char} - current: '{current}'"
                    f" - line: {line}, char: {character}"
                )

            if not in_string:
                if in_comment:
                    buffer += current
                elif current in _GROUPING:
                    if buffer:
                        flush()
                    self._tokens.append(Token(TokenType.GROUPING, current, line, character))
                elif current == '"':
                    if buffer:
                        flush()
                    in_string = True
                    buffer = '"'
                    saved_line, saved_char = line, character
                elif current == "'" or (
                    current == "!" and pos + 1 < len(code) and code[pos + 1] != "=" and not buffer
                ):
                    self._tokens.append(Token(TokenType.SHORTHAND, current, line, character))
                elif current == "#":
                    if buffer:
                        flush()
                    in_comment = True
                    buffer = "#"
                elif current in _SEPARATORS:
                    if buffer:
                        flush()
                elif current == "&":
                    if buffer:
                        flush()
                    buffer = current
                elif current == ".":
                    # keep numbers such as 3.0 in one piece
                    if buffer and not buffer[0].isdigit() and buffer[0] not in "+-.":
                        flush()
                    buffer += current
                else:
                    if not buffer:
                        saved_line, saved_char = line, character
                    buffer += current
            elif not in_ctrl_char:
                if current == "\\":
                    in_ctrl_char = True
                elif current == '"':
                    close_string()
                else:
                    buffer += current
            elif current == " " or end_of_control_char(ctrl_char, current):
                buffer += _resolve_escape(ctrl_char, buffer, line, character, code)
                ctrl_char = ""
                in_ctrl_char = False
                if current == '"':
                    close_string()
                elif current == "\\":
                    in_ctrl_char = True
                else:
                    buffer += current
            else:
                ctrl_char += current

            if current == "\n":
                line += 1
                character = 0
                if in_comment:
                    in_comment = False
                    buffer = ""
            else:
                character += 1

        if buffer and buffer[0] != "#":
            flush()

        if self._debug > 3:
            for token in self._tokens:
                print(
                    f"TokenType: {token.type.label}\tLine: {token.line}\n"
                    f"[{token.col}\t]\tToken: {token.token}"
                )


def tokenize(code: str) -> list[Token]:
    """Tokenize ``code`` with a fresh, quiet lexer."""
    lexer = Lexer(0)
    lexer.feed(code)
    return lexer.tokens()