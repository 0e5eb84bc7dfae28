"""Shared vocabulary of the compiler: node kinds, keywords, opcodes, tokens and errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class ArkError(Exception):
    """Base class of every error raised while processing ArkScript code."""


class ArkSyntaxError(ArkError):
    """Raised when source code cannot be tokenized or parsed."""


class OptimizerError(ArkError):
    """Raised when the AST optimizer meets an invalid construct."""


class ArkTypeError(ArkError, TypeError):
    """Raised when a value has a type an operation cannot handle."""


NODE_TYPE_NAMES: tuple[str, ...] = (
    "Symbol",
    "Capture",
    "GetField",
    "Keyword",
    "String",
    "Number",
    "List",
    "Closure",
    "Macro",
    "Spread",
    "Unused",
)


class NodeType(Enum):
    """The kinds of node found in an ArkScript AST, in their canonical order."""

    SYMBOL = 0
    CAPTURE = 1
    GET_FIELD = 2
    KEYWORD = 3
    STRING = 4
    NUMBER = 5
    LIST = 6
    CLOSURE = 7
    MACRO = 8
    SPREAD = 9
    UNUSED = 10

    @property
    def label(self) -> str:
        """Human readable name of the node type."""
        return NODE_TYPE_NAMES[self.value]


class Keyword(Enum):
    """The language keywords; each member's value is its spelling in source code."""

    FUN = "fun"
    LET = "let"
    MUT = "mut"
    SET = "set"
    IF = "if"
    WHILE = "while"
    BEGIN = "begin"
    IMPORT = "import"
    QUOTE = "quote"
    DEL = "del"


KEYWORDS: tuple[str, ...] = tuple(kw.value for kw in Keyword)

# Order matters: the n-th operator is compiled to FIRST_OPERATOR + n.
OPERATORS: tuple[str, ...] = (
    "+", "-", "*", "/",
    ">", "<", "<=", ">=", "!=", "=",
    "len", "empty?", "tail", "head",
    "nil?", "assert",
    "toNumber", "toString",
    "@", "and", "or", "mod",
    "type", "hasField",
    "not",
)


class Instruction(IntEnum):
    """Bytecode instructions and the section markers sharing their byte values."""

    NOP = 0x00

    LOAD_SYMBOL = 0x01
    LOAD_CONST = 0x02
    POP_JUMP_IF_TRUE = 0x03
    STORE = 0x04
    LET = 0x05
    POP_JUMP_IF_FALSE = 0x06
    JUMP = 0x07
    RET = 0x08
    HALT = 0x09
    CALL = 0x0A
    CAPTURE = 0x0B
    BUILTIN = 0x0C
    MUT = 0x0D
    DEL = 0x0E
    SAVE_ENV = 0x0F
    GET_FIELD = 0x10
    PLUGIN = 0x11
    LIST = 0x12
    APPEND = 0x13
    CONCAT = 0x14
    APPEND_IN_PLACE = 0x15
    CONCAT_IN_PLACE = 0x16
    POP_LIST = 0x17
    POP_LIST_IN_PLACE = 0x18
    POP = 0x19

    ADD = 0x20
    SUB = 0x21
    MUL = 0x22
    DIV = 0x23
    GT = 0x24
    LT = 0x25
    LE = 0x26
    GE = 0x27
    NEQ = 0x28
    EQ = 0x29
    LEN = 0x2A
    EMPTY = 0x2B
    TAIL = 0x2C
    HEAD = 0x2D
    ISNIL = 0x2E
    ASSERT = 0x2F
    TO_NUM = 0x30
    TO_STR = 0x31
    AT = 0x32
    AND_ = 0x33
    OR_ = 0x34
    MOD = 0x35
    TYPE = 0x36
    HASFIELD = 0x37
    NOT = 0x38

    # Aliases: table markers, value type tags and range bounds.
    SYM_TABLE_START = 0x01
    VAL_TABLE_START = 0x02
    NUMBER_TYPE = 0x01
    STRING_TYPE = 0x02
    FUNC_TYPE = 0x03
    CODE_SEGMENT_START = 0x03
    FIRST_COMMAND = 0x01
    LAST_COMMAND = 0x19
    FIRST_OPERATOR = 0x20
    LAST_OPERATOR = 0x38
    LAST_INSTRUCTION = 0x38


TOKEN_TYPE_NAMES: tuple[str, ...] = (
    "Grouping",
    "String",
    "Number",
    "Operator",
    "Identifier",
    "Capture",
    "GetField",
    "Keyword",
    "Skip",
    "Comment",
    "Shorthand",
    "Spread",
    "Mistmatch",
)


class TokenType(Enum):
    """The kinds of token produced by the lexer."""

    GROUPING = 0
    STRING = 1
    NUMBER = 2
    OPERATOR = 3
    IDENTIFIER = 4
    CAPTURE = 5
    GET_FIELD = 6
    KEYWORD = 7
    SKIP = 8
    COMMENT = 9
    SHORTHAND = 10
    SPREAD = 11
    MISMATCH = 12

    @property
    def label(self) -> str:
        """Human readable name of the token type."""
        return TOKEN_TYPE_NAMES[self.value]


@dataclass
class Token:
    """A lexed token with its position (0-based line, column) in the source."""

    type: TokenType
    token: str
    line: int = 0
    col: int = 0


def keyword_from_name(name: str) -> Keyword | None:
    """Return the keyword spelled ``name``, or None if it is not a keyword."""
    try:
        return Keyword(name)
    except ValueError:
        return None


def operator_instruction(name: str) -> Instruction | None:
    """Return the instruction an operator compiles to, or None if ``name`` is no operator."""
    try:
        position = OPERATORS.index(name)
    except ValueError:
        return None
    return Instruction(Instruction.FIRST_OPERATOR + position)