"""Runtime values seen by the builtins, their types and argument checking."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Iterable, NoReturn, Sequence

from arkscript.common import ArkError, ArkTypeError


class ValueType(Enum):
    """Types a runtime value can have; ANY matches every one of them."""

    LIST = "List"
    NUMBER = "Number"
    STRING = "String"
    PAGE_ADDR = "Function"
    CPROC = "CProc"
    CLOSURE = "Closure"
    USER = "UserType"
    NIL = "Nil"
    TRUE = "Bool"
    FALSE = "Bool "
    ANY = "Any"

    @property
    def label(self) -> str:
        """Name of the type as shown to users."""
        return self.value.strip()


class VmExit(ArkError):
    """Raised to halt the virtual machine with a given exit code."""

    def __init__(self, code: int) -> None:
        super().__init__(f"exit with code {code}")
        self.code = code


def value_type(value: Any) -> ValueType:
    """The runtime type of a Python value standing for an ArkScript value."""
    if value is None:
        return ValueType.NIL
    if value is True:
        return ValueType.TRUE
    if value is False:
        return ValueType.FALSE
    if isinstance(value, (int, float)):
        return ValueType.NUMBER
    if isinstance(value, str):
        return ValueType.STRING
    if isinstance(value, list):
        return ValueType.LIST
    if callable(value):
        return ValueType.CPROC
    return ValueType.USER


def check(args: Sequence[Any], *types: ValueType) -> bool:
    """True if ``args`` has exactly one value per type, each of the given type."""
    if len(args) != len(types):
        return False
    return all(
        expected is ValueType.ANY or value_type(value) is expected
        for value, expected in zip(args, types)
    )


def _describe_contract(contract: Iterable[tuple]) -> str:
    parts = []
    for typedef in contract:
        name, kind = typedef[0], typedef[1]
        variadic = len(typedef) > 2 and typedef[2]
        parts.append(f"{name}: {kind.label}{'...' if variadic else ''}")
    return "(" + ", ".join(parts) + ")"


def type_error(name: str, contracts: Iterable[Iterable[tuple]], args: Sequence[Any]) -> NoReturn:
    """Raise an error telling which signatures ``name`` accepts and what it was given.

    Each contract is a sequence of ``(argument name, ValueType)`` pairs, optionally
    followed by a third item flagging the argument as variadic.
    """
    expected = " or ".join(_describe_contract(contract) for contract in contracts)
    given = "(" + ", ".join(value_type(arg).label for arg in args) + ")"
    raise ArkTypeError(f"Function {name} expected {expected}, got {given}")


def _number_to_string(number: float) -> str:
    if isinstance(number, int):
        return str(number)
    if math.isfinite(number) and number.is_integer():
        return str(int(number))
    if math.isnan(number):
        return "nan"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    return repr(number)


def to_string(value: Any) -> str:
    """Render a value the way the VM prints it."""
    kind = value_type(value)
    if kind is ValueType.NIL:
        return "nil"
    if kind is ValueType.TRUE:
        return "true"
    if kind is ValueType.FALSE:
        return "false"
    if kind is ValueType.NUMBER:
        return _number_to_string(value)
    if kind is ValueType.STRING:
        return value
    if kind is ValueType.LIST:
        items = (f'"{item}"' if isinstance(item, str) else to_string(item) for item in value)
        return "[" + " ".join(items) + "]"
    if kind is ValueType.CPROC:
        return "CProcedure"
    return f"UserType<{type(value).__name__}>"