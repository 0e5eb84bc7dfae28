"""List builtins: reversing, searching, slicing, sorting and building lists."""

from __future__ import annotations

import copy
from typing import Any, Sequence

from arkscript.builtins.values import ValueType, check, type_error, value_type
from arkscript.common import ArkError, ArkTypeError

_TYPE_RANK = {kind: rank for rank, kind in enumerate(ValueType)}
_warned_remove_at = False


def _same(a: Any, b: Any) -> bool:
    """Equality of runtime values, never mixing booleans with numbers."""
    if value_type(a) is not value_type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(_same(x, y) for x, y in zip(a, b))
    return a == b


def _sort_key(value: Any) -> tuple:
    kind = value_type(value)
    if kind in (ValueType.NUMBER, ValueType.STRING):
        return (_TYPE_RANK[kind], value)
    if kind is ValueType.LIST:
        return (_TYPE_RANK[kind], tuple(_sort_key(item) for item in value))
    return (_TYPE_RANK[kind],)


def reverse_list(args: Sequence[Any]) -> list:
    """A new list holding the elements of the given one in reverse order."""
    if not check(args, ValueType.LIST):
        type_error("list:reverse", [[("list", ValueType.LIST)]], args)
    return list(reversed(args[0]))


def find_in_list(args: Sequence[Any]) -> int:
    """Index of the first element equal to the value, or -1."""
    if not check(args, ValueType.LIST, ValueType.ANY):
        type_error("list:find", [[("list", ValueType.LIST), ("value", ValueType.ANY)]], args)
    target = args[1]
    return next((idx for idx, item in enumerate(args[0]) if _same(item, target)), -1)


def remove_at_list(args: Sequence[Any]) -> list:
    """A new list without the element at the given index (deprecated)."""
    global _warned_remove_at
    if not _warned_remove_at:
        print("list:removeAt will be deprecated in ArkScript 4.0.0, consider using pop! or pop")
        _warned_remove_at = True

    if len(args) != 2:
        raise ArkError("list:removeAt needs 2 arguments: list, index")
    if value_type(args[0]) is not ValueType.LIST:
        raise ArkTypeError("list:removeAt: list must be a List")
    if value_type(args[1]) is not ValueType.NUMBER:
        raise ArkTypeError("list:removeAt: index must be a Number")

    lst = args[0]
    idx = int(args[1])
    if idx < 0 or idx >= len(lst):
        raise ArkError("list:removeAt: index out of range")
    return lst[:idx] + lst[idx + 1:]


def slice_list(args: Sequence[Any]) -> list:
    """Elements from start (included) to end (excluded), every step-th one."""
    if not check(args, ValueType.LIST, ValueType.NUMBER, ValueType.NUMBER, ValueType.NUMBER):
        type_error(
            "list:slice",
            [[
                ("list", ValueType.LIST),
                ("start", ValueType.NUMBER),
                ("end", ValueType.NUMBER),
                ("step", ValueType.NUMBER),
            ]],
            args,
        )
    lst = args[0]
    step = int(args[3])
    if step <= 0:
        raise ArkError("list:slice: step can not be null")
    start = int(args[1])
    end = int(args[2])
    if start > end:
        raise ArkError("list:slice: start position must be less or equal to the end position")
    if start < 0 or end > len(lst):
        raise ArkError("list:slice: indices out of range")
    return lst[start:end:step]


def sort_list(args: Sequence[Any]) -> list:
    """A new, sorted list; values are grouped by type, then ordered by value."""
    if not check(args, ValueType.LIST):
        type_error("list:sort", [[("list", ValueType.LIST)]], args)
    return sorted(args[0], key=_sort_key)


def fill(args: Sequence[Any]) -> list:
    """A list of ``count`` independent copies of a value."""
    if not check(args, ValueType.NUMBER, ValueType.ANY):
        type_error("list:fill", [[("size", ValueType.NUMBER), ("value", ValueType.ANY)]], args)
    count = max(0, int(args[0]))
    return [copy.deepcopy(args[1]) for _ in range(count)]


def set_list_at(args: Sequence[Any]) -> list:
    """A new list with the element at the given index replaced."""
    if not check(args, ValueType.LIST, ValueType.NUMBER, ValueType.ANY):
        type_error(
            "list:setAt",
            [[("list", ValueType.LIST), ("index", ValueType.NUMBER), ("value", ValueType.ANY)]],
            args,
        )
    lst = list(args[0])
    idx = int(args[1])
    if idx < 0 or idx >= len(lst):
        raise ArkError("list:setAt: index out of range")
    lst[idx] = args[2]
    return lst