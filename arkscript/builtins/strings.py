"""String builtins: formatting, searching and character conversions."""

from __future__ import annotations

from typing import Any, Sequence

from arkscript.builtins.values import ValueType, check, to_string, type_error, value_type

_PLACEHOLDERS = ("%%", "%x")


def _next_placeholder(text: str) -> tuple[int, str] | None:
    found = [(text.find(p), p) for p in _PLACEHOLDERS]
    found = [(pos, p) for pos, p in found if pos >= 0]
    return min(found) if found else None


def format_(args: Sequence[Any]) -> str:
    """Replace placeholders in the format string by the values, in order.

    ``%%`` takes any value; ``%x`` shows a number in hexadecimal. Placeholders
    without a value are left untouched.
    """
    if len(args) < 2 or value_type(args[0]) is not ValueType.STRING:
        type_error(
            "str:format",
            [[("string", ValueType.STRING), ("value", ValueType.ANY, True)]],
            args,
        )
    result = args[0]
    searched = 0
    for value in args[1:]:
        found = _next_placeholder(result[searched:])
        if found is None:
            break
        offset, placeholder = found
        pos = searched + offset
        if placeholder == "%x" and value_type(value) is ValueType.NUMBER:
            text = format(int(value), "x")
        else:
            text = to_string(value)
        result = result[:pos] + text + result[pos + len(placeholder):]
        searched = pos + len(text)
    return result


def find_substr(args: Sequence[Any]) -> int:
    """Index of the first occurrence of the substring, or -1."""
    if not check(args, ValueType.STRING, ValueType.STRING):
        type_error(
            "str:find",
            [[("string", ValueType.STRING), ("substr", ValueType.STRING)]],
            args,
        )
    return args[0].find(args[1])


def remove_at_str(args: Sequence[Any]) -> str:
    """A new string without the character at the given index."""
    if not check(args, ValueType.STRING, ValueType.NUMBER):
        type_error(
            "str:removeAt",
            [[("string", ValueType.STRING), ("index", ValueType.NUMBER)]],
            args,
        )
    text = args[0]
    idx = int(args[1])
    if idx < 0 or idx >= len(text):
        from arkscript.common import ArkError

        raise ArkError("str:removeAt: index out of range")
    return text[:idx] + text[idx + 1:]


def ord_(args: Sequence[Any]) -> int:
    """Codepoint of the first character of the string, 0 for an empty string."""
    if not check(args, ValueType.STRING):
        type_error("str:ord", [[("string", ValueType.STRING)]], args)
    text = args[0]
    return ord(text[0]) if text else 0


def chr_(args: Sequence[Any]) -> str:
    """The character of a codepoint; empty for 0 or codepoints outside Unicode."""
    if not check(args, ValueType.NUMBER):
        type_error("str:chr", [[("codepoint", ValueType.NUMBER)]], args)
    codepoint = int(args[0])
    if codepoint <= 0 or codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
        return ""
    return chr(codepoint)