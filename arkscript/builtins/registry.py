"""Table of the builtin values and functions, by the names scripts use."""

from __future__ import annotations

from typing import Any

from arkscript.builtins import io, lists, mathematics, strings, system, timing

_BUILTINS: dict[str, Any] = {
    "false": False,
    "true": True,
    "nil": None,
    # List
    "list:reverse": lists.reverse_list,
    "list:find": lists.find_in_list,
    "list:removeAt": lists.remove_at_list,
    "list:slice": lists.slice_list,
    "list:sort": lists.sort_list,
    "list:fill": lists.fill,
    "list:setAt": lists.set_list_at,
    # IO
    "print": io.print_,
    "puts": io.puts,
    "input": io.input_,
    "io:writeFile": io.write_file,
    "io:readFile": io.read_file,
    "io:fileExists?": io.file_exists,
    "io:listFiles": io.list_files,
    "io:dir?": io.is_directory,
    "io:makeDir": io.make_dir,
    "io:removeFiles": io.remove_files,
    # Time
    "time": timing.time_since_epoch,
    # System
    "sys:exec": system.system_,
    "sys:sleep": system.sleep,
    "sys:exit": system.exit_,
    # String
    "str:format": strings.format_,
    "str:find": strings.find_substr,
    "str:removeAt": strings.remove_at_str,
    "str:ord": strings.ord_,
    "str:chr": strings.chr_,
    # Mathematics
    "math:exp": mathematics.exponential,
    "math:ln": mathematics.logarithm,
    "math:ceil": mathematics.ceil_,
    "math:floor": mathematics.floor_,
    "math:round": mathematics.round_,
    "math:NaN?": mathematics.is_nan,
    "math:Inf?": mathematics.is_inf,
    "math:pi": mathematics.PI,
    "math:e": mathematics.E,
    "math:tau": mathematics.TAU,
    "math:Inf": mathematics.INF,
    "math:NaN": mathematics.NAN,
    "math:cos": mathematics.cos_,
    "math:sin": mathematics.sin_,
    "math:tan": mathematics.tan_,
    "math:arccos": mathematics.acos_,
    "math:arcsin": mathematics.asin_,
    "math:arctan": mathematics.atan_,
    "math:cosh": mathematics.cosh_,
    "math:sinh": mathematics.sinh_,
    "math:tanh": mathematics.tanh_,
    "math:acosh": mathematics.acosh_,
    "math:asinh": mathematics.asinh_,
    "math:atanh": mathematics.atanh_,
}


def lookup(name: str) -> Any:
    """The builtin value or function called ``name``; KeyError if there is none."""
    try:
        return _BUILTINS[name]
    except KeyError:
        raise KeyError(f"unknown builtin {name!r}") from None


def names() -> list[str]:
    """Names of every builtin, in declaration order."""
    return list(_BUILTINS)