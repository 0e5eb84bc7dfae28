"""Input/output builtins: printing, reading input and working with files."""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path
from typing import Any, Sequence, TextIO

from arkscript.builtins.values import ValueType, check, to_string, type_error, value_type
from arkscript.common import ArkError

_FILENAME_CONTRACT = [[("filename", ValueType.STRING)]]
_PATH_CONTRACT = [[("path", ValueType.STRING)]]
_REMOVE_CONTRACT = [[("filename", ValueType.STRING), ("filenames", ValueType.STRING, True)]]


def print_(args: Sequence[Any], out: TextIO | None = None) -> None:
    """Write the values with no separator, then a newline."""
    stream = sys.stdout if out is None else out
    stream.write("".join(to_string(value) for value in args) + "\n")


def puts(args: Sequence[Any], out: TextIO | None = None) -> None:
    """Write the values with no separator and no trailing newline."""
    stream = sys.stdout if out is None else out
    stream.write("".join(to_string(value) for value in args))


def input_(args: Sequence[Any]) -> str:
    """Read a line from standard input, after showing an optional prompt."""
    if check(args, ValueType.STRING):
        sys.stdout.write(args[0])
        sys.stdout.flush()
    elif args:
        type_error("input", [[], [("prompt", ValueType.STRING)]], args)
    line = sys.stdin.readline()
    return line[:-1] if line.endswith("\n") else line


def write_file(args: Sequence[Any]) -> None:
    """Write a value to a file, truncating it ("w", the default) or appending ("a")."""
    if check(args, ValueType.STRING, ValueType.ANY):
        filename, mode, content = args[0], "w", args[1]
    elif check(args, ValueType.STRING, ValueType.STRING, ValueType.ANY):
        filename, mode, content = args
        if mode not in ("w", "a"):
            raise ArkError('io:writeFile: mode must be equal to "a" or "w"')
    else:
        type_error(
            "io:writeFile",
            [
                [("filename", ValueType.STRING), ("content", ValueType.ANY)],
                [
                    ("filename", ValueType.STRING),
                    ("mode", ValueType.STRING),
                    ("content", ValueType.ANY),
                ],
            ],
            args,
        )
    try:
        with open(filename, mode, encoding="utf-8") as handle:
            handle.write(to_string(content))
    except OSError as exc:
        raise ArkError(f'Couldn\'t write to file "{filename}"') from exc


def read_file(args: Sequence[Any]) -> str:
    """The whole content of a file as a string."""
    if not check(args, ValueType.STRING):
        type_error("io:readFile", _FILENAME_CONTRACT, args)
    filename = args[0]
    path = Path(filename)
    if not path.exists():
        raise ArkError(f"Couldn't read file \"{filename}\": it doesn't exist")
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ArkError(f'Couldn\'t read file "{filename}"') from exc


def file_exists(args: Sequence[Any]) -> bool:
    """True if the path exists."""
    if not check(args, ValueType.STRING):
        type_error("io:fileExists?", _FILENAME_CONTRACT, args)
    return Path(args[0]).exists()


def list_files(args: Sequence[Any]) -> list[str]:
    """Paths of the entries of a directory."""
    if not check(args, ValueType.STRING):
        type_error("io:listFiles", _PATH_CONTRACT, args)
    try:
        with os.scandir(args[0]) as entries:
            return [entry.path for entry in entries]
    except OSError as exc:
        raise ArkError(f'io:listFiles: couldn\'t list "{args[0]}"') from exc


def is_directory(args: Sequence[Any]) -> bool:
    """True if the path is a directory."""
    if not check(args, ValueType.STRING):
        type_error("io:dir?", _PATH_CONTRACT, args)
    return Path(args[0]).is_dir()


def make_dir(args: Sequence[Any]) -> None:
    """Create a directory and any missing parents."""
    if not check(args, ValueType.STRING):
        type_error("io:makeDir", _PATH_CONTRACT, args)
    try:
        os.makedirs(args[0], exist_ok=True)
    except OSError as exc:
        raise ArkError(f'io:makeDir: couldn\'t create "{args[0]}"') from exc


def remove_files(args: Sequence[Any]) -> None:
    """Delete every given file or directory tree; missing paths are ignored."""
    if not args or value_type(args[0]) is not ValueType.STRING:
        type_error("io:removeFiles", _REMOVE_CONTRACT, args)
    for item in args:
        if value_type(item) is not ValueType.STRING:
            type_error("io:removeFiles", _REMOVE_CONTRACT, args)
        path = Path(item)
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        elif path.exists() or path.is_symlink():
            path.unlink()