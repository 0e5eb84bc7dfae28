"""System builtins: running commands, sleeping and exiting."""

from __future__ import annotations

import subprocess
import time
from typing import Any, Sequence

from arkscript.builtins.values import ValueType, VmExit, check, type_error
from arkscript.common import ArkError

ENABLE_SYSTEM = True


def system_(args: Sequence[Any]) -> str | None:
    """Run a shell command and return its output, or None when commands are disabled."""
    if not check(args, ValueType.STRING):
        type_error("sys:exec", [[("command", ValueType.STRING)]], args)
    if not ENABLE_SYSTEM:
        return None
    try:
        completed = subprocess.run(
            args[0], shell=True, stdout=subprocess.PIPE, text=True, check=False
        )
    except OSError as exc:
        raise ArkError("sys:exec: couldn't retrieve command output") from exc
    return completed.stdout


def sleep(args: Sequence[Any]) -> None:
    """Sleep for the given number of milliseconds."""
    if not check(args, ValueType.NUMBER):
        type_error("sys:sleep", [[("duration", ValueType.NUMBER)]], args)
    time.sleep(max(0.0, args[0] / 1000))


def exit_(args: Sequence[Any]) -> None:
    """Halt the virtual machine with the given exit code."""
    if not check(args, ValueType.NUMBER):
        type_error("sys:exit", [[("exitCode", ValueType.NUMBER)]], args)
    raise VmExit(int(args[0]))