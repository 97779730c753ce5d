"""Helpers for building key binding actions, errors and small mappings."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any

from penrose.helpers import (
    PenroseError,
    spawn,
    spawn_for_output,
    spawn_for_output_with_args,
)

KeyEventHandler = Callable[[Any], Any]


def run_external(cmd: str) -> KeyEventHandler:
    """Build a handler that starts ``cmd`` when it is called with a window manager.

    The command's stdout and stderr are discarded.
    """

    def handler(wm: Any) -> None:
        return spawn(cmd)

    return handler


def run_internal(method: str, *args: Any) -> KeyEventHandler:
    """Build a handler that calls the named window manager method with ``args``."""

    def handler(wm: Any) -> Any:
        return getattr(wm, method)(*args)

    return handler


def spawn_output_lines(cmd: str, *args: str) -> list[str]:
    """Run a program and return its stdout, stripped, as a list of lines.

    With no ``args`` the command is split on whitespace; otherwise ``cmd`` is the
    program and ``args`` are passed to it unchanged.
    """
    if args:
        output = spawn_for_output_with_args(cmd, args)
    else:
        output = spawn_for_output(cmd)
    return output.strip().split("\n")


def perror(template: Any, *args: Any) -> PenroseError:
    """Create a plain error from a message or a ``{}`` style template and its values."""
    if args:
        return PenroseError(str(template).format(*args))
    return PenroseError(str(template))


def make_map(*args: Iterable[tuple[Hashable, Any]] | tuple[Hashable, Any]) -> dict:
    """Build a dict from ``(key, value)`` pairs; later pairs replace earlier ones."""
    result: dict = {}
    for pair in args:
        try:
            key, value = pair  # type: ignore[misc]
        except (TypeError, ValueError) as exc:
            raise PenroseError(f"expected a (key, value) pair, got {pair!r}") from exc
        result[key] = value
    return result