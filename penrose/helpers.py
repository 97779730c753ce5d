"""Utility functions used across the window manager."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass

logger = logging.getLogger("penrose")

CodeMap = dict[str, int]
ErrorHandler = Callable[[Exception], None]


class PenroseError(Exception):
    """Base error for all window manager failures."""


class SpawnError(PenroseError):
    """Raised when an external program cannot be started or read from."""

    def __init__(self, cmd: str, reason: str | None = None) -> None:
        self.cmd = cmd
        self.reason = reason
        message = f"unable to spawn process: {cmd!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


@dataclass(frozen=True)
class IndexSelector:
    """Selects an element of an ordered collection by its position."""

    index: int


def _split_command(cmd: str) -> list[str]:
    parts = cmd.split()
    if not parts:
        raise SpawnError(cmd, "empty command")
    return parts


def _start_detached(argv: Sequence[str], cmd: str) -> None:
    try:
        subprocess.Popen(
            list(argv),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as exc:
        raise SpawnError(cmd, str(exc)) from exc


def _read_output(argv: Sequence[str], cmd: str) -> str:
    try:
        proc = subprocess.Popen(list(argv), stdout=subprocess.PIPE)
    except OSError as exc:
        raise SpawnError(cmd, str(exc)) from exc
    with proc:
        if proc.stdout is None:
            raise SpawnError(cmd, "no stdout available")
        raw = proc.stdout.read()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SpawnError(cmd, "output was not valid utf-8") from exc


def spawn(cmd: str) -> None:
    """Start a whitespace separated command, discarding its stdout and stderr."""
    _start_detached(_split_command(cmd), cmd)


def spawn_with_args(cmd: str, args: Sequence[str]) -> None:
    """Start a program with explicit arguments, discarding its stdout and stderr."""
    _start_detached([cmd, *args], cmd)


def spawn_for_output(cmd: str) -> str:
    """Run a whitespace separated command and return everything it wrote to stdout."""
    logger.info("spawning subprocess for output: %s", cmd)
    return _read_output(_split_command(cmd), cmd)


def spawn_for_output_with_args(cmd: str, args: Sequence[str]) -> str:
    """Run a program with explicit arguments and return its stdout."""
    logger.info("spawning subprocess for output: %s %s", cmd, list(args))
    return _read_output([cmd, *args], cmd)


def parse_xmodmap(text: str) -> CodeMap:
    """Parse the output of ``xmodmap -pke`` into a mapping of key name to key code.

    Each line has the form ``keycode <code> = <names ...>``.
    """
    codes: CodeMap = {}
    for line in text.splitlines():
        words = line.split()
        if not words:
            continue
        if len(words) < 2:
            raise PenroseError(f"unexpected output format from xmodmap -pke: {line!r}")
        try:
            key_code = int(words[1])
        except ValueError as exc:
            raise PenroseError(f"invalid key code in xmodmap output: {words[1]!r}") from exc
        if not 0 <= key_code <= 255:
            raise PenroseError(f"key code out of range in xmodmap output: {key_code}")
        for name in words[3:]:
            codes[name] = key_code
    return codes


def keycodes_from_xmodmap() -> CodeMap:
    """Dump the system keymap with ``xmodmap -pke`` and parse it."""
    try:
        result = subprocess.run(["xmodmap", "-pke"], capture_output=True, check=False)
    except OSError as exc:
        raise PenroseError(f"unable to fetch keycodes via xmodmap: {exc}") from exc
    try:
        text = result.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PenroseError(f"invalid utf8 from xmodmap: {exc}") from exc
    return parse_xmodmap(text)


def index_selectors(length: int) -> list[IndexSelector]:
    """Build index selectors for positions ``0 .. length - 1``."""
    return [IndexSelector(i) for i in range(length)]


def logging_error_handler() -> ErrorHandler:
    """Return an error handler that writes errors to the log."""

    def handle(error: Exception) -> None:
        logger.error("%s", error)

    return handle