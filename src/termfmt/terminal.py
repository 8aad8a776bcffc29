# topmark:header:start
#
#   project      : TermFmt
#   file         : terminal.py
#   file_relpath : src/termfmt/terminal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal detection and color-mode resolution.

This module answers the questions the formatting-state manager asks when a
stream carries no explicit flags:

- `is_terminal()`: is the stream backed by an interactive terminal?
- `terminal_width()`: how many columns does that terminal have?
- `resolve_color_mode()`: given user intent (`ColorMode`) and the standard
  ``FORCE_COLOR`` / ``NO_COLOR`` conventions, should ANSI codes be emitted?

None of these read terminal state interactively; they only query file
descriptors and the environment.
"""

from __future__ import annotations

import io
import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from termfmt.config.logging import get_logger
from termfmt.constants import ENV_COLOR

if TYPE_CHECKING:
    from termfmt.config.logging import TermfmtLogger


logger: TermfmtLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when the stream is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def _fileno(stream: object) -> int | None:
    fileno = getattr(stream, "fileno", None)
    if fileno is None:
        return None
    try:
        return int(fileno())
    except (OSError, ValueError, io.UnsupportedOperation):
        # Closed, detached, or in-memory streams have no descriptor.
        return None


def is_terminal(stream: object) -> bool:
    """Return True if ``stream`` is backed by an interactive terminal.

    The check is made on the stream's file descriptor, not on its ``isatty()``
    method, so wrappers that lie about being a TTY are not trusted. On macOS the
    ``TERM`` environment variable must also be set.

    Args:
        stream (object): Any object; streams without a file descriptor are never terminals.

    Returns:
        bool: True if the descriptor refers to a TTY.
    """
    fd = _fileno(stream)
    if fd is None:
        return False
    try:
        is_atty = os.isatty(fd)
    except OSError:
        return False
    if sys.platform == "darwin":
        return is_atty and os.environ.get("TERM") is not None
    return is_atty


def terminal_width(stream: object) -> int | None:
    """Return the column count of the terminal behind ``stream``.

    Returns:
        int | None: The width, or None if ``stream`` is not a terminal or the size
            cannot be queried.
    """
    if not is_terminal(stream):
        return None
    fd = _fileno(stream)
    if fd is None:
        return None
    try:
        return os.get_terminal_size(fd).columns
    except OSError as exc:
        logger.debug("Cannot query terminal size for fd %d: %s", fd, exc)
        return None


def env_color_mode() -> ColorMode | None:
    """Return the color mode requested via ``TERMFMT_COLOR``, if valid."""
    val = os.environ.get(ENV_COLOR)
    if not val:
        return None
    try:
        return ColorMode(val.strip().lower())
    except ValueError:
        logger.warning("Ignoring invalid %s value: %r", ENV_COLOR, val)
        return None


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stream: object | None = None,
    stream_isatty: bool | None = None,
) -> bool:
    """Determine whether ANSI color output should be enabled.

    Decision precedence:
        1. **Override**: `ColorMode.ALWAYS` -> True; `ColorMode.NEVER` -> False.
        2. **TERMFMT_COLOR**: same meaning as the override, when set and valid.
        3. **Environment**:
            - ``FORCE_COLOR`` (set and not equal to ``"0"``) -> True
            - ``NO_COLOR`` (set to any value) -> False
        4. **Auto**: `is_terminal(stream)`.

    Args:
        color_mode_override: Explicit user intent; `None` or `ColorMode.AUTO`
            means "not decided".
        stream: Stream probed in step 4. Defaults to ``sys.stdout`` resolved at
            call time.
        stream_isatty: Optional override for TTY detection (skips step 4's probe).

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    for mode in (color_mode_override, env_color_mode()):
        if mode == ColorMode.ALWAYS:
            return True
        if mode == ColorMode.NEVER:
            return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stream_isatty is None:
        stream_isatty = is_terminal(sys.stdout if stream is None else stream)
    return bool(stream_isatty)
