# topmark:header:start
#
#   project      : TermFmt
#   file         : model.py
#   file_relpath : src/termfmt/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable TermFmt configuration.

A `Config` describes how a stream should be configured before formatted
output is written to it (see `termfmt.core.formatting.configure_stream`).
It is built from a TOML table with `Config.from_mapping` and refined with
`Config.with_overrides`; instances are frozen.

TOML keys:
    ```toml
    [tool.termfmt]          # or top level in termfmt.toml
    color = "auto"          # auto | always | never
    html = false
    width = 80              # 1..255
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from termfmt.constants import MAX_WIDTH
from termfmt.core.errors import ConfigError
from termfmt.terminal import ColorMode

if TYPE_CHECKING:
    from collections.abc import Mapping

KEY_COLOR = "color"
KEY_HTML = "html"
KEY_WIDTH = "width"

KNOWN_KEYS: frozenset[str] = frozenset({KEY_COLOR, KEY_HTML, KEY_WIDTH})


@dataclass(frozen=True)
class Config:
    """Stream configuration.

    Attributes:
        color_mode (ColorMode): User intent for ANSI output.
        html (bool): Emit HTML tags.
        width (int | None): Width override in ``1..MAX_WIDTH``.
    """

    color_mode: ColorMode = ColorMode.AUTO
    html: bool = False
    width: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, object], *, source: str = "<mapping>") -> Config:
        """Build a `Config` from a parsed TOML table.

        Unknown keys are ignored with a warning by the loader; this method only
        validates the known ones.

        Args:
            data (Mapping[str, object]): The ``[tool.termfmt]`` table (or equivalent).
            source (str): Human-readable origin used in error messages.

        Returns:
            Config: The validated configuration.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        color_mode = ColorMode.AUTO
        raw_color = data.get(KEY_COLOR)
        if raw_color is not None:
            if not isinstance(raw_color, str):
                raise ConfigError(f"{source}: '{KEY_COLOR}' must be a string")
            try:
                color_mode = ColorMode(raw_color.strip().lower())
            except ValueError:
                choices = ", ".join(m.value for m in ColorMode)
                raise ConfigError(
                    f"{source}: '{KEY_COLOR}' must be one of {choices}, got {raw_color!r}"
                ) from None

        html = data.get(KEY_HTML, False)
        if not isinstance(html, bool):
            raise ConfigError(f"{source}: '{KEY_HTML}' must be a boolean")

        width = data.get(KEY_WIDTH)
        if width is not None:
            if isinstance(width, bool) or not isinstance(width, int):
                raise ConfigError(f"{source}: '{KEY_WIDTH}' must be an integer")
            if not 1 <= width <= MAX_WIDTH:
                raise ConfigError(
                    f"{source}: '{KEY_WIDTH}' must be between 1 and {MAX_WIDTH}, got {width}"
                )

        return cls(color_mode=color_mode, html=html, width=width)

    def with_overrides(
        self,
        *,
        color_mode: ColorMode | None = None,
        html: bool | None = None,
        width: int | None = None,
    ) -> Config:
        """Return a copy with the given (non-None) fields replaced."""
        return replace(
            self,
            color_mode=self.color_mode if color_mode is None else color_mode,
            html=self.html if html is None else html,
            width=self.width if width is None else width,
        )
