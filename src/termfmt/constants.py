# topmark:header:start
#
#   project      : TermFmt
#   file         : constants.py
#   file_relpath : src/termfmt/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermFmt Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    TERMFMT_VERSION: str = get_version("termfmt")
except PackageNotFoundError:  # running from a source checkout
    TERMFMT_VERSION = "0.0.0"

ESC: Final[str] = "\033"

# Rendered once before replaying the stack whenever formatting was active.
ANSI_RESET: Final[str] = f"{ESC}[0m"

HTML_OPEN_TEMPLATE: Final[str] = '<font color="{color}">'
HTML_CLOSE: Final[str] = "</font>"

# Width overrides are stored in a byte-sized slot.
MAX_WIDTH: Final[int] = 255

# Configuration sources
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
TERMFMT_TOML_NAME: Final[str] = "termfmt.toml"
TOOL_SECTION: Final[str] = "termfmt"

# Environment variables
ENV_LOG_LEVEL: Final[str] = "TERMFMT_LOG_LEVEL"
ENV_COLOR: Final[str] = "TERMFMT_COLOR"
