# topmark:header:start
#
#   project      : TermFmt
#   file         : loaders.py
#   file_relpath : src/termfmt/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TermFmt configuration from TOML files.

Sources, in discovery order (first hit wins, searching from the working
directory up to the filesystem root):

- ``termfmt.toml``: settings at the top level;
- ``pyproject.toml``: settings under ``[tool.termfmt]``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from termfmt.config.logging import get_logger
from termfmt.config.model import KNOWN_KEYS, Config
from termfmt.constants import PYPROJECT_TOML_NAME, TERMFMT_TOML_NAME, TOOL_SECTION
from termfmt.core.errors import ConfigError

if TYPE_CHECKING:
    from termfmt.config.logging import TermfmtLogger

TomlTable = dict[str, Any]

logger: TermfmtLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        logger.error("Error loading TOML from %s: %s", path, exc)
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    except TomlkitParseError as exc:
        logger.error("Error decoding TOML from %s: %s", path, exc)
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_section(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the TermFmt table of a parsed document.

    For ``pyproject.toml`` this is ``[tool.termfmt]`` (None if absent); for any
    other file it is the whole document.

    Raises:
        ConfigError: If ``[tool.termfmt]`` is present but not a table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool = data.get("tool")
    if not isinstance(tool, dict):
        return None
    section = tool.get(TOOL_SECTION)
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: [tool.{TOOL_SECTION}] must be a table")
    return cast("TomlTable", section)


def find_config_file(start: Path | None = None) -> Path | None:
    """Search ``start`` (default: cwd) and its parents for a config file.

    A ``pyproject.toml`` only counts if it has a ``[tool.termfmt]`` table.
    """
    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        termfmt_toml = candidate_dir / TERMFMT_TOML_NAME
        if termfmt_toml.is_file():
            return termfmt_toml
        pyproject = candidate_dir / PYPROJECT_TOML_NAME
        if pyproject.is_file():
            try:
                if extract_section(load_toml_dict(pyproject), pyproject) is not None:
                    return pyproject
            except ConfigError as exc:
                logger.warning("Skipping %s during config discovery: %s", pyproject, exc)
    return None


def load_config(path: Path | None = None, *, discover: bool = True) -> Config:
    """Load a `Config`.

    Args:
        path (Path | None): Explicit config file. When None and ``discover`` is
            true, `find_config_file` is used.
        discover (bool): Whether to search for a config file when ``path`` is None.

    Returns:
        Config: The loaded configuration, or defaults if no file applies.

    Raises:
        ConfigError: If the file is unreadable, malformed, or has invalid values.
    """
    if path is None and discover:
        path = find_config_file()
    if path is None:
        logger.debug("No TermFmt config file found; using defaults")
        return Config()

    section = extract_section(load_toml_dict(path), path)
    if section is None:
        logger.debug("%s has no [tool.%s] table; using defaults", path, TOOL_SECTION)
        return Config()

    for key in sorted(set(section) - KNOWN_KEYS):
        logger.warning("%s: ignoring unknown key %r", path, key)

    config = Config.from_mapping(section, source=str(path))
    logger.debug("Loaded config from %s: %s", path, config)
    return config
