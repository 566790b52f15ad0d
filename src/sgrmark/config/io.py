# topmark:header:start
#
#   project      : SgrMark
#   file         : io.py
#   file_relpath : src/sgrmark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading SgrMark configuration from
on-disk TOML files (``sgrmark.toml`` / ``pyproject.toml``) and for locating
the nearest such file.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from sgrmark.config.keys import Toml
from sgrmark.config.logging import get_logger
from sgrmark.constants import PYPROJECT_TOML_NAME, SGRMARK_TOML_NAME, VCS_ROOT_MARKER
from sgrmark.core.errors import ConfigError

if TYPE_CHECKING:
    from sgrmark.config.logging import SgrmarkLogger

logger: SgrmarkLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    logger.trace("Loaded TOML from %s: %r", path, data_any)
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_sgrmark_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the SgrMark table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.sgrmark]`` (None when absent); any
    other file is used as a whole.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(Toml.SECTION_SGRMARK) if isinstance(tool, dict) else None
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.sgrmark] in {path} must be a table")
    return cast("TomlTable", section)


def _has_sgrmark_table(path: Path) -> bool:
    try:
        data: TomlTable = load_toml_dict(path)
        return extract_sgrmark_table(data, path) is not None
    except ConfigError as e:
        # A broken pyproject.toml that may not even concern us: keep looking.
        logger.debug("Ignoring %s during discovery: %s", path, e)
        return False


def discover_config_file(start: Path | None = None) -> Path | None:
    """Return the nearest config file, walking up from ``start``.

    In each directory ``sgrmark.toml`` wins over a ``pyproject.toml`` with a
    ``[tool.sgrmark]`` table. The walk stops after the first directory that
    contains a ``.git`` entry, or at the filesystem root.

    Args:
        start (Path | None): Directory (or file) to start from; defaults to the
            current working directory.

    Returns:
        Path | None: The discovered file, or None.
    """
    cur: Path = (start or Path.cwd()).resolve()
    if cur.is_file():
        cur = cur.parent

    while True:
        candidate: Path = cur / SGRMARK_TOML_NAME
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate
        candidate = cur / PYPROJECT_TOML_NAME
        if candidate.is_file() and _has_sgrmark_table(candidate):
            logger.debug("Discovered config file: %s", candidate)
            return candidate

        parent: Path = cur.parent
        if (cur / VCS_ROOT_MARKER).exists() or parent == cur:
            logger.trace("Stopping upward config discovery at %s", cur)
            return None
        cur = parent
