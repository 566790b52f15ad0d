# topmark:header:start
#
#   project      : SgrMark
#   file         : keys.py
#   file_relpath : src/sgrmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for SgrMark configuration.

Keys defined here are the external configuration API, as it appears in
``sgrmark.toml`` and in ``[tool.sgrmark]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by SgrMark configuration."""

    # [tool.sgrmark] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_SGRMARK: Final[str] = "sgrmark"

    # Root level
    KEY_COLOR_MODE: Final[str] = "color_mode"

    # [tags.<name>]
    SECTION_TAGS: Final[str] = "tags"

    KEY_FG: Final[str] = "fg"
    KEY_BG: Final[str] = "bg"
    KEY_SET: Final[str] = "set"
    KEY_CLEAR: Final[str] = "clear"

    # Color value reverting to the terminal default.
    VALUE_DEFAULT: Final[str] = "default"

    ROOT_KEYS: Final[frozenset[str]] = frozenset({KEY_COLOR_MODE, SECTION_TAGS})
    TAG_KEYS: Final[frozenset[str]] = frozenset({KEY_FG, KEY_BG, KEY_SET, KEY_CLEAR})
