# topmark:header:start
#
#   project      : SgrMark
#   file         : model.py
#   file_relpath : src/sgrmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for SgrMark.

`Config` is an immutable snapshot of the settings read from a TOML source:
the default color mode and any user-defined tags. User tags are described by
`TagSpec` and turned into style mutations with `TagSpec.to_mutation`.

Example ``sgrmark.toml``:

```toml
color_mode = "24bit"

[tags.warn]
fg = "#ffaa00"
set = ["bold"]

[tags."/warn"]
fg = "default"
clear = ["bold"]
```

The same content may live under ``[tool.sgrmark]`` in ``pyproject.toml``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from sgrmark.config.io import discover_config_file, extract_sgrmark_table, load_toml_dict
from sgrmark.config.keys import Toml
from sgrmark.config.logging import get_logger
from sgrmark.core.errors import ConfigError
from sgrmark.core.palette import parse_color
from sgrmark.core.sgr import ColorMode
from sgrmark.core.style import (
    Attr,
    clear_attribute,
    clear_background,
    clear_foreground,
    set_attribute,
    set_background,
    set_foreground,
)
from sgrmark.registry.builtins import BUILTIN_TAGS
from sgrmark.registry.renderer import RegistryRenderer

if TYPE_CHECKING:
    from pathlib import Path

    from sgrmark.config.io import TomlTable
    from sgrmark.config.logging import SgrmarkLogger
    from sgrmark.core.style import Style
    from sgrmark.registry.renderer import Mutation

logger: SgrmarkLogger = get_logger(__name__)

#: A configured color: an RGB value, `Toml.VALUE_DEFAULT`, or None (leave as is).
ColorSetting = Union[int, str, None]


def _parse_color_setting(tag: str, key: str, value: Any) -> ColorSetting:
    if not isinstance(value, str):
        raise ConfigError(f"tags.{tag}.{key} must be a string, got {type(value).__name__}")
    if value.strip().lower() == Toml.VALUE_DEFAULT:
        return Toml.VALUE_DEFAULT
    try:
        return parse_color(value)
    except ValueError as e:
        raise ConfigError(f"tags.{tag}.{key}: {e}") from e


def _parse_attr_list(tag: str, key: str, value: Any) -> Attr:
    if not isinstance(value, list):
        raise ConfigError(f"tags.{tag}.{key} must be a list of attribute names")
    attrs: Attr = Attr(0)
    for item in value:
        if not isinstance(item, str):
            raise ConfigError(f"tags.{tag}.{key} entries must be strings, got {item!r}")
        try:
            attrs |= Attr.from_name(item)
        except ValueError as e:
            raise ConfigError(f"tags.{tag}.{key}: {e}") from e
    return attrs


@dataclass(frozen=True, slots=True)
class TagSpec:
    """A user-defined tag.

    The mutation clears ``clear`` attributes first, then sets ``set``
    attributes, then applies the foreground and background settings.

    Attributes:
        name (str): Tag name as written between braces (may start with ``/``).
        fg (ColorSetting): Foreground RGB, ``"default"``, or None to leave it.
        bg (ColorSetting): Background RGB, ``"default"``, or None to leave it.
        set (Attr): Attributes to switch on.
        clear (Attr): Attributes to switch off.
    """

    name: str
    fg: ColorSetting = None
    bg: ColorSetting = None
    set: Attr = Attr(0)
    clear: Attr = Attr(0)

    @classmethod
    def from_toml_table(cls, name: str, table: Any) -> TagSpec:
        """Build a `TagSpec` from a ``[tags.<name>]`` table.

        Raises:
            ConfigError: If a value has the wrong type or cannot be parsed.
        """
        if not isinstance(table, dict):
            raise ConfigError(f"tags.{name} must be a table")
        for key in table:
            if key not in Toml.TAG_KEYS:
                logger.warning("Ignoring unknown key %r in [tags.%s]", key, name)
        return cls(
            name=name,
            fg=(
                _parse_color_setting(name, Toml.KEY_FG, table[Toml.KEY_FG])
                if Toml.KEY_FG in table
                else None
            ),
            bg=(
                _parse_color_setting(name, Toml.KEY_BG, table[Toml.KEY_BG])
                if Toml.KEY_BG in table
                else None
            ),
            set=_parse_attr_list(name, Toml.KEY_SET, table.get(Toml.KEY_SET, [])),
            clear=_parse_attr_list(name, Toml.KEY_CLEAR, table.get(Toml.KEY_CLEAR, [])),
        )

    def to_mutation(self) -> Mutation:
        """Return the style mutation described by this tag."""
        fg: ColorSetting = self.fg
        bg: ColorSetting = self.bg
        set_attrs: Attr = self.set
        clear_attrs: Attr = self.clear

        def mutate(style: Style) -> Style:
            if clear_attrs:
                style = clear_attribute(style, clear_attrs)
            if set_attrs:
                style = set_attribute(style, set_attrs)
            if fg == Toml.VALUE_DEFAULT:
                style = clear_foreground(style)
            elif isinstance(fg, int):
                style = set_foreground(style, fg)
            if bg == Toml.VALUE_DEFAULT:
                style = clear_background(style)
            elif isinstance(bg, int):
                style = set_background(style, bg)
            return style

        return mutate


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable SgrMark configuration.

    Attributes:
        color_mode (ColorMode): Default color depth for rendering.
        tags (tuple[TagSpec, ...]): User-defined tags, in file order.
        config_files (tuple[Path, ...]): Files this configuration was read from.
    """

    color_mode: ColorMode = ColorMode.BIT8
    tags: tuple[TagSpec, ...] = ()
    config_files: tuple[Path, ...] = field(default_factory=tuple)

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the built-in defaults (8-bit color, no user tags)."""
        return cls()

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> Config:
        """Build a `Config` from a parsed SgrMark table.

        Args:
            data (TomlTable): Root table (already extracted from ``[tool.sgrmark]``).
            config_file (Path | None): Source file, recorded in ``config_files``.

        Raises:
            ConfigError: On invalid values.
        """
        for key in data:
            if key not in Toml.ROOT_KEYS:
                logger.warning("Ignoring unknown config key %r", key)

        color_mode: ColorMode = ColorMode.BIT8
        if Toml.KEY_COLOR_MODE in data:
            raw: Any = data[Toml.KEY_COLOR_MODE]
            if not isinstance(raw, str):
                raise ConfigError(f"{Toml.KEY_COLOR_MODE} must be a string, got {raw!r}")
            try:
                color_mode = ColorMode.from_name(raw)
            except ValueError as e:
                raise ConfigError(f"{Toml.KEY_COLOR_MODE}: {e}") from e

        tags_table: Any = data.get(Toml.SECTION_TAGS, {})
        if not isinstance(tags_table, dict):
            raise ConfigError(f"[{Toml.SECTION_TAGS}] must be a table")
        tags: tuple[TagSpec, ...] = tuple(
            TagSpec.from_toml_table(name, table) for name, table in tags_table.items()
        )

        return cls(
            color_mode=color_mode,
            tags=tags,
            config_files=(config_file,) if config_file is not None else (),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> Config:
        """Load configuration from a single TOML file.

        Supports ``sgrmark.toml`` and ``pyproject.toml`` (``[tool.sgrmark]``).

        Raises:
            ConfigError: If the file cannot be read, is not valid TOML, lacks a
                ``[tool.sgrmark]`` table (pyproject only), or holds invalid values.
        """
        logger.debug("Loading config from %s", path)
        data: TomlTable = load_toml_dict(path)
        section: TomlTable | None = extract_sgrmark_table(data, path)
        if section is None:
            raise ConfigError(f"[tool.sgrmark] section missing in {path}")
        config: Config = cls.from_toml_dict(section, config_file=path)
        logger.trace("Loaded config: %r", config)
        return config

    @classmethod
    def load(cls, path: Path | None = None, *, start: Path | None = None) -> Config:
        """Load an explicit config file, or discover one, or fall back to defaults.

        Args:
            path (Path | None): Explicit config file.
            start (Path | None): Directory where discovery starts (default: cwd).
        """
        if path is not None:
            return cls.from_toml_file(path)
        found: Path | None = discover_config_file(start)
        if found is None:
            logger.debug("No config file found; using defaults")
            return cls.from_defaults()
        return cls.from_toml_file(found)

    def tag_mutations(self) -> dict[str, Mutation]:
        """Return the configured tags as a name -> mutation mapping."""
        return {spec.name: spec.to_mutation() for spec in self.tags}

    def build_registry(self) -> RegistryRenderer:
        """Return a new registry with the built-in tags plus the configured ones.

        Configured tags replace built-ins of the same name.
        """
        registry: RegistryRenderer = RegistryRenderer(BUILTIN_TAGS)
        for name, mutation in self.tag_mutations().items():
            registry.register(name, mutation)
        return registry
