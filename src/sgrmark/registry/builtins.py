# topmark:header:start
#
#   project      : SgrMark
#   file         : builtins.py
#   file_relpath : src/sgrmark/registry/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in tag vocabulary.

Tags (case-sensitive):

| tag | action |
|---|---|
| `b` / `/b` | set / clear bold |
| `u` / `/u` | set / clear underline |
| `d` / `/d` | set / clear dim |
| `bl` / `/bl` | set / clear blink |
| `r` / `/r` | set / clear reverse video |
| `black` ... `white` | set the foreground to a standard color |
| `/fg` | revert to the default foreground |
| `/bg` | revert to the default background |
"""

from __future__ import annotations

from functools import partial
from types import MappingProxyType
from typing import Final, Mapping

from sgrmark.core.palette import STANDARD_COLORS
from sgrmark.core.style import (
    Attr,
    clear_attribute,
    clear_background,
    clear_foreground,
    set_attribute,
    set_foreground,
)
from sgrmark.registry.renderer import Mutation, RegistryRenderer, StaticRenderer

ATTRIBUTE_TAGS: Final[Mapping[str, Attr]] = MappingProxyType(
    {
        "b": Attr.BOLD,
        "u": Attr.UNDERLINE,
        "d": Attr.DIM,
        "bl": Attr.BLINK,
        "r": Attr.REVERSE,
    }
)


def _build_builtin_tags() -> dict[str, Mutation]:
    tags: dict[str, Mutation] = {}
    for name, attr in ATTRIBUTE_TAGS.items():
        tags[name] = partial(set_attribute, attr=attr)
        tags[f"/{name}"] = partial(clear_attribute, attr=attr)
    for name, rgb in STANDARD_COLORS.items():
        tags[name] = partial(set_foreground, rgb=rgb)
    tags["/fg"] = clear_foreground
    tags["/bg"] = clear_background
    return tags


BUILTIN_TAGS: Final[Mapping[str, Mutation]] = MappingProxyType(_build_builtin_tags())

_BUILTIN_RENDERER: Final[StaticRenderer] = StaticRenderer(BUILTIN_TAGS)


def builtin_renderer() -> StaticRenderer:
    """Return the immutable renderer for the built-in tags."""
    return _BUILTIN_RENDERER


def default_registry() -> RegistryRenderer:
    """Return a new mutable registry preloaded with the built-in tags."""
    return RegistryRenderer(BUILTIN_TAGS)
