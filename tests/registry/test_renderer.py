# topmark:header:start
#
#   project      : SgrMark
#   file         : test_renderer.py
#   file_relpath : tests/registry/test_renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the static and registry renderers and the built-in tags."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import pytest

from sgrmark.core.sgr import ColorMode
from sgrmark.core.state import BufferState
from sgrmark.core.style import DEFAULT_STYLE, Attr, Style
from sgrmark.registry.builtins import (
    ATTRIBUTE_TAGS,
    BUILTIN_TAGS,
    builtin_renderer,
    default_registry,
)
from sgrmark.registry.renderer import RegistryRenderer, StaticRenderer

if TYPE_CHECKING:
    from sgrmark.registry.renderer import Mutation


def make_bold(style: Style) -> Style:
    return style.with_attr(Attr.BOLD)


def test_builtin_vocabulary() -> None:
    assert set(ATTRIBUTE_TAGS) == {"b", "u", "d", "bl", "r"}
    expected: set[str] = {
        *ATTRIBUTE_TAGS,
        *(f"/{t}" for t in ATTRIBUTE_TAGS),
        "black",
        "red",
        "green",
        "yellow",
        "blue",
        "magenta",
        "cyan",
        "white",
        "/fg",
        "/bg",
    }
    assert set(BUILTIN_TAGS) == expected


@pytest.mark.parametrize(
    ("tag", "attr"),
    [
        ("b", Attr.BOLD),
        ("u", Attr.UNDERLINE),
        ("d", Attr.DIM),
        ("bl", Attr.BLINK),
        ("r", Attr.REVERSE),
    ],
)
def test_attribute_tags_toggle(tag: str, attr: Attr) -> None:
    on: Style = BUILTIN_TAGS[tag](DEFAULT_STYLE)
    assert on.attributes == attr
    assert BUILTIN_TAGS[f"/{tag}"](on) == DEFAULT_STYLE


def test_color_tags_keep_background() -> None:
    style: Style = DEFAULT_STYLE.with_bg(0x112233)
    red: Style = BUILTIN_TAGS["red"](style)
    assert red.foreground == 0x800000
    assert red.background == 0x112233


def test_default_color_tags() -> None:
    style: Style = DEFAULT_STYLE.with_fg(0x010101).with_bg(0x020202)
    assert BUILTIN_TAGS["/fg"](style).has(Attr.DEFAULT_FG)
    assert BUILTIN_TAGS["/bg"](style).has(Attr.DEFAULT_BG)


def test_builtin_renderer_is_shared_and_immutable() -> None:
    renderer: StaticRenderer = builtin_renderer()
    assert renderer is builtin_renderer()
    assert not hasattr(renderer, "register")
    with pytest.raises(TypeError):
        renderer.tags["x"] = make_bold  # type: ignore[index]


def test_default_registry_is_fresh_each_time() -> None:
    first: RegistryRenderer = default_registry()
    first.register("x", make_bold)
    assert "x" not in default_registry()
    assert "x" not in builtin_renderer()


def test_static_renderer_copies_its_mapping() -> None:
    tags: dict[str, Mutation] = {"x": make_bold}
    renderer = StaticRenderer(tags)
    tags["y"] = make_bold
    assert renderer.names() == ("x",)
    assert len(renderer) == 1


def test_render_applies_and_unknown_is_noop(registry: RegistryRenderer) -> None:
    state = BufferState(ColorMode.OFF)
    registry.render(state, "nosuch")
    assert state.getvalue() == b""
    registry.render(state, "b")
    assert state.getvalue() == b"\x1b[1m"
    assert state.style.has(Attr.BOLD)


def test_register_get_delete(registry: RegistryRenderer) -> None:
    registry.register("alert", make_bold)
    assert "alert" in registry
    assert registry.get("alert") is make_bold
    assert registry.delete("alert") is True
    assert registry.delete("alert") is False
    assert registry.get("alert") is None


def test_register_replaces_builtin(registry: RegistryRenderer) -> None:
    registry.register("b", lambda s: s.with_attr(Attr.UNDERLINE))
    state = BufferState()
    registry.render(state, "b")
    assert state.text() == "\x1b[4m"


def test_register_rejects_non_callables(registry: RegistryRenderer) -> None:
    with pytest.raises(TypeError, match="not callable"):
        registry.register("x", "bold")  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="must be a str"):
        registry.register(1, make_bold)  # type: ignore[arg-type]


def test_names_are_sorted(registry: RegistryRenderer) -> None:
    registry.register("0zero", make_bold)
    names: tuple[str, ...] = registry.names()
    assert names == tuple(sorted(names))
    assert list(registry) == list(names)
    assert len(registry) == len(BUILTIN_TAGS) + 1


def test_snapshot_is_independent(registry: RegistryRenderer) -> None:
    snap: StaticRenderer = registry.snapshot()
    registry.register("later", make_bold)
    registry.delete("b")
    assert "later" not in snap
    assert "b" in snap


def test_concurrent_render_and_register(registry: RegistryRenderer) -> None:
    errors: list[BaseException] = []
    start = threading.Barrier(5)

    def renderer_worker() -> None:
        try:
            start.wait(timeout=5)
            for _ in range(300):
                state = BufferState(ColorMode.OFF)
                registry.render(state, "b")
                registry.render(state, "flip")
                assert state.style.has(Attr.BOLD)
        except BaseException as exc:  # noqa: BLE001
            errors.append(exc)

    def writer_worker() -> None:
        try:
            start.wait(timeout=5)
            for i in range(300):
                if i % 2:
                    registry.register("flip", make_bold)
                else:
                    registry.delete("flip")
        except BaseException as exc:  # noqa: BLE001
            errors.append(exc)

    threads: list[threading.Thread] = [threading.Thread(target=renderer_worker) for _ in range(4)]
    threads.append(threading.Thread(target=writer_worker))
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert not any(t.is_alive() for t in threads)
    assert errors == []
    assert "flip" in registry
