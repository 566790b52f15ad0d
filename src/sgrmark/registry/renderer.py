# topmark:header:start
#
#   project      : SgrMark
#   file         : renderer.py
#   file_relpath : src/sgrmark/registry/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderers: map markup tag names to style mutations.

A renderer receives the current `RenderState` and a tag name and applies the
style mutation registered under that name. Unknown names are silently ignored.

Two implementations are provided:

- `StaticRenderer`: an immutable snapshot, for throwaway or single-threaded use.
- `RegistryRenderer`: a mutable registry guarded by a readers-writer lock.
  ``render`` holds the shared lock only for the lookup; the mutation and the
  resulting sink write happen outside the lock.

Example:
    ```python
    from sgrmark.registry.builtins import default_registry
    from sgrmark.core.style import Attr

    registry = default_registry()
    registry.register("alert", lambda s: s.with_attr(Attr.BOLD).with_fg(0xFF0000))
    ```
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Iterator, Mapping, Protocol

from sgrmark.config.logging import get_logger
from sgrmark.registry.rwlock import ReadWriteLock

if TYPE_CHECKING:
    from sgrmark.config.logging import SgrmarkLogger
    from sgrmark.core.state import RenderState
    from sgrmark.core.style import Style

logger: SgrmarkLogger = get_logger(__name__)

#: A tag action: takes the current style and returns the updated one.
Mutation = Callable[["Style"], "Style"]


class Renderer(Protocol):
    """Anything able to render a tag into a `RenderState`."""

    def render(self, state: RenderState, tag: str) -> None:
        """Apply the action registered for ``tag``; no-op for unknown tags."""
        ...


def apply(state: RenderState, mutation: Mutation) -> None:
    """Apply ``mutation`` to the current style of ``state``."""
    state.set_style(mutation(state.style))


class StaticRenderer:
    """Renderer over a fixed, read-only tag mapping.

    Args:
        mapping (Mapping[str, Mutation]): Tag name -> mutation. The mapping is
            copied; later changes to the argument are not observed.
    """

    def __init__(self, mapping: Mapping[str, Mutation]) -> None:
        self._tags: Mapping[str, Mutation] = MappingProxyType(dict(mapping))

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __len__(self) -> int:
        return len(self._tags)

    @property
    def tags(self) -> Mapping[str, Mutation]:
        """Read-only view of the tag mapping."""
        return self._tags

    def names(self) -> tuple[str, ...]:
        """Return the registered tag names, sorted."""
        return tuple(sorted(self._tags))

    def get(self, tag: str) -> Mutation | None:
        return self._tags.get(tag)

    def render(self, state: RenderState, tag: str) -> None:
        mutation: Mutation | None = self._tags.get(tag)
        if mutation is not None:
            apply(state, mutation)


class RegistryRenderer:
    """Thread-safe, mutable tag registry.

    ``register`` and ``delete`` take the lock exclusively; ``render`` and the
    read helpers share it. Instances are independent: build one per
    application (or per test) and pass it explicitly.

    Args:
        initial (Mapping[str, Mutation] | None): Tags to preload.
    """

    def __init__(self, initial: Mapping[str, Mutation] | None = None) -> None:
        self._lock: ReadWriteLock = ReadWriteLock()
        self._tags: dict[str, Mutation] = dict(initial or {})

    def __contains__(self, tag: object) -> bool:
        with self._lock.read():
            return tag in self._tags

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._tags)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def names(self) -> tuple[str, ...]:
        """Return the registered tag names, sorted."""
        with self._lock.read():
            return tuple(sorted(self._tags))

    def get(self, tag: str) -> Mutation | None:
        """Return the mutation registered for ``tag``, if any."""
        with self._lock.read():
            return self._tags.get(tag)

    def register(self, tag: str, mutation: Mutation) -> None:
        """Register ``mutation`` under ``tag``, replacing any previous one.

        Args:
            tag (str): Tag name, as written between the braces.
            mutation (Mutation): Function from the current style to the new one.

        Raises:
            TypeError: If ``tag`` is not a string or ``mutation`` is not callable.
        """
        if not isinstance(tag, str):
            raise TypeError(f"Tag name must be a str, got {type(tag).__name__}")
        if not callable(mutation):
            raise TypeError(f"Mutation for tag {tag!r} is not callable")
        with self._lock.write():
            replaced: bool = tag in self._tags
            self._tags[tag] = mutation
        logger.debug("%s tag %r", "Replaced" if replaced else "Registered", tag)

    def delete(self, tag: str) -> bool:
        """Remove ``tag``; return True if it was registered."""
        with self._lock.write():
            existed: bool = self._tags.pop(tag, None) is not None
        if existed:
            logger.debug("Deleted tag %r", tag)
        return existed

    def snapshot(self) -> StaticRenderer:
        """Return an immutable copy of the current registry."""
        with self._lock.read():
            return StaticRenderer(self._tags)

    def render(self, state: RenderState, tag: str) -> None:
        with self._lock.read():
            mutation: Mutation | None = self._tags.get(tag)
        if mutation is not None:
            apply(state, mutation)
