"""Tag filtering over a pipe collection."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Pipe


class FilterState:
    """The single active tag filter; ``None`` means no filter."""

    def __init__(self, tag: str | None = None) -> None:
        self.tag = tag

    def set_filter(self, tag: str | None) -> None:
        self.tag = tag

    def apply(self, pipes: Iterable[Pipe]) -> list[Pipe]:
        return visible_pipes(pipes, self.tag)


def visible_pipes(pipes: Iterable[Pipe], tag: str | None) -> list[Pipe]:
    """Return pipes carrying ``tag`` (all pipes if ``tag`` is None), in input order."""
    if tag is None:
        return list(pipes)
    return [p for p in pipes if tag in p.tags]


def distinct_tags(pipes: Iterable[Pipe]) -> list[str]:
    """Sorted union of all pipe tags."""
    tags: set[str] = set()
    for p in pipes:
        tags.update(p.tags)
    return sorted(tags)
