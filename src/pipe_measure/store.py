"""In-memory pipe store shared by the API handlers."""

from __future__ import annotations

import threading
from collections.abc import Iterable

import structlog

from .models import Pipe, PipeCreate

logger = structlog.get_logger(__name__)


class PipeStore:
    """Thread-safe list of pipes with ids assigned from 1 upward."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pipes: dict[int, Pipe] = {}
        self._next_id = 1

    def list_pipes(self, tag: str | None = None, limit: int | None = None) -> list[Pipe]:
        """Pipes in insertion order, optionally filtered by tag and capped by ``limit``.

        A missing or non-positive limit returns everything.
        """
        with self._lock:
            pipes = list(self._pipes.values())
        if tag is not None:
            pipes = [p for p in pipes if tag in p.tags]
        if limit is not None and limit > 0:
            pipes = pipes[:limit]
        return pipes

    def create_pipe(self, dto: PipeCreate) -> Pipe:
        with self._lock:
            pipe = self._insert(dto)
        logger.debug("pipe_created", pipe_id=pipe.id, name=pipe.name)
        return pipe

    def create_many(self, dtos: Iterable[PipeCreate]) -> list[Pipe]:
        with self._lock:
            created = [self._insert(dto) for dto in dtos]
        logger.info("pipes_created", count=len(created))
        return created

    def get_many(self, ids: Iterable[int]) -> tuple[list[Pipe], list[int]]:
        """Return (found pipes in request order, ids that do not exist)."""
        found: list[Pipe] = []
        missing: list[int] = []
        with self._lock:
            for pid in ids:
                pipe = self._pipes.get(pid)
                if pipe is None:
                    missing.append(pid)
                else:
                    found.append(pipe)
        return found, missing

    def count(self) -> int:
        with self._lock:
            return len(self._pipes)

    def clear(self) -> None:
        with self._lock:
            removed = len(self._pipes)
            self._pipes.clear()
        logger.info("pipes_cleared", count=removed)

    def _insert(self, dto: PipeCreate) -> Pipe:
        pipe = Pipe(
            id=self._next_id,
            name=dto.name,
            start_point=dto.start_point,
            end_point=dto.end_point,
            color=dto.color,
            tags=list(dto.tags),
        )
        self._pipes[pipe.id] = pipe
        self._next_id += 1
        return pipe
