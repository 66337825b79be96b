"""Shared builders for tests."""

from pipe_measure import Coordinate, Pipe


def make_pipe(pipe_id, start, end, tags=(), name=None, color="#2196F3"):
    """Build a pipe from (lat, lng) tuples."""
    return Pipe(
        id=pipe_id,
        name=name or f"Pipe {pipe_id}",
        start_point=Coordinate(lat=start[0], lng=start[1]),
        end_point=Coordinate(lat=end[0], lng=end[1]),
        color=color,
        tags=list(tags),
    )
