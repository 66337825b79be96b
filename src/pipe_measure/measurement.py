"""Length and route measurements over a selection of pipes.

The connected route is a greedy nearest-neighbour approximation of the open
path travelling-salesman problem over two-ended segments. It is not an exact
optimum: it starts at the first selected pipe (entered at its start point)
and from the current exit point always moves to the closest endpoint of any
unvisited pipe. Ties go to the earlier selected pipe, and between the two
endpoints of one pipe to its start point, so the result is deterministic for
a given selection order.
"""

from __future__ import annotations

from collections.abc import Sequence

from .geodesy import distance, format_distance, pipe_length
from .models import ConnectedRoute, MeasurementReport, Pipe, PipeMeasurement, RouteStep


def individual_lengths(selected: Sequence[Pipe]) -> list[PipeMeasurement]:
    """Length of each selected pipe, in selection order."""
    return [PipeMeasurement(id=p.id, name=p.name, length_m=pipe_length(p)) for p in selected]


def total_length(selected: Sequence[Pipe]) -> float:
    """Sum of the individual pipe lengths; 0 for an empty selection."""
    return sum((m.length_m for m in individual_lengths(selected)), 0.0)


def connected_route(selected: Sequence[Pipe]) -> ConnectedRoute:
    """Estimate the distance to travel every selected pipe once, gaps included."""
    pipe_total = total_length(selected)
    if not selected:
        return ConnectedRoute(pipe_length=0.0, gap_length=0.0, total_route=0.0)

    first = selected[0]
    steps = [RouteStep(pipe_id=first.id, reversed=False, gap_m=0.0)]
    exit_point = first.end_point
    remaining = list(selected[1:])
    gap_total = 0.0

    while remaining:
        best_idx = 0
        best_gap = float("inf")
        best_reversed = False
        for idx, p in enumerate(remaining):
            to_start = distance(exit_point, p.start_point)
            to_end = distance(exit_point, p.end_point)
            gap, rev = (to_start, False) if to_start <= to_end else (to_end, True)
            # strict comparison keeps the earliest pipe on ties
            if gap < best_gap:
                best_idx, best_gap, best_reversed = idx, gap, rev

        nxt = remaining.pop(best_idx)
        gap_total += best_gap
        steps.append(RouteStep(pipe_id=nxt.id, reversed=best_reversed, gap_m=best_gap))
        exit_point = nxt.start_point if best_reversed else nxt.end_point

    return ConnectedRoute(
        pipe_length=pipe_total,
        gap_length=gap_total,
        total_route=pipe_total + gap_total,
        steps=steps,
    )


def measure(selected: Sequence[Pipe]) -> MeasurementReport:
    """Individual lengths, total length and route estimate with display strings."""
    measurements = individual_lengths(selected)
    total = sum((m.length_m for m in measurements), 0.0)
    route = connected_route(selected)
    return MeasurementReport(
        measurements=measurements,
        total_length=total,
        route=route,
        total_length_display=format_distance(total),
        route_display=format_distance(route.total_route),
        gap_display=format_distance(route.gap_length),
    )
