"""Great-circle distance and distance formatting on a spherical Earth."""

import math

from .models import Coordinate, Pipe

EARTH_RADIUS_M = 6_371_000.0


def distance(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance in metres between two coordinates.

    No range validation is done: any finite input yields a finite,
    non-negative, symmetric result.
    """
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    # convert before subtracting so huge opposite-signed inputs stay finite
    d_phi = phi2 - phi1
    d_lambda = math.radians(b.lng) - math.radians(a.lng)

    h = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding (or out-of-range latitudes) can push h just outside [0, 1]
    h = min(1.0, max(0.0, h))

    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def pipe_length(pipe: Pipe) -> float:
    """Length of a pipe from its start point to its end point."""
    return distance(pipe.start_point, pipe.end_point)


def format_distance(meters: float) -> str:
    """Render metres as ``"345 m"`` below one kilometre, else ``"1.23 km"``."""
    if meters >= 1000:
        return f"{meters / 1000:.2f} km"
    return f"{math.floor(meters + 0.5)} m"
