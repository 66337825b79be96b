"""Synthetic pipe chains for seeding and load-testing the store."""

from __future__ import annotations

import random

import structlog

from .models import Coordinate, PipeCreate

logger = structlog.get_logger(__name__)

# (color, pipe type, tags); a chain keeps one entry throughout
PIPE_TYPES: list[tuple[str, str, list[str]]] = [
    ("#2196F3", "Water Line", ["water", "main"]),
    ("#FF9800", "Gas Pipeline", ["gas", "primary"]),
    ("#795548", "Sewage Line", ["sewage"]),
    ("#F44336", "Electric Conduit", ["electric", "primary"]),
    ("#9C27B0", "Fiber Optic Run", ["fiber", "main"]),
    ("#4CAF50", "Data Cable", ["data", "network"]),
    ("#00BCD4", "Cooling Pipe", ["cooling", "hvac"]),
    ("#FFC107", "Steam Line", ["steam", "heating"]),
]

TEL_AVIV_CENTER = (32.0853, 34.7818)
TEL_AVIV_BOUNDS = {"min_lat": 32.0, "max_lat": 32.15, "min_lng": 34.76, "max_lng": 34.85}

MAX_STEP_DEG = 0.01  # end point lies within +/- half of this from the start (~1 km)
JUMP_SPREAD_DEG = 0.1
JUMP_PROBABILITY = 0.2


def clamp_to_bounds(lat: float, lng: float) -> tuple[float, float]:
    b = TEL_AVIV_BOUNDS
    return (
        max(b["min_lat"], min(b["max_lat"], lat)),
        max(b["min_lng"], min(b["max_lng"], lng)),
    )


def generate_connected_pipes(count: int, seed: int | None = None) -> list[PipeCreate]:
    """Generate ``count`` pipes laid out as connected chains of 10 to 29 pipes.

    Each pipe starts where the previous one ended. When a chain is complete
    the next one either continues from the same point or, with probability
    ``JUMP_PROBABILITY``, jumps to a random point inside the Tel Aviv bounds.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    rng = random.Random(seed)
    lat, lng = TEL_AVIV_CENTER
    max_chain = rng.randint(10, 29)
    chain_length = 0
    color, pipe_type, tags = PIPE_TYPES[0]
    pipes: list[PipeCreate] = []

    for i in range(count):
        if chain_length == 0:
            color, pipe_type, tags = rng.choice(PIPE_TYPES)

        end_lat = lat + (rng.random() - 0.5) * MAX_STEP_DEG
        end_lng = lng + (rng.random() - 0.5) * MAX_STEP_DEG

        pipes.append(
            PipeCreate(
                name=f"{pipe_type} {i + 1}",
                start_point=Coordinate(lat=lat, lng=lng),
                end_point=Coordinate(lat=end_lat, lng=end_lng),
                color=color,
                tags=list(tags),
            )
        )

        lat, lng = end_lat, end_lng
        chain_length += 1

        if chain_length >= max_chain:
            chain_length = 0
            if rng.random() < JUMP_PROBABILITY:
                lat, lng = clamp_to_bounds(
                    TEL_AVIV_CENTER[0] + (rng.random() - 0.5) * JUMP_SPREAD_DEG,
                    TEL_AVIV_CENTER[1] + (rng.random() - 0.5) * JUMP_SPREAD_DEG,
                )

    logger.info("pipes_generated", count=count, seed=seed)
    return pipes
