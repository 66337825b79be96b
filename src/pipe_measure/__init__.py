"""Pipe selection, filtering and route measurement library."""

from .filters import FilterState, distinct_tags, visible_pipes
from .generator import generate_connected_pipes
from .geodesy import distance, format_distance, pipe_length
from .kml_reader import read_pipes_kml
from .measurement import connected_route, individual_lengths, measure, total_length
from .models import (
    ConnectedRoute,
    Coordinate,
    MeasurementReport,
    Pipe,
    PipeCreate,
    PipeMeasurement,
    RouteStep,
)
from .selection import SelectionState
from .session import PipeSession
from .store import PipeStore

__all__ = [
    "ConnectedRoute",
    "Coordinate",
    "FilterState",
    "MeasurementReport",
    "Pipe",
    "PipeCreate",
    "PipeMeasurement",
    "PipeSession",
    "PipeStore",
    "RouteStep",
    "SelectionState",
    "connected_route",
    "distance",
    "distinct_tags",
    "format_distance",
    "generate_connected_pipes",
    "individual_lengths",
    "measure",
    "pipe_length",
    "read_pipes_kml",
    "total_length",
    "visible_pipes",
]
