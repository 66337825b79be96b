"""Pydantic data models for pipes and their measurements."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PIPE_COLOR = "#607D8B"


class Coordinate(BaseModel):
    """A latitude/longitude pair in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class Pipe(BaseModel):
    """A stored pipe segment between two coordinates."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    start_point: Coordinate = Field(alias="startPoint")
    end_point: Coordinate = Field(alias="endPoint")
    color: str = DEFAULT_PIPE_COLOR
    tags: list[str] = Field(default_factory=list)


class PipeCreate(BaseModel):
    """Payload for creating a pipe."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    start_point: Coordinate = Field(alias="startPoint")
    end_point: Coordinate = Field(alias="endPoint")
    color: str = DEFAULT_PIPE_COLOR
    tags: list[str] = Field(default_factory=list)


class PipeMeasurement(BaseModel):
    """Length of a single selected pipe."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    length_m: float = Field(alias="length")


class RouteStep(BaseModel):
    """One pipe visited by a connected route."""

    model_config = ConfigDict(populate_by_name=True)

    pipe_id: int = Field(alias="pipeId")
    reversed: bool = False
    gap_m: float = Field(0.0, alias="gapM")


class ConnectedRoute(BaseModel):
    """Route estimate through all selected pipes."""

    model_config = ConfigDict(populate_by_name=True)

    pipe_length: float = Field(alias="pipeLength")
    gap_length: float = Field(alias="gapLength")
    total_route: float = Field(alias="totalRoute")
    steps: list[RouteStep] = Field(default_factory=list)


class MeasurementReport(BaseModel):
    """Everything the measurement panel shows for a selection."""

    model_config = ConfigDict(populate_by_name=True)

    measurements: list[PipeMeasurement]
    total_length: float = Field(alias="totalLength")
    route: ConnectedRoute
    total_length_display: str = Field(alias="totalLengthDisplay")
    route_display: str = Field(alias="routeDisplay")
    gap_display: str = Field(alias="gapDisplay")


class MeasureRequest(BaseModel):
    """Body of a measurement request."""

    model_config = ConfigDict(populate_by_name=True)

    pipe_ids: list[int] = Field(alias="pipeIds")
