"""FastAPI server for storing and measuring pipes."""

from __future__ import annotations

import csv
import io
from contextlib import asynccontextmanager

import structlog
from fastapi import Depends, FastAPI, HTTPException, Query, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse

from .config import settings
from .filters import distinct_tags
from .generator import generate_connected_pipes
from .kml_reader import read_pipes_kml
from .logging_config import configure_logging
from .measurement import measure
from .models import MeasureRequest, MeasurementReport, Pipe, PipeCreate, PipeMeasurement
from .store import PipeStore

logger = structlog.get_logger(__name__)

store = PipeStore()


def get_store() -> PipeStore:
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level, settings.json_logs)
    if settings.seed_pipes > 0 and store.count() == 0:
        store.create_many(generate_connected_pipes(settings.seed_pipes, seed=settings.seed))
    logger.info("server_started", pipes=store.count())
    yield


app = FastAPI(title="Pipe Measure", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("invalid_request", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "detail": _jsonable_errors(exc)},
    )


def _jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg", "")} for e in exc.errors()]


@app.get("/pipes", response_model=list[Pipe])
def list_pipes(
    tag: str | None = Query(None),
    limit: int | None = Query(None),
    pipes: PipeStore = Depends(get_store),
):
    """List pipes, optionally only those carrying ``tag`` and at most ``limit`` of them."""
    return pipes.list_pipes(tag=tag, limit=limit)


@app.post("/pipes", response_model=Pipe, status_code=201)
def create_pipe(dto: PipeCreate, pipes: PipeStore = Depends(get_store)):
    return pipes.create_pipe(dto)


@app.get("/tags", response_model=list[str])
def list_tags(pipes: PipeStore = Depends(get_store)):
    return distinct_tags(pipes.list_pipes())


@app.post("/measure", response_model=MeasurementReport)
def measure_pipes(
    body: MeasureRequest,
    format: str = Query("json", pattern="^(csv|json)$"),
    pipes: PipeStore = Depends(get_store),
):
    """Measure the given pipes in the given order.

    Returns the full report as JSON, or the individual lengths as CSV.
    """
    # a selection is a set: repeated ids are measured once, first occurrence wins
    pipe_ids = list(dict.fromkeys(body.pipe_ids))
    selected, missing = pipes.get_many(pipe_ids)
    if missing:
        raise HTTPException(status_code=404, detail=f"Unknown pipe ids: {missing}")

    report = measure(selected)
    logger.info(
        "pipes_measured",
        selected=len(selected),
        total_m=round(report.total_length, 1),
        gap_m=round(report.route.gap_length, 1),
    )

    if format == "csv":
        return _measurements_to_csv_response(report.measurements)
    return report


@app.post("/pipes/import", response_model=list[Pipe], status_code=201)
async def import_pipes(
    file: UploadFile,
    tags: list[str] | None = Query(None),
    color: str | None = Query(None),
    pipes: PipeStore = Depends(get_store),
):
    """Import every LineString edge of an uploaded KML/KMZ file as a pipe."""
    filename = (file.filename or "").lower()
    if not filename.endswith((".kmz", ".kml")):
        raise HTTPException(status_code=400, detail="Expected a .kml or .kmz file")

    content = await file.read()
    try:
        dtos = read_pipes_kml(content, tags=tags, color=color or settings.default_color)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if not dtos:
        raise HTTPException(status_code=400, detail="No LineString geometry found")
    return pipes.create_many(dtos)


def _measurements_to_csv_response(measurements: list[PipeMeasurement]) -> StreamingResponse:
    """Convert measurements to a streaming CSV response."""
    rows = [("id", "name", "length_m")]
    rows.extend((m.id, m.name, m.length_m) for m in measurements)

    def generate():
        buf = io.StringIO()
        writer = csv.writer(buf)
        for row in rows:
            writer.writerow(row)
            yield buf.getvalue()
            buf.seek(0)
            buf.truncate(0)

    return StreamingResponse(
        generate(),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=pipe_measurements.csv"},
    )
