"""KMZ/KML reader that turns LineString placemarks into pipes.

KMZ is a ZIP archive containing KML. KML coordinates are always WGS84
in ``longitude,latitude[,altitude]`` format. A LineString of N vertices
becomes N-1 pipes, each one running between consecutive vertices.
"""

from __future__ import annotations

import io
import zipfile
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO

import structlog

from .models import DEFAULT_PIPE_COLOR, Coordinate, PipeCreate

logger = structlog.get_logger(__name__)

KML_NS = "{http://www.opengis.net/kml/2.2}"


def read_pipes_kml(
    file: str | bytes | BinaryIO,
    *,
    tags: list[str] | None = None,
    color: str = DEFAULT_PIPE_COLOR,
) -> list[PipeCreate]:
    """Read a KMZ (or plain KML) file and return one pipe per LineString edge.

    Args:
        file: Path to a .kmz/.kml file, raw bytes, or a file-like object.
        tags: Tags given to every imported pipe.
        color: Display color given to every imported pipe.
    """
    data = _read_bytes(file)

    # KMZ is a ZIP; plain KML is XML text
    if zipfile.is_zipfile(io.BytesIO(data)):
        kml_text = _extract_kml_from_kmz(data)
    else:
        kml_text = data.decode("utf-8", errors="replace")

    try:
        root = ET.fromstring(kml_text)
    except ET.ParseError as exc:
        raise ValueError(f"Invalid KML document: {exc}") from exc

    pipes: list[PipeCreate] = []
    for line_idx, (name, coords) in enumerate(_extract_linestrings(root), start=1):
        label = name or f"Line {line_idx}"
        for i in range(1, len(coords)):
            pipes.append(
                PipeCreate(
                    name=f"{label} {i}",
                    start_point=coords[i - 1],
                    end_point=coords[i],
                    color=color,
                    tags=list(tags or []),
                )
            )

    logger.info("kml_read", pipes=len(pipes))
    return pipes


def _read_bytes(file: str | bytes | BinaryIO) -> bytes:
    if isinstance(file, bytes):
        return file
    if isinstance(file, str):
        return Path(file).read_bytes()
    return file.read()


def _extract_kml_from_kmz(data: bytes) -> str:
    """Extract the first .kml file from a KMZ (ZIP) archive."""
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        names = zf.namelist()
        # Prefer doc.kml, fall back to any .kml
        kml_name = next((n for n in names if n.lower() == "doc.kml"), None)
        if kml_name is None:
            kml_name = next((n for n in names if n.lower().endswith(".kml")), None)
        if kml_name is None:
            raise ValueError("No .kml file found in KMZ archive")
        return zf.read(kml_name).decode("utf-8", errors="replace")


def _extract_linestrings(root: ET.Element) -> list[tuple[str | None, list[Coordinate]]]:
    """Collect (placemark name, vertices) for every LineString in the tree."""
    lines: list[tuple[str | None, list[Coordinate]]] = []

    for placemark in root.iter(f"{KML_NS}Placemark"):
        name_elem = placemark.find(f"{KML_NS}name")
        name = name_elem.text.strip() if name_elem is not None and name_elem.text else None

        for line in placemark.iter(f"{KML_NS}LineString"):
            coords_elem = line.find(f"{KML_NS}coordinates")
            if coords_elem is not None and coords_elem.text:
                lines.append((name, _parse_coordinates_text(coords_elem.text)))

    return lines


def _parse_coordinates_text(text: str) -> list[Coordinate]:
    """Parse a KML ``<coordinates>`` text block.

    Format: ``lon,lat[,alt] lon,lat[,alt] ...`` (whitespace-separated tuples).
    Altitude is dropped.
    """
    coords: list[Coordinate] = []
    for token in text.strip().split():
        parts = token.split(",")
        if len(parts) < 2:
            continue
        coords.append(Coordinate(lat=float(parts[1]), lng=float(parts[0])))
    return coords
