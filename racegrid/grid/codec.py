"""Grid document (de)serialization.

The quantity types know nothing about JSON; the functions here translate
between the pydantic document models in ``racegrid.schemas.grid`` and the
domain objects, in both directions.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import IO, Any, Dict, Optional, Union

from loguru import logger
from pydantic import ValidationError

from racegrid.core.errors import DistanceParseError, DurationParseError, GridDocumentError
from racegrid.grid.course import CourseGrid, Race
from racegrid.grid.segment import CourseSegment, Resolution, resolve_segment
from racegrid.pacing.distance import parse_distance
from racegrid.pacing.duration import Duration, parse_duration
from racegrid.pacing.units import PaceUnit, get_unit
from racegrid.schemas.grid import CourseGridDocument, RaceDocument, SegmentDocument

GridSource = Union[bytes, str, IO[bytes], IO[str]]


def serialize_duration(duration: Duration) -> str:
    return str(duration)


def deserialize_duration(value: Union[str, float, int, None]) -> Optional[Duration]:
    """
    Accepts a duration string ('45:00', '1h2m') or a raw nanosecond count.
    Blank strings and None mean "not given".
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise DurationParseError(f"invalid duration: {value}", value)
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise DurationParseError(f"invalid duration: {value}", value)
        return Duration(int(value))
    if value.strip() == "":
        return None
    return parse_duration(value)


def serialize_unit(unit: PaceUnit) -> str:
    return unit.label


def deserialize_unit(label: str) -> PaceUnit:
    return get_unit(label)


def segment_from_document(doc: SegmentDocument, race_unit: PaceUnit) -> CourseSegment:
    unit = deserialize_unit(doc.units) if doc.units else race_unit
    distance = doc.distance if doc.distance is not None else 0.0
    return resolve_segment(doc.pace, distance, deserialize_duration(doc.time), unit)


def race_from_document(doc: RaceDocument) -> Race:
    unit = deserialize_unit(doc.units)
    segments = tuple(segment_from_document(s, unit) for s in doc.segments)
    return Race(segments=segments, unit=unit)


def grid_from_document(doc: CourseGridDocument) -> CourseGrid:
    try:
        total_distance = parse_distance(doc.total_distance)
    except DistanceParseError as e:
        raise DistanceParseError(f"invalid distance for course grid: {e}", doc.total_distance) from e

    total_duration = deserialize_duration(doc.total_time)
    if total_duration is None:
        raise DurationParseError("invalid total time for course grid: empty", doc.total_time)

    return CourseGrid(
        total_distance_text=doc.total_distance,
        total_distance=total_distance,
        total_duration=total_duration,
        races=tuple(race_from_document(r) for r in doc.races),
    )


def load_grid(source: GridSource) -> CourseGrid:
    """Parse and validate a grid document from bytes, text or an open file."""
    data = source if isinstance(source, (bytes, str)) else source.read()
    try:
        doc = CourseGridDocument.model_validate_json(data)
    except ValidationError as e:
        raise GridDocumentError(f"invalid grid document: {e}") from e

    grid = grid_from_document(doc)
    logger.bind(races=len(grid.races)).debug("Loaded grid for {}", grid.total_distance_text)
    return grid


def load_grid_file(path: Union[str, Path]) -> CourseGrid:
    with open(path, "rb") as f:
        return load_grid(f)


def segment_to_document(segment: CourseSegment) -> SegmentDocument:
    """
    Segment -> SegmentDocument.

    Only the quantities the segment was given are set, so the document
    loads back into the same segment; a derived pace is written as "".
    A given pace is written at full precision ('6:30.5', '12.345').
    """
    doc = SegmentDocument(units=serialize_unit(segment.unit))
    if segment.resolution != Resolution.distance_duration:
        doc.pace = segment.unit.format_exact(segment.pace.rate)
    if segment.resolution != Resolution.pace_duration:
        doc.distance = segment.unit.distance_in_units(segment.distance)
    if segment.resolution != Resolution.pace_distance:
        doc.time = serialize_duration(segment.duration)
    return doc


def race_to_document(race: Race) -> RaceDocument:
    return RaceDocument(
        units=serialize_unit(race.unit),
        segments=[segment_to_document(s) for s in race.segments],
    )


def grid_to_document(grid: CourseGrid) -> CourseGridDocument:
    return CourseGridDocument(
        total_distance=grid.total_distance_text,
        total_time=serialize_duration(grid.total_duration),
        races=[race_to_document(r) for r in grid.races],
    )


def serialize_segment(segment: CourseSegment) -> Dict[str, Any]:
    return segment_to_document(segment).model_dump(exclude_none=True)


def serialize_grid(grid: CourseGrid) -> Dict[str, Any]:
    return grid_to_document(grid).model_dump(by_alias=True, exclude_none=True)


def dumps_grid(grid: CourseGrid, indent: int = 2) -> str:
    return grid_to_document(grid).model_dump_json(by_alias=True, exclude_none=True, indent=indent)
