from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SegmentDocument(BaseModel):
    """One segment as written in the grid file."""

    pace: str = ""                                   # "6:30", "12.5" or "" when derived
    distance: Optional[float] = None                 # in the unit's reference distance (km or mi)
    time: Optional[Union[str, float]] = None         # "45:00", "1h2m" or raw nanoseconds
    units: Optional[str] = None                      # defaults to the race's units

    model_config = ConfigDict(extra="ignore")


class RaceDocument(BaseModel):
    units: str
    segments: List[SegmentDocument] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class CourseGridDocument(BaseModel):
    total_distance: str = Field(alias="totalDistance")            # e.g. "26.2mi"
    total_time: Union[str, float] = Field(alias="totalTime")      # e.g. "4:00:00"
    races: List[RaceDocument] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
