#!/usr/bin/env python3
"""
Pydantic Data Models for TCX Documents

Mirrors the Training Center XML tree: database -> activities -> laps ->
track -> trackpoints. Optional wire fields are Optional[...] so that an absent
value is never confused with zero, and models compare structurally, which is
what round-trip checks rely on.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class TcxModel(BaseModel):
    """Base for document nodes; assignments are validated because trimming mutates in place"""

    model_config = ConfigDict(validate_assignment=True)


class Position(TcxModel):
    """GPS position of a trackpoint"""

    latitude_degrees: float = Field(..., description="Latitude in degrees")
    longitude_degrees: float = Field(..., description="Longitude in degrees")


class Trackpoint(TcxModel):
    """One timestamped sample"""

    time: str = Field(..., description="ISO-8601 timestamp with UTC offset")
    position: Optional[Position] = None
    altitude_meters: Optional[float] = Field(None, description="Altitude in meters")
    distance_meters: Optional[float] = Field(
        None, description="Cumulative distance from lap start in meters"
    )
    heart_rate_bpm: Optional[int] = Field(None, ge=0, description="Heart rate in bpm")
    cadence: Optional[int] = Field(None, ge=0, description="Cadence")
    extensions: Optional[str] = Field(
        None, description="Inner markup of the Extensions element, kept verbatim"
    )


class Track(TcxModel):
    """Ordered raw samples of a lap"""

    trackpoints: List[Trackpoint] = Field(default_factory=list)


class Lap(TcxModel):
    """Lap summary plus its optional track"""

    start_time: str = Field(..., description="ISO-8601 lap start with UTC offset")
    total_time_seconds: float = Field(..., description="Lap duration in seconds")
    distance_meters: float = Field(..., description="Lap distance in meters")
    calories: int = Field(..., ge=0, description="Calories burned")
    intensity: str
    trigger_method: str
    track: Optional[Track] = None


class Activity(TcxModel):
    """One recorded exercise session"""

    sport: str = Field(..., description="Sport label, e.g. Running")
    id: str = Field(..., description="Activity identifier, conventionally its start time")
    laps: List[Lap] = Field(default_factory=list)


class Activities(TcxModel):
    """Activities in file order"""

    activity: List[Activity] = Field(default_factory=list)


class TrainingCenterDatabase(TcxModel):
    """Document root"""

    xmlns: Optional[str] = Field(None, description="Default namespace of the root element")
    activities: Activities = Field(default_factory=Activities)

    def iter_laps(self):
        """Yield (activity, lap) pairs in document order"""
        for activity in self.activities.activity:
            for lap in activity.laps:
                yield activity, lap

    def iter_tracks(self):
        """Yield every track in document order, skipping laps without one"""
        for _, lap in self.iter_laps():
            if lap.track is not None:
                yield lap.track
