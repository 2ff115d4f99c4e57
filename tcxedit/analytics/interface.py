#!/usr/bin/env python3
"""
Analytics data structures.

Derived, non-persistent views over a TCX document. Each structure maps to
plain JSON-compatible values through ``to_dict`` so that host applications
never handle the document model directly.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class FlatTrackpoint:
    """A trackpoint in the flattened, document-order view"""
    time: str
    timestamp_ms: int  # 0 when the time cannot be parsed
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude_meters: Optional[float] = None
    distance_meters: Optional[float] = None
    heart_rate: Optional[int] = None
    cadence: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ActivityStats:
    """Activity-level aggregates"""
    sport: str
    activity_id: str
    total_time_seconds: float
    total_distance_meters: float
    total_calories: int
    trackpoint_count: int
    avg_heart_rate: Optional[float] = None
    max_heart_rate: Optional[int] = None
    min_heart_rate: Optional[int] = None
    elevation_gain: Optional[float] = None
    elevation_loss: Optional[float] = None
    max_altitude: Optional[float] = None
    min_altitude: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary format"""
        return asdict(self)


@dataclass
class TrimPreview:
    """What a candidate trim range would keep, measured on the flattened view"""
    start: int
    end: int
    kept_points: int
    removed_points: int
    start_offset_seconds: float
    end_offset_seconds: float
    duration_seconds: float
    distance_meters: float

    @property
    def is_trimmed(self) -> bool:
        """Whether the range drops any point"""
        return self.removed_points > 0

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result['is_trimmed'] = self.is_trimmed
        return result
