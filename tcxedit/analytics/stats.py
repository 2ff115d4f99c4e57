#!/usr/bin/env python3
"""
Activity Statistics Calculator

Aggregates for a TCX document:
- Sport and identifier of the first activity
- Total duration, distance and calories summed over every lap of every activity
- Heart-rate average/max/min over trackpoints that carry a heart rate
- Elevation gain/loss from consecutive altitude samples, plus altitude extremes

Floating-point totals are accumulated left to right in document order so that
identical documents always produce bit-identical results.
"""

from typing import List, Optional, Tuple

from ..storage.model import TrainingCenterDatabase
from ..processors.interface import TrimIndexError
from .flatten import flatten
from .interface import ActivityStats, FlatTrackpoint, TrimPreview
from ..utils import get_logger


logger = get_logger(__name__)


def _elevation_changes(altitudes: List[float]) -> Tuple[Optional[float], Optional[float]]:
    """Total ascent and descent between consecutive samples; None without at least two samples"""
    if len(altitudes) < 2:
        return None, None

    gain = 0.0
    loss = 0.0
    for previous, current in zip(altitudes, altitudes[1:]):
        diff = current - previous
        if diff > 0:
            gain += diff
        else:
            loss += abs(diff)
    return gain, loss


def compute(database: TrainingCenterDatabase,
            trackpoints: Optional[List[FlatTrackpoint]] = None) -> ActivityStats:
    """
    Compute activity statistics

    Args:
        database: Document to summarize
        trackpoints: Flattened view of ``database`` if the caller already has it

    Returns:
        ActivityStats; aggregates with no input samples are None
    """
    activities = database.activities.activity
    first = activities[0] if activities else None

    total_time_seconds = 0.0
    total_distance_meters = 0.0
    total_calories = 0
    for _, lap in database.iter_laps():
        total_time_seconds += lap.total_time_seconds
        total_distance_meters += lap.distance_meters
        total_calories += lap.calories

    if trackpoints is None:
        trackpoints = flatten(database)

    heart_rates = [tp.heart_rate for tp in trackpoints if tp.heart_rate is not None]
    avg_heart_rate = None
    if heart_rates:
        avg_heart_rate = sum(heart_rates) / len(heart_rates)

    altitudes = [tp.altitude_meters for tp in trackpoints if tp.altitude_meters is not None]
    elevation_gain, elevation_loss = _elevation_changes(altitudes)
    logger.debug(f"Computed stats over {len(trackpoints)} trackpoints")

    return ActivityStats(
        sport=first.sport if first is not None else "",
        activity_id=first.id if first is not None else "",
        total_time_seconds=total_time_seconds,
        total_distance_meters=total_distance_meters,
        total_calories=total_calories,
        trackpoint_count=len(trackpoints),
        avg_heart_rate=avg_heart_rate,
        max_heart_rate=max(heart_rates) if heart_rates else None,
        min_heart_rate=min(heart_rates) if heart_rates else None,
        elevation_gain=elevation_gain,
        elevation_loss=elevation_loss,
        max_altitude=max(altitudes) if altitudes else None,
        min_altitude=min(altitudes) if altitudes else None,
    )


def preview_trim(trackpoints: List[FlatTrackpoint], start: int, end: int) -> TrimPreview:
    """
    Describe what keeping ``trackpoints[start:end + 1]`` would leave

    Offsets are measured from the first trackpoint; an absent per-point
    distance counts as zero.

    Raises:
        TrimIndexError: If the range is inverted or outside the sequence
    """
    total = len(trackpoints)
    if start < 0 or end < 0 or start >= total or end >= total or start > end:
        raise TrimIndexError(start, end, total)

    first = trackpoints[0]
    start_point = trackpoints[start]
    end_point = trackpoints[end]
    kept = end - start + 1

    return TrimPreview(
        start=start,
        end=end,
        kept_points=kept,
        removed_points=total - kept,
        start_offset_seconds=(start_point.timestamp_ms - first.timestamp_ms) / 1000,
        end_offset_seconds=(end_point.timestamp_ms - first.timestamp_ms) / 1000,
        duration_seconds=(end_point.timestamp_ms - start_point.timestamp_ms) / 1000,
        distance_meters=(end_point.distance_meters or 0.0) - (start_point.distance_meters or 0.0),
    )
