#!/usr/bin/env python3
"""
Range Editor - trims every track of a document to an inclusive index range
and brings lap and activity summaries back in line with the remaining points
"""
from ..storage.model import TrainingCenterDatabase, Lap
from ..utils.timestamps import parse_timestamp, elapsed_seconds
from .interface import TrimIndexError
from ..utils import get_logger


logger = get_logger(__name__)


def validate_range(database: TrainingCenterDatabase, start: int, end: int) -> None:
    """
    Check ``[start, end]`` against the length of every track

    Raises:
        TrimIndexError: For the first track (in document order) the range does not fit
    """
    for track in database.iter_tracks():
        total = len(track.trackpoints)
        if start < 0 or end < 0 or start >= total or end >= total or start > end:
            raise TrimIndexError(start, end, total)


def recalculate_lap(lap: Lap) -> None:
    """Refresh start time, duration and distance of a lap from its track"""
    trackpoints = lap.track.trackpoints
    if not trackpoints:
        lap.total_time_seconds = 0.0
        lap.distance_meters = 0.0
        return

    first = trackpoints[0]
    last = trackpoints[-1]
    lap.start_time = first.time

    start = parse_timestamp(first.time)
    end = parse_timestamp(last.time)
    if start is not None and end is not None:
        lap.total_time_seconds = elapsed_seconds(start, end)
    else:
        logger.debug(f"Keeping previous duration for lap {lap.start_time}: unparseable trackpoint time")

    # Inconsistent per-point distances may leave this negative
    lap.distance_meters = (last.distance_meters or 0.0) - (first.distance_meters or 0.0)

    # Calories are left as recorded


def recalculate_lap_stats(database: TrainingCenterDatabase) -> None:
    """Recompute every lap that has a track, then re-key each activity on its first lap's start"""
    for activity in database.activities.activity:
        for lap in activity.laps:
            if lap.track is not None:
                recalculate_lap(lap)

        if activity.laps:
            activity.id = activity.laps[0].start_time


def trim_by_indices(database: TrainingCenterDatabase, start: int, end: int) -> TrainingCenterDatabase:
    """
    Keep trackpoints ``start`` through ``end`` (inclusive) in every track

    The range is checked against all tracks before anything changes, so a
    failure leaves the document exactly as it was.

    Args:
        database: Document to edit in place
        start: First index to keep
        end: Last index to keep

    Returns:
        The same, now trimmed, document

    Raises:
        TrimIndexError: If the range is inverted or out of bounds for any track
    """
    try:
        validate_range(database, start, end)
    except TrimIndexError as e:
        logger.warning(f"Rejected trim: {e}")
        raise

    for track in database.iter_tracks():
        track.trackpoints = track.trackpoints[start:end + 1]

    recalculate_lap_stats(database)
    logger.info(f"Trimmed document to trackpoints {start}..{end}")
    return database
