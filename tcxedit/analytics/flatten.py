#!/usr/bin/env python3
"""
Flattener - document-order trackpoint view across activities, laps and tracks
"""
from typing import List

from ..storage.model import TrainingCenterDatabase, Trackpoint
from ..utils.timestamps import timestamp_ms
from .interface import FlatTrackpoint


def flatten_trackpoint(trackpoint: Trackpoint) -> FlatTrackpoint:
    position = trackpoint.position
    return FlatTrackpoint(
        time=trackpoint.time,
        timestamp_ms=timestamp_ms(trackpoint.time),
        latitude=position.latitude_degrees if position is not None else None,
        longitude=position.longitude_degrees if position is not None else None,
        altitude_meters=trackpoint.altitude_meters,
        distance_meters=trackpoint.distance_meters,
        heart_rate=trackpoint.heart_rate_bpm,
        cadence=trackpoint.cadence,
    )


def flatten(database: TrainingCenterDatabase) -> List[FlatTrackpoint]:
    """
    Collect every trackpoint of the document in order

    Laps without a track and empty tracks contribute nothing. The result is a
    list because statistics walk it more than once.
    """
    return [
        flatten_trackpoint(trackpoint)
        for track in database.iter_tracks()
        for trackpoint in track.trackpoints
    ]


def count_trackpoints(database: TrainingCenterDatabase) -> int:
    """Number of trackpoints in the document, without building the flattened view"""
    return sum(len(track.trackpoints) for track in database.iter_tracks())
