"""
Storage module - in-memory TCX document model
"""

from .model import (
    TcxModel, TrainingCenterDatabase, Activities, Activity,
    Lap, Track, Trackpoint, Position
)

__all__ = [
    'TcxModel', 'TrainingCenterDatabase', 'Activities', 'Activity',
    'Lap', 'Track', 'Trackpoint', 'Position',
]
