"""
Analytics module - flattened trackpoint view and activity statistics
"""

from .interface import FlatTrackpoint, ActivityStats, TrimPreview
from .flatten import flatten, flatten_trackpoint, count_trackpoints
from .stats import compute, preview_trim

__all__ = [
    'FlatTrackpoint', 'ActivityStats', 'TrimPreview',
    'flatten', 'flatten_trackpoint', 'count_trackpoints',
    'compute', 'preview_trim',
]
