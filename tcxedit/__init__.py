#!/usr/bin/env python3
"""
tcxedit - Training Center XML activity editor
Load a TCX document, inspect trackpoints and statistics, trim the recorded
track to an index range, and export the result or reset to the original.
"""

# Setup logging first
from .config import get_settings
from .utils import setup_tcxedit_logging

_settings = get_settings()
setup_tcxedit_logging(log_level=_settings.log_level, log_dir=_settings.log_dir)

# Document model
from .storage.model import (
    TrainingCenterDatabase, Activities, Activity, Lap, Track, Trackpoint, Position
)

# Loading, serialization and editing
from .processors import (
    TcxEditorError, ParseError, TrimIndexError,
    load, serialize, trim_by_indices
)

# Derived views
from .analytics import (
    FlatTrackpoint, ActivityStats, TrimPreview,
    flatten, compute, preview_trim
)

# Session facade
from .session import TcxEditor

__version__ = "0.1.0"

__all__ = [
    # Document model
    'TrainingCenterDatabase', 'Activities', 'Activity', 'Lap', 'Track',
    'Trackpoint', 'Position',

    # Errors
    'TcxEditorError', 'ParseError', 'TrimIndexError',

    # Operations
    'load', 'serialize', 'trim_by_indices',
    'flatten', 'compute', 'preview_trim',

    # Views
    'FlatTrackpoint', 'ActivityStats', 'TrimPreview',

    # Session
    'TcxEditor',
]
