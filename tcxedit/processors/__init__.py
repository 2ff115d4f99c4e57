#!/usr/bin/env python3
"""
Processors module - TCX loading, serialization and range editing
"""

from .interface import TcxEditorError, ParseError, TrimIndexError
from .tcx import load, serialize, build_tree
from .trim import trim_by_indices, validate_range, recalculate_lap_stats

__all__ = [
    # Errors
    'TcxEditorError', 'ParseError', 'TrimIndexError',

    # Loader / Serializer
    'load', 'serialize', 'build_tree',

    # Range editing
    'trim_by_indices', 'validate_range', 'recalculate_lap_stats',
]
