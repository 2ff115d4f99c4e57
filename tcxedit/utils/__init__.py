"""
tcxedit Utils Package
"""
from .core import (
    LoggingConfig,
    setup_tcxedit_logging,
    get_logger,
)
from .timestamps import parse_timestamp, timestamp_ms, elapsed_seconds
from .formatting import (
    format_duration,
    format_distance,
    format_pace,
    format_elevation,
    format_heart_rate,
    format_time,
    trimmed_filename,
)

__all__ = [
    # Logging
    'LoggingConfig',
    'setup_tcxedit_logging',
    'get_logger',
    # Timestamps
    'parse_timestamp',
    'timestamp_ms',
    'elapsed_seconds',
    # Display helpers
    'format_duration',
    'format_distance',
    'format_pace',
    'format_elevation',
    'format_heart_rate',
    'format_time',
    'trimmed_filename',
]
