"""
Display helpers for activity statistics and export naming
"""
import math
from typing import Optional

from .timestamps import parse_timestamp


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_duration(seconds: float) -> str:
    """Format seconds as H:MM:SS, or M:SS under an hour"""
    hours = math.floor(seconds / 3600)
    minutes = math.floor((seconds % 3600) / 60)
    secs = math.floor(seconds % 60)
    
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_distance(meters: float) -> str:
    """Kilometers with two decimals from 1 km up, whole meters below"""
    if meters >= 1000:
        return f"{meters / 1000:.2f} km"
    return f"{_round_half_up(meters)} m"


def format_pace(meters_per_second: float) -> str:
    """
    Format a speed as running pace per kilometer
    
    Args:
        meters_per_second: Speed in m/s
        
    Returns:
        Pace string such as "5:30 /km", or "--:--" for a non-positive speed
    """
    if meters_per_second <= 0:
        return "--:--"
    seconds_per_km = 1000 / meters_per_second
    minutes = math.floor(seconds_per_km / 60)
    seconds = math.floor(seconds_per_km % 60)
    return f"{minutes}:{seconds:02d} /km"


def format_elevation(meters: Optional[float]) -> str:
    if meters is None:
        return "--"
    return f"{_round_half_up(meters)} m"


def format_heart_rate(bpm: Optional[float]) -> str:
    if bpm is None:
        return "--"
    return f"{_round_half_up(bpm)} bpm"


def format_time(iso_string: str) -> str:
    """Medium date plus short time in the timestamp's own offset; unparseable text is returned as-is"""
    moment = parse_timestamp(iso_string)
    if moment is None:
        return iso_string
    return f"{moment.strftime('%b')} {moment.day}, {moment.year}, {moment.strftime('%H:%M')}"


def trimmed_filename(file_name: str, suffix: str = "_trimmed") -> str:
    """
    Name for an exported edit of ``file_name``
    
    ``ride.tcx`` becomes ``ride_trimmed.tcx``; names without a ``.tcx``
    extension get the suffix and extension appended.
    """
    if file_name.lower().endswith(".tcx"):
        return f"{file_name[:-4]}{suffix}{file_name[-4:]}"
    return f"{file_name}{suffix}.tcx"
