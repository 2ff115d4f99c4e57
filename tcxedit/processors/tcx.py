#!/usr/bin/env python3
"""
TCX Loader / Serializer - converts Training Center XML text to and from the document model
"""
import math
import re
import xml.etree.ElementTree as ET
from typing import Callable, List, Optional, TypeVar
from xml.sax.saxutils import escape

from pydantic import ValidationError

from ..const import XML_DECLARATION, ROOT_TAG
from ..storage.model import (
    TrainingCenterDatabase, Activities, Activity, Lap, Track, Trackpoint, Position
)
from .interface import ParseError
from ..utils import get_logger


logger = get_logger(__name__)

ACTIVITY_EXTENSION_NAMESPACE = "http://www.garmin.com/xmlschemas/ActivityExtension/v2"

# ns\d prefixes are reserved by ElementTree
ET.register_namespace("tpx", ACTIVITY_EXTENSION_NAMESPACE)

T = TypeVar("T")

# Python's float()/int() also take "1_000", "inf" and "nan"
_DECIMAL = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INTEGER = re.compile(r"[+-]?[0-9]+")


# ----------------- element helpers -----------------

def _local_name(element: ET.Element) -> str:
    tag = element.tag
    if isinstance(tag, str) and tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def _namespace(element: ET.Element) -> Optional[str]:
    tag = element.tag
    if isinstance(tag, str) and tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return None


def _children(element: ET.Element, name: str) -> List[ET.Element]:
    return [child for child in element if _local_name(child) == name]


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if _local_name(child) == name:
            return child
    return None


def _required_child(element: ET.Element, name: str, context: str) -> ET.Element:
    child = _child(element, name)
    if child is None:
        raise ParseError(f"Missing <{name}> in {context}")
    return child


def _text(element: ET.Element) -> str:
    return (element.text or "").strip()


def _required_text(element: ET.Element, name: str, context: str) -> str:
    return _text(_required_child(element, name, context))


def _required_attribute(element: ET.Element, name: str, context: str) -> str:
    value = element.get(name)
    if value is None:
        raise ParseError(f"Missing {name} attribute on {context}")
    return value


def _parse_float(raw: str) -> float:
    """xs:double lexical form, finite values only"""
    if not _DECIMAL.fullmatch(raw):
        raise ValueError("not a decimal number")
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError("value out of range")
    return value


def _parse_int(raw: str) -> int:
    if not _INTEGER.fullmatch(raw):
        raise ValueError("not an integer")
    return int(raw)


def _convert(raw: str, converter: Callable[[str], T], name: str, context: str) -> T:
    try:
        return converter(raw)
    except ValueError as e:
        raise ParseError(f"Invalid {name} value {raw!r} in {context}: {e}") from e


def _optional_number(element: ET.Element, name: str, converter: Callable[[str], T],
                     context: str) -> Optional[T]:
    child = _child(element, name)
    if child is None:
        return None
    return _convert(_text(child), converter, name, context)


def _inner_markup(element: ET.Element) -> str:
    """Text plus serialized children of an element, as a markup fragment"""
    parts = [escape(element.text or "")]
    for child in element:
        parts.append(ET.tostring(child, encoding="unicode"))
    return "".join(parts)


# ----------------- loading -----------------

def _load_trackpoint(element: ET.Element, context: str) -> Trackpoint:
    time = _required_text(element, "Time", context)
    context = f"Trackpoint {time}"

    position = None
    position_element = _child(element, "Position")
    if position_element is not None:
        position = Position(
            latitude_degrees=_convert(
                _required_text(position_element, "LatitudeDegrees", context),
                _parse_float, "LatitudeDegrees", context),
            longitude_degrees=_convert(
                _required_text(position_element, "LongitudeDegrees", context),
                _parse_float, "LongitudeDegrees", context),
        )

    heart_rate = None
    heart_rate_element = _child(element, "HeartRateBpm")
    if heart_rate_element is not None:
        heart_rate = _convert(
            _required_text(heart_rate_element, "Value", f"HeartRateBpm of {context}"),
            _parse_int, "HeartRateBpm", context)

    extensions = None
    extensions_element = _child(element, "Extensions")
    if extensions_element is not None:
        extensions = _inner_markup(extensions_element)

    return Trackpoint(
        time=time,
        position=position,
        altitude_meters=_optional_number(element, "AltitudeMeters", _parse_float, context),
        distance_meters=_optional_number(element, "DistanceMeters", _parse_float, context),
        heart_rate_bpm=heart_rate,
        cadence=_optional_number(element, "Cadence", _parse_int, context),
        extensions=extensions,
    )


def _load_lap(element: ET.Element) -> Lap:
    start_time = _required_attribute(element, "StartTime", "Lap")
    context = f"Lap {start_time}"

    track = None
    track_elements = _children(element, "Track")
    if track_elements:
        # Pauses can split a lap into several Track elements; the model keeps one
        if len(track_elements) > 1:
            logger.debug(f"Merging {len(track_elements)} Track elements in {context}")
        track = Track(trackpoints=[
            _load_trackpoint(point, context)
            for track_element in track_elements
            for point in _children(track_element, "Trackpoint")
        ])

    return Lap(
        start_time=start_time,
        total_time_seconds=_convert(
            _required_text(element, "TotalTimeSeconds", context), _parse_float, "TotalTimeSeconds", context),
        distance_meters=_convert(
            _required_text(element, "DistanceMeters", context), _parse_float, "DistanceMeters", context),
        calories=_convert(
            _required_text(element, "Calories", context), _parse_int, "Calories", context),
        intensity=_required_text(element, "Intensity", context),
        trigger_method=_required_text(element, "TriggerMethod", context),
        track=track,
    )


def _load_activity(element: ET.Element) -> Activity:
    sport = _required_attribute(element, "Sport", "Activity")
    activity_id = _required_text(element, "Id", f"{sport} Activity")
    return Activity(
        sport=sport,
        id=activity_id,
        laps=[_load_lap(lap) for lap in _children(element, "Lap")],
    )


def load(text: str) -> TrainingCenterDatabase:
    """
    Parse TCX text into a document tree

    Args:
        text: Complete TCX document contents

    Returns:
        The parsed TrainingCenterDatabase

    Raises:
        ParseError: If the text is not well-formed XML or does not have the
            expected element/attribute shape
    """
    try:
        root = ET.fromstring(text.lstrip("\ufeff \t\r\n"))
    except ET.ParseError as e:
        raise ParseError(f"Failed to parse TCX: {e}") from e

    if _local_name(root) != ROOT_TAG:
        raise ParseError(f"Failed to parse TCX: unexpected root element <{_local_name(root)}>")

    try:
        activities_element = _required_child(root, "Activities", ROOT_TAG)
        database = TrainingCenterDatabase(
            xmlns=_namespace(root),
            activities=Activities(activity=[
                _load_activity(activity)
                for activity in _children(activities_element, "Activity")
            ]),
        )
    except ParseError as e:
        raise ParseError(f"Failed to parse TCX: {e.message}") from e
    except ValidationError as e:
        raise ParseError(f"Failed to parse TCX: {e}") from e

    logger.debug(f"Loaded TCX document with {len(database.activities.activity)} activities")
    return database


# ----------------- serialization -----------------

def _sub(parent: ET.Element, tag: str, text: Optional[str] = None) -> ET.Element:
    element = ET.SubElement(parent, tag)
    if text is not None:
        element.text = text
    return element


def _format_float(value: float) -> str:
    return repr(float(value))


def _undeclare_default_namespace(wrapper: ET.Element) -> None:
    """
    Mark unqualified payload elements with xmlns=""

    Document elements are written unprefixed under a default namespace, so a
    payload element without a namespace would otherwise inherit it on reload.
    """
    for parent in wrapper.iter():
        if parent is not wrapper and _namespace(parent) is None:
            continue
        for child in parent:
            if _namespace(child) is None:
                child.set("xmlns", "")


def _attach_extensions(parent: ET.Element, payload: str, default_namespace: bool) -> None:
    try:
        wrapper = ET.fromstring(f"<Extensions>{payload}</Extensions>")
    except ET.ParseError:
        # Not a markup fragment; keep it as character data
        logger.debug("Extensions payload is not well-formed markup, writing it as text")
        _sub(parent, "Extensions", payload)
        return
    if default_namespace:
        _undeclare_default_namespace(wrapper)
    parent.append(wrapper)


def _build_trackpoint(parent: ET.Element, trackpoint: Trackpoint, default_namespace: bool) -> None:
    element = _sub(parent, "Trackpoint")
    _sub(element, "Time", trackpoint.time)
    if trackpoint.position is not None:
        position = _sub(element, "Position")
        _sub(position, "LatitudeDegrees", _format_float(trackpoint.position.latitude_degrees))
        _sub(position, "LongitudeDegrees", _format_float(trackpoint.position.longitude_degrees))
    if trackpoint.altitude_meters is not None:
        _sub(element, "AltitudeMeters", _format_float(trackpoint.altitude_meters))
    if trackpoint.distance_meters is not None:
        _sub(element, "DistanceMeters", _format_float(trackpoint.distance_meters))
    if trackpoint.heart_rate_bpm is not None:
        heart_rate = _sub(element, "HeartRateBpm")
        _sub(heart_rate, "Value", str(trackpoint.heart_rate_bpm))
    if trackpoint.cadence is not None:
        _sub(element, "Cadence", str(trackpoint.cadence))
    if trackpoint.extensions is not None:
        _attach_extensions(element, trackpoint.extensions, default_namespace)


def _build_lap(parent: ET.Element, lap: Lap, default_namespace: bool) -> None:
    element = ET.SubElement(parent, "Lap", {"StartTime": lap.start_time})
    _sub(element, "TotalTimeSeconds", _format_float(lap.total_time_seconds))
    _sub(element, "DistanceMeters", _format_float(lap.distance_meters))
    _sub(element, "Calories", str(lap.calories))
    _sub(element, "Intensity", lap.intensity)
    _sub(element, "TriggerMethod", lap.trigger_method)
    if lap.track is not None:
        track = _sub(element, "Track")
        for trackpoint in lap.track.trackpoints:
            _build_trackpoint(track, trackpoint, default_namespace)


def build_tree(database: TrainingCenterDatabase) -> ET.Element:
    """Build the ElementTree representation of a document"""
    attributes = {}
    if database.xmlns is not None:
        attributes["xmlns"] = database.xmlns
    root = ET.Element(ROOT_TAG, attributes)
    activities = _sub(root, "Activities")
    for activity in database.activities.activity:
        element = ET.SubElement(activities, "Activity", {"Sport": activity.sport})
        _sub(element, "Id", activity.id)
        for lap in activity.laps:
            _build_lap(element, lap, database.xmlns is not None)
    return root


def serialize(database: TrainingCenterDatabase) -> str:
    """
    Render a document as TCX text

    Args:
        database: Document to render

    Returns:
        XML declaration line followed by the serialized root element
    """
    body = ET.tostring(build_tree(database), encoding="unicode")
    return f"{XML_DECLARATION}\n{body}"
