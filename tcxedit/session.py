#!/usr/bin/env python3
"""
Editor Session - holds one loaded TCX document together with its source text

A session is not safe for concurrent use; callers sharing one across threads
must serialize access themselves.
"""
from typing import List, Optional

from .analytics import (
    ActivityStats, FlatTrackpoint, TrimPreview,
    flatten, count_trackpoints, compute, preview_trim
)
from .config import EditorSettings, get_settings
from .processors import load, serialize, trim_by_indices
from .storage.model import TrainingCenterDatabase
from .utils import get_logger, trimmed_filename


logger = get_logger(__name__)


class TcxEditor:
    """Load, inspect, trim, export and reset a TCX document"""

    def __init__(self, xml_content: str, settings: Optional[EditorSettings] = None):
        """
        Parse a TCX document

        Args:
            xml_content: Complete TCX file contents
            settings: Editor settings, defaults to the environment-backed ones

        Raises:
            ParseError: If the content cannot be loaded
        """
        self.settings = settings or get_settings()
        self._database = load(xml_content)
        self._original_xml = xml_content
        logger.info(f"Loaded TCX document with {self.get_trackpoint_count()} trackpoints")

    @property
    def database(self) -> TrainingCenterDatabase:
        """The current, possibly edited, document"""
        return self._database

    @property
    def original_xml(self) -> str:
        return self._original_xml

    def get_trackpoints(self) -> List[FlatTrackpoint]:
        """All trackpoints in document order"""
        return flatten(self._database)

    def get_stats(self) -> ActivityStats:
        return compute(self._database)

    def get_trackpoint_count(self) -> int:
        return count_trackpoints(self._database)

    def preview_trim(self, start: int, end: int) -> TrimPreview:
        """Measure a candidate range over the flattened trackpoints without editing"""
        return preview_trim(self.get_trackpoints(), start, end)

    def trim_by_indices(self, start: int, end: int) -> None:
        """
        Trim every track to trackpoints ``start``..``end`` inclusive

        Raises:
            TrimIndexError: If the range does not fit some track; nothing is changed
        """
        trim_by_indices(self._database, start, end)

    def to_xml(self) -> str:
        """Export the current document as TCX text"""
        xml = serialize(self._database)
        logger.debug(f"Exported TCX document ({len(xml)} characters)")
        return xml

    def export_filename(self, file_name: str) -> str:
        """Download name for the edited document, e.g. run.tcx -> run_trimmed.tcx"""
        return trimmed_filename(file_name, self.settings.trimmed_suffix)

    def reset(self) -> None:
        """
        Discard all edits by reloading the original text

        Raises:
            ParseError: If the original text no longer parses; the current
                document is kept in that case
        """
        self._database = load(self._original_xml)
        logger.info("Reset document to original content")
