#!/usr/bin/env python3
"""
Processor error hierarchy shared by the loader, serializer and range editor
"""
from typing import Any, Dict, Optional


class TcxEditorError(Exception):
    """
    Base exception for all tcxedit errors.
    
    Carries an optional ``details`` mapping with the values that caused the
    failure.
    """
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        return self.message


class ParseError(TcxEditorError):
    """
    Raised when text is not a well-formed, conforming TCX document.
    
    Examples:
    - Malformed XML markup
    - Missing mandatory element or attribute
    - Non-numeric value in a numeric field
    """
    pass


class TrimIndexError(TcxEditorError, IndexError):
    """Raised when a trim range is inverted or out of bounds for some track"""
    
    def __init__(self, start: int, end: int, total: int):
        super().__init__(
            f"Invalid indices: start={start}, end={end}, total={total}",
            details={'start': start, 'end': end, 'total': total}
        )
        self.start = start
        self.end = end
        self.total = total
