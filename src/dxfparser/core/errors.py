#!/usr/bin/env python3
"""
DXFPARSER ERRORS
----------------
Typed failures raised while segmenting and decoding a drawing. Every error
carries the section and line index it was found at so a report can point
back into the source file.

Author: DXFParser Team
Date: 2026-10-18
"""

from typing import Optional


class DXFParseError(Exception):
    """Base class for all input-format violations."""

    def __init__(self, message: str, section: Optional[str] = None,
                 line_no: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.section = section
        self.line_no = line_no

    def __str__(self) -> str:
        where = []
        if self.section is not None:
            where.append(f"section {self.section}")
        if self.line_no is not None:
            where.append(f"line {self.line_no}")
        if where:
            return f"{self.message} ({', '.join(where)})"
        return self.message


class MalformedGroupCodeError(DXFParseError):
    """A group code line is not a base-10 integer."""

    def __init__(self, line: str, line_no: Optional[int] = None,
                 section: Optional[str] = None):
        super().__init__(f"Malformed group code {line!r}", section=section, line_no=line_no)
        self.line = line


class UnbalancedSectionsError(DXFParseError):
    """Section opens and ENDSEC closes cannot be paired."""

    def __init__(self, message: str, section: Optional[str] = None,
                 opens: int = 0, closes: int = 0):
        super().__init__(message, section=section)
        self.opens = opens
        self.closes = closes


class TruncatedMarkerError(DXFParseError):
    """A '9' variable marker is the last line of its section."""

    def __init__(self, line_no: Optional[int] = None, section: Optional[str] = None):
        super().__init__("Variable marker '9' has no name line", section=section, line_no=line_no)


class InputTooLargeError(DXFParseError):
    """The line sequence exceeds the configured ceiling."""

    def __init__(self, count: int, limit: int):
        super().__init__(f"Input has {count} lines, limit is {limit}")
        self.count = count
        self.limit = limit
