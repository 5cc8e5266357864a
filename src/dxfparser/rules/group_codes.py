#!/usr/bin/env python3
"""
DXFPARSER GROUP CODE RULES
--------------------------
Maps a DXF group code to the kind of value that follows it. Only the
string-valued ranges of the DXF reference are modeled; every other code
classifies as UNDEFINED. INT and DECIMAL exist in PropType but no range
produces them yet.

Author: DXFParser Team
Date: 2026-10-18
"""

import re
from typing import Optional, Tuple

from dxfparser.core.errors import MalformedGroupCodeError
from dxfparser.core.models import PropType

# Optional sign followed by ASCII digits; int() alone would also accept '1_0'
GROUP_CODE_PATTERN = re.compile(r'^[+-]?[0-9]+$')

# Inclusive (low, high, type) ranges
STRING_RANGES: Tuple[Tuple[int, int, PropType], ...] = (
    (0, 9, PropType.STRING),
    (100, 100, PropType.STRING),
    (102, 102, PropType.STRING),
    (105, 105, PropType.STRING),
    (300, 309, PropType.STRING),
    (310, 319, PropType.STRING),
    (320, 329, PropType.STRING),
    (330, 369, PropType.STRING),
    (410, 419, PropType.STRING),
    (430, 439, PropType.STRING),
    (470, 479, PropType.STRING),
    (480, 481, PropType.STRING),
    (1000, 1009, PropType.STRING),
)


def parse_group_code(line: str, line_no: Optional[int] = None,
                     section: Optional[str] = None) -> int:
    """Parses a group code line as a base-10 integer."""
    if not GROUP_CODE_PATTERN.match(line):
        raise MalformedGroupCodeError(line, line_no=line_no, section=section)
    return int(line)


class GroupCodeTable:
    """
    Immutable lookup from group code to PropType.
    First matching range wins; no match means UNDEFINED.
    """

    def __init__(self, ranges: Tuple[Tuple[int, int, PropType], ...] = STRING_RANGES):
        self._ranges = tuple(ranges)

    @property
    def ranges(self) -> Tuple[Tuple[int, int, PropType], ...]:
        return self._ranges

    def lookup(self, code: int) -> PropType:
        for low, high, prop_type in self._ranges:
            if low <= code <= high:
                return prop_type
        return PropType.UNDEFINED

    def classify(self, line: str, line_no: Optional[int] = None,
                 section: Optional[str] = None) -> PropType:
        """Parses the raw group code line and classifies it."""
        return self.lookup(parse_group_code(line, line_no=line_no, section=section))


DEFAULT_TABLE = GroupCodeTable()


def classify(line: str) -> PropType:
    return DEFAULT_TABLE.classify(line)
