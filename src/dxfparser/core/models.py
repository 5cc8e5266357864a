#!/usr/bin/env python3
"""
DXFPARSER CORE MODELS
---------------------
Defines the fundamental data structures used across the DXFParser engine.
These models represent the lowest level of drawing abstraction: raw
sections cut out of the line stream and the typed properties decoded
from them.

Author: DXFParser Team
Date: 2026-10-18
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

# Top-level sections a DXF drawing may declare, in file order
SECTION_ORDER: Tuple[str, ...] = (
    "HEADER",
    "CLASSES",
    "TABLES",
    "BLOCKS",
    "ENTITIES",
    "ACDSDATA",
    "OBJECTS",
)
SECTION_NAMES = frozenset(SECTION_ORDER)

HEADER = "HEADER"


class PropType(Enum):
    """Classification of the group code a property value came from."""

    UNDEFINED = "UNDEFINED"
    INT = "INT"
    STRING = "STRING"
    DECIMAL = "DECIMAL"


@dataclass(frozen=True)
class Section:
    """
    A top-level SECTION ... ENDSEC block.

    `start` and `end` form the half-open range of the content lines in the
    source sequence; `lines` is that slice.
    """
    name: str                 # Declared section name (e.g. 'HEADER')
    start: int                # Index of the first content line
    end: int                  # Exclusive end (index of the '0' before ENDSEC)
    lines: Tuple[str, ...] = ()

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def is_recognized(self) -> bool:
        return self.name in SECTION_NAMES


@dataclass(frozen=True)
class DXFProp:
    """One (group code type, raw value) pair of a decoded variable."""
    type: PropType
    value: str


VariableMap = Dict[str, List[DXFProp]]
DecodedSections = Dict[str, VariableMap]
