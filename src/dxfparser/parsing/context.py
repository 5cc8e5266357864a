#!/usr/bin/env python3
"""
DXFPARSER PARSE CONTEXT
-----------------------
The record of a single parse session. It stores both the raw lines and
everything the phases derived from them.

Author: DXFParser Team
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dxfparser.core.errors import DXFParseError
from dxfparser.core.models import HEADER, DecodedSections, Section, VariableMap


@dataclass
class ParseContext:
    """
    Maintains the state of a single drawing parse.

    This object is initialized by the ParsePipeline and enriched by
    the Scanner, Validator, and Decoder sequentially.
    """
    lines: List[str]                                               # Trimmed input lines
    source: Optional[str] = None                                   # File the lines came from, if any
    sections: Dict[str, Section] = field(default_factory=dict)     # Segmented raw sections
    decoded: DecodedSections = field(default_factory=dict)         # Section name -> variable map
    errors: Dict[str, DXFParseError] = field(default_factory=dict) # Sections that failed to decode
    warnings: List[str] = field(default_factory=list)              # Validator findings
    structural_ok: bool = True                                     # Validator verdict on section ranges

    @property
    def header(self) -> VariableMap:
        return self.decoded.get(HEADER, {})

    @property
    def ok(self) -> bool:
        return self.structural_ok and not self.errors

    @property
    def variable_count(self) -> int:
        return sum(len(variables) for variables in self.decoded.values())
