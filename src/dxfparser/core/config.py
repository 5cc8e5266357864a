#!/usr/bin/env python3
"""
DXFPARSER CONFIG
----------------
Runtime knobs shared by the pipeline, engine and CLI. Values come from
constructor arguments or CLI flags only.

Author: DXFParser Team
Date: 2026-10-18
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParserConfig:
    encoding: str = "utf-8-sig"        # BOM-aware read, same as the lexer expects
    errors: str = "strict"             # Codec error policy ('replace' in lenient mode)
    max_lines: Optional[int] = None    # Ceiling for pathological inputs; None disables it
    isolate_sections: bool = True      # A failing section does not abort its siblings
    extension: str = ".dxf"            # Directory scan filter
    max_depth: int = 10                # Directory scan recursion limit
