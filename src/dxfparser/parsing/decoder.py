#!/usr/bin/env python3
"""
DXFPARSER DECODER - Variable Decoder (Phase 1.3)
------------------------------------------------
Reinterprets the raw lines of a section as named variables. In the HEADER
section every variable starts with group code 9 followed by its name
($ACADVER, $INSBASE, ...) and continues with (group code, value) pairs
until the next 9.

Only HEADER is decoded; all other sections yield an empty mapping.

Author: DXFParser Team
Date: 2026-10-18
"""

import logging
from typing import List, Sequence

from dxfparser.core.errors import TruncatedMarkerError
from dxfparser.core.models import HEADER, DXFProp, VariableMap
from dxfparser.rules.group_codes import DEFAULT_TABLE, GroupCodeTable

logger = logging.getLogger("dxfparser.decoder")


class VariableDecoder:
    """
    Splits a section into variable chunks and types each value pair with
    the group code table it was built with.
    """

    VARIABLE_MARKER = "9"

    def __init__(self, table: GroupCodeTable = DEFAULT_TABLE):
        self.table = table

    def decode(self, section_name: str, raw_lines: Sequence[str], offset: int = 0) -> VariableMap:
        """
        Decodes one section.

        Args:
            section_name: Declared section name; only 'HEADER' is decoded.
            raw_lines: Content lines of the section.
            offset: Index of raw_lines[0] in the source file, used for error positions.
        """
        if section_name != HEADER:
            return {}

        variables: VariableMap = {}
        markers = self._find_markers(raw_lines)

        for k, marker in enumerate(markers):
            name_index = marker + 1
            if name_index >= len(raw_lines):
                raise TruncatedMarkerError(line_no=offset + marker, section=section_name)

            chunk_end = markers[k + 1] if k + 1 < len(markers) else len(raw_lines)
            chunk_start = name_index + 1
            # Last write wins for repeated names
            variables[raw_lines[name_index]] = self._decode_chunk(
                raw_lines[chunk_start:chunk_end], section_name, offset + chunk_start
            )

        logger.debug(f"Decoded {len(variables)} variables from {section_name}")
        return variables

    def _find_markers(self, raw_lines: Sequence[str]) -> List[int]:
        return [i for i, line in enumerate(raw_lines) if line == self.VARIABLE_MARKER]

    def _decode_chunk(self, chunk: Sequence[str], section_name: str, offset: int) -> List[DXFProp]:
        """Pairs (code, value) lines; an unpaired trailing line is dropped."""
        props = []
        for j in range(0, len(chunk) - 1, 2):
            prop_type = self.table.classify(chunk[j], line_no=offset + j, section=section_name)
            props.append(DXFProp(type=prop_type, value=chunk[j + 1]))
        return props


def decode(section_name: str, raw_lines: Sequence[str]) -> VariableMap:
    return VariableDecoder().decode(section_name, raw_lines)
