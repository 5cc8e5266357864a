#!/usr/bin/env python3
"""
DXFPARSER VALIDATOR - Section Integrity
---------------------------------------
Checks segmented sections before they are decoded. The scanner pairs
opens and closes positionally, so reordered or nested input shows up
here as overlapping ranges rather than as a scanner error.

Author: DXFParser Team
Date: 2026-10-18
"""

import logging
from typing import Dict, List, Tuple

from dxfparser.core.models import SECTION_NAMES, Section

# Standardized logging for audit trails
logger = logging.getLogger("dxfparser.validator")


class SectionValidator:
    """
    Enforces range integrity on segmented sections and flags names outside
    the standard set.
    """

    def __init__(self, known_names: frozenset = SECTION_NAMES):
        self.known_names = known_names

    def validate(self, sections: Dict[str, Section]) -> Tuple[bool, List[str]]:
        """
        Returns (passed, messages). Unknown names are warnings only;
        inverted or overlapping ranges fail the check.
        """
        messages = []
        passed = True

        for section in sections.values():
            if section.name not in self.known_names:
                messages.append(f"Warning: Section '{section.name}' is not a standard DXF section.")
            if section.start > section.end:
                passed = False
                messages.append(
                    f"Structural Error: Section '{section.name}' range "
                    f"[{section.start}, {section.end}) is inverted."
                )

        ordered = sorted(sections.values(), key=lambda s: (s.start, s.end))
        for left, right in zip(ordered, ordered[1:]):
            if right.start < left.end:
                passed = False
                messages.append(
                    f"Structural Error: Sections '{left.name}' and '{right.name}' overlap "
                    f"([{left.start}, {left.end}) and [{right.start}, {right.end}))."
                )

        for message in messages:
            logger.warning(message)
        return passed, messages
