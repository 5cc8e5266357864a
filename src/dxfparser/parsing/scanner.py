#!/usr/bin/env python3
"""
DXFPARSER SCANNER - Section Segmenter (Phase 1.2)
-------------------------------------------------
Locates the top-level SECTION ... ENDSEC blocks of a drawing in one forward
pass over its lines and cuts each block's content out as a Section.

Pairing is positional: the n-th declared section receives the n-th
remaining ENDSEC. This is only correct for flat, in-order sections, and
the SectionValidator reports the overlaps it produces otherwise.

Author: DXFParser Team
Date: 2026-10-18
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from dxfparser.core.errors import UnbalancedSectionsError
from dxfparser.core.models import Section

logger = logging.getLogger("dxfparser.scanner")


class SectionScanner:
    """
    Finds section boundaries with a (previous, current, next) window and
    pairs opens with closes first-in first-out.
    """

    OPEN_MARKER = "SECTION"
    CLOSE_MARKER = "ENDSEC"
    ENTITY_CODE = "0"
    NAME_CODE = "2"

    def __init__(self):
        # Discoveries of the last scan, kept for diagnostics
        self.open_indexes: Dict[str, int] = {}
        self.close_indexes: List[int] = []

    def _window(self, lines: Sequence[str], i: int) -> Tuple[Optional[str], str, Optional[str]]:
        previous_line = lines[i - 1] if i > 0 else None
        next_line = lines[i + 1] if i + 1 < len(lines) else None
        return previous_line, lines[i], next_line

    def _is_open(self, lines: Sequence[str], i: int) -> bool:
        previous_line, current_line, next_line = self._window(lines, i)
        return (previous_line == self.ENTITY_CODE
                and current_line == self.OPEN_MARKER
                and next_line == self.NAME_CODE
                and i + 2 < len(lines))

    def _is_close(self, lines: Sequence[str], i: int) -> bool:
        _, current_line, next_line = self._window(lines, i)
        if current_line != self.CLOSE_MARKER:
            return False
        # A drawing cut off right after its last ENDSEC still closes that section
        return next_line == self.ENTITY_CODE or (next_line is None and i > 0)

    def scan(self, lines: Sequence[str]) -> Tuple[Dict[str, int], List[int]]:
        """
        Collects section starts (name -> first content index) and closes
        (exclusive end indexes, in file order).
        A repeated section name keeps its first position but takes the later start.
        """
        starts: Dict[str, int] = {}
        closes: List[int] = []

        for i in range(len(lines)):
            if self._is_open(lines, i):
                name = lines[i + 2]
                starts[name] = i + 3
                logger.debug(f"Section {name} opens at line {i}")

            if self._is_close(lines, i):
                closes.append(i - 1)
                logger.debug(f"ENDSEC at line {i}")

        self.open_indexes = dict(starts)
        self.close_indexes = list(closes)
        return starts, closes

    def segment(self, lines: Sequence[str]) -> Dict[str, Section]:
        """
        Primary interface: returns name -> Section in pairing order.
        Raises UnbalancedSectionsError when closes run out or a close
        precedes the start it was paired with.
        """
        starts, closes = self.scan(lines)
        pending = list(closes)
        sections: Dict[str, Section] = {}

        for name, start in starts.items():
            if not pending:
                raise UnbalancedSectionsError(
                    f"Section {name!r} has no matching ENDSEC "
                    f"({len(starts)} opens, {len(closes)} closes)",
                    section=name, opens=len(starts), closes=len(closes)
                )
            end = pending.pop(0)
            if end < start:
                raise UnbalancedSectionsError(
                    f"Section {name!r} starts at line {start} but was paired "
                    f"with an ENDSEC ending at line {end}",
                    section=name, opens=len(starts), closes=len(closes)
                )
            sections[name] = Section(name=name, start=start, end=end, lines=tuple(lines[start:end]))

        if pending:
            logger.warning(f"Ignoring {len(pending)} ENDSEC marker(s) without a matching SECTION")

        return sections


def segment(lines: Sequence[str]) -> Dict[str, Section]:
    return SectionScanner().segment(lines)
