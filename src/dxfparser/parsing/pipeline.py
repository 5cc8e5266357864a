#!/usr/bin/env python3
"""
DXFPARSER PARSE PIPELINE - The Coordinator
------------------------------------------
Runs the parse phases in a strict order: size gate, segmentation,
validation, then per-section decoding. Segmentation failures abort the
parse; decoding failures are confined to their own section unless
isolation is switched off.

Author: DXFParser Team
Date: 2026-10-18
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from dxfparser.core.config import ParserConfig
from dxfparser.core.errors import DXFParseError, InputTooLargeError
from dxfparser.parsing.context import ParseContext
from dxfparser.parsing.decoder import VariableDecoder
from dxfparser.parsing.lexer import DXFLexer
from dxfparser.parsing.scanner import SectionScanner
from dxfparser.rules.group_codes import DEFAULT_TABLE, GroupCodeTable
from dxfparser.validator.validator import SectionValidator

logger = logging.getLogger("dxfparser.pipeline")


class ParsePipeline:
    """
    The Orchestrator: ensures line splitting, segmentation, validation and
    decoding happen in a strictly defined order.
    """

    def __init__(self, config: Optional[ParserConfig] = None,
                 table: GroupCodeTable = DEFAULT_TABLE):
        """
        Args:
            config: Runtime options; defaults to ParserConfig().
            table: Group code classification handed to the decoder.
        """
        self.config = config or ParserConfig()
        self.lexer = DXFLexer(self.config)
        self.scanner = SectionScanner()
        self.validator = SectionValidator()
        self.decoder = VariableDecoder(table)

    def run(self, lines: Sequence[str], source: Optional[str] = None) -> ParseContext:
        """Parses an already split and trimmed line sequence."""
        limit = self.config.max_lines
        if limit is not None and len(lines) > limit:
            raise InputTooLargeError(len(lines), limit)

        context = ParseContext(lines=list(lines), source=source)

        # --- PHASE 1: SEGMENTATION ---
        context.sections = self.scanner.segment(context.lines)

        # --- PHASE 2: VALIDATION ---
        context.structural_ok, messages = self.validator.validate(context.sections)
        context.warnings.extend(messages)

        # --- PHASE 3: DECODING ---
        for name, section in context.sections.items():
            try:
                context.decoded[name] = self.decoder.decode(name, section.lines, offset=section.start)
            except DXFParseError as e:
                if not self.config.isolate_sections:
                    raise
                logger.warning(f"Section {name} skipped: {e}")
                context.errors[name] = e

        return context

    def run_text(self, raw_text: str, source: Optional[str] = None) -> ParseContext:
        return self.run(self.lexer.split(raw_text), source=source)

    def run_file(self, path: Union[str, Path]) -> ParseContext:
        return self.run(self.lexer.read(path), source=str(path))
