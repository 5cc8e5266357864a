#!/usr/bin/env python3
"""
DXFPARSER LEXER - Line Splitter (Phase 1.1)
-------------------------------------------
Turns raw drawing text into the ordered sequence of trimmed lines that
every later phase indexes into. Group code and value lines carry no
meaningful surrounding whitespace once they leave this module.

Author: DXFParser Team
Date: 2026-10-18
"""

import logging
from pathlib import Path
from typing import List, Union

from dxfparser.core.config import ParserConfig

logger = logging.getLogger("dxfparser.lexer")


class DXFLexer:
    """
    Reads drawing files and splits them into trimmed lines.
    """

    def __init__(self, config: ParserConfig = ParserConfig()):
        self.config = config

    def _clean_artifacts(self, text: str) -> str:
        """
        Removes invisible UTF-8 BOM markers and standardizes line endings.
        """
        # Remove Byte Order Mark if present
        text = text.lstrip('\ufeff')
        # Standardize CRLF and lone CR to LF
        return text.replace('\r\n', '\n').replace('\r', '\n')

    def split(self, raw_text: str) -> List[str]:
        """
        Splits raw text into trimmed lines.
        A trailing newline does not produce an extra empty line.
        """
        clean_text = self._clean_artifacts(raw_text)
        if not clean_text:
            return []

        lines = clean_text.split('\n')
        if clean_text.endswith('\n'):
            lines.pop()
        return [line.strip() for line in lines]

    def read(self, path: Union[str, Path]) -> List[str]:
        """Reads a drawing file from disk and splits it."""
        file_path = Path(path)
        raw_text = file_path.read_text(encoding=self.config.encoding, errors=self.config.errors)
        lines = self.split(raw_text)
        logger.debug(f"Read {len(lines)} lines from {file_path}")
        return lines
