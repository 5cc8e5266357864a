#!/usr/bin/env python3
"""
DXFPARSER ENGINE - The Orchestrator
-----------------------------------
The ParseEngine manages drawing files inside a workspace: it runs the
parse pipeline per file, turns the outcome into a report, writes YAML
exports atomically, and walks directories with recursion limits.

Author: DXFParser Team
Date: 2026-10-18
"""

import logging
import os
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from dxfparser.core.config import ParserConfig
from dxfparser.core.errors import DXFParseError
from dxfparser.parsing.context import ParseContext
from dxfparser.parsing.exporter import SectionExporter
from dxfparser.parsing.pipeline import ParsePipeline

logger = logging.getLogger("dxfparser.engine")


class ParseEngine:
    """
    Principal orchestrator for drawing parsing.
    Maintains workspace state and coordinates the pipeline and exporter.
    """

    def __init__(self, workspace_path: str, config: Optional[ParserConfig] = None):
        self.workspace = Path(workspace_path).resolve()
        self.config = config or ParserConfig()
        self.pipeline = ParsePipeline(self.config)
        self.exporter = SectionExporter()

    def _resolve(self, relative_path: str) -> Path:
        """Resolves a path under the workspace; targets outside it are rejected."""
        full_path = (self.workspace / relative_path).resolve()
        try:
            full_path.relative_to(self.workspace)
        except ValueError:
            raise ValueError(f"Path escapes workspace {self.workspace}: {relative_path}")
        return full_path

    def parse(self, relative_path: str) -> ParseContext:
        """Parses one file and returns the full context; errors propagate."""
        return self.pipeline.run_file(self._resolve(relative_path))

    def parse_file(self, relative_path: str) -> Dict[str, Any]:
        """
        Parses a single drawing and reports on it. Never raises for
        malformed or unreadable input.
        """
        try:
            full_path = self._resolve(relative_path)
        except ValueError as e:
            logger.error(str(e))
            return self._file_error(relative_path, "OUTSIDE_WORKSPACE", str(e))

        if not full_path.exists():
            return self._file_error(relative_path, "FILE_NOT_FOUND", f"Path missing: {full_path}")

        try:
            context = self.pipeline.run_file(full_path)
        except DXFParseError as e:
            logger.error(f"Error parsing {relative_path}: {e}")
            return self._file_error(relative_path, "PARSE_ERROR", str(e))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {relative_path}: {e}")
            return self._file_error(relative_path, "READ_ERROR", str(e))

        logger.info(f"Parsed {relative_path}: {len(context.sections)} sections, "
                    f"{context.variable_count} variables")

        return {
            "file_path": str(relative_path),
            "success": context.ok,
            "status": self._derive_status(context),
            "sections": list(context.sections),
            "variable_count": context.variable_count,
            "errors": {name: str(err) for name, err in context.errors.items()},
            "warnings": list(context.warnings),
            "decoded": context.decoded,
            "timestamp": time.time()
        }

    def export_file(self, relative_path: str, output_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Parses a drawing and writes its decoded sections as YAML.
        Default target is '<stem>.header.yaml' beside the source.
        """
        report = self.parse_file(relative_path)
        report["written"] = False
        if "decoded" not in report:
            return report

        source = self._resolve(relative_path)
        target = Path(output_path) if output_path else source.with_name(f"{source.stem}.header.yaml")
        content = self.exporter.export(report["decoded"], source=source.name)

        try:
            self._atomic_write(target, content)
            report["written"] = True
            report["output_path"] = str(target)
        except OSError as e:
            logger.error(f"Export of {relative_path} failed: {e}")
            report["write_error"] = str(e)
            report["success"] = False
        return report

    def scan_directory(self, progress_callback: Optional[Callable[[int, int], None]] = None) -> List[Dict[str, Any]]:
        """
        Recursively discovers and parses all drawings with safety gates.
        """
        reports = []
        extension = self.config.extension
        patterns = {f"*{extension.lower()}", f"*{extension.upper()}"}

        # Phase 1: File Discovery (Exclude symlinks to prevent loops)
        all_files = set()
        for p in patterns:
            all_files.update(f for f in self.workspace.rglob(p) if f.is_file() and not f.is_symlink())

        targets = [
            f for f in sorted(all_files)
            if len(f.relative_to(self.workspace).parts) <= self.config.max_depth
        ]
        total_files = len(targets)

        # Phase 2: Processing Loop
        for processed, file_path in enumerate(targets, 1):
            rel_path = str(file_path.relative_to(self.workspace))
            reports.append(self.parse_file(rel_path))
            if progress_callback:
                progress_callback(processed, total_files)

        return reports

    def generate_summary(self, reports: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Aggregates per-file reports into totals."""
        if not reports:
            return {
                "total_files": 0, "success_rate": 0, "successful": 0,
                "partial": 0, "failed": 0, "variables": 0
            }

        total = len(reports)
        successful = sum(1 for r in reports if r.get('success', False))
        partial = sum(1 for r in reports if r.get('status') == "PARTIAL")

        return {
            "total_files": total,
            "success_rate": successful / total,
            "successful": successful,
            "partial": partial,
            "failed": total - successful - partial,
            "variables": sum(r.get('variable_count', 0) for r in reports),
            "summary_timestamp": time.strftime("%Y-%m-%d %H:%M:%S")
        }

    def _derive_status(self, context: ParseContext) -> str:
        if not context.structural_ok: return "STRUCTURAL_ERROR"
        return "PARSED" if context.ok else "PARTIAL"

    def _atomic_write(self, target_path: Path, content: str):
        target_path.parent.mkdir(parents=True, exist_ok=True)
        if not os.access(target_path.parent, os.W_OK):
            raise PermissionError(f"No write access to {target_path.parent}")
        temp_file = target_path.with_name(target_path.name + '.dxfparser.tmp')
        try:
            temp_file.write_text(content, encoding='utf-8')
            os.replace(temp_file, target_path)
        except OSError:
            if temp_file.exists():
                temp_file.unlink()
            raise

    def _file_error(self, path: str, status: str, error: str) -> Dict[str, Any]:
        return {
            "file_path": str(path), "status": status, "error": error,
            "success": False, "sections": [], "variable_count": 0
        }
