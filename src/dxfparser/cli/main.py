#!/usr/bin/env python3
"""
DXFPARSER CLI
-------------
Command line interface over the ParseEngine:
1. inspect - section layout and decoded HEADER variables of one drawing
2. scan    - batch parse of a directory with a summary report
3. export  - decoded sections written as YAML

Author: DXFParser Team
Date: 2026-10-18
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence

from rich.markup import escape
from rich.panel import Panel
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
    BarColumn,
    TaskProgressColumn
)

from dxfparser.cli.formatter import DXFFormatter, console
from dxfparser.core.config import ParserConfig
from dxfparser.core.engine import ParseEngine
from dxfparser.core.errors import DXFParseError
from dxfparser.core.models import HEADER

VERSION = "dxfparser v1.0.0"


class DXFParserCLI:
    """
    CLI wrapper that translates user commands into Engine actions.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="dxfparser",
            description="DXFParser - DXF section segmentation & HEADER variable decoding",
            formatter_class=argparse.RawDescriptionHelpFormatter
        )
        self.formatter = DXFFormatter()
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("-v", "--version", action="version", version=VERSION)
        self.parser.add_argument("--log-level", default="WARNING",
                                 choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                                 help="Logging verbosity (default: WARNING)")
        self.parser.add_argument("--lenient", action="store_true",
                                 help="Replace undecodable bytes instead of failing")
        self.parser.add_argument("--max-lines", type=int, default=None,
                                 help="Reject drawings with more lines than this")
        self.parser.add_argument("--no-isolate", action="store_true",
                                 help="Abort on the first section that fails to decode")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        inspect_parser = subparsers.add_parser("inspect", help="🔍 Show sections and variables of a drawing")
        inspect_parser.add_argument("path", help="Path to a DXF file")
        inspect_parser.add_argument("--section", default=HEADER, help="Section whose variables to list")
        inspect_parser.add_argument("--yaml", action="store_true", help="Preview the YAML export of the drawing")

        scan_parser = subparsers.add_parser("scan", help="📂 Parse every drawing under a directory")
        scan_parser.add_argument("path", help="Path to scan")
        scan_parser.add_argument("--ext", default=".dxf", help="File extension filter (default: .dxf)")
        scan_parser.add_argument("--max-depth", type=int, default=10, help="Directory recursion limit")

        export_parser = subparsers.add_parser("export", help="📄 Export decoded sections as YAML")
        export_parser.add_argument("path", help="Path to a DXF file")
        export_parser.add_argument("-o", "--output", default=None, help="Output file (default: <stem>.header.yaml)")
        export_parser.add_argument("--stdout", action="store_true", help="Print YAML instead of writing a file")

    def _build_config(self, args: argparse.Namespace) -> ParserConfig:
        config = ParserConfig(
            errors="replace" if args.lenient else "strict",
            max_lines=args.max_lines,
            isolate_sections=not args.no_isolate
        )
        if args.command == "scan":
            config = replace(config, extension=args.ext, max_depth=args.max_depth)
        return config

    def print_header(self, subtitle: str):
        """Renders the splash header."""
        console.print(Panel.fit(
            f"[bold cyan]{VERSION}[/bold cyan]",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def _inspect(self, path: Path, args: argparse.Namespace, config: ParserConfig) -> int:
        engine = ParseEngine(str(path.parent), config)
        try:
            context = engine.parse(path.name)
        except (DXFParseError, OSError, UnicodeDecodeError) as e:
            console.print(f"[bold red]Parse Error:[/bold red] {e}")
            return 1

        self.formatter.print_sections(context)
        self.formatter.print_variables(context, args.section)
        self.formatter.print_errors(context)
        if args.yaml:
            yaml_text = engine.exporter.export(context.decoded, source=path.name)
            self.formatter.print_export(yaml_text, title=f"YAML Export: {escape(path.name)}")
        return 0 if context.ok else 1

    def _export(self, path: Path, args: argparse.Namespace, config: ParserConfig) -> int:
        engine = ParseEngine(str(path.parent), config)
        if args.stdout:
            try:
                context = engine.parse(path.name)
            except (DXFParseError, OSError, UnicodeDecodeError) as e:
                console.print(f"[bold red]Parse Error:[/bold red] {e}")
                return 1
            sys.stdout.write(engine.exporter.export(context.decoded, source=path.name))
            return 0 if context.ok else 1

        report = engine.export_file(path.name, args.output)
        if not report.get("written"):
            console.print(f"[bold red]Export failed:[/bold red] {report.get('error') or report.get('write_error')}")
            return 1
        console.print(f"[green]Wrote[/green] {report['output_path']}")
        return 0 if report["success"] else 1

    def _scan(self, path: Path, config: ParserConfig) -> int:
        engine = ParseEngine(str(path), config)
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(bar_width=40),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=console
        ) as progress:
            task_id = progress.add_task("Parsing drawings...", total=None)

            def advance(done: int, total: int):
                progress.update(task_id, completed=done, total=total)

            reports = engine.scan_directory(progress_callback=advance)

        if not reports:
            console.print(f"\n[bold yellow]⚠️  No {config.extension} files found.[/bold yellow]")
            return 0

        self.formatter.print_final_table(reports)
        summary = engine.generate_summary(reports)
        self.formatter.print_summary(summary)
        return 0 if summary["successful"] == summary["total_files"] else 1

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Primary routing entry point."""
        argv = list(sys.argv[1:] if argv is None else argv)
        if not argv:
            self.print_header("DXF Section Parser")
            self.parser.print_help()
            return 0

        args = self.parser.parse_args(argv)
        logging.basicConfig(level=getattr(logging, args.log_level))
        if args.command is None:
            self.parser.print_help()
            return 0

        config = self._build_config(args)
        path = Path(args.path).resolve()
        if not path.exists():
            console.print(f"[bold red]Error:[/bold red] Path '{args.path}' not found.")
            return 1

        if args.command == "inspect":
            self.print_header("Drawing Inspection")
            return self._inspect(path, args, config)
        if args.command == "export":
            return self._export(path, args, config)
        if args.command == "scan":
            self.print_header("Batch Scan")
            if not path.is_dir():
                console.print(f"[bold red]Error:[/bold red] '{args.path}' is not a directory.")
                return 1
            return self._scan(path, config)

        self.parser.print_help()
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Application entry point with interrupt handling."""
    try:
        return DXFParserCLI().run(argv)
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
