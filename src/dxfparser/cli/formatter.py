#!/usr/bin/env python3
"""
DXFPARSER FORMATTER
-------------------
Rich renderers for sections, header variables and batch reports.

Author: DXFParser Team
Date: 2026-10-18
"""

from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from dxfparser.parsing.context import ParseContext

# Initialize the Rich console for high-quality terminal output
console = Console()


class DXFFormatter:
    """
    The visual side of the CLI.
    Responsible for rendering section layouts, variables and execution reports.
    """

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    def print_sections(self, context: ParseContext):
        table = Table(title=f"Sections: {escape(context.source or '<input>')}", header_style="bold magenta")
        table.add_column("Section", style="cyan")
        table.add_column("Start", justify="right")
        table.add_column("End", justify="right")
        table.add_column("Lines", justify="right")
        table.add_column("Variables", justify="right")
        table.add_column("Status")

        for name, section in context.sections.items():
            if name in context.errors:
                status = "[red]DECODE FAILED[/red]"
            elif section.is_recognized:
                status = "[green]OK[/green]"
            else:
                status = "[yellow]NON-STANDARD[/yellow]"
            table.add_row(
                escape(name), str(section.start), str(section.end), str(section.line_count),
                str(len(context.decoded.get(name, {}))), status
            )

        self.console.print(table)

    def print_variables(self, context: ParseContext, section_name: str):
        variables = context.decoded.get(section_name, {})
        if not variables:
            self.console.print(f"[dim]No decoded variables in {section_name}.[/dim]")
            return

        table = Table(title=f"{section_name} Variables", show_lines=False, header_style="bold magenta")
        table.add_column("Variable", style="cyan")
        table.add_column("Types", style="dim")
        table.add_column("Values")

        for name, props in variables.items():
            table.add_row(
                escape(name),
                ", ".join(p.type.value for p in props),
                escape(", ".join(p.value for p in props))
            )

        self.console.print(table)

    def print_errors(self, context: ParseContext):
        for name, err in context.errors.items():
            self.console.print(f"[bold red]✗ {name}:[/bold red] {escape(str(err))}")
        for warning in context.warnings:
            self.console.print(f"[bold yellow]⚠ [/bold yellow]{escape(warning)}")

    def print_export(self, yaml_text: str, title: str):
        syntax = Syntax(yaml_text, "yaml", theme="monokai", line_numbers=True)
        self.console.print(Panel(syntax, title=title, border_style="green"))

    def print_final_table(self, reports: List[Dict[str, Any]]):
        """
        Builds the summary table shown at the very end of a scan.
        """
        table = Table(title="DXFParser Execution Report", show_lines=True, header_style="bold magenta")
        table.add_column("File Path", style="cyan")
        table.add_column("Sections")
        table.add_column("Variables", justify="right")
        table.add_column("Status", style="bold")
        table.add_column("Result", justify="center")

        for r in reports:
            success = r.get('success', False)
            partial = r.get('status') == "PARTIAL"
            status_color = "green" if success else "yellow" if partial else "red"
            result_icon = "✅" if success else "⚠️" if partial else "❌"
            table.add_row(
                escape(str(r.get('file_path'))),
                ", ".join(r.get('sections', [])),
                str(r.get('variable_count', 0)),
                f"[{status_color}]{r.get('status', 'FAILED')}[/{status_color}]",
                result_icon
            )

        self.console.print(table)

    def print_summary(self, summary: Dict[str, Any]):
        self.console.print(Panel(
            f"[bold white]Summary Report[/bold white]\n"
            f"════════════════════════════════════════\n"
            f"Total Files:  {summary['total_files']}\n"
            f"Parsed:       [green]{summary['successful']}[/green]\n"
            f"Partial:      [yellow]{summary['partial']}[/yellow]\n"
            f"Failed:       [red]{summary['failed']}[/red]\n"
            f"Variables:    {summary['variables']}",
            border_style="dim"
        ))
