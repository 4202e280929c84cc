"""Rich terminal output formatter for byte sizes."""

from typing import List, Dict, Any, Optional, TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

try:
    from .base import BaseFormatter
except ImportError:
    from formatters.base import BaseFormatter


class TerminalFormatter(BaseFormatter):
    """Formats byte sizes for rich terminal display."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

        # Color scheme
        self.colors = {
            'value': 'dim white',
            'formatted': 'bright_green',
            'error': 'red',
            'metadata': 'dim blue',
            'border': 'dim white',
        }

    def format_results(
        self,
        results: List[Dict[str, Any]],
        options=None,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format and display results as a table."""
        if not results:
            self.console.print("No values given.", style=self.colors['metadata'])
            return None

        table = Table(
            title=self._title(options),
            box=box.ROUNDED,
            border_style=self.colors['border'],
            title_style="bold"
        )
        table.add_column("Value", justify="right", style=self.colors['value'])
        table.add_column("Formatted", justify="right", style=self.colors['formatted'])

        for result in results:
            if result.get('error'):
                table.add_row(Text(str(result.get('value'))), Text(result['error'], style=self.colors['error']))
            else:
                table.add_row(Text(str(result.get('value'))), result['formatted'])

        self.console.print(table)
        return None  # Output written directly to console

    def format_error_count(
        self,
        results: List[Dict[str, Any]],
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Display how many values could not be formatted."""
        failed = sum(1 for result in results if result.get('error'))
        if failed:
            plural = 's' if failed != 1 else ''
            self.console.print(f"{failed} value{plural} could not be formatted", style=self.colors['error'])
        return None

    def _title(self, options) -> str:
        if options is None:
            return "Byte Sizes"
        unit = "Bits" if options.bits else "Bytes"
        scale = "binary" if options.binary else "decimal"
        return f"{unit} ({scale})"
