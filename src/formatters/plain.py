"""Plain text output formatter for byte sizes."""

import os
import sys
from typing import List, Dict, Any, TextIO, Optional

try:
    from .base import BaseFormatter
except ImportError:
    from formatters.base import BaseFormatter


class PlainFormatter(BaseFormatter):
    """Formats byte sizes one per line, suitable for piping."""

    def format_results(
        self,
        results: List[Dict[str, Any]],
        options=None,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format results as plain lines."""
        lines = []

        for result in results:
            if result.get('error'):
                lines.append(f"error: {result['error']}")
            else:
                lines.append(result['formatted'])

        plain_content = '\n'.join(lines)

        if output_file:
            output_file.write(plain_content + '\n' if lines else '')

        return plain_content


def should_use_plain_output() -> bool:
    """Detect if output should be plain text (when piping or NO_COLOR is set)."""
    # Check if output is being piped (not a terminal)
    if not sys.stdout.isatty():
        return True

    # Check for NO_COLOR environment variable
    if os.getenv('NO_COLOR'):
        return True

    return False
