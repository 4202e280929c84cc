"""JSONL output formatter for byte sizes."""

import json
from dataclasses import asdict
from typing import List, Dict, Any, TextIO, Optional

try:
    from .base import BaseFormatter
    from ..config import RECORD_TYPE_OPTIONS, RECORD_TYPE_RESULT
except ImportError:
    from formatters.base import BaseFormatter
    from config import RECORD_TYPE_OPTIONS, RECORD_TYPE_RESULT


class JSONLFormatter(BaseFormatter):
    """Formats byte sizes as structured JSONL output."""

    def __init__(self, include_options: bool = False):
        self.include_options = include_options

    def format_results(
        self,
        results: List[Dict[str, Any]],
        options=None,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format results as JSONL, one record per value."""
        lines = []

        # Options header record
        if self.include_options and options is not None:
            options_record = {"type": RECORD_TYPE_OPTIONS}
            options_record.update(asdict(options))
            lines.append(json.dumps(options_record))

        for result in results:
            lines.append(json.dumps({
                "type": RECORD_TYPE_RESULT,
                "value": result.get('value'),
                "formatted": result.get('formatted'),
                "error": result.get('error'),
            }))

        jsonl_content = '\n'.join(lines)

        if output_file:
            output_file.write(jsonl_content + '\n' if lines else '')

        return jsonl_content
