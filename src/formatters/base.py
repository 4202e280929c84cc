"""Base formatter interface for output formatters."""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, TextIO, Optional


class BaseFormatter(ABC):
    """Abstract base class for all output formatters.

    All formatters should implement these methods to ensure
    consistent interface across different output formats.
    """

    @abstractmethod
    def format_results(
        self,
        results: List[Dict[str, Any]],
        options=None,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format a batch of byte-size results.

        Args:
            results: List of result dicts with value, formatted and error keys
            options: Options the values were formatted with
            output_file: Optional file to write output to

        Returns:
            Formatted string, or None if output was written directly
        """
        pass

    def format_error_count(
        self,
        results: List[Dict[str, Any]],
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format a summary of failed values.

        Optional method - default implementation returns None.

        Args:
            results: List of result dicts
            output_file: Optional file to write output to

        Returns:
            Formatted string, or None if not implemented/output written directly
        """
        return None
