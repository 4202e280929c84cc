"""Shared utilities for bytefmt."""

from .numeric import is_finite, round_to_significant, format_number

__all__ = [
    'is_finite',
    'round_to_significant',
    'format_number',
]
