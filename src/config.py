"""Configuration constants for bytefmt."""

# Unit tables: index 0 is the unscaled unit, 1-8 are successive powers
BYTE_UNITS = ('B', 'kB', 'MB', 'GB', 'TB', 'PB', 'EB', 'ZB', 'YB')
BIBYTE_UNITS = ('B', 'KiB', 'MiB', 'GiB', 'TiB', 'PiB', 'EiB', 'ZiB', 'YiB')
BIT_UNITS = ('b', 'kbit', 'Mbit', 'Gbit', 'Tbit', 'Pbit', 'Ebit', 'Zbit', 'Ybit')
BIBIT_UNITS = ('b', 'kibit', 'Mibit', 'Gibit', 'Tibit', 'Pibit', 'Eibit', 'Zibit', 'Yibit')

# Scaling bases
DECIMAL_BASE = 1000
BINARY_BASE = 1024

# Significant digits kept when no fraction-digit bounds are given
DEFAULT_PRECISION = 3

# Maximum fraction digits when only a minimum is given
DEFAULT_MAXIMUM_FRACTION_DIGITS = 3

# Prefix for environment variables read by the CLI (e.g. BYTEFMT_BINARY)
ENV_PREFIX = "BYTEFMT"

# JSONL record types
RECORD_TYPE_OPTIONS = "options"
RECORD_TYPE_RESULT = "result"
