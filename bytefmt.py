#!/usr/bin/env python3
"""
bytefmt

Format byte counts as human-readable sizes: 1337 -> 1.34kB.
"""

import sys
import click
from typing import Dict, Any, List
from dotenv import load_dotenv
from pathlib import Path
from rich.console import Console

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from byte_size import format_byte_size, Options, InvalidInputError
from config import ENV_PREFIX
from formatters import (
    TerminalFormatter,
    JSONLFormatter,
    PlainFormatter,
    should_use_plain_output,
)

# Load environment variables from .env file
load_dotenv()


def env(name: str) -> str:
    """Name of the environment variable backing an option."""
    return f"{ENV_PREFIX}_{name}"


@click.command()
@click.argument('values', nargs=-1)
@click.option('--bits', is_flag=True, envvar=env('BITS'), help='Use bit units (kbit, Mbit, ...)')
@click.option('--binary', is_flag=True, envvar=env('BINARY'), help='Scale by 1024 (KiB, MiB, ...) instead of 1000')
@click.option('--space', is_flag=True, envvar=env('SPACE'), help='Put a space between number and unit')
@click.option('--signed', is_flag=True, envvar=env('SIGNED'), help='Prefix positive values with +')
@click.option('--locale', default='', envvar=env('LOCALE'), help='Locale name (accepted, does not change output)')
@click.option('--min-fraction-digits', type=click.IntRange(min=0), default=0, envvar=env('MIN_FRACTION_DIGITS'),
              help='Minimum number of fraction digits (disables default rounding)')
@click.option('--max-fraction-digits', type=click.IntRange(min=0), default=0, envvar=env('MAX_FRACTION_DIGITS'),
              help='Maximum number of fraction digits (disables default rounding)')
@click.option('--format', 'output_format', type=click.Choice(['auto', 'terminal', 'plain', 'jsonl']),
              default='auto', help='Output format (auto detects plain when piping)')
@click.option('--with-options', is_flag=True, help='Emit an options header record in jsonl output')
@click.option('--output', '-o', type=click.File('w'), default='-',
              help='Output file (default: stdout)')
@click.version_option(version='1.0.0')
def main(values, bits, binary, space, signed, locale, min_fraction_digits, max_fraction_digits,
         output_format, with_options, output):
    """Format byte counts as human-readable sizes.

    Values are read from the arguments, or from stdin (one per line) when
    none are given. Pass negative values after --, e.g. bytefmt -- -1337.
    """

    # Determine actual output format
    actual_format = output_format
    if output_format == 'auto':
        actual_format = 'plain' if should_use_plain_output() else 'terminal'

    try:
        options = Options(
            bits=bits,
            binary=binary,
            space=space,
            signed=signed,
            locale=locale,
            minimum_fraction_digits=min_fraction_digits,
            maximum_fraction_digits=max_fraction_digits,
        )

        if not values:
            values = read_stdin_values()

        results = [format_value(value, options) for value in values]

        if actual_format == 'terminal':
            formatter = TerminalFormatter(Console(file=output))
            formatter.format_results(results, options)
            formatter.format_error_count(results)
        elif actual_format == 'jsonl':
            JSONLFormatter(include_options=with_options).format_results(results, options, output)
        else:
            PlainFormatter().format_results(results, options, output)
            for result in results:
                if result['error']:
                    click.echo(f"Error: {result['error']}", err=True)

        if any(result['error'] for result in results):
            sys.exit(1)

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(1)


def read_stdin_values() -> List[str]:
    """Read one value per line from stdin, skipping blank lines."""
    stdin = click.get_text_stream('stdin')
    return [line.strip() for line in stdin if line.strip()]


def format_value(text: str, options: Options) -> Dict[str, Any]:
    """Parse and format a single value, capturing errors in the result."""
    result = {'value': text, 'formatted': None, 'error': None}

    try:
        number = float(text)
    except ValueError:
        result['error'] = f"could not parse '{text}' as a number"
        return result

    try:
        result['formatted'] = format_byte_size(number, options)
    except InvalidInputError as e:
        result['error'] = str(e)

    return result


if __name__ == '__main__':
    main()
