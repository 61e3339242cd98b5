"""
# glsexpand: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import sys
from typing import Optional

from glsexpand._version import __version__
from glsexpand.constants import COMMAND_LINE_ERROR_EXIT_CODE, DEFAULT_WRAPPER_NAMES, GENERIC_ERROR_EXIT_CODE
from glsexpand.core import run

DESCRIPTION = '''
    Expand glossary abbreviation macros (\\newacronym, \\gls, \\Gls, \\glspl, \\Glspl, \\Glsfirst)
    into plain text.
'''
INPUT_FILE_NAME_HELP = '''
    name of file to be expanded (`-` for standard input)
'''
OUTPUT_FILE_NAME_HELP = '''
    name of file to write to (default: standard output)
'''
WRAPPER_HELP = f'''
    name of a wrapper command (without backslash) whose body is kept
    and whose option block is discarded; may be repeated
    (default: {' '.join(DEFAULT_WRAPPER_NAMES)})
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints the result of every stage to standard error)
'''
STANDARD_STREAM_FILE_NAME = '-'


def parse_command_line_arguments() -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        '-w', '--wrapper',
        dest='wrapper_names',
        action='append',
        default=None,
        help=WRAPPER_HELP,
        metavar='NAME',
    )
    argument_parser.add_argument(
        '-o', '--output',
        dest='output_file_name',
        default=STANDARD_STREAM_FILE_NAME,
        help=OUTPUT_FILE_NAME_HELP,
        metavar='output.txt',
    )
    argument_parser.add_argument(
        'input_file_name',
        help=INPUT_FILE_NAME_HELP,
        metavar='file.tex',
    )

    return argument_parser.parse_args()


def normalise_wrapper_names(wrapper_name_arguments: Optional[list[str]]) -> tuple[str, ...]:
    """
    Normalise wrapper name arguments, dropping any leading backslash.

    If no wrapper names are given, the defaults are used.
    """
    if wrapper_name_arguments is None:
        return DEFAULT_WRAPPER_NAMES

    return tuple(
        wrapper_name_argument.lstrip('\\')
        for wrapper_name_argument in wrapper_name_arguments
    )


def read_input(input_file_name: str) -> str:
    try:
        if input_file_name == STANDARD_STREAM_FILE_NAME:
            return sys.stdin.read()

        with open(input_file_name, 'r', encoding='utf-8') as input_file:
            return input_file.read()
    except FileNotFoundError:
        print(f'error: argument `{input_file_name}`: file not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except UnicodeDecodeError as unicode_decode_error:
        print(f'error: cannot read `{input_file_name}`: not valid UTF-8 ({unicode_decode_error.reason} '
              f'at byte {unicode_decode_error.start})', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)
    except OSError as os_error:
        print(f'error: cannot read `{input_file_name}`: {os_error.strerror}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def write_output(output: str, output_file_name: str):
    if output_file_name == STANDARD_STREAM_FILE_NAME:
        sys.stdout.write(output)
        return

    try:
        with open(output_file_name, 'w', encoding='utf-8') as output_file:
            output_file.write(output)
        print(f'success: wrote to `{output_file_name}`')
    except IOError:
        print(f'error: cannot write to `{output_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def main():
    parsed_arguments = parse_command_line_arguments()
    input_file_name = parsed_arguments.input_file_name
    output_file_name = parsed_arguments.output_file_name
    wrapper_names = normalise_wrapper_names(parsed_arguments.wrapper_names)
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    string = read_input(input_file_name)
    result = run(string, wrapper_names, verbose_mode_enabled)

    if not result.succeeded:
        print(f'error: {result.error}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    write_output(result.output, output_file_name)


if __name__ == '__main__':
    main()
