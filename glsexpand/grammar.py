"""
# glsexpand: grammar.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Grammar for glossary markup.

Input is tokenised into an ordered sequence of entries (see `entries.py`)
covering every character exactly once. At each position, the following are tried in order:
````
\\newacronym [«options»]? {«id»}{«short_form»}{«long_form»}  --> Definition
\\«reference_name» [«options»]? {«id»}                        --> Reference
\\gls«letters»                                                --> (dropped)
«characters not beginning a known command name»               --> Literal
````
where «reference_name» is one of `gls`, `glspl`, `Gls`, `Glsfirst`, `Glspl`.
A group `{...}` may contain nested groups, which are kept verbatim (braces included).
An option block `[...]` may contain anything but `]`, and is always discarded.
"""

import re
from typing import Optional

from glsexpand.constants import (
    DEFINITION_COMMAND_NAME,
    DEFINITION_GROUP_COUNT,
    MODIFIERS_FROM_REFERENCE_COMMAND_NAME,
    REFERENCE_STEM,
)
from glsexpand.entries import Definition, Entry, Literal, Reference
from glsexpand.exceptions import ParseFailureException
from glsexpand.utilities import compute_line_and_column

KNOWN_COMMAND_NAMES = (DEFINITION_COMMAND_NAME, *MODIFIERS_FROM_REFERENCE_COMMAND_NAME)

PARSE_FAILURE_PREFIX = 'failed to parse the input'

_TEXT_RUN_PATTERN_COMPILED = re.compile(pattern=r'[^{}]*')
_OPTION_BLOCK_PATTERN_COMPILED = re.compile(
    pattern=r'''
        \[
            (?P<options> [^\]]* )
        \]
    ''',
    flags=re.VERBOSE,
)
_COMMAND_NAME_PATTERN_COMPILED = re.compile(
    pattern=r'''
        \\
        (?P<command_name> [a-zA-Z]+ )
    ''',
    flags=re.ASCII | re.VERBOSE,
)


def build_command_start_regex(command_names: tuple[str, ...]) -> str:
    """
    Build regex for the start of any of the given commands (longest name first).
    """
    return '|'.join(
        re.escape(f'\\{command_name}')
        for command_name in sorted(command_names, key=len, reverse=True)
    )


_COMMAND_START_PATTERN_COMPILED = re.compile(pattern=build_command_start_regex(KNOWN_COMMAND_NAMES))


def build_parse_failure(string: str, position: int, description: str,
                        failure_prefix: str = PARSE_FAILURE_PREFIX) -> 'ParseFailureException':
    line_number, column_number = compute_line_and_column(string, position)
    message = f'{failure_prefix}: line {line_number}, column {column_number}: {description}'

    return ParseFailureException(message, position)


def parse_group(string: str, position: int,
                failure_prefix: str = PARSE_FAILURE_PREFIX) -> tuple[str, int]:
    """
    Parse a group `{«content»}` starting at `position`.

    Returns («content», «end position»), where «content» has the outermost braces stripped
    but keeps nested groups verbatim.
    Nesting depth is tracked by a counter rather than by recursion, so depth is unbounded.
    """
    if not string.startswith('{', position):
        raise build_parse_failure(string, position, 'expected `{`', failure_prefix)

    group_start = position
    content_start = position + 1
    position = content_start
    depth = 1

    while True:
        position = _TEXT_RUN_PATTERN_COMPILED.match(string, position).end()

        if position == len(string):
            raise build_parse_failure(string, group_start, 'unterminated group (missing `}`)', failure_prefix)

        if string[position] == '{':
            depth += 1
        else:
            depth -= 1
            if depth == 0:
                return string[content_start:position], position + 1

        position += 1


def skip_option_block(string: str, position: int, failure_prefix: str = PARSE_FAILURE_PREFIX) -> int:
    """
    Skip an option block `[«options»]`, if any, starting at `position`.
    """
    if not string.startswith('[', position):
        return position

    option_block_match = _OPTION_BLOCK_PATTERN_COMPILED.match(string, position)
    if option_block_match is None:
        raise build_parse_failure(string, position, 'unterminated option block (missing `]`)', failure_prefix)

    return option_block_match.end()


def is_group_or_option_block_start(string: str, position: int) -> bool:
    return string.startswith(('{', '['), position)


def is_reference_sibling(command_name: str) -> bool:
    """
    Whether a command name is the reference stem followed by one or more letters.
    """
    return command_name.startswith(REFERENCE_STEM) and len(command_name) > len(REFERENCE_STEM)


def compute_command_start_match(string: str, position: int) -> Optional[re.Match]:
    return _COMMAND_START_PATTERN_COMPILED.match(string, position)


def find_command_start(string: str, position: int) -> int:
    command_start_match = _COMMAND_START_PATTERN_COMPILED.search(string, position)
    if command_start_match is None:
        return len(string)

    return command_start_match.start()


def parse_definition(string: str, position: int) -> tuple['Definition', int]:
    position = skip_option_block(string, position)

    group_values = []
    for _ in range(DEFINITION_GROUP_COUNT):
        group_value, position = parse_group(string, position)
        group_values.append(group_value)

    id_, short_form, long_form = group_values

    return Definition(id_, short_form, long_form), position


def parse_reference(string: str, position: int, command_name: str) -> tuple['Reference', int]:
    position = skip_option_block(string, position)
    id_, position = parse_group(string, position)
    modifiers = MODIFIERS_FROM_REFERENCE_COMMAND_NAME[command_name]

    return Reference(id_, modifiers), position


def parse_command(string: str, position: int) -> tuple[Optional['Entry'], int]:
    """
    Parse the command starting at `position`.

    Returns («entry», «end position»), where «entry» is None for a dropped sibling command.
    """
    command_name_match = _COMMAND_NAME_PATTERN_COMPILED.match(string, position)
    command_name = command_name_match.group('command_name')
    position_after_name = command_name_match.end()

    if command_name in KNOWN_COMMAND_NAMES and is_group_or_option_block_start(string, position_after_name):
        if command_name == DEFINITION_COMMAND_NAME:
            return parse_definition(string, position_after_name)

        return parse_reference(string, position_after_name, command_name)

    if is_reference_sibling(command_name):
        return None, position_after_name

    if command_name in KNOWN_COMMAND_NAMES:
        raise build_parse_failure(string, position_after_name, f'expected `{{` after `\\{command_name}`')

    raise build_parse_failure(string, position, f'invalid command `\\{command_name}`')


def parse_entries(string: str) -> list['Entry']:
    """
    Tokenise a string into entries.

    Raises ParseFailureException unless the whole string is consumed.
    """
    entries: list['Entry'] = []
    position = 0

    while position < len(string):
        if compute_command_start_match(string, position) is not None:
            entry, position = parse_command(string, position)
            if entry is not None:
                entries.append(entry)
            continue

        literal_end = find_command_start(string, position)
        entries.append(Literal(string[position:literal_end]))
        position = literal_end

    return entries
