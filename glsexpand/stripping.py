"""
# glsexpand: stripping.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Markup stripping for expanded text.

A wrapper command
````
\\«wrapper_name» [«options»]? {«content»}
````
is replaced by its «content» (outermost braces stripped, nested groups kept verbatim).
Everything else is copied verbatim, and «content» itself is not scanned again.
"""

import re
from typing import NamedTuple, Union

from glsexpand.constants import DEFAULT_WRAPPER_NAMES
from glsexpand.entries import Literal
from glsexpand.grammar import build_command_start_regex, build_parse_failure, parse_group, skip_option_block


class Wrapped(NamedTuple):
    wrapper_name: str
    content: str


Segment = Union[Literal, Wrapped]

STRIP_FAILURE_PREFIX = 'failed to strip wrappers in the expanded text'


def build_wrapper_start_regex(wrapper_names: tuple[str, ...]) -> str:
    """
    Build regex for a wrapper name followed by an option block or group.
    """
    return rf'(?: {build_command_start_regex(wrapper_names)} ) (?= [\[{{] )'


def parse_segments(string: str, wrapper_names: tuple[str, ...] = DEFAULT_WRAPPER_NAMES) -> list['Segment']:
    """
    Tokenise a string into literal and wrapped segments.

    Raises ParseFailureException for an unterminated option block or group,
    or for an option block without a group.
    """
    if len(wrapper_names) == 0:
        return [Literal(string)] if len(string) > 0 else []

    wrapper_start_pattern_compiled = re.compile(
        pattern=build_wrapper_start_regex(wrapper_names),
        flags=re.VERBOSE,
    )

    segments: list['Segment'] = []
    position = 0

    while position < len(string):
        wrapper_start_match = wrapper_start_pattern_compiled.search(string, position)
        if wrapper_start_match is None:
            segments.append(Literal(string[position:]))
            break

        if wrapper_start_match.start() > position:
            segments.append(Literal(string[position:wrapper_start_match.start()]))

        wrapper_name = wrapper_start_match.group()[1:]
        position = skip_option_block(string, wrapper_start_match.end(), STRIP_FAILURE_PREFIX)
        if not string.startswith('{', position):
            raise build_parse_failure(string, position, f'expected `{{` after `\\{wrapper_name}[...]`',
                                      STRIP_FAILURE_PREFIX)

        content, position = parse_group(string, position, STRIP_FAILURE_PREFIX)
        segments.append(Wrapped(wrapper_name, content))

    return segments


def expand_segments(segments: list['Segment']) -> str:
    strings = []

    for segment in segments:
        if isinstance(segment, Wrapped):
            strings.append(segment.content)
        else:
            strings.append(segment.text)

    return ''.join(strings)


def strip_wrappers(string: str, wrapper_names: tuple[str, ...] = DEFAULT_WRAPPER_NAMES) -> str:
    return expand_segments(parse_segments(string, wrapper_names))
