"""
# glsexpand: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core expansion logic.

The input is processed in four stages, each consuming the whole result of the previous:
1. parse the input into entries (`grammar.py`);
2. build the abbreviation dictionary from the definitions (`passes.py`);
3. expand references against the dictionary (`passes.py`);
4. strip wrapper commands from the expanded text (`stripping.py`).
A failure in any stage aborts the run without output.
"""

import sys
from typing import NamedTuple, Optional

from glsexpand.constants import DEFAULT_WRAPPER_NAMES, VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from glsexpand.exceptions import GlsExpandException
from glsexpand.grammar import parse_entries
from glsexpand.passes import build_dictionary, expand_references
from glsexpand.stripping import strip_wrappers


class RunResult(NamedTuple):
    output: Optional[str]
    error: Optional[GlsExpandException]

    @property
    def succeeded(self) -> bool:
        return self.error is None


def print_stage(stage_name: str, lines: list[str]):
    print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER {stage_name}', file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT, file=sys.stderr)
    print('\n\n', file=sys.stderr)


def expand_glossary(string: str, wrapper_names: tuple[str, ...] = DEFAULT_WRAPPER_NAMES,
                    verbose_mode_enabled: bool = False) -> str:
    """
    Expand glossary markup to plain text.

    Raises ParseFailureException or UndefinedReferenceException on failure.
    """
    entries = parse_entries(string)
    if verbose_mode_enabled:
        print_stage('parse', [repr(entry) for entry in entries])

    abbreviation_master = build_dictionary(entries)
    if verbose_mode_enabled:
        print_stage('build_dictionary', [f'Abbreviations: {abbreviation_master.ids}'])

    string = expand_references(entries, abbreviation_master)
    if verbose_mode_enabled:
        print_stage('expand_references', [string])

    string = strip_wrappers(string, wrapper_names)
    if verbose_mode_enabled:
        print_stage('strip_wrappers', [string])

    return string


def run(string: str, wrapper_names: tuple[str, ...] = DEFAULT_WRAPPER_NAMES,
        verbose_mode_enabled: bool = False) -> 'RunResult':
    """
    Expand glossary markup, returning either the output or the error.
    """
    try:
        output = expand_glossary(string, wrapper_names, verbose_mode_enabled)
    except GlsExpandException as gls_expand_exception:
        return RunResult(output=None, error=gls_expand_exception)

    return RunResult(output=output, error=None)
