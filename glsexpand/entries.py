"""
# glsexpand: entries.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Entries produced by the grammar, in document order.

An entry is one of
- `Literal`: a run of characters outside any recognised command, passed through verbatim;
- `Definition`: a `\\newacronym{«id»}{«short_form»}{«long_form»}` command;
- `Reference`: a `\\gls{«id»}`-like command, carrying modifier flags.
"""

import enum
from typing import NamedTuple, Union


class Modifier(enum.IntFlag):
    """
    Modifier flags of a reference.

    Only `PLURAL | UPPERCASE` (see `FORM_MASK`) affects the shape of the rendered text;
    `FORCE_FIRST` affects which content is rendered.
    """
    NONE = 0
    PLURAL = 1
    UPPERCASE = 2
    FORCE_FIRST = 4


FORM_MASK = Modifier.PLURAL | Modifier.UPPERCASE


class Literal(NamedTuple):
    text: str


class Definition(NamedTuple):
    id_: str
    short_form: str
    long_form: str


class Reference(NamedTuple):
    id_: str
    modifiers: Modifier


Entry = Union[Literal, Definition, Reference]
