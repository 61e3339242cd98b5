"""
# glsexpand: passes.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The two passes over the entry sequence.

1. `build_dictionary` collects every definition into an AbbreviationMaster.
2. `expand_references` renders the entries to text, resolving references
   against the (complete) AbbreviationMaster and latching their usage state.

Since the first pass completes before the second begins,
a reference always resolves against the last definition of its identifier,
even one appearing later in the document.
"""

import warnings

from glsexpand.abbreviations import Abbreviation, AbbreviationMaster
from glsexpand.entries import Definition, Entry, Literal, Modifier, Reference
from glsexpand.exceptions import EmptyDefinitionWarning
from glsexpand.utilities import capitalise_first_character


def build_dictionary(entries: list['Entry']) -> 'AbbreviationMaster':
    abbreviation_master = AbbreviationMaster()

    for entry in entries:
        if not isinstance(entry, Definition):
            continue

        if len(entry.long_form) == 0:
            warnings.warn(
                f'warning: definition `{entry.id_}` has an empty long form',
                EmptyDefinitionWarning,
            )
        abbreviation_master.store_definition(entry)

    return abbreviation_master


def render_reference(abbreviation: 'Abbreviation', modifiers: 'Modifier') -> str:
    """
    Render a reference to an abbreviation.

    - Unused (or FORCE_FIRST): `«long_form» («short_form»)`
    - Used: `«short_form»`
    PLURAL appends `s` to each form, and UPPERCASE capitalises the first character
    of the leading form only.
    """
    renders_as_short = abbreviation.used_before and not modifiers & Modifier.FORCE_FIRST

    if modifiers & Modifier.PLURAL:
        suffix = 's'
    else:
        suffix = ''

    if renders_as_short:
        leading_form = abbreviation.short_form
        parenthetical = ''
    else:
        leading_form = abbreviation.long_form
        parenthetical = f' ({abbreviation.short_form}{suffix})'

    if modifiers & Modifier.UPPERCASE:
        leading_form = capitalise_first_character(leading_form)

    return f'{leading_form}{suffix}{parenthetical}'


def expand_references(entries: list['Entry'], abbreviation_master: 'AbbreviationMaster') -> str:
    """
    Render entries to text.

    Raises UndefinedReferenceException at the first reference to an undefined identifier.
    """
    strings = []

    for entry in entries:
        if isinstance(entry, Literal):
            strings.append(entry.text)
        elif isinstance(entry, Reference):
            abbreviation = abbreviation_master.load_abbreviation(entry.id_)
            strings.append(render_reference(abbreviation, entry.modifiers))
            abbreviation.mark_used()

    return ''.join(strings)
