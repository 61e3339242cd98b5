"""
# glsexpand: abbreviations.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Abbreviation definitions and their usage state.
"""

from glsexpand.entries import Definition
from glsexpand.exceptions import UndefinedReferenceException


class Abbreviation:
    """
    An abbreviation definition together with its usage latch.

    The latch `used_before` starts unset and, once set, is never reset.
    """
    _definition: 'Definition'
    _used_before: bool

    def __init__(self, definition: 'Definition'):
        self._definition = definition
        self._used_before = False

    @property
    def definition(self) -> 'Definition':
        return self._definition

    @property
    def short_form(self) -> str:
        return self._definition.short_form

    @property
    def long_form(self) -> str:
        return self._definition.long_form

    @property
    def used_before(self) -> bool:
        return self._used_before

    def mark_used(self):
        self._used_before = True


class AbbreviationMaster:
    """
    Object storing abbreviation definitions by identifier.

    Storing a definition under an identifier already present overwrites it (last write wins).
    """
    _abbreviation_from_id: dict[str, 'Abbreviation']

    def __init__(self):
        self._abbreviation_from_id = {}

    def __contains__(self, id_: str) -> bool:
        return id_ in self._abbreviation_from_id

    def __len__(self) -> int:
        return len(self._abbreviation_from_id)

    @property
    def ids(self) -> list[str]:
        return list(self._abbreviation_from_id)

    def store_definition(self, definition: 'Definition'):
        self._abbreviation_from_id[definition.id_] = Abbreviation(definition)

    def load_abbreviation(self, id_: str) -> 'Abbreviation':
        try:
            return self._abbreviation_from_id[id_]
        except KeyError:
            raise UndefinedReferenceException(id_)
