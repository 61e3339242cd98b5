"""
# glsexpand: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

from glsexpand.entries import Modifier

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

DEFINITION_COMMAND_NAME = 'newacronym'
DEFINITION_GROUP_COUNT = 3

REFERENCE_STEM = 'gls'
MODIFIERS_FROM_REFERENCE_COMMAND_NAME = {
    'gls': Modifier.NONE,
    'glspl': Modifier.PLURAL,
    'Gls': Modifier.UPPERCASE,
    'Glsfirst': Modifier.UPPERCASE | Modifier.FORCE_FIRST,
    'Glspl': Modifier.UPPERCASE | Modifier.PLURAL,
}

DEFAULT_WRAPPER_NAMES = ('hyperref',)
