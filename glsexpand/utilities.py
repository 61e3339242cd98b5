"""
# glsexpand: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""


def capitalise_first_character(string: str) -> str:
    """
    Capitalise the first character of a string, leaving the rest untouched.

    Unlike `str.capitalize`, the remaining characters are not lowercased.
    A first character whose uppercase is not a single character (e.g. `ß`) is left as is.
    """
    if len(string) == 0:
        return string

    first_character = string[0].upper()
    if len(first_character) != 1:
        return string

    return first_character + string[1:]


def compute_line_and_column(string: str, position: int) -> tuple[int, int]:
    """
    Compute the (1-based) line and column numbers of a position in a string.
    """
    line_number = string.count('\n', 0, position) + 1
    line_start = string.rfind('\n', 0, position) + 1
    column_number = position - line_start + 1

    return line_number, column_number
