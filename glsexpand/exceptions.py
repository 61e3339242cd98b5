"""
# glsexpand: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception and warning classes.
"""


class GlsExpandException(Exception):
    pass


class ParseFailureException(GlsExpandException):
    """
    The input could not be consumed entirely under the grammar rules.
    """
    _position: int

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self._position = position

    @property
    def position(self) -> int:
        return self._position


class UndefinedReferenceException(GlsExpandException):
    _identifier: str

    def __init__(self, identifier: str):
        super().__init__(f'missing definition for `{identifier}`')
        self._identifier = identifier

    @property
    def identifier(self) -> str:
        return self._identifier


class EmptyDefinitionWarning(UserWarning):
    pass
