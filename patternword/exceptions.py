"""
# Patternword: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class PatternwordException(Exception):
    pass


class ParseException(PatternwordException):
    """
    A template violates the grammar.

    The offset is the index (into the template) of the offending character,
    or of the `$` beginning the construct that was left unterminated.
    """
    _offset: int
    _message: str

    def __init__(self, offset: int, message: str):
        super().__init__(f'error: {message} at {offset}')
        self._offset = offset
        self._message = message

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def message(self) -> str:
        return self._message


class NoMatchException(PatternwordException):
    def __init__(self, message: str = 'error: string does not match pattern'):
        super().__init__(message)


class CompileException(PatternwordException):
    pass


class MissingBindingException(CompileException):
    _placeholder_name: str

    def __init__(self, placeholder_name: str):
        super().__init__(f'error: missing binding for `{placeholder_name}`')
        self._placeholder_name = placeholder_name

    @property
    def placeholder_name(self) -> str:
        return self._placeholder_name


class SynthesisException(PatternwordException):
    _placeholder_name: str

    def __init__(self, placeholder_name: str, reason: str):
        super().__init__(f'error: binding `{placeholder_name}`: {reason}')
        self._placeholder_name = placeholder_name

    @property
    def placeholder_name(self) -> str:
        return self._placeholder_name


class UnknownPlaceholderException(PatternwordException):
    _placeholder_name: str

    def __init__(self, placeholder_name: str):
        super().__init__(f'error: unknown placeholder `{placeholder_name}`')
        self._placeholder_name = placeholder_name

    @property
    def placeholder_name(self) -> str:
        return self._placeholder_name


class NotReversibleException(PatternwordException):
    def __init__(self, message: str = 'error: transformation is not reversible'):
        super().__init__(message)


class StopSearchException(PatternwordException):
    pass
