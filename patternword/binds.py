"""
# Patternword: binds.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Associations of placeholder names with expressions or values.
"""

from typing import NamedTuple, Optional


class Bind(NamedTuple):
    """
    An association of a placeholder name with a value.

    When binding a pattern, «value» is the regular expression the placeholder must match.
    When produced by a match, or supplied for substitution, «value» is literal text.
    """
    name: str
    value: str


class Binds(list):
    """
    An ordered list of binds.

    The same name may be bound more than once, so order is significant:
    occurrences are consumed and produced positionally.
    """
    def first(self, name: str) -> Optional[str]:
        """
        Get the first value bound to a name, or None if the name is unbound.
        """
        for bind in self:
            if bind.name == name:
                return bind.value

        return None

    def all(self, name: str) -> list[str]:
        return [bind.value for bind in self if bind.name == name]

    def has(self, name: str) -> bool:
        return any(bind.name == name for bind in self)

    def names(self) -> list[str]:
        return [bind.name for bind in self]
