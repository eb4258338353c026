"""
# Patternword: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re
from typing import Optional


def none_to_empty_string(string: Optional[str]) -> str:
    if string is None:
        return ''

    return string


def is_capitalised(string: str) -> bool:
    """
    Whether the first character of a string is an upper-case letter.
    """
    return len(string) > 0 and string[0].isupper()


def capitalise_initial(string: str) -> str:
    if len(string) == 0:
        return string

    return string[0].upper() + string[1:]


def humanise_placeholder_name(name: str) -> str:
    """
    Lower-case a placeholder name and show each underscore as a space.
    """
    return name.replace('_', ' ').lower()


def split_assignment(assignment: str) -> tuple[str, str]:
    """
    Split an assignment of the form `«name»=«value»` at the first equals sign.

    Placeholder names may themselves contain equals signs, so the split is at the
    first equals sign that is not immediately preceded by a backslash.
    A backslash-equals sequence in the name is unescaped to a plain equals sign.
    """
    match = re.fullmatch(
        pattern=r'''
            (?P<name> (?: [\\] [=] | [^=] )+ )
            [=]
            (?P<value> [\s\S]* )
        ''',
        string=assignment,
        flags=re.VERBOSE,
    )
    if match is None:
        raise ValueError(f'error: assignment `{assignment}` is not of the form `NAME=VALUE`')

    name = match.group('name').replace('\\=', '=')
    value = match.group('value')

    return name, value
