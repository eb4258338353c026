"""
# Patternword: grammar.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Template grammar.

A template is literal text containing zero or more placeholders of the form
````
${«name»}
````
where «name» is a non-empty run of ASCII letters, digits, and the characters `_-+/:=#`.
A literal dollar sign is written as `$$`; all other characters stand for themselves.
"""

from typing import Iterable

from patternword.constants import (
    PLACEHOLDER_CLOSING_BRACE,
    PLACEHOLDER_OPENING_BRACE,
    PLACEHOLDER_OPENING_SYMBOL,
    PLACEHOLDER_PUNCTUATION_CHARACTERS,
)
from patternword.exceptions import ParseException

_FREE_TEXT_STATE = 'FREE_TEXT'
_DOLLAR_STATE = 'DOLLAR'
_PLACEHOLDER_STATE = 'PLACEHOLDER'


def is_placeholder_character(character: str) -> bool:
    if character in PLACEHOLDER_PUNCTUATION_CHARACTERS:
        return True

    return character.isascii() and character.isalnum()


def parse_template(template: str) -> tuple[list[str], list[str]]:
    """
    Parse a template into literals and placeholder names.

    There is always exactly one more literal than there are placeholder names,
    with the literals and names interleaving (literal first) to reconstruct the template.
    A literal may be empty.

    Raises ParseException if the template violates the grammar.
    """
    literals: list[str] = []
    placeholder_names: list[str] = []

    state = _FREE_TEXT_STATE
    construct_offset = 0
    token_characters: list[str] = []

    for offset, character in enumerate(template):
        if state == _FREE_TEXT_STATE:
            if character == PLACEHOLDER_OPENING_SYMBOL:
                construct_offset = offset
                state = _DOLLAR_STATE
            else:
                token_characters.append(character)

        elif state == _DOLLAR_STATE:
            if character == PLACEHOLDER_OPENING_SYMBOL:
                token_characters.append(character)
                state = _FREE_TEXT_STATE
            elif character == PLACEHOLDER_OPENING_BRACE:
                literals.append(''.join(token_characters))
                token_characters = []
                state = _PLACEHOLDER_STATE
            else:
                raise ParseException(offset, f'wanted `$` or `{{` but found `{character}`')

        else:
            if character == PLACEHOLDER_CLOSING_BRACE:
                if len(token_characters) == 0:
                    raise ParseException(construct_offset, 'empty placeholder')
                placeholder_names.append(''.join(token_characters))
                token_characters = []
                state = _FREE_TEXT_STATE
            elif is_placeholder_character(character):
                token_characters.append(character)
            else:
                raise ParseException(offset, f'invalid placeholder character `{character}`')

    if state == _DOLLAR_STATE:
        raise ParseException(construct_offset, 'incomplete escape')
    if state == _PLACEHOLDER_STATE:
        raise ParseException(construct_offset, 'incomplete placeholder')

    literals.append(''.join(token_characters))

    return literals, placeholder_names


def build_fragments(literals: list[str], placeholder_names: list[str]) -> tuple[str, ...]:
    """
    Interleave literals and placeholder names into a fragment sequence.

    Even indices are literals and odd indices are placeholder names.
    """
    if len(literals) != len(placeholder_names) + 1:
        raise ValueError('error: there must be exactly one more literal than placeholder names')

    fragments = [literals[0]]
    for placeholder_name, literal in zip(placeholder_names, literals[1:]):
        fragments.append(placeholder_name)
        fragments.append(literal)

    return tuple(fragments)


def iterate_placeholder_names(fragments: Iterable[str]) -> Iterable[str]:
    for index, fragment in enumerate(fragments):
        if index % 2 == 1:
            yield fragment


def escape_literal(literal: str) -> str:
    return literal.replace(PLACEHOLDER_OPENING_SYMBOL, PLACEHOLDER_OPENING_SYMBOL * 2)


def serialise_template(fragments: Iterable[str]) -> str:
    """
    Convert a fragment sequence back to template text.
    """
    template = ''

    for index, fragment in enumerate(fragments):
        if index % 2 == 0:
            template += escape_literal(fragment)
        else:
            template += f'{PLACEHOLDER_OPENING_SYMBOL}{PLACEHOLDER_OPENING_BRACE}{fragment}{PLACEHOLDER_CLOSING_BRACE}'

    return template
