"""
# Patternword: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

PLACEHOLDER_OPENING_SYMBOL = '$'
PLACEHOLDER_OPENING_BRACE = '{'
PLACEHOLDER_CLOSING_BRACE = '}'
PLACEHOLDER_PUNCTUATION_CHARACTERS = frozenset('_-+/:=#')

GROUP_NAME_PREFIX = 'p'
