"""
# Patternword: compiler.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Assembly of a single regular expression from a fragment sequence.

Literal fragments are escaped. Each placeholder occurrence becomes a named group
wrapping the expression bound to the placeholder, with the expression's own groups
made non-capturing so that it cannot introduce stray or colliding captures.

Python's `re` forbids repeated group names (and names that are not identifiers),
whereas a placeholder may occur many times and its name may contain `-+/:=#`.
So the n-th placeholder occurrence is captured by a group named `p«n»`,
and the compiled matcher carries a side table from group name to placeholder name.
"""

import re
from typing import NamedTuple, Optional, Sequence

from patternword.binds import Bind, Binds
from patternword.constants import GROUP_NAME_PREFIX
from patternword.exceptions import CompileException, MissingBindingException

_GLOBAL_FLAGS_PATTERN_COMPILED = re.compile(
    pattern=r'\( \? (?P<flags> [aiLmsux]+ ) \)',
    flags=re.VERBOSE,
)


class CompiledMatcher(NamedTuple):
    regex: re.Pattern
    group_names: tuple[str, ...]
    placeholder_names: tuple[str, ...]

    def extract_binds(self, match: re.Match) -> Binds:
        """
        Extract one bind per participating placeholder occurrence, in template order.
        """
        binds = Binds()

        for group_name, placeholder_name in zip(self.group_names, self.placeholder_names):
            start, end = match.span(group_name)
            if start < 0:  # did not participate
                continue

            binds.append(Bind(placeholder_name, match.string[start:end]))

        return binds


def localise_global_flags(expression: str) -> str:
    """
    Convert leading global inline flags into a scoped group.

    For example, `(?i)all` becomes `(?i:all)`.
    Global flags are only legal at the very start of a whole regular expression,
    so they must be scoped before the expression can be embedded in another.
    """
    flag_letters = ''
    body_start = 0

    while True:
        flags_match = _GLOBAL_FLAGS_PATTERN_COMPILED.match(expression, body_start)
        if flags_match is None:
            break

        for flag_letter in flags_match.group('flags'):
            if flag_letter not in flag_letters:
                flag_letters += flag_letter
        body_start = flags_match.end()

    if flag_letters == '':
        return expression

    body = expression[body_start:]
    if 'x' in flag_letters:
        body += '\n'  # terminate any trailing verbose-mode comment

    return f'(?{flag_letters}:{body})'


def strip_capture_groups(expression: str, verbose_mode_enabled: bool = False) -> str:
    """
    Convert capturing groups, named or not, into non-capturing groups.

    Escapes, character classes, extension groups `(?...)`, and comments `(?#...)` are left alone,
    as are `#` comments (up to the end of the line) when the expression is in verbose mode.
    Assumes the expression is valid.
    """
    output = ''
    index = 0
    length = len(expression)
    in_character_class = False

    while index < length:
        character = expression[index]

        if character == '\\':
            output += expression[index:index + 2]
            index += 2
            continue

        if in_character_class:
            if character == ']':
                in_character_class = False
            output += character
            index += 1
            continue

        if character == '[':
            in_character_class = True
            output += character
            index += 1
            if expression.startswith('^', index):
                output += '^'
                index += 1
            if expression.startswith(']', index):  # a leading `]` is literal
                output += ']'
                index += 1
            continue

        if character == '#' and verbose_mode_enabled:
            newline_index = expression.find('\n', index)
            if newline_index < 0:
                newline_index = length - 1
            output += expression[index:newline_index + 1]
            index = newline_index + 1
            continue

        if character == '(':
            if expression.startswith('(?P<', index):
                output += '(?:'
                index = expression.index('>', index) + 1
            elif expression.startswith('(?#', index):
                closing_index = expression.index(')', index) + 1
                output += expression[index:closing_index]
                index = closing_index
            elif expression.startswith('(?', index):
                output += '(?'
                index += 2
            else:
                output += '(?:'
                index += 1
            continue

        output += character
        index += 1

    return output


def isolate_expression(placeholder_name: str, expression: str) -> str:
    """
    Make an expression safe to embed as the content of a placeholder's group.

    Raises CompileException if the expression is invalid, or cannot be isolated.
    """
    try:
        expression_compiled = re.compile(expression)
    except re.error as regex_error:
        raise CompileException(
            f'error: invalid expression for placeholder `{placeholder_name}`: {regex_error}'
        ) from regex_error

    verbose_mode_enabled = bool(expression_compiled.flags & re.VERBOSE)
    isolated_expression = strip_capture_groups(localise_global_flags(expression), verbose_mode_enabled)

    try:
        isolated_expression_compiled = re.compile(isolated_expression)
    except re.error as regex_error:
        raise CompileException(
            f'error: invalid expression for placeholder `{placeholder_name}` '
            f'(cannot refer to groups within it): {regex_error}'
        ) from regex_error

    if isolated_expression_compiled.groups > 0:
        raise CompileException(
            f'error: invalid expression for placeholder `{placeholder_name}`: capturing groups could not be isolated'
        )

    return isolated_expression


def build_group_name(occurrence_index: int) -> str:
    return f'{GROUP_NAME_PREFIX}{occurrence_index}'


def compile_fragments(fragments: Sequence[str], rules: dict[str, Optional[str]]) -> CompiledMatcher:
    """
    Compile a fragment sequence (literals at even indices, placeholder names at odd indices)
    into a matcher, using the expressions bound to the placeholders in `rules`.

    Raises MissingBindingException for a placeholder without an expression,
    and CompileException for an invalid expression.
    """
    regex_pattern = ''
    group_names: list[str] = []
    placeholder_names: list[str] = []
    isolated_expression_from_name: dict[str, str] = {}

    for index, fragment in enumerate(fragments):
        if index % 2 == 0:
            regex_pattern += re.escape(fragment)
            continue

        if fragment in isolated_expression_from_name:
            isolated_expression = isolated_expression_from_name[fragment]
        else:
            expression = rules.get(fragment)
            if not expression:
                raise MissingBindingException(fragment)

            isolated_expression = isolate_expression(fragment, expression)
            isolated_expression_from_name[fragment] = isolated_expression

        group_name = build_group_name(len(group_names))
        regex_pattern += f'(?P<{group_name}>{isolated_expression})'
        group_names.append(group_name)
        placeholder_names.append(fragment)

    try:
        regex = re.compile(regex_pattern)
    except re.error as regex_error:
        raise CompileException(f'error: {regex_error}') from regex_error

    return CompiledMatcher(regex, tuple(group_names), tuple(placeholder_names))
