"""
# Patternword: transforms.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Transformations between pairs of templates.

A transform consists of a left-hand pattern and a right-hand pattern derived from it,
so that both draw placeholder names from the same rule table.
Applying the transform matches a string against the left-hand pattern,
and applies the resulting binds to the right-hand pattern.

A reversible transform has the further property that its forward and reverse applications
are inverses: if `transform.apply(x)` gives `y`, then `transform.reverse().apply(y)` gives `x`.
"""

import sys
from typing import Callable, Iterable, Optional

from patternword.binds import Bind, Binds
from patternword.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from patternword.exceptions import NotReversibleException, ParseException, UnknownPlaceholderException
from patternword.patterns import Pattern, parse

RewriteVisitor = Callable[[int, int, str], None]


def is_reversible(left_binds: Iterable[Bind], right_binds: Iterable[Bind]) -> bool:
    """
    Whether two lists of binds are mutually saturating.

    That is, whether each placeholder name occurs exactly as many times in one as in the other.
    Only names are compared; the bound values are not examined.
    """
    tally_from_name: dict[str, int] = {}
    for bind in left_binds:
        tally_from_name[bind.name] = tally_from_name.get(bind.name, 0) + 1

    for bind in right_binds:
        if bind.name not in tally_from_name:
            return False

        tally_from_name[bind.name] -= 1
        if tally_from_name[bind.name] < 0:
            return False

    return all(tally == 0 for tally in tally_from_name.values())


def _parse_with_context(template: str, binds: Optional[Iterable[Bind]]) -> 'Pattern':
    try:
        return parse(template, binds)
    except ParseException as parse_exception:
        raise ParseException(
            parse_exception.offset,
            f'parsing `{template}`: {parse_exception.message}',
        ) from parse_exception


def _derive_with_context(pattern: 'Pattern', template: str) -> 'Pattern':
    try:
        return pattern.derive(template)
    except ParseException as parse_exception:
        raise ParseException(
            parse_exception.offset,
            f'parsing `{template}`: {parse_exception.message}',
        ) from parse_exception


class Transform:
    """
    A transformation from strings matching a left-hand pattern to strings of a right-hand pattern.
    """
    _left_pattern: 'Pattern'
    _right_pattern: 'Pattern'
    _verbose_mode_enabled: bool

    def __init__(self, left_pattern: 'Pattern', right_pattern: 'Pattern', verbose_mode_enabled: bool = False):
        self._left_pattern = left_pattern
        self._right_pattern = right_pattern
        self._verbose_mode_enabled = verbose_mode_enabled

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._left_pattern.template!r} -> {self._right_pattern.template!r})'

    @classmethod
    def from_templates(cls, left_template: str, right_template: str, binds: Optional[Iterable[Bind]] = None,
                       verbose_mode_enabled: bool = False) -> 'Transform':
        """
        Build a transform from two templates and the binds shared by both.

        The binds are applied to the left-hand template, and the right-hand pattern is derived from it.
        """
        left_pattern = _parse_with_context(left_template, binds)
        right_pattern = _derive_with_context(left_pattern, right_template)

        return Transform(left_pattern, right_pattern, verbose_mode_enabled)

    @property
    def left_pattern(self) -> 'Pattern':
        return self._left_pattern

    @property
    def right_pattern(self) -> 'Pattern':
        return self._right_pattern

    @property
    def verbose_mode_enabled(self) -> bool:
        return self._verbose_mode_enabled

    def reverse(self) -> 'Transform':
        return Transform(self._right_pattern, self._left_pattern, self._verbose_mode_enabled)

    def apply(self, needle: str) -> str:
        """
        Match a whole string against the left-hand pattern, and apply the binds to the right-hand pattern.

        Raises NoMatchException if the string does not match.
        """
        binds = self._left_pattern.match(needle)
        string = self._right_pattern.apply(binds)

        if self._verbose_mode_enabled:
            self.print_rewrite(needle, string)

        return string

    def search(self, needle: str, visit: RewriteVisitor):
        """
        Visit the rewrite of every non-overlapping match of the left-hand pattern, from left to right.

        The visitor is called with the start and end offsets of the original match,
        and the text produced by applying its binds to the right-hand pattern.
        Stopping follows `Pattern.search(...)`.
        """
        def visit_binds(start: int, end: int, binds: Binds):
            visit(start, end, self._right_pattern.apply(binds))

        self._left_pattern.search(needle, visit_binds)

    def replace(self, needle: str) -> str:
        """
        Replace every non-overlapping match of the left-hand pattern with its rewrite.

        Text between (and around) the matches is left unchanged.
        """
        pieces: list[str] = []
        cursor = 0

        def substitute(start: int, end: int, rewrite: str):
            nonlocal cursor
            pieces.append(needle[cursor:start])
            pieces.append(rewrite)
            cursor = end

        self.search(needle, substitute)
        pieces.append(needle[cursor:])
        string = ''.join(pieces)

        if self._verbose_mode_enabled:
            self.print_rewrite(needle, string)

        return string

    def print_rewrite(self, string_before: str, string_after: str):
        if string_before == string_after:
            no_change_indicator = ' (no change)'
        else:
            no_change_indicator = ''

        print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE `{self._left_pattern.template}`', file=sys.stderr)
        print(string_before, file=sys.stderr)
        print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator, file=sys.stderr)
        print(string_after, file=sys.stderr)
        print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER `{self._right_pattern.template}`', file=sys.stderr)
        print('\n\n\n\n', file=sys.stderr)


class ReversibleTransform(Transform):
    """
    A transform whose two patterns use each placeholder name the same number of times.

    Only to be constructed via `from_templates(...)` or `from_transform(...)`,
    which check the occurrence counts.
    The check is necessary but not sufficient for round trips to succeed:
    the bound expressions themselves are not compared.
    """
    def reverse(self) -> 'ReversibleTransform':
        return ReversibleTransform(self._right_pattern, self._left_pattern, self._verbose_mode_enabled)

    @classmethod
    def from_templates(cls, left_template: str, right_template: str, binds: Optional[Iterable[Bind]] = None,
                       verbose_mode_enabled: bool = False) -> 'ReversibleTransform':
        """
        Build a reversible transform from two templates and the binds shared by both.

        Raises ParseException if either template is malformed,
        and NotReversibleException if the right-hand template uses a placeholder unknown to the left,
        or if the occurrence counts differ.
        """
        left_pattern = _parse_with_context(left_template, binds)

        try:
            right_pattern = _derive_with_context(left_pattern, right_template)
        except UnknownPlaceholderException as unknown_placeholder_exception:
            raise NotReversibleException from unknown_placeholder_exception

        return ReversibleTransform.from_transform(Transform(left_pattern, right_pattern, verbose_mode_enabled))

    @staticmethod
    def from_transform(transform: 'Transform') -> 'ReversibleTransform':
        left_pattern = transform.left_pattern
        right_pattern = transform.right_pattern

        if not is_reversible(left_pattern.binds(), right_pattern.binds()):
            raise NotReversibleException

        return ReversibleTransform(left_pattern, right_pattern, transform.verbose_mode_enabled)
