"""
# Patternword: patterns.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Patterns: templates whose placeholders are bound to regular expressions.

A pattern may be _matched_ against a string, which succeeds if the whole string matches
the template with each placeholder standing for its bound expression,
yielding binds of placeholder names to the matched substrings.
A pattern may also be _applied_ to binds, yielding the template with values substituted.
"""

import copy
from typing import Callable, Iterable, Optional

from patternword.binds import Bind, Binds
from patternword.compiler import CompiledMatcher, compile_fragments
from patternword.exceptions import (
    MissingBindingException,
    NoMatchException,
    StopSearchException,
    SynthesisException,
    UnknownPlaceholderException,
)
from patternword.grammar import build_fragments, iterate_placeholder_names, parse_template
from patternword.utilities import none_to_empty_string

SearchVisitor = Callable[[int, int, Binds], None]
Synthesiser = Callable[[str, int], str]


class Pattern:
    """
    A parsed template, with a rule table binding each placeholder name to an expression.

    The fragment sequence alternates literals (even indices) and placeholder names (odd indices),
    beginning and ending with a (possibly empty) literal.

    The compiled matcher is built on first use, and discarded whenever a rule is rebound.
    Rebinding is not synchronised; a pattern shared between threads must not be rebound
    without external locking.
    """
    _template: str
    _fragments: tuple[str, ...]
    _expression_from_name: dict[str, Optional[str]]
    _compiled_matcher: Optional['CompiledMatcher']

    def __init__(self, template: str, fragments: tuple[str, ...], expression_from_name: dict[str, Optional[str]]):
        self._template = template
        self._fragments = fragments
        self._expression_from_name = expression_from_name
        self._compiled_matcher = None

    def __str__(self) -> str:
        return self._template

    def __repr__(self) -> str:
        return f'Pattern({self._template!r})'

    @property
    def template(self) -> str:
        return self._template

    @property
    def fragments(self) -> tuple[str, ...]:
        return self._fragments

    @property
    def names(self) -> list[str]:
        """
        Distinct placeholder names, in order of first occurrence.
        """
        return list(self._expression_from_name.keys())

    @property
    def is_compiled(self) -> bool:
        return self._compiled_matcher is not None

    def binds(self) -> Binds:
        """
        Get one bind per placeholder occurrence, in template order, holding the currently bound expressions.

        The result is a fresh list; modifying it has no effect on the pattern.
        A caller may fill in its values to obtain binds suitable for `apply(...)`.
        """
        return Binds(
            Bind(name, none_to_empty_string(self._expression_from_name[name]))
            for name in iterate_placeholder_names(self._fragments)
        )

    def bind(self, name: str, expression: Optional[str]):
        """
        Rebind the expression for a placeholder name.
        """
        if name not in self._expression_from_name:
            raise UnknownPlaceholderException(name)

        self._expression_from_name[name] = expression
        self._compiled_matcher = None

    def compile(self) -> 'CompiledMatcher':
        if self._compiled_matcher is None:
            self._compiled_matcher = compile_fragments(self._fragments, self._expression_from_name)

        return self._compiled_matcher

    def match(self, needle: str) -> Binds:
        """
        Match a whole string against the pattern.

        Returns one bind per placeholder occurrence, in template order.
        Raises NoMatchException if the string (in its entirety) does not match.
        """
        compiled_matcher = self.compile()

        match = compiled_matcher.regex.fullmatch(needle)
        if match is None:
            raise NoMatchException

        return compiled_matcher.extract_binds(match)

    def search(self, needle: str, visit: SearchVisitor):
        """
        Visit every non-overlapping match of the pattern in a string, from left to right.

        The visitor is called with the start and end offsets of each match and its binds.
        If the visitor raises StopSearchException, the search ends quietly;
        any other exception propagates.
        """
        compiled_matcher = self.compile()

        for match in compiled_matcher.regex.finditer(needle):
            try:
                visit(match.start(), match.end(), compiled_matcher.extract_binds(match))
            except StopSearchException:
                return

    def search_all(self, needle: str) -> list[tuple[int, int, Binds]]:
        results: list[tuple[int, int, Binds]] = []
        self.search(needle, lambda start, end, binds: results.append((start, end, binds)))

        return results

    def apply(self, binds: Iterable[Bind]) -> str:
        """
        Substitute values into the template.

        Each occurrence of a placeholder takes the next value bound to its name, in the order supplied.
        Once the values for a name are exhausted, the last of them is repeated.
        Binds for names not in the template are ignored.

        Raises MissingBindingException if a placeholder name has no value at all.
        """
        values_from_name: dict[str, list[str]] = {}
        for name, value in binds:
            values_from_name.setdefault(name, []).append(value)

        cursor_from_name: dict[str, int] = {}
        string = ''

        for index, fragment in enumerate(self._fragments):
            if index % 2 == 0:
                string += fragment
                continue

            values = values_from_name.get(fragment)
            if not values:
                raise MissingBindingException(fragment)

            cursor = cursor_from_name.get(fragment, 0)
            string += values[min(cursor, len(values) - 1)]
            cursor_from_name[fragment] = cursor + 1

        return string

    def apply_function(self, synthesise: Synthesiser) -> str:
        """
        Substitute synthesised values into the template.

        For the n-th occurrence (counting from 1) of a placeholder `name`,
        the value substituted is `synthesise(name, n)`.
        An exception raised by `synthesise` is re-raised as SynthesisException.
        """
        count_from_name: dict[str, int] = {}
        string = ''

        for index, fragment in enumerate(self._fragments):
            if index % 2 == 0:
                string += fragment
                continue

            count = count_from_name.get(fragment, 0) + 1
            count_from_name[fragment] = count

            try:
                string += synthesise(fragment, count)
            except Exception as exception:
                raise SynthesisException(fragment, str(exception)) from exception

        return string

    def derive(self, template: str) -> 'Pattern':
        """
        Build a new pattern from another template, reusing the expressions bound in this pattern.

        Only the placeholders used by the new template are carried over.
        Raises UnknownPlaceholderException if the new template uses a placeholder unknown to this pattern.
        """
        literals, placeholder_names = parse_template(template)

        expression_from_name: dict[str, Optional[str]] = {}
        for name in placeholder_names:
            if name not in self._expression_from_name:
                raise UnknownPlaceholderException(name)
            expression_from_name[name] = self._expression_from_name[name]

        return Pattern(template, build_fragments(literals, placeholder_names), expression_from_name)

    def copy(self) -> 'Pattern':
        """
        Copy the pattern, with its own rule table (and a shared compiled matcher, if any).
        """
        pattern_copy = copy.copy(self)
        pattern_copy._expression_from_name = copy.copy(self._expression_from_name)

        return pattern_copy


def parse(template: str, binds: Optional[Iterable[Bind]] = None) -> 'Pattern':
    """
    Parse a template into a pattern, binding placeholder names to the expressions in `binds`.

    Raises ParseException if the template is malformed,
    and UnknownPlaceholderException if `binds` names a placeholder absent from the template.
    """
    literals, placeholder_names = parse_template(template)

    expression_from_name: dict[str, Optional[str]] = {name: None for name in placeholder_names}
    pattern = Pattern(template, build_fragments(literals, placeholder_names), expression_from_name)

    if binds is not None:
        for name, expression in binds:
            pattern.bind(name, expression)

    return pattern
