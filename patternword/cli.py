"""
# Patternword: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import sys
from typing import Callable, Iterable, Optional

from patternword._version import __version__
from patternword.binds import Bind, Binds
from patternword.constants import COMMAND_LINE_ERROR_EXIT_CODE, GENERIC_ERROR_EXIT_CODE
from patternword.exceptions import PatternwordException
from patternword.patterns import parse
from patternword.transforms import ReversibleTransform, Transform
from patternword.utilities import capitalise_initial, humanise_placeholder_name, is_capitalised, split_assignment

DESCRIPTION = '''
    Fill in the placeholders of a template, or rewrite text from one template to another.
'''
FILE_NAME_HELP = '''
    name of file containing the template to be filled in
    (or, with -t, the text to be rewritten)
'''
BIND_HELP = '''
    supply a value for a placeholder instead of being prompted for it
    (repeatable; repeated values for a name fill its occurrences in order)
'''
TRANSFORM_HELP = '''
    rewrite every match of template LHS in the file to template RHS
'''
EXPRESSION_HELP = '''
    bind a placeholder of LHS to a regular expression (repeatable)
'''
CHECK_REVERSIBLE_HELP = '''
    refuse a transformation that is not reversible
'''
REVERSE_HELP = '''
    rewrite from RHS to LHS instead
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every rewrite applied)
'''

Prompter = Callable[[str], str]


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-b', '--bind',
        dest='value_assignments',
        action='append',
        default=[],
        help=BIND_HELP,
        metavar='NAME=VALUE',
    )
    argument_parser.add_argument(
        '-t', '--transform',
        dest='transform_templates',
        nargs=2,
        default=None,
        help=TRANSFORM_HELP,
        metavar=('LHS', 'RHS'),
    )
    argument_parser.add_argument(
        '-e', '--expression',
        dest='expression_assignments',
        action='append',
        default=[],
        help=EXPRESSION_HELP,
        metavar='NAME=EXPR',
    )
    argument_parser.add_argument(
        '-c', '--check-reversible',
        dest='reversibility_check_enabled',
        action='store_true',
        help=CHECK_REVERSIBLE_HELP,
    )
    argument_parser.add_argument(
        '-R', '--reverse',
        dest='reverse_mode_enabled',
        action='store_true',
        help=REVERSE_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'file_name',
        help=FILE_NAME_HELP,
        metavar='file',
    )

    return argument_parser.parse_args(arguments)


def parse_assignments(assignments: Iterable[str]) -> Binds:
    return Binds(Bind(*split_assignment(assignment)) for assignment in assignments)


def format_value(name: str, value: str) -> str:
    """
    Format a value for a placeholder, capitalising it if the placeholder name is capitalised.
    """
    if is_capitalised(name):
        return capitalise_initial(value)

    return value


def prompt_on_terminal(message: str) -> str:
    """
    Prompt (on stderr) for a non-empty line of input (from stdin).

    Raises EOFError if input ends first.
    """
    while True:
        print(f'{message}: ', end='', file=sys.stderr, flush=True)
        line = sys.stdin.readline()
        if line == '':
            raise EOFError('input ended before a value was entered')

        value = line.rstrip('\n')
        if value != '':
            return value

        print('Please enter a non-empty string', file=sys.stderr)


def fill_template(template: str, supplied_binds: Iterable[Bind], prompt: Prompter = prompt_on_terminal) -> str:
    """
    Substitute values into the placeholders of a template.

    Placeholders with supplied values are filled from those;
    every occurrence of any other placeholder is prompted for, in template order.
    """
    pattern = parse(template)
    filled_binds = Binds(Bind(name, format_value(name, value)) for name, value in supplied_binds)
    supplied_names = set(filled_binds.names())

    prompt_number = 0
    for name, _ in pattern.binds():
        if name in supplied_names:
            continue

        prompt_number += 1
        value = prompt(f'({prompt_number}) {humanise_placeholder_name(name)}')
        filled_binds.append(Bind(name, format_value(name, value)))

    return pattern.apply(filled_binds)


def rewrite_text(text: str, left_template: str, right_template: str, expression_binds: Iterable[Bind],
                 reversibility_check_enabled: bool = False, reverse_mode_enabled: bool = False,
                 verbose_mode_enabled: bool = False) -> str:
    if reversibility_check_enabled:
        transform_class = ReversibleTransform
    else:
        transform_class = Transform

    transform = transform_class.from_templates(left_template, right_template, expression_binds, verbose_mode_enabled)
    if reverse_mode_enabled:
        transform = transform.reverse()

    return transform.replace(text)


def read_file(file_name: str) -> str:
    try:
        with open(file_name, 'r', encoding='utf-8') as file:
            return file.read()
    except FileNotFoundError:
        print(f'error: file `{file_name}` not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    file_name = parsed_arguments.file_name
    transform_templates = parsed_arguments.transform_templates
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    try:
        value_binds = parse_assignments(parsed_arguments.value_assignments)
        expression_binds = parse_assignments(parsed_arguments.expression_assignments)
    except ValueError as value_error:
        print(value_error, file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    if transform_templates is None and (parsed_arguments.expression_assignments
                                        or parsed_arguments.reversibility_check_enabled
                                        or parsed_arguments.reverse_mode_enabled):
        print('error: options -e, -c, and -R can only be used with option -t', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    text = read_file(file_name)

    try:
        if transform_templates is None:
            output = fill_template(text, value_binds)
        else:
            left_template, right_template = transform_templates
            output = rewrite_text(
                text,
                left_template,
                right_template,
                expression_binds,
                reversibility_check_enabled=parsed_arguments.reversibility_check_enabled,
                reverse_mode_enabled=parsed_arguments.reverse_mode_enabled,
                verbose_mode_enabled=verbose_mode_enabled,
            )
    except PatternwordException as patternword_exception:
        print(patternword_exception, file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)
    except EOFError as eof_error:
        print(f'error: {eof_error}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    print(output, end='')


if __name__ == '__main__':
    main()
