"""
# Patternword: test_utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `utilities.py`.
"""

import unittest

from patternword.utilities import (
    capitalise_initial,
    humanise_placeholder_name,
    is_capitalised,
    none_to_empty_string,
    split_assignment,
)


class TestUtilities(unittest.TestCase):
    def test_none_to_empty_string(self):
        self.assertEqual(none_to_empty_string(''), '')
        self.assertEqual(none_to_empty_string(None), '')
        self.assertEqual(none_to_empty_string('xyz'), 'xyz')

    def test_is_capitalised(self):
        self.assertTrue(is_capitalised('Noun'))
        self.assertFalse(is_capitalised('noun'))
        self.assertFalse(is_capitalised('_Noun'))
        self.assertFalse(is_capitalised(''))

    def test_capitalise_initial(self):
        self.assertEqual(capitalise_initial('fox'), 'Fox')
        self.assertEqual(capitalise_initial('fOX'), 'FOX')
        self.assertEqual(capitalise_initial(''), '')

    def test_humanise_placeholder_name(self):
        self.assertEqual(humanise_placeholder_name('noun'), 'noun')
        self.assertEqual(humanise_placeholder_name('verb_past'), 'verb past')
        self.assertEqual(humanise_placeholder_name('Big__Cat'), 'big  cat')

    def test_split_assignment(self):
        self.assertEqual(split_assignment('a=b'), ('a', 'b'))
        self.assertEqual(split_assignment('a=b=c'), ('a', 'b=c'))
        self.assertEqual(split_assignment('a='), ('a', ''))
        self.assertEqual(split_assignment(r'h\=18=x'), ('h=18', 'x'))
        self.assertEqual(split_assignment(r'n=\d+'), ('n', r'\d+'))
        self.assertRaises(ValueError, split_assignment, 'no_equals_sign')
        self.assertRaises(ValueError, split_assignment, '=value')


if __name__ == '__main__':
    unittest.main()
