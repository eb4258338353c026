"""
# Patternword: test_binds.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `binds.py`.
"""

import unittest

from patternword.binds import Bind, Binds


class TestBinds(unittest.TestCase):
    def test_bind(self):
        bind = Bind('host', r'\w+')
        self.assertEqual(bind.name, 'host')
        self.assertEqual(bind.value, r'\w+')
        self.assertEqual(bind, ('host', r'\w+'))

    def test_binds(self):
        binds = Binds([Bind('a', '1'), Bind('b', '2'), Bind('a', '3')])

        self.assertEqual(binds.first('a'), '1')
        self.assertEqual(binds.first('b'), '2')
        self.assertIsNone(binds.first('c'))

        self.assertEqual(binds.all('a'), ['1', '3'])
        self.assertEqual(binds.all('c'), [])

        self.assertTrue(binds.has('b'))
        self.assertFalse(binds.has('c'))

        self.assertEqual(binds.names(), ['a', 'b', 'a'])
        self.assertEqual(binds, [('a', '1'), ('b', '2'), ('a', '3')])

    def test_binds_empty(self):
        binds = Binds()
        self.assertIsNone(binds.first('a'))
        self.assertEqual(binds.all('a'), [])
        self.assertFalse(binds.has('a'))


if __name__ == '__main__':
    unittest.main()
