"""
# glsexpand: test_grammar.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `grammar.py`.
"""

import sys
import unittest

from glsexpand.entries import Definition, Literal, Modifier, Reference
from glsexpand.exceptions import ParseFailureException
from glsexpand.grammar import (
    build_command_start_regex,
    is_reference_sibling,
    parse_entries,
    parse_group,
    skip_option_block,
)


class TestGrammar(unittest.TestCase):
    def test_build_command_start_regex(self):
        self.assertEqual(build_command_start_regex(('gls', 'glspl')), r'\\glspl|\\gls')
        self.assertEqual(build_command_start_regex(('hyperref',)), r'\\hyperref')

    def test_parse_group(self):
        self.assertEqual(parse_group('{}', 0), ('', 2))
        self.assertEqual(parse_group('{abc}', 0), ('abc', 5))
        self.assertEqual(parse_group('{a{b}c}d', 0), ('a{b}c', 7))
        self.assertEqual(parse_group('x{{{}}{}}', 1), ('{{}}{}', 9))
        self.assertRaises(ParseFailureException, parse_group, '{abc', 0)
        self.assertRaises(ParseFailureException, parse_group, '{a{b}', 0)
        self.assertRaises(ParseFailureException, parse_group, 'abc', 0)
        self.assertRaises(ParseFailureException, parse_group, '', 0)

    def test_parse_group_deep_nesting(self):
        depth = sys.getrecursionlimit() + 200
        string = '{' + '{' * depth + 'x' + '}' * depth + '}tail'
        self.assertEqual(parse_group(string, 0), ('{' * depth + 'x' + '}' * depth, len(string) - 4))
        self.assertRaises(ParseFailureException, parse_group, '{' * depth, 0)

        self.assertEqual(
            parse_entries(r'\newacronym{a}{A}{' + '{' * depth + 'x' + '}' * depth + '}'),
            [Definition('a', 'A', '{' * depth + 'x' + '}' * depth)],
        )

    def test_skip_option_block(self):
        self.assertEqual(skip_option_block('{a}', 0), 0)
        self.assertEqual(skip_option_block('[]{a}', 0), 2)
        self.assertEqual(skip_option_block('[hyper=false]{a}', 0), 13)
        self.assertEqual(skip_option_block('[{]{a}', 0), 3)
        self.assertRaises(ParseFailureException, skip_option_block, '[abc{a}', 0)

    def test_is_reference_sibling(self):
        self.assertTrue(is_reference_sibling('glsfoo'))
        self.assertTrue(is_reference_sibling('glspl'))
        self.assertFalse(is_reference_sibling('gls'))
        self.assertFalse(is_reference_sibling('Glsfoo'))
        self.assertFalse(is_reference_sibling('newacronym'))

    def test_parse_entries_literals(self):
        self.assertEqual(parse_entries(''), [])
        self.assertEqual(parse_entries('abc'), [Literal('abc')])
        self.assertEqual(
            parse_entries('\\Glossary \\newcommand{\\x}{y} \\textbf{bold} }{'),
            [Literal('\\Glossary \\newcommand{\\x}{y} \\textbf{bold} }{')],
        )

    def test_parse_entries_definition(self):
        self.assertEqual(
            parse_entries(r'\newacronym{sysA}{SYS}{System A}'),
            [Definition('sysA', 'SYS', 'System A')],
        )
        self.assertEqual(
            parse_entries(r'\newacronym[longplural={Systems A}]{sysA}{SYS}{System A}'),
            [Definition('sysA', 'SYS', 'System A')],
        )
        self.assertEqual(parse_entries(r'\newacronym{e}{}{}'), [Definition('e', '', '')])

    def test_parse_entries_definition_nested_groups(self):
        self.assertEqual(
            parse_entries(r'\newacronym{tla}{TLA}{The {Three} {Letter {Acronym}}}'),
            [Definition('tla', 'TLA', 'The {Three} {Letter {Acronym}}')],
        )
        self.assertEqual(
            parse_entries(r'\newacronym{x}{X}{\emph{eXtra}}'),
            [Definition('x', 'X', r'\emph{eXtra}')],
        )

    def test_parse_entries_references(self):
        self.assertEqual(
            parse_entries(r'\gls{a}\glspl{b}\Gls{c}\Glspl{d}\Glsfirst{e}'),
            [
                Reference('a', Modifier.NONE),
                Reference('b', Modifier.PLURAL),
                Reference('c', Modifier.UPPERCASE),
                Reference('d', Modifier.UPPERCASE | Modifier.PLURAL),
                Reference('e', Modifier.UPPERCASE | Modifier.FORCE_FIRST),
            ],
        )
        self.assertEqual(
            parse_entries('Use \\gls[hyper=false]{api} here.\n'),
            [Literal('Use '), Reference('api', Modifier.NONE), Literal(' here.\n')],
        )

    def test_parse_entries_document_order(self):
        self.assertEqual(
            parse_entries('\\gls{a} before \\newacronym{a}{A}{Alpha}\nafter \\Gls{a}'),
            [
                Reference('a', Modifier.NONE),
                Literal(' before '),
                Definition('a', 'A', 'Alpha'),
                Literal('\nafter '),
                Reference('a', Modifier.UPPERCASE),
            ],
        )

    def test_parse_entries_drops_reference_siblings(self):
        self.assertEqual(parse_entries(r'a\glsfoo{x}b'), [Literal('a'), Literal('{x}b')])
        self.assertEqual(parse_entries(r'\glsentrytext{x}'), [Literal('{x}')])
        self.assertEqual(parse_entries(r'\glsplfoo{x}'), [Literal('{x}')])
        self.assertEqual(parse_entries(r'\glspl x'), [Literal(' x')])
        self.assertEqual(parse_entries(r'\glsreset'), [])

    def test_parse_entries_failures(self):
        self.assertRaises(ParseFailureException, parse_entries, r'\gls{a')
        self.assertRaises(ParseFailureException, parse_entries, r'\gls x')
        self.assertRaises(ParseFailureException, parse_entries, r'\gls')
        self.assertRaises(ParseFailureException, parse_entries, r'\Gls x')
        self.assertRaises(ParseFailureException, parse_entries, r'\Glsx{a}')
        self.assertRaises(ParseFailureException, parse_entries, r'\Glsfirst')
        self.assertRaises(ParseFailureException, parse_entries, r'\newacronymx{a}{A}{Alpha}')
        self.assertRaises(ParseFailureException, parse_entries, r'\newacronym{a}{A}')
        self.assertRaises(ParseFailureException, parse_entries, r'\newacronym{a}{A}{Alpha')
        self.assertRaises(ParseFailureException, parse_entries, r'\newacronym{a}{A} {Alpha}')
        self.assertRaises(ParseFailureException, parse_entries, r'\gls[opt{a}')

    def test_parse_entries_failure_position(self):
        with self.assertRaises(ParseFailureException) as context_manager:
            parse_entries('ab\n\\gls{a')

        self.assertEqual(context_manager.exception.position, 7)
        self.assertIn('failed to parse the input: line 2, column 5', str(context_manager.exception))
        self.assertIn('unterminated group', str(context_manager.exception))


if __name__ == '__main__':
    unittest.main()
