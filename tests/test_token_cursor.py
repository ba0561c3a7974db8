import unittest

from atmfjstc.lib.variant_codegen.errors import UnexpectedTokenError, MissingGroupError
from atmfjstc.lib.variant_codegen.tokens import tokenize, Delimiter
from atmfjstc.lib.variant_codegen.TokenCursor import TokenCursor, iter_group_identifiers


class TokenCursorTest(unittest.TestCase):
    def test_consume_in_order(self):
        cursor = TokenCursor(tokenize('a , 5'))

        self.assertEqual(cursor.expect_identifier().text, 'a')
        cursor.expect_punctuation(',')
        self.assertEqual(cursor.expect_literal(int).value, 5)
        self.assertTrue(cursor.at_end())
        cursor.expect_end()

    def test_peek_does_not_consume(self):
        cursor = TokenCursor(tokenize('a b'))

        self.assertEqual(cursor.peek().text, 'a')
        self.assertEqual(cursor.peek().text, 'a')
        self.assertEqual(cursor.remaining(), 2)

    def test_mismatch_does_not_advance(self):
        cursor = TokenCursor(tokenize(', a'))

        with self.assertRaises(UnexpectedTokenError) as cm:
            cursor.expect_identifier(meaning='enum name')

        self.assertEqual(cm.exception.expected, 'enum name')
        self.assertEqual(cm.exception.found, "','")
        self.assertEqual(cursor.tell(), 0)

    def test_specific_identifier(self):
        cursor = TokenCursor(tokenize('grid'))

        with self.assertRaises(UnexpectedTokenError):
            cursor.expect_identifier('clear')

        self.assertEqual(cursor.expect_identifier('grid').text, 'grid')

    def test_exhausted(self):
        cursor = TokenCursor(())

        self.assertIsNone(cursor.peek())
        self.assertIsNone(cursor.advance())

        with self.assertRaises(UnexpectedTokenError) as cm:
            cursor.expect_identifier()

        self.assertEqual(cm.exception.found, 'end of input')

    def test_maybe_punctuation(self):
        cursor = TokenCursor(tokenize('| a'))

        self.assertFalse(cursor.maybe_punctuation(','))
        self.assertTrue(cursor.maybe_punctuation('|'))
        self.assertFalse(cursor.maybe_punctuation('|'))

    def test_literal_type(self):
        cursor = TokenCursor(tokenize('"x"'))

        with self.assertRaises(UnexpectedTokenError):
            cursor.expect_literal(int)

        self.assertEqual(cursor.expect_literal(str).value, 'x')

    def test_expect_end(self):
        cursor = TokenCursor(tokenize('a b'))
        cursor.advance()

        with self.assertRaises(UnexpectedTokenError):
            cursor.expect_end()

    def test_expect_group(self):
        cursor = TokenCursor(tokenize('a { b }'))

        with self.assertRaises(MissingGroupError):
            cursor.expect_group()

        cursor.advance()

        with self.assertRaises(MissingGroupError):
            cursor.expect_group(Delimiter.PAREN)

        inner = cursor.descend(Delimiter.BRACE)

        self.assertEqual(inner.expect_identifier().text, 'b')
        self.assertTrue(cursor.at_end())


class IterGroupIdentifiersTest(unittest.TestCase):
    def test_skips_non_identifiers(self):
        group = tokenize('{ A, B | C, 3, (D) }')[0]

        self.assertEqual([ident.text for ident in iter_group_identifiers(group)], ['A', 'B', 'C'])

    def test_restartable(self):
        group = tokenize('{ A, B }')[0]

        first = [ident.text for ident in iter_group_identifiers(group)]
        second = [ident.text for ident in iter_group_identifiers(group)]

        self.assertEqual(first, second)
