import unittest

from atmfjstc.lib.variant_codegen.errors import UnexpectedTokenError, MissingKeywordError, MissingGroupError
from atmfjstc.lib.variant_codegen.extract import extract_enum, extract_sections, extract_identifier_list
from atmfjstc.lib.variant_codegen.generators.colors import COLOR_SECTIONS
from atmfjstc.lib.variant_codegen.model import VariantSlot
from atmfjstc.lib.variant_codegen.tokens import tokenize


class ExtractEnumTest(unittest.TestCase):
    def test_basic(self):
        decl = extract_enum('pub enum Color { Red, Green, Blue }')

        self.assertEqual(decl.name, 'Color')
        self.assertEqual(decl.variants.primaries(), ('Red', 'Green', 'Blue'))
        self.assertEqual(len(decl), 3)

    def test_from_tokens(self):
        decl = extract_enum(tokenize('enum Color { Red }'))

        self.assertEqual(decl.variants.primaries(), ('Red',))

    def test_skips_attributes(self):
        decl = extract_enum('#[derive(Clone, Copy)]\npub(crate) enum Tool\n{\n    Square,\n    Thing,\n}')

        self.assertEqual(decl.name, 'Tool')
        self.assertEqual(decl.variants.primaries(), ('Square', 'Thing'))

    def test_expected_name(self):
        decl = extract_enum('enum Other { X } enum Tool { A, B }', expected_name='Tool')

        self.assertEqual(decl.variants.primaries(), ('A', 'B'))

    def test_expected_name_missing(self):
        with self.assertRaises(MissingKeywordError) as cm:
            extract_enum('enum Other { X }', expected_name='Tool')

        self.assertEqual(cm.exception.keyword, 'enum Tool')

    def test_no_enum(self):
        with self.assertRaises(MissingKeywordError):
            extract_enum('struct Color { Red }')

    def test_missing_name(self):
        with self.assertRaises(UnexpectedTokenError):
            extract_enum('enum { Red }')

    def test_missing_group(self):
        with self.assertRaises(MissingGroupError) as cm:
            extract_enum('enum Color;')

        self.assertEqual(cm.exception.location, (1, 11))

    def test_empty(self):
        self.assertEqual(len(extract_enum('enum Empty {}')), 0)


COLORS = """
clear: Clear,
extensions: Extensions,
grid: GridLines, GridCoordinates,
entities: NonSelectedEntity, SelectedEntity | HighlightedEntity,
ui: Hovered, Cursor
"""


class ExtractSectionsTest(unittest.TestCase):
    def test_basic(self):
        decl = extract_sections(COLORS, COLOR_SECTIONS)

        self.assertEqual([section.name for section in decl.sections], ['clear', 'extensions', 'grid', 'entities', 'ui'])
        self.assertEqual(decl['clear'].primaries(), ('Clear',))
        self.assertEqual(decl['grid'].primaries(), ('GridLines', 'GridCoordinates'))
        self.assertEqual(
            decl['entities'].slots,
            (VariantSlot('NonSelectedEntity'), VariantSlot('SelectedEntity', ('HighlightedEntity',)))
        )

    def test_aliases_share_a_slot(self):
        decl = extract_sections(COLORS, COLOR_SECTIONS)

        self.assertEqual(len(decl['entities']), 2)
        self.assertEqual(
            decl['entities'].identifiers(), ('NonSelectedEntity', 'SelectedEntity', 'HighlightedEntity')
        )

    def test_all_identifiers(self):
        decl = extract_sections(COLORS, COLOR_SECTIONS)

        self.assertEqual(len(decl.identifiers()), 9)

    def test_without_commas_between_sections(self):
        decl = extract_sections('clear: C extensions: E grid: A entities: B ui: D', COLOR_SECTIONS)

        self.assertEqual(decl.identifiers(), ('C', 'E', 'A', 'B', 'D'))

    def test_empty_section(self):
        decl = extract_sections('clear: C, extensions: E, grid: entities: B, ui: D', COLOR_SECTIONS)

        self.assertEqual(len(decl['grid']), 0)

    def test_out_of_order(self):
        with self.assertRaises(UnexpectedTokenError):
            extract_sections('extensions: E, clear: C, grid: A, entities: B, ui: D', COLOR_SECTIONS)

    def test_missing_section(self):
        with self.assertRaises(MissingKeywordError) as cm:
            extract_sections('clear: C, extensions: E, grid: A', COLOR_SECTIONS)

        self.assertEqual(cm.exception.keyword, 'entities')

    def test_missing_colon(self):
        with self.assertRaises(UnexpectedTokenError):
            extract_sections('clear C, extensions: E, grid: A, entities: B, ui: D', COLOR_SECTIONS)

    def test_single_section_with_two_entries(self):
        with self.assertRaises(UnexpectedTokenError):
            extract_sections('clear: C, X, extensions: E, grid: A, entities: B, ui: D', COLOR_SECTIONS)

    def test_dangling_alias(self):
        with self.assertRaises(UnexpectedTokenError):
            extract_sections('clear: C, extensions: E, grid: A |, entities: B, ui: D', COLOR_SECTIONS)

    def test_unexpected_token_in_section(self):
        with self.assertRaises(UnexpectedTokenError) as cm:
            extract_sections('clear: C, extensions: E,\ngrid: A; entities: B, ui: D', COLOR_SECTIONS)

        self.assertEqual(cm.exception.location, (2, 8))


class ExtractIdentifierListTest(unittest.TestCase):
    def test_basic(self):
        self.assertEqual(extract_identifier_list('A, B, C').primaries(), ('A', 'B', 'C'))

    def test_trailing_comma(self):
        self.assertEqual(extract_identifier_list('A, B,').primaries(), ('A', 'B'))

    def test_empty(self):
        self.assertEqual(len(extract_identifier_list('')), 0)

    def test_missing_comma(self):
        with self.assertRaises(UnexpectedTokenError):
            extract_identifier_list('A B')


class VariantNamesTest(unittest.TestCase):
    def test_python_keyword_in_enum(self):
        with self.assertRaises(UnexpectedTokenError) as cm:
            extract_enum('enum Selection { None, Single, Multiple }')

        self.assertEqual(cm.exception.found, "Python keyword 'None'")
        self.assertEqual(cm.exception.offset, 17)
        self.assertEqual(cm.exception.location, (1, 18))

    def test_python_keyword_as_enum_name(self):
        with self.assertRaises(UnexpectedTokenError):
            extract_enum('enum class { A }')

    def test_soft_keywords_allowed(self):
        decl = extract_enum('enum Kind { match, case, type }')

        self.assertEqual(decl.variants.primaries(), ('match', 'case', 'type'))

    def test_repeated_identifier(self):
        with self.assertRaises(UnexpectedTokenError) as cm:
            extract_enum('enum E { A, B, A }')

        self.assertEqual(cm.exception.offset, 15)

    def test_leading_underscore(self):
        with self.assertRaises(UnexpectedTokenError):
            extract_identifier_list('Left, _Hidden')

    def test_reserved(self):
        self.assertEqual(extract_identifier_list('A, Label', reserved=['label']).primaries(), ('A', 'Label'))

        with self.assertRaises(UnexpectedTokenError) as cm:
            extract_identifier_list('A, label', reserved=['label'])

        self.assertEqual(cm.exception.found, "reserved name 'label'")

    def test_python_keyword_as_alias(self):
        with self.assertRaises(UnexpectedTokenError) as cm:
            extract_sections('clear: C, extensions: E, grid: G | in, entities: N, ui: U', COLOR_SECTIONS)

        self.assertEqual(cm.exception.found, "Python keyword 'in'")

    def test_repeated_across_sections(self):
        with self.assertRaises(UnexpectedTokenError):
            extract_sections('clear: C, extensions: E, grid: G, entities: G, ui: U', COLOR_SECTIONS)

    def test_skipped_enums_are_not_checked(self):
        decl = extract_enum('enum Other { None } enum Tool { A }', expected_name='Tool')

        self.assertEqual(decl.variants.primaries(), ('A',))
