import unittest

from atmfjstc.lib.variant_codegen.errors import UnexpectedTokenError, MissingKeywordError, HeightAllocationError
from atmfjstc.lib.variant_codegen.GenerationConfig import GenerationConfig
from atmfjstc.lib.variant_codegen.extract import extract_sections
from atmfjstc.lib.variant_codegen.generators.colors import generate_color_enum, generate_color_methods, \
    allocate_color_heights, color_definitions, COLOR_SECTIONS, COLOR_SYMBOLS


COLORS = """
clear: Clear,
extensions: Extensions,
grid: GridLines, GridCoordinates,
entities: NonSelectedEntity, SelectedEntity | HighlightedEntity,
ui: Hovered, Cursor
"""


def load_color_enum(text: str, name: str = 'Color'):
    namespace = {}
    exec(text, namespace)

    return namespace[name]


class ColorEnumTest(unittest.TestCase):
    def setUp(self):
        self.Color = load_color_enum(generate_color_enum(COLORS))

    def test_members(self):
        self.assertEqual(
            [color.name for color in self.Color],
            [
                'Clear', 'Extensions', 'GridLines', 'GridCoordinates', 'NonSelectedEntity', 'SelectedEntity',
                'HighlightedEntity', 'Hovered', 'Cursor',
            ]
        )

    def test_entity_heights(self):
        self.assertEqual(self.Color.NonSelectedEntity.entity_height(), 1.0)
        self.assertEqual(self.Color.SelectedEntity.entity_height(), 22.0)
        self.assertEqual(self.Color.HighlightedEntity.entity_height(), 22.0)

    def test_polygon_height(self):
        self.assertEqual(self.Color.SelectedEntity.polygon_height(), 21.0)

    def test_clip_height(self):
        self.assertEqual(self.Color.clip_height(), 43.0)

    def test_line_heights(self):
        self.assertEqual(
            [
                self.Color.GridLines.line_height(),
                self.Color.GridCoordinates.line_height(),
                self.Color.Extensions.line_height(),
                self.Color.NonSelectedEntity.line_height(),
                self.Color.SelectedEntity.line_height(),
                self.Color.HighlightedEntity.line_height(),
                self.Color.Hovered.line_height(),
                self.Color.Cursor.line_height(),
            ],
            [44.0, 45.0, 46.0, 47.0, 48.0, 48.0, 49.0, 50.0]
        )

    def test_thing_angle_indicator(self):
        self.assertEqual(self.Color.thing_angle_indicator_height(), (51.0, 52.0))

    def test_square_highlight_heights(self):
        self.assertEqual(self.Color.Hovered.square_hgl_height(), 53.0)
        self.assertEqual(self.Color.Cursor.square_hgl_height(), 54.0)

    def test_heights_are_layered(self):
        entity_heights = {self.Color.NonSelectedEntity.entity_height(), self.Color.SelectedEntity.entity_height()}
        line_heights = {
            color.line_height() for color in self.Color if color not in (self.Color.Clear,)
        }

        self.assertLess(max(entity_heights), self.Color.clip_height())
        self.assertLess(self.Color.clip_height(), min(line_heights))
        self.assertLess(max(line_heights), self.Color.thing_angle_indicator_height()[0])
        self.assertLess(self.Color.thing_angle_indicator_height()[1], self.Color.Hovered.square_hgl_height())

    def test_heights_outside_layer_are_invalid(self):
        with self.assertRaises(ValueError):
            self.Color.Clear.entity_height()
        with self.assertRaises(ValueError):
            self.Color.Clear.line_height()
        with self.assertRaises(ValueError):
            self.Color.GridLines.square_hgl_height()

    def test_keys_and_labels(self):
        self.assertEqual(self.Color.HighlightedEntity.config_file_key(), 'highlighted_entity')
        self.assertEqual(self.Color.HighlightedEntity.label(), 'Highlighted Entity')
        self.assertEqual(self.Color.Clear.config_file_key(), 'clear')
        self.assertEqual(self.Color.GridCoordinates.label(), 'Grid Coordinates')

    def test_keys_unique(self):
        keys = [color.config_file_key() for color in self.Color]

        self.assertEqual(len(keys), len(set(keys)))


class ColorOptionsTest(unittest.TestCase):
    def test_texture_range(self):
        Color = load_color_enum(generate_color_enum(COLORS, config=GenerationConfig(texture_height_range_end=10)))

        self.assertEqual(Color.SelectedEntity.entity_height(), 12.0)
        self.assertEqual(Color.clip_height(), 23.0)

    def test_class_name(self):
        Paint = load_color_enum(generate_color_enum(COLORS, class_name='Paint'), 'Paint')

        self.assertEqual(Paint.Cursor.label(), 'Cursor')

    def test_methods_only(self):
        text = generate_color_methods(COLORS)

        self.assertTrue(text.startswith('def entity_height(self) -> float:\n'))
        self.assertIn('case Color.SelectedEntity | Color.HighlightedEntity:\n', text)
        self.assertNotIn('class ', text)

    def test_allocation_is_deterministic(self):
        decl = extract_sections(COLORS, COLOR_SECTIONS)

        self.assertEqual(allocate_color_heights(decl), allocate_color_heights(decl))

    def test_out_of_order(self):
        with self.assertRaises(UnexpectedTokenError):
            generate_color_enum('extensions: E, clear: C, grid: G, entities: N, ui: U')

    def test_missing_section(self):
        with self.assertRaises(MissingKeywordError):
            generate_color_methods('clear: C, extensions: E, grid: G')

    def test_line_interval_spaces_thing_angle(self):
        Color = load_color_enum(generate_color_enum(COLORS, config=GenerationConfig(line_interval=0.5)))

        self.assertEqual(Color.Cursor.line_height(), 47.0)
        self.assertEqual(Color.thing_angle_indicator_height(), (47.5, 48.0))
        self.assertEqual(Color.Hovered.square_hgl_height(), 49.5)

    def test_clip_overlay_needs_room(self):
        with self.assertRaises(HeightAllocationError):
            generate_color_enum(COLORS, config=GenerationConfig(clip_gap=0.0))

    def test_thing_angle_indicator_needs_room(self):
        with self.assertRaises(HeightAllocationError):
            generate_color_enum(COLORS, config=GenerationConfig(thing_angle_gap=1.0))


class ColorVariantNamesTest(unittest.TestCase):
    def test_python_keyword(self):
        with self.assertRaises(UnexpectedTokenError):
            generate_color_enum('clear: C, extensions: E, grid: True, entities: N, ui: U')

    def test_generated_symbol(self):
        with self.assertRaises(UnexpectedTokenError):
            generate_color_methods('clear: C, extensions: E, grid: G, entities: N, ui: U | label')

    def test_symbols_cover_definitions(self):
        decl = extract_sections(COLORS, COLOR_SECTIONS)

        self.assertEqual(set(color_definitions(decl).keys()), set(COLOR_SYMBOLS))
