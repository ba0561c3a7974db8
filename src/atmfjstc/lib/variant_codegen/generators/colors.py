"""
Generates the methods of a drawing color enum: its config keys and labels, and the heights at which the elements drawn
in each color are layered.

The declaration is sectioned::

    clear: Clear,
    extensions: Extensions,
    grid: GridLines, GridCoordinates,
    entities: NonSelectedEntity, SelectedEntity | HighlightedEntity,
    ui: Hovered, Cursor

Heights are handed out by three chained passes:

1. *entity*: one height per ``entities`` slot, spaced so that each entity has room for its stacked textures. The first
   height after this pass is reserved for the clip overlay.
2. *line*: one height per slot of ``grid``, ``extensions``, ``entities`` and ``ui`` (in this order). The first two
   heights after this pass are reserved for the thing angle indicator.
3. *square*: one height per ``ui`` slot, for square highlights.

The ``clear`` color only gets a key and a label.
"""

import logging

from typing import List

from atmfjstc.lib.variant_codegen.GenerationConfig import GenerationConfig, DEFAULT_CONFIG
from atmfjstc.lib.variant_codegen.case_transform import label, key
from atmfjstc.lib.variant_codegen.codegen.ast import Atom
from atmfjstc.lib.variant_codegen.emit import MatchArm, GeneratedDefinitions, accessor_method, function_def, \
    variant_pattern, string_literal, float_literal, enum_class, module
from atmfjstc.lib.variant_codegen.extract import Source, extract_sections
from atmfjstc.lib.variant_codegen.heights import LayerPass, LayerAllocation, HeightAllocation, allocate_layers
from atmfjstc.lib.variant_codegen.model import SectionSpec, SectionedDeclaration


LOG = logging.getLogger()


COLOR_SECTIONS = (
    SectionSpec('clear', single=True),
    SectionSpec('extensions', single=True),
    SectionSpec('grid'),
    SectionSpec('entities'),
    SectionSpec('ui'),
)

COLOR_SYMBOLS = (
    'entity_height', 'polygon_height', 'clip_height', 'line_height', 'thing_angle_indicator_height',
    'square_hgl_height', 'config_file_key', 'label',
)


def color_layer_passes(decl: SectionedDeclaration, config: GenerationConfig = DEFAULT_CONFIG) -> List[LayerPass]:
    return [
        LayerPass('entity', (decl['entities'],), interval=config.entity_interval),
        LayerPass(
            'line', (decl['grid'], decl['extensions'], decl['entities'], decl['ui']),
            interval=config.line_interval, gap_before=config.clip_gap, reserved=1,
        ),
        LayerPass(
            'square', (decl['ui'],),
            interval=config.line_interval, gap_before=config.thing_angle_gap, reserved=2,
        ),
    ]


def allocate_color_heights(decl: SectionedDeclaration, config: GenerationConfig = DEFAULT_CONFIG) -> LayerAllocation:
    return allocate_layers(color_layer_passes(decl, config), config.base_height)


def color_definitions(
    decl: SectionedDeclaration, class_name: str = 'Color', config: GenerationConfig = DEFAULT_CONFIG
) -> GeneratedDefinitions:
    layers = allocate_color_heights(decl, config)

    clip_height = layers.reserved_heights('line')[0]
    thing_angle_heights = layers.reserved_heights('square')

    LOG.debug(f"{class_name}: clip at {clip_height}, thing angle indicator at {thing_angle_heights}")

    def _height_method(name: str, allocation: HeightAllocation, doc: str):
        arms = [
            MatchArm.returning(
                [variant_pattern(class_name, identifier) for identifier in slot.identifiers()],
                float_literal(height)
            )
            for slot, height in allocation.heights
        ]

        return accessor_method(name, class_name, arms, 'float', doc=doc)

    def _string_method(name: str, transform, doc: str):
        arms = [
            MatchArm.returning([variant_pattern(class_name, identifier)], string_literal(transform(identifier)))
            for identifier in decl.identifiers()
        ]

        return accessor_method(name, class_name, arms, 'str', doc=doc)

    return GeneratedDefinitions(class_name, [
        (
            'entity_height',
            _height_method(
                'entity_height', layers['entity'],
                f"The height at which map elements colored with a certain {class_name} should be drawn."
            )
        ),
        (
            'polygon_height',
            function_def(
                'polygon_height', 'self', [Atom('return self.entity_height() - 1.0')], returns='float',
                doc="The draw height of an untextured polygon.",
            )
        ),
        (
            'clip_height',
            function_def(
                'clip_height', '', [Atom(f"return {float_literal(clip_height)}")], returns='float',
                decorators=['staticmethod'], doc="The draw height of the clip overlay.",
            )
        ),
        ('line_height', _height_method('line_height', layers['line'], "The draw height of the lines.")),
        (
            'thing_angle_indicator_height',
            function_def(
                'thing_angle_indicator_height', '',
                [Atom(f"return ({', '.join(float_literal(height) for height in thing_angle_heights)})")],
                returns='tuple[float, float]', decorators=['staticmethod'],
                doc="The draw heights of the thing angle indicator.",
            )
        ),
        (
            'square_hgl_height',
            _height_method('square_hgl_height', layers['square'], "The draw height of the square highlights.")
        ),
        (
            'config_file_key',
            _string_method(
                'config_file_key', key, f"The config file key of the drawn color associated with the {class_name}."
            )
        ),
        ('label', _string_method('label', label, f"The text representing the {class_name} in UI elements.")),
    ])


def generate_color_methods(
    source: Source, class_name: str = 'Color', config: GenerationConfig = DEFAULT_CONFIG
) -> str:
    """
    Generates the color methods, rendered as they should appear inside the body of the color class.
    """
    decl = extract_sections(source, COLOR_SECTIONS, reserved=COLOR_SYMBOLS)

    return color_definitions(decl, class_name, config).render(config.codegen_context().derive(sub_one_indent=True))


def generate_color_enum(source: Source, class_name: str = 'Color', config: GenerationConfig = DEFAULT_CONFIG) -> str:
    """
    Generates a complete module with the color enum. Every identifier, aliases included, becomes a member, in
    declaration order.
    """
    decl = extract_sections(source, COLOR_SECTIONS, reserved=COLOR_SYMBOLS)

    node = module(enum_class(class_name, decl.identifiers(), color_definitions(decl, class_name, config)))

    return node.render_text(config.codegen_context())
