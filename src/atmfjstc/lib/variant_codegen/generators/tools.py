"""
Generators for the editor's tool-related enums:

- ``Bind``: every bindable action. It is made up of a list of binds given explicitly, followed by one bind per ``Tool``
  variant (read from the tool declaration file).
- ``Tool``: the methods of a hand-written ``Tool`` enum (labels, headers, icons, the associated bind etc.)
- ``SubTool``: the methods of a hand-written ``SubTool`` enum. A sub-tool's identifier starts with the name of the tool
  it belongs to, e.g. ``VertexMerge`` is the ``Merge`` sub-tool of the ``Vertex`` tool. Its bind description is read
  from a documentation fragment.
"""

import logging

from typing import Callable, List, Tuple

from atmfjstc.lib.variant_codegen.GenerationConfig import GenerationConfig, DEFAULT_CONFIG
from atmfjstc.lib.variant_codegen.case_transform import label, header, file_name, bind_label, bind_key, split_subtool
from atmfjstc.lib.variant_codegen.codegen.ast import CodegenNode, Atom
from atmfjstc.lib.variant_codegen.emit import MatchArm, GeneratedDefinitions, accessor_method, function_def, \
    variant_pattern, string_literal, enum_class, module
from atmfjstc.lib.variant_codegen.extract import Source, extract_enum, extract_identifier_list
from atmfjstc.lib.variant_codegen.files import FileProvider
from atmfjstc.lib.variant_codegen.generators.enums import enum_size, enum_iter
from atmfjstc.lib.variant_codegen.model import EnumDeclaration


LOG = logging.getLogger()


BIND_SYMBOLS = ('SIZE', 'iter_variants', 'config_file_key', 'label')

_TOOL_COMMON_SYMBOLS = (
    'label', 'header', 'icon_file_name', 'tooltip_label', 'change_conditions_met', 'is_subtool', 'index', 'bind',
)

# Hand-written methods that the generated ones call
_TOOL_HELPERS = ('keycode_str', 'conditions_met')

TOOL_SYMBOLS = _TOOL_COMMON_SYMBOLS + _TOOL_HELPERS
SUBTOOL_SYMBOLS = _TOOL_COMMON_SYMBOLS + ('tool',) + _TOOL_HELPERS


def _string_accessor(
    name: str, decl: EnumDeclaration, transform: Callable[[str], str], doc: str = None
) -> CodegenNode:
    arms = [
        MatchArm.returning([variant_pattern(decl.name, identifier)], string_literal(transform(identifier)))
        for identifier in decl.variants.primaries()
    ]

    return accessor_method(name, decl.name, arms, 'str', doc=doc)


def _index_accessor(decl: EnumDeclaration) -> CodegenNode:
    arms = [
        MatchArm.returning([variant_pattern(decl.name, identifier)], str(index))
        for index, identifier in enumerate(decl.variants.primaries())
    ]

    return accessor_method('index', decl.name, arms, 'int')


def _common_tool_definitions(decl: EnumDeclaration, header_suffix: str, config: GenerationConfig):
    return [
        (
            'header',
            _string_accessor(
                'header', decl, lambda identifier: header(identifier, header_suffix), doc="The uppercase tool name."
            )
        ),
        (
            'icon_file_name',
            _string_accessor(
                'icon_file_name', decl, lambda identifier: file_name(identifier, config.icon_extension),
                doc="The file name of the associated icon."
            )
        ),
    ]


def _trailing_tool_definitions(decl: EnumDeclaration, is_subtool: bool, tooltip_expr: str):
    return [
        (
            'tooltip_label',
            function_def('tooltip_label', 'self, binds', [Atom(f"return {tooltip_expr}")], returns='str')
        ),
        (
            'change_conditions_met',
            function_def(
                'change_conditions_met', 'self, change_conditions',
                [Atom('return self.conditions_met(change_conditions)')], returns='bool'
            )
        ),
        ('is_subtool', function_def('is_subtool', 'self', [Atom(f"return {is_subtool}")], returns='bool')),
        ('index', _index_accessor(decl)),
    ]


def bind_declaration(source: Source, files: FileProvider, config: GenerationConfig = DEFAULT_CONFIG) -> EnumDeclaration:
    """
    Assembles the ``Bind`` variants: the explicitly listed binds, followed by the variants of the ``Tool`` enum.
    """
    tools = extract_enum(
        files.read_text(config.tool_declaration_path), expected_name='Tool', reserved=BIND_SYMBOLS
    )
    binds = extract_identifier_list(source, reserved=BIND_SYMBOLS + tools.variants.primaries())

    LOG.debug(f"Bind: {len(binds)} explicit binds, {len(tools)} tool binds")

    return EnumDeclaration('Bind', binds.concat(tools.variants))


def bind_definitions(decl: EnumDeclaration) -> GeneratedDefinitions:
    return GeneratedDefinitions(decl.name, [
        ('SIZE', enum_size(decl)),
        ('iter_variants', enum_iter(decl)),
        (
            'config_file_key',
            _string_accessor(
                'config_file_key', decl, bind_key, doc=f"The string key used in the config file for this {decl.name}."
            )
        ),
        ('label', _string_accessor('label', decl, bind_label, doc=f"The text representing this {decl.name} in UI.")),
    ])


def generate_bind_enum(source: Source, files: FileProvider, config: GenerationConfig = DEFAULT_CONFIG) -> str:
    """
    Generates a complete module with the ``Bind`` enum.

    Args:
        source: A comma-separated list of bind identifiers, e.g. ``Left, Right, Snap_ToGrid``.
        files: Provides the tool declaration (at `config.tool_declaration_path`).
        config: Generation options.

    Raises:
        ExternalResourceMissingError: If the tool declaration file cannot be found.
        MissingKeywordError: If the tool declaration file does not declare ``enum Tool``.
    """
    decl = bind_declaration(source, files, config)

    node = module(enum_class(
        decl.name, decl.variants.primaries(), bind_definitions(decl), doc="The binds associated with the editor actions."
    ))

    return node.render_text(config.codegen_context())


def tool_definitions(decl: EnumDeclaration, config: GenerationConfig = DEFAULT_CONFIG) -> GeneratedDefinitions:
    bind_arms = [
        MatchArm.returning([variant_pattern(decl.name, identifier)], variant_pattern('Bind', identifier))
        for identifier in decl.variants.primaries()
    ]

    return GeneratedDefinitions(decl.name, [
        ('label', _string_accessor('label', decl, label)),
        *_common_tool_definitions(decl, config.tool_header_suffix, config),
        *_trailing_tool_definitions(decl, False, 'f"{self.label()} ({self.keycode_str(binds)})"'),
        ('bind', accessor_method('bind', decl.name, bind_arms, "'Bind'")),
    ])


def generate_tool_methods(source: Source, config: GenerationConfig = DEFAULT_CONFIG) -> str:
    """
    Generates the methods of the ``Tool`` enum, rendered as they should appear inside its class body.

    The generated ``bind`` method refers to a ``Bind`` enum with a variant for every tool (see `generate_bind_enum`).
    The ``tooltip_label`` method relies on hand-written ``keycode_str`` and ``conditions_met`` methods.
    """
    decl = extract_enum(source, expected_name='Tool', reserved=TOOL_SYMBOLS)

    return tool_definitions(decl, config).render(config.codegen_context().derive(sub_one_indent=True))


def read_subtool_binds(
    decl: EnumDeclaration, files: FileProvider, config: GenerationConfig = DEFAULT_CONFIG
) -> List[Tuple[str, str]]:
    """
    Reads the documentation fragment of every sub-tool.

    Returns:
        A list of (identifier, fragment text) pairs, in declaration order.

    Raises:
        ExternalResourceMissingError: If the fragment of any sub-tool is missing.
    """
    result = []

    for identifier in decl.variants.primaries():
        _, _, bind = split_subtool(identifier)
        result.append((identifier, files.read_text(f"{config.subtool_docs_dir}/{bind}.md")))

    return result


def subtool_definitions(
    decl: EnumDeclaration, files: FileProvider, config: GenerationConfig = DEFAULT_CONFIG
) -> GeneratedDefinitions:
    binds = read_subtool_binds(decl, files, config)

    tool_arms = [
        MatchArm.returning(
            [variant_pattern(decl.name, identifier)], variant_pattern('Tool', split_subtool(identifier)[0])
        )
        for identifier in decl.variants.primaries()
    ]
    bind_arms = [
        MatchArm.returning([variant_pattern(decl.name, identifier)], string_literal(text))
        for identifier, text in binds
    ]

    return GeneratedDefinitions(decl.name, [
        ('label', _string_accessor('label', decl, lambda identifier: split_subtool(identifier)[1])),
        *_common_tool_definitions(decl, config.subtool_header_suffix, config),
        *_trailing_tool_definitions(decl, True, 'f"{self.label()} ({self.bind()})"'),
        ('tool', accessor_method('tool', decl.name, tool_arms, "'Tool'")),
        ('bind', accessor_method('bind', decl.name, bind_arms, 'str')),
    ])


def generate_subtool_methods(
    source: Source, files: FileProvider, config: GenerationConfig = DEFAULT_CONFIG
) -> str:
    """
    Generates the methods of the ``SubTool`` enum, rendered as they should appear inside its class body.

    Raises:
        ExternalResourceMissingError: If the documentation fragment (``<subtool_docs_dir>/<bind key>.md``) of any
            sub-tool is missing. Nothing is generated in that case.
    """
    decl = extract_enum(source, expected_name='SubTool', reserved=SUBTOOL_SYMBOLS)

    return subtool_definitions(decl, files, config).render(config.codegen_context().derive(sub_one_indent=True))
