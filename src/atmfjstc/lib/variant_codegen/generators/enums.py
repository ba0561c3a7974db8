"""
Derives the basic enum definitions from a flat enum declaration: a size constant, an index-to-variant conversion and an
exact-size iterator.
"""

import logging

from typing import Iterable, Optional, Callable, Dict

from atmfjstc.lib.variant_codegen.GenerationConfig import GenerationConfig, DEFAULT_CONFIG
from atmfjstc.lib.variant_codegen.codegen.ast import CodegenNode, Atom, seq0, seq1, statement
from atmfjstc.lib.variant_codegen.emit import MatchArm, GeneratedDefinitions, match_statement, function_def, \
    enum_class, module
from atmfjstc.lib.variant_codegen.extract import Source, extract_enum
from atmfjstc.lib.variant_codegen.model import EnumDeclaration


LOG = logging.getLogger()


DEFAULT_DERIVES = ('size', 'from_index', 'iter')


def enum_size(decl: EnumDeclaration) -> CodegenNode:
    return Atom(f"SIZE = enum.nonmember({len(decl)})")


def enum_from_index(decl: EnumDeclaration) -> CodegenNode:
    """
    Builds the ``from_index`` classmethod. Indexes outside ``[0, SIZE)`` raise `IndexError`, and anything that is not an
    ``int`` (including ``bool``) raises `TypeError`.
    """
    arms = [
        MatchArm.returning([str(index)], f"cls.{variant}")
        for index, variant in enumerate(decl.variants.primaries())
    ]
    fallback = Atom(f'raise IndexError(f"Index {{value}} out of range for {decl.name} (size {len(decl)})")')
    type_guard = statement(
        "if isinstance(value, bool) or not isinstance(value, int):",
        Atom('raise TypeError(f"Index must be an int, not {type(value).__name__}")'),
    )

    return function_def(
        'from_index', 'cls, value: int', [seq1(type_guard, match_statement('value', arms, fallback))],
        returns=repr(decl.name), decorators=['classmethod'],
        doc=f"Returns the {decl.name} with the given index (its position in the declaration).",
    )


def enum_iter(decl: EnumDeclaration) -> CodegenNode:
    """
    Builds the ``iter_variants`` classmethod. Each call returns a fresh iterator over the variants in declaration order.
    The iterator knows how many items it has left (``len()`` works on it).
    """
    size = len(decl)

    arms = [
        MatchArm([str(index)], Atom(f"variant = cls.{variant}"))
        for index, variant in enumerate(decl.variants.primaries())
    ]

    iterator_class = statement(
        "class _VariantIterator:",
        seq1(
            function_def('__init__', 'self', [Atom('self._position = 0')]),
            function_def('__iter__', 'self', [Atom('return self')]),
            function_def('__len__', 'self', [Atom(f"return {size} - self._position")], returns='int'),
            function_def('__length_hint__', 'self', [Atom('return len(self)')], returns='int'),
            function_def(
                '__next__', 'self',
                [
                    seq1(
                        match_statement('self._position', arms, Atom('raise StopIteration')),
                        seq0(Atom('self._position += 1'), Atom('return variant')),
                    )
                ],
                returns=repr(decl.name),
            ),
        )
    )

    return function_def(
        'iter_variants', 'cls', [seq1(iterator_class, Atom('return _VariantIterator()'))],
        decorators=['classmethod'],
        doc=f"Iterates over all the {decl.name} variants, in declaration order.",
    )


_DERIVERS: Dict[str, Callable[[EnumDeclaration], CodegenNode]] = {
    'size': enum_size,
    'from_index': enum_from_index,
    'iter': enum_iter,
}

_SYMBOL_NAMES = {
    'size': 'SIZE',
    'from_index': 'from_index',
    'iter': 'iter_variants',
}

ENUM_SYMBOLS = tuple(_SYMBOL_NAMES.values())
"Names the variants of a flat enum cannot take, whichever definitions are derived"


def enum_definitions(decl: EnumDeclaration, derives: Iterable[str] = DEFAULT_DERIVES) -> GeneratedDefinitions:
    definitions = GeneratedDefinitions(decl.name)

    for derive in derives:
        deriver = _DERIVERS.get(derive)
        if deriver is None:
            raise ValueError(f"Unknown derived definition '{derive}', valid: {', '.join(_DERIVERS.keys())}")

        definitions.add(_SYMBOL_NAMES[derive], deriver(decl))

    return definitions


def generate_enum(
    source: Source, derives: Iterable[str] = DEFAULT_DERIVES, config: GenerationConfig = DEFAULT_CONFIG,
    expected_name: Optional[str] = None
) -> str:
    """
    Generates a complete module holding an ``enum.Enum`` class for a flat enum declaration.

    Args:
        source: The declaration, e.g. ``enum Direction { North, East, South, West }``.
        derives: Which of the derived definitions (``size``, ``from_index``, ``iter``) to include.
        config: Controls the layout of the generated code.
        expected_name: If given, only an enum with this name is considered.

    Returns:
        The text of the generated module.
    """
    decl = extract_enum(source, expected_name=expected_name, reserved=ENUM_SYMBOLS)

    LOG.debug(f"Generating enum {decl.name} with {len(decl)} variants")

    node = module(enum_class(decl.name, decl.variants.primaries(), enum_definitions(decl, derives)))

    return node.render_text(config.codegen_context())
