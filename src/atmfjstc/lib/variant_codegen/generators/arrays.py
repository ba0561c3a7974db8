"""
Generators for module-level constant arrays.
"""

import logging

from typing import Tuple

from atmfjstc.lib.variant_codegen.GenerationConfig import GenerationConfig, DEFAULT_CONFIG
from atmfjstc.lib.variant_codegen.codegen.ast import Atom, Block, ItemsList, seq1
from atmfjstc.lib.variant_codegen.emit import string_literal
from atmfjstc.lib.variant_codegen.extract import Source, as_tokens, located_errors
from atmfjstc.lib.variant_codegen.tokens import Token, Identifier, Literal
from atmfjstc.lib.variant_codegen.TokenCursor import TokenCursor


LOG = logging.getLogger()


def _parse_name_and_count(cursor: TokenCursor) -> Tuple[str, int]:
    name = cursor.expect_identifier(meaning='the array name').text
    cursor.expect_punctuation(',', meaning="',' after the array name")
    count = cursor.expect_literal(int, meaning='the number of items').value

    return name, count


def _is_prefix(token: Token) -> bool:
    return isinstance(token, Identifier) or (isinstance(token, Literal) and isinstance(token.value, str))


def str_array(source: Source, config: GenerationConfig = DEFAULT_CONFIG) -> str:
    """
    Generates a tuple of strings formed by a prefix followed by each index.

    The source has the form ``NAME, N[, prefix]``, where the prefix may be an identifier or a string literal, e.g.
    ``LABELS, 3, i_`` generates::

        LABELS: tuple[str, ...] = ("i_0", "i_1", "i_2")
    """
    with located_errors(source):
        cursor = TokenCursor(as_tokens(source))

        name, count = _parse_name_and_count(cursor)
        prefix = ''

        if cursor.maybe_punctuation(','):
            token = cursor.expect(_is_prefix, 'an identifier or string prefix')
            prefix = token.text if isinstance(token, Identifier) else token.value

        cursor.expect_end()

    LOG.debug(f"Generating {name} with {count} strings")

    node = Block(
        ItemsList([Atom(string_literal(f"{prefix}{index}")) for index in range(count)], joiner=', ',
                  trailing_comma=(count == 1)),
        f"{name}: tuple[str, ...] = (", ')'
    )

    return node.render_text(config.codegen_context())


def mesh_indexes(source: Source, config: GenerationConfig = DEFAULT_CONFIG) -> str:
    """
    Generates the indexes for triangulating a convex polygon mesh as a fan around its first vertex.

    The source has the form ``NAME, N``. The output defines ``MAX_MESH_TRIANGLES = N`` and ``NAME``, a flat list of
    ``0, i, i + 1`` index triples for each ``i`` in ``1..N``.
    """
    with located_errors(source):
        cursor = TokenCursor(as_tokens(source))

        name, count = _parse_name_and_count(cursor)
        cursor.expect_end()

    LOG.debug(f"Generating {name} for {count} triangles")

    node = seq1(
        Atom(f"MAX_MESH_TRIANGLES = {count}"),
        Block(
            ItemsList(
                [Atom(f"0, {index}, {index + 1}") for index in range(1, count + 1)],
                joiner=', ', allow_horiz=False, trailing_comma=True,
            ),
            f"{name}: list[int] = [", ']'
        ),
    )

    return node.render_text(config.codegen_context())
