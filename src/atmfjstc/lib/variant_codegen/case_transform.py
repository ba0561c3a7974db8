"""
Derives presentation strings (labels, config keys, headers, file names) from a canonical CamelCase identifier.

All transforms are a single left-to-right scan over the identifier. A word boundary occurs before every uppercase
letter other than the first character. The ``bind_*`` variants additionally treat underscores in the identifier as
boundaries (the underscore itself is dropped).

The transforms are consistent with each other, in that::

    key(label(x).lower().replace(' ', '_')) == key(x)
"""

from dataclasses import dataclass
from typing import Tuple, List


@dataclass(frozen=True)
class IdentifierForms:
    label: str
    key: str
    header: str
    file_name: str


def split_words(identifier: str, underscore_boundaries: bool = False) -> List[str]:
    """
    Splits an identifier into its words, preserving their case.

    Args:
        identifier: The identifier to split.
        underscore_boundaries: If true, underscores also separate words and are removed. Runs of underscores count as a
            single boundary.
    """
    words = []
    current = ''

    for index, char in enumerate(identifier):
        if underscore_boundaries and (char == '_'):
            if current != '':
                words.append(current)
            current = ''
            continue

        if (index > 0) and char.isupper() and (current != ''):
            words.append(current)
            current = ''

        current += char

    if current != '':
        words.append(current)

    return words


def label(identifier: str) -> str:
    """``MoveThing`` -> ``Move Thing``"""
    return ' '.join(split_words(identifier))


def key(identifier: str) -> str:
    """``MoveThing`` -> ``move_thing``"""
    return '_'.join(split_words(identifier)).lower()


def header(identifier: str, suffix: str = '') -> str:
    """``MoveThing`` -> ``MOVE THING`` + suffix"""
    return label(identifier).upper() + suffix


def file_name(identifier: str, extension: str = '') -> str:
    """``MoveThing`` -> ``move_thing`` + extension"""
    return key(identifier) + extension


def identifier_forms(identifier: str, header_suffix: str = '', extension: str = '') -> IdentifierForms:
    return IdentifierForms(
        label=label(identifier),
        key=key(identifier),
        header=header(identifier, header_suffix),
        file_name=file_name(identifier, extension),
    )


def bind_label(identifier: str) -> str:
    """``Snap_ToGrid`` -> ``Snap To Grid``"""
    return ' '.join(split_words(identifier, underscore_boundaries=True))


def bind_key(identifier: str) -> str:
    """``Snap_ToGrid`` -> ``snap_to_grid``"""
    return '_'.join(split_words(identifier, underscore_boundaries=True)).lower()


def split_subtool(identifier: str) -> Tuple[str, str, str]:
    """
    Splits the identifier of a sub-tool into the parts that relate it to its owning tool.

    The first word names the tool; the remaining words make up the sub-tool's own label. For instance, ``VertexMerge``
    belongs to tool ``Vertex``, has the label ``Merge`` and the bind key ``vertex_merge``.

    Returns:
        A (tool, label, bind) tuple. The label is empty if the identifier consists of a single word.
    """
    words = split_words(identifier)

    return words[0], ' '.join(words[1:]), key(identifier)
