"""
Recovers variant lists and labeled sections from a token sequence.

Two input shapes are supported:

- The *flat enum* shape, e.g. ``pub enum Color { Red, Green, Blue }``. Only the ``enum`` keyword, the name following it
  and the bracketed list of identifiers are consulted; anything else is scanned past.
- The *sectioned* shape, e.g. ``clear: Clear, extensions: Ext, grid: A, B | C, entities: D, ui: E``. Sections must
  appear in the exact order of the vocabulary passed by the caller. The ``|`` marker attaches an alias to the
  preceding identifier; the alias shares its slot.

Every variant identifier must be usable as a member name in the generated Python class: it cannot be a Python keyword,
start with an underscore, appear twice in the same declaration, or be one of the `reserved` names (i.e. the names of
the definitions generated alongside the variants).

All functions fail fast: the first malformed token raises an exception, and nothing is returned.
"""

import keyword

from contextlib import contextmanager
from typing import Sequence, Optional, Union, ContextManager, Iterable, List, Set

from atmfjstc.lib.variant_codegen.errors import UnexpectedTokenError, MissingKeywordError, SourceLocatedError
from atmfjstc.lib.variant_codegen.model import VariantSlot, VariantList, SectionSpec, Section, \
    SectionedDeclaration, EnumDeclaration
from atmfjstc.lib.variant_codegen.tokens import Token, Identifier, Delimiter, tokenize, locate_error
from atmfjstc.lib.variant_codegen.TokenCursor import TokenCursor, iter_group_identifiers


Source = Union[str, Sequence[Token]]


class VariantNameChecker:
    """
    Validates the variant identifiers of one declaration as they are extracted.
    """

    _reserved: frozenset
    _seen: Set[str]

    def __init__(self, reserved: Iterable[str] = ()):
        self._reserved = frozenset(reserved)
        self._seen = set()

    def __call__(self, token: Identifier) -> str:
        name = token.text

        if keyword.iskeyword(name):
            raise UnexpectedTokenError(f"Python keyword '{name}'", 'a variant identifier', token.offset)
        if name.startswith('_'):
            raise UnexpectedTokenError(f"'{name}'", "a variant identifier not starting with '_'", token.offset)
        if name in self._reserved:
            raise UnexpectedTokenError(f"reserved name '{name}'", 'a variant identifier', token.offset)
        if name in self._seen:
            raise UnexpectedTokenError(f"repeated identifier '{name}'", 'a distinct variant identifier', token.offset)

        self._seen.add(name)

        return name


def extract_enum(
    source: Source, expected_name: Optional[str] = None, reserved: Iterable[str] = ()
) -> EnumDeclaration:
    """
    Extracts the name and variants of a flat enum declaration.

    Args:
        source: The declaration, either as text or as an already tokenized sequence.
        expected_name: If given, enums with any other name are skipped over.
        reserved: Names that the variants may not take.

    Returns:
        An `EnumDeclaration` whose variants appear in declaration order.

    Raises:
        MissingKeywordError: If no (matching) ``enum`` keyword is found before the input is exhausted.
        UnexpectedTokenError: If the ``enum`` keyword is not followed by a name, or a variant identifier is unusable.
        MissingGroupError: If the name is not followed by a ``{...}`` group.
    """
    with located_errors(source):
        cursor = TokenCursor(as_tokens(source))

        while not cursor.at_end():
            token = cursor.advance()
            if not (isinstance(token, Identifier) and (token.text == 'enum')):
                continue

            name = cursor.expect_identifier(meaning='enum name')
            if (expected_name is not None) and (name.text != expected_name):
                continue

            if keyword.iskeyword(name.text):
                raise UnexpectedTokenError(f"Python keyword '{name.text}'", 'enum name', name.offset)

            group = cursor.expect_group(Delimiter.BRACE)
            check = VariantNameChecker(reserved)

            return EnumDeclaration(
                name=name.text,
                variants=VariantList.of(*(check(ident) for ident in iter_group_identifiers(group))),
            )

    raise MissingKeywordError('enum' if expected_name is None else f"enum {expected_name}")


def extract_sections(
    source: Source, vocabulary: Sequence[SectionSpec], reserved: Iterable[str] = ()
) -> SectionedDeclaration:
    """
    Extracts the sections of a sectioned declaration.

    Args:
        source: The declaration, either as text or as an already tokenized sequence.
        vocabulary: The sections that must appear, in the order in which they must appear.
        reserved: Names that the variants (aliases included) may not take.

    Returns:
        A `SectionedDeclaration` with one section per vocabulary entry, in vocabulary order.

    Raises:
        MissingKeywordError: If the input ends before all the sections have been found.
        UnexpectedTokenError: If a keyword appears out of order, the ``:`` marker is missing, an alias marker is
            dangling, a single-entry section does not have exactly one entry, anything other than identifiers, commas
            and alias markers appears inside a section, or a variant identifier is unusable.
    """
    keywords = frozenset(spec.name for spec in vocabulary)

    with located_errors(source):
        cursor = TokenCursor(as_tokens(source))
        check = VariantNameChecker(reserved)
        sections = []

        for spec in vocabulary:
            keyword_token = cursor.peek()
            if keyword_token is None:
                raise MissingKeywordError(spec.name)

            cursor.expect_identifier(spec.name, meaning=f"section keyword '{spec.name}'")
            cursor.expect_punctuation(':', meaning=f"':' after '{spec.name}'")

            variants = _extract_section_body(cursor, keywords, check)

            if spec.single and (len(variants) != 1):
                raise UnexpectedTokenError(
                    f"{len(variants)} entries", f"exactly one entry in section '{spec.name}'", keyword_token.offset
                )

            sections.append(Section(spec.name, variants))

        cursor.expect_end('end of input after the last section')

    return SectionedDeclaration(tuple(sections))


def _extract_section_body(cursor: TokenCursor, keywords: Iterable[str], check: VariantNameChecker) -> VariantList:
    slots: List[VariantSlot] = []
    expecting_item = True

    while True:
        token = cursor.peek()
        if (token is None) or (isinstance(token, Identifier) and (token.text in keywords)):
            break

        if not expecting_item:
            cursor.expect_punctuation(',', meaning="',' or the next section keyword")
            expecting_item = True
            continue

        primary = check(cursor.expect_identifier(meaning='a variant identifier'))

        aliases = []
        while cursor.maybe_punctuation('|'):
            aliases.append(check(cursor.expect_identifier(meaning="an alias identifier after '|'")))

        slots.append(VariantSlot(primary, tuple(aliases)))
        expecting_item = False

    return VariantList(tuple(slots))


def extract_identifier_list(source: Source, reserved: Iterable[str] = ()) -> VariantList:
    """
    Extracts a plain comma-separated list of identifiers (a trailing comma is allowed).
    """
    with located_errors(source):
        cursor = TokenCursor(as_tokens(source))
        check = VariantNameChecker(reserved)
        identifiers = []

        while not cursor.at_end():
            identifiers.append(check(cursor.expect_identifier(meaning='an identifier')))

            if not cursor.at_end():
                cursor.expect_punctuation(',')

    return VariantList.of(*identifiers)


def as_tokens(source: Source) -> Sequence[Token]:
    return tokenize(source) if isinstance(source, str) else source


@contextmanager
def located_errors(source: Source) -> ContextManager[None]:
    try:
        yield
    except SourceLocatedError as e:
        if isinstance(source, str):
            locate_error(e, source)

        raise
