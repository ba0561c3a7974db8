"""
Assembles extracted variant data into generated Python definitions.

Every accessor is emitted as a ``match`` statement with one arm per variant (aliases of a slot share an arm where they
share a value), in declaration order, followed by a ``case _`` fallback arm. For total accessors (labels, keys,
heights) the fallback denotes a broken invariant and raises `ValueError`; for the index-to-variant conversion it is the
documented out-of-range failure and raises `IndexError`.

This module is a pure fold from data to codegen AST nodes. It performs no validation beyond what the extractor already
guarantees and never consults the environment.
"""

import json
import logging

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Tuple, Sequence, Iterable, Optional, Dict, Iterator

from atmfjstc.lib.variant_codegen.codegen.CodegenContext import CodegenContext
from atmfjstc.lib.variant_codegen.codegen.ast import CodegenNode, Atom, NullNode, Docstring, Section, seq0, seq1, \
    statement


LOG = logging.getLogger()


GENERATED_HEADER = "# Generated by variant-codegen. Do not edit."


def string_literal(value: str) -> str:
    """Renders a Python string literal (double-quoted) for an arbitrary string"""
    return json.dumps(value, ensure_ascii=False)


def float_literal(value: float) -> str:
    return repr(float(value))


@dataclass(frozen=True)
class MatchArm:
    patterns: Tuple[str, ...]
    body: CodegenNode

    @staticmethod
    def returning(patterns: Iterable[str], expression: str) -> 'MatchArm':
        return MatchArm(tuple(patterns), Atom(f"return {expression}"))


def match_statement(subject: str, arms: Sequence[MatchArm], fallback: CodegenNode) -> CodegenNode:
    return statement(
        f"match {subject}:",
        seq0(
            *(statement(f"case {' | '.join(arm.patterns)}:", arm.body) for arm in arms),
            statement("case _:", fallback),
        )
    )


def function_def(
    name: str, params: str, body: Iterable[CodegenNode], returns: Optional[str] = None, doc: Optional[str] = None,
    decorators: Iterable[str] = ()
) -> CodegenNode:
    signature = f"def {name}({params})" + ('' if returns is None else f" -> {returns}") + ':'

    return seq0(
        *(Atom(f"@{decorator}") for decorator in decorators),
        statement(signature, seq0(Docstring(doc) if doc is not None else NullNode(), *body)),
    )


def invalid_variant_fallback(owner: str, subject: str = 'self') -> CodegenNode:
    return Atom(f'raise ValueError(f"Invalid {owner}: {{{subject}!r}}")')


def accessor_method(
    name: str, owner: str, arms: Sequence[MatchArm], returns: str, doc: Optional[str] = None,
    params: str = 'self', subject: str = 'self', decorators: Iterable[str] = ()
) -> CodegenNode:
    """
    Builds a method that maps each variant of `owner` to a value via a ``match`` on `subject`.

    The fallback arm raises `ValueError`: the method is meant to be total over the variant set.
    """
    LOG.debug(f"Emitting {owner}.{name} with {len(arms)} arms")

    return function_def(
        name, params,
        [match_statement(subject, arms, invalid_variant_fallback(owner, subject))],
        returns=returns, doc=doc, decorators=decorators,
    )


def variant_pattern(owner: str, identifier: str) -> str:
    return f"{owner}.{identifier}"


class GeneratedDefinitions(Mapping):
    """
    An ordered mapping from the well-known name of each generated symbol (``SIZE``, ``from_index``, ``label`` etc.) to
    the codegen node that defines it.
    """

    owner: str
    _definitions: Dict[str, CodegenNode]

    def __init__(self, owner: str, definitions: Iterable[Tuple[str, CodegenNode]] = ()):
        self.owner = owner
        self._definitions = dict()

        for name, node in definitions:
            self.add(name, node)

    def add(self, name: str, node: CodegenNode) -> 'GeneratedDefinitions':
        if name in self._definitions:
            raise KeyError(f"Symbol '{name}' is already defined for {self.owner}")

        self._definitions[name] = node
        return self

    def merge(self, other: 'GeneratedDefinitions') -> 'GeneratedDefinitions':
        for name, node in other.items():
            self.add(name, node)

        return self

    def __getitem__(self, name: str) -> CodegenNode:
        return self._definitions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def as_node(self) -> CodegenNode:
        return seq1(*self._definitions.values())

    def render_symbol(self, name: str, context: CodegenContext) -> str:
        return self._definitions[name].render_text(context)

    def render(self, context: CodegenContext) -> str:
        """Renders all the definitions, as they would appear spliced inside the body of the owner class"""
        return self.as_node().render_text(context)


def enum_class(
    name: str, members: Sequence[str], definitions: Optional[GeneratedDefinitions] = None, doc: Optional[str] = None,
    base: str = 'enum.Enum'
) -> CodegenNode:
    """
    Builds an enum class declaration with the members numbered in order, followed by the generated definitions.
    """
    member_lines = seq0(*(Atom(f"{member} = {index}") for index, member in enumerate(members)))

    body = seq1(
        Docstring(doc) if doc is not None else NullNode(),
        member_lines,
        definitions.as_node() if definitions is not None else NullNode(),
    )

    if (len(members) == 0) and ((definitions is None) or (len(definitions) == 0)) and (doc is None):
        body = Atom('pass')

    return statement(f"class {name}({base}):", body)


def module(*content: CodegenNode, imports: Iterable[str] = ('enum',)) -> CodegenNode:
    """
    Builds a complete generated module: a header comment, the imports, and the top-level definitions separated by two
    blank lines.
    """
    imports = list(imports)

    return seq1(
        Atom(GENERATED_HEADER),
        seq0(*(Atom(f"import {name}") for name in imports)),
        *(Section(node, margin=2) for node in content),
    )
