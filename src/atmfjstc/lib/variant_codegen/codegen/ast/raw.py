from dataclasses import dataclass
from typing import Iterable

from atmfjstc.lib.variant_codegen.codegen.CodegenContext import CodegenContext
from atmfjstc.lib.variant_codegen.codegen.ast.base import PromptableNode


def check_single_line(value: str, value_name: str = 'value') -> str:
    """Checks that a string does not contain newlines and returns it, otherwise throws a `ValueError`"""
    if '\n' in value:
        raise ValueError(f"{value_name} must be a single-line string".capitalize())

    return value


@dataclass(frozen=True)
class Atom(PromptableNode):
    """
    A node containing an unbreakable bit of text without newlines, that will be rendered as-is wherever it appears.

    Note that an empty `Atom` is not the same as a `NullNode`. An `Atom` always counts as content.
    """
    content: str

    def __post_init__(self):
        check_single_line(self.content, 'atom content')

    def render_promptable(self, _context: CodegenContext, _prompt_width: int, _tail_width: int) -> Iterable[str]:
        yield self.content
