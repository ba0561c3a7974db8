from dataclasses import dataclass

from atmfjstc.lib.variant_codegen.codegen.ast.base import CodegenNode, PromptableNode
from atmfjstc.lib.variant_codegen.codegen.ast.raw import check_single_line


@dataclass(frozen=True)
class Block(PromptableNode):
    """
    A construct for representing a block: a head line, indented content, and an optional tail line.

    Useful both for bracketed constructs (tuples, lists, calls) and for Python compound statements (``def``, ``match``,
    ``case``), for which `allow_oneliner` should be turned off.

    Notes:

    - The `head` and `tail` cannot be multiline.
    - An empty tail is collapsed (no blank line is generated for it), but an empty head is not.
    """
    content: CodegenNode
    head: str = ''
    tail: str = ''
    allow_oneliner: bool = True

    def __post_init__(self):
        check_single_line(self.head, 'block head')
        check_single_line(self.tail, 'block tail')

    def render_promptable(self, context, prompt_width, tail_width):
        if self.allow_oneliner:
            render = self._try_render_oneliner(context, prompt_width, tail_width)
            if render is not None:
                yield render
                return

        yield self.head.rstrip()

        for line in self.content.render(context.derive(sub_one_indent=True, oneliner=False)):
            yield (' ' * context.indent + line) if line != '' else ''

        if self.tail.lstrip() != '':
            yield self.tail.lstrip()

    def _try_render_oneliner(self, context, prompt_width, tail_width):
        avail_width = context.width - prompt_width - tail_width - len(self.head) - len(self.tail)
        if avail_width < 0:
            return None

        content_render = list(self.content.render(context.derive(width=avail_width, oneliner=True)))
        if len(content_render) > 1:
            return None

        if (len(content_render) == 0) or (content_render[0] == ''):
            return self.head.rstrip() + self.tail.lstrip()

        if len(content_render[0]) > avail_width:
            return None

        return self.head + content_render[0] + self.tail


def statement(head: str, content: CodegenNode) -> Block:
    """Convenience function for a Python compound statement (``head`` should end in a colon)"""
    return Block(content, head, allow_oneliner=False)
