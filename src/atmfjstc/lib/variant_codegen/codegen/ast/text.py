from dataclasses import dataclass
from textwrap import dedent, wrap

from atmfjstc.lib.variant_codegen.codegen.ast.base import CodegenNode


@dataclass(frozen=True)
class Docstring(CodegenNode):
    """
    A Python docstring whose text is reflowed so as to take up the available width.

    The text is automatically dedent-ed. If the whole docstring fits on one line, it is rendered as a one-liner,
    otherwise the quotes go on their own lines.
    """
    text: str

    def render(self, context):
        text = ' '.join(dedent(self.text).split())
        if text == '':
            return

        text = text.replace('\\', '\\\\').replace('"""', '\\"\\"\\"')

        if len(text) + 6 <= context.width:
            yield f'"""{text}"""'
            return

        yield '"""'
        yield from wrap(text, width=context.width)
        yield '"""'
