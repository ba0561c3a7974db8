from abc import ABCMeta, abstractmethod
from typing import Iterable

from atmfjstc.lib.variant_codegen.codegen.CodegenContext import CodegenContext


class CodegenNode(metaclass=ABCMeta):
    """
    Base class for all nodes used to assemble the intermediate representation of generated code.

    Concrete nodes are frozen dataclasses, so trees can be shared and compared freely.
    """

    @abstractmethod
    def render(self, context: CodegenContext) -> Iterable[str]:
        """
        Renders this node (i.e. converts it to text) within a given context (width, indent size etc.)

        The rendering is done line-by-line and, where possible, lazily.

        Args:
            context: A CodegenContext object containing the available width, indent size etc.

        Returns:
            The generated text for this node, as a stream of lines. The lines are not newline-terminated.
        """
        raise NotImplementedError

    def render_text(self, context: CodegenContext) -> str:
        """Convenience function for rendering the node to a single newline-terminated string"""
        return ''.join(line + '\n' for line in self.render(context))


class PromptableNode(CodegenNode, metaclass=ABCMeta):
    """
    Base class for nodes that are capable of rendering within a non-rectangular space.

    Normally nodes attempt to render within a rectangle of `context.width` columns across. Sometimes, however, some of
    the leftmost columns of the first line are reserved (the *prompt*, e.g. ``NAME = ``), as well as some of the
    rightmost columns in the last line (the *tail*, e.g. the comma after an item in a list).
    """

    def render(self, context):
        return self.render_promptable(context, 0, 0)

    @abstractmethod
    def render_promptable(self, context: CodegenContext, prompt_width: int, tail_width: int) -> Iterable[str]:
        """
        The `render` method, extended with the widths of the prompt and tail areas.

        Args:
            context: A CodegenContext object containing the available width, indent size etc.
            prompt_width: The number of columns unavailable at the start of the first (or only) line
            tail_width: The number of columns unavailable at the end of the last (or only) line
        """
        raise NotImplementedError
