from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CodegenContext:
    """
    Holds options that control how the rendering of a codegen AST node is done.

    For safety, objects of this type are immutable. To "modify" a context, you can create an altered copy by calling
    its `derive` function.

    Attributes:
        width: The number of columns available for rendering the code. The renderer will do its best to ensure that
            the code fits this width, but success is not guaranteed (e.g. for very long string literals).
        indent: The number of columns by which code inside blocks will be indented
        oneliner: Signal that a one-liner rendering is preferable. A node may or may not be able to honor this.
    """

    width: int
    indent: int = 4
    oneliner: bool = False

    def derive(
        self, width: Optional[int] = None, sub_width: int = 0, sub_one_indent: bool = False,
        oneliner: Optional[bool] = None
    ) -> 'CodegenContext':
        """
        Creates a modified copy of this rendering context.

        Args:
            width: The new width for the context (or None to leave it unchanged)
            sub_width: The number of columns to subtract from the width
            sub_one_indent: Subtracts the indent size from the available width (a very common operation)
            oneliner: The new 'request oneliner' flag for the context (or None to leave it unchanged)
        """
        return CodegenContext(
            width=(self.width if width is None else width) - sub_width - (self.indent if sub_one_indent else 0),
            indent=self.indent,
            oneliner=self.oneliner if oneliner is None else oneliner,
        )
