from dataclasses import dataclass
from typing import Tuple, Optional, List

from atmfjstc.lib.variant_codegen.codegen.ast.base import CodegenNode, PromptableNode


def _coerce_tuple(node: CodegenNode, field_name: str):
    value = getattr(node, field_name)
    if not isinstance(value, tuple):
        object.__setattr__(node, field_name, tuple(value))


@dataclass(frozen=True)
class Sequence(CodegenNode):
    """
    A vertical sequence of sections that are rendered one after the other.

    Blank lines are inserted between items so as to satisfy their margin requirements: an item with a top margin of *M*
    will have at least *M* blank lines between itself and the preceding item, and its bottom margin controls the
    minimum number of blank lines before the next item. When a bottom margin meets a top margin, the greater applies.

    Margins can be set for all items using `items_margin`. To set margins for an individual item, wrap it in a `Section`.

    Notes:

    - Margins do not apply between an item and the top/bottom of the Sequence itself.
    - Margins are ignored for an item that is empty (produces no lines)
    """
    content: Tuple[CodegenNode, ...]
    items_margin: int = 0

    def __post_init__(self):
        _coerce_tuple(self, 'content')

    def render(self, context):
        pending_margin = None

        for item in self.content:
            lines = list(item.render(context))
            if len(lines) == 0:
                continue

            top, bottom = item.effective_margins if isinstance(item, Section) else (self.items_margin,) * 2

            if pending_margin is not None:
                yield from [''] * max(pending_margin, top)

            yield from lines

            pending_margin = bottom


@dataclass(frozen=True)
class Section(CodegenNode):
    """
    Wraps another node and sets margin top/bottom properties that apply only to this node in a `Sequence`.
    """
    content: CodegenNode
    margin: int = 0
    margin_top: Optional[int] = None
    margin_bottom: Optional[int] = None

    @property
    def effective_margins(self):
        return (
            self.margin if self.margin_top is None else self.margin_top,
            self.margin if self.margin_bottom is None else self.margin_bottom
        )

    def render(self, context):
        yield from self.content.render(context)


@dataclass(frozen=True)
class NullNode(PromptableNode):
    """
    A node that renders nothing. You can substitute nodes in a sequence with NullNode to make them disappear.
    """

    def render_promptable(self, _context, _prompt_width, _tail_width):
        yield from []


@dataclass(frozen=True)
class ItemsList(CodegenNode):
    """
    A construct used for rendering tuple/list items, call arguments, match patterns etc.

    Depending on the available space, and the nature of the items, the construct will choose between two possible
    representations (example is for joiner=", "):

    - Horizontal::

      item, item, item,
      item, item

    - Vertical::

      item,
      item,
      item

    Note: If any of the items is multiline, or `allow_horiz` is off, the vertical representation is used.
    """
    items: Tuple[PromptableNode, ...]
    joiner: str = ''
    allow_horiz: bool = True
    trailing_comma: bool = False

    def __post_init__(self):
        _coerce_tuple(self, 'items')

    def render(self, context):
        item_renders = self._prepare_item_renders(context.derive(oneliner=True))

        if self.allow_horiz and all(len(item_render) <= 1 for item_render in item_renders):
            yield from self._render_horizontal(context, item_renders)
        else:
            yield from self._render_vertical(item_renders)

    def _split_joiner(self):
        joiner1 = self.joiner.rstrip()
        joiner2 = self.joiner[len(joiner1):]

        return joiner1, joiner2

    def _prepare_item_renders(self, context) -> List[List[str]]:
        joiner1, _ = self._split_joiner()

        item_renders = [list(item.render_promptable(context, 0, len(joiner1))) for item in self.items]
        item_renders = [render for render in item_renders if len(render) > 0]

        for render in (item_renders if self.trailing_comma else item_renders[:-1]):
            render[-1] += joiner1

        return item_renders

    def _render_vertical(self, item_renders):
        for item in item_renders:
            yield from item

    def _render_horizontal(self, context, item_renders):
        _, joiner2 = self._split_joiner()

        buffer = ''

        for item_lines in item_renders:
            item = item_lines[0]

            candidate = buffer + ('' if buffer == '' else joiner2) + item
            if len(candidate) <= context.width:
                buffer = candidate
                continue

            if buffer != '':
                yield buffer

            buffer = item

        if buffer != '':
            yield buffer


def seq0(*items: CodegenNode) -> Sequence:
    """Convenience function for instantiating a 0-margin Sequence"""
    return Sequence(items)


def seq1(*items: CodegenNode) -> Sequence:
    """Convenience function for instantiating a 1-margin Sequence"""
    return Sequence(items, items_margin=1)
