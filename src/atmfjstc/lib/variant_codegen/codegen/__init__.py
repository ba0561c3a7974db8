"""
A small abstract syntax tree for assembling generated code, and rendering it to text within a given width.

Renderers build a tree out of the nodes in `codegen.ast` and call `.render(context)` on the root. Layout concerns
(indentation, whether a list fits on one line, blank lines between definitions) are handled by the nodes, so the
generators only need to describe *what* to output.

Example::

    Block(ItemsList([Atom(f'"i_{i}"') for i in range(20)], joiner=', '), 'NAMES = (', ')')

renders as ``NAMES = ("i_0", "i_1", ...)`` if that fits within the context width, or wraps the items over several
indented lines otherwise.
"""
