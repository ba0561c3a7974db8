"""
Build-time generation of Python enum definitions from small declarative variant lists.

A declaration names a finite, ordered set of variants, e.g.::

    enum Direction { North, East, South, West }

or, for the sectioned shape used by the color generator::

    clear: Clear, extensions: Extensions, grid: Grid, entities: Entity | Selected, ui: Cursor

From it, the generators derive the definitions that would otherwise be written (and kept in sync) by hand: the number
of variants, the index-to-variant conversion, an iterator, config keys, display labels, and the draw heights of a
layered renderer.

The pipeline is: `tokens` (scanning) -> `extract` (recovering the variants) -> `case_transform` / `heights` (deriving
values) -> `emit` (assembling match-style definitions on top of the `codegen` AST) -> text. The `generators` package
holds the ready-made compositions, and `cli` exposes them as the ``variant-codegen`` command.

All errors raised while generating derive from `errors.VariantCodegenError`. Generation is all-or-nothing: the first
malformed token aborts it.
"""

__version__ = '1.0.0'
