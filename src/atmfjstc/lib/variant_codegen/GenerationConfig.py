from dataclasses import dataclass, replace

from atmfjstc.lib.variant_codegen.codegen.CodegenContext import CodegenContext


@dataclass(frozen=True)
class GenerationConfig:
    """
    Holds the options that control what the generators produce.

    Objects of this type are immutable. To "modify" a config, create an altered copy by calling its `derive` method.

    Attributes:
        width: The number of columns available for the generated code.
        indent: The number of columns by which code inside blocks is indented.
        base_height: The height of the first entity in the color layer pipeline.
        texture_height_range_end: The top of the range of heights that textures stacked on an entity may use. Each
            entity reserves this much room (plus one) above itself.
        line_interval: The height difference between consecutive lines (and square highlights).
        clip_gap: The room reserved between the entity layer and the line layer (holds the clip overlay). Must be
            positive.
        thing_angle_gap: The room reserved between the line layer and the square highlights (holds the two thing angle
            indicator heights, `line_interval` apart). Must be greater than `line_interval`.
        tool_header_suffix: Appended to the uppercase label of a tool to form its header.
        subtool_header_suffix: Appended to the uppercase label of a sub-tool to form its header.
        icon_extension: The extension of the icon file associated with each tool or sub-tool.
        tool_declaration_path: Where the declaration of the ``Tool`` enum can be found, relative to the file provider's
            root.
        subtool_docs_dir: The directory containing the documentation fragment (``<bind key>.md``) of each sub-tool.
        assets_dir: The directory whose entries are registered as embedded assets.
    """

    width: int = 100
    indent: int = 4

    base_height: float = 1.0
    texture_height_range_end: int = 20
    line_interval: float = 1.0
    clip_gap: float = 1.0
    thing_angle_gap: float = 2.0

    tool_header_suffix: str = ' TOOL'
    subtool_header_suffix: str = ' SUBTOOL'
    icon_extension: str = '.png'

    tool_declaration_path: str = 'tools.variants'
    subtool_docs_dir: str = 'docs/subtools binds'
    assets_dir: str = 'embedded_assets'

    def derive(self, **changes) -> 'GenerationConfig':
        """
        Creates a modified copy of this config. Options given as None are left unchanged.
        """
        return replace(self, **{name: value for name, value in changes.items() if value is not None})

    def codegen_context(self) -> CodegenContext:
        return CodegenContext(width=self.width, indent=self.indent)

    @property
    def entity_interval(self) -> float:
        return float(self.texture_height_range_end) + 1.0


DEFAULT_CONFIG = GenerationConfig()
