"""
The ``variant-codegen`` command-line program.

Each subcommand runs one generator. The declaration is read from a file (or stdin, if no file or ``-`` is given) and
the generated code is written to stdout, or to the file given by ``--output``. Companion files (tool declaration,
sub-tool docs, assets) are looked up relative to ``--root``.
"""

import sys
import logging

from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Optional, Sequence

import colorama

from atmfjstc.lib.variant_codegen import __version__
from atmfjstc.lib.variant_codegen.errors import VariantCodegenError
from atmfjstc.lib.variant_codegen.GenerationConfig import GenerationConfig
from atmfjstc.lib.variant_codegen.files import DirectoryFileProvider
from atmfjstc.lib.variant_codegen.log import init_console_friendly_logging
from atmfjstc.lib.variant_codegen.generators.enums import generate_enum, DEFAULT_DERIVES
from atmfjstc.lib.variant_codegen.generators.colors import generate_color_methods, generate_color_enum
from atmfjstc.lib.variant_codegen.generators.tools import generate_bind_enum, generate_tool_methods, \
    generate_subtool_methods
from atmfjstc.lib.variant_codegen.generators.arrays import str_array, mesh_indexes
from atmfjstc.lib.variant_codegen.generators.assets import embedded_assets
from atmfjstc.lib.variant_codegen.cli.console import console
from atmfjstc.lib.variant_codegen.cli.errors import fail, descriptive_errors, pretty_unhandled


LOG = logging.getLogger()


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog='variant-codegen', description="Generates Python code from variant declarations")
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('-v', '--verbose', action='store_true', help="Show debug messages")
    parser.add_argument('-o', '--output', help="Write the generated code to this file instead of stdout")
    parser.add_argument('--root', default='.', help="The directory relative to which companion files are found")
    parser.add_argument('--width', type=int, help="The number of columns available for the generated code")
    parser.add_argument('--indent', type=int, help="The indent size for the generated code")

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND', required=True)

    def _add_command(name: str, help_text: str, takes_input: bool = True) -> ArgumentParser:
        subparser = subparsers.add_parser(name, help=help_text)

        if takes_input:
            subparser.add_argument(
                'input', nargs='?', default='-', help="The file holding the declaration (default: stdin)"
            )

        return subparser

    enum_parser = _add_command('enum', "Generate an enum with its size, index conversion and iterator")
    enum_parser.add_argument(
        '--derive', action='append', choices=DEFAULT_DERIVES,
        help="A definition to derive (can be repeated; default: all)"
    )
    enum_parser.add_argument('--name', help="Only consider the enum with this name")

    colors_parser = _add_command('colors', "Generate the height, key and label methods of a color enum")
    colors_parser.add_argument('--class-name', default='Color', help="The name of the color class")
    colors_parser.add_argument(
        '--full', action='store_true', help="Generate a complete enum module instead of just the methods"
    )
    colors_parser.add_argument('--texture-height-range-end', type=int, help="The height room reserved for textures")

    bind_parser = _add_command('bind', "Generate the Bind enum")
    bind_parser.add_argument('--tool-declaration', help="Path of the file declaring the Tool enum (under the root)")

    _add_command('tool', "Generate the methods of the Tool enum")

    subtool_parser = _add_command('subtool', "Generate the methods of the SubTool enum")
    subtool_parser.add_argument('--docs-dir', help="Directory of the sub-tool bind docs (under the root)")

    _add_command('str-array', "Generate a tuple of numbered strings")
    _add_command('mesh-indexes', "Generate the triangle fan indexes of a mesh")

    assets_parser = _add_command('assets', "Generate the registration of the embedded assets", takes_input=False)
    assets_parser.add_argument('--assets-dir', help="Directory holding the assets (under the root)")

    return parser


def config_from_args(args: Namespace) -> GenerationConfig:
    return GenerationConfig().derive(
        width=args.width,
        indent=args.indent,
        texture_height_range_end=getattr(args, 'texture_height_range_end', None),
        tool_declaration_path=getattr(args, 'tool_declaration', None),
        subtool_docs_dir=getattr(args, 'docs_dir', None),
        assets_dir=getattr(args, 'assets_dir', None),
    )


def read_input(path: str) -> str:
    if path == '-':
        return sys.stdin.read()

    input_path = Path(path)
    if not input_path.is_file():
        fail(f"Input file '{path}' does not exist")

    return input_path.read_text(encoding='utf-8')


def run_command(args: Namespace) -> str:
    config = config_from_args(args)
    files = DirectoryFileProvider(args.root)
    source = read_input(args.input) if hasattr(args, 'input') else None

    LOG.debug(f"Running '{args.command}' with root {files.root}")

    if args.command == 'enum':
        return generate_enum(source, derives=args.derive or DEFAULT_DERIVES, config=config, expected_name=args.name)
    if args.command == 'colors':
        if args.full:
            return generate_color_enum(source, args.class_name, config)

        return generate_color_methods(source, args.class_name, config)
    if args.command == 'bind':
        return generate_bind_enum(source, files, config)
    if args.command == 'tool':
        return generate_tool_methods(source, config)
    if args.command == 'subtool':
        return generate_subtool_methods(source, files, config)
    if args.command == 'str-array':
        return str_array(source, config)
    if args.command == 'mesh-indexes':
        return mesh_indexes(source, config)
    if args.command == 'assets':
        return embedded_assets(files, config)

    raise AssertionError(f"Unhandled command '{args.command}'")


@pretty_unhandled()
def main(argv: Optional[Sequence[str]] = None):
    colorama.just_fix_windows_console()

    args = build_parser().parse_args(argv)

    init_console_friendly_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.output is None:
        console.disable_stdout()
    else:
        console.enable_stdout()

    with descriptive_errors(VariantCodegenError):
        code = run_command(args)

    if args.output is None:
        sys.stdout.write(code)
        return

    Path(args.output).write_text(code, encoding='utf-8')
    console.print_success(f"Generated code written to {args.output}")


if __name__ == '__main__':
    main()
