import logging

from atmfjstc.lib.variant_codegen.GenerationConfig import GenerationConfig, DEFAULT_CONFIG
from atmfjstc.lib.variant_codegen.codegen.ast import Atom, seq0
from atmfjstc.lib.variant_codegen.emit import function_def, string_literal
from atmfjstc.lib.variant_codegen.files import FileProvider


LOG = logging.getLogger()


def embedded_assets(files: FileProvider, config: GenerationConfig = DEFAULT_CONFIG) -> str:
    """
    Generates an ``add_embedded_assets(app)`` function that registers every file in the assets directory (see
    `GenerationConfig.assets_dir`) with a host-provided ``embedded_asset`` function.

    The entries are registered in sorted order so that the output does not depend on the order in which the file
    system lists them.

    Raises:
        ExternalResourceMissingError: If the assets directory does not exist.
    """
    names = sorted(files.list_dir(config.assets_dir))

    LOG.debug(f"Registering {len(names)} embedded assets from {config.assets_dir}")

    body = seq0(*(Atom(f"embedded_asset(app, {string_literal(name)})") for name in names)) if len(names) > 0 \
        else Atom('pass')

    node = function_def(
        'add_embedded_assets', 'app', [body], doc=f"Registers the files in {config.assets_dir} as embedded assets."
    )

    return node.render_text(config.codegen_context())
