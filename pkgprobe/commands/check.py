import click
import os
import sys
from .. import config as config_module
from ..cli_logger import logger
from ..errors import DiscoveryDisabledError, ResolutionError
from ..probe import Config

@click.command()
@click.pass_context
def check(ctx):
    """Find every library listed in pkgprobe.toml."""
    path = ctx.obj["path"]
    config_path = os.path.join(path, config_module.CONFIG_FILE)
    if not os.path.exists(config_path):
        logger.error(f"Error: No {config_module.CONFIG_FILE} found in {path}.")
        sys.exit(1)
    conf = config_module.load_config(path=path)
    if not conf and os.path.getsize(config_path) > 0:
        sys.exit(1)

    libraries = config_module.library_tables(conf)
    if not libraries:
        logger.warning(f"No libraries listed in {config_module.CONFIG_FILE}.")
        return

    failed = []
    for name, table in libraries:
        try:
            Config.from_table(table).find(name)
        except DiscoveryDisabledError:
            continue
        except ResolutionError as e:
            logger.error(str(e))
            failed.append(name)
        else:
            logger.success(f"Found {name}")

    if failed:
        logger.error(f"Could not resolve: {', '.join(failed)}")
        sys.exit(1)
    logger.success("All libraries resolved.")
