import click
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..probe import Config

@click.command()
@click.argument("name")
@click.option("--static/--dynamic", "static", default=None,
              help="Force the link mode instead of inferring it from the environment.")
@click.option("--atleast-version", default=None, help="Minimum acceptable version of the library.")
@handle_exceptions
def probe(name, static, atleast_version):
    """Find library NAME with pkg-config and print its build directives."""
    config = Config()
    if static is not None:
        config.statik(static)
    if atleast_version:
        config.atleast_version(atleast_version)

    library = config.find(name)
    logger.success(f"Found {name}")
    for line in library.summary_lines():
        logger.step_info(line, indent=2)
