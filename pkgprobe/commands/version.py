import click
import importlib.metadata
import sys
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of pkgprobe."""
    try:
        ver = importlib.metadata.version("pkgprobe")
        logger.info(f"pkgprobe version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of pkgprobe. Is it installed correctly?")
        sys.exit(1)
