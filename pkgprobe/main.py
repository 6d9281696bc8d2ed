import click
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the project directory.")
@click.pass_context
def cli(ctx, path):
    """pkgprobe: find system libraries with pkg-config."""
    ctx.obj = {"path": path}

cli.add_command(probe)
cli.add_command(check)
cli.add_command(env)
cli.add_command(version)
cli.add_command(log)

if __name__ == '__main__':
    cli()
