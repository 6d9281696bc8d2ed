import click
import os
from .. import environment

@click.command()
@click.argument("name")
def env(name):
    """Show the environment variables that affect library NAME."""
    environ = os.environ
    disable = environment.disable_var(name)
    click.echo(f"{disable}: {'set' if disable in environ else 'unset'}", err=True)
    click.echo(f"{environment.ALLOW_CROSS_VAR}: {'set' if environment.ALLOW_CROSS_VAR in environ else 'unset'}", err=True)
    click.echo(f"cross compilation allowed: {'yes' if environment.target_supported(environ) else 'no'}", err=True)
    for var, static in environment.link_mode_rules(name):
        state = "set" if var in environ else "unset"
        click.echo(f"{var} ({'static' if static else 'dynamic'}): {state}", err=True)

    static, matched = environment.explain_static(name, environ)
    mode = "static" if static else "dynamic"
    if matched:
        click.echo(f"link mode: {mode} (from {matched})", err=True)
    else:
        click.echo(f"link mode: {mode} (default)", err=True)
