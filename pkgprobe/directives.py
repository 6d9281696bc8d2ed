"""
Build directives understood by the calling build system.

One directive per line on stdout, in the cargo build-script format.
"""
import click

DIRECTIVE_PREFIX = "cargo:"


class BuildDirectives:
    def __init__(self, stream=None, prefix=DIRECTIVE_PREFIX):
        self.stream = stream
        self.prefix = prefix
        self.lines = []

    def _emit(self, body):
        line = f"{self.prefix}{body}"
        self.lines.append(line)
        click.echo(line, file=self.stream)

    def link_search_native(self, path):
        self._emit(f"rustc-link-search=native={path}")

    def link_search_framework(self, path):
        self._emit(f"rustc-link-search=framework={path}")

    def link_lib(self, name, static=False):
        if static:
            self._emit(f"rustc-link-lib=static={name}")
        else:
            self._emit(f"rustc-link-lib={name}")

    def link_framework(self, name):
        self._emit(f"rustc-link-lib=framework={name}")
