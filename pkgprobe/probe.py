from . import resolver


class Config:
    """
    How pkg-config should be run for a library, configured builder style::

        Config().statik(True).atleast_version("1.2").find("foo")

    Anything left unset falls back to the environment variables described
    in :mod:`pkgprobe.environment`.
    """

    def __init__(self):
        self.static_override = None
        self.minimum_version = None

    def statik(self, statik):
        """Force (True) or forbid (False) the ``--static`` flag."""
        self.static_override = bool(statik)
        return self

    def atleast_version(self, version):
        """Require at least ``version``; passed to pkg-config verbatim."""
        self.minimum_version = version
        return self

    def find(self, name, **options):
        """Run pkg-config for ``name``. See :func:`pkgprobe.resolver.resolve` for ``options``."""
        return resolver.resolve(self, name, **options)

    @classmethod
    def from_table(cls, table):
        """Build a Config from a ``[libraries.<name>]`` table of pkgprobe.toml."""
        config = cls()
        if "static" in table:
            config.statik(table["static"])
        if table.get("atleast_version"):
            config.atleast_version(str(table["atleast_version"]))
        return config

    def __repr__(self):
        return f"Config(statik={self.static_override!r}, atleast_version={self.minimum_version!r})"


def find_library(name, **options):
    """Shortcut for finding a library with all default options."""
    return Config().find(name, **options)
