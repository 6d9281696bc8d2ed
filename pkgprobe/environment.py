"""
Environment variables that control whether and how pkg-config is run.

* ``PKG_CONFIG_ALLOW_CROSS`` - without it, pkg-config is disabled whenever
  ``HOST`` and ``TARGET`` differ.
* ``FOO_NO_PKG_CONFIG`` - disables pkg-config for the library ``foo``.

Link mode is inferred from the first of these that is set:

* ``FOO_STATIC`` - pass ``--static`` for ``foo``
* ``FOO_DYNAMIC`` - do not pass ``--static`` for ``foo``
* ``PKG_CONFIG_ALL_STATIC`` - pass ``--static`` for every library
* ``PKG_CONFIG_ALL_DYNAMIC`` - do not pass ``--static`` for any library

With none of them set, libraries are linked dynamically.
"""
import os

ALLOW_CROSS_VAR = "PKG_CONFIG_ALLOW_CROSS"
ALL_STATIC_VAR = "PKG_CONFIG_ALL_STATIC"
ALL_DYNAMIC_VAR = "PKG_CONFIG_ALL_DYNAMIC"
NO_PKG_CONFIG_SUFFIX = "_NO_PKG_CONFIG"


def envify(name: str) -> str:
    """Turns a library name into its environment variable prefix."""
    return "".join(
        "_" if c == "-" else (c.upper() if c.isascii() else c)
        for c in name
    )


def _is_set(environ, var):
    return var in environ


def target_supported(environ=None) -> bool:
    """True when discovery may run for the current host/target pair."""
    if environ is None:
        environ = os.environ
    return (environ.get("HOST") == environ.get("TARGET")
            or _is_set(environ, ALLOW_CROSS_VAR))


def disable_var(name: str) -> str:
    return f"{envify(name)}{NO_PKG_CONFIG_SUFFIX}"


def is_discovery_disabled(name: str, environ=None) -> bool:
    if environ is None:
        environ = os.environ
    return _is_set(environ, disable_var(name))


def link_mode_rules(name: str) -> list[tuple[str, bool]]:
    """
    Returns the ordered (variable, static) rules consulted for ``name``.
    The first variable present in the environment decides the link mode.
    """
    prefix = envify(name)
    return [
        (f"{prefix}_STATIC", True),
        (f"{prefix}_DYNAMIC", False),
        (ALL_STATIC_VAR, True),
        (ALL_DYNAMIC_VAR, False),
    ]


def explain_static(name: str, environ=None) -> tuple[bool, str | None]:
    """Returns (static, variable) where variable is the rule that matched, if any."""
    if environ is None:
        environ = os.environ
    for var, static in link_mode_rules(name):
        if _is_set(environ, var):
            return static, var
    return False, None


def infer_static(name: str, environ=None) -> bool:
    static, _ = explain_static(name, environ)
    return static
