import os
from pathlib import PurePosixPath

from .cli_logger import logger
from .directives import BuildDirectives
from .environment import disable_var, infer_static, is_discovery_disabled, target_supported
from .errors import (
    CrossCompileError,
    DiscoveryDisabledError,
    ToolFailureError,
    ToolInvocationError,
    ToolOutputError,
)
from .library import Library
from .parser import find_frameworks, parse_flags
from .utils.command_executor import run_shell_command

PKG_CONFIG = "pkg-config"
SYSTEM_ROOT = PurePosixPath("/usr")


def is_system_dir(path) -> bool:
    """True for the trusted system root and anything below it."""
    path = PurePosixPath(path)
    return path == SYSTEM_ROOT or SYSTEM_ROOT in path.parents


def is_system_lib(name, dirs, is_trusted=is_system_dir) -> bool:
    """
    A library counts as a system library unless ``lib<name>.a`` sits in one
    of ``dirs`` outside the trusted root.
    """
    archive = f"lib{name}.a"
    return not any(
        not is_trusted(d) and os.path.exists(os.path.join(d, archive))
        for d in dirs
    )


def build_command(name, static=False, atleast_version=None):
    command = [PKG_CONFIG]
    if static:
        command.append("--static")
    command += ["--libs", "--cflags"]
    if atleast_version is not None:
        command.append(f"{name} >= {atleast_version}")
    else:
        command.append(name)
    return command


def resolve(config, name, environ=None, directives=None, is_trusted=is_system_dir):
    """
    Runs pkg-config for ``name`` and returns the resulting Library.

    Build directives are emitted as a side effect. Raises a
    ResolutionError subclass when discovery is disabled, unsupported or fails.
    """
    if environ is None:
        environ = os.environ
    if directives is None:
        directives = BuildDirectives()

    if is_discovery_disabled(name, environ):
        logger.info(f"Skipping pkg-config for {name}: {disable_var(name)} is set")
        raise DiscoveryDisabledError(name, disable_var(name))
    if not target_supported(environ):
        raise CrossCompileError(name)

    static = config.static_override
    if static is None:
        static = infer_static(name, environ)

    command = build_command(name, static, config.minimum_version)
    child_env = dict(environ)
    child_env["PKG_CONFIG_ALLOW_SYSTEM_LIBS"] = "1"
    try:
        stdout, stderr, returncode = run_shell_command(command, env=child_env)
    except OSError as e:
        raise ToolInvocationError(name, command, e) from e
    except UnicodeDecodeError as e:
        raise ToolOutputError(name, command, e) from e
    if returncode != 0:
        raise ToolFailureError(name, command, returncode, stdout, stderr)

    output = stdout.rstrip("\r\n")
    tokens = parse_flags(output)

    libs = []
    link_paths = []
    framework_paths = []
    include_paths = []
    for flag, value in tokens:
        if flag == "-L":
            directives.link_search_native(value)
            link_paths.append(value)
        elif flag == "-F":
            directives.link_search_framework(value)
            framework_paths.append(value)
        elif flag == "-I":
            include_paths.append(value)

    for flag, value in tokens:
        if flag != "-l":
            continue
        libs.append(value)
        directives.link_lib(value, static=static and not is_system_lib(value, link_paths, is_trusted))

    frameworks = find_frameworks(output)
    for framework in frameworks:
        directives.link_framework(framework)

    logger.debug(f"Resolved {name} ({'static' if static else 'dynamic'})")
    return Library(
        libs=tuple(libs),
        link_paths=tuple(link_paths),
        frameworks=tuple(frameworks),
        framework_paths=tuple(framework_paths),
        include_paths=tuple(include_paths),
    )
