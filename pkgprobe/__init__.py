"""
Find system libraries through ``pkg-config`` from a build script.

    import pkgprobe
    pkgprobe.find_library("foo")

    pkgprobe.Config().statik(True).find("foo")

Build directives for the calling build system are printed on stdout when a
library is found.
"""
from .environment import target_supported
from .errors import (
    CrossCompileError,
    DiscoveryDisabledError,
    ResolutionError,
    ToolFailureError,
    ToolInvocationError,
    ToolOutputError,
)
from .library import Library
from .probe import Config, find_library
