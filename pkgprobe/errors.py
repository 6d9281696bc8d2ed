import shlex


class ResolutionError(Exception):
    """Base class for everything that can stop a library from resolving."""

    def __init__(self, library, message):
        super().__init__(message)
        self.library = library


class DiscoveryDisabledError(ResolutionError):
    def __init__(self, library, variable):
        super().__init__(library, f"pkg-config requested to be aborted for {library}")
        self.variable = variable


class CrossCompileError(ResolutionError):
    def __init__(self, library):
        super().__init__(
            library,
            "pkg-config doesn't handle cross compilation. "
            "Use PKG_CONFIG_ALLOW_CROSS=1 to override",
        )


class ToolInvocationError(ResolutionError):
    def __init__(self, library, command, cause):
        super().__init__(library, f"failed to run `{shlex.join(command)}`: {cause}")
        self.command = command
        self.cause = cause


class ToolFailureError(ResolutionError):
    def __init__(self, library, command, returncode, stdout, stderr):
        msg = f"`{shlex.join(command)}` did not exit successfully: exit status {returncode}"
        if stdout:
            msg += "\n--- stdout\n" + stdout
        if stderr:
            msg += "\n--- stderr\n" + stderr
        super().__init__(library, msg)
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class ToolOutputError(ResolutionError):
    def __init__(self, library, command, cause):
        super().__init__(library, f"`{shlex.join(command)}` produced output that is not valid UTF-8: {cause}")
        self.command = command
        self.cause = cause
