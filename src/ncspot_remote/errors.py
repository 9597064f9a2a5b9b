"""Exception types for ncspot-remote."""


class NcspotRemoteError(Exception):
    """Base class for ncspot-remote errors."""


class UnknownCommandError(NcspotRemoteError, ValueError):
    """Raised when a command name is not in the command table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown command: {name!r}")
