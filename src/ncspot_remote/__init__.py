"""ncspot-remote - send media-control commands to a running ncspot."""

__version__ = "0.1.0"
