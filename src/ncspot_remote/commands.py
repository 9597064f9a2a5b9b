"""Command table: the tokens ncspot understands and their fallbacks."""

from typing import NamedTuple

from ncspot_remote.automation import FallbackAction
from ncspot_remote.errors import UnknownCommandError


class Command(NamedTuple):
    """A media-control command."""

    name: str
    token: str  # Sent verbatim over the socket
    fallback: FallbackAction


COMMANDS: dict[str, Command] = {
    "previous": Command(
        name="previous",
        token="previous",
        fallback=FallbackAction(key_code=15, playerctl="previous"),
    ),
    "playpause": Command(
        name="playpause",
        token="playpause",
        fallback=FallbackAction(shortcut="PlayPause", playerctl="play-pause"),
    ),
}

ALIASES = {
    "prev": "previous",
}


def get_command(name: str) -> Command:
    """Look up a command by name or alias.

    Raises:
        UnknownCommandError: If name is not a known command
    """
    key = ALIASES.get(name, name)
    try:
        return COMMANDS[key]
    except KeyError:
        raise UnknownCommandError(name) from None


def command_names() -> list[str]:
    """All accepted names, aliases included."""
    return sorted([*COMMANDS, *ALIASES])
