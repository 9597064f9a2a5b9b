"""
ncspot-remote CLI - Entry points

`ncspot-prev` and `ncspot-playpause` take no arguments and are meant to be
bound to hotkeys. `ncspot-remote` is the general form.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from ncspot_remote import __version__, process
from ncspot_remote.commands import command_names, get_command
from ncspot_remote.core.config import Config, load_config
from ncspot_remote.core.output import setup_loguru
from ncspot_remote.dispatcher import dispatch
from ncspot_remote.ipc import client


def _init(verbose: bool = False, socket_path: Optional[str] = None) -> Config:
    """Load config and set up logging for a single invocation."""
    config = load_config()
    if socket_path:
        config.player.socket_path = str(Path(socket_path).expanduser())

    level = "DEBUG" if verbose else config.logging.level.upper()
    log_file = Path(config.logging.log_file) if config.logging.log_file else None
    setup_loguru(level, log_file)
    return config


def show_status(config: Config, console: Optional[Console] = None) -> int:
    """Print whether ncspot is reachable.

    Returns:
        0 if the process is running and the socket exists, 1 otherwise
    """
    console = console or Console()
    name = config.player.process_name
    socket_path = client.get_socket_path(config)

    running = process.is_process_running(name)
    has_socket = client.is_socket(socket_path)

    def mark(ok: bool) -> str:
        return "[green]yes[/green]" if ok else "[red]no[/red]"

    console.print(f"Process [bold]{name}[/bold] running: {mark(running)}")
    console.print(f"Socket {socket_path}: {mark(has_socket)}")
    return 0 if running and has_socket else 1


def run_command(name: str) -> int:
    """Dispatch a named command with default CLI setup."""
    config = _init()
    return dispatch(get_command(name), config)


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="ncspot-remote",
        description="Send media-control commands to a running ncspot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ncspot-remote playpause    # Toggle playback (media key if ncspot is down)
  ncspot-remote prev         # Previous track
  ncspot-remote status       # Show whether ncspot is reachable
        """,
    )
    parser.add_argument(
        "command",
        choices=command_names() + ["status"],
        help="Command to send, or 'status'",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    parser.add_argument("--socket", metavar="PATH", help="Override the socket path")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args()
    config = _init(verbose=args.verbose, socket_path=args.socket)

    if args.command == "status":
        sys.exit(show_status(config))

    sys.exit(dispatch(get_command(args.command), config))


def prev_main() -> None:
    """Entry point for ncspot-prev."""
    sys.exit(run_command("previous"))


def playpause_main() -> None:
    """Entry point for ncspot-playpause."""
    sys.exit(run_command("playpause"))


if __name__ == "__main__":
    main()
