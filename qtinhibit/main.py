"""
QtInhibit - keep the desktop awake while a game runs
"""
import os
import signal
import sys
from collections.abc import Mapping, Sequence

from .bus import BusConnectionError, open_session_bus
from .config import Config
from .inhibitors import inhibit_all
from .process import EXIT_FAILURE, execute
from .utils import error


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    """Inhibit idle, then run the command given on the command line.

    Returns the exit code for the process.
    """
    argv = sys.argv if argv is None else argv
    environ = os.environ if environ is None else environ
    config = Config.from_environ(environ, argv)

    try:
        with open_session_bus() as bus:
            inhibit_all(bus, config)
            # The command runs inside the bus scope so the locks stay held
            return execute(config)
    except BusConnectionError as e:
        error(f"Failed to connect to user bus: {e}")
        return EXIT_FAILURE


def main_cli(argv: Sequence[str] | None = None):
    """Console script entry point"""
    # Let Ctrl-C terminate us the way it terminates the game
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    sys.exit(main(argv))


if __name__ == '__main__':
    main_cli()
