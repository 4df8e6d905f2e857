import signal
import sys

from .config import Config


def debug(config: Config, msg: str) -> None:
    if config.verbose:
        print(msg, end="", file=sys.stderr, flush=True)


def error(msg: str) -> None:
    print(msg, file=sys.stderr, flush=True)


def signal_name(signum: int) -> str:
    try:
        name = signal.strsignal(signum)
    except ValueError:
        name = None
    return name or str(signum)
