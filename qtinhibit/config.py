import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

DEFAULT_INHIBIT_REASON = "A game is running"


def get_inhibit_reason(environ: Mapping[str, str]) -> str:
    try:
        return environ["INHIBIT_REASON"]
    except KeyError:
        return DEFAULT_INHIBIT_REASON


def is_debug_enabled(environ: Mapping[str, str]) -> bool:
    return bool(environ.get("INHIBIT_DEBUG"))


@dataclass(frozen=True, kw_only=True)
class Config:
    verbose: bool
    reason: str
    application: str
    command: tuple[str, ...]

    @classmethod
    def from_environ(cls, environ: Mapping[str, str], argv: Sequence[str]) -> "Config":
        """
        Build the run configuration from the environment and the command line.

        Everything after the program name is the command to run; its first
        element doubles as the application name shown to the desktop.
        """
        command = tuple(argv[1:])
        return cls(
            verbose=is_debug_enabled(environ),
            reason=get_inhibit_reason(environ),
            application=command[0] if command else os.path.basename(argv[0]),
            command=command,
        )
