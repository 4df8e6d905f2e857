"""
Runs the inhibited command and maps its termination to our exit code
"""
import os
import signal
import subprocess
from collections.abc import Sequence

from .config import Config
from .utils import debug, error, signal_name

EXIT_FAILURE = 1
EXIT_ABNORMAL = 127
SIGNAL_EXIT_BASE = 128


def wait_forever() -> None:
    """Sleep until a signal terminates the process"""
    while True:
        signal.pause()


def spawn(command: Sequence[str]) -> subprocess.Popen:
    # No shell; the environment and every open descriptor are inherited
    return subprocess.Popen(list(command), close_fds=False)


def wait_for_child(p: subprocess.Popen) -> int:
    """Reap the child and return its raw wait status.

    Interrupted waits are retried by the interpreter.
    """
    _, status = os.waitpid(p.pid, 0)
    if os.WIFEXITED(status) or os.WIFSIGNALED(status):
        p.returncode = os.waitstatus_to_exitcode(status)
    return status


def exit_code_from_status(status: int, config: Config) -> int:
    if os.WIFEXITED(status):
        code = os.WEXITSTATUS(status)
        if code == 0:
            debug(config, "Child process exited normally\n")
        else:
            error(f"Child process exited with code {code}")
        return code
    if os.WIFSIGNALED(status):
        signum = os.WTERMSIG(status)
        error(f"Child process killed by signal {signal_name(signum)}")
        return SIGNAL_EXIT_BASE + signum
    error("Child process exited abnormally")
    return EXIT_ABNORMAL


def execute(config: Config) -> int:
    """Run the configured command, or hold the inhibition until killed."""
    if not config.command:
        wait_forever()

    debug(config, "Starting process: ")
    try:
        p = spawn(config.command)
    except OSError as e:
        error(f"Failed to start process: {e.strerror or e}")
        return EXIT_FAILURE
    debug(config, "OK\n")

    try:
        status = wait_for_child(p)
    except ChildProcessError:
        error("Child process does not exist")
        return EXIT_FAILURE
    return exit_code_from_status(status, config)
