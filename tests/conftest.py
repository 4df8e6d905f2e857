import pytest

from qtinhibit.bus import BusError
from qtinhibit.config import Config


class FakeBus:
    """Records method calls and rejects the interfaces listed in `reject`"""

    def __init__(self, reject=()):
        self.reject = set(reject)
        self.calls = []

    def call(self, service, path, interface, method, *args):
        self.calls.append((service, path, interface, method, args))
        if interface in self.reject:
            raise BusError(f"The name {service} was not provided by any .service files")
        return []


@pytest.fixture
def fake_bus():
    return FakeBus()


@pytest.fixture
def make_config():
    def make(verbose=False, reason="A game is running", command=("game",)):
        return Config(
            verbose=verbose,
            reason=reason,
            application=command[0] if command else "qtinhibit",
            command=tuple(command),
        )

    return make
