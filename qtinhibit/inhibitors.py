"""
Idle inhibition over the session bus.

Each desktop exposes a different subset of these interfaces, so every
inhibitor is tried in turn and a failure only gets reported. The locks are
held by the remote services until our bus connection goes away.
"""
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from PyQt6.QtCore import QMetaType
from PyQt6.QtDBus import QDBusArgument

from .bus import BusError
from .config import Config
from .utils import debug, error

# org.freedesktop.portal.Inhibit flag for "Idle"
PORTAL_INHIBIT_IDLE = 8


@dataclass(frozen=True, kw_only=True)
class Inhibitor:
    service: str
    path: str
    interface: str
    method: str
    # Arguments in call order, typed the way the remote method expects them
    build_args: Callable[[Config], tuple]
    # What is being inhibited, as in "Failed to inhibit <label>"
    label: str
    description: str

    def inhibit(self, bus, config: Config) -> bool:
        debug(config, f"Trying to inhibit {self.description} via {self.interface} interface: ")
        try:
            bus.call(
                self.service,
                self.path,
                self.interface,
                self.method,
                *self.build_args(config),
            )
        except BusError as e:
            debug(config, "Failed.\n")
            error(f"Failed to inhibit {self.label}: {e}")
            return False
        debug(config, "Ok.\n")
        return True


INHIBITORS = (
    Inhibitor(
        service="org.freedesktop.portal.Desktop",
        path="/org/freedesktop/portal/desktop",
        interface="org.freedesktop.portal.Inhibit",
        method="Inhibit",
        # sua{sv}: window id, flags, options
        build_args=lambda config: (
            "",
            QDBusArgument(PORTAL_INHIBIT_IDLE, QMetaType.Type.UInt.value),
            {"reason": config.reason},
        ),
        label="idle",
        description="idle",
    ),
    Inhibitor(
        service="org.freedesktop.ScreenSaver",
        path="/org/freedesktop/ScreenSaver",
        interface="org.freedesktop.ScreenSaver",
        method="Inhibit",
        build_args=lambda config: (config.reason, config.application),
        label="screensaver",
        description="screensaver",
    ),
    Inhibitor(
        service="org.freedesktop.PowerManagement.Inhibit",
        path="/org/freedesktop/PowerManagement/Inhibit",
        interface="org.freedesktop.PowerManagement.Inhibit",
        method="Inhibit",
        build_args=lambda config: (config.reason, config.application),
        label="power saving",
        description="power management",
    ),
)


def inhibit_all(bus, config: Config, inhibitors: Sequence[Inhibitor] = INHIBITORS) -> list[bool]:
    return [inhibitor.inhibit(bus, config) for inhibitor in inhibitors]
