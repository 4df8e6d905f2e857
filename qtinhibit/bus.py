"""Session bus access for QtInhibit"""
from collections.abc import Generator
from contextlib import contextmanager

from PyQt6.QtCore import QCoreApplication
from PyQt6.QtDBus import QDBusConnection, QDBusMessage

CONNECTION_NAME = "qtinhibit"


class BusError(Exception):
    """A method call on the session bus returned an error reply"""


class BusConnectionError(Exception):
    """The session bus could not be reached"""


class SessionBus:
    """A private connection to the user's session bus"""

    def __init__(self, connection: QDBusConnection):
        self.connection = connection

    def call(self, service: str, path: str, interface: str, method: str, *args) -> list:
        """Call a remote method and block until it replies.

        Arguments are sent as given; wrap them in QDBusArgument where the
        D-Bus type differs from the default mapping of the Python value.
        Raises BusError when the reply is an error.
        """
        message = QDBusMessage.createMethodCall(service, path, interface, method)
        message.setArguments(list(args))
        reply = self.connection.call(message)
        if reply.type() == QDBusMessage.MessageType.ErrorMessage:
            raise BusError(reply.errorMessage() or reply.errorName())
        return reply.arguments()


@contextmanager
def open_session_bus(name: str = CONNECTION_NAME) -> Generator[SessionBus, None, None]:
    """
    Connect to the session bus for the duration of the block.

    Closing the connection releases every inhibition taken through it.
    """
    # QtDBus expects an application object to exist before any connection
    app = QCoreApplication.instance() or QCoreApplication([name])
    connection = QDBusConnection.connectToBus(QDBusConnection.BusType.SessionBus, name)
    try:
        if not connection.isConnected():
            raise BusConnectionError(connection.lastError().message() or "Not connected")
        yield SessionBus(connection)
    finally:
        QDBusConnection.disconnectFromBus(name)
