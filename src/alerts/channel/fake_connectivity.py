"""Fake connectivity signal that tests drive by hand."""

from collections.abc import Callable

from alerts.channel.connectivity_port import ConnectivitySignal


class FakeConnectivitySignal(ConnectivitySignal):
    """Connectivity source whose signals are emitted explicitly."""

    def __init__(self, online: bool = True, available: bool = True):
        self.online = online
        self.available = available
        self.subscribers: list[Callable[[bool], None]] = []

    @property
    def is_available(self) -> bool:
        return self.available

    def is_online(self) -> bool:
        return self.online

    def subscribe(self, callback: Callable[[bool], None]) -> Callable[[], None]:
        self.subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self.subscribers:
                self.subscribers.remove(callback)

        return unsubscribe

    def emit(self, online: bool) -> None:
        """Deliver a host signal to every subscriber, even if unchanged."""
        self.online = online
        for callback in list(self.subscribers):
            callback(online)

    def go_offline(self) -> None:
        self.emit(False)

    def go_online(self) -> None:
        self.emit(True)
