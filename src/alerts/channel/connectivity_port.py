"""Connectivity signal port: online/offline events from the host."""

from abc import ABC, abstractmethod
from collections.abc import Callable


class ConnectivitySignal(ABC):
    """Abstract source of network reachability events."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the host reports connectivity at all."""
        ...

    @abstractmethod
    def is_online(self) -> bool:
        """Current reachability as reported by the host."""
        ...

    @abstractmethod
    def subscribe(self, callback: Callable[[bool], None]) -> Callable[[], None]:
        """Call ``callback(online)`` on every host signal.

        The host may repeat a signal for an unchanged state.

        Returns:
            A function that removes the subscription.
        """
        ...
