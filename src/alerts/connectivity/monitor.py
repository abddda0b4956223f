"""ConnectivityMonitor: owns the process-wide online/offline state.

State changes only in reaction to host signals. Subscribers hear about
real transitions only; a repeated signal for the same state is dropped.

While offline a persistent warning sits in the in-app sink. It has no
timer: only the next online transition removes it. Coming back online
shows a short acknowledgement instead.

Hosts that expose no connectivity signal get a monitor that is online
forever (fail open).
"""

from collections.abc import Callable
from enum import Enum

import structlog

from alerts.channel.connectivity_port import ConnectivitySignal
from alerts.channel.in_app_port import InAppSink

logger = structlog.get_logger(__name__)

OFFLINE_WARNING = "📱 Sem conexão com a internet. O aplicativo precisa de internet para funcionar."
ONLINE_ACKNOWLEDGEMENT = "🌐 Conexão restaurada!"

OFFLINE_STYLE = "error"
ONLINE_STYLE = "success"


class ConnectivityState(Enum):
    ONLINE = "online"
    OFFLINE = "offline"


class ConnectivityMonitor:
    """Tracks host reachability and drives the offline indicator."""

    def __init__(
        self,
        signal: ConnectivitySignal | None,
        sink: InAppSink,
        online_ack_ms: int = 3000,
    ):
        self._signal = signal
        self._sink = sink
        self._online_ack_ms = online_ack_ms
        self._state = ConnectivityState.ONLINE
        self._listeners: list[Callable[[ConnectivityState], None]] = []
        self._unsubscribe: Callable[[], None] | None = None
        self._warning_id: str | None = None

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    @property
    def has_signal(self) -> bool:
        return self._signal is not None and self._signal.is_available

    def start(self) -> None:
        """Read the initial state and subscribe to host signals."""
        if self._unsubscribe is not None:
            return

        if not self.has_signal:
            logger.warning("No connectivity signal on this host, assuming online")
            self._state = ConnectivityState.ONLINE
            self._clear_offline_warning()
            return

        self._unsubscribe = self._signal.subscribe(self._on_signal)
        # A restart may find the host in either state; reconcile through the normal transition
        self._on_signal(self._signal.is_online())

        logger.info("Connectivity monitor started", state=self._state.value)

    def stop(self) -> None:
        """Release the host subscription. Listeners are kept."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
            logger.info("Connectivity monitor stopped")

    def __enter__(self) -> "ConnectivityMonitor":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def get_state(self) -> ConnectivityState:
        return self._state

    def is_online(self) -> bool:
        return self._state is ConnectivityState.ONLINE

    @property
    def warning_active(self) -> bool:
        return self._warning_id is not None

    # -------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------
    def on_change(self, callback: Callable[[ConnectivityState], None]) -> Callable[[], None]:
        """Register a transition listener. Returns its unsubscribe handle."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    # -------------------------------------------------------------------
    # Indicator
    # -------------------------------------------------------------------
    def raise_offline_warning(self) -> None:
        """Show the persistent offline warning unless it is already showing."""
        if self._warning_id is not None:
            return
        self._warning_id = self._sink.enqueue(OFFLINE_WARNING, OFFLINE_STYLE, None)

    def _clear_offline_warning(self) -> None:
        if self._warning_id is None:
            return
        self._sink.dismiss(self._warning_id)
        self._warning_id = None

    # -------------------------------------------------------------------
    # Signal handling
    # -------------------------------------------------------------------
    def _on_signal(self, online: bool) -> None:
        new_state = ConnectivityState.ONLINE if online else ConnectivityState.OFFLINE
        if new_state is self._state:
            logger.debug("Duplicate connectivity signal ignored", state=new_state.value)
            return

        self._state = new_state

        if new_state is ConnectivityState.OFFLINE:
            logger.warning("Device went offline")
            self.raise_offline_warning()
        else:
            logger.info("Device back online")
            self._clear_offline_warning()
            self._sink.enqueue(ONLINE_ACKNOWLEDGEMENT, ONLINE_STYLE, self._online_ack_ms)

        for callback in list(self._listeners):
            try:
                callback(new_state)
            except Exception as exc:
                logger.error(
                    "Connectivity listener failed",
                    state=new_state.value,
                    error=str(exc),
                )
