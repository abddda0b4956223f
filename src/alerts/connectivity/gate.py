"""OfflineGate: the single "requires live connectivity" precondition.

Wrapped actions run only while the monitor reports online. Offline calls
are rejected before the action runs and make sure the offline warning is
visible. Results and exceptions of the action itself pass through as is.
"""

import functools
import inspect

import structlog

from alerts.connectivity.monitor import ConnectivityMonitor
from alerts.exceptions import ConnectivityError

logger = structlog.get_logger(__name__)


class OfflineGate:
    def __init__(self, monitor: ConnectivityMonitor):
        self._monitor = monitor

    def check(self, operation: str | None = None) -> None:
        """Raise ConnectivityError if the device is offline right now."""
        if self._monitor.is_online():
            return

        self._monitor.raise_offline_warning()
        logger.info("Operation blocked while offline", operation=operation)
        raise ConnectivityError(f"Cannot {operation or 'complete this action'} while offline")

    def wrap(self, action):
        """Return ``action`` guarded by the connectivity check.

        Coroutine functions get an async wrapper that checks before the
        action's coroutine is created.
        """
        operation = getattr(action, "__name__", None)

        if inspect.iscoroutinefunction(action):

            @functools.wraps(action)
            async def guarded_async(*args, **kwargs):
                self.check(operation)
                return await action(*args, **kwargs)

            return guarded_async

        @functools.wraps(action)
        def guarded(*args, **kwargs):
            self.check(operation)
            return action(*args, **kwargs)

        return guarded
