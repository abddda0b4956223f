"""In-app presentation port: the toast/banner sink rendered by the UI layer."""

from abc import ABC, abstractmethod


class InAppSink(ABC):
    """Abstract interface for in-app message presentation."""

    @abstractmethod
    def enqueue(self, message: str, style: str, duration_ms: int | None) -> str:
        """Queue a message for display.

        ``duration_ms=None`` means persistent: shown until dismissed.

        Returns:
            The toast id, usable with ``dismiss``.
        """
        ...

    @abstractmethod
    def dismiss(self, toast_id: str) -> None:
        """Remove a queued or visible message."""
        ...
