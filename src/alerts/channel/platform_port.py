"""Native notification capability port: consent prompt plus system display."""

from abc import ABC, abstractmethod


class NotificationPlatform(ABC):
    """Abstract interface over the host's native notification API.

    Hosts without native support are represented by an adapter whose
    ``is_supported`` is False; delivery then degrades to in-app only.
    """

    @property
    @abstractmethod
    def is_supported(self) -> bool:
        """Whether the host can show native notifications at all."""
        ...

    @abstractmethod
    def permission(self) -> str:
        """Return the permission the platform currently reports.

        One of "default", "granted" or "denied".
        """
        ...

    @abstractmethod
    async def request_consent(self) -> str:
        """Prompt the user for consent and return the resolved permission."""
        ...

    @abstractmethod
    def show(
        self,
        title: str,
        body: str,
        tag: str | None = None,
        require_interaction: bool = False,
        icon: str | None = None,
        badge: str | None = None,
        data: dict | None = None,
    ) -> dict:
        """Display a native notification. Fire-and-forget.

        A notification carrying the same ``tag`` as one still on screen
        replaces it.

        Returns:
            dict with keys: notification_id, status ("shown" or "failed"), error (optional)
        """
        ...
