"""Remote push transport port: relays a message to another family device."""

from abc import ABC, abstractmethod


class PushTransport(ABC):
    """Abstract interface for cross-device push relay adapters.

    The hosting app decides whether a real provider sits behind this; the
    alerts domain only hands over the message and the recipient token.
    """

    @abstractmethod
    def send(
        self,
        device_token: str,
        title: str,
        body: str,
        tag: str | None = None,
        require_interaction: bool = False,
        data: dict | None = None,
    ) -> dict:
        """Relay a message to the device identified by ``device_token``.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
