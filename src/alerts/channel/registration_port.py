"""Push registration port: obtains a device token from the push provider."""

from abc import ABC, abstractmethod


class PushRegistration(ABC):
    """Abstract interface for push-provider device registration."""

    @abstractmethod
    async def register(self, vapid_key: str) -> dict:
        """Register this device with the push provider.

        Returns:
            dict with keys: token, status ("registered" or "failed"), error (optional)
        """
        ...
