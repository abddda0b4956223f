"""Fake push registration: hands out tokens without a network round trip."""

import asyncio
from uuid import uuid4

from alerts.channel.registration_port import PushRegistration


class FakePushRegistration(PushRegistration):
    """Registration adapter that records calls in memory."""

    def __init__(self):
        self.calls: list[str] = []
        self.should_succeed = True
        self.failure_reason = "Push registration failed"
        self.error: Exception | None = None
        self._release: asyncio.Event | None = None

    def configure(self, should_succeed: bool = True, failure_reason: str = "Push registration failed"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def hold(self) -> asyncio.Event:
        """Keep the next registration in flight until the returned event is set."""
        self._release = asyncio.Event()
        return self._release

    async def register(self, vapid_key: str) -> dict:
        self.calls.append(vapid_key)
        if self._release is not None:
            await self._release.wait()
        else:
            await asyncio.sleep(0)

        if self.error is not None:
            raise self.error

        if not self.should_succeed:
            return {"token": None, "status": "failed", "error": self.failure_reason}

        return {"token": f"device-{uuid4().hex[:16]}", "status": "registered"}

    def reset(self):
        """Clear recorded calls (useful between tests)."""
        self.calls.clear()
        self.should_succeed = True
        self.failure_reason = "Push registration failed"
        self.error = None
        self._release = None
