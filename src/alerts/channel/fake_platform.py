"""Fake native notification platforms for tests and headless hosts."""

import asyncio
from uuid import uuid4

from alerts.channel.platform_port import NotificationPlatform
from alerts.exceptions import PlatformUnsupported


class FakeNotificationPlatform(NotificationPlatform):
    """Platform that records prompts and displayed notifications in memory."""

    def __init__(self, permission: str = "default", consent_answer: str = "granted"):
        self.current_permission = permission
        self.consent_answer = consent_answer
        self.prompt_count = 0
        self.prompt_error: Exception | None = None
        self.shown: list[dict] = []
        self.on_screen: dict[str, dict] = {}
        self.should_succeed = True
        self.failure_reason = "Native display failed"
        self.show_error: Exception | None = None
        self._release_prompt: asyncio.Event | None = None

    @property
    def is_supported(self) -> bool:
        return True

    def configure(self, should_succeed: bool = True, failure_reason: str = "Native display failed"):
        """Configure the fake display behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def hold_prompt(self) -> asyncio.Event:
        """Keep the next consent prompt open until the returned event is set."""
        self._release_prompt = asyncio.Event()
        return self._release_prompt

    def permission(self) -> str:
        return self.current_permission

    async def request_consent(self) -> str:
        self.prompt_count += 1
        if self._release_prompt is not None:
            await self._release_prompt.wait()
        else:
            await asyncio.sleep(0)
        if self.prompt_error is not None:
            raise self.prompt_error
        self.current_permission = self.consent_answer
        return self.consent_answer

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
        if self.show_error is not None:
            raise self.show_error

        if not self.should_succeed:
            return {
                "notification_id": None,
                "status": "failed",
                "error": self.failure_reason,
            }

        notification_id = f"native-{uuid4().hex[:12]}"
        record = {
            "notification_id": notification_id,
            "title": title,
            "body": body,
            "tag": tag,
            "require_interaction": require_interaction,
            "icon": icon,
            "badge": badge,
            "data": data,
        }
        self.shown.append(record)
        # Same tag replaces the notification on screen instead of stacking
        self.on_screen[tag or notification_id] = record

        return {"notification_id": notification_id, "status": "shown"}

    def dismiss(self, key: str) -> None:
        """Simulate the user closing a notification (by tag or id)."""
        self.on_screen.pop(key, None)

    def reset(self):
        """Clear recorded state (useful between tests)."""
        self.shown.clear()
        self.on_screen.clear()
        self.prompt_count = 0
        self.prompt_error = None
        self.show_error = None
        self.should_succeed = True
        self.failure_reason = "Native display failed"
        self._release_prompt = None


class UnsupportedPlatform(NotificationPlatform):
    """Null capability for hosts without native notifications."""

    @property
    def is_supported(self) -> bool:
        return False

    def permission(self) -> str:
        return "default"

    async def request_consent(self) -> str:
        raise PlatformUnsupported("Native notifications are not available on this host")

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
        raise PlatformUnsupported("Native notifications are not available on this host")
