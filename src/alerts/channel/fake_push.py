"""Fake push transport: records relayed messages instead of contacting a provider."""

from uuid import uuid4

from alerts.channel.push_port import PushTransport


class FakePushTransport(PushTransport):
    """Push relay that keeps every relayed message in memory."""

    def __init__(self):
        self.relayed: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Push relay failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Push relay failed"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def send(
        self,
        device_token: str,
        title: str,
        body: str,
        tag: str | None = None,
        require_interaction: bool = False,
        data: dict | None = None,
    ) -> dict:
        if not self.should_succeed:
            return {
                "message_id": None,
                "status": "failed",
                "error": self.failure_reason,
            }

        message_id = f"relay-{uuid4().hex[:12]}"
        self.relayed.append(
            {
                "message_id": message_id,
                "device_token": device_token,
                "title": title,
                "body": body,
                "tag": tag,
                "require_interaction": require_interaction,
                "data": data,
            }
        )

        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        """Clear relayed messages (useful between tests)."""
        self.relayed.clear()
        self.should_succeed = True
        self.failure_reason = "Push relay failed"
