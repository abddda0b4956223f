"""Fake in-app sink: records toasts for test assertions."""

from uuid import uuid4

from alerts.channel.in_app_port import InAppSink


class FakeInAppSink(InAppSink):
    """In-app sink that keeps every toast in memory."""

    def __init__(self):
        self.toasts: list[dict] = []
        self.active: dict[str, dict] = {}

    def enqueue(self, message: str, style: str, duration_ms: int | None) -> str:
        toast_id = f"toast-{uuid4().hex[:12]}"
        record = {
            "toast_id": toast_id,
            "message": message,
            "style": style,
            "duration_ms": duration_ms,
            "persistent": duration_ms is None,
        }
        self.toasts.append(record)
        self.active[toast_id] = record
        return toast_id

    def dismiss(self, toast_id: str) -> None:
        self.active.pop(toast_id, None)

    def with_style(self, style: str) -> list[dict]:
        """All toasts ever enqueued with the given style."""
        return [t for t in self.toasts if t["style"] == style]

    def reset(self):
        """Clear recorded toasts (useful between tests)."""
        self.toasts.clear()
        self.active.clear()
