"""Runtime settings for the alerts domain, read from environment variables."""

import os
from dataclasses import dataclass


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer number of milliseconds, got {raw!r}") from None


@dataclass(frozen=True)
class AlertSettings:
    """Delivery tunables and push credentials for one process."""

    vapid_key: str | None = None
    online_ack_ms: int = 3000
    child_toast_ms: int = 6000
    parent_toast_ms: int = 4000
    child_name: str = "Heitor"

    @classmethod
    def from_env(cls) -> "AlertSettings":
        return cls(
            vapid_key=os.getenv("ALERTS_VAPID_KEY") or None,
            online_ack_ms=_int_env("ALERTS_ONLINE_ACK_MS", 3000),
            child_toast_ms=_int_env("ALERTS_CHILD_TOAST_MS", 6000),
            parent_toast_ms=_int_env("ALERTS_PARENT_TOAST_MS", 4000),
            child_name=os.getenv("ALERTS_CHILD_NAME", "Heitor"),
        )
