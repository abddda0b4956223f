"""RoleRouter: per-audience delivery defaults.

Both roles get the same channels (in-app always, native when granted).
They differ in how insistent the native alert is, how the in-app toast
looks, and whether the sender gets a "sent" acknowledgement.
"""

from dataclasses import dataclass
from enum import Enum

from alerts.settings import AlertSettings

SENT_ACKNOWLEDGEMENT = "📤 Notificação enviada!"


class Role(Enum):
    CHILD = "child"
    PARENT = "parent"


@dataclass(frozen=True)
class AudiencePolicy:
    """Resolved delivery defaults for one role."""

    role: Role
    require_interaction: bool
    acknowledge_sender: bool
    in_app_style: str
    in_app_duration_ms: int


class RoleRouter:
    def __init__(self, settings: AlertSettings | None = None):
        self._settings = settings or AlertSettings()

    def resolve_audience(self, role: Role | str) -> AudiencePolicy:
        """Return the delivery policy for ``role`` (enum or its string value)."""
        try:
            role = Role(role)
        except ValueError:
            raise ValueError(f"Unknown audience role: {role!r}") from None

        if role is Role.CHILD:
            # Child alerts stay on screen until dismissed
            return AudiencePolicy(
                role=role,
                require_interaction=True,
                acknowledge_sender=False,
                in_app_style="child-message",
                in_app_duration_ms=self._settings.child_toast_ms,
            )

        return AudiencePolicy(
            role=role,
            require_interaction=False,
            acknowledge_sender=True,
            in_app_style="parent-message",
            in_app_duration_ms=self._settings.parent_toast_ms,
        )
