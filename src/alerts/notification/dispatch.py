"""NotificationDispatcher: multi-channel send with an in-app delivery floor.

Every successful send uses the in-app channel. The native channel is
added when consent is granted, and skipped silently otherwise. Native
failures are logged and never undo the in-app delivery. Offline sends
fail before any channel is touched: there is no local queue.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

import structlog
from protean.exceptions import ValidationError

from alerts.audience.router import SENT_ACKNOWLEDGEMENT, AudiencePolicy, Role, RoleRouter
from alerts.channel.in_app_port import InAppSink
from alerts.channel.platform_port import NotificationPlatform
from alerts.channel.push_port import PushTransport
from alerts.connectivity.monitor import ConnectivityMonitor
from alerts.exceptions import ConnectivityError, PlatformUnsupported
from alerts.message.descriptor import MessageDescriptor
from alerts.permission.manager import PermissionManager
from alerts.templates import get_alert_template

logger = structlog.get_logger(__name__)

INCOMING_DEFAULT_BODY = "Nova notificação!"
INCOMING_STYLE = "incoming"
INCOMING_DURATION_MS = 6000
ACKNOWLEDGEMENT_STYLE = "success"


class DeliveryChannel(Enum):
    IN_APP = "in-app"
    NATIVE = "native"


@dataclass(frozen=True)
class DispatchResult:
    """Record of the channels one send actually used."""

    channels_used: frozenset[str]
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    acknowledgement: str | None = None
    relayed: bool = False


class NotificationDispatcher:
    """Sends messages to the session's audience over in-app and native channels."""

    def __init__(
        self,
        monitor: ConnectivityMonitor,
        permissions: PermissionManager,
        router: RoleRouter,
        platform: NotificationPlatform,
        sink: InAppSink,
        push_transport: PushTransport | None = None,
        child_name: str = "Heitor",
    ):
        self._monitor = monitor
        self._permissions = permissions
        self._router = router
        self._platform = platform
        self._sink = sink
        self._push_transport = push_transport
        self._child_name = child_name

    # -------------------------------------------------------------------
    # Public operations
    # -------------------------------------------------------------------
    def send(
        self,
        descriptor: MessageDescriptor | dict,
        audience: Role | str,
        recipient_token: str | None = None,
    ) -> DispatchResult:
        """Deliver ``descriptor`` to ``audience``.

        Raises:
            ValidationError: the message is malformed (no channel touched).
            ConnectivityError: the device is offline (no channel touched).
        """
        descriptor = self._coerce(descriptor)
        policy = self._router.resolve_audience(audience)

        return self._deliver(
            descriptor,
            policy,
            toast_message=descriptor.body,
            style=policy.in_app_style,
            duration_ms=policy.in_app_duration_ms,
            acknowledge=policy.acknowledge_sender,
            recipient_token=recipient_token,
        )

    def notify(self, kind, context: dict, audience: Role | str) -> DispatchResult:
        """Render a preset alert and deliver it with the preset's styling."""
        template_cls = get_alert_template(kind)
        rendered = template_cls.render({"child_name": self._child_name, **context})
        descriptor = MessageDescriptor(
            title=rendered["title"],
            body=rendered["body"],
            tag=rendered.get("tag"),
            require_interaction=rendered.get("require_interaction"),
        )
        policy = self._router.resolve_audience(audience)

        return self._deliver(
            descriptor,
            policy,
            toast_message=rendered.get("toast", descriptor.body),
            style=template_cls.style,
            duration_ms=template_cls.duration_ms,
            acknowledge=False,
        )

    def deliver_incoming(self, payload: dict | None) -> str:
        """Show a push message received while the app is in the foreground.

        Incoming messages go to the in-app sink only; the provider already
        handled the system notification.
        """
        notification = (payload or {}).get("notification") or {}
        body = notification.get("body") or INCOMING_DEFAULT_BODY
        logger.info("Foreground push message received", has_body="body" in notification)
        return self._sink.enqueue(body, INCOMING_STYLE, INCOMING_DURATION_MS)

    # -------------------------------------------------------------------
    # Core algorithm
    # -------------------------------------------------------------------
    def _coerce(self, descriptor) -> MessageDescriptor:
        if isinstance(descriptor, MessageDescriptor):
            return descriptor
        if isinstance(descriptor, dict):
            return MessageDescriptor.from_payload(descriptor)
        raise ValidationError({"descriptor": ["Expected a MessageDescriptor or a message payload"]})

    def _deliver(
        self,
        descriptor: MessageDescriptor,
        policy: AudiencePolicy,
        toast_message: str,
        style: str,
        duration_ms: int,
        acknowledge: bool,
        recipient_token: str | None = None,
    ) -> DispatchResult:
        # Both reads happen with no suspension point in between
        online = self._monitor.is_online()
        granted = self._permissions.is_granted()

        if not online:
            logger.info("Send rejected while offline", audience=policy.role.value)
            raise ConnectivityError("Cannot send notifications while offline")

        channels = set()

        self._sink.enqueue(toast_message, style, duration_ms)
        channels.add(DeliveryChannel.IN_APP.value)

        if granted:
            if self._show_native(descriptor, policy):
                channels.add(DeliveryChannel.NATIVE.value)
        else:
            logger.debug("Native channel skipped, permission not granted", audience=policy.role.value)

        relayed = False
        if recipient_token is not None:
            relayed = self._relay(descriptor, policy, recipient_token)

        acknowledgement = None
        if acknowledge:
            acknowledgement = SENT_ACKNOWLEDGEMENT
            self._sink.enqueue(acknowledgement, ACKNOWLEDGEMENT_STYLE, policy.in_app_duration_ms)

        logger.info(
            "Notification dispatched",
            audience=policy.role.value,
            channels=sorted(channels),
            tag=descriptor.tag,
        )

        return DispatchResult(
            channels_used=frozenset(channels),
            acknowledgement=acknowledgement,
            relayed=relayed,
        )

    def _require_interaction(self, descriptor: MessageDescriptor, policy: AudiencePolicy) -> bool:
        if descriptor.require_interaction is None:
            return policy.require_interaction
        return descriptor.require_interaction

    def _show_native(self, descriptor: MessageDescriptor, policy: AudiencePolicy) -> bool:
        try:
            result = self._platform.show(
                title=descriptor.title,
                body=descriptor.body,
                tag=descriptor.tag,
                require_interaction=self._require_interaction(descriptor, policy),
                icon=descriptor.icon,
                badge=descriptor.badge,
                data=dict(descriptor.data) if descriptor.data else None,
            )
        except PlatformUnsupported:
            logger.info("Native channel unavailable on this platform")
            return False
        except Exception as exc:
            logger.error("Native notification failed", error=str(exc), tag=descriptor.tag)
            return False

        if result.get("status") != "shown":
            logger.warning(
                "Native notification rejected",
                error=result.get("error", "Unknown native display error"),
                tag=descriptor.tag,
            )
            return False
        return True

    def _relay(self, descriptor: MessageDescriptor, policy: AudiencePolicy, recipient_token: str) -> bool:
        if self._push_transport is None:
            logger.debug("No push transport configured, relay skipped")
            return False

        try:
            result = self._push_transport.send(
                device_token=recipient_token,
                title=descriptor.title,
                body=descriptor.body,
                tag=descriptor.tag,
                require_interaction=self._require_interaction(descriptor, policy),
                data=dict(descriptor.data) if descriptor.data else None,
            )
        except Exception as exc:
            logger.error("Push relay failed", error=str(exc))
            return False

        if result.get("status") != "sent":
            logger.warning("Push relay rejected", error=result.get("error", "Unknown relay error"))
            return False
        return True
