"""AlertCenter: composition root for one app session.

The hosting app builds one center at startup with the session's role,
starts it (subscribing to connectivity signals) and stops it on teardown.
Sends and preset alerts go through the OfflineGate.

Usage:
    center = AlertCenter.bootstrap(role="parent")
    with center:
        result = center.send({"title": "⏰ Lembrete", "body": "Complete suas tarefas"}, "child")
"""

from alerts import channel
from alerts.audience.router import Role, RoleRouter
from alerts.connectivity.gate import OfflineGate
from alerts.connectivity.monitor import ConnectivityMonitor
from alerts.domain import alerts
from alerts.notification.dispatch import NotificationDispatcher
from alerts.permission.manager import PermissionManager, PermissionState
from alerts.settings import AlertSettings
from alerts.templates.catalog import TemplateCatalog
from alerts.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

_UNSET = object()

PERMISSION_GRANTED_MESSAGE = "🔔 Notificações ativadas! Você receberá lembretes das missões."
PERMISSION_GRANTED_STYLE = "success"
PERMISSION_GRANTED_DURATION_MS = 4000


class AlertCenter:
    def __init__(
        self,
        role: Role | str,
        settings: AlertSettings | None = None,
        platform=None,
        connectivity=_UNSET,
        registration=None,
        sink=None,
        push_transport=None,
    ):
        self.role = Role(role)
        self.settings = settings or AlertSettings()

        # Unset ports fall back to the registry; connectivity=None means "no signal"
        self.platform = platform or channel.get_port(channel.PLATFORM)
        self.sink = sink or channel.get_port(channel.IN_APP)
        signal = channel.get_port(channel.CONNECTIVITY) if connectivity is _UNSET else connectivity
        registration = registration or channel.get_port(channel.REGISTRATION)

        self.monitor = ConnectivityMonitor(signal, self.sink, online_ack_ms=self.settings.online_ack_ms)
        self.gate = OfflineGate(self.monitor)
        self.permissions = PermissionManager(
            self.platform,
            self.monitor,
            registration=registration,
            vapid_key=self.settings.vapid_key,
        )
        self.router = RoleRouter(self.settings)
        self.catalog = TemplateCatalog(child_name=self.settings.child_name)
        self.dispatcher = NotificationDispatcher(
            self.monitor,
            self.permissions,
            self.router,
            self.platform,
            self.sink,
            push_transport=push_transport,
            child_name=self.settings.child_name,
        )

        self._send = self.gate.wrap(self.dispatcher.send)
        self._notify = self.gate.wrap(self.dispatcher.notify)
        # Consent checks connectivity itself so a decided state stays readable offline
        self.request_consent = self.permissions.request_consent
        self.permissions.on_resolved(self._announce_permission)

    @classmethod
    def bootstrap(cls, role: Role | str, **ports) -> "AlertCenter":
        """Configure logging, initialise the domain and build a center from env settings."""
        configure_logging()
        alerts.init()
        return cls(role, settings=AlertSettings.from_env(), **ports)

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def start(self) -> None:
        self.monitor.start()
        logger.info(
            "Alert center started",
            role=self.role.value,
            permission=self.permissions.get_state().value,
            native_supported=self.platform.is_supported,
        )

    def stop(self) -> None:
        self.monitor.stop()

    def __enter__(self) -> "AlertCenter":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def wrap(self, action):
        """Gate any other mutating host action (e.g. starting a session) on connectivity."""
        return self.gate.wrap(action)

    # -------------------------------------------------------------------
    # Gated operations
    # -------------------------------------------------------------------
    def send(self, descriptor, audience: Role | str | None = None, recipient_token: str | None = None):
        """Send a message; the audience defaults to this session's role."""
        return self._send(descriptor, audience or self.role, recipient_token=recipient_token)

    def notify(self, kind, context: dict, audience: Role | str | None = None):
        """Raise a preset alert; the audience defaults to this session's role."""
        return self._notify(kind, context, audience or self.role)

    def _announce_permission(self, state: PermissionState) -> None:
        if state is PermissionState.GRANTED:
            self.sink.enqueue(PERMISSION_GRANTED_MESSAGE, PERMISSION_GRANTED_STYLE, PERMISSION_GRANTED_DURATION_MS)
