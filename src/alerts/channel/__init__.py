"""Platform adapter registry: the collaborators the alerts domain talks to.

Defaults to in-memory fakes so the domain works headless and in tests.
Hosts install real adapters with ``set_port`` at startup.
"""

PLATFORM = "platform"
CONNECTIVITY = "connectivity"
REGISTRATION = "registration"
IN_APP = "in-app"
PUSH = "push"

_port_instances: dict[str, object] = {}


def _default_port(kind: str):
    if kind == PLATFORM:
        from alerts.channel.fake_platform import FakeNotificationPlatform

        return FakeNotificationPlatform()
    elif kind == CONNECTIVITY:
        from alerts.channel.fake_connectivity import FakeConnectivitySignal

        return FakeConnectivitySignal()
    elif kind == REGISTRATION:
        from alerts.channel.fake_registration import FakePushRegistration

        return FakePushRegistration()
    elif kind == IN_APP:
        from alerts.channel.fake_in_app import FakeInAppSink

        return FakeInAppSink()
    elif kind == PUSH:
        from alerts.channel.fake_push import FakePushTransport

        return FakePushTransport()
    raise ValueError(f"Unknown port kind: {kind}")


def get_port(kind: str):
    """Return the configured adapter for a port (singleton per kind).

    Args:
        kind: One of PLATFORM, CONNECTIVITY, REGISTRATION, IN_APP, PUSH
    """
    if kind not in _port_instances:
        _port_instances[kind] = _default_port(kind)
    return _port_instances[kind]


def set_port(kind: str, adapter) -> None:
    """Install an adapter for a port, replacing the default."""
    if kind not in (PLATFORM, CONNECTIVITY, REGISTRATION, IN_APP, PUSH):
        raise ValueError(f"Unknown port kind: {kind}")
    _port_instances[kind] = adapter


def reset_ports():
    """Reset all adapter singletons (useful for testing)."""
    _port_instances.clear()
