import pytest
from alerts.audience.router import RoleRouter
from alerts.channel.fake_connectivity import FakeConnectivitySignal
from alerts.channel.fake_in_app import FakeInAppSink
from alerts.channel.fake_platform import FakeNotificationPlatform
from alerts.channel.fake_push import FakePushTransport
from alerts.channel.fake_registration import FakePushRegistration
from alerts.connectivity.monitor import ConnectivityMonitor
from alerts.notification.dispatch import NotificationDispatcher
from alerts.permission.manager import PermissionManager
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def alerts_bed():
    from alerts.domain import alerts

    bed = DomainFixture(alerts)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(alerts_bed):
    with alerts_bed.domain_context():
        yield


@pytest.fixture()
def sink():
    return FakeInAppSink()


@pytest.fixture()
def signal():
    return FakeConnectivitySignal(online=True)


@pytest.fixture()
def platform():
    return FakeNotificationPlatform(permission="default")


@pytest.fixture()
def registration():
    return FakePushRegistration()


@pytest.fixture()
def transport():
    return FakePushTransport()


@pytest.fixture()
def monitor(signal, sink):
    m = ConnectivityMonitor(signal, sink, online_ack_ms=3000)
    m.start()
    yield m
    m.stop()


@pytest.fixture()
def permissions(platform, monitor, registration):
    return PermissionManager(platform, monitor, registration=registration, vapid_key="test-vapid-key")


@pytest.fixture()
def dispatcher(monitor, permissions, platform, sink, transport):
    return NotificationDispatcher(
        monitor,
        permissions,
        RoleRouter(),
        platform,
        sink,
        push_transport=transport,
    )
