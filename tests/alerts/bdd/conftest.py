"""Shared BDD fixtures and step definitions for the alerts domain."""

import asyncio

import pytest
from alerts.connectivity.monitor import OFFLINE_WARNING, ONLINE_ACKNOWLEDGEMENT
from alerts.exceptions import ConnectivityError
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then


@pytest.fixture()
def outcome():
    """Container for the last dispatch result or captured error."""
    return {"result": None, "exc": None}


# ---------------------------------------------------------------------------
# Given steps: connectivity
# ---------------------------------------------------------------------------
@given("the device is online")
def device_online(monitor):
    assert monitor.is_online() is True


@given("the device is offline")
def device_offline(signal, monitor):
    signal.go_offline()
    assert monitor.is_online() is False


# ---------------------------------------------------------------------------
# Given steps: permission
# ---------------------------------------------------------------------------
@given("notification permission is granted")
def permission_granted(permissions, platform):
    platform.consent_answer = "granted"
    asyncio.run(permissions.request_consent())
    assert permissions.is_granted() is True


@given("notification permission is denied")
def permission_denied(permissions, platform):
    platform.consent_answer = "denied"
    asyncio.run(permissions.request_consent())
    assert permissions.is_granted() is False


# ---------------------------------------------------------------------------
# Then steps: dispatch outcome
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the channels used are "{channels}"'))
def channels_used_are(outcome, channels):
    expected = {c.strip() for c in channels.split(",") if c.strip()}
    assert outcome["exc"] is None, f"Unexpected error: {outcome['exc']!r}"
    assert set(outcome["result"].channels_used) == expected


@then("the send fails with a connectivity error")
def send_failed_offline(outcome):
    assert isinstance(outcome["exc"], ConnectivityError)
    assert outcome["exc"].channels_used == frozenset()


@then("the send fails with a validation error")
def send_failed_validation(outcome):
    assert isinstance(outcome["exc"], ValidationError)


@then("no native notification is shown")
def no_native(platform):
    assert platform.shown == []


@then("no message toast is shown")
def no_message_toast(sink):
    assert [t for t in sink.toasts if t["message"] != OFFLINE_WARNING] == []


@then("the native notification requires interaction")
def native_requires_interaction(platform):
    assert platform.shown[-1]["require_interaction"] is True


# ---------------------------------------------------------------------------
# Then steps: indicator
# ---------------------------------------------------------------------------
@then("the offline warning is showing")
def offline_warning_showing(monitor, sink):
    assert monitor.warning_active is True
    assert any(t["message"] == OFFLINE_WARNING for t in sink.active.values())


@then("the offline warning is not showing")
def offline_warning_gone(monitor, sink):
    assert monitor.warning_active is False
    assert not any(t["message"] == OFFLINE_WARNING for t in sink.active.values())


@then(parsers.cfparse("the offline warning was shown {count:d} times"))
def offline_warning_count(sink, count):
    assert len([t for t in sink.toasts if t["message"] == OFFLINE_WARNING]) == count


@then(parsers.cfparse("the connection restored message was shown {count:d} times"))
def online_ack_count(sink, count):
    assert len([t for t in sink.toasts if t["message"] == ONLINE_ACKNOWLEDGEMENT]) == count
