"""Tests for per-role delivery policy."""

import pytest
from alerts.audience.router import AudiencePolicy, Role, RoleRouter
from alerts.settings import AlertSettings


class TestRoleRouter:
    def setup_method(self):
        self.router = RoleRouter()

    def test_child_policy(self):
        policy = self.router.resolve_audience(Role.CHILD)
        assert policy.require_interaction is True
        assert policy.acknowledge_sender is False
        assert policy.in_app_style == "child-message"
        assert policy.in_app_duration_ms == 6000

    def test_parent_policy(self):
        policy = self.router.resolve_audience(Role.PARENT)
        assert policy.require_interaction is False
        assert policy.acknowledge_sender is True
        assert policy.in_app_style == "parent-message"
        assert policy.in_app_duration_ms == 4000

    def test_accepts_role_strings(self):
        assert self.router.resolve_audience("child").role is Role.CHILD
        assert self.router.resolve_audience("parent").role is Role.PARENT

    def test_unknown_role_raises(self):
        with pytest.raises(ValueError, match="Unknown audience role"):
            self.router.resolve_audience("grandparent")

    def test_durations_come_from_settings(self):
        router = RoleRouter(AlertSettings(child_toast_ms=9000, parent_toast_ms=1500))
        assert router.resolve_audience("child").in_app_duration_ms == 9000
        assert router.resolve_audience("parent").in_app_duration_ms == 1500

    def test_policy_is_frozen(self):
        policy = self.router.resolve_audience("child")
        assert isinstance(policy, AudiencePolicy)
        with pytest.raises(AttributeError):
            policy.require_interaction = False


class TestAlertSettings:
    def test_defaults(self, monkeypatch):
        for name in (
            "ALERTS_VAPID_KEY",
            "ALERTS_ONLINE_ACK_MS",
            "ALERTS_CHILD_TOAST_MS",
            "ALERTS_PARENT_TOAST_MS",
            "ALERTS_CHILD_NAME",
        ):
            monkeypatch.delenv(name, raising=False)
        settings = AlertSettings.from_env()
        assert settings == AlertSettings()
        assert settings.vapid_key is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ALERTS_VAPID_KEY", "BPk-vapid")
        monkeypatch.setenv("ALERTS_ONLINE_ACK_MS", "1000")
        monkeypatch.setenv("ALERTS_CHILD_NAME", "Ana")
        settings = AlertSettings.from_env()
        assert settings.vapid_key == "BPk-vapid"
        assert settings.online_ack_ms == 1000
        assert settings.child_name == "Ana"

    def test_invalid_duration_raises(self, monkeypatch):
        monkeypatch.setenv("ALERTS_PARENT_TOAST_MS", "soon")
        with pytest.raises(ValueError, match="ALERTS_PARENT_TOAST_MS"):
            AlertSettings.from_env()
