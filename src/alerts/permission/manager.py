"""PermissionManager: consent lifecycle for native alerts.

State Machine (3 states):
    DEFAULT → GRANTED
    DEFAULT → DENIED

GRANTED and DENIED are terminal for the session. The initial state is
whatever the platform reports when the manager is built; it is never
cached across runs because the platform can reset it externally.

Only one consent prompt is ever in flight. Callers arriving while it is
pending wait on the same resolution. A grant kicks off push-token
registration in the background; registration is best effort and never
reverts the grant.
"""

import asyncio
from collections.abc import Callable
from enum import Enum

import structlog
from protean.exceptions import ValidationError

from alerts.channel.platform_port import NotificationPlatform
from alerts.channel.registration_port import PushRegistration
from alerts.connectivity.monitor import ConnectivityMonitor
from alerts.exceptions import ConnectivityError, RegistrationError

logger = structlog.get_logger(__name__)


class PermissionState(Enum):
    DEFAULT = "default"
    GRANTED = "granted"
    DENIED = "denied"


_VALID_TRANSITIONS = {
    PermissionState.DEFAULT: {PermissionState.GRANTED, PermissionState.DENIED},
    PermissionState.GRANTED: set(),  # Terminal
    PermissionState.DENIED: set(),  # Terminal
}


class PermissionManager:
    """Single writer of PermissionState and owner of the DeviceToken."""

    def __init__(
        self,
        platform: NotificationPlatform,
        monitor: ConnectivityMonitor,
        registration: PushRegistration | None = None,
        vapid_key: str | None = None,
    ):
        self._platform = platform
        self._monitor = monitor
        self._registration = registration
        self._vapid_key = vapid_key
        self._state = self._initial_state()
        self._pending: asyncio.Future | None = None
        self._registration_task: asyncio.Task | None = None
        self._device_token: str | None = None
        self._listeners: list[Callable[[PermissionState], None]] = []

    def _initial_state(self) -> PermissionState:
        if not self._platform.is_supported:
            return PermissionState.DEFAULT
        reported = self._platform.permission()
        try:
            return PermissionState(reported)
        except ValueError:
            logger.warning("Unknown permission reported by platform", reported=reported)
            return PermissionState.DEFAULT

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def get_state(self) -> PermissionState:
        return self._state

    def is_granted(self) -> bool:
        return self._state is PermissionState.GRANTED

    @property
    def is_supported(self) -> bool:
        return self._platform.is_supported

    @property
    def device_token(self) -> str | None:
        return self._device_token

    @property
    def prompt_pending(self) -> bool:
        return self._pending is not None

    @property
    def pending_registration(self) -> asyncio.Task | None:
        """The background registration task started by the last grant."""
        return self._registration_task

    def on_resolved(self, callback: Callable[[PermissionState], None]) -> Callable[[], None]:
        """Register a listener for consent transitions. Returns its unsubscribe handle."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    # -------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_state: PermissionState) -> None:
        if target_state not in _VALID_TRANSITIONS[self._state]:
            raise ValidationError(
                {"permission": [f"Cannot transition from {self._state.value} to {target_state.value}"]}
            )

    def _transition(self, target_state: PermissionState) -> None:
        self._assert_can_transition(target_state)
        self._state = target_state
        logger.info("Notification permission resolved", state=target_state.value)

        for callback in list(self._listeners):
            try:
                callback(target_state)
            except Exception as exc:
                logger.error("Permission listener failed", state=target_state.value, error=str(exc))

    # -------------------------------------------------------------------
    # Consent
    # -------------------------------------------------------------------
    async def request_consent(self) -> PermissionState:
        """Ask the user for consent, or return the already-decided state."""
        if self._state is not PermissionState.DEFAULT:
            return self._state

        if not self._monitor.is_online():
            raise ConnectivityError("Cannot request notification permission while offline")

        if not self._platform.is_supported:
            logger.info("Native notifications unsupported, consent not requested")
            return self._state

        if self._pending is None:
            self._pending = asyncio.ensure_future(self._prompt())

        # Shielded so one cancelled waiter cannot cancel the shared prompt
        return await asyncio.shield(self._pending)

    async def _prompt(self) -> PermissionState:
        try:
            answer = await self._platform.request_consent()
        except Exception as exc:
            logger.error("Consent prompt failed", error=str(exc))
            return self._state
        finally:
            self._pending = None

        try:
            resolved = PermissionState(answer)
        except ValueError:
            logger.warning("Unknown consent answer from platform", answer=answer)
            return self._state

        if resolved is PermissionState.DEFAULT:
            logger.info("Consent prompt dismissed without a decision")
            return self._state

        self._transition(resolved)

        if resolved is PermissionState.GRANTED:
            self._registration_task = asyncio.ensure_future(self._register_device())

        return self._state

    # -------------------------------------------------------------------
    # Push registration
    # -------------------------------------------------------------------
    async def _register_device(self) -> str | None:
        try:
            self._device_token = await self._obtain_token()
        except RegistrationError as exc:
            logger.warning("Push registration failed", error=str(exc))
            return None
        except Exception as exc:
            logger.error("Push registration raised", error=str(exc))
            return None

        logger.info("Push device registered")
        return self._device_token

    async def _obtain_token(self) -> str:
        if self._registration is None:
            raise RegistrationError("No push registration adapter configured")
        if not self._vapid_key:
            raise RegistrationError("No VAPID key configured")

        result = await self._registration.register(self._vapid_key)
        if result.get("status") != "registered" or not result.get("token"):
            raise RegistrationError(result.get("error", "Unknown registration error"))
        return result["token"]
