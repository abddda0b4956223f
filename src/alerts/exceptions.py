"""Error kinds raised (or logged) by the alerts domain.

Malformed messages raise ``protean.exceptions.ValidationError``. Consent
denial is not an error: it is ``PermissionState.DENIED``.
"""


class AlertError(Exception):
    """Base class for alerts domain errors."""


class ConnectivityError(AlertError):
    """The device had no network when a mutating operation was attempted."""

    def __init__(self, message: str = "No internet connection"):
        super().__init__(message)
        # No channel is ever touched when this is raised.
        self.channels_used: frozenset[str] = frozenset()


class RegistrationError(AlertError):
    """Push-token registration failed. Logged only, never raised to callers."""


class PlatformUnsupported(AlertError):
    """The host exposes no native notification capability."""
