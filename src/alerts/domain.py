"""Alerts bounded context: notification delivery and connectivity gating.

Dispatches family messages (parent to child and back) over an always-on
in-app channel and an opportunistic native channel, manages the consent
lifecycle for native alerts, and gates mutating operations on network
availability.
"""

import structlog
from protean.domain import Domain

alerts = Domain(name="alerts")

logger = structlog.get_logger(__name__)
