"""Reward alert: a new reward can be redeemed."""

from alerts.message.kinds import AlertKind


class RewardAvailableTemplate:
    kind = AlertKind.REWARD_AVAILABLE.value
    style = "reward"
    duration_ms = 6000

    @staticmethod
    def render(context: dict) -> dict:
        message = context["message"]
        return {
            "title": "🎁 Nova Recompensa!",
            "body": message,
            "tag": "reward-available",
            "require_interaction": True,
            "toast": message,
        }
