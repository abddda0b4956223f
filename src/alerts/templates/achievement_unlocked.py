"""Achievement alert: celebrates a newly unlocked achievement."""

from alerts.message.kinds import AlertKind


class AchievementUnlockedTemplate:
    kind = AlertKind.ACHIEVEMENT_UNLOCKED.value
    style = "achievement"
    duration_ms = 8000

    @staticmethod
    def render(context: dict) -> dict:
        child_name = context.get("child_name", "Herói")
        achievement = context["achievement"]
        return {
            "title": "🏆 Conquista Desbloqueada!",
            "body": f"Parabéns {child_name}! Você conquistou: {achievement}",
            "tag": "achievement",
            "require_interaction": True,
            "toast": f"🏆 {achievement} desbloqueada!",
        }
