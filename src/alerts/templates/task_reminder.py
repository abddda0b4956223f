"""Task reminder alert: nudges the child about a pending task."""

from alerts.message.kinds import AlertKind


class TaskReminderTemplate:
    kind = AlertKind.TASK_REMINDER.value
    style = "task-reminder"
    duration_ms = 6000

    @staticmethod
    def render(context: dict) -> dict:
        child_name = context.get("child_name", "Herói")
        task_title = context["task_title"]
        return {
            "title": "⚡ Missão Pendente!",
            "body": f"{child_name}, não esqueça: {task_title}",
            "tag": "task-reminder",
            "require_interaction": True,
            "toast": f"⚡ Missão Pendente: {task_title}",
        }
