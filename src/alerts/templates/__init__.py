"""Preset alert registry: maps AlertKind to template classes.

Each template knows its in-app style and duration and how to render the
native title/body and the in-app toast text from event context.
"""

from alerts.message.kinds import AlertKind
from alerts.templates.achievement_unlocked import AchievementUnlockedTemplate
from alerts.templates.parent_notice import ParentNoticeTemplate
from alerts.templates.reward_available import RewardAvailableTemplate
from alerts.templates.task_reminder import TaskReminderTemplate

ALERT_REGISTRY: dict[str, type] = {
    AlertKind.TASK_REMINDER.value: TaskReminderTemplate,
    AlertKind.ACHIEVEMENT_UNLOCKED.value: AchievementUnlockedTemplate,
    AlertKind.REWARD_AVAILABLE.value: RewardAvailableTemplate,
    AlertKind.PARENT_NOTICE.value: ParentNoticeTemplate,
}


def get_alert_template(kind):
    """Look up a template class by AlertKind (member or value)."""
    if isinstance(kind, AlertKind):
        kind = kind.value
    template_cls = ALERT_REGISTRY.get(kind)
    if template_cls is None:
        raise ValueError(f"No template registered for alert kind: {kind}")
    return template_cls
