"""Kinds of preset alerts the app raises for common events."""

from enum import Enum


class AlertKind(Enum):
    TASK_REMINDER = "TaskReminder"
    ACHIEVEMENT_UNLOCKED = "AchievementUnlocked"
    REWARD_AVAILABLE = "RewardAvailable"
    PARENT_NOTICE = "ParentNotice"
