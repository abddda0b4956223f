"""Parent notice: a free-form heads-up shown in the parent panel."""

from alerts.message.kinds import AlertKind


class ParentNoticeTemplate:
    kind = AlertKind.PARENT_NOTICE.value
    style = "parent-notice"
    duration_ms = 4000

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "title": context["title"],
            "body": context["message"],
            "tag": "parent-notification",
            "require_interaction": False,
            "toast": context["message"],
        }
