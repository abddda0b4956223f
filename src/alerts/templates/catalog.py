"""TemplateCatalog: quick-compose messages offered to the parent.

The catalog is static. Picking an entry prefills a MessageDescriptor the
parent can still edit before sending.
"""

from protean.fields import String

from alerts.domain import alerts
from alerts.message.descriptor import BODY_MAX_LENGTH, TITLE_MAX_LENGTH, MessageDescriptor


@alerts.value_object
class Template:
    """An immutable catalog entry."""

    template_id: String(required=True, max_length=50, sanitize=False)
    title: String(required=True, max_length=TITLE_MAX_LENGTH, sanitize=False)
    body: String(required=True, max_length=BODY_MAX_LENGTH, sanitize=False)
    icon: String(max_length=10, sanitize=False)


_ENTRIES = (
    {
        "id": "reminder",
        "title": "⏰ Lembrete de Missão",
        "body": "{child_name}, não esqueça de completar suas missões de hoje!",
        "icon": "⏰",
    },
    {
        "id": "motivation",
        "title": "⚡ Motivação Flash",
        "body": "Você está indo muito bem, velocista! Continue assim!",
        "icon": "⚡",
    },
    {
        "id": "reward",
        "title": "🎁 Nova Recompensa",
        "body": "Uma nova recompensa foi adicionada na loja! Vá conferir!",
        "icon": "🎁",
    },
    {
        "id": "bedtime",
        "title": "🌙 Hora de Dormir",
        "body": "Hora de descansar, herói! Amanhã tem mais aventuras!",
        "icon": "🌙",
    },
)


class TemplateCatalog:
    def __init__(self, child_name: str = "Heitor"):
        self._templates = tuple(
            Template(
                template_id=entry["id"],
                title=entry["title"],
                body=entry["body"].format(child_name=child_name),
                icon=entry["icon"],
            )
            for entry in _ENTRIES
        )

    def all(self) -> tuple:
        return self._templates

    def get(self, template_id: str) -> Template:
        for template in self._templates:
            if template.template_id == template_id:
                return template
        raise ValueError(f"No quick template with id: {template_id}")

    def prefill(self, template_id: str, **overrides) -> MessageDescriptor:
        """Build a descriptor from a template; keyword overrides win."""
        template = self.get(template_id)
        fields = {
            "title": template.title,
            "body": template.body,
            "tag": "parent-message",
        }
        fields.update(overrides)
        return MessageDescriptor(**fields)
