"""MessageDescriptor value object: the content of one notification.

A descriptor that exists is valid: title and body are checked when the
object is built, so nothing invalid can reach a delivery channel.
"""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Dict, String
from pydantic import ValidationError as PayloadError

from alerts.domain import alerts
from alerts.schemas import MessagePayload

TITLE_MAX_LENGTH = 50
BODY_MAX_LENGTH = 200


@alerts.value_object
class MessageDescriptor:
    """Title, body and display hints for a single notification.

    ``require_interaction`` left as None means "use the audience default".
    """

    title: String(required=True, max_length=TITLE_MAX_LENGTH, sanitize=False)
    body: String(required=True, max_length=BODY_MAX_LENGTH, sanitize=False)
    tag: String(max_length=100, sanitize=False)
    require_interaction: Boolean()
    icon: String(max_length=500, sanitize=False)
    badge: String(max_length=500, sanitize=False)
    data: Dict()

    @invariant.post
    def title_and_body_must_not_be_blank(self):
        errors = {}
        if self.title is not None and not self.title.strip():
            errors["title"] = ["Title cannot be blank"]
        if self.body is not None and not self.body.strip():
            errors["body"] = ["Body cannot be blank"]
        if errors:
            raise ValidationError(errors)

    @invariant.post
    def data_must_map_strings_to_strings(self):
        if not self.data:
            return
        for key, value in self.data.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ValidationError({"data": [f"Entry {key!r} must map a string to a string"]})

    @classmethod
    def from_payload(cls, payload) -> "MessageDescriptor":
        """Build a descriptor from the JSON wire shape (camelCase keys)."""
        try:
            parsed = MessagePayload.model_validate(payload)
        except PayloadError as exc:
            errors: dict[str, list[str]] = {}
            for error in exc.errors():
                field = ".".join(str(part) for part in error["loc"]) or "payload"
                errors.setdefault(field, []).append(error["msg"])
            raise ValidationError(errors) from None

        # Absent keys stay absent so protean applies its own field defaults
        fields = parsed.model_dump(exclude_none=True)
        return cls(**fields)

    def to_payload(self) -> dict:
        """Render the JSON wire shape, omitting unset optional keys."""
        payload = {
            "title": self.title,
            "body": self.body,
            "icon": self.icon,
            "badge": self.badge,
            "tag": self.tag,
            "requireInteraction": self.require_interaction,
            "data": dict(self.data) if self.data else None,
        }
        return {key: value for key, value in payload.items() if value is not None}
