"""Pydantic model for the JSON wire shape of a message.

Kept apart from the MessageDescriptor value object (anti-corruption):
this layer checks shape and types, the value object owns the content rules.
"""

from pydantic import BaseModel, ConfigDict, Field


class MessagePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    body: str
    icon: str | None = None
    badge: str | None = None
    tag: str | None = None
    require_interaction: bool | None = Field(default=None, alias="requireInteraction")
    data: dict[str, str] | None = None
