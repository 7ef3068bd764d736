"""EventData -- an event's canonical name plus its two parameter mappings."""

from __future__ import annotations

from pydantic import BaseModel, Field

from event_builder.domain.parameters import Parameters


class EventData(BaseModel):
    """Default skeleton supplied by the catalog, then edited via ``MPEvent``.

    ``type`` is the canonical event name string (e.g. ``"purchase"``).
    """

    type: str
    parameters: Parameters = Field(default_factory=dict)
    custom_parameters: Parameters = Field(default_factory=dict)

    def shallow_clone(self) -> EventData:
        """Copy with new mapping containers; parameter values are shared."""
        return EventData(
            type=self.type,
            parameters=dict(self.parameters),
            custom_parameters=dict(self.custom_parameters),
        )
