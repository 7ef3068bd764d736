"""EventCatalog -- read-only lookup of event skeletons and category membership.

The catalog is injected into ``MPEvent`` rather than read from module
globals, so tests and alternative deployments can supply a smaller table
(see ``loader.load_catalog``).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache

from event_builder.core.enums import EventCategory, EventType
from event_builder.core.errors import UnknownEventTypeError
from event_builder.domain.event_data import EventData
from event_builder.domain.parameters import Item, Parameter


@dataclass(frozen=True)
class EventDefinition:
    """Canonical event name plus its default (unset) parameters."""

    name: str
    parameters: tuple[Parameter, ...] = ()


class EventCatalog:
    """Static table keyed by ``EventType`` and ``EventCategory``."""

    def __init__(
        self,
        definitions: Mapping[EventType, EventDefinition],
        membership: Mapping[EventCategory, Sequence[EventType]],
        item_template: Item | None = None,
    ) -> None:
        self._definitions = dict(definitions)
        self._membership = {
            category: tuple(event_types)
            for category, event_types in membership.items()
        }
        self._item_template = item_template if item_template is not None else Item()

    @property
    def event_type_list(self) -> list[EventType]:
        """Event types that have a definition, in table order."""
        return list(self._definitions)

    def __contains__(self, event_type: object) -> bool:
        return event_type in self._definitions

    def empty_event(self, event_type: EventType) -> EventData:
        """Return a fresh default ``EventData`` for *event_type*.

        Raises:
            UnknownEventTypeError: no definition for *event_type*.
        """
        try:
            definition = self._definitions[event_type]
        except KeyError:
            raise UnknownEventTypeError(str(getattr(event_type, "value", event_type))) from None
        return EventData(
            type=definition.name,
            parameters={p.name: p for p in definition.parameters},
        )

    def event_types_for(self, category: EventCategory) -> list[EventType]:
        return list(self._membership.get(category, ()))

    def empty_item(self) -> Item:
        """Default skeleton for one entry of an ``items`` array."""
        return Item(
            parameters=dict(self._item_template.parameters),
            custom_parameters=dict(self._item_template.custom_parameters),
        )


@lru_cache(maxsize=1)
def default_catalog() -> EventCatalog:
    """Process-wide built-in catalog (GA4 / Firebase recommended events)."""
    from event_builder.catalog.definitions import (
        DEFAULT_MEMBERSHIP,
        DEFAULT_PARAMETERS,
        ITEM_TEMPLATE,
    )

    return EventCatalog(
        definitions={
            event_type: EventDefinition(name=event_type.value, parameters=params)
            for event_type, params in DEFAULT_PARAMETERS.items()
        },
        membership=DEFAULT_MEMBERSHIP,
        item_template=ITEM_TEMPLATE,
    )
