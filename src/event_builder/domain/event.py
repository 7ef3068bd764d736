"""MPEvent -- immutable analytics event and its payload assembly.

Design invariants
-----------------
1.  Every update returns a **new** ``MPEvent``; the receiver is never
    modified.  Clones copy both parameter mappings into new dicts, while
    the (frozen) parameter values themselves are shared.
2.  ``name`` is only meaningful for ``EventType.CUSTOM_EVENT``.  Any other
    event is named by the catalog-supplied ``event_data.type``.
3.  In ``as_payload()`` custom parameters are merged after built-in ones,
    so a custom parameter overwrites a built-in one of the same key.

Usage::

    event = (
        MPEvent.empty(EventType.PURCHASE)
        .update_parameters(lambda p: {**p, "value": OptionalNumberParameter(name="value", value=9.99)})
        .add_custom_parameter("coupon", OptionalStringParameter(name="coupon", value="SAVE10"))
    )
    event.as_payload()
    # {"name": "purchase", "params": {"value": 9.99, "coupon": "SAVE10"}}
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

from event_builder.catalog.catalog import EventCatalog, default_catalog
from event_builder.core.enums import EventCategory, EventType, ParameterType
from event_builder.core.errors import InvalidOperation, MalformedParameterError
from event_builder.domain.event_data import EventData
from event_builder.domain.parameters import (
    Fragment,
    Parameter,
    Parameters,
    Unset,
    merge_fragments,
)
from event_builder.domain.parameters import (
    parameter_to_payload as _parameter_to_payload,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MPEvent:
    """One analytics event: its type, its data and (for custom events) a name."""

    event_type: EventType
    event_data: EventData
    name: str | None = None
    catalog: EventCatalog = field(
        default_factory=default_catalog, compare=False, repr=False,
    )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(
        cls, event_type: EventType, catalog: EventCatalog | None = None,
    ) -> MPEvent:
        """Wrap the catalog's default skeleton for *event_type*."""
        if catalog is None:
            catalog = default_catalog()
        return cls(event_type, catalog.empty_event(event_type), catalog=catalog)

    @classmethod
    def default(cls, catalog: EventCatalog | None = None) -> MPEvent:
        return cls.empty(EventType.PURCHASE, catalog)

    # ------------------------------------------------------------------
    # Static introspection
    # ------------------------------------------------------------------

    @staticmethod
    def event_types(
        category: EventCategory, catalog: EventCatalog | None = None,
    ) -> list[EventType]:
        if catalog is None:
            catalog = default_catalog()
        return catalog.event_types_for(category)

    @staticmethod
    def categories() -> list[EventCategory]:
        return list(EventCategory)

    @staticmethod
    def parameter_type_options() -> list[ParameterType]:
        return list(ParameterType)

    @staticmethod
    def event_type_from_string(event_type: str) -> EventType | None:
        """Return the ``EventType`` whose value is exactly *event_type*, else None."""
        try:
            return EventType(event_type)
        except ValueError:
            return None

    @staticmethod
    def parameter_to_payload(parameter: Parameter) -> Fragment | Unset:
        return _parameter_to_payload(parameter)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def clone(self) -> MPEvent:
        return replace(self, event_data=self.event_data.shallow_clone())

    def get_categories(self) -> list[EventCategory]:
        """Every category whose membership includes this event's type."""
        return [
            category
            for category in self.categories()
            if self.event_type in self.catalog.event_types_for(category)
        ]

    def get_event_data(self) -> EventData:
        """Return a copy; edits go through the update methods instead."""
        return self.event_data.shallow_clone()

    def get_event_type(self) -> EventType:
        return self.event_type

    def get_event_name(self) -> str:
        if self.event_type == EventType.CUSTOM_EVENT:
            return self.name or ""
        return self.event_data.type

    def get_parameters(self) -> list[Parameter]:
        return list(self.event_data.parameters.values())

    def get_custom_parameters(self) -> list[Parameter]:
        return list(self.event_data.custom_parameters.values())

    # ------------------------------------------------------------------
    # Payload
    # ------------------------------------------------------------------

    def as_payload(self) -> dict[str, Any]:
        """Build ``{"name": ..., "params": {...}}`` for the analytics backend."""
        params = merge_fragments(
            [*self.get_parameters(), *self.get_custom_parameters()]
        )
        logger.debug(
            "Assembled payload for %s with %d param(s)",
            self.event_type.value, len(params),
        )
        return {"name": self.get_event_name(), "params": params}

    def as_json(self, indent: int | None = None, sort_keys: bool = False) -> str:
        """Serialize ``as_payload()`` as strict JSON.

        Raises:
            MalformedParameterError: a number value is NaN or infinite.
        """
        try:
            return json.dumps(
                self.as_payload(), indent=indent, sort_keys=sort_keys, allow_nan=False,
            )
        except ValueError as exc:
            raise MalformedParameterError(f"Payload is not valid JSON: {exc}") from exc

    # ------------------------------------------------------------------
    # Immutable updates
    # ------------------------------------------------------------------

    def update_name(self, new_name: str) -> MPEvent:
        """Rename a custom event.

        Raises:
            InvalidOperation: the event is not ``EventType.CUSTOM_EVENT``.
        """
        if self.event_type != EventType.CUSTOM_EVENT:
            raise InvalidOperation(
                f"Only custom events can update their name "
                f"(event type is {self.event_type.value!r})"
            )
        return replace(self.clone(), name=new_name)

    def update_parameters(
        self, update: Callable[[Parameters], Parameters],
    ) -> MPEvent:
        """Replace built-in parameters with ``update(copy_of_parameters)``."""
        data = self.event_data.shallow_clone()
        data = data.model_copy(update={"parameters": update(data.parameters)})
        return replace(self, event_data=data)

    def update_custom_parameters(
        self, update: Callable[[Parameters], Parameters],
    ) -> MPEvent:
        """Replace custom parameters with ``update(copy_of_custom_parameters)``."""
        data = self.event_data.shallow_clone()
        data = data.model_copy(
            update={"custom_parameters": update(data.custom_parameters)},
        )
        return replace(self, event_data=data)

    def add_custom_parameter(self, name: str, parameter: Parameter) -> MPEvent:
        """Set ``custom_parameters[name]``, overwriting any existing entry."""

        def _add(params: Parameters) -> Parameters:
            params[name] = parameter
            return params

        return self.update_custom_parameters(_add)

    def remove_custom_parameter(self, name: str) -> MPEvent:
        """Drop ``custom_parameters[name]``; absent names are ignored."""

        def _remove(params: Parameters) -> Parameters:
            params.pop(name, None)
            return params

        return self.update_custom_parameters(_remove)

    def update_custom_parameter_name(self, old_name: str, new_name: str) -> MPEvent:
        """Move a custom parameter to *new_name*, keeping its type and value.

        The parameter's own ``name`` follows the key so the payload key
        changes too, unlike moving the entry as-is.  An absent *old_name*
        leaves the parameters unchanged.
        """
        if old_name not in self.event_data.custom_parameters:
            logger.warning(
                "Custom parameter %r not found, rename to %r skipped",
                old_name, new_name,
            )
            return self.clone()

        def _rename(params: Parameters) -> Parameters:
            parameter = params.pop(old_name)
            params[new_name] = parameter.model_copy(update={"name": new_name})
            return params

        return self.update_custom_parameters(_rename)
