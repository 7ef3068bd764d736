"""Load a substitute ``EventCatalog`` from TOML.

File layout::

    [item]                                  # optional items-array skeleton
    [[item.parameters]]
    name = "item_id"
    type = "optional_string"

    [events.purchase]
    name = "purchase"                       # optional, defaults to the key
    categories = ["all_apps"]

    [[events.purchase.parameters]]
    name = "value"
    type = "optional_number"
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

import tomli

from event_builder.catalog.catalog import EventCatalog, EventDefinition
from event_builder.core.enums import EventCategory, EventType
from event_builder.core.errors import CatalogLoadError, MalformedParameterError
from event_builder.domain.parameters import Item, Parameter, parse_parameter

logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)


def load_catalog(path: str | Path) -> EventCatalog:
    """Read *path* and build a catalog from it.

    Raises:
        CatalogLoadError: unreadable file, invalid TOML or invalid entries.
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as exc:
        raise CatalogLoadError(f"Cannot read catalog {path}: {exc}") from exc
    return catalog_from_mapping(data, source=str(path))


def catalog_from_mapping(
    data: Mapping[str, Any], *, source: str = "<mapping>",
) -> EventCatalog:
    """Build a catalog from an already-parsed document (see module docstring)."""
    events = data.get("events", {})
    if not isinstance(events, Mapping):
        raise CatalogLoadError(f"{source}: 'events' must be a table")

    definitions: dict[EventType, EventDefinition] = {}
    membership: dict[EventCategory, list[EventType]] = {}

    for key, entry in events.items():
        if not isinstance(entry, Mapping):
            raise CatalogLoadError(f"{source}: events.{key} must be a table")
        event_type = _to_enum(EventType, key, source)
        definitions[event_type] = EventDefinition(
            name=str(entry.get("name", event_type.value)),
            parameters=_parse_parameters(
                entry.get("parameters", []), f"{source}: events.{key}",
            ),
        )
        raw_categories = entry.get("categories", [])
        if not isinstance(raw_categories, list):
            raise CatalogLoadError(f"{source}: events.{key}.categories must be an array")
        for raw_category in raw_categories:
            category = _to_enum(EventCategory, raw_category, source)
            membership.setdefault(category, []).append(event_type)

    item_section = data.get("item", {})
    if not isinstance(item_section, Mapping):
        raise CatalogLoadError(f"{source}: 'item' must be a table")
    item = Item(
        parameters={
            p.name: p
            for p in _parse_parameters(
                item_section.get("parameters", []), f"{source}: item",
            )
        },
    )

    logger.info(
        "Loaded catalog from %s: %d event type(s), %d categories",
        source, len(definitions), len(membership),
    )
    return EventCatalog(definitions, membership, item_template=item)


def _parse_parameters(
    raw_parameters: Iterable[Mapping[str, Any]], where: str,
) -> tuple[Parameter, ...]:
    if not isinstance(raw_parameters, list):
        raise CatalogLoadError(f"{where}: parameters must be an array of tables")
    parsed: list[Parameter] = []
    for raw in raw_parameters:
        try:
            parsed.append(parse_parameter(raw))
        except MalformedParameterError as exc:
            raise CatalogLoadError(f"{where}: {exc}") from exc
    return tuple(parsed)


def _to_enum(enum_cls: type[_E], raw: Any, source: str) -> _E:
    try:
        return enum_cls(raw)
    except ValueError:
        raise CatalogLoadError(
            f"{source}: unknown {enum_cls.__name__} {raw!r}"
        ) from None
