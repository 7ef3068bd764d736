"""Shared fixtures for the event-builder test suite."""

from __future__ import annotations

import pytest

from event_builder.catalog.catalog import EventCatalog, EventDefinition, default_catalog
from event_builder.core.enums import EventCategory, EventType
from event_builder.domain.event import MPEvent
from event_builder.domain.parameters import (
    Item,
    OptionalNumberParameter,
    OptionalStringParameter,
    RequiredArrayParameter,
)


# ---------------------------------------------------------------------------
# Catalogs
# ---------------------------------------------------------------------------

@pytest.fixture
def catalog() -> EventCatalog:
    """The built-in catalog."""
    return default_catalog()


@pytest.fixture
def small_catalog() -> EventCatalog:
    """Three-event catalog for tests that substitute the table."""
    return EventCatalog(
        definitions={
            EventType.PURCHASE: EventDefinition(
                name="purchase",
                parameters=(
                    OptionalNumberParameter(name="value"),
                    OptionalStringParameter(name="currency"),
                    RequiredArrayParameter(name="items"),
                ),
            ),
            EventType.LOGIN: EventDefinition(
                name="login",
                parameters=(OptionalStringParameter(name="method"),),
            ),
            EventType.CUSTOM_EVENT: EventDefinition(name="custom_event"),
        },
        membership={
            EventCategory.ALL_APPS: [EventType.PURCHASE, EventType.LOGIN],
            EventCategory.RETAIL_ECOMMERCE: [EventType.PURCHASE],
            EventCategory.CUSTOM: [EventType.CUSTOM_EVENT],
        },
        item_template=Item(
            parameters={"item_id": OptionalStringParameter(name="item_id")},
        ),
    )


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@pytest.fixture
def purchase_event(small_catalog: EventCatalog) -> MPEvent:
    return MPEvent.empty(EventType.PURCHASE, small_catalog)


@pytest.fixture
def custom_event(small_catalog: EventCatalog) -> MPEvent:
    return MPEvent.empty(EventType.CUSTOM_EVENT, small_catalog)

