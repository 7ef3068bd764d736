"""Event catalog -- default skeletons and category membership.

Public API
----------
::

    from event_builder.catalog import (
        EventCatalog,
        EventDefinition,
        default_catalog,
        load_catalog,
    )
"""

from __future__ import annotations

from event_builder.catalog.catalog import (
    EventCatalog,
    EventDefinition,
    default_catalog,
)
from event_builder.catalog.loader import catalog_from_mapping, load_catalog

__all__ = [
    "EventCatalog",
    "EventDefinition",
    "default_catalog",
    # Loading
    "catalog_from_mapping",
    "load_catalog",
]
