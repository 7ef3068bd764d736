"""Custom exception hierarchy for the event builder."""


class EventBuilderError(Exception):
    """Base exception for all event builder errors."""


# --- Configuration ---
class ConfigError(EventBuilderError):
    """Invalid or missing configuration."""


# --- Catalog ---
class CatalogError(EventBuilderError):
    """Event catalog lookup or loading error."""


class UnknownEventTypeError(CatalogError):
    """The catalog has no definition for the requested event type."""

    def __init__(self, event_type: str):
        self.event_type = event_type
        super().__init__(f"No catalog definition for event type {event_type!r}")


class CatalogLoadError(CatalogError):
    """A catalog file could not be read or contains invalid entries."""


# --- Event ---
class EventError(EventBuilderError):
    """Event update protocol error."""


class InvalidOperation(EventError):
    """The requested update is not allowed for this event."""


# --- Parameter ---
class ParameterError(EventBuilderError):
    """Parameter modelling error."""


class MalformedParameterError(ParameterError):
    """A parameter does not match any known shape."""
