"""CLI entry point for the event builder."""

from __future__ import annotations

import json
import math
from functools import partial
from typing import Any

import click

from .catalog.catalog import EventCatalog
from .core.config import Settings, load_settings
from .core.enums import EventCategory
from .core.errors import CatalogError, ConfigError, EventBuilderError
from .domain.event import MPEvent
from .domain.parameters import (
    Item,
    OptionalNumberParameter,
    OptionalStringParameter,
    Parameter,
    Parameters,
    RequiredArrayParameter,
)
from .observability.logger import get_logger, setup_logging

logger = get_logger(__name__)


@click.group()
@click.option("--config", "config_path", default=None, help="Config file path")
@click.option("--log-level", default=None, help="Log level override (DEBUG, INFO, ...)")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, log_level: str | None) -> None:
    """Analytics event builder."""
    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    if log_level:
        settings.observability.log_level = log_level
    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )
    ctx.obj = settings


@main.command()
def categories() -> None:
    """List event categories."""
    for category in MPEvent.categories():
        click.echo(category.value)


@main.command("types")
@click.option(
    "--category",
    default=None,
    type=click.Choice([c.value for c in EventCategory]),
    help="Only list members of this category",
)
@click.pass_obj
def types_(settings: Settings, category: str | None) -> None:
    """List event types."""
    catalog = _load_catalog(settings)
    if category is None:
        event_types = catalog.event_type_list
    else:
        event_types = MPEvent.event_types(EventCategory(category), catalog)
    for event_type in event_types:
        click.echo(event_type.value)


@main.command("parameter-types")
def parameter_types() -> None:
    """List parameter types."""
    for parameter_type in MPEvent.parameter_type_options():
        click.echo(parameter_type.value)


@main.command()
@click.argument("event_type", required=False)
@click.option("--name", default=None, help="Event name (custom_event only)")
@click.option("--param", "params", multiple=True, help="Built-in parameter key=value")
@click.option("--custom", multiple=True, help="Custom string parameter key=value")
@click.option("--custom-number", multiple=True, help="Custom number parameter key=value")
@click.pass_obj
def payload(
    settings: Settings,
    event_type: str | None,
    name: str | None,
    params: tuple[str, ...],
    custom: tuple[str, ...],
    custom_number: tuple[str, ...],
) -> None:
    """Print the JSON payload for EVENT_TYPE (default from settings).

    Array parameters take a JSON list of flat objects, e.g.
    --param 'items=[{"item_id": "SKU_1", "price": 9.99}]'.
    """
    catalog = _load_catalog(settings)

    if event_type is None:
        resolved = settings.default_event_type
    else:
        resolved = MPEvent.event_type_from_string(event_type)
        if resolved is None:
            raise click.BadParameter(
                f"unknown event type {event_type!r}", param_hint="EVENT_TYPE",
            )

    try:
        event = MPEvent.empty(resolved, catalog)
        if name is not None:
            event = event.update_name(name)
        for raw in params:
            key, value = _split_pair(raw, "--param")
            event = event.update_parameters(
                partial(_set_builtin, key=key, value=value, catalog=catalog),
            )
        for raw in custom:
            key, value = _split_pair(raw, "--custom")
            event = event.add_custom_parameter(
                key, OptionalStringParameter(name=key, value=value),
            )
        for raw in custom_number:
            key, value = _split_pair(raw, "--custom-number")
            event = event.add_custom_parameter(
                key, OptionalNumberParameter(name=key, value=_number(value, key)),
            )
    except EventBuilderError as exc:
        raise click.ClickException(str(exc)) from exc

    logger.debug(
        "payload_built",
        event_type=resolved.value,
        custom_parameters=len(event.get_custom_parameters()),
    )
    click.echo(
        event.as_json(
            indent=settings.output.indent, sort_keys=settings.output.sort_keys,
        )
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load_catalog(settings: Settings) -> EventCatalog:
    try:
        return settings.build_catalog()
    except CatalogError as exc:
        raise click.ClickException(str(exc)) from exc


def _split_pair(raw: str, option: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise click.BadParameter(f"expected key=value, got {raw!r}", param_hint=option)
    return key, value


def _number(value: Any, key: str) -> int | float:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if not isinstance(value, float):
        try:
            return int(value)
        except (TypeError, ValueError):
            pass
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise click.BadParameter(f"{key}: {value!r} is not a number") from None
    if not math.isfinite(value):
        raise click.BadParameter(f"{key}: {value!r} is not a finite number")
    return value


def _set_builtin(
    params: Parameters, *, key: str, value: str, catalog: EventCatalog,
) -> Parameters:
    if key not in params:
        known = ", ".join(sorted(params)) or "none"
        raise click.BadParameter(
            f"unknown parameter {key!r} (known: {known})", param_hint="--param",
        )
    parameter = params[key]
    if isinstance(parameter, RequiredArrayParameter):
        params[key] = parameter.model_copy(
            update={"value": _parse_items(value, key, catalog)},
        )
    else:
        params[key] = _with_scalar(parameter, value)
    return params


def _with_scalar(parameter: Parameter, value: Any) -> Parameter:
    match parameter:
        case OptionalNumberParameter():
            return parameter.model_copy(update={"value": _number(value, parameter.name)})
        case OptionalStringParameter():
            return parameter.model_copy(update={"value": str(value)})
    raise click.BadParameter(f"{parameter.name} does not take a scalar value")


def _parse_items(raw: str, key: str, catalog: EventCatalog) -> list[Item]:
    try:
        entries = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"{key}: invalid JSON ({exc})") from exc
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        raise click.BadParameter(f"{key}: expected a JSON list of objects")

    items: list[Item] = []
    for entry in entries:
        template = catalog.empty_item()
        builtin = dict(template.parameters)
        extra: dict[str, Parameter] = {}
        for field_name, field_value in entry.items():
            if field_name in builtin:
                builtin[field_name] = _with_scalar(builtin[field_name], field_value)
            elif isinstance(field_value, (int, float)) and not isinstance(field_value, bool):
                extra[field_name] = OptionalNumberParameter(
                    name=field_name, value=_number(field_value, field_name),
                )
            else:
                extra[field_name] = OptionalStringParameter(name=field_name, value=str(field_value))
        items.append(Item(parameters=builtin, custom_parameters=extra))
    return items
