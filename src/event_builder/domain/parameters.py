"""Tagged parameter model and the parameter-to-payload algorithm.

A parameter is one of three frozen variants, discriminated on ``type``:

- ``OptionalNumberParameter``  -- number or ``None``.
- ``OptionalStringParameter``  -- string, ``""`` or ``None``.
- ``RequiredArrayParameter``   -- ordered list of ``Item`` records, each
  carrying its own built-in and custom parameter mappings.

Serialization is per-parameter: ``parameter_to_payload`` turns a single
parameter into a one-key fragment or the ``UNSET`` marker, and
``merge_fragments`` folds fragments left to right into one flat dict.
Later keys overwrite earlier ones on collision.

Usage::

    params = [
        OptionalNumberParameter(name="value", value=9.99),
        OptionalStringParameter(name="coupon"),
    ]
    merge_fragments(params)   # {"value": 9.99}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, FiniteFloat, TypeAdapter, ValidationError

from event_builder.core.enums import ParameterType
from event_builder.core.errors import MalformedParameterError


class _Unset(Enum):
    UNSET = "unset"


# Omit marker: the parameter contributes nothing to the payload.
UNSET = _Unset.UNSET
Unset = Literal[_Unset.UNSET]

Fragment = dict[str, Any]


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

class OptionalNumberParameter(BaseModel):
    """Numeric parameter, omitted from the payload while ``value`` is None.

    NaN and infinities are rejected: they have no JSON representation.
    """

    model_config = {"frozen": True}

    type: Literal["optional_number"] = ParameterType.OPTIONAL_NUMBER.value
    name: str
    value: int | FiniteFloat | None = None


class OptionalStringParameter(BaseModel):
    """String parameter, omitted while ``value`` is empty or None."""

    model_config = {"frozen": True}

    type: Literal["optional_string"] = ParameterType.OPTIONAL_STRING.value
    name: str
    value: str | None = ""


class RequiredArrayParameter(BaseModel):
    """List of items.  Always serialized, even when empty."""

    model_config = {"frozen": True}

    type: Literal["required_array"] = ParameterType.REQUIRED_ARRAY.value
    name: str
    value: list[Item] = Field(default_factory=list)


class Item(BaseModel):
    """One entry of a ``RequiredArrayParameter`` (e.g. a product in a cart)."""

    model_config = {"frozen": True}

    parameters: dict[str, Parameter] = Field(default_factory=dict)
    custom_parameters: dict[str, Parameter] = Field(default_factory=dict)


Parameter = Annotated[
    Union[OptionalNumberParameter, OptionalStringParameter, RequiredArrayParameter],
    Field(discriminator="type"),
]

Parameters = dict[str, Parameter]

RequiredArrayParameter.model_rebuild()
Item.model_rebuild()

_PARAMETER_ADAPTER: TypeAdapter[Parameter] = TypeAdapter(Parameter)


def parse_parameter(raw: Mapping[str, Any]) -> Parameter:
    """Validate a raw mapping (TOML/JSON) into the matching parameter variant.

    Raises:
        MalformedParameterError: *raw* does not describe a known variant.
    """
    if not isinstance(raw, Mapping):
        raise MalformedParameterError(f"Invalid parameter {raw!r}: expected a table")
    try:
        return _PARAMETER_ADAPTER.validate_python(dict(raw))
    except ValidationError as exc:
        raise MalformedParameterError(f"Invalid parameter {dict(raw)!r}: {exc}") from exc


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

def parameter_to_payload(parameter: Parameter) -> Fragment | Unset:
    """Serialize one parameter to a single-key fragment, or ``UNSET``.

    Pure: sibling parameters are never consulted.

    Raises:
        MalformedParameterError: *parameter* is not one of the known variants.
    """
    match parameter:
        case OptionalNumberParameter(value=None):
            return UNSET
        case OptionalNumberParameter():
            return {parameter.name: parameter.value}
        case OptionalStringParameter(value=None | ""):
            return UNSET
        case OptionalStringParameter():
            return {parameter.name: parameter.value}
        case RequiredArrayParameter():
            return {parameter.name: [item_to_payload(item) for item in parameter.value]}
        case _:
            raise MalformedParameterError(
                f"Cannot serialize {type(parameter).__name__}: not a known parameter variant"
            )


def item_to_payload(item: Item) -> Fragment:
    """Flatten an item's built-in then custom parameters into one dict."""
    return merge_fragments(
        [*item.parameters.values(), *item.custom_parameters.values()]
    )


def merge_fragments(parameters: Iterable[Parameter]) -> Fragment:
    """Fold parameters into one dict, skipping ``UNSET``; later keys win."""
    payload: Fragment = {}
    for parameter in parameters:
        fragment = parameter_to_payload(parameter)
        if fragment is UNSET:
            continue
        payload.update(fragment)
    return payload
