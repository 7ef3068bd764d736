"""Property tests: payload omission rules, merge precedence, immutability.

Uses hypothesis to build arbitrary parameter sets and update chains and
checks the invariants that must hold for every one of them.
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from event_builder.core.enums import EventType
from event_builder.domain.event import MPEvent
from event_builder.domain.parameters import (
    UNSET,
    Item,
    OptionalNumberParameter,
    OptionalStringParameter,
    RequiredArrayParameter,
    merge_fragments,
    parameter_to_payload,
)

names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=12)
numbers = st.one_of(
    st.integers(min_value=-10**6, max_value=10**6),
    st.floats(allow_nan=False, allow_infinity=False),
)

number_params = st.builds(
    OptionalNumberParameter, name=names, value=st.one_of(st.none(), numbers),
)
string_params = st.builds(
    OptionalStringParameter, name=names, value=st.one_of(st.none(), st.just(""), st.text()),
)
scalar_params = st.one_of(number_params, string_params)

items = st.builds(
    Item,
    parameters=st.dictionaries(names, scalar_params, max_size=4),
    custom_parameters=st.dictionaries(names, scalar_params, max_size=4),
)
array_params = st.builds(
    RequiredArrayParameter, name=names, value=st.lists(items, max_size=3),
)
any_params = st.one_of(scalar_params, array_params)


@given(parameter=scalar_params)
def test_scalar_contributes_one_key_or_nothing(parameter):
    fragment = parameter_to_payload(parameter)
    if parameter.value is None or parameter.value == "":
        assert fragment is UNSET
    else:
        assert fragment == {parameter.name: parameter.value}


@given(parameter=array_params)
def test_array_always_contributes_its_key(parameter):
    fragment = parameter_to_payload(parameter)
    assert list(fragment) == [parameter.name]
    assert len(fragment[parameter.name]) == len(parameter.value)


@given(parameters=st.lists(any_params, max_size=8))
def test_merge_matches_last_non_unset_fragment(parameters):
    merged = merge_fragments(parameters)
    expected = {}
    for parameter in parameters:
        fragment = parameter_to_payload(parameter)
        if fragment is not UNSET:
            expected.update(fragment)
    assert merged == expected


@given(
    builtin=st.dictionaries(names, scalar_params, max_size=5),
    custom=st.dictionaries(names, scalar_params, max_size=5),
)
@settings(max_examples=100)
def test_custom_wins_on_collision(builtin, custom):
    event = (
        MPEvent.empty(EventType.CUSTOM_EVENT)
        .update_name("evt")
        .update_parameters(lambda _: dict(builtin))
        .update_custom_parameters(lambda _: dict(custom))
    )
    params = event.as_payload()["params"]

    # The last set custom parameter of each payload name decides its value.
    winners = {}
    for parameter in custom.values():
        if parameter_to_payload(parameter) is not UNSET:
            winners[parameter.name] = parameter.value
    for name, value in winners.items():
        assert params[name] == value


@given(
    extra=st.dictionaries(names, any_params, max_size=4),
    remove=names,
    rename=st.tuples(names, names),
)
@settings(max_examples=100)
def test_updates_never_touch_the_receiver(extra, remove, rename):
    event = MPEvent.default()
    for key, parameter in extra.items():
        event = event.add_custom_parameter(key, parameter)
    before = event.as_payload()
    snapshot = event.get_event_data()

    event.add_custom_parameter("probe", OptionalStringParameter(name="probe", value="x"))
    event.remove_custom_parameter(remove)
    event.update_custom_parameter_name(*rename)
    event.update_parameters(lambda params: {})
    event.update_custom_parameters(lambda params: {})

    assert event.as_payload() == before
    assert event.get_event_data() == snapshot
    assert event.as_payload() == event.as_payload()
