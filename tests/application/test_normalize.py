from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum

import pytest

from lib_log_args.application.use_cases.normalize import ArgumentNormalizer
from lib_log_args.domain.levels import SeverityLevel
from lib_log_args.domain.options import WrapOptions


class Color(Enum):
    RED = "red"


@pytest.fixture
def normalizer(recording_logger) -> ArgumentNormalizer:
    return ArgumentNormalizer(recording_logger, WrapOptions())


def test_mapping_is_wrapped_under_payload_key(normalizer: ArgumentNormalizer) -> None:
    payload = {"foo": "bar"}

    call = normalizer.normalize(SeverityLevel.INFO, (payload,))

    assert call is not None
    assert call.fields == {"payload": {"foo": "bar"}}
    assert call.message is None
    assert call.result is payload


def test_object_conflicting_with_core_fields_stays_inside_payload(normalizer: ArgumentNormalizer) -> None:
    """Keys such as ``v`` or ``msg`` never reach the top level of the record."""

    call = normalizer.normalize(SeverityLevel.INFO, ({"v": "v", "msg": "x"},))

    assert call is not None
    assert call.fields == {"payload": {"v": "v", "msg": "x"}}


def test_exception_becomes_tagged_fragment_and_is_returned(normalizer: ArgumentNormalizer) -> None:
    error = ValueError("boom")

    call = normalizer.normalize(SeverityLevel.ERROR, (error,))

    assert call is not None
    assert call.result is error
    assert call.fields["isError"] is True
    assert call.fields["payload"]["name"] == "ValueError"
    assert call.fields["payload"]["message"] == "boom"


@pytest.mark.parametrize(
    "value, rendered",
    [
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
        (Decimal("1.10"), "1.10"),
        (complex(1, 2), "(1+2j)"),
        (Color.RED, "Color.RED"),
    ],
)
def test_opaque_scalars_are_stored_as_text(normalizer: ArgumentNormalizer, value: object, rendered: str) -> None:
    """Values JSON cannot carry are stored as text while the original is returned."""

    call = normalizer.normalize(SeverityLevel.INFO, (value,))

    assert call is not None
    assert call.fields == {"payload": rendered}
    assert call.result is value


@pytest.mark.parametrize("value", [None, "", " ", True, False, 0, 3.5, [1, 2]])
def test_edge_values_pass_through_as_payload(normalizer: ArgumentNormalizer, value: object) -> None:
    call = normalizer.normalize(SeverityLevel.INFO, (value,))

    assert call is not None
    assert call.fields == {"payload": value}
    assert call.result is value


def test_nan_passes_through_unchanged(normalizer: ArgumentNormalizer) -> None:
    call = normalizer.normalize(SeverityLevel.INFO, (float("nan"),))

    assert call is not None
    assert math.isnan(call.fields["payload"])
    assert math.isnan(call.result)


def test_no_arguments_log_an_empty_payload(normalizer: ArgumentNormalizer) -> None:
    call = normalizer.normalize(SeverityLevel.INFO, ())

    assert call is not None
    assert call.fields == {"payload": None}
    assert call.result is None


def test_format_string_yields_message_and_surplus(normalizer: ArgumentNormalizer) -> None:
    call = normalizer.normalize(SeverityLevel.INFO, ("user %s, id %d", "ann", 7))

    assert call is not None
    assert call.message == "user ann, id 7"
    assert call.fields == {}
    assert call.result == ["ann", 7]


def test_several_strings_are_joined(normalizer: ArgumentNormalizer) -> None:
    call = normalizer.normalize(SeverityLevel.INFO, ("a", "b", "c"))

    assert call is not None
    assert call.message == "a b c"
    assert call.result == "a"


def test_two_strings_are_joined(normalizer: ArgumentNormalizer) -> None:
    call = normalizer.normalize(SeverityLevel.INFO, ("first", "second"))

    assert call is not None
    assert call.message == "first second"
    assert call.result == "first"


def test_percent_string_without_directive_is_joined(normalizer: ArgumentNormalizer) -> None:
    call = normalizer.normalize(SeverityLevel.INFO, ("disk at 50%", "now"))

    assert call is not None
    assert call.message == "disk at 50% now"
    assert call.result == "disk at 50%"


def test_payload_with_trailing_template_gets_a_message(normalizer: ArgumentNormalizer) -> None:
    """Arguments after a payload are rendered as the record message."""

    call = normalizer.normalize(SeverityLevel.INFO, ({"id": 1}, "created %s", "order"))

    assert call is not None
    assert call.fields == {"payload": {"id": 1}}
    assert call.message == "created order"


def test_producer_below_threshold_is_never_called(normalizer: ArgumentNormalizer) -> None:
    calls = []

    def produce() -> str:
        calls.append(1)
        return "x"

    assert normalizer.normalize(SeverityLevel.DEBUG, (produce,)) is None
    assert calls == []


def test_producer_receives_trailing_arguments(normalizer: ArgumentNormalizer) -> None:
    call = normalizer.normalize(SeverityLevel.INFO, (lambda value: {"foo": value}, "bar"))

    assert call is not None
    assert call.fields == {"payload": {"foo": "bar"}}
    assert call.result == {"foo": "bar"}


def test_producer_returning_list_restarts_dispatch(normalizer: ArgumentNormalizer) -> None:
    """A sequence returned by a producer is treated like the original argument list."""

    call = normalizer.normalize(SeverityLevel.INFO, (lambda: ["a", "b", "c"],))

    assert call is not None
    assert call.message == "a b c"
    assert call.result == "a"


def test_producer_returning_template_and_argument(normalizer: ArgumentNormalizer) -> None:
    obj = {"foo": "foo"}

    call = normalizer.normalize(SeverityLevel.INFO, (lambda: ("format %s", obj),))

    assert call is not None
    assert call.message == "format %s" % (obj,)
    assert call.result is obj


def test_producer_returning_exception_is_tagged(normalizer: ArgumentNormalizer) -> None:
    error = KeyError("k")

    call = normalizer.normalize(SeverityLevel.ERROR, (lambda: error,))

    assert call is not None
    assert call.result is error
    assert call.fields["isError"] is True


def test_classes_are_payloads_not_producers(normalizer: ArgumentNormalizer) -> None:
    """Classes are callable but are logged as values, not invoked."""

    call = normalizer.normalize(SeverityLevel.INFO, (dict,))

    assert call is not None
    assert call.fields == {"payload": dict}


def test_always_show_indicator_marks_non_errors_false(recording_logger) -> None:
    normalizer = ArgumentNormalizer(recording_logger, WrapOptions(always_show_error_indicator=True))

    payload_call = normalizer.normalize(SeverityLevel.INFO, ({"foo": "bar"},))
    message_call = normalizer.normalize(SeverityLevel.INFO, ("a", "b"))

    assert payload_call is not None and message_call is not None
    assert payload_call.fields == {"payload": {"foo": "bar"}, "isError": False}
    assert message_call.fields == {"isError": False}


def test_custom_keys_are_used(recording_logger) -> None:
    normalizer = ArgumentNormalizer(recording_logger, WrapOptions(payload_key="data", error_indicator_key="failed"))

    call = normalizer.normalize(SeverityLevel.ERROR, (RuntimeError("x"),))

    assert call is not None
    assert set(call.fields) == {"data", "failed"}


def test_prose_percent_before_a_letter_is_joined_unchanged(normalizer: ArgumentNormalizer) -> None:
    """Text such as ``95% of`` is not mangled into a conversion of the trailing value."""

    call = normalizer.normalize(SeverityLevel.INFO, ("cpu at 95% of capacity", "host1"))

    assert call is not None
    assert call.message == "cpu at 95% of capacity host1"
    assert call.result == "cpu at 95% of capacity"


def test_escaped_percent_without_arguments_returns_the_template(normalizer: ArgumentNormalizer) -> None:
    call = normalizer.normalize(SeverityLevel.INFO, ("100%% sure",))

    assert call is not None
    assert call.message == "100% sure"
    assert call.fields == {}
    assert call.result == "100%% sure"
