"""Tests for table resolution, handler lookup and pass directives."""

from types import SimpleNamespace

import pytest

from courier.core.envelope import Envelope
from courier.core.tables import (
    FORWARD,
    Rename,
    Transform,
    parse_pass_directive,
    resolve_handler,
    resolve_handler_table,
    resolve_table,
)
from courier.errors import (
    InvalidHandlerTable,
    InvalidPassDirective,
    MissingHandlerMethod,
)


class Holder:
    def handle(self, payload, source, name):
        return (self, payload)


def test_resolve_table_passes_static_values_through():
    table = {"a": 1}

    assert resolve_table(table) is table
    assert resolve_table(None) is None
    assert resolve_table(True) is True


def test_resolve_table_calls_computed_tables():
    assert resolve_table(lambda: {"b": 2}) == {"b": 2}


def test_resolve_handler_table_rejects_non_mappings():
    component = SimpleNamespace(on_messages=("a", "b"))

    with pytest.raises(InvalidHandlerTable) as exc_info:
        resolve_handler_table(component)

    assert exc_info.value.component is component


def test_resolve_handler_table_without_attribute():
    assert resolve_handler_table(object()) is None


def test_resolve_handler_binds_method_names():
    holder = Holder()

    handler = resolve_handler(holder, "handle")

    assert handler({"x": 1}, None, "n") == (holder, {"x": 1})


def test_resolve_handler_returns_callables_unchanged():
    def free(payload, source, name):
        return name

    assert resolve_handler(Holder(), free) is free


@pytest.mark.parametrize("ref", ["missing", 5])
def test_resolve_handler_rejects_unresolvable_refs(ref):
    with pytest.raises(MissingHandlerMethod):
        resolve_handler(Holder(), ref)


def test_missing_handler_method_is_an_attribute_error():
    with pytest.raises(AttributeError):
        resolve_handler(Holder(), "missing")


def test_parse_pass_directive_forward_and_rename():
    assert parse_pass_directive(".") is FORWARD
    assert parse_pass_directive("renamed") == Rename("renamed")
    assert parse_pass_directive("->", forward_marker="-") == Rename("->")
    assert parse_pass_directive("-", forward_marker="-") is FORWARD


def test_parse_pass_directive_rejects_other_values():
    with pytest.raises(InvalidPassDirective):
        parse_pass_directive(None)


def test_transform_replaces_name_and_payload_from_stub():
    old_payload = {"first": "Ada"}
    envelope = Envelope(name="message1", payload=old_payload, source="child")

    def callback(stub, old):
        assert stub.payload == {}
        assert stub.source is None
        stub.name = "message2"
        stub.payload = {"full": old["first"] + " Lovelace"}

    Transform(callback).apply(envelope)

    assert envelope.name == "message2"
    assert envelope.payload == {"full": "Ada Lovelace"}
    assert envelope.source == "child"
    assert old_payload == {"first": "Ada"}


def test_forward_and_rename_keep_payload_identity():
    payload = {"a": 1}
    envelope = Envelope(name="message1", payload=payload)

    FORWARD.apply(envelope)
    assert envelope.name == "message1"

    Rename("message2").apply(envelope)
    assert envelope.name == "message2"
    assert envelope.payload is payload
