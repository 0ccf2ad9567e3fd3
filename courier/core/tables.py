"""Handler references, table sources and pass directives.

Tables held by a component (``on_messages``, ``pass_messages``) may be a
static value or a zero-argument callable returning one. They are resolved
fresh at every bubble step and never cached, since a component's table may
legitimately change between bubbles.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from courier.core.envelope import Envelope
from courier.core.patterns import select_best_match
from courier.errors import (
    InvalidHandlerTable,
    InvalidPassDirective,
    InvalidTableKey,
    MissingHandlerMethod,
)


HandlerRef: TypeAlias = "str | Callable[..., Any]"
PassTransform: TypeAlias = Callable[[Envelope, Any], Any]


def resolve_table(source: Any) -> Any:
    """Resolve a static-or-computed table to its current value."""
    if source is None or isinstance(source, Mapping):
        return source
    if callable(source):
        return source()
    return source


def resolve_handler_table(component: Any) -> Mapping[str, Any] | None:
    """Return the component's handler table, or None if it has none.

    Raises:
        InvalidHandlerTable: If the resolved table is not a mapping.
    """
    table = resolve_table(getattr(component, "on_messages", None))
    if table is None:
        return None
    if not isinstance(table, Mapping):
        raise InvalidHandlerTable(table, component)
    return table


def resolve_handler(component: Any, ref: HandlerRef) -> Callable[..., Any]:
    """Turn a handler table value into something we can call.

    Method names are looked up on ``component`` and come back bound to it.
    Callables are returned as they are.

    Raises:
        MissingHandlerMethod: If a method name does not resolve to a
            callable attribute of ``component``.
    """
    if isinstance(ref, str):
        method = getattr(component, ref, None)
        if not callable(method):
            raise MissingHandlerMethod(ref, component)
        return method
    if callable(ref):
        return ref
    raise MissingHandlerMethod(repr(ref), component)


# ---- Pass directives ----


@dataclass(frozen=True)
class Forward:
    """Forward the envelope unchanged."""

    def apply(self, envelope: Envelope) -> None:
        return None


@dataclass(frozen=True)
class Rename:
    """Forward under a new name, payload untouched."""

    name: str

    def apply(self, envelope: Envelope) -> None:
        envelope.name = self.name


@dataclass(frozen=True)
class Transform:
    """Let a callback build the forwarded name and payload.

    The callback receives a stub envelope carrying the current name and an
    empty payload, plus the old payload. Whatever the stub holds afterwards
    is what gets forwarded.
    """

    callback: PassTransform

    def apply(self, envelope: Envelope) -> None:
        stub = Envelope(name=envelope.name, payload={})
        self.callback(stub, envelope.payload)
        envelope.name = stub.name
        envelope.payload = stub.payload


PassDirective: TypeAlias = Forward | Rename | Transform

FORWARD = Forward()


def parse_pass_directive(value: Any, forward_marker: str = ".") -> PassDirective:
    """Interpret one value of a keyed pass table.

    Raises:
        InvalidPassDirective: If the value is neither a string nor callable.
    """
    if isinstance(value, str):
        if value == forward_marker:
            return FORWARD
        return Rename(value)
    if callable(value):
        return Transform(value)
    raise InvalidPassDirective(value)


def select_pass_directive(
    component: Any,
    message_name: str,
    source: Any,
    forward_marker: str = ".",
) -> PassDirective | None:
    """Decide whether and how ``component`` forwards an ordinary message.

    The resolved ``pass_messages`` value takes exactly one shape:

    - None: nothing is forwarded.
    - bool: forward everything unchanged, or nothing.
    - list, tuple or set of names: forward unchanged when the message name
      is one of them.
    - mapping: pattern keys to directives, best match wins.

    Returns:
        The directive to apply, or None when the message stops here.

    Raises:
        InvalidPassDirective: For any other shape.
    """
    table = resolve_table(getattr(component, "pass_messages", None))

    if table is None:
        return None
    if isinstance(table, bool):
        return FORWARD if table else None
    if isinstance(table, (list, tuple, set, frozenset)):
        return FORWARD if message_name in table else None
    if isinstance(table, Mapping):
        try:
            match = select_best_match(
                table, message_name, source, component.get_child_component
            )
        except InvalidTableKey as error:
            raise InvalidPassDirective(table) from error
        if match is None:
            return None
        return parse_pass_directive(match.value, forward_marker)
    raise InvalidPassDirective(table)
