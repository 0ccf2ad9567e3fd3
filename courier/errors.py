"""Errors raised while spawning and bubbling messages.

Every error is raised synchronously out of ``spawn`` to its caller. The
engine never retries or swallows them: they point at a misconfigured
component tree and are meant to surface.
"""

from __future__ import annotations

from typing import Any


class CourierError(Exception):
    """Base class for all courier errors."""


class InvalidMessage(CourierError, ValueError):
    """Raised when spawn is called without a resolvable message name."""

    def __init__(self, message: Any) -> None:
        super().__init__(f"Undefined message name: {message!r}")
        self.message = message


class MissingHandlerMethod(CourierError, AttributeError):
    """Raised when a handler entry names a method the ancestor lacks."""

    def __init__(self, method_name: str, component: Any) -> None:
        super().__init__(
            f'Method "{method_name}" does not exist on '
            f"{type(component).__name__}"
        )
        self.method_name = method_name
        self.component = component


class InvalidTableKey(CourierError, ValueError):
    """Raised when a table key is not a non-blank string."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"Invalid table key: {key!r}")
        self.key = key


class InvalidHandlerTable(CourierError, TypeError):
    """Raised when a resolved handler table is not a mapping."""

    def __init__(self, table: Any, component: Any) -> None:
        super().__init__(
            f"on_messages of {type(component).__name__} should be a mapping, "
            f"got {type(table).__name__}"
        )
        self.table = table
        self.component = component


class InvalidPassDirective(CourierError, TypeError):
    """Raised when a pass table or one of its values has an unknown shape."""

    def __init__(self, directive: Any) -> None:
        super().__init__(
            "pass_messages should be a boolean, a list of names or a mapping "
            "of patterns to directives, got "
            f"{type(directive).__name__}"
        )
        self.directive = directive


class InvalidSpawnDirective(CourierError, TypeError):
    """Raised when a spawn_messages value is neither a name nor a callable."""

    def __init__(self, directive: Any) -> None:
        super().__init__(
            "spawn_messages values should be a message name or a callable, "
            f"got {type(directive).__name__}"
        )
        self.directive = directive


class UnhandledRoundTrip(CourierError, LookupError):
    """Raised when a round-trip message reaches the root unhandled."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Round-trip message "{name}" was not handled')
        self.name = name


class UnknownChildName(CourierError, LookupError):
    """Raised by child resolvers asked for a name they do not recognise."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown child component name: {name}")
        self.name = name
