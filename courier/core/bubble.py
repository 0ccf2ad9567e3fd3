"""BubbleController - walks a spawned message up the component tree.

Message Flow::

    origin.spawn("selected", payload)
        ↓ envelope created, origin.announce_spawn(name, payload)
    parent          ← on_messages matched, handler invoked
        ↓ pass_messages decides: forward / rename / transform / stop
    grandparent     ← envelope.source is now the parent
        ↓
    ...             ← until handled (round-trip), dropped, or exhausted

Ordinary messages may be handled *and* forwarded by the same ancestor; they
only continue when that ancestor has a matching pass directive. Round-trip
messages (names ending in the round-trip marker) skip pass tables
altogether: they climb until the first handler runs, whose return value
becomes the result of ``spawn``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from courier.core.envelope import Envelope
from courier.core.patterns import select_best_match
from courier.core.tables import (
    resolve_handler,
    resolve_handler_table,
    select_pass_directive,
)
from courier.errors import (
    InvalidHandlerTable,
    InvalidMessage,
    InvalidTableKey,
    UnhandledRoundTrip,
)
from courier.settings import CourierSettings, get_settings


if TYPE_CHECKING:
    from courier.core.component import Courier

logger = logging.getLogger(__name__)


class BubbleState(str, Enum):
    CREATED = "created"
    BUBBLING = "bubbling"
    FORWARDED = "forwarded"
    HANDLED = "handled"
    DROPPED = "dropped"
    EXHAUSTED = "exhausted"


@dataclass
class BubbleResult:
    """Outcome of one bubble.

    Attributes:
        envelope: The envelope as it stood when bubbling ended.
        state: Terminal state (HANDLED, DROPPED or EXHAUSTED).
        value: Return value of the round-trip handler, None otherwise.
        path: Ancestors the envelope was offered to, in order.
        handled_by: Ancestors whose handler ran.
    """

    envelope: Envelope
    state: BubbleState = BubbleState.CREATED
    value: Any = None
    path: list[Any] = field(default_factory=list)
    handled_by: list[Any] = field(default_factory=list)


class BubbleController:
    def __init__(self, settings: CourierSettings | None = None) -> None:
        self._settings = settings or get_settings()

    @property
    def settings(self) -> CourierSettings:
        return self._settings

    def build_envelope(
        self, origin: Courier, message: Any, payload: Any = None
    ) -> Envelope:
        """Create the envelope for a spawn call.

        Args:
            origin: The spawning component.
            message: A message name, an ``Envelope``, or a mapping with at
                least a ``"name"`` key (and optionally ``"payload"``).
            payload: Payload for a bare name. For partial envelopes it only
                applies when the envelope carries no payload of its own.

        Raises:
            InvalidMessage: If no non-empty name can be resolved.
        """
        if isinstance(message, str):
            name, body = message, payload
        elif isinstance(message, Envelope):
            name, body = message.name, message.payload
        elif isinstance(message, Mapping):
            name, body = message.get("name"), message.get("payload")
        else:
            raise InvalidMessage(message)

        if not isinstance(name, str) or not name:
            raise InvalidMessage(message)
        if body is None:
            body = payload if payload is not None else {}

        return Envelope(
            name=name,
            payload=body,
            source=origin,
            round_trip=Envelope.is_round_trip_name(
                name, self._settings.round_trip_marker
            ),
        )

    def spawn(self, origin: Courier, message: Any, payload: Any = None) -> Any:
        """Spawn a message from ``origin`` and bubble it to completion.

        Returns:
            The round-trip handler's return value, or None for ordinary
            messages.

        Raises:
            InvalidMessage: No message name could be resolved.
            MissingHandlerMethod: A handler entry names a missing method.
            InvalidPassDirective: A pass table has an unknown shape.
            UnhandledRoundTrip: A round-trip message reached the root.
        """
        envelope = self.build_envelope(origin, message, payload)
        origin.announce_spawn(envelope.name, envelope.payload)
        return self.bubble(origin, envelope).value

    def bubble(self, origin: Courier, envelope: Envelope) -> BubbleResult:
        """Walk ``envelope`` up from ``origin`` and report how it ended."""
        result = BubbleResult(envelope=envelope)
        child: Any = origin
        ancestor = origin.get_parent_component()

        while ancestor is not None:
            result.state = BubbleState.BUBBLING
            result.path.append(ancestor)
            logger.debug(
                f"Offering {envelope.name!r} to {type(ancestor).__name__}"
            )

            handled, value = self._offer_to_handler(ancestor, child, envelope)
            if handled:
                result.handled_by.append(ancestor)
                if envelope.round_trip:
                    result.state = BubbleState.HANDLED
                    result.value = value
                    logger.debug(f"Round-trip {envelope.name!r} answered")
                    return result

            if not envelope.round_trip:
                directive = select_pass_directive(
                    ancestor,
                    envelope.name,
                    child,
                    self._settings_of(ancestor).forward_marker,
                )
                if directive is None:
                    result.state = (
                        BubbleState.HANDLED if handled else BubbleState.DROPPED
                    )
                    logger.debug(f"{envelope.name!r} stopped: {result.state.value}")
                    return result
                directive.apply(envelope)
                if not isinstance(envelope.name, str) or not envelope.name:
                    raise InvalidMessage(envelope)

            envelope.source = ancestor
            result.state = BubbleState.FORWARDED
            logger.debug(
                f"{type(ancestor).__name__} forwarded {envelope.name!r}"
            )
            child = ancestor
            ancestor = child.get_parent_component()

        result.state = BubbleState.EXHAUSTED
        if envelope.round_trip:
            raise UnhandledRoundTrip(envelope.name)
        logger.debug(f"{envelope.name!r} reached the root")
        return result

    def _settings_of(self, ancestor: Any) -> CourierSettings:
        # Round-trip classification stays with the spawner's settings
        return getattr(ancestor, "courier_settings", None) or self._settings

    def _offer_to_handler(
        self, ancestor: Any, child: Any, envelope: Envelope
    ) -> tuple[bool, Any]:
        table = resolve_handler_table(ancestor)
        if table is None:
            return False, None

        try:
            match = select_best_match(
                table, envelope.name, child, ancestor.get_child_component
            )
        except InvalidTableKey as error:
            raise InvalidHandlerTable(table, ancestor) from error
        if match is None:
            return False, None

        handler = resolve_handler(ancestor, match.value)
        logger.debug(
            f"{type(ancestor).__name__} handles {envelope.name!r} via {match.key!r}"
        )
        return True, handler(envelope.payload, envelope.source, envelope.name)
