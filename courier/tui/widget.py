"""CourierWidget - a Textual widget that takes part in courier bubbling.

Widget Hierarchy (example)::

    Screen                      ← boundary, never a courier parent
    └── ContactBook(CourierWidget)      ← on_messages {"contactSelected": ...}
        └── Vertical            ← skipped, carries no component
            └── ContactList(CourierWidget)  ← pass_messages {"selected": "contactSelected"}
                └── ContactRow(CourierWidget)   ← spawn_messages {"button_pressed": "selected"}
                    └── Button

Parents are resolved through the DOM, skipping plain widgets. Every spawn
posts a ``MessageSpawned`` to the spawning widget. ``spawn_messages`` turns
Textual messages that reach the widget into courier spawns, so components
rarely need to call ``spawn`` by hand.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from textual import on
from textual.css.match import match
from textual.css.parse import parse_selectors
from textual.dom import DOMNode
from textual.message import Message
from textual.widget import Widget

from courier.core.component import Courier
from courier.core.envelope import Envelope
from courier.core.patterns import select_best_match
from courier.core.resolver import ParentResolver
from courier.core.tables import resolve_table
from courier.errors import InvalidSpawnDirective
from courier.tui.dom import attach_component, dom_parent_resolver
from courier.tui.messages import MessageSpawned


logger = logging.getLogger(__name__)

SpawnDirective = str | Callable[[Envelope, Message], Any]


def control_matches(control: DOMNode | None, selector: str) -> bool:
    """Check a Textual message's control against a CSS selector."""
    if control is None:
        return False
    return match(parse_selectors(selector), control)


def spawn_event_name(message: Message) -> str:
    """Name a Textual message the way ``spawn_messages`` keys do.

    ``Button.Pressed`` becomes ``button_pressed``, ``Input.Submitted``
    becomes ``input_submitted``.
    """
    return message.handler_name.removeprefix("on_")


class CourierWidget(Courier, Widget):
    """Widget carrying the courier contract.

    Subclass it (alone or alongside a container such as ``Vertical``) and
    set ``on_messages``, ``pass_messages``, ``child_components`` and
    ``spawn_messages`` as needed.

    ``spawn_messages`` keys are ``"<event> [selector]"`` where ``<event>`` is
    the Textual handler name without ``on_`` (wildcards allowed) and the
    optional CSS selector is matched against the message's control. Values
    are a message name to spawn, or a callable receiving a stub envelope and
    the Textual message; it must set the stub's name and may fill its
    payload.

    Example:
        class SaveBar(CourierWidget):
            spawn_messages = {
                "button_pressed #save": "saveRequested",
                "input_submitted": lambda stub, event: ...
            }
    """

    spawn_messages: ClassVar[Mapping[str, SpawnDirective] | None] = None
    parent_resolver: ParentResolver | None = dom_parent_resolver

    def __init__(self, *children: Widget, **kwargs: Any) -> None:
        super().__init__(*children, **kwargs)
        attach_component(self, self)

    def announce_spawn(self, name: str, payload: Any) -> None:
        super().announce_spawn(name, payload)
        self.post_message(MessageSpawned(name, payload))

    @on(Message)
    def _relay_spawn_messages(self, message: Message) -> None:
        """Spawn courier messages for Textual messages listed in spawn_messages."""
        if isinstance(message, MessageSpawned):
            return
        table = resolve_table(self.spawn_messages)
        if not table:
            return

        control = message.control
        entry = select_best_match(
            table,
            spawn_event_name(message),
            control,
            lambda selector: control if control_matches(control, selector) else None,
        )
        if entry is None:
            return

        directive = entry.value
        logger.debug(
            f"{type(self).__name__} relays {type(message).__name__} via {entry.key!r}"
        )
        if isinstance(directive, str):
            self.spawn(directive)
        elif callable(directive):
            stub = Envelope(name="", payload={})
            directive(stub, message)
            self.spawn(stub)
        else:
            raise InvalidSpawnDirective(directive)
