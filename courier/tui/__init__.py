"""Textual binding for courier components."""

from courier.tui.dom import (
    attach_component,
    component_for,
    dom_parent_resolver,
)
from courier.tui.messages import MessageSpawned
from courier.tui.widget import CourierWidget


__all__ = [
    "CourierWidget",
    "MessageSpawned",
    "attach_component",
    "component_for",
    "dom_parent_resolver",
]
