"""Default courier ancestry for Textual's DOM.

Nodes carry a reference to the courier component living on them. A
``CourierWidget`` is its own node; other components set ``anchor`` to the
widget they are attached to. The parent of a component is the closest
ancestor node carrying a component with a ``render`` method, looking no
further than the screen.
"""

from __future__ import annotations

from typing import Any

from textual.dom import DOMNode
from textual.screen import Screen

from courier.core.resolver import TreeParentResolver


COMPONENT_ATTRIBUTE = "_courier_component"


def attach_component(node: DOMNode, component: Any) -> None:
    """Mark ``node`` as carrying ``component``.

    A node keeps its first component; attaching again is a no-op.
    """
    if getattr(node, COMPONENT_ATTRIBUTE, None) is None:
        setattr(node, COMPONENT_ATTRIBUTE, component)


def component_for(node: DOMNode) -> Any:
    """Return the component carried by ``node``, if any."""
    return getattr(node, COMPONENT_ATTRIBUTE, None)


def anchor_for(component: Any) -> DOMNode | None:
    if isinstance(component, DOMNode):
        return component
    return getattr(component, "anchor", None)


def _parent_node(node: DOMNode) -> DOMNode | None:
    return node.parent


def _is_boundary(node: DOMNode) -> bool:
    return isinstance(node, Screen)


dom_parent_resolver = TreeParentResolver(
    anchor_of=anchor_for,
    parent_of=_parent_node,
    component_of=component_for,
    is_boundary=_is_boundary,
)
