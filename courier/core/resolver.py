"""Parent resolution for bubbling.

The bubble controller never looks at a tree directly. It asks each component
for its parent, and components delegate that question to a resolver. The
default resolver walks a node tree; ``InjectedParentResolver`` covers
hierarchies that are not tree shaped.
"""

from __future__ import annotations

import weakref
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias


ParentResolver: TypeAlias = Callable[[Any], Any]


def has_render_surface(component: Any) -> bool:
    return callable(getattr(component, "render", None))


@dataclass(frozen=True)
class TreeParentResolver:
    """Find the closest ancestor node that carries a renderable component.

    Starting at the parent of the component's anchor node, walk upwards,
    skipping nodes without an attached component, until a boundary node or
    the top of the tree. The boundary node itself is never considered.

    Attributes:
        anchor_of: Node a component is attached to (None if detached).
        parent_of: Parent of a node (None at the top).
        component_of: Component attached to a node, if any.
        is_boundary: True for the node where the walk stops.
    """

    anchor_of: Callable[[Any], Any]
    parent_of: Callable[[Any], Any]
    component_of: Callable[[Any], Any]
    is_boundary: Callable[[Any], bool]

    def __call__(self, component: Any) -> Any:
        anchor = self.anchor_of(component)
        if anchor is None:
            return None

        node = self.parent_of(anchor)
        while node is not None and not self.is_boundary(node):
            candidate = self.component_of(node)
            if candidate is not None and has_render_surface(candidate):
                return candidate
            node = self.parent_of(node)
        return None


class InjectedParentResolver:
    """Parent links assigned explicitly instead of derived from a tree.

    Children are held weakly: a link disappears once its child is garbage
    collected, so ``forget`` is only needed to detach a live child. Children
    must therefore support weak references, as ordinary class instances do.
    """

    def __init__(self) -> None:
        self._parents: dict[int, tuple[weakref.ref[Any], Any]] = {}

    def assign(self, child: Any, parent: Any) -> None:
        key = id(child)
        self._parents[key] = (
            weakref.ref(child, lambda _: self._drop(key)),
            parent,
        )

    def forget(self, child: Any) -> None:
        self._parents.pop(id(child), None)

    def _drop(self, key: int) -> None:
        entry = self._parents.get(key)
        if entry is not None and entry[0]() is None:
            del self._parents[key]

    def __call__(self, component: Any) -> Any:
        entry = self._parents.get(id(component))
        if entry is None or entry[0]() is not component:
            return None
        return entry[1]
