"""Tests for parent resolvers."""

from __future__ import annotations

import gc

from courier.core.resolver import (
    InjectedParentResolver,
    TreeParentResolver,
    has_render_surface,
)


class TreeNode:
    def __init__(self, label: str, parent: TreeNode | None = None, boundary=False):
        self.label = label
        self.parent = parent
        self.boundary = boundary
        self.component = None


class Renderable:
    def __init__(self, node: TreeNode) -> None:
        self.anchor = node
        node.component = self

    def render(self) -> str:
        return "renderable"


class Invisible:
    """Attached to a node but cannot render, so never a parent."""

    def __init__(self, node: TreeNode) -> None:
        self.anchor = node
        node.component = self


def make_resolver() -> TreeParentResolver:
    return TreeParentResolver(
        anchor_of=lambda component: getattr(component, "anchor", None),
        parent_of=lambda node: node.parent,
        component_of=lambda node: node.component,
        is_boundary=lambda node: node.boundary,
    )


def test_has_render_surface():
    assert has_render_surface(Renderable(TreeNode("a")))
    assert not has_render_surface(Invisible(TreeNode("b")))


def test_tree_resolver_skips_plain_and_invisible_nodes():
    root = TreeNode("root")
    top = Renderable(TreeNode("top", parent=root))
    invisible = Invisible(TreeNode("invisible", parent=top.anchor))
    plain = TreeNode("plain", parent=invisible.anchor)
    leaf = Renderable(TreeNode("leaf", parent=plain))

    assert make_resolver()(leaf) is top


def test_tree_resolver_finds_closest_renderable_ancestor():
    root = TreeNode("root")
    top = Renderable(TreeNode("top", parent=root))
    middle = Renderable(TreeNode("middle", parent=top.anchor))
    leaf = Renderable(TreeNode("leaf", parent=middle.anchor))

    resolver = make_resolver()

    assert resolver(leaf) is middle
    assert resolver(middle) is top
    assert resolver(top) is None


def test_tree_resolver_stops_at_boundary():
    outer = Renderable(TreeNode("outer"))
    screen = TreeNode("screen", parent=outer.anchor, boundary=True)
    screen.component = Renderable(TreeNode("screen-owner"))
    leaf = Renderable(TreeNode("leaf", parent=screen))

    assert make_resolver()(leaf) is None


def test_tree_resolver_without_anchor_returns_none():
    assert make_resolver()(object()) is None


def test_injected_resolver_assign_and_forget():
    resolver = InjectedParentResolver()
    child, parent = TreeNode("child"), TreeNode("parent")

    assert resolver(child) is None

    resolver.assign(child, parent)
    assert resolver(child) is parent

    resolver.forget(child)
    resolver.forget(child)
    assert resolver(child) is None


def test_injected_resolver_drops_links_of_collected_children():
    resolver = InjectedParentResolver()
    parent = TreeNode("parent")
    child = TreeNode("child")
    resolver.assign(child, parent)
    assert len(resolver._parents) == 1

    del child
    gc.collect()

    assert resolver._parents == {}


def test_injected_resolver_keeps_links_of_live_children():
    resolver = InjectedParentResolver()
    parent, child = TreeNode("parent"), TreeNode("child")
    resolver.assign(child, parent)

    gc.collect()

    assert resolver(child) is parent
