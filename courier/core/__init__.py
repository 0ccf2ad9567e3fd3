"""Core bubbling engine, independent of any UI toolkit."""

from courier.core.bubble import BubbleController, BubbleResult, BubbleState
from courier.core.component import Courier
from courier.core.envelope import Envelope
from courier.core.patterns import PatternMatch, parse_key, select_best_match
from courier.core.resolver import (
    InjectedParentResolver,
    ParentResolver,
    TreeParentResolver,
)
from courier.core.tables import (
    FORWARD,
    Forward,
    Rename,
    Transform,
    parse_pass_directive,
    resolve_table,
    select_pass_directive,
)


__all__ = [
    # Controller
    "BubbleController",
    "BubbleResult",
    "BubbleState",
    # Component contract
    "Courier",
    "Envelope",
    # Pattern matching
    "PatternMatch",
    "parse_key",
    "select_best_match",
    # Parent resolution
    "ParentResolver",
    "TreeParentResolver",
    "InjectedParentResolver",
    # Pass directives
    "FORWARD",
    "Forward",
    "Rename",
    "Transform",
    "parse_pass_directive",
    "resolve_table",
    "select_pass_directive",
]
