"""Courier: tree-scoped message bubbling for UI components.

Components spawn named messages that bubble up their ancestor chain. Each
ancestor may handle a message, rename or rewrite it, and decide whether it
continues upwards. Names ending in ``!`` are round-trip messages whose
first handler's return value is handed back to the spawner.
"""

from courier.core import (
    BubbleController,
    BubbleResult,
    BubbleState,
    Courier,
    Envelope,
    InjectedParentResolver,
    TreeParentResolver,
    select_best_match,
)
from courier.errors import (
    CourierError,
    InvalidHandlerTable,
    InvalidMessage,
    InvalidPassDirective,
    InvalidSpawnDirective,
    InvalidTableKey,
    MissingHandlerMethod,
    UnhandledRoundTrip,
    UnknownChildName,
)
from courier.settings import CourierSettings, get_settings


__all__ = [
    "BubbleController",
    "BubbleResult",
    "BubbleState",
    "Courier",
    "Envelope",
    "InjectedParentResolver",
    "TreeParentResolver",
    "select_best_match",
    "CourierError",
    "InvalidHandlerTable",
    "InvalidMessage",
    "InvalidPassDirective",
    "InvalidSpawnDirective",
    "InvalidTableKey",
    "MissingHandlerMethod",
    "UnhandledRoundTrip",
    "UnknownChildName",
    "CourierSettings",
    "get_settings",
]
