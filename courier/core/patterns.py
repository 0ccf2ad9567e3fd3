"""Pattern matching for handler, pass and spawn tables.

A table key is ``"eventPattern"`` or ``"eventPattern childName"``. The event
pattern may use ``*`` to match zero or more identifier characters and must
match the whole message name. When a child name is present the entry only
applies to messages whose source is that named child.

Among several matching entries the most specific one wins:

1. Entries with a child qualifier outrank entries without one.
2. Within a tier, the pattern with more non-wildcard characters wins.
3. Remaining ties go to the entry that comes first in the table.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from courier.errors import InvalidTableKey


WILDCARD = "*"

_KEY_SPLITTER = re.compile(r"^(\S+)\s*(.*)$")


@dataclass(frozen=True)
class PatternKey:
    """A parsed table key."""

    event_pattern: str
    child_name: str | None
    regex: re.Pattern[str]

    @property
    def specificity(self) -> tuple[bool, int]:
        literal_chars = len(self.event_pattern.replace(WILDCARD, ""))
        return (self.child_name is not None, literal_chars)


@dataclass(frozen=True)
class PatternMatch:
    """The single best entry selected from a table."""

    key: str
    event_pattern: str
    child_name: str | None
    value: Any


@lru_cache(maxsize=1024)
def parse_key(key: str) -> PatternKey:
    """Split a table key into its event pattern and optional child name.

    Args:
        key: Table key such as ``"selected"`` or ``"me* childA"``.

    Returns:
        The parsed key with its compiled event regex (used with fullmatch).

    Raises:
        InvalidTableKey: If the key is not a string, or is empty or only
            whitespace.
    """
    if not isinstance(key, str):
        raise InvalidTableKey(key)
    match = _KEY_SPLITTER.match(key.strip())
    if match is None:
        raise InvalidTableKey(key)
    event_pattern, child_name = match.group(1), match.group(2).strip()
    body = r"\w*".join(re.escape(part) for part in event_pattern.split(WILDCARD))
    return PatternKey(
        event_pattern=event_pattern,
        child_name=child_name or None,
        regex=re.compile(body),
    )


def select_best_match(
    table: Mapping[str, Any],
    message_name: str,
    source: Any,
    resolve_child: Callable[[str], Any],
) -> PatternMatch | None:
    """Return the most specific entry of ``table`` matching a message.

    Args:
        table: Mapping of pattern keys to handlers or directives.
        message_name: Concrete name of the message being matched.
        source: Component the message arrived from.
        resolve_child: Looks up a child component by name. Only called for
            keys whose event pattern already matched.

    Returns:
        The best match, or None when no entry applies.
    """
    best: PatternMatch | None = None
    best_specificity: tuple[bool, int] | None = None

    for key, value in table.items():
        parsed = parse_key(key)
        if not parsed.regex.fullmatch(message_name):
            continue
        if parsed.child_name is not None:
            child = resolve_child(parsed.child_name)
            if child is None or child is not source:
                continue

        specificity = parsed.specificity
        if best_specificity is None or specificity > best_specificity:
            best = PatternMatch(
                key=key,
                event_pattern=parsed.event_pattern,
                child_name=parsed.child_name,
                value=value,
            )
            best_specificity = specificity

    return best
