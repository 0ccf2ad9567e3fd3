"""Textual messages posted by courier widgets.

Courier bubbling runs synchronously and does not use Textual's message
queue. The messages here are notifications for the rest of a Textual app:
they are posted to the spawning widget itself and do not bubble.
"""

from typing import Any

from textual.message import Message


class MessageSpawned(Message, bubble=False):
    """Posted to a courier widget every time it spawns a message.

    Posted regardless of how the bubble ended, so apps and tests can observe
    spawns without registering handlers on ancestors.
    """

    def __init__(self, message_name: str, payload: Any) -> None:
        super().__init__()
        self.message_name = message_name
        self.payload = payload
