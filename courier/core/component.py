"""Courier - the component side of the bubbling contract."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from courier.core.bubble import BubbleController
from courier.core.resolver import ParentResolver
from courier.settings import CourierSettings


SpawnListener = Callable[[str, Any], None]


class Courier:
    """Mixin that lets a component spawn and receive bubbling messages.

    Subclasses configure themselves through plain attributes:

    - ``on_messages``: ``{"pattern [childName]": "method_name" | callable}``
    - ``pass_messages``: ``None``, a bool, a list of names, or
      ``{"pattern [childName]": "." | "newName" | callable}``
    - ``child_components``: ``{"childName": component}``

    Both tables may also be zero-argument callables returning the table.
    Handlers are called with ``(payload, source, name)``.

    Example:
        class Toolbar(Courier):
            on_messages = {"save*": "handle_save"}
            pass_messages = {"close": "."}

            def handle_save(self, payload, source, name):
                ...

    Parents come from ``parent_resolver`` unless ``get_parent_component`` is
    overridden. Resolvers must be resolver objects or be assigned per
    instance; a plain function stored on the class would be bound as a
    method.
    """

    on_messages: Any = None
    pass_messages: Any = None
    child_components: Mapping[str, Any] | None = None
    parent_resolver: ParentResolver | None = None
    courier_settings: CourierSettings | None = None

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._spawn_listeners: list[SpawnListener] = []

    # ---- Tree ----

    def get_parent_component(self) -> Any:
        resolver = self.parent_resolver
        if resolver is None:
            return None
        return resolver(self)

    def get_child_component(self, name: str) -> Any:
        """Look a child up in ``child_components``; None when unknown."""
        if not isinstance(self.child_components, Mapping):
            return None
        return self.child_components.get(name)

    # ---- Spawning ----

    def spawn(self, message: Any, payload: Any = None) -> Any:
        """Spawn a message and bubble it up through this component's parents.

        Args:
            message: Message name, ``Envelope`` or mapping with ``"name"``.
            payload: Message data; defaults to an empty dict.

        Returns:
            The handler's result for round-trip messages, otherwise None.
        """
        return BubbleController(self.courier_settings).spawn(self, message, payload)

    def add_spawn_listener(self, listener: SpawnListener) -> Callable[[], None]:
        """Observe every message this component spawns.

        Returns:
            A function that removes the listener again.
        """
        self._spawn_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._spawn_listeners:
                self._spawn_listeners.remove(listener)

        return unsubscribe

    def announce_spawn(self, name: str, payload: Any) -> None:
        for listener in list(self._spawn_listeners):
            listener(name, payload)
