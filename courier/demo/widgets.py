"""Widgets of the courier demo contact book.

Message Flow:
    ContactRow      ← Button.Pressed relayed as "selected" {contact}
        ↓           ← on mount asks "theme!" for its button variant
    ContactList     ← renames "selected" to "contactSelected"
        ↓
    ContactBook     ← handles "contactSelected", answers "theme!"
"""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, RichLog, Static

from courier.core.envelope import Envelope
from courier.tui import CourierWidget


def _contact_selected(stub: Envelope, event: Button.Pressed) -> None:
    stub.name = "selected"
    stub.payload = {"contact": event.button.name}


class ContactRow(CourierWidget, Horizontal):
    """One contact with a button that spawns ``selected``."""

    DEFAULT_CSS = """
    ContactRow {
        height: 3;
    }
    """

    spawn_messages = {"button_pressed": _contact_selected}

    def __init__(self, contact: str, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.contact = contact

    def compose(self) -> ComposeResult:
        yield Button(self.contact, name=self.contact, id=f"contact-{self.contact}")

    def on_mount(self) -> None:
        theme = self.spawn("theme!")
        self.query_one(Button).variant = theme.get("variant", "default")


class ContactList(CourierWidget, Vertical):
    """Lists contacts and forwards selections under a book-level name."""

    DEFAULT_CSS = """
    ContactList {
        width: 30;
    }
    """

    pass_messages = {"selected": "contactSelected"}

    def __init__(self, contacts: list[str], **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.contacts = contacts
        self.child_components: dict[str, ContactRow] = {}

    def compose(self) -> ComposeResult:
        for contact in self.contacts:
            row = ContactRow(contact)
            self.child_components[contact] = row
            yield row


class ContactBook(CourierWidget, Horizontal):
    """Top-level component: shows the selection and serves the theme."""

    on_messages = {
        "contactSelected": "show_contact",
        "theme!": "current_theme",
    }

    def __init__(
        self, contacts: list[str], variant: str = "primary", **kwargs: Any
    ) -> None:
        super().__init__(**kwargs)
        self.contacts = contacts
        self.variant = variant
        self.selected: str | None = None
        self.history: list[str] = []

    def compose(self) -> ComposeResult:
        yield ContactList(self.contacts, id="contact_list")
        with Vertical(id="details"):
            yield Static("No contact selected", id="selection", markup=False)
            yield RichLog(id="activity")

    def show_contact(self, payload: dict[str, Any], source: Any, name: str) -> None:
        contact = payload["contact"]
        self.selected = contact
        self.history.append(contact)
        self.query_one("#selection", Static).update(f"Selected: {contact}")
        self.query_one("#activity", RichLog).write(
            Text.assemble((f"{name} ", "dim"), (contact, "bold"))
        )

    def current_theme(self, payload: Any, source: Any, name: str) -> dict[str, str]:
        return {"variant": self.variant}
