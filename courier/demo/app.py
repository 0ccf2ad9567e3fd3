"""Courier demo application.

Widget Hierarchy::

    CourierDemoApp
    └── Screen                          ← courier boundary
        ├── ContactBook(#book)          ← handles contactSelected, answers theme!
        │   ├── ContactList(#contact_list)  ← pass_messages renames selected
        │   │   └── ContactRow × n      ← Button.Pressed → selected
        │   └── Vertical(#details)
        │       ├── Static(#selection)
        │       └── RichLog(#activity)
        └── Footer
"""

from typing import ClassVar

from textual.app import App, ComposeResult
from textual.widgets import Footer

from courier.demo.widgets import ContactBook
from courier.logging_setup import setup_logging
from courier.settings import CourierSettings


DEFAULT_CONTACTS = ["Ada", "Grace", "Linus", "Guido"]


class CourierDemoApp(App):
    """A small contact book wired together with courier messages."""

    BINDINGS: ClassVar = [
        ("ctrl+q", "quit", "Quit the application"),
    ]

    def __init__(
        self,
        contacts: list[str] | None = None,
        variant: str = "primary",
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.contacts = contacts or list(DEFAULT_CONTACTS)
        self.variant = variant

    def compose(self) -> ComposeResult:
        yield ContactBook(self.contacts, variant=self.variant, id="book")
        yield Footer()


def main(contacts: list[str] | None = None, variant: str = "primary") -> None:
    """Run the demo app.

    Args:
        contacts: Contact names to list; a built-in list when omitted.
        variant: Button variant the book hands out through ``theme!``.
    """
    setup_logging(CourierSettings())
    app = CourierDemoApp(contacts=contacts, variant=variant)
    app.run()


if __name__ == "__main__":
    main()
