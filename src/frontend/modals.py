"""Confirmation dialog for the Textual config panel."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Static

# (label, result, button variant)
Choice = tuple[str, str, str]

EXIT_CHOICES: list[Choice] = [
    ("Save", "save", "success"),
    ("Discard", "discard", "error"),
    ("Cancel", "cancel", "default"),
]

RELOAD_CHOICES: list[Choice] = [
    ("Save", "save", "default"),
    ("Reload", "reload", "warning"),
    ("Cancel", "cancel", "default"),
]


class ChoiceScreen(ModalScreen[str]):
    """Asks what to do with unsaved settings; dismisses with the result key."""

    def __init__(self, title: str, body: str, choices: list[Choice]) -> None:
        super().__init__()
        self._title = title
        self._body = body
        self._choices = choices

    def compose(self) -> ComposeResult:
        yield Container(
            Static(self._title, classes="modal-title"),
            Static(self._body, classes="modal-body"),
            Horizontal(
                *[
                    Button(label, id=f"choice-{result}", variant=variant)
                    for label, result, variant in self._choices
                ],
                classes="modal-actions",
            ),
            classes="modal-dialog",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        self.dismiss(button_id.removeprefix("choice-") or "cancel")
