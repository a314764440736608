# widgets/input_cell.py
from __future__ import annotations
from typing import Optional
from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.validation import Function
from textual.widgets import Input, Label, Static
from fields import ValidatedTextField


class InputCell(Vertical):
    """Labelled text input driven by a ValidatedTextField.

    The field's allowlist becomes the Input's ``restrict`` pattern and its
    predicate a validator, so invalid text only changes the styling.
    Losing focus hands the current text to the field's submit handler.
    """

    DEFAULT_CSS = """
    InputCell {
        height: auto;
        margin-bottom: 1;
    }
    InputCell Input {
        width: 40;
        margin-bottom: 0;
    }
    InputCell Input.-invalid {
        color: $error;
    }
    InputCell .cell-footer {
        color: $text-muted;
    }
    """

    def __init__(
        self,
        label: str,
        field: ValidatedTextField,
        *,
        placeholder: str = "",
        id: Optional[str] = None,
    ) -> None:
        super().__init__(id=id)
        self.label = label
        self.field = field
        self.placeholder = placeholder

    def compose(self) -> ComposeResult:
        yield Label(self.label)
        yield Input(
            value=self.field.text,
            placeholder=self.placeholder,
            restrict=self.field.config.restrict,
            validators=[Function(self.field.check, "Invalid value")],
            id=f"{self.id}_input" if self.id else None,
        )
        if self.field.footer:
            yield Static(self.field.footer, classes="cell-footer")

    @property
    def input_widget(self) -> Input:
        return self.query_one(Input)

    @property
    def text(self) -> str:
        return self.field.text

    @text.setter
    def text(self, value: str) -> None:
        self.field.text = value
        self.input_widget.value = value

    def on_input_changed(self, event: Input.Changed) -> None:
        self.field.text = event.value

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        self.field.set_focus(True)

    def on_descendant_blur(self, event: events.DescendantBlur) -> None:
        self.field.text = self.input_widget.value
        self.field.set_focus(False)
