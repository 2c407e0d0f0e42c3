"""Interactive single-choice prompt over task names."""
from typing import List, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from ui.widgets import PickerFooter


class TaskPickerApp(App[Optional[str]]):
    """Let the user choose one task name; returns None if cancelled."""

    CSS = """
    Screen {
        background: #1a1a2e;
    }

    #picker_container {
        height: auto;
        max-height: 100%;
        padding: 1 2;
    }

    #picker_title {
        text-style: bold;
        color: #0abdc6;
        margin-bottom: 1;
    }

    OptionList {
        height: auto;
        max-height: 20;
        background: #2d2d44;
        color: #e2e8f0;
        border: tall #8b5cf6;
    }

    OptionList:focus {
        border: tall #0abdc6;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False, priority=True),
    ]

    def __init__(self, prompt: str, choices: List[str]):
        """
        Initialize the picker.

        Args:
            prompt: Question shown above the choices
            choices: Task names to choose from
        """
        super().__init__()
        self.prompt = prompt
        self.choices = list(choices)

    def compose(self) -> ComposeResult:
        """Compose the UI."""
        with Container(id="picker_container"):
            yield Static(Text(self.prompt), id="picker_title")
            yield OptionList(*[Option(Text(name), id=name) for name in self.choices])
        yield PickerFooter()

    def on_mount(self) -> None:
        """Focus the list with the first choice highlighted."""
        option_list = self.query_one(OptionList)
        if self.choices:
            option_list.highlighted = 0
        option_list.focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Exit with the chosen task name."""
        self.exit(event.option.id)

    def action_cancel(self) -> None:
        """Exit without a choice."""
        self.exit(None)


def pick_task(prompt: str, choices: List[str]) -> Optional[str]:
    """
    Ask the user to choose one of the given task names.

    Args:
        prompt: Question shown above the choices
        choices: Eligible task names

    Returns:
        The chosen name, or None if there was nothing to choose or the user cancelled
    """
    if not choices:
        return None
    return TaskPickerApp(prompt, choices).run()
