"""Custom UI widgets for the task picker."""
from textual.widgets import Static


class PickerFooter(Static):
    """Footer with centered key hints."""

    def __init__(self):
        super().__init__()
        self.update("[dim]Press[/dim] [bold]Enter[/bold] [dim]to choose  •  [/dim][bold]Esc[/bold] [dim]to cancel[/dim]")

    DEFAULT_CSS = """
    PickerFooter {
        background: transparent;
        color: #0abdc6;
        dock: bottom;
        height: 1;
        text-align: center;
    }
    """
