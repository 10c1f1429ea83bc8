from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text


def print_error(
    console: Console, title: str, message: str, suggestion: Optional[str] = None
) -> None:
    """
    Print a formatted error message using Rich.

    Args:
        console: The Rich Console instance.
        title: The title of the error (e.g., "Configuration Error").
        message: The main error message.
        suggestion: An optional suggestion for the user.
    """
    content = Text()
    content.append(f"{message}\n", style="white")

    if suggestion:
        content.append("\nSuggestion:\n", style="bold yellow")
        content.append(f"{suggestion}", style="italic yellow")

    console.print(
        Panel(
            content,
            title=f"[bold red]{title}[/]",
            border_style="red",
            expand=False,
        )
    )
