import logging

from rich.console import Console
from rich.theme import Theme

LOG = logging.getLogger(__name__)

THEME = Theme(
    {
        "path": "bold cyan",
        "name": "green",
        "muted": "dim",
        "error": "bold red",
    }
)

main_console = Console(theme=THEME, highlight=False)
