"""Rich console theming and color palette for CLI."""

from rich.console import Console
from rich.theme import Theme

# Consistent color palette
PRIMARY = "blue"
SUCCESS = "green"
WARNING = "yellow"
ERROR = "red"
INFO = "cyan"
SECONDARY = "magenta"

# Theme definition with semantic color names
custom_theme = Theme({
    "primary": PRIMARY,
    "success": SUCCESS,
    "warning": WARNING,
    "error": ERROR,
    "info": INFO,
    "user": f"bold {PRIMARY}",
    "assistant": f"bold {SECONDARY}",
})

# Single shared console instance, streamed answers are written through it
console = Console(theme=custom_theme)

__all__ = ["console", "custom_theme"]
