from typing import Optional
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

PREFIX = "crowns"

# ========== UI Theme ==========
custom_theme = Theme({
    "ok":   "bold green",
    "warn": "bold yellow",
    "err":  "bold red",
    "info": "bold cyan",
})
console = Console(theme=custom_theme)
err_console = Console(theme=custom_theme, stderr=True)


def error_panel(title: str, msg: str):
    err_console.print(Panel.fit(Text(msg, no_wrap=False), title=title, border_style="red"))


def format_elapsed(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.2f}ms"
    return f"{seconds:.4f}s"


# ========== Verbose logging ==========
class Logger:
    """Print diagnostic lines when verbose, optionally tagged with ``[crowns]``.

    ``log(message)`` follows the configured verbosity; ``log(message, verbosity)``
    overrides it for a single line (used for response bodies).
    """

    def __init__(self, verbose: bool, prefix: bool = True, out: Optional[Console] = None):
        self.verbose = verbose
        self.prefix = prefix
        self.out = out or console

    def __call__(self, message: str, verbosity: Optional[bool] = None):
        if not (self.verbose if verbosity is None else verbosity):
            return
        if self.prefix:
            self.out.print(Text(f"[{PREFIX}] ", style="info"), end="", soft_wrap=True, highlight=False)
        # rich strips control codes and expands tabs, bodies must stay byte-for-byte
        self.out.file.write(message + "\n")
        self.out.file.flush()
