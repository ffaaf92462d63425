"""Terminal helpers: clearing the screen, the title banner and the closing banner."""

from __future__ import annotations

import os
import subprocess

from .arrays import ERROR_CLEAR

TITLE = (
    "   ____         __  _\n"
    "  / __/__  ____/ /_(_)__  ___ _\n"
    " _\\ \\/ _ \\/ __/ __/ / _ \\/ _ `/\n"
    "/___/\\___/_/  \\__/_/_//_/\\_, /\n"
    "   ___   __             /___/  __\n"
    "  / _ | / /__ ____  ____(_) /_/ /  __ _  ___\n"
    " / __ |/ / _ `/ _ \\/ __/ / __/ _ \\/  ' \\(_-<\n"
    "/_/ |_/_/\\_, /\\___/_/ /_/\\__/_//_/_/_/_/___/\n"
    "        /___/\n\n"
)

FAREWELL_MESSAGE = "Thank you for using this program."

_WIDTH = 70
_BLACK_ON_WHITE = "\033[30;47m"
_RESET = "\033[0m"


def clear_screen() -> bool:
    """Clear the terminal; print an error and return False if that cannot be done."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        print(ERROR_CLEAR, end="")
        return False
    return True


def title() -> str:
    """Print the program's title banner and return the text printed."""
    banner = TITLE
    print(banner, end="")
    return banner


def _banner_line(text: str = "") -> str:
    line = text.center(_WIDTH)
    if os.name == "nt":
        return line
    return f"{_BLACK_ON_WHITE}{line}{_RESET}"


def farewell() -> None:
    """Print the closing banner and the thank-you line."""
    lines = [
        "",
        _banner_line(),
        _banner_line(FAREWELL_MESSAGE),
        _banner_line(),
        "",
        FAREWELL_MESSAGE,
    ]
    print("\n".join(lines))