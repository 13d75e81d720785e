"""Map errors and the messages reported for them."""

from __future__ import annotations

RED = "\033[0;31m"
RESET = "\033[0m"

ERRBER = "Argument is not a correct .ber file.\n"
ERROTHER = "At least one character of the map is not valid.\n"
ERRCHARS = "One of the characters \"0, 1, P, C, E\" is missing.\n"
ERRPLAYER = "This is a solo campaign...\n"
ERRREC = "The map is not a rectangle.\n"
ERREDGES = "The edges of the map are invalid (must be walls -1-)\n"
ERROPEN = "open failed\n"


class MapError(Exception):
    """Raised when a map file cannot be used to start a game."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def format_error(message: str) -> str:
    """Build the coloured error report written to standard error."""
    return f"{RED}Error\n{message}{RESET}"