"""Command entry point: load, check and play a map."""

from __future__ import annotations

import sys
from typing import List, Optional

from treasurehunt.errors import ERRBER, MapError, format_error
from treasurehunt.game import Game
from treasurehunt.mapfile import check_extension, load_map
from treasurehunt.validate import check_map


def main(argv: Optional[List[str]] = None) -> int:
    """Play the map named by the single argument; return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        return 0
    path = args[0]
    try:
        if not check_extension(path):
            raise MapError(ERRBER)
        grid = load_map(path)
        check_map(grid)
    except MapError as exc:
        sys.stderr.write(format_error(exc.message))
        return 1
    from treasurehunt.render import Renderer

    Renderer(Game(grid)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())