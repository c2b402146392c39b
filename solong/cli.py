"""Command-line entry point: validate a map and play it."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from solong.display import missing_assets, run
from solong.game import Game
from solong.mapfile import MapError, is_ber_file, load_map
from solong.output import printf
from solong.pathing import check_reachability

_RED = "\033[1;31m"
_GREY = "\033[1;30m"
_RESET = "\033[0m"

ASSET_DIR = Path("assets")
PROGRAM = "solong"


def _error(message: str) -> int:
    printf(_RED + "ERROR\n" + _GREY + "%s\n" + _RESET, message)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named on the command line; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or not is_ber_file(args[0]):
        printf(_RED + "ERROR USAGE: %s <map_file.ber>\n", PROGRAM)
        return 1
    try:
        game_map = load_map(args[0])
        check_reachability(game_map)
        game = Game(game_map)
    except MapError as exc:
        return _error(str(exc))
    for path in missing_assets(ASSET_DIR):
        printf("%s\n", str(path))
    try:
        run(game, ASSET_DIR)
    except RuntimeError as exc:
        printf("Error: %s", str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())