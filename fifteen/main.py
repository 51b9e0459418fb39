"""Fifteen — sliding puzzle in the terminal.

Usage::

    fifteen                     # interactive menu, 4×4 preselected
    fifteen -s 3 --seed 7       # reproducible 3×3 shuffles
    fifteen -s 5 --print        # print one shuffled board and exit
"""

import logging
import random
from typing import Optional

import typer
from rich.logging import RichHandler

from fifteen.engine.shuffler import DEFAULT_SHUFFLE_MOVES, Shuffler
from fifteen.frontend.cli import app as rich_app

logger = logging.getLogger(__name__)

MIN_CLI_SIZE = rich_app.MIN_SIZE
MAX_CLI_SIZE = rich_app.MAX_SIZE


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=rich_app.console, show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        4, "-s", "--size",
        min=MIN_CLI_SIZE, max=MAX_CLI_SIZE,
        help=f"Grid size ({MIN_CLI_SIZE}-{MAX_CLI_SIZE}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the shuffle; omit for a random one.",
    ),
    shuffle_moves: int = typer.Option(
        DEFAULT_SHUFFLE_MOVES, "--shuffle-moves",
        min=0,
        help="Random blank moves used to shuffle each board.",
    ),
    print_only: bool = typer.Option(
        False, "--print",
        help="Print one shuffled board and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log debug output.",
    ),
) -> None:
    """Fifteen — sliding puzzle."""
    _configure_logging(verbose)
    rng = random.Random(seed)
    logger.debug("Starting with size=%d seed=%s", size, seed)

    if print_only:
        board = Shuffler.generate(size, rng, shuffle_moves)
        rich_app.print_board(board)
        return

    rich_app.run(size=size, rng=rng, shuffle_moves=shuffle_moves)


if __name__ == "__main__":
    app()
