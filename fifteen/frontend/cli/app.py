"""Rich terminal frontend — tables, colours, and panels.

Reads the board only through its public snapshot (``as_2d``) and sends
moves through ``GamePlay``; it never touches the tile list directly.
"""

from __future__ import annotations

import logging
import random
import sys

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fifteen.engine.gameplay import GamePlay
from fifteen.engine.shuffler import DEFAULT_SHUFFLE_MOVES
from fifteen.frontend.cli.input_handler import MOVES, get_key, get_key_timeout
from fifteen.models.board import Board, Direction

logger = logging.getLogger(__name__)

console = Console()

MIN_SIZE = 2
MAX_SIZE = 8

HELP_TEXT = (
    "[cyan]Slide tiles into the blank until they read 1, 2, 3 … "
    "with the blank in the bottom-right corner.[/cyan]"
)

# Key action → direction the tile slides.
_DIRECTION_MAP: dict[str, Direction] = {
    "up": Direction.TOP,
    "down": Direction.BOTTOM,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    return stats


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(len(board) - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.side):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.as_2d()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(board.index_of_point(r, c)):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def print_board(board: Board, title: str = "") -> None:
    """Print *board* once inside a panel (non-interactive)."""
    panel = Panel(
        Align.center(render_board(board)),
        title=title or f"[bold cyan]Sliding Puzzle  {board.side}×{board.side}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(panel)


# -- screens ------------------------------------------------------------------


def _draw_menu(sel_size: int) -> None:
    console.clear()

    sizes = Text()
    for s in range(MIN_SIZE, MAX_SIZE + 1):
        if s > MIN_SIZE:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("H", style="bold cyan")
    opts.append("  Help    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(Text("  ← →  change size", style="dim")),
        Text(""),
        Align.center(opts),
        Text(""),
    )
    panel = Panel(
        body,
        title="[bold]F I F T E E N[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    side = game.side
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("U", style="bold cyan")
    controls.append("  undo   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reshuffle   ", style="dim")
    controls.append("H", style="bold cyan")
    controls.append("  help   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(render_board(game.board)),
        title=f"[bold cyan]Sliding Puzzle  {side}×{side}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    # Cursor is saved here so _update_time() repaints only the stats line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _update_time(game: GamePlay) -> None:
    """Overwrite the stats line in place with raw ANSI codes."""
    m, s = divmod(int(game.state.elapsed_time), 60)
    stats_raw = (
        f"\033[2mMoves: \033[0m\033[33;1m{game.state.moves}\033[0m"
        f"    \033[2mTime: \033[0m\033[33;1m{m:02d}:{s:02d}\033[0m"
    )
    visible_len = len(f"Moves: {game.state.moves}    Time: {m:02d}:{s:02d}")
    pad = max(0, (console.width - visible_len) // 2)

    sys.stdout.write(f"\033[u\033[K{' ' * pad}{stats_raw}")
    sys.stdout.flush()


def _draw_win(game: GamePlay) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    panel = Panel(
        Group(
            Align.center(render_board(game.board)),
            Align.center(congrats),
            Align.center(_stats(game)),
        ),
        title=f"[bold green]Sliding Puzzle  {game.side}×{game.side}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _play_game(side: int, rng: random.Random, shuffle_moves: int) -> None:
    while True:
        game = GamePlay(side, rng=rng, shuffle_moves=shuffle_moves)
        status = ""

        while not game.is_won:
            _draw_game(game, status)
            status = ""

            # Short timeout so the clock keeps ticking between keys.
            while True:
                key = get_key_timeout(0.5)
                if key is not None:
                    break
                _update_time(game)

            if key in MOVES:
                if not game.move(_DIRECTION_MAP[key]):
                    status = "[dim]Nothing to slide that way.[/dim]"
            elif key == "undo":
                if not game.undo():
                    status = "[dim]Nothing to undo.[/dim]"
            elif key == "restart":
                game = GamePlay(side, rng=rng, shuffle_moves=shuffle_moves)
                status = "[yellow]Reshuffled![/yellow]"
            elif key == "help":
                status = HELP_TEXT
            elif key == "quit":
                return

        game.state.pause()
        logger.info(
            "Solved %d×%d in %d moves (%.1fs)",
            side, side, game.state.moves, game.state.elapsed_time,
        )
        _draw_win(game)

        while True:
            key = get_key()
            if key == "restart":
                break
            if key == "quit":
                return


def _menu_loop(sel_size: int, rng: random.Random, shuffle_moves: int) -> None:
    while True:
        _draw_menu(sel_size)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            sel_size = max(MIN_SIZE, sel_size - 1)
        elif key == "right":
            sel_size = min(MAX_SIZE, sel_size + 1)
        elif key == "enter":
            _play_game(sel_size, rng, shuffle_moves)
        elif key == "help":
            console.print(Align.center(Text.from_markup(f"\n{HELP_TEXT}\n")))
            get_key()


# -- public entry point -------------------------------------------------------


def run(
    size: int,
    rng: random.Random,
    shuffle_moves: int = DEFAULT_SHUFFLE_MOVES,
) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(size, rng, shuffle_moves)
