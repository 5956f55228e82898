"""Terminal console: renders the game with rich and turns typed commands into actions.

Only a thin driver: every rule lives in the engine. The console reads the
engine's accessors once per command and never holds game state of its own.
"""

from __future__ import annotations

from typing import Callable

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from scrabblecore.game.board import SIZE, BonusKind
from scrabblecore.game.engine import ActionResult, GameMode, GameState, ScrabbleGame

BONUS_STYLES = {
    BonusKind.TRIPLE_WORD: ("3W", "bold white on red"),
    BonusKind.DOUBLE_WORD: ("2W", "black on magenta"),
    BonusKind.CENTER: ("**", "black on magenta"),
    BonusKind.TRIPLE_LETTER: ("3L", "white on blue"),
    BonusKind.DOUBLE_LETTER: ("2L", "black on cyan"),
}

PLAYER_COLORS = ["cyan", "magenta"]

HELP_TEXT = """\
place ROW COL [INDEX] [LETTER]   put a rack tile on the board (LETTER for blanks)
remove ROW COL                   take back one tile placed this turn
select INDEX                     choose the rack tile for the next place
confirm | cancel                 submit or withdraw this turn's tiles
skip | exchange I [I ...]        pass, or swap rack tiles with the bag
shuffle | pause | resume | surrender
new [MODE] [NAME1] [NAME2]       start over (human_vs_human, human_vs_ai, ai_vs_ai)
suggest PREFIX | hint [PREFIX]   dictionary words, or only those the rack can spell
help | quit"""

_SIMPLE = {
    "confirm": "confirm", "ok": "confirm",
    "cancel": "cancel",
    "skip": "skip", "pass": "skip",
    "shuffle": "shuffle",
    "pause": "pause",
    "resume": "resume",
    "surrender": "surrender",
}


def _ints(parts: list[str], what: str) -> list[int]:
    try:
        return [int(p) for p in parts]
    except ValueError:
        raise ValueError(f"{what} must be whole numbers") from None


def parse_command(line: str) -> dict:
    """Turn a typed command into an action dict. Raises ValueError if malformed."""
    parts = line.split()
    if not parts:
        raise ValueError("empty command")
    cmd, args = parts[0].lower(), parts[1:]

    if cmd in _SIMPLE:
        return {"action": _SIMPLE[cmd]}

    if cmd == "place":
        if len(args) < 2:
            raise ValueError("usage: place ROW COL [INDEX] [LETTER]")
        row, col = _ints(args[:2], "ROW and COL")
        action = {"action": "place", "row": row, "col": col}
        for extra in args[2:4]:
            if extra.isdigit():
                action["rack_index"] = int(extra)
            else:
                action["letter"] = extra.upper()
        return action

    if cmd == "remove":
        if len(args) != 2:
            raise ValueError("usage: remove ROW COL")
        row, col = _ints(args, "ROW and COL")
        return {"action": "remove", "row": row, "col": col}

    if cmd == "select":
        if len(args) != 1:
            raise ValueError("usage: select INDEX")
        return {"action": "select", "index": _ints(args, "INDEX")[0]}

    if cmd == "exchange":
        if not args:
            raise ValueError("usage: exchange I [I ...]")
        return {"action": "exchange", "indices": _ints(args, "Indices")}

    if cmd == "new":
        action = {"action": "new_game"}
        if args:
            action["mode"] = args[0].lower()
        if len(args) > 1:
            action["name1"] = args[1]
        if len(args) > 2:
            action["name2"] = args[2]
        return action

    raise ValueError(f"unknown command: {cmd}")


def render_board(game: ScrabbleGame) -> Table:
    """Board grid; tiles placed this turn are highlighted."""
    board = game.board
    pending = set(game.pending_cells)

    table = Table(show_header=True, box=None, padding=(0, 0), pad_edge=False)
    table.add_column("", justify="right", style="dim")
    for c in range(SIZE):
        table.add_column(f"{c:>2}", justify="center")

    for r in range(SIZE):
        cells: list[Text] = []
        for c in range(SIZE):
            tile = board.get_tile(r, c)
            if tile is not None:
                letter = tile.letter.lower() if tile.is_wildcard else tile.letter
                style = "bold black on yellow" if (r, c) in pending else "bold black on wheat1"
                cells.append(Text(f"{letter:>2}", style=style))
            elif board.get_bonus(r, c) in BONUS_STYLES:
                label, style = BONUS_STYLES[board.get_bonus(r, c)]
                cells.append(Text(label, style=style))
            else:
                cells.append(Text(" .", style="dim"))
        table.add_row(f"{r:>2} ", *cells)
    return table


def render_status(game: ScrabbleGame) -> Panel:
    """Scores, racks and counters."""
    lines: list[Text] = []
    for i, p in enumerate(game.players):
        marker = ">" if i == game.current_player_index else " "
        line = Text(f"{marker} {p.name:<12} {p.score:>4}  ", style=PLAYER_COLORS[i])
        if i == game.current_player_index or game.state is GameState.GAME_OVER:
            rack = " ".join(f"{j}:{t.letter}" for j, t in enumerate(p.rack))
            line.append(rack, style="bold")
        else:
            line.append(f"{len(p.rack)} tiles", style="dim")
        lines.append(line)

    lines.append(Text(
        f"Bag: {game.tiles_in_bag}  Passes: {game.consecutive_passes}/"
        f"{game.config.max_consecutive_passes}  Failures: "
        f"{game.consecutive_failures}/{game.config.max_consecutive_failures}",
        style="dim",
    ))

    if game.state is GameState.GAME_OVER:
        if game.is_draw:
            lines.append(Text(f"Game over ({game.end_reason}): draw", style="bold yellow"))
        else:
            lines.append(Text(
                f"Game over ({game.end_reason}): {game.winner.name} wins",
                style="bold green",
            ))

    return Panel(Group(*lines), title=game.state.value.replace("_", " ").upper())


def describe_result(result: ActionResult) -> Text:
    if result.success:
        if result.words:
            return Text(
                f"{', '.join(result.words)} for {result.score} points", style="green",
            )
        return Text("ok", style="green")
    return Text(result.reason or "rejected", style="red")


def run_console(
    game: ScrabbleGame,
    console: Console | None = None,
    read: Callable[[str], str] = input,
) -> None:
    """Read-eval-render loop until ``quit`` or end of input."""
    console = console or Console()
    if game.state is GameState.MENU:
        game.start_new_game(GameMode.HUMAN_VS_HUMAN, "Player 1", "Player 2")

    while True:
        console.print(render_board(game))
        console.print(render_status(game))
        try:
            line = read("> ").strip()
        except EOFError:
            break
        if not line:
            continue

        word = line.split()[0].lower()
        if word in ("quit", "exit"):
            break
        if word == "help":
            console.print(Text(HELP_TEXT))
            continue
        if word == "suggest":
            prefix = line.split()[1] if len(line.split()) > 1 else ""
            console.print(", ".join(game.suggest(prefix)) or "(no suggestions)")
            continue
        if word == "hint":
            prefix = line.split()[1] if len(line.split()) > 1 else ""
            console.print(", ".join(game.rack_suggestions(prefix)) or "(no playable words)")
            continue

        try:
            action = parse_command(line)
        except ValueError as e:
            console.print(Text(str(e), style="red"))
            continue
        console.print(describe_result(game.apply_action(action)))
