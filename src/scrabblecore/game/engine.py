"""Scrabble engine: the two-player turn and game state machine.

A turn is built up tile by tile: tiles move from the rack onto the board
tentatively, then the player confirms or cancels. Confirming re-derives
every word the tiles form, checks each against the dictionary, and either
scores the move or rolls it back.

The game ends when:
- the bag is empty and a player has emptied their rack,
- the consecutive-pass limit is reached (passes are counted across players),
- one player hits the consecutive invalid-move limit (opponent wins), or
- a player surrenders from the pause screen (opponent wins).

Every public operation returns an ``ActionResult``; nothing raises across
the engine boundary.
"""

from __future__ import annotations

import logging
import random
import uuid
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from scrabblecore.config import EngineConfig
from scrabblecore.core.schemas import load_schema, schema_error
from scrabblecore.core.seed import SeedManager
from scrabblecore.core.telemetry import TurnLogger, TurnRecord
from scrabblecore.game.bag import TileBag
from scrabblecore.game.board import Board, Cell, in_bounds
from scrabblecore.game.dictionary import Dictionary
from scrabblecore.game.rack import Player, PlayerKind, Rack
from scrabblecore.game.scoring import score_breakdown
from scrabblecore.game.tiles import Tile, LETTER_POINTS
from scrabblecore.game.words import WordInfo, find_words, primary_covers

__all__ = [
    "ActionResult",
    "GameMode",
    "GameState",
    "Intent",
    "Placement",
    "ScrabbleGame",
]

logger = logging.getLogger(__name__)


class GameState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PLACING_TILES = "placing_tiles"
    VALIDATING_WORD = "validating_word"
    GAME_OVER = "game_over"
    PAUSED = "paused"


class GameMode(Enum):
    HUMAN_VS_HUMAN = "human_vs_human"
    HUMAN_VS_AI = "human_vs_ai"
    AI_VS_AI = "ai_vs_ai"


_MODE_KINDS: dict[GameMode, tuple[PlayerKind, PlayerKind]] = {
    GameMode.HUMAN_VS_HUMAN: (PlayerKind.HUMAN, PlayerKind.HUMAN),
    GameMode.HUMAN_VS_AI: (PlayerKind.HUMAN, PlayerKind.AI_MEDIUM),
    GameMode.AI_VS_AI: (PlayerKind.AI_EASY, PlayerKind.AI_HARD),
}


class Intent(Enum):
    """Every request the input layer can make, as accepted by ``apply_action``."""

    NEW_GAME = "new_game"
    SELECT = "select"
    PLACE = "place"
    REMOVE = "remove"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    SKIP = "skip"
    EXCHANGE = "exchange"
    SHUFFLE = "shuffle"
    PAUSE = "pause"
    RESUME = "resume"
    SURRENDER = "surrender"


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a request against the engine."""

    success: bool
    reason: str | None = None
    score: int = 0
    words: tuple[str, ...] = ()
    invalid_words: tuple[str, ...] = ()


@dataclass(frozen=True)
class Placement:
    """A tile sitting tentatively on the board this turn.

    ``rack_tile`` is the tile as it was in the rack, so a wildcard goes
    back without its assigned letter.
    """

    row: int
    col: int
    rack_tile: Tile

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)


def _rejected(reason: str) -> ActionResult:
    return ActionResult(success=False, reason=reason)


class ScrabbleGame:
    """Two-player Scrabble rules engine.

    Owns the board, both players and the bag. Driven entirely by discrete
    synchronous calls from an input layer; a renderer polls the read-only
    accessors.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        config: EngineConfig | None = None,
        rng: random.Random | None = None,
        log_dir: Path | None = None,
    ) -> None:
        self._dictionary = dictionary
        self._config = config or EngineConfig()
        self._fixed_rng = rng
        self._seeds = (
            SeedManager(self._config.seed) if self._config.seed is not None else None
        )
        self._log_dir = log_dir
        self._action_schema = load_schema(Path(__file__).parent / "schema.json")

        # State initialised by start_new_game()
        self._rng: random.Random = rng or random.Random()
        self._board = Board()
        self._players: list[Player] = [
            Player("Player 1", rack=Rack(self._config.rack_size)),
            Player("Player 2", rack=Rack(self._config.rack_size)),
        ]
        self._bag = TileBag(self._rng)
        self._state = GameState.MENU
        self._mode = GameMode.HUMAN_VS_HUMAN
        self._current = 0
        self._consecutive_passes = 0
        self._consecutive_failures = 0
        self._pending: list[Placement] = []
        self._selected: int | None = None
        self._game_number = 0
        self._turn_number = 0
        self._winner: int | None = None
        self._is_draw = False
        self._end_reason: str | None = None
        self._turn_log: TurnLogger | None = None

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def board(self) -> Board:
        return self._board

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def players(self) -> tuple[Player, Player]:
        return (self._players[0], self._players[1])

    @property
    def current_player_index(self) -> int:
        return self._current

    @property
    def current_player(self) -> Player:
        return self._players[self._current]

    @property
    def other_player(self) -> Player:
        return self._players[1 - self._current]

    @property
    def tiles_in_bag(self) -> int:
        return len(self._bag)

    @property
    def bag(self) -> TileBag:
        return self._bag

    @property
    def pending_cells(self) -> list[Cell]:
        return [p.cell for p in self._pending]

    @property
    def selected_index(self) -> int | None:
        return self._selected

    @property
    def consecutive_passes(self) -> int:
        return self._consecutive_passes

    @property
    def consecutive_failures(self) -> int:
        return self._consecutive_failures

    @property
    def turn_number(self) -> int:
        return self._turn_number

    @property
    def game_number(self) -> int:
        return self._game_number

    @property
    def is_game_over(self) -> bool:
        return self._state is GameState.GAME_OVER

    @property
    def winner(self) -> Player | None:
        if self._winner is None:
            return None
        return self._players[self._winner]

    @property
    def is_draw(self) -> bool:
        return self._is_draw

    @property
    def end_reason(self) -> str | None:
        return self._end_reason

    @property
    def turn_log(self) -> TurnLogger | None:
        return self._turn_log

    def suggest(self, prefix: str) -> list[str]:
        return self._dictionary.suggest(prefix)

    def rack_suggestions(self, prefix: str = "") -> list[str]:
        """Dictionary words starting with ``prefix`` the current rack can spell alone."""
        rack = self.current_player.rack
        candidates = self._dictionary.suggest(prefix, limit=len(self._dictionary))
        playable = [w for w in candidates if rack.can_form(w)]
        return playable[:self._dictionary.suggestion_limit]

    def get_state_snapshot(self) -> dict:
        """Serializable view of the game for renderers and logs."""
        return {
            "state": self._state.value,
            "mode": self._mode.value,
            "game_number": self._game_number,
            "turn_number": self._turn_number,
            "current_player": self._current,
            "players": [
                {
                    "name": p.name,
                    "kind": p.kind.value,
                    "score": p.score,
                    "rack": p.rack.letters(),
                }
                for p in self._players
            ],
            "tiles_in_bag": len(self._bag),
            "pending_cells": [list(c) for c in self.pending_cells],
            "consecutive_passes": self._consecutive_passes,
            "consecutive_failures": self._consecutive_failures,
            "winner": self.winner.name if self.winner else None,
            "is_draw": self._is_draw,
            "end_reason": self._end_reason,
        }

    # ------------------------------------------------------------------
    # Game setup
    # ------------------------------------------------------------------

    def start_new_game(
        self,
        mode: GameMode = GameMode.HUMAN_VS_HUMAN,
        name1: str = "Player 1",
        name2: str = "Computer",
    ) -> ActionResult:
        """Deal a fresh game. Allowed from any state."""
        self._game_number += 1
        self._mode = mode
        self._rng = self._rng_for_game()

        kind1, kind2 = _MODE_KINDS[mode]
        self._players = [
            Player(name1, kind=kind1, rack=Rack(self._config.rack_size)),
            Player(name2, kind=kind2, rack=Rack(self._config.rack_size)),
        ]
        self._board.clear()
        self._bag = TileBag.standard(self._rng)
        self._pending = []
        self._selected = None
        self._current = 0
        self._consecutive_passes = 0
        self._consecutive_failures = 0
        self._turn_number = 0
        self._winner = None
        self._is_draw = False
        self._end_reason = None

        self._refill_racks(shuffle=True)
        self._state = GameState.PLAYING

        if self._log_dir is not None:
            game_id = f"{mode.value}-{self._game_number}-{uuid.uuid4().hex[:8]}"
            self._turn_log = TurnLogger(self._log_dir, game_id)

        logger.info(
            "New game %d (%s): %s vs %s",
            self._game_number, mode.value, name1, name2,
        )
        return ActionResult(success=True)

    def _rng_for_game(self) -> random.Random:
        if self._fixed_rng is not None:
            return self._fixed_rng
        if self._seeds is not None:
            return self._seeds.rng_for_game(self._mode.value, self._game_number)
        return random.Random()

    # ------------------------------------------------------------------
    # Tentative placement
    # ------------------------------------------------------------------

    def select_tile(self, index: int) -> ActionResult:
        if self._state not in (GameState.PLAYING, GameState.PLACING_TILES):
            return _rejected(f"Cannot select tiles while {self._state.value}.")
        if self.current_player.rack.get(index) is None:
            return _rejected(f"No tile at rack index {index}.")
        self._selected = index
        return ActionResult(success=True)

    def request_placement(
        self,
        row: int,
        col: int,
        rack_index: int | None = None,
        letter: str | None = None,
    ) -> ActionResult:
        """Move a rack tile onto (row, col) tentatively.

        Uses ``rack_index``, else the selected tile, else the first tile.
        Wildcards need ``letter``. A rejected request changes nothing.
        """
        if self._state not in (GameState.PLAYING, GameState.PLACING_TILES):
            return _rejected(f"Cannot place tiles while {self._state.value}.")

        index = rack_index
        if index is None:
            index = self._selected if self._selected is not None else 0
        rack = self.current_player.rack
        tile = rack.get(index)
        if tile is None:
            return _rejected(f"No tile at rack index {index}.")

        if not in_bounds(row, col):
            return _rejected(f"({row},{col}) is off the board.")
        if self._board.is_occupied(row, col):
            return _rejected(f"({row},{col}) is already occupied.")

        cells = self.pending_cells + [(row, col)]
        if len({r for r, _ in cells}) > 1 and len({c for _, c in cells}) > 1:
            return _rejected("Tiles must be placed in a single row or column.")

        placed = tile
        if tile.is_wildcard:
            if not letter or len(letter) != 1 or letter.upper() not in LETTER_POINTS:
                return _rejected("A blank tile needs a letter A-Z.")
            placed = tile.with_letter(letter)

        if self._state is GameState.PLAYING:
            self._pending = []
            self._state = GameState.PLACING_TILES

        self._board.place_tile(row, col, placed)
        rack.remove(index)
        self._pending.append(Placement(row, col, tile))
        self._selected = None
        logger.debug(
            "%s placed %s at (%d,%d)", self.current_player.name, placed.letter, row, col,
        )
        return ActionResult(success=True)

    def remove_placement(self, row: int, col: int) -> ActionResult:
        """Take one tentative tile back to the rack."""
        if self._state is not GameState.PLACING_TILES:
            return _rejected("No tiles are being placed.")
        for p in self._pending:
            if p.cell == (row, col):
                break
        else:
            return _rejected(f"No tile placed this turn at ({row},{col}).")

        self._board.remove_tile(row, col)
        self.current_player.rack.add(p.rack_tile)
        self._pending.remove(p)
        if not self._pending:
            self._state = GameState.PLAYING
        return ActionResult(success=True)

    def cancel_word(self) -> ActionResult:
        """Return every tentative tile to the rack. No validation, no penalty."""
        if self._state is not GameState.PLACING_TILES:
            return _rejected("No tiles are being placed.")
        self._rollback()
        self._state = GameState.PLAYING
        logger.debug("%s cancelled their word", self.current_player.name)
        return ActionResult(success=True)

    def shuffle_rack(self) -> ActionResult:
        if self._state not in (GameState.PLAYING, GameState.PLACING_TILES):
            return _rejected(f"Cannot shuffle while {self._state.value}.")
        self.current_player.rack.shuffle(self._rng)
        self._selected = None
        return ActionResult(success=True)

    # ------------------------------------------------------------------
    # Confirm
    # ------------------------------------------------------------------

    def confirm_word(self) -> ActionResult:
        """Validate and score the tentative tiles, or roll them back."""
        if self._state is not GameState.PLACING_TILES or not self._pending:
            return _rejected("No tiles have been placed.")

        self._state = GameState.VALIDATING_WORD
        cells = self.pending_cells

        if not self._board.is_valid_cells(cells, pending=cells):
            self._state = GameState.PLACING_TILES
            if self._board.tile_count() == len(cells):
                return _rejected("First move must cover the center square (7,7).")
            return _rejected("Tiles must connect to tiles already on the board.")

        words = find_words(self._board, cells)
        if not primary_covers(words, cells):
            self._state = GameState.PLACING_TILES
            return _rejected("Tiles must form one unbroken line.")

        invalid = [w.word for w in words if not self._dictionary.is_valid_word(w.word)]
        if not words or invalid:
            return self._reject_move(words, invalid)
        return self._commit_move(words)

    def _commit_move(self, words: list[WordInfo]) -> ActionResult:
        player = self.current_player
        rack_before = player.rack.letters() + "".join(
            p.rack_tile.letter for p in self._pending
        )

        breakdown = [score_breakdown(self._board, w) for w in words]
        points = sum(s.total for s in breakdown)
        player.add_score(points)

        self._pending = []
        self._refill_racks(shuffle=False)
        self._consecutive_passes = 0
        self._consecutive_failures = 0

        result = ActionResult(
            success=True,
            score=points,
            words=tuple(w.word for w in words),
        )
        logger.info(
            "%s played %s for %d points",
            player.name, ", ".join(result.words), points,
        )
        self._log_turn("play", result, player, rack_before)

        self._switch_turn()
        self._state = GameState.PLAYING
        if self._bag_exhausted():
            self._finish("out_of_tiles")
        return result

    def _reject_move(self, words: list[WordInfo], invalid: list[str]) -> ActionResult:
        player = self.current_player
        self._rollback()
        self._consecutive_failures += 1

        if invalid:
            reason = "invalid_word: " + ", ".join(f"'{w}'" for w in invalid)
        else:
            reason = "No word of two or more letters formed."
        result = ActionResult(
            success=False,
            reason=reason,
            words=tuple(w.word for w in words),
            invalid_words=tuple(invalid),
        )
        logger.info(
            "%s move rejected (%d/%d): %s",
            player.name, self._consecutive_failures,
            self._config.max_consecutive_failures, reason,
        )
        self._log_turn("play", result, player, player.rack.letters())

        self._state = GameState.PLAYING
        if self._consecutive_failures >= self._config.max_consecutive_failures:
            self._end_with_award(
                1 - self._current, self._config.failure_bonus, "failure_limit",
            )
        return result

    def _rollback(self) -> None:
        rack = self.current_player.rack
        for p in self._pending:
            self._board.remove_tile(p.row, p.col)
            rack.add(p.rack_tile)
        self._pending = []
        self._selected = None

    # ------------------------------------------------------------------
    # Pass / exchange
    # ------------------------------------------------------------------

    def skip_turn(self) -> ActionResult:
        if self._state is not GameState.PLAYING:
            return _rejected(f"Cannot skip while {self._state.value}.")

        player = self.current_player
        self._consecutive_passes += 1
        result = ActionResult(success=True)
        self._log_turn("pass", result, player, player.rack.letters())

        if self._consecutive_passes >= self._config.max_consecutive_passes:
            self._finish("pass_limit")
            return result

        self._refill_racks(shuffle=True)
        self._switch_turn()
        return result

    def exchange_tiles(self, indices: list[int]) -> ActionResult:
        """Swap the rack tiles at ``indices`` for fresh ones. All or nothing."""
        if self._state is not GameState.PLAYING:
            return _rejected(f"Cannot exchange while {self._state.value}.")
        if not indices:
            return _rejected("Must specify tiles to exchange.")
        if len(set(indices)) != len(indices):
            return _rejected("Each rack tile can only be exchanged once.")

        player = self.current_player
        rack = player.rack
        for i in indices:
            if rack.get(i) is None:
                return _rejected(f"No tile at rack index {i}.")
        if len(self._bag) < len(indices):
            return _rejected(
                f"Exchange needs {len(indices)} tiles in the bag "
                f"(only {len(self._bag)} remain)."
            )

        rack_before = rack.letters()
        returned = rack.remove_many(list(indices))
        self.draw_tiles_for_player(player, len(returned))
        self._bag.put_back(returned)
        self._consecutive_passes = 0

        result = ActionResult(success=True)
        logger.debug("%s exchanged %d tiles", player.name, len(returned))
        self._log_turn("exchange", result, player, rack_before)
        self._switch_turn()
        return result

    # ------------------------------------------------------------------
    # Pause / surrender
    # ------------------------------------------------------------------

    def pause(self) -> ActionResult:
        if self._state is not GameState.PLAYING:
            return _rejected(f"Cannot pause while {self._state.value}.")
        self._state = GameState.PAUSED
        return ActionResult(success=True)

    def resume(self) -> ActionResult:
        if self._state is not GameState.PAUSED:
            return _rejected("Game is not paused.")
        self._state = GameState.PLAYING
        return ActionResult(success=True)

    def surrender(self) -> ActionResult:
        """Concede from the pause screen. The opponent takes the surrender bonus."""
        if self._state is not GameState.PAUSED:
            return _rejected("Pause the game before surrendering.")
        logger.info("%s surrendered", self.current_player.name)
        self._end_with_award(
            1 - self._current, self._config.surrender_bonus, "surrender",
        )
        return ActionResult(success=True)

    # ------------------------------------------------------------------
    # Single dispatch
    # ------------------------------------------------------------------

    def apply_action(self, action: dict) -> ActionResult:
        """Route an action dict (see schema.json) to the matching operation."""
        error = schema_error(action, self._action_schema)
        if error is not None:
            return _rejected(error)

        intent = Intent(action["action"])
        if intent is Intent.NEW_GAME:
            return self.start_new_game(
                GameMode(action.get("mode", GameMode.HUMAN_VS_HUMAN.value)),
                action.get("name1", "Player 1"),
                action.get("name2", "Computer"),
            )
        if intent is Intent.SELECT:
            return self.select_tile(action["index"])
        if intent is Intent.PLACE:
            return self.request_placement(
                action["row"], action["col"],
                action.get("rack_index"), action.get("letter"),
            )
        if intent is Intent.REMOVE:
            return self.remove_placement(action["row"], action["col"])
        if intent is Intent.CONFIRM:
            return self.confirm_word()
        if intent is Intent.CANCEL:
            return self.cancel_word()
        if intent is Intent.SKIP:
            return self.skip_turn()
        if intent is Intent.EXCHANGE:
            return self.exchange_tiles(action["indices"])
        if intent is Intent.SHUFFLE:
            return self.shuffle_rack()
        if intent is Intent.PAUSE:
            return self.pause()
        if intent is Intent.RESUME:
            return self.resume()
        return self.surrender()

    # ------------------------------------------------------------------
    # Bag / racks
    # ------------------------------------------------------------------

    def draw_tiles_for_player(self, player: Player, count: int) -> bool:
        """Draw up to ``count`` tiles. True only if all ``count`` were drawn."""
        room = player.rack.capacity - len(player.rack)
        drawn = self._bag.draw(min(count, room))
        for tile in drawn:
            player.rack.add(tile)
        return len(drawn) == count

    def _refill_racks(self, shuffle: bool) -> None:
        for p in self._players:
            self.draw_tiles_for_player(p, p.rack.capacity - len(p.rack))
            if shuffle:
                p.rack.shuffle(self._rng)

    def _switch_turn(self) -> None:
        self._current = 1 - self._current
        self._selected = None
        self._consecutive_failures = 0
        self.current_player.rack.shuffle(self._rng)
        logger.debug("%s to play; rack shuffled", self.current_player.name)

    # ------------------------------------------------------------------
    # End of game
    # ------------------------------------------------------------------

    def _bag_exhausted(self) -> bool:
        return self._bag.is_empty() and any(len(p.rack) == 0 for p in self._players)

    def _finish(self, reason: str) -> None:
        """Normal end: rack penalties, going-out bonus, then the winner."""
        values = [p.rack.value for p in self._players]
        for p, value in zip(self._players, values):
            p.subtract_score(value, clamp=False)

        empty = [i for i, p in enumerate(self._players) if len(p.rack) == 0]
        if len(empty) == 1:
            went_out = empty[0]
            self._players[went_out].add_score(values[1 - went_out])

        self._decide_winner()
        self._game_over(reason)

    def _decide_winner(self) -> None:
        a, b = self._players
        bonus = self._config.tiebreak_bonus
        if a.score != b.score:
            self._winner = 0 if a.score > b.score else 1
        elif len(a.rack) != len(b.rack):
            self._winner = 0 if len(a.rack) < len(b.rack) else 1
            self._players[self._winner].add_score(bonus)
        elif a.rack.value != b.rack.value:
            self._winner = 0 if a.rack.value < b.rack.value else 1
            self._players[self._winner].add_score(bonus)
        else:
            self._winner = None
            self._is_draw = True

    def _end_with_award(self, winner: int, bonus: int, reason: str) -> None:
        self._players[winner].add_score(bonus)
        self._winner = winner
        self._game_over(reason)

    def _game_over(self, reason: str) -> None:
        self._state = GameState.GAME_OVER
        self._end_reason = reason
        self._pending = []
        self._selected = None

        scores = {p.name: p.score for p in self._players}
        if self._is_draw:
            logger.info("Game over (%s): draw %s", reason, scores)
        else:
            logger.info(
                "Game over (%s): %s wins %s", reason, self.winner.name, scores,
            )
        if self._turn_log is not None:
            self._turn_log.finalize_game(
                scores,
                self.winner.name if self.winner else None,
                reason,
                extra={"turns": self._turn_number, "tiles_in_bag": len(self._bag)},
            )

    # ------------------------------------------------------------------
    # Turn log
    # ------------------------------------------------------------------

    def _log_turn(
        self, action: str, result: ActionResult, player: Player, rack_before: str,
    ) -> None:
        self._turn_number += 1
        if self._turn_log is None:
            return
        self._turn_log.log_turn(TurnRecord(
            turn_number=self._turn_number,
            player=player.name,
            action=action,
            success=result.success,
            reason=result.reason,
            words=list(result.words),
            invalid_words=list(result.invalid_words),
            points=result.score,
            scores={p.name: p.score for p in self._players},
            tiles_in_bag=len(self._bag),
            rack_before=rack_before,
            rack_after=player.rack.letters(),
            consecutive_passes=self._consecutive_passes,
            consecutive_failures=self._consecutive_failures,
        ))
