"""TurnLogger: JSONL turn log.

One logger per game. Writes one JSONL line per resolved turn plus a game
summary as the final line. All entries include schema version and game ID.
"""

import json
from dataclasses import dataclass, asdict, field
from datetime import datetime, timezone
from pathlib import Path

import scrabblecore

_SCHEMA_VERSION = "1.0.0"


@dataclass
class TurnRecord:
    """One resolved turn."""

    turn_number: int
    player: str
    action: str
    success: bool
    reason: str | None = None
    words: list[str] = field(default_factory=list)
    invalid_words: list[str] = field(default_factory=list)
    points: int = 0
    scores: dict[str, int] = field(default_factory=dict)
    tiles_in_bag: int = 0
    rack_before: str = ""
    rack_after: str = ""
    consecutive_passes: int = 0
    consecutive_failures: int = 0


class TurnLogger:
    """Writes JSONL turn records for a single game."""

    def __init__(self, output_dir: Path, game_id: str):
        self._output_dir = Path(output_dir)
        self._game_id = game_id
        self._output_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._output_dir / f"{game_id}.jsonl"

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def game_id(self) -> str:
        return self._game_id

    def log_turn(self, record: TurnRecord) -> None:
        entry = asdict(record)
        entry["schema_version"] = _SCHEMA_VERSION
        entry["game_id"] = self._game_id
        entry["timestamp"] = datetime.now(timezone.utc).isoformat()
        self._append(entry)

    def finalize_game(
        self,
        scores: dict[str, int],
        winner: str | None,
        reason: str,
        extra: dict | None = None,
    ) -> None:
        entry = {
            "schema_version": _SCHEMA_VERSION,
            "record_type": "game_summary",
            "game_id": self._game_id,
            "final_scores": scores,
            "winner": winner,
            "end_reason": reason,
            "engine_version": scrabblecore.__version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        if extra:
            entry.update(extra)
        self._append(entry)

    def _append(self, entry: dict) -> None:
        with open(self._file_path, "a") as f:
            f.write(json.dumps(entry, default=str) + "\n")
