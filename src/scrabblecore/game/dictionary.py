"""Word list oracle: case-insensitive validity checks and prefix suggestions.

Loading never raises: a missing file or junk lines are logged as warnings
and the dictionary simply holds whatever it managed to read. With an empty
vocabulary every lookup is False, so every move fails validation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTION_LIMIT = 50


class Dictionary:
    """Fixed vocabulary of upper-case alphabetic words."""

    def __init__(
        self,
        words: Iterable[str] = (),
        suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> None:
        self._words: set[str] = set()
        self._suggestion_limit = suggestion_limit
        self.add_words(words)

    @classmethod
    def from_file(
        cls, path: str | Path, suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT
    ) -> Dictionary:
        d = cls(suggestion_limit=suggestion_limit)
        d.load(path)
        return d

    def load(self, path: str | Path) -> int:
        """Read a newline-delimited word list. Returns the number of words added."""
        path = Path(path)
        try:
            # undecodable bytes become U+FFFD and the line is skipped below
            with open(path, encoding="utf-8", errors="replace") as f:
                lines = f.read().splitlines()
        except OSError as exc:
            logger.warning("Could not load dictionary file %s: %s", path, exc)
            return 0

        before = len(self._words)
        skipped = 0
        for line in lines:
            word = line.strip()
            if not word:
                continue
            if not (word.isascii() and word.isalpha()):
                skipped += 1
                continue
            self._words.add(word.upper())

        added = len(self._words) - before
        if skipped:
            logger.warning(
                "Skipped %d non-alphabetic entries in %s", skipped, path
            )
        if not self._words:
            logger.warning("Dictionary %s is empty; every word will be rejected", path)
        logger.info("Loaded %d words from %s", added, path)
        return added

    @property
    def suggestion_limit(self) -> int:
        return self._suggestion_limit

    def add_words(self, words: Iterable[str]) -> None:
        for w in words:
            w = w.strip()
            if w and w.isascii() and w.isalpha():
                self._words.add(w.upper())

    def is_valid_word(self, word: str) -> bool:
        if not word:
            return False
        return word.upper() in self._words

    def suggest(self, prefix: str, limit: int | None = None) -> list[str]:
        """Words starting with ``prefix``, shortest first then alphabetical."""
        limit = self._suggestion_limit if limit is None else limit
        prefix = prefix.upper()
        matches = sorted(
            (w for w in self._words if w.startswith(prefix)),
            key=lambda w: (len(w), w),
        )
        return matches[:limit]

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid_word(word)

    def __len__(self) -> int:
        return len(self._words)
