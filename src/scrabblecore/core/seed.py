"""Per-game RNG derivation from one session seed.

Game seeds come from HMAC-SHA256 over (mode, game number), so starting an
extra game, or switching mode, leaves the seeds of every other game alone.
"""

import hashlib
import hmac
import random


class SeedManager:
    def __init__(self, session_seed: int):
        self._session_seed = session_seed
        self._key = session_seed.to_bytes(8, byteorder="big", signed=True)

    @property
    def session_seed(self) -> int:
        return self._session_seed

    def get_game_seed(self, mode: str, game_number: int) -> int:
        """Same (mode, game_number) always yields the same 64-bit seed."""
        msg = f"{mode}:{game_number}".encode("utf-8")
        digest = hmac.new(self._key, msg, hashlib.sha256).digest()
        return int.from_bytes(digest[:8], byteorder="big")

    def get_rng(self, game_seed: int) -> random.Random:
        """Fresh Random for one game. The module-level RNG is never touched."""
        return random.Random(game_seed)

    def rng_for_game(self, mode: str, game_number: int) -> random.Random:
        return self.get_rng(self.get_game_seed(mode, game_number))
