from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

MAX_POINTS = 100


@dataclass(frozen=True)
class RoundResult:
    """Rounded guess and the points it earned, frozen when the guess is committed."""

    guess: int
    points: int


class Game:
    """Target, score and round counter for one play session.

    Points for a guess are ``100 - |target - guess|``. The guess is not
    validated, so a value far outside the range simply scores negative.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        minimum: int = 1,
        maximum: int = 100,
    ) -> None:
        if minimum > maximum:
            raise ValueError(f"Invalid target range: {minimum} > {maximum}")
        self._rng = rng if rng is not None else random.Random()
        self._minimum = minimum
        self._maximum = maximum
        self.target = self._roll_target()
        self.score = 0
        self.round = 1

    @property
    def minimum(self) -> int:
        return self._minimum

    @property
    def maximum(self) -> int:
        return self._maximum

    def points(self, guess: int) -> int:
        """Return the points a guess would earn against the current target."""
        return MAX_POINTS - abs(self.target - guess)

    def start_new_round(self, points: int) -> None:
        """Bank *points*, advance the round counter and pick a new target."""
        self.score += points
        self.round += 1
        self.target = self._roll_target()
        logger.info("Round %d started (score %d)", self.round, self.score)

    def restart(self) -> None:
        """Reset score and round and pick a new target."""
        self.score = 0
        self.round = 1
        self.target = self._roll_target()
        logger.info("Game restarted")

    def _roll_target(self) -> int:
        target = self._rng.randint(self._minimum, self._maximum)
        logger.debug("New target: %d", target)
        return target
