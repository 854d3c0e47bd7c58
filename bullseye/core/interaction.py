"""Selecting / Revealed state machine sitting between the slider and the game."""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Callable, List, Optional

from bullseye.core.game import Game, RoundResult

logger = logging.getLogger(__name__)


class Mode(Enum):
    SELECTING = "selecting"
    REVEALED = "revealed"


class TransitionError(RuntimeError):
    """Raised when an action is invoked from a mode that does not offer it."""


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


Listener = Callable[["InteractionController"], None]


class InteractionController:
    """Decides whether the slider/HIT ME pair or the points panel is showing.

    The slider value belongs to the UI; the controller only reads it when a
    guess is committed. Views subscribe to be told after every transition.
    """

    def __init__(
        self,
        game: Game,
        default_value: float = 50.0,
        minimum: float = 1.0,
        maximum: float = 100.0,
    ) -> None:
        self._game = game
        self._minimum = float(minimum)
        self._maximum = float(maximum)
        self._slider_value = self._clamp(default_value)
        self._mode = Mode.SELECTING
        self._result: Optional[RoundResult] = None
        self._listeners: List[Listener] = []

    @property
    def game(self) -> Game:
        return self._game

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def result(self) -> Optional[RoundResult]:
        """Guess and points of the revealed round, or None while selecting."""
        return self._result

    @property
    def slider_value(self) -> float:
        return self._slider_value

    @slider_value.setter
    def slider_value(self, value: float) -> None:
        self._slider_value = self._clamp(value)

    @property
    def can_restart(self) -> bool:
        return self._mode is Mode.SELECTING

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def rounded_guess(self) -> int:
        """Slider value as the whole number that is both shown and scored."""
        return round_half_away(self._slider_value)

    def commit_guess(self) -> RoundResult:
        """Reveal the points for the current slider position."""
        if self._mode is not Mode.SELECTING:
            raise TransitionError("A guess has already been committed this round")
        guess = self.rounded_guess()
        self._result = RoundResult(guess=guess, points=self._game.points(guess))
        self._mode = Mode.REVEALED
        logger.debug("Committed guess %d for %d points", guess, self._result.points)
        self._notify()
        return self._result

    def start_new_round(self) -> None:
        """Bank the revealed points and return to selecting."""
        if self._mode is not Mode.REVEALED or self._result is None:
            raise TransitionError("No committed guess to score")
        points = self._result.points
        self._result = None
        self._mode = Mode.SELECTING
        self._game.start_new_round(points)
        self._notify()

    def restart(self) -> None:
        """Reset the game. Only offered while selecting."""
        if not self.can_restart:
            raise TransitionError("Cannot restart while points are being shown")
        self._game.restart()
        self._notify()

    def _clamp(self, value: float) -> float:
        return max(self._minimum, min(self._maximum, float(value)))

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
