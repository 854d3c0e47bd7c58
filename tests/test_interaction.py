"""Tests for bullseye.core.interaction – Selecting / Revealed transitions."""

from __future__ import annotations

import random

import pytest

from bullseye.core.game import Game, RoundResult
from bullseye.core.interaction import (
    InteractionController,
    Mode,
    TransitionError,
    round_half_away,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def game() -> Game:
    g = Game(rng=random.Random(0))
    g.target = 50
    return g


@pytest.fixture()
def controller(game: Game) -> InteractionController:
    return InteractionController(game)


# ---------------------------------------------------------------------------
# round_half_away
# ---------------------------------------------------------------------------

class TestRoundHalfAway:
    @pytest.mark.parametrize(
        "value, expected",
        [(1.0, 1), (49.4, 49), (49.5, 50), (50.5, 51), (99.99, 100), (-2.5, -3), (0.49, 0)],
    )
    def test_values(self, value: float, expected: int):
        assert round_half_away(value) == expected


# ---------------------------------------------------------------------------
# Initial state and slider
# ---------------------------------------------------------------------------

class TestInitialState:
    def test_starts_selecting(self, controller: InteractionController):
        assert controller.mode is Mode.SELECTING

    def test_default_slider_value(self, controller: InteractionController):
        assert controller.slider_value == 50.0

    def test_no_result(self, controller: InteractionController):
        assert controller.result is None

    def test_can_restart(self, controller: InteractionController):
        assert controller.can_restart is True


class TestSlider:
    def test_set_value(self, controller: InteractionController):
        controller.slider_value = 73.25
        assert controller.slider_value == 73.25

    def test_clamped_low(self, controller: InteractionController):
        controller.slider_value = -5
        assert controller.slider_value == 1.0

    def test_clamped_high(self, controller: InteractionController):
        controller.slider_value = 250
        assert controller.slider_value == 100.0

    def test_rounded_guess(self, controller: InteractionController):
        controller.slider_value = 40.5
        assert controller.rounded_guess() == 41


# ---------------------------------------------------------------------------
# commit_guess
# ---------------------------------------------------------------------------

class TestCommitGuess:
    def test_reveals(self, controller: InteractionController):
        controller.commit_guess()
        assert controller.mode is Mode.REVEALED
        assert controller.can_restart is False

    def test_exact_hit(self, controller: InteractionController):
        assert controller.commit_guess() == RoundResult(guess=50, points=100)

    def test_uses_rounded_value_for_display_and_score(self, controller: InteractionController):
        controller.slider_value = 39.6
        result = controller.commit_guess()
        assert result.guess == 40
        assert result.points == 90
        assert controller.result is result

    def test_does_not_touch_slider_or_game(self, controller: InteractionController, game: Game):
        controller.slider_value = 42.3
        controller.commit_guess()
        assert controller.slider_value == 42.3
        assert (game.score, game.round, game.target) == (0, 1, 50)

    def test_twice_raises(self, controller: InteractionController):
        controller.commit_guess()
        with pytest.raises(TransitionError):
            controller.commit_guess()


# ---------------------------------------------------------------------------
# start_new_round
# ---------------------------------------------------------------------------

class TestStartNewRound:
    def test_returns_to_selecting(self, controller: InteractionController):
        controller.commit_guess()
        controller.start_new_round()
        assert controller.mode is Mode.SELECTING
        assert controller.result is None

    def test_scores_exactly_once(self, controller: InteractionController, game: Game):
        controller.slider_value = 40
        controller.commit_guess()
        controller.start_new_round()
        assert game.score == 90
        assert game.round == 2

    def test_uses_points_frozen_at_commit(self, controller: InteractionController, game: Game):
        controller.slider_value = 50
        controller.commit_guess()
        controller.slider_value = 1
        controller.start_new_round()
        assert game.score == 100

    def test_without_commit_raises(self, controller: InteractionController, game: Game):
        with pytest.raises(TransitionError):
            controller.start_new_round()
        assert (game.score, game.round) == (0, 1)

    def test_three_rounds_then_restart(self, game: Game):
        c = InteractionController(game)
        for guess in (40, 30, 20):
            game.target = 50
            c.slider_value = guess
            c.commit_guess()
            c.start_new_round()
        assert game.score == 240
        assert game.round == 4
        c.restart()
        assert game.score == 0
        assert game.round == 1


# ---------------------------------------------------------------------------
# restart
# ---------------------------------------------------------------------------

class TestRestart:
    def test_keeps_mode(self, controller: InteractionController):
        controller.restart()
        assert controller.mode is Mode.SELECTING

    def test_blocked_while_revealed(self, controller: InteractionController, game: Game):
        controller.commit_guess()
        with pytest.raises(TransitionError):
            controller.restart()
        assert controller.mode is Mode.REVEALED


# ---------------------------------------------------------------------------
# Listeners
# ---------------------------------------------------------------------------

class TestListeners:
    def test_notified_on_each_transition(self, controller: InteractionController):
        seen: list[Mode] = []
        controller.subscribe(lambda c: seen.append(c.mode))
        controller.commit_guess()
        controller.start_new_round()
        controller.restart()
        assert seen == [Mode.REVEALED, Mode.SELECTING, Mode.SELECTING]

    def test_not_notified_on_failed_transition(self, controller: InteractionController):
        seen: list[Mode] = []
        controller.subscribe(lambda c: seen.append(c.mode))
        with pytest.raises(TransitionError):
            controller.start_new_round()
        assert seen == []

    def test_slider_changes_are_silent(self, controller: InteractionController):
        seen: list[Mode] = []
        controller.subscribe(lambda c: seen.append(c.mode))
        controller.slider_value = 10
        assert seen == []
