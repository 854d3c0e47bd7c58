from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QEasingCurve, QPropertyAnimation, Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QGraphicsOpacityEffect,
    QHBoxLayout,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from bullseye.core.interaction import InteractionController, Mode
from bullseye.ui.widgets import (
    BigNumberText,
    HitMeButton,
    InstructionText,
    NumberView,
    PointsPanel,
    RoundedIconButton,
    SliderView,
)

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """The single game screen.

    Top bar holds the restart button, the middle shows the target and either
    HIT ME with the slider (selecting) or the points panel (revealed), and
    the bottom bar shows score and round. Every widget is refreshed from the
    controller after each transition.
    """

    def __init__(self, controller: InteractionController, palette: type) -> None:
        super().__init__()
        self._controller = controller
        self._palette = palette

        self._restart_button: Optional[RoundedIconButton] = None
        self._target_label: Optional[BigNumberText] = None
        self._hit_me_button: Optional[HitMeButton] = None
        self._points_panel: Optional[PointsPanel] = None
        self._slider_view: Optional[SliderView] = None
        self._score_view: Optional[NumberView] = None
        self._round_view: Optional[NumberView] = None
        self._action_effect: Optional[QGraphicsOpacityEffect] = None
        self._action_anim: Optional[QPropertyAnimation] = None

        self.setWindowTitle("Bullseye")
        self.resize(568, 420)
        self._build_ui()
        self._controller.subscribe(self._on_state_changed)
        self._render()

    def _build_ui(self) -> None:
        p = self._palette
        central = QWidget()
        central.setObjectName("gameBackground")
        central.setStyleSheet(
            f"""
            QWidget#gameBackground {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {p.BG_TOP}, stop:1 {p.BG_BOTTOM});
            }}
            """
        )
        root = QVBoxLayout(central)
        root.setContentsMargins(16, 16, 16, 16)
        root.setSpacing(8)

        # ---- Top bar: restart ----
        top_bar = QHBoxLayout()
        self._restart_button = RoundedIconButton("↺", p)
        self._restart_button.setToolTip("Restart")
        self._restart_button.clicked.connect(self._on_restart)
        top_bar.addWidget(self._restart_button)
        top_bar.addStretch(1)
        root.addLayout(top_bar)

        root.addStretch(1)

        # ---- Instructions + target ----
        root.addWidget(InstructionText("🎯🎯🎯\nPUT THE BULLSEYE AS CLOSE AS YOU CAN TO", p))
        self._target_label = BigNumberText("", p)
        root.addWidget(self._target_label)

        # ---- HIT ME / points panel share one slot ----
        action_area = QWidget()
        action_layout = QVBoxLayout(action_area)
        action_layout.setContentsMargins(0, 0, 0, 0)
        self._hit_me_button = HitMeButton(p)
        self._hit_me_button.clicked.connect(self._on_hit_me)
        action_layout.addWidget(self._hit_me_button, 0, Qt.AlignHCenter)
        self._points_panel = PointsPanel(p)
        self._points_panel.start_new_round.connect(self._on_start_new_round)
        action_layout.addWidget(self._points_panel, 0, Qt.AlignHCenter)
        self._action_effect = QGraphicsOpacityEffect(action_area)
        self._action_effect.setOpacity(1.0)
        action_area.setGraphicsEffect(self._action_effect)
        self._action_anim = QPropertyAnimation(self._action_effect, b"opacity", self)
        self._action_anim.setDuration(250)
        self._action_anim.setStartValue(0.0)
        self._action_anim.setEndValue(1.0)
        self._action_anim.setEasingCurve(QEasingCurve.OutCubic)
        root.addWidget(action_area)

        self._slider_view = SliderView(
            minimum=self._controller.game.minimum,
            maximum=self._controller.game.maximum,
            value=self._controller.slider_value,
            palette=p,
        )
        self._slider_view.value_changed.connect(self._on_slider_changed)
        root.addWidget(self._slider_view)

        root.addStretch(1)

        # ---- Bottom bar: score + round ----
        bottom_bar = QHBoxLayout()
        self._score_view = NumberView("SCORE", p)
        self._round_view = NumberView("ROUND", p)
        bottom_bar.addWidget(self._score_view)
        bottom_bar.addStretch(1)
        bottom_bar.addWidget(self._round_view)
        root.addLayout(bottom_bar)

        self.setCentralWidget(central)

    def _on_slider_changed(self, value: float) -> None:
        self._controller.slider_value = value

    def _on_hit_me(self) -> None:
        self._controller.commit_guess()

    def _on_start_new_round(self) -> None:
        self._controller.start_new_round()

    def _on_restart(self) -> None:
        if self._controller.can_restart:
            self._controller.restart()

    def _on_state_changed(self, controller: InteractionController) -> None:
        self._render()
        self._fade_in_action_area()

    def _render(self) -> None:
        """Sync every widget with the controller and game."""
        c = self._controller
        game = c.game
        revealed = c.mode is Mode.REVEALED

        self._target_label.setText(str(game.target))
        self._score_view.set_value(game.score)
        self._round_view.set_value(game.round)
        self._restart_button.setEnabled(c.can_restart)

        self._hit_me_button.setVisible(not revealed)
        self._slider_view.setVisible(not revealed)
        self._points_panel.setVisible(revealed)
        if revealed and c.result is not None:
            self._points_panel.set_result(c.result)

    def _fade_in_action_area(self) -> None:
        if self._action_anim is None:
            return
        self._action_anim.stop()
        self._action_anim.start()

    def closeEvent(self, event: QCloseEvent) -> None:
        game = self._controller.game
        logger.info("Closing after %d round(s), score %d", game.round - 1, game.score)
        super().closeEvent(event)
