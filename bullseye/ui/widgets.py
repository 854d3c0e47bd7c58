"""Building blocks of the game screen: text styles, number boxes, slider and points panel."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from bullseye.core.game import RoundResult
from bullseye.ui.colors import lighten

# QSlider only holds ints; positions are stored in hundredths.
SLIDER_SCALE = 100


class InstructionText(QLabel):
    """Small bold, letter-spaced, centered caption."""

    def __init__(self, text: str, palette: type, parent: Optional[QWidget] = None) -> None:
        super().__init__(text, parent)
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)
        self.setStyleSheet(
            f"color: {palette.TEXT_PRIMARY}; font-size: 13px; font-weight: 700; letter-spacing: 2px;"
        )


class BigNumberText(QLabel):
    def __init__(self, text: str, palette: type, parent: Optional[QWidget] = None) -> None:
        super().__init__(text, parent)
        self.setAlignment(Qt.AlignCenter)
        self.setStyleSheet(
            f"color: {palette.TEXT_PRIMARY}; font-size: 40px; font-weight: 900; letter-spacing: -1px;"
        )


class BodyText(QLabel):
    def __init__(self, text: str, palette: type, parent: Optional[QWidget] = None) -> None:
        super().__init__(text, parent)
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)
        self.setStyleSheet(f"color: {palette.TEXT_PRIMARY}; font-size: 15px; font-weight: 600;")


class LabelText(QLabel):
    def __init__(self, text: str, palette: type, parent: Optional[QWidget] = None) -> None:
        super().__init__(text, parent)
        self.setAlignment(Qt.AlignCenter)
        self.setStyleSheet(
            f"color: {palette.TEXT_MUTED}; font-size: 11px; font-weight: 700; letter-spacing: 1.5px;"
        )


class RoundedRectTextView(QLabel):
    """Outlined number box used for SCORE and ROUND."""

    def __init__(self, text: str, palette: type, parent: Optional[QWidget] = None) -> None:
        super().__init__(text, parent)
        self.setAlignment(Qt.AlignCenter)
        self.setFixedSize(68, 56)
        self.setStyleSheet(
            f"""
            QLabel {{
                color: {palette.TEXT_PRIMARY};
                border: 2px solid {palette.OUTLINE};
                border-radius: 21px;
                font-size: 18px;
                font-weight: 700;
            }}
            """
        )


class NumberView(QWidget):
    """Caption above a number box."""

    def __init__(self, title: str, palette: type, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(5)
        layout.addWidget(LabelText(title, palette), 0, Qt.AlignHCenter)
        self._value = RoundedRectTextView("0", palette)
        layout.addWidget(self._value, 0, Qt.AlignHCenter)

    def set_value(self, value: int) -> None:
        self._value.setText(str(value))


class RoundedIconButton(QPushButton):
    """Circular outlined button holding a single glyph."""

    def __init__(self, glyph: str, palette: type, parent: Optional[QWidget] = None) -> None:
        super().__init__(glyph, parent)
        self.setFixedSize(56, 56)
        self.setCursor(Qt.PointingHandCursor)
        self.setStyleSheet(
            f"""
            QPushButton {{
                color: {palette.TEXT_PRIMARY};
                background: transparent;
                border: 2px solid {palette.OUTLINE};
                border-radius: 28px;
                font-size: 24px;
            }}
            QPushButton:disabled {{
                color: {palette.OUTLINE};
            }}
            """
        )


class HitMeButton(QPushButton):
    def __init__(self, palette: type, parent: Optional[QWidget] = None) -> None:
        super().__init__("HIT ME", parent)
        self.setCursor(Qt.PointingHandCursor)
        top = lighten(palette.BUTTON, 0.3)
        self.setStyleSheet(
            f"""
            QPushButton {{
                color: {palette.BUTTON_TEXT};
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {top}, stop:1 {palette.BUTTON});
                border: none;
                border-radius: 21px;
                padding: 20px;
                font-size: 18px;
                font-weight: 700;
            }}
            """
        )


class SliderView(QWidget):
    """Slider between its two bound labels, reporting a continuous value."""

    value_changed = Signal(float)

    def __init__(
        self,
        *,
        minimum: int,
        maximum: int,
        value: float,
        palette: type,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)

        low = QLabel(str(minimum))
        high = QLabel(str(maximum))
        for label in (low, high):
            label.setFixedWidth(35)
            label.setAlignment(Qt.AlignCenter)
            label.setStyleSheet(f"color: {palette.TEXT_PRIMARY}; font-weight: 700;")

        self._slider = QSlider(Qt.Horizontal)
        self._slider.setRange(minimum * SLIDER_SCALE, maximum * SLIDER_SCALE)
        self._slider.setValue(int(value * SLIDER_SCALE))
        self._slider.valueChanged.connect(self._on_slider_moved)

        layout.addWidget(low)
        layout.addWidget(self._slider, 1)
        layout.addWidget(high)

    def _on_slider_moved(self, position: int) -> None:
        self.value_changed.emit(position / SLIDER_SCALE)


class PointsPanel(QFrame):
    """Card shown after HIT ME with the rounded guess and the points it earned."""

    start_new_round = Signal()

    def __init__(self, palette: type, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("pointsPanel")
        self.setMaximumWidth(300)
        self.setStyleSheet(
            f"""
            QFrame#pointsPanel {{
                background: {palette.PANEL_BG};
                border-radius: 21px;
            }}
            """
        )
        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(10)
        shadow.setOffset(5, 5)
        shadow.setColor(QColor(0, 0, 0, 70))
        self.setGraphicsEffect(shadow)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        layout.addWidget(InstructionText("THE SLIDER'S VALUE IS", palette))
        self._guess_label = BigNumberText("", palette)
        layout.addWidget(self._guess_label)
        self._points_label = BodyText("", palette)
        layout.addWidget(self._points_label)

        self._button = QPushButton("Start New Round")
        self._button.setCursor(Qt.PointingHandCursor)
        self._button.setStyleSheet(
            f"""
            QPushButton {{
                color: #ffffff;
                background: {palette.ACCENT};
                border: none;
                border-radius: 12px;
                padding: 14px;
                font-weight: 700;
            }}
            """
        )
        self._button.clicked.connect(self.start_new_round.emit)
        layout.addWidget(self._button)

    def set_result(self, result: RoundResult) -> None:
        self._guess_label.setText(str(result.guess))
        self._points_label.setText(f"You scored {result.points} points\n🎉🎉🎉")
