"""Theme palettes and color utilities for the UI."""


class LightColors:
    """Daytime palette: pale sky background, blue HIT ME button."""

    BG_TOP = "#f3f8fb"
    BG_BOTTOM = "#d9e8f5"

    PANEL_BG = "#ffffff"

    BUTTON = "#1f7ae0"
    BUTTON_TEXT = "#ffffff"
    ACCENT = "#2e9e4f"

    TEXT_PRIMARY = "#13315c"
    TEXT_MUTED = "#5b6b7c"

    OUTLINE = "#c4ccd4"


class DarkColors:
    """Night palette."""

    BG_TOP = "#1c2431"
    BG_BOTTOM = "#0e131b"

    PANEL_BG = "#2a3341"

    BUTTON = "#3b8ff0"
    BUTTON_TEXT = "#ffffff"
    ACCENT = "#3fbf67"

    TEXT_PRIMARY = "#f1f4f8"
    TEXT_MUTED = "#9aa8b8"

    OUTLINE = "#4a5566"


def palette_for(theme: str) -> type:
    """Return the palette class for ``"light"`` or ``"dark"`` (anything else -> light)."""
    return DarkColors if theme == "dark" else LightColors


def lighten(color: str, amount: float) -> str:
    """Move a #RRGGBB color *amount* (0..1) of the way towards white."""
    amount = max(0.0, min(1.0, amount))
    channels = bytes.fromhex(color.strip().lstrip("#"))
    return "#" + "".join(f"{round(c + (255 - c) * amount):02X}" for c in channels)
