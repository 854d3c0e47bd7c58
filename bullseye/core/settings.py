from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml


@dataclass(frozen=True)
class Settings:
    minimum: int = 1
    maximum: int = 100
    default: float = 50.0


def default_settings_path() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "settings.yaml"


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read the slider range from YAML."""
    settings_path = path or default_settings_path()
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    if not raw or not isinstance(raw, dict):
        raise ValueError(f"{settings_path.name}: expected YAML mapping with 'slider'")
    slider = raw.get("slider")
    if not isinstance(slider, dict):
        raise ValueError(f"{settings_path.name}: missing or invalid 'slider'")

    values = {}
    for name in ("minimum", "maximum", "default"):
        value = slider.get(name)
        # bool is an int subclass; reject `minimum: yes`
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{settings_path.name}: 'slider.{name}' must be a number")
        values[name] = value

    minimum, maximum = values["minimum"], values["maximum"]
    if int(minimum) != minimum or int(maximum) != maximum:
        raise ValueError(f"{settings_path.name}: slider bounds must be whole numbers")
    if minimum >= maximum:
        raise ValueError(f"{settings_path.name}: 'slider.minimum' must be below 'slider.maximum'")
    if not minimum <= values["default"] <= maximum:
        raise ValueError(f"{settings_path.name}: 'slider.default' is outside the slider range")

    return Settings(minimum=int(minimum), maximum=int(maximum), default=float(values["default"]))
