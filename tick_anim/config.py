"""Stage configuration and YAML loading."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from tick_anim.types import ConfigError


@dataclass
class StageConfig:
    """Canvas and render settings for the showcase."""
    width: int = 800
    height: int = 600
    background: str = "#176BAA"
    fps: int = 60
    square_size: int = 100


def load_config(config_path: Path | str) -> StageConfig:
    """Load a StageConfig from YAML; missing keys keep their defaults."""
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path}: expected a mapping at top level")

    defaults = StageConfig()
    config = StageConfig(
        width=int(data.get("width", defaults.width)),
        height=int(data.get("height", defaults.height)),
        background=str(data.get("background", defaults.background)),
        fps=int(data.get("fps", defaults.fps)),
        square_size=int(data.get("square_size", defaults.square_size)),
    )

    for name in ("width", "height", "fps", "square_size"):
        if getattr(config, name) <= 0:
            raise ConfigError(f"{config_path}: {name} must be positive")

    return config
