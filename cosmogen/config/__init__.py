"""Configuration layer: constants, the generation config and style presets."""

from cosmogen.config.constants import (
    DEFAULT_TOPOLOGY_PRESET,
    MAX_BELTS_PER_SYSTEM,
    MAX_DEPTH_LIMIT,
    MAX_REPEAT_COUNT,
    MAX_STARS_PER_SYSTEM,
    MAX_SYSTEMS,
)
from cosmogen.config.styles import random_seed, style_config
from cosmogen.config.types import GenerationConfig, StylePreset

__all__ = [
    "DEFAULT_TOPOLOGY_PRESET",
    "GenerationConfig",
    "MAX_BELTS_PER_SYSTEM",
    "MAX_DEPTH_LIMIT",
    "MAX_REPEAT_COUNT",
    "MAX_STARS_PER_SYSTEM",
    "MAX_SYSTEMS",
    "StylePreset",
    "random_seed",
    "style_config",
]
