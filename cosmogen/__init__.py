"""Deterministic procedural generator for star systems and their populations."""

from cosmogen.config import GenerationConfig, StylePreset, random_seed, style_config
from cosmogen.domain import PresetRegistry, default_registry
from cosmogen.errors import (
    ConfigValidationError,
    InternalInvariantViolation,
    UnknownPresetWarning,
)
from cosmogen.generation import (
    GenerationResult,
    GenerationStats,
    generate,
    generate_batch,
    generate_system,
)

__all__ = [
    "ConfigValidationError",
    "GenerationConfig",
    "GenerationResult",
    "GenerationStats",
    "InternalInvariantViolation",
    "PresetRegistry",
    "StylePreset",
    "UnknownPresetWarning",
    "default_registry",
    "generate",
    "generate_batch",
    "generate_system",
    "random_seed",
    "style_config",
]
