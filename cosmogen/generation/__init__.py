"""Generation layer: per-system assembly, universe populations and stats."""

from cosmogen.generation.pipeline import (
    GenerationResult,
    generate,
    generate_batch,
    generate_system,
)
from cosmogen.generation.stats import GenerationStats, compute_stats, mass_histogram
from cosmogen.generation.validate import check_integrity

__all__ = [
    "GenerationResult",
    "GenerationStats",
    "check_integrity",
    "compute_stats",
    "generate",
    "generate_batch",
    "generate_system",
    "mass_histogram",
]
