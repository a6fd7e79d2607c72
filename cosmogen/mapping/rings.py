"""Planetary ring mapper."""

from __future__ import annotations

from dataclasses import dataclass

from cosmogen.config.types import RingStylePreset
from cosmogen.mapping.common import Span, clamp

# style -> (probability multiplier, width multiplier)
RING_STYLE_TABLE: dict[RingStylePreset, tuple[float, float]] = {
    RingStylePreset.NONE: (1.0, 1.0),
    RingStylePreset.RARE: (0.4, 0.8),
    RingStylePreset.SOLAR_LIKE: (1.0, 1.0),
    RingStylePreset.DRAMATIC: (1.5, 1.6),
}

RING_PALETTES: dict[RingStylePreset, tuple[str, ...]] = {
    RingStylePreset.NONE: ("#C8B89A", "#D9CBB0", "#A89C88"),
    RingStylePreset.RARE: ("#B0A898", "#C8C0B0"),
    RingStylePreset.SOLAR_LIKE: ("#C8B89A", "#D9CBB0", "#E6DCC8", "#A89C88"),
    RingStylePreset.DRAMATIC: ("#E8C39E", "#9FC5E8", "#D5A6BD", "#F6E3B4", "#B4A7D6"),
}


@dataclass(frozen=True)
class RingSettings:
    enable_planetary_rings: bool
    ring_frequency: float
    ring_prominence: float
    ring_style_preset: RingStylePreset


@dataclass(frozen=True)
class RingParams:
    enabled: bool
    probability: float
    inner_multiplier: Span
    outer_multiplier: Span
    thickness: Span
    opacity: Span
    albedo: Span
    density: Span
    warp_factor: Span
    palette: tuple[str, ...]


def map_rings(settings: RingSettings) -> RingParams:
    prob_mult, width_mult = RING_STYLE_TABLE[settings.ring_style_preset]
    p = settings.ring_prominence
    return RingParams(
        enabled=settings.enable_planetary_rings and settings.ring_frequency > 0,
        probability=clamp(settings.ring_frequency * prob_mult, 0.0, 1.0),
        inner_multiplier=Span(1.2, 1.5),
        outer_multiplier=Span(1.8 + 0.6 * p, (2.2 + 1.8 * p) * width_mult),
        thickness=Span(0.02, 0.05 + 0.1 * p),
        opacity=Span(0.3 + 0.3 * p, 0.6 + 0.4 * p),
        albedo=Span(0.4, 0.9),
        density=Span(0.3 + 0.2 * p, 0.7 + 0.3 * p),
        warp_factor=Span(0.0, 0.05 * width_mult),
        palette=RING_PALETTES[settings.ring_style_preset],
    )
