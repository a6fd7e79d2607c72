"""Protoplanetary disk mapper."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cosmogen.config.types import DiskStyleBias, SmallBodyDetail
from cosmogen.mapping.common import CountRange, Span
from cosmogen.mapping.small_bodies import DETAIL_MULTIPLIERS

DISK_STYLES: tuple[str, ...] = ("thin", "moderate", "thick", "extreme")

STYLE_WEIGHTS: dict[DiskStyleBias, tuple[float, float, float, float]] = {
    DiskStyleBias.MOSTLY_THIN: (0.6, 0.3, 0.1, 0.0),
    DiskStyleBias.BALANCED: (0.3, 0.4, 0.25, 0.05),
    DiskStyleBias.MOSTLY_THICK: (0.1, 0.3, 0.5, 0.1),
    DiskStyleBias.EXTREME_SHOWCASE: (0.0, 0.2, 0.3, 0.5),
}

STYLE_THICKNESS: dict[str, Span] = {
    "thin": Span(0.05, 0.15),
    "moderate": Span(0.15, 0.35),
    "thick": Span(0.35, 0.7),
    "extreme": Span(0.7, 1.2),
}

DISK_PALETTE: tuple[tuple[str, str], ...] = (
    ("#D2691E", "#FFD39B"),
    ("#CD853F", "#FFE4B5"),
    ("#B8860B", "#FFF8DC"),
    ("#A0522D", "#F4A460"),
)


@dataclass(frozen=True)
class DiskSettings:
    enable_protoplanetary_disks: bool
    protoplanetary_disk_presence: float
    protoplanetary_disk_density: float
    protoplanetary_disk_prominence: float
    protoplanetary_disk_style_bias: DiskStyleBias
    protoplanetary_disk_banding: float
    protoplanetary_disk_gap_sharpness: float
    protoplanetary_disk_spiral_level: float
    protoplanetary_disk_noise_level: float
    small_body_detail: SmallBodyDetail


@dataclass(frozen=True)
class DiskParams:
    enabled: bool
    probability: float
    particle_count: CountRange
    style_weights: tuple[float, float, float, float]
    opacity: Span
    brightness: Span
    clumpiness: Span
    band_strength: Span
    band_frequency: Span
    gap_sharpness: Span
    spiral_strength: Span
    spiral_arms: CountRange
    noise_scale: Span
    noise_strength: Span
    inner_radius_factor: Span  # multiples of the orbit base distance
    outer_radius_factor: Span
    palette: tuple[tuple[str, str], ...]


def map_protoplanetary_disks(settings: DiskSettings) -> DiskParams:
    density = settings.protoplanetary_disk_density
    prominence = settings.protoplanetary_disk_prominence
    banding = settings.protoplanetary_disk_banding
    gaps = settings.protoplanetary_disk_gap_sharpness
    spiral = settings.protoplanetary_disk_spiral_level
    noise = settings.protoplanetary_disk_noise_level
    factor = DETAIL_MULTIPLIERS[settings.small_body_detail]
    return DiskParams(
        enabled=settings.enable_protoplanetary_disks
        and settings.protoplanetary_disk_presence > 0,
        probability=settings.protoplanetary_disk_presence,
        particle_count=CountRange(
            max(1, math.floor((1000 + density * 4000) * factor)),
            max(1, math.floor((3000 + density * 12000) * factor)),
        ),
        style_weights=STYLE_WEIGHTS[settings.protoplanetary_disk_style_bias],
        opacity=Span(0.3 + 0.3 * prominence, 0.5 + 0.5 * prominence),
        brightness=Span(0.4 + 0.4 * prominence, 0.7 + 0.6 * prominence),
        clumpiness=Span(0.1 + 0.2 * noise, 0.3 + 0.5 * noise),
        band_strength=Span(0.6 * banding, banding),
        band_frequency=Span(2.0 + 4.0 * banding, 4.0 + 10.0 * banding),
        gap_sharpness=Span(0.6 * gaps, gaps),
        spiral_strength=Span(0.5 * spiral, spiral),
        spiral_arms=(
            CountRange(0, 0) if spiral == 0 else CountRange(2, 2 + math.floor(spiral * 4))
        ),
        noise_scale=Span(1.0 + noise, 2.0 + 4.0 * noise),
        noise_strength=Span(0.5 * noise, noise),
        inner_radius_factor=Span(0.1, 0.3),
        outer_radius_factor=Span(2.0, 4.0 + 4.0 * prominence),
        palette=DISK_PALETTE,
    )
