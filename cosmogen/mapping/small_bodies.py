"""Small-body mappers: main asteroid belts and the Kuiper belt.

Both honour the global ``small_body_detail`` level, which scales particle
counts without changing where belts are placed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from cosmogen.config.types import (
    BeltPlacementMode,
    BeltStylePreset,
    KuiperDistanceStyle,
    SmallBodyDetail,
)
from cosmogen.mapping.common import CountRange, Span

DETAIL_MULTIPLIERS: dict[SmallBodyDetail, float] = {
    SmallBodyDetail.LOW: 0.4,
    SmallBodyDetail.MEDIUM: 1.0,
    SmallBodyDetail.HIGH: 1.8,
    SmallBodyDetail.ULTRA: 3.0,
}

DETAIL_LABELS: dict[SmallBodyDetail, str] = {
    SmallBodyDetail.LOW: "Low (fastest)",
    SmallBodyDetail.MEDIUM: "Medium",
    SmallBodyDetail.HIGH: "High",
    SmallBodyDetail.ULTRA: "Ultra (slowest)",
}


@dataclass(frozen=True)
class BeltLook:
    base_color: str
    highlight_color: str
    thickness: float
    count_factor: float
    is_icy: bool
    style: str


BELT_LOOKS: dict[BeltStylePreset, BeltLook] = {
    BeltStylePreset.NONE: BeltLook("#8B7D6B", "#A89F91", 0.5, 1.0, False, "moderate"),
    BeltStylePreset.MAIN_BELT: BeltLook("#8B7D6B", "#B8A992", 0.5, 1.0, False, "moderate"),
    BeltStylePreset.KUIPER: BeltLook("#A8C5DD", "#DDEEFF", 0.8, 1.0, True, "scattered"),
    BeltStylePreset.HEAVY_DEBRIS: BeltLook("#6E6259", "#9C8F80", 0.9, 1.5, False, "thick"),
}

# multiples of the outermost planet distance
KUIPER_RADIAL_RANGE: dict[KuiperDistanceStyle, Span] = {
    KuiperDistanceStyle.TIGHT: Span(1.5, 2.2),
    KuiperDistanceStyle.CLASSICAL: Span(2.0, 3.5),
    KuiperDistanceStyle.WIDE: Span(3.0, 5.5),
}


def small_body_detail_label(detail: SmallBodyDetail) -> str:
    return DETAIL_LABELS[detail]


def _scaled_counts(lo: float, hi: float, factor: float) -> CountRange:
    return CountRange(max(1, math.floor(lo * factor)), max(1, math.floor(hi * factor)))


# ---------------------------------------------------------------------------
# Main belts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BeltSettings:
    enable_asteroid_belts: bool
    belt_density: float
    max_belts_per_system: int
    belt_placement_mode: BeltPlacementMode
    belt_style_preset: BeltStylePreset
    small_body_detail: SmallBodyDetail


@dataclass(frozen=True)
class BeltParams:
    enabled: bool
    max_per_system: int
    placement_mode: BeltPlacementMode
    particle_count: CountRange
    thickness: float
    color_variation: float
    inner_gap_fraction: float
    outer_gap_fraction: float
    outer_multiplier: float
    eccentricity: Span
    inclination_sigma: float
    look: BeltLook


def map_asteroid_belts(settings: BeltSettings) -> BeltParams:
    look = BELT_LOOKS[settings.belt_style_preset]
    d = settings.belt_density
    factor = DETAIL_MULTIPLIERS[settings.small_body_detail] * look.count_factor
    return BeltParams(
        enabled=(
            settings.enable_asteroid_belts
            and settings.max_belts_per_system > 0
            and settings.belt_placement_mode is not BeltPlacementMode.NONE
        ),
        max_per_system=settings.max_belts_per_system,
        placement_mode=settings.belt_placement_mode,
        particle_count=_scaled_counts(50 + d * 150, 500 + d * 500, factor),
        thickness=look.thickness,
        color_variation=0.2,
        inner_gap_fraction=0.4,
        outer_gap_fraction=0.6,
        outer_multiplier=1.5,
        eccentricity=Span(0.0, 0.1),
        inclination_sigma=2.0,
        look=look,
    )


# ---------------------------------------------------------------------------
# Kuiper belt
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KuiperSettings:
    enable_kuiper_belt: bool
    kuiper_belt_density: float
    kuiper_belt_distance_style: KuiperDistanceStyle
    kuiper_belt_inclination: float
    small_body_detail: SmallBodyDetail


@dataclass(frozen=True)
class KuiperParams:
    enabled: bool
    radial_range: Span
    particle_count: CountRange
    inclination_sigma: float
    eccentricity: Span
    thickness: float
    look: BeltLook


def map_kuiper_belt(settings: KuiperSettings) -> KuiperParams:
    d = settings.kuiper_belt_density
    factor = DETAIL_MULTIPLIERS[settings.small_body_detail]
    return KuiperParams(
        enabled=settings.enable_kuiper_belt,
        radial_range=KUIPER_RADIAL_RANGE[settings.kuiper_belt_distance_style],
        particle_count=_scaled_counts(100 + d * 200, 800 + d * 1200, factor),
        inclination_sigma=0.5 + settings.kuiper_belt_inclination * 2.5,
        eccentricity=Span(0.0, 0.15),
        thickness=0.8 + settings.kuiper_belt_inclination,
        look=BELT_LOOKS[BeltStylePreset.KUIPER],
    )
