"""Nebula mapper."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cosmogen.config.types import NebulaColorStyle, NebulaSizeBias
from cosmogen.mapping.common import CountRange, Span

MAX_NEBULAE = 12

NEBULA_RADIUS: dict[NebulaSizeBias, Span] = {
    NebulaSizeBias.SMALL: Span(15.0, 40.0),
    NebulaSizeBias.MEDIUM: Span(40.0, 100.0),
    NebulaSizeBias.GIANT: Span(100.0, 250.0),
}

WARM_COLORS: tuple[tuple[str, str], ...] = (
    ("#FF6B6B", "#FFD93D"),
    ("#FF8C42", "#FFF3B0"),
    ("#E84A5F", "#FECEA8"),
)
COOL_COLORS: tuple[tuple[str, str], ...] = (
    ("#4D96FF", "#6BCB77"),
    ("#3A86FF", "#8338EC"),
    ("#00B4D8", "#CAF0F8"),
)
RANDOM_COLORS: tuple[tuple[str, str], ...] = (
    ("#9B5DE5", "#F15BB5"),
    ("#00F5D4", "#FEE440"),
    ("#F15BB5", "#00BBF9"),
)

NEBULA_PALETTES: dict[NebulaColorStyle, tuple[tuple[str, str], ...]] = {
    NebulaColorStyle.WARM: WARM_COLORS,
    NebulaColorStyle.COOL: COOL_COLORS,
    NebulaColorStyle.MIXED: WARM_COLORS + COOL_COLORS,
    NebulaColorStyle.RANDOM: WARM_COLORS + COOL_COLORS + RANDOM_COLORS,
}


@dataclass(frozen=True)
class NebulaSettings:
    enable_nebulae: bool
    nebula_density: float
    nebula_size_bias: NebulaSizeBias
    nebula_color_style: NebulaColorStyle
    nebula_brightness: float


@dataclass(frozen=True)
class NebulaParams:
    enabled: bool
    count: CountRange
    radius: Span
    brightness: Span
    density: Span
    palette: tuple[tuple[str, str], ...]
    noise_scale: Span
    noise_detail: CountRange
    spread_sigma: float
    association_radius_factor: float


def map_nebulae(settings: NebulaSettings) -> NebulaParams:
    d = settings.nebula_density
    b = settings.nebula_brightness
    hi = max(1, math.ceil(d * MAX_NEBULAE))
    return NebulaParams(
        enabled=settings.enable_nebulae and d > 0,
        count=CountRange(max(1, hi // 2), hi),
        radius=NEBULA_RADIUS[settings.nebula_size_bias],
        brightness=Span(0.3 + 0.4 * b, 0.5 + 0.5 * b),
        density=Span(0.2 + 0.3 * d, 0.4 + 0.6 * d),
        palette=NEBULA_PALETTES[settings.nebula_color_style],
        noise_scale=Span(0.5, 2.0),
        noise_detail=CountRange(2, 6),
        spread_sigma=150.0,
        association_radius_factor=2.0,
    )
