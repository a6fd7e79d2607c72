"""Comet mapper: how many comets, how eccentric, how active."""

from __future__ import annotations

from dataclasses import dataclass

from cosmogen.config.types import CometOrbitStyle
from cosmogen.mapping.common import Span

MAX_COMETS_PER_SYSTEM = 20

# style -> (mean comets per system at frequency 1, short-period fraction)
COMET_STYLE_TABLE: dict[CometOrbitStyle, tuple[float, float]] = {
    CometOrbitStyle.RARE_LONG: (2.0, 0.15),
    CometOrbitStyle.MIXED: (4.0, 0.5),
    CometOrbitStyle.MANY_SHORT: (8.0, 0.85),
}

TAIL_COLORS: tuple[str, ...] = ("#E0F7FF", "#B3E5FC", "#FFFFFF", "#CFE8FF")


@dataclass(frozen=True)
class CometSettings:
    enable_comets: bool
    comet_frequency: float
    comet_orbit_style: CometOrbitStyle
    comet_activity: float


@dataclass(frozen=True)
class CometParams:
    enabled: bool
    mean_per_system: float
    max_per_system: int
    short_period_fraction: float
    short_semi_major: Span  # multiples of the outermost planet distance
    long_semi_major: Span
    short_eccentricity: Span
    long_eccentricity: Span
    short_inclination_max: float
    long_inclination_max: float
    tail_probability: float
    tail_length: Span
    tail_width: Span
    tail_opacity: Span
    activity_falloff: Span
    tail_colors: tuple[str, ...]


def map_comets(settings: CometSettings) -> CometParams:
    mean_scale, short_fraction = COMET_STYLE_TABLE[settings.comet_orbit_style]
    a = settings.comet_activity
    return CometParams(
        enabled=settings.enable_comets and settings.comet_frequency > 0,
        mean_per_system=settings.comet_frequency * mean_scale,
        max_per_system=MAX_COMETS_PER_SYSTEM,
        short_period_fraction=short_fraction,
        short_semi_major=Span(0.6, 1.5),
        long_semi_major=Span(2.0, 6.0),
        short_eccentricity=Span(0.5, 0.8),
        long_eccentricity=Span(0.85, 0.98),
        short_inclination_max=20.0,
        long_inclination_max=90.0,
        tail_probability=0.4 + 0.6 * a,
        tail_length=Span(1.0 + 3.0 * a, 3.0 + 9.0 * a),
        tail_width=Span(0.2 + 0.3 * a, 0.5 + 0.8 * a),
        tail_opacity=Span(0.3 + 0.3 * a, 0.6 + 0.4 * a),
        activity_falloff=Span(1.5, 3.0),
        tail_colors=TAIL_COLORS,
    )
