"""Rogue planet mapper: count, speed and trajectory shape."""

from __future__ import annotations

from dataclasses import dataclass

from cosmogen.config.types import RogueOrbitStyle, RogueTrajectoryMode
from cosmogen.mapping.common import Span

MAX_ROGUE_PLANETS = 50
ROGUE_MEAN_AT_FULL_FREQUENCY = 10.0

ROGUE_SPEED: dict[RogueOrbitStyle, Span] = {
    RogueOrbitStyle.SLOW_DRIFTERS: Span(0.05, 0.3),
    RogueOrbitStyle.MIXED: Span(0.1, 1.0),
    RogueOrbitStyle.FAST_INTRUDERS: Span(0.8, 2.5),
}

CURVED_PROBABILITY: dict[RogueTrajectoryMode, float] = {
    RogueTrajectoryMode.LINEAR_ONLY: 0.0,
    RogueTrajectoryMode.MIXED: 0.5,
    RogueTrajectoryMode.CURVED: 1.0,
}

ROGUE_HIGHLIGHT_COLORS: tuple[str, ...] = ("#7FDBFF", "#B10DC9", "#FF851B", "#39CCCC")


@dataclass(frozen=True)
class RogueSettings:
    enable_rogue_planets: bool
    rogue_planet_frequency: float
    rogue_planet_orbit_style: RogueOrbitStyle
    rogue_planet_visibility: float
    rogue_trajectory_mode: RogueTrajectoryMode
    rogue_curvature_min: float
    rogue_curvature_max: float
    rogue_trajectory_show: bool
    rogue_trajectory_preview_length: float


@dataclass(frozen=True)
class RogueParams:
    enabled: bool
    mean_count: float
    max_count: int
    speed: Span
    curved_probability: float
    curvature: Span
    semi_major_axis: Span
    eccentricity: Span
    spawn_sigma: float
    highlight_probability: float
    highlight_colors: tuple[str, ...]
    radius_scale: float
    show_trajectory: bool
    trajectory_window: float


def map_rogue_planets(settings: RogueSettings) -> RogueParams:
    visibility = settings.rogue_planet_visibility
    return RogueParams(
        enabled=settings.enable_rogue_planets and settings.rogue_planet_frequency > 0,
        mean_count=settings.rogue_planet_frequency * ROGUE_MEAN_AT_FULL_FREQUENCY,
        max_count=MAX_ROGUE_PLANETS,
        speed=ROGUE_SPEED[settings.rogue_planet_orbit_style],
        curved_probability=CURVED_PROBABILITY[settings.rogue_trajectory_mode],
        curvature=Span(settings.rogue_curvature_min, settings.rogue_curvature_max),
        semi_major_axis=Span(80.0, 300.0),
        eccentricity=Span(0.1, 0.9),
        spawn_sigma=120.0,
        highlight_probability=visibility,
        highlight_colors=ROGUE_HIGHLIGHT_COLORS,
        radius_scale=1.0 + visibility,
        show_trajectory=settings.rogue_trajectory_show,
        trajectory_window=20.0 + 180.0 * settings.rogue_trajectory_preview_length,
    )
