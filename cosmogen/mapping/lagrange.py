"""Lagrange point mapper: which markers to place and how many Trojans."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cosmogen.config.types import LagrangeMarkerMode, LagrangePairScope
from cosmogen.mapping.common import CountRange

STABLE_POINTS = (4, 5)
ALL_POINTS = (1, 2, 3, 4, 5)
MAX_TROJANS_PER_POINT = 8


@dataclass(frozen=True)
class LagrangeSettings:
    enable_lagrange_points: bool
    lagrange_marker_mode: LagrangeMarkerMode
    trojan_frequency: float
    trojan_richness: float
    lagrange_pair_scope: LagrangePairScope


@dataclass(frozen=True)
class LagrangeParams:
    enabled: bool
    point_indices: tuple[int, ...]
    star_planet: bool
    planet_moon: bool
    trojan_probability: float
    trojan_count: CountRange
    trojan_spread_degrees: float


def map_lagrange(settings: LagrangeSettings) -> LagrangeParams:
    mode = settings.lagrange_marker_mode
    scope = settings.lagrange_pair_scope
    richness = settings.trojan_richness
    return LagrangeParams(
        enabled=settings.enable_lagrange_points and mode is not LagrangeMarkerMode.NONE,
        point_indices=ALL_POINTS if mode is LagrangeMarkerMode.ALL else STABLE_POINTS,
        star_planet=scope in (LagrangePairScope.STAR_PLANET, LagrangePairScope.BOTH),
        planet_moon=scope in (LagrangePairScope.PLANET_MOON, LagrangePairScope.BOTH),
        trojan_probability=settings.trojan_frequency,
        trojan_count=CountRange(1, 1 + math.floor(richness * (MAX_TROJANS_PER_POINT - 1))),
        trojan_spread_degrees=4.0 + 8.0 * richness,
    )
