"""Orbit mapper: distance scale, eccentricity, inclination and offsets."""

from __future__ import annotations

from dataclasses import dataclass

from cosmogen.config.constants import ORBIT_JITTER
from cosmogen.config.types import EccentricityStyle, ScaleMode
from cosmogen.mapping.common import Span

# scale mode -> (base distance, growth factor, orbital speed constant)
SCALE_TABLE: dict[ScaleMode, tuple[float, float, float]] = {
    ScaleMode.TOY: (3.0, 1.5, 15.0),
    ScaleMode.COMPRESSED: (5.0, 1.6, 18.0),
    ScaleMode.REALISTIC: (8.0, 1.8, 20.0),
}

ECCENTRICITY_TABLE: dict[EccentricityStyle, Span] = {
    EccentricityStyle.CIRCULAR: Span(0.0, 0.0),
    EccentricityStyle.MIXED: Span(0.0, 0.3),
    EccentricityStyle.ECCENTRIC: Span(0.1, 0.7),
}

MOON_BASE_FRACTION = 0.2
MOON_GROWTH = 1.4
ORBIT_OFFSET_MAGNITUDE = 2.0


@dataclass(frozen=True)
class OrbitSettings:
    scale_mode: ScaleMode
    orbit_eccentricity_style: EccentricityStyle
    orbit_inclination_max: float
    orbit_offset_enabled: bool


@dataclass(frozen=True)
class OrbitParams:
    orbit_base: float
    orbit_growth: float
    orbit_k: float
    jitter: float
    moon_orbit_base: float
    moon_orbit_growth: float
    eccentricity: Span
    inclination_max: float
    offset_magnitude: float

    def distance(self, index: int, jitter_u: float) -> float:
        """Planet-scale distance for orbit slot ``index``; ``jitter_u`` in [0, 1)."""
        return self.orbit_base * self.orbit_growth**index + (2.0 * jitter_u - 1.0) * self.jitter

    def moon_distance(self, index: int, jitter_u: float, scale: float = 1.0) -> float:
        base = self.moon_orbit_base * scale
        return base * self.moon_orbit_growth**index + (2.0 * jitter_u - 1.0) * self.jitter * scale

    def speed(self, distance: float) -> float:
        return self.orbit_k / max(distance, 1e-6) ** 0.5


def map_orbits(settings: OrbitSettings) -> OrbitParams:
    base, growth, k = SCALE_TABLE[settings.scale_mode]
    return OrbitParams(
        orbit_base=base,
        orbit_growth=growth,
        orbit_k=k,
        jitter=ORBIT_JITTER,
        moon_orbit_base=base * MOON_BASE_FRACTION,
        moon_orbit_growth=MOON_GROWTH,
        eccentricity=ECCENTRICITY_TABLE[settings.orbit_eccentricity_style],
        inclination_max=settings.orbit_inclination_max,
        offset_magnitude=ORBIT_OFFSET_MAGNITUDE if settings.orbit_offset_enabled else 0.0,
    )
