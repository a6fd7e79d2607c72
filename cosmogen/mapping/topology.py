"""Topology mapper: star multiplicity, density sliders and depth."""

from __future__ import annotations

from dataclasses import dataclass, replace

from cosmogen.config.constants import MAX_STARS_PER_SYSTEM
from cosmogen.domain.grammar import ExpansionParams
from cosmogen.domain.presets import TopologyOverrides

DEFAULT_STAR_PROBABILITIES = (0.65, 0.25, 0.10)
BINARY_STAR_PROBABILITIES = (0.6, 0.4, 0.0)
SINGLE_STAR_PROBABILITIES = (1.0, 0.0, 0.0)


@dataclass(frozen=True)
class TopologySettings:
    topology_preset: str
    max_stars_per_system: int
    enable_nary_systems: bool
    max_depth: int
    planet_density: float
    moon_density: float
    apply_preset_overrides: bool


@dataclass(frozen=True)
class TopologyParams:
    preset_id: str
    star_probabilities: tuple[float, float, float]
    planet_geometric_p: float
    moon_geometric_p: float
    max_depth: int
    max_stars: int
    apply_preset_overrides: bool

    def with_overrides(self, overrides: TopologyOverrides | None) -> TopologyParams:
        """Apply a preset's suggested overrides when the caller opted in."""
        if overrides is None or not self.apply_preset_overrides:
            return self
        return replace(
            self,
            planet_geometric_p=(
                self.planet_geometric_p
                if overrides.planet_geometric_p is None
                else overrides.planet_geometric_p
            ),
            moon_geometric_p=(
                self.moon_geometric_p
                if overrides.moon_geometric_p is None
                else overrides.moon_geometric_p
            ),
            star_probabilities=overrides.star_probabilities or self.star_probabilities,
            max_depth=self.max_depth if overrides.max_depth is None else overrides.max_depth,
        )

    def expansion_params(self) -> ExpansionParams:
        return ExpansionParams(
            star_weights=self.star_probabilities,
            planet_geometric_p=self.planet_geometric_p,
            moon_geometric_p=self.moon_geometric_p,
            max_depth=self.max_depth,
            max_stars=self.max_stars,
        )


def density_to_geometric_p(density: float) -> float:
    """Higher density means a lower stop probability and so more bodies."""
    return 0.8 - density * 0.6


def star_probabilities(max_stars: int, enable_nary: bool) -> tuple[float, float, float]:
    if not enable_nary or max_stars <= 1:
        return SINGLE_STAR_PROBABILITIES
    if max_stars == 2:
        return BINARY_STAR_PROBABILITIES
    return DEFAULT_STAR_PROBABILITIES


def map_topology(settings: TopologySettings) -> TopologyParams:
    max_stars = min(settings.max_stars_per_system, MAX_STARS_PER_SYSTEM)
    return TopologyParams(
        preset_id=settings.topology_preset,
        star_probabilities=star_probabilities(max_stars, settings.enable_nary_systems),
        planet_geometric_p=density_to_geometric_p(settings.planet_density),
        moon_geometric_p=density_to_geometric_p(settings.moon_density),
        max_depth=settings.max_depth,
        max_stars=max_stars if settings.enable_nary_systems else 1,
        apply_preset_overrides=settings.apply_preset_overrides,
    )
