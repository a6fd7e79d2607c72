"""Product style presets and the caller-side random seed helper."""

from __future__ import annotations

import secrets
import string
from dataclasses import replace

from cosmogen.config.types import (
    BeltPlacementMode,
    BeltStylePreset,
    CometOrbitStyle,
    EccentricityStyle,
    GenerationConfig,
    GroupStructureMode,
    LagrangeMarkerMode,
    LagrangePairScope,
    RingStylePreset,
    StylePreset,
)

_SEED_ALPHABET = string.ascii_lowercase + string.digits
RANDOM_SEED_LENGTH = 9
"""Length of seeds produced by ``random_seed``."""


def style_config(preset: StylePreset, base: GenerationConfig | None = None) -> GenerationConfig:
    """Return ``base`` (or the defaults) with the fields a style preset pins."""
    base = replace(base or GenerationConfig(), style_preset=preset)

    if preset is StylePreset.SPARSE:
        return replace(
            base,
            max_systems=3,
            max_stars_per_system=1,
            max_depth=2,
            planet_density=0.8,
            moon_density=0.8,
            enable_nary_systems=False,
            orbit_eccentricity_style=EccentricityStyle.CIRCULAR,
            orbit_inclination_max=5.0,
            enable_asteroid_belts=False,
            belt_density=0.0,
            max_belts_per_system=0,
            enable_planetary_rings=False,
            ring_frequency=0.0,
            ring_prominence=0.3,
            ring_style_preset=RingStylePreset.NONE,
            enable_comets=False,
            comet_frequency=0.0,
            comet_orbit_style=CometOrbitStyle.RARE_LONG,
            comet_activity=0.3,
            enable_lagrange_points=False,
            lagrange_marker_mode=LagrangeMarkerMode.NONE,
            trojan_frequency=0.0,
            trojan_richness=0.3,
            lagrange_pair_scope=LagrangePairScope.STAR_PLANET,
        )
    if preset is StylePreset.SOLAR_LIKE:
        return replace(
            base,
            max_systems=5,
            max_stars_per_system=2,
            max_depth=3,
            planet_density=0.5,
            moon_density=0.6,
            enable_nary_systems=True,
            orbit_eccentricity_style=EccentricityStyle.CIRCULAR,
            orbit_inclination_max=10.0,
            orbit_offset_enabled=False,
            enable_asteroid_belts=True,
            belt_density=0.4,
            max_belts_per_system=1,
            belt_placement_mode=BeltPlacementMode.BETWEEN_PLANETS,
            belt_style_preset=BeltStylePreset.MAIN_BELT,
            enable_planetary_rings=True,
            ring_frequency=0.3,
            ring_prominence=0.7,
            ring_style_preset=RingStylePreset.SOLAR_LIKE,
            enable_comets=True,
            comet_frequency=0.3,
            comet_orbit_style=CometOrbitStyle.RARE_LONG,
            comet_activity=0.5,
            enable_lagrange_points=True,
            lagrange_marker_mode=LagrangeMarkerMode.ALL,
            trojan_frequency=0.3,
            trojan_richness=0.4,
            lagrange_pair_scope=LagrangePairScope.STAR_PLANET,
        )
    if preset is StylePreset.CROWDED:
        return replace(
            base,
            max_systems=15,
            max_stars_per_system=3,
            max_depth=3,
            planet_density=0.3,
            moon_density=0.4,
            enable_nary_systems=True,
            orbit_eccentricity_style=EccentricityStyle.MIXED,
            orbit_inclination_max=25.0,
            orbit_offset_enabled=False,
            enable_asteroid_belts=True,
            belt_density=0.6,
            max_belts_per_system=2,
            belt_placement_mode=BeltPlacementMode.BOTH,
            belt_style_preset=BeltStylePreset.MAIN_BELT,
            enable_planetary_rings=True,
            ring_frequency=0.6,
            ring_prominence=0.6,
            ring_style_preset=RingStylePreset.DRAMATIC,
            enable_comets=True,
            comet_frequency=0.5,
            comet_orbit_style=CometOrbitStyle.MIXED,
            comet_activity=0.7,
            enable_lagrange_points=True,
            lagrange_marker_mode=LagrangeMarkerMode.ALL,
            trojan_frequency=0.6,
            trojan_richness=0.7,
            lagrange_pair_scope=LagrangePairScope.STAR_PLANET,
        )
    if preset is StylePreset.SUPER_DENSE_EXPERIMENTAL:
        return replace(
            base,
            max_systems=50,
            max_stars_per_system=3,
            max_depth=4,
            planet_density=0.2,
            moon_density=0.3,
            enable_nary_systems=True,
            enable_groups=True,
            target_galaxy_count=8,
            group_structure_mode=GroupStructureMode.DEEP_HIERARCHY,
            orbit_eccentricity_style=EccentricityStyle.ECCENTRIC,
            orbit_inclination_max=45.0,
            orbit_offset_enabled=True,
            enable_asteroid_belts=True,
            belt_density=0.7,
            max_belts_per_system=3,
            belt_placement_mode=BeltPlacementMode.BOTH,
            belt_style_preset=BeltStylePreset.HEAVY_DEBRIS,
            enable_planetary_rings=True,
            ring_frequency=0.9,
            ring_prominence=0.9,
            ring_style_preset=RingStylePreset.DRAMATIC,
            enable_comets=True,
            comet_frequency=0.8,
            comet_orbit_style=CometOrbitStyle.MANY_SHORT,
            comet_activity=0.9,
            enable_lagrange_points=True,
            lagrange_marker_mode=LagrangeMarkerMode.ALL,
            trojan_frequency=0.8,
            trojan_richness=0.9,
            lagrange_pair_scope=LagrangePairScope.BOTH,
        )
    return base


def random_seed() -> str:
    """Fresh non-reproducible seed for callers that did not supply one."""
    return "".join(secrets.choice(_SEED_ALPHABET) for _ in range(RANDOM_SEED_LENGTH))
