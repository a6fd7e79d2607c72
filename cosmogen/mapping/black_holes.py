"""Black hole mapper: rarity, mass classes, spin and visual intensity."""

from __future__ import annotations

from dataclasses import dataclass

from cosmogen.config.types import (
    BlackHoleAccretionStyle,
    BlackHoleMassProfile,
    BlackHoleRarityStyle,
    BlackHoleVisualComplexity,
)
from cosmogen.domain.entities import BlackHoleClass
from cosmogen.mapping.common import Span, clamp

MAX_BLACK_HOLES_PER_SYSTEM = 3

RARITY_MULTIPLIER: dict[BlackHoleRarityStyle, float] = {
    BlackHoleRarityStyle.ULTRA_RARE: 0.1,
    BlackHoleRarityStyle.RARE: 0.4,
    BlackHoleRarityStyle.COMMON: 1.0,
}

MASS_CLASS_WEIGHTS: dict[BlackHoleMassProfile, tuple[float, float, float]] = {
    BlackHoleMassProfile.STELLAR_ONLY: (1.0, 0.0, 0.0),
    BlackHoleMassProfile.MIXED: (0.6, 0.3, 0.1),
    BlackHoleMassProfile.SUPERMASSIVE_CENTRES: (0.1, 0.2, 0.7),
}

MASS_RANGES: dict[BlackHoleClass, Span] = {
    BlackHoleClass.STELLAR: Span(5.0, 45.0),
    BlackHoleClass.INTERMEDIATE: Span(100.0, 9_000.0),
    BlackHoleClass.SUPERMASSIVE: Span(100_000.0, 10_000_000.0),
}

# complexity -> (photon ring probability, lensing scale)
COMPLEXITY_TABLE: dict[BlackHoleVisualComplexity, tuple[float, float]] = {
    BlackHoleVisualComplexity.MINIMAL: (0.0, 0.5),
    BlackHoleVisualComplexity.NORMAL: (0.6, 1.0),
    BlackHoleVisualComplexity.CINEMATIC: (1.0, 1.5),
}

ACCRETION_BRIGHTNESS: dict[BlackHoleAccretionStyle, float] = {
    BlackHoleAccretionStyle.SUBTLE: 0.6,
    BlackHoleAccretionStyle.NORMAL: 1.0,
    BlackHoleAccretionStyle.QUASAR: 2.0,
}


@dataclass(frozen=True)
class BlackHoleSettings:
    enable_black_holes: bool
    black_hole_frequency: float
    black_hole_accretion_intensity: float
    black_hole_jet_frequency: float
    black_hole_visual_complexity: BlackHoleVisualComplexity
    black_hole_mass_profile: BlackHoleMassProfile
    black_hole_spin_level: float
    black_hole_disk_thickness: float
    black_hole_disk_clumpiness: float
    black_hole_jet_drama: float
    black_hole_fx_intensity: float
    black_hole_rarity_style: BlackHoleRarityStyle
    black_hole_accretion_style: BlackHoleAccretionStyle
    black_hole_allow_multiple_per_system: bool


@dataclass(frozen=True)
class BlackHoleParams:
    enabled: bool
    system_probability: float
    max_per_system: int
    mass_class_weights: tuple[float, float, float]
    spin: Span
    disk_probability: float
    jet_probability: float
    photon_ring_probability: float
    disk_thickness: Span
    disk_brightness: Span
    disk_opacity: Span
    disk_temperature: Span
    disk_clumpiness: Span
    jet_length: Span
    jet_opening_angle: Span
    jet_brightness: Span
    doppler_beaming: Span
    lensing: Span
    rotation_speed: Span
    quasar: bool


def map_black_holes(settings: BlackHoleSettings) -> BlackHoleParams:
    intensity = settings.black_hole_accretion_intensity
    spin = settings.black_hole_spin_level
    drama = settings.black_hole_jet_drama
    fx = settings.black_hole_fx_intensity
    thickness = settings.black_hole_disk_thickness
    clump = settings.black_hole_disk_clumpiness
    ring_p, lensing_scale = COMPLEXITY_TABLE[settings.black_hole_visual_complexity]
    glow = ACCRETION_BRIGHTNESS[settings.black_hole_accretion_style]
    quasar = settings.black_hole_accretion_style is BlackHoleAccretionStyle.QUASAR
    return BlackHoleParams(
        enabled=settings.enable_black_holes and settings.black_hole_frequency > 0,
        system_probability=clamp(
            settings.black_hole_frequency
            * RARITY_MULTIPLIER[settings.black_hole_rarity_style],
            0.0,
            1.0,
        ),
        max_per_system=(
            MAX_BLACK_HOLES_PER_SYSTEM if settings.black_hole_allow_multiple_per_system else 1
        ),
        mass_class_weights=MASS_CLASS_WEIGHTS[settings.black_hole_mass_profile],
        spin=Span(clamp(spin - 0.25, 0.0, 0.998), clamp(spin + 0.25, 0.0, 0.998)),
        disk_probability=clamp(0.3 + 0.7 * intensity, 0.0, 1.0),
        jet_probability=settings.black_hole_jet_frequency,
        photon_ring_probability=ring_p,
        disk_thickness=Span(0.02 + 0.1 * thickness, 0.05 + 0.3 * thickness),
        disk_brightness=Span(0.4 * glow * (0.5 + intensity), 0.8 * glow * (0.5 + intensity)),
        disk_opacity=Span(0.5 + 0.2 * intensity, 0.8 + 0.2 * intensity),
        disk_temperature=Span(4_000.0 + 4_000.0 * intensity, 8_000.0 + 22_000.0 * intensity),
        disk_clumpiness=Span(0.5 * clump, clump),
        jet_length=Span(5.0 + 10.0 * drama, 10.0 + 40.0 * drama),
        jet_opening_angle=Span(2.0, 6.0 + 6.0 * drama),
        jet_brightness=Span(0.4 + 0.3 * drama, 0.7 + 0.6 * drama),
        doppler_beaming=Span(0.3 * fx, 0.6 + 0.4 * fx),
        lensing=Span(0.5 * lensing_scale * fx, lensing_scale * (0.5 + fx)),
        rotation_speed=Span(0.5 + spin, 1.0 + 2.0 * spin),
        quasar=quasar,
    )
