"""Generation configuration dataclass and its enum-valued option types.

``GenerationConfig`` is the single caller-facing record. It is flat on
purpose: every field maps one-to-one onto a control in the product UI or a
key in a JSON config file. Subsystem mappers read narrow slices of it (see
``cosmogen.mapping``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from enum import Enum

from cosmogen.config.constants import (
    DEFAULT_TOPOLOGY_PRESET,
    MAX_BELTS_PER_SYSTEM,
    MAX_DEPTH_LIMIT,
    MAX_STARS_PER_SYSTEM,
    MAX_SYSTEMS,
)
from cosmogen.errors import ConfigValidationError

__all__ = [
    "BeltPlacementMode",
    "BeltStylePreset",
    "BlackHoleAccretionStyle",
    "BlackHoleMassProfile",
    "BlackHoleRarityStyle",
    "BlackHoleVisualComplexity",
    "CometOrbitStyle",
    "DiskStyleBias",
    "EccentricityStyle",
    "GenerationConfig",
    "GroupStructureMode",
    "KuiperDistanceStyle",
    "LagrangeMarkerMode",
    "LagrangePairScope",
    "NebulaColorStyle",
    "NebulaSizeBias",
    "RingStylePreset",
    "RogueOrbitStyle",
    "RogueTrajectoryMode",
    "ScaleMode",
    "SmallBodyDetail",
    "StylePreset",
]

Seed = int | float | str

# ---------------------------------------------------------------------------
# Option enums
# ---------------------------------------------------------------------------


class StylePreset(Enum):
    """Overall look the config was derived from."""

    SPARSE = "sparse"
    SOLAR_LIKE = "solarLike"
    CROWDED = "crowded"
    SUPER_DENSE_EXPERIMENTAL = "superDenseExperimental"


class ScaleMode(Enum):
    """Orbital distance scale: compact toy layouts up to realistic spacing."""

    TOY = "toy"
    COMPRESSED = "compressed"
    REALISTIC = "realistic"


class EccentricityStyle(Enum):
    CIRCULAR = "circular"
    MIXED = "mixed"
    ECCENTRIC = "eccentric"


class GroupStructureMode(Enum):
    """How systems are organised into galaxy groups."""

    FLAT = "flat"
    GALAXY_CLUSTER = "galaxyCluster"
    DEEP_HIERARCHY = "deepHierarchy"


class SmallBodyDetail(Enum):
    """Global particle-count level for belts and disks."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    ULTRA = "ultra"


class BeltPlacementMode(Enum):
    NONE = "none"
    BETWEEN_PLANETS = "betweenPlanets"
    OUTER_BELT = "outerBelt"
    BOTH = "both"


class BeltStylePreset(Enum):
    NONE = "none"
    MAIN_BELT = "mainBelt"
    KUIPER = "kuiper"
    HEAVY_DEBRIS = "heavyDebris"


class KuiperDistanceStyle(Enum):
    TIGHT = "tight"
    CLASSICAL = "classical"
    WIDE = "wide"


class RingStylePreset(Enum):
    NONE = "none"
    RARE = "rare"
    SOLAR_LIKE = "solarLike"
    DRAMATIC = "dramatic"


class CometOrbitStyle(Enum):
    RARE_LONG = "rareLong"
    MIXED = "mixed"
    MANY_SHORT = "manyShort"


class LagrangeMarkerMode(Enum):
    NONE = "none"
    STABLE_ONLY = "stableOnly"
    ALL = "all"


class LagrangePairScope(Enum):
    STAR_PLANET = "starPlanet"
    PLANET_MOON = "planetMoon"
    BOTH = "both"


class DiskStyleBias(Enum):
    MOSTLY_THIN = "mostlyThin"
    BALANCED = "balanced"
    MOSTLY_THICK = "mostlyThick"
    EXTREME_SHOWCASE = "extremeShowcase"


class NebulaSizeBias(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    GIANT = "giant"


class NebulaColorStyle(Enum):
    RANDOM = "random"
    WARM = "warm"
    COOL = "cool"
    MIXED = "mixed"


class RogueOrbitStyle(Enum):
    SLOW_DRIFTERS = "slowDrifters"
    MIXED = "mixed"
    FAST_INTRUDERS = "fastIntruders"


class RogueTrajectoryMode(Enum):
    LINEAR_ONLY = "linearOnly"
    MIXED = "mixed"
    CURVED = "curved"


class BlackHoleVisualComplexity(Enum):
    MINIMAL = "minimal"
    NORMAL = "normal"
    CINEMATIC = "cinematic"


class BlackHoleMassProfile(Enum):
    STELLAR_ONLY = "stellarOnly"
    MIXED = "mixed"
    SUPERMASSIVE_CENTRES = "supermassiveCentres"


class BlackHoleRarityStyle(Enum):
    ULTRA_RARE = "ultraRare"
    RARE = "rare"
    COMMON = "common"


class BlackHoleAccretionStyle(Enum):
    SUBTLE = "subtle"
    NORMAL = "normal"
    QUASAR = "quasar"


# ---------------------------------------------------------------------------
# Field groups used by validation and JSON coercion
# ---------------------------------------------------------------------------

ENUM_FIELDS: dict[str, type[Enum]] = {
    "style_preset": StylePreset,
    "scale_mode": ScaleMode,
    "orbit_eccentricity_style": EccentricityStyle,
    "group_structure_mode": GroupStructureMode,
    "small_body_detail": SmallBodyDetail,
    "belt_placement_mode": BeltPlacementMode,
    "belt_style_preset": BeltStylePreset,
    "kuiper_belt_distance_style": KuiperDistanceStyle,
    "ring_style_preset": RingStylePreset,
    "comet_orbit_style": CometOrbitStyle,
    "lagrange_marker_mode": LagrangeMarkerMode,
    "lagrange_pair_scope": LagrangePairScope,
    "protoplanetary_disk_style_bias": DiskStyleBias,
    "nebula_size_bias": NebulaSizeBias,
    "nebula_color_style": NebulaColorStyle,
    "rogue_planet_orbit_style": RogueOrbitStyle,
    "rogue_trajectory_mode": RogueTrajectoryMode,
    "black_hole_visual_complexity": BlackHoleVisualComplexity,
    "black_hole_mass_profile": BlackHoleMassProfile,
    "black_hole_rarity_style": BlackHoleRarityStyle,
    "black_hole_accretion_style": BlackHoleAccretionStyle,
}

BOOL_FIELDS: tuple[str, ...] = (
    "apply_preset_overrides",
    "enable_nary_systems",
    "orbit_offset_enabled",
    "enable_groups",
    "enable_asteroid_belts",
    "enable_kuiper_belt",
    "enable_planetary_rings",
    "enable_comets",
    "enable_lagrange_points",
    "enable_protoplanetary_disks",
    "enable_nebulae",
    "enable_rogue_planets",
    "rogue_trajectory_show",
    "enable_black_holes",
    "black_hole_allow_multiple_per_system",
)

INT_FIELDS: tuple[str, ...] = (
    "max_systems",
    "max_stars_per_system",
    "max_depth",
    "target_galaxy_count",
    "max_belts_per_system",
)

UNIT_INTERVAL_FIELDS: tuple[str, ...] = (
    "planet_density",
    "moon_density",
    "belt_density",
    "kuiper_belt_density",
    "kuiper_belt_inclination",
    "ring_frequency",
    "ring_prominence",
    "comet_frequency",
    "comet_activity",
    "trojan_frequency",
    "trojan_richness",
    "protoplanetary_disk_presence",
    "protoplanetary_disk_density",
    "protoplanetary_disk_prominence",
    "protoplanetary_disk_banding",
    "protoplanetary_disk_gap_sharpness",
    "protoplanetary_disk_spiral_level",
    "protoplanetary_disk_noise_level",
    "nebula_density",
    "nebula_brightness",
    "rogue_planet_frequency",
    "rogue_planet_visibility",
    "rogue_curvature_min",
    "rogue_curvature_max",
    "rogue_trajectory_preview_length",
    "black_hole_frequency",
    "black_hole_accretion_intensity",
    "black_hole_jet_frequency",
    "black_hole_spin_level",
    "black_hole_disk_thickness",
    "black_hole_disk_clumpiness",
    "black_hole_jet_drama",
    "black_hole_fx_intensity",
)

FLOAT_FIELDS: tuple[str, ...] = UNIT_INTERVAL_FIELDS + ("orbit_inclination_max",)

# ---------------------------------------------------------------------------
# Config dataclass
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GenerationConfig:
    """Every user-facing knob of one generation call.

    Defaults describe a modest solar-like universe with every optional
    population switched off.
    """

    seed: Seed | None = None
    max_systems: int = 5
    max_stars_per_system: int = 3
    max_depth: int = 3
    style_preset: StylePreset = StylePreset.SOLAR_LIKE
    topology_preset: str = DEFAULT_TOPOLOGY_PRESET
    apply_preset_overrides: bool = False
    enable_nary_systems: bool = True
    scale_mode: ScaleMode = ScaleMode.REALISTIC
    planet_density: float = 0.6
    moon_density: float = 0.7
    orbit_eccentricity_style: EccentricityStyle = EccentricityStyle.CIRCULAR
    orbit_inclination_max: float = 0.0
    orbit_offset_enabled: bool = False

    # Groups
    enable_groups: bool = False
    target_galaxy_count: int = 3
    group_structure_mode: GroupStructureMode = GroupStructureMode.FLAT

    # Small bodies
    small_body_detail: SmallBodyDetail = SmallBodyDetail.MEDIUM
    enable_asteroid_belts: bool = False
    belt_density: float = 0.5
    max_belts_per_system: int = 2
    belt_placement_mode: BeltPlacementMode = BeltPlacementMode.BETWEEN_PLANETS
    belt_style_preset: BeltStylePreset = BeltStylePreset.NONE
    enable_kuiper_belt: bool = False
    kuiper_belt_density: float = 0.5
    kuiper_belt_distance_style: KuiperDistanceStyle = KuiperDistanceStyle.CLASSICAL
    kuiper_belt_inclination: float = 0.5

    # Rings
    enable_planetary_rings: bool = False
    ring_frequency: float = 0.2
    ring_prominence: float = 0.6
    ring_style_preset: RingStylePreset = RingStylePreset.NONE

    # Comets
    enable_comets: bool = False
    comet_frequency: float = 0.2
    comet_orbit_style: CometOrbitStyle = CometOrbitStyle.RARE_LONG
    comet_activity: float = 0.6

    # Lagrange points
    enable_lagrange_points: bool = False
    lagrange_marker_mode: LagrangeMarkerMode = LagrangeMarkerMode.STABLE_ONLY
    trojan_frequency: float = 0.3
    trojan_richness: float = 0.5
    lagrange_pair_scope: LagrangePairScope = LagrangePairScope.STAR_PLANET

    # Protoplanetary disks
    enable_protoplanetary_disks: bool = False
    protoplanetary_disk_presence: float = 0.3
    protoplanetary_disk_density: float = 0.5
    protoplanetary_disk_prominence: float = 0.5
    protoplanetary_disk_style_bias: DiskStyleBias = DiskStyleBias.BALANCED
    protoplanetary_disk_banding: float = 0.5
    protoplanetary_disk_gap_sharpness: float = 0.5
    protoplanetary_disk_spiral_level: float = 0.3
    protoplanetary_disk_noise_level: float = 0.5

    # Nebulae
    enable_nebulae: bool = False
    nebula_density: float = 0.3
    nebula_size_bias: NebulaSizeBias = NebulaSizeBias.MEDIUM
    nebula_color_style: NebulaColorStyle = NebulaColorStyle.MIXED
    nebula_brightness: float = 0.6

    # Rogue planets
    enable_rogue_planets: bool = False
    rogue_planet_frequency: float = 0.2
    rogue_planet_orbit_style: RogueOrbitStyle = RogueOrbitStyle.MIXED
    rogue_planet_visibility: float = 0.5
    rogue_trajectory_mode: RogueTrajectoryMode = RogueTrajectoryMode.MIXED
    rogue_curvature_min: float = 0.0
    rogue_curvature_max: float = 0.5
    rogue_trajectory_show: bool = True
    rogue_trajectory_preview_length: float = 0.5

    # Black holes
    enable_black_holes: bool = False
    black_hole_frequency: float = 0.1
    black_hole_accretion_intensity: float = 0.6
    black_hole_jet_frequency: float = 0.4
    black_hole_visual_complexity: BlackHoleVisualComplexity = BlackHoleVisualComplexity.NORMAL
    black_hole_mass_profile: BlackHoleMassProfile = BlackHoleMassProfile.STELLAR_ONLY
    black_hole_spin_level: float = 0.5
    black_hole_disk_thickness: float = 0.3
    black_hole_disk_clumpiness: float = 0.4
    black_hole_jet_drama: float = 0.5
    black_hole_fx_intensity: float = 0.6
    black_hole_rarity_style: BlackHoleRarityStyle = BlackHoleRarityStyle.RARE
    black_hole_accretion_style: BlackHoleAccretionStyle = BlackHoleAccretionStyle.NORMAL
    black_hole_allow_multiple_per_system: bool = False

    def __post_init__(self) -> None:
        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, (int, float, str)):
                raise ConfigValidationError("seed must be a string or a number")
            if isinstance(self.seed, float) and not math.isfinite(self.seed):
                raise ConfigValidationError("seed must be finite")
        if not isinstance(self.topology_preset, str) or not self.topology_preset:
            raise ConfigValidationError("topology_preset must be a non-empty string")

        for name in INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigValidationError(f"{name} must be an integer")
        if not 1 <= self.max_systems <= MAX_SYSTEMS:
            raise ConfigValidationError(f"max_systems must be in [1, {MAX_SYSTEMS}]")
        if not 1 <= self.max_stars_per_system <= MAX_STARS_PER_SYSTEM:
            raise ConfigValidationError(
                f"max_stars_per_system must be in [1, {MAX_STARS_PER_SYSTEM}]"
            )
        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ConfigValidationError(f"max_depth must be in [1, {MAX_DEPTH_LIMIT}]")
        if self.target_galaxy_count < 1:
            raise ConfigValidationError("target_galaxy_count must be >= 1")
        if not 0 <= self.max_belts_per_system <= MAX_BELTS_PER_SYSTEM:
            raise ConfigValidationError(
                f"max_belts_per_system must be in [0, {MAX_BELTS_PER_SYSTEM}]"
            )

        for name in FLOAT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigValidationError(f"{name} must be a number")
            if not math.isfinite(value):
                raise ConfigValidationError(f"{name} must be finite")
        for name in UNIT_INTERVAL_FIELDS:
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ConfigValidationError(f"{name} must be in [0.0, 1.0]")
        if not 0.0 <= self.orbit_inclination_max <= 90.0:
            raise ConfigValidationError("orbit_inclination_max must be in [0.0, 90.0]")
        if self.rogue_curvature_min > self.rogue_curvature_max:
            raise ConfigValidationError("rogue_curvature_min must be <= rogue_curvature_max")

        for name in BOOL_FIELDS:
            if not isinstance(getattr(self, name), bool):
                raise ConfigValidationError(f"{name} must be a boolean")
        for name, enum_type in ENUM_FIELDS.items():
            if not isinstance(getattr(self, name), enum_type):
                valid = ", ".join(member.value for member in enum_type)
                raise ConfigValidationError(f"{name} must be one of {valid}")

    @classmethod
    def from_mapping(cls, raw: dict[str, object]) -> GenerationConfig:
        """Build a config from JSON-style values, coercing strings to enums and bools."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ConfigValidationError(f"unknown config keys: {', '.join(unknown)}")
        values: dict[str, object] = {}
        for key, value in raw.items():
            values[key] = coerce_field(key, value)
        return cls(**values)  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, object]:
        """JSON-compatible view; inverse of ``from_mapping``."""
        out: dict[str, object] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            out[f.name] = value.value if isinstance(value, Enum) else value
        return out


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------


def coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ConfigValidationError(f"{key} must be a boolean value")


def coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ConfigValidationError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if not math.isfinite(raw) or raw != int(raw):
            raise ConfigValidationError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ConfigValidationError(f"{key} must be an integer value") from exc
    raise ConfigValidationError(f"{key} must be an integer value")


def coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ConfigValidationError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except ValueError as exc:
            raise ConfigValidationError(f"{key} must be a float value") from exc
    raise ConfigValidationError(f"{key} must be a float value")


def coerce_enum(raw: object, key: str, enum_type: type[Enum]) -> Enum:
    """Coerce an enum member or its string value."""
    if isinstance(raw, enum_type):
        return raw
    try:
        return enum_type(raw)
    except ValueError as exc:
        valid = ", ".join(member.value for member in enum_type)
        raise ConfigValidationError(f"{key} must be one of {valid}") from exc


def coerce_field(key: str, raw: object) -> object:
    """Coerce one JSON value to the type of the named config field."""
    if key in ENUM_FIELDS:
        return coerce_enum(raw, key, ENUM_FIELDS[key])
    if key in BOOL_FIELDS:
        return coerce_bool(raw, key)
    if key in INT_FIELDS:
        return coerce_int(raw, key)
    if key in FLOAT_FIELDS:
        return coerce_float(raw, key)
    return raw
