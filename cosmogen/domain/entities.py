"""Output entity records of a generation run.

Every record is a plain dataclass keyed by a stable string id. ``Entities``
owns the flat collections; ``to_dict`` renders a JSON-compatible view with
enum members reduced to their values.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum

from cosmogen.errors import InternalInvariantViolation


class BodyType(Enum):
    STAR = "star"
    PLANET = "planet"
    MOON = "moon"
    ASTEROID = "asteroid"
    COMET = "comet"
    LAGRANGE_POINT = "lagrangePoint"
    BLACK_HOLE = "blackHole"


class BlackHoleClass(Enum):
    STELLAR = "stellar"
    INTERMEDIATE = "intermediate"
    SUPERMASSIVE = "supermassive"


def to_plain(value: object) -> object:
    """Recursively convert dataclasses, enums and containers to JSON types."""
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value


@dataclass(frozen=True)
class Vector3:
    x: float
    y: float
    z: float


# ---------------------------------------------------------------------------
# Body metadata
# ---------------------------------------------------------------------------


@dataclass
class PlanetaryRing:
    inner_radius_multiplier: float
    outer_radius_multiplier: float
    thickness: float
    opacity: float
    albedo: float
    color: str
    density: float
    warp_factor: float
    seed: int


@dataclass
class CometMeta:
    is_periodic: bool
    perihelion_distance: float
    aphelion_distance: float
    has_tail: bool
    tail_length_base: float
    tail_width_base: float
    tail_color: str
    tail_opacity_base: float
    activity_falloff_distance: float
    seed: int


@dataclass
class LagrangePointMeta:
    primary_id: str
    secondary_id: str
    point_index: int  # 1..5
    stable: bool  # L4 / L5
    pair_type: str  # "starPlanet" | "planetMoon"
    label: str


@dataclass
class BlackHoleProperties:
    mass_class: BlackHoleClass
    has_accretion_disk: bool
    has_relativistic_jet: bool
    has_photon_ring: bool
    spin: float
    shadow_radius: float
    accretion_inner_radius: float
    accretion_outer_radius: float
    disk_thickness: float
    disk_brightness: float
    disk_opacity: float
    disk_temperature: float
    disk_clumpiness: float
    jet_length: float
    jet_opening_angle: float
    jet_brightness: float
    doppler_beaming_strength: float
    lensing_strength: float
    rotation_speed_multiplier: float
    quasar: bool
    seed: int


@dataclass
class RoguePlanetMeta:
    seed: int
    initial_position: Vector3
    velocity: Vector3
    color_override: str | None
    path_curvature: float
    semi_major_axis: float | None
    eccentricity: float | None
    path_offset: Vector3 | None
    path_rotation: Vector3 | None
    path_period: float | None
    show_trajectory: bool
    trajectory_past_window: float
    trajectory_future_window: float


@dataclass
class Body:
    """Any orbiting or free-flying body: star, planet, moon, comet, marker, ..."""

    id: str
    name: str
    body_type: BodyType
    mass: float
    radius: float
    color: str
    parent_id: str | None = None
    children: list[str] = field(default_factory=list)
    system_index: int | None = None
    orbital_distance: float = 0.0
    orbital_speed: float = 0.0
    orbital_phase: float = 0.0
    semi_major_axis: float = 0.0
    eccentricity: float = 0.0
    inclination: float = 0.0
    orbit_rotation_y: float = 0.0
    longitude_of_node: float = 0.0
    orbit_offset: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    ring: PlanetaryRing | None = None
    comet: CometMeta | None = None
    lagrange_point: LagrangePointMeta | None = None
    lagrange_host_id: str | None = None
    black_hole: BlackHoleProperties | None = None
    is_rogue_planet: bool = False
    rogue_planet: RoguePlanetMeta | None = None


# ---------------------------------------------------------------------------
# Groups and fields
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GroupChild:
    id: str
    kind: str  # "system" | "group"


@dataclass
class Group:
    id: str
    name: str
    color: str
    position: Vector3
    children: list[GroupChild] = field(default_factory=list)
    parent_group_id: str | None = None


@dataclass
class SmallBodyField:
    """Particle field of an asteroid or Kuiper belt, rendered as a population."""

    id: str
    system_index: int
    host_star_id: str
    inner_radius: float
    outer_radius: float
    thickness: float
    particle_count: int
    base_color: str
    highlight_color: str
    opacity: float
    brightness: float
    clumpiness: float
    rotation_speed_multiplier: float
    belt_type: str  # "main" | "kuiper"
    region_label: str
    is_icy: bool
    inclination_sigma: float
    eccentricity: float
    style: str  # "thin" | "moderate" | "thick" | "scattered"
    seed: int


@dataclass
class AsteroidBelt:
    """Legacy belt record kept for consumers predating ``SmallBodyField``."""

    id: str
    name: str
    parent_id: str
    field_id: str
    inner_radius: float
    outer_radius: float
    thickness: float
    eccentricity: float
    inclination: float
    asteroid_count: int
    color: str
    belt_type: str
    region_label: str
    is_icy: bool
    inclination_sigma: float
    seed: int
    asteroid_ids: list[str] = field(default_factory=list)


@dataclass
class ProtoplanetaryDisk:
    id: str
    system_index: int
    central_star_id: str
    inner_radius: float
    outer_radius: float
    thickness: float
    particle_count: int
    base_color: str
    highlight_color: str
    opacity: float
    brightness: float
    clumpiness: float
    rotation_speed_multiplier: float
    style: str  # "thin" | "moderate" | "thick" | "extreme"
    band_strength: float
    band_frequency: float
    gap_sharpness: float
    inner_glow_strength: float
    noise_scale: float
    noise_strength: float
    spiral_strength: float
    spiral_arm_count: int
    edge_softness: float
    temperature_gradient: float
    seed: int


@dataclass
class NebulaRegion:
    id: str
    name: str
    position: Vector3
    radius: float
    dimensions: Vector3
    density: float
    brightness: float
    base_color: str
    accent_color: str
    noise_scale: float
    noise_detail: int
    seed: int
    associated_group_ids: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Container
# ---------------------------------------------------------------------------


KEYED_COLLECTIONS = (
    "bodies",
    "groups",
    "belts",
    "small_body_fields",
    "protoplanetary_disks",
    "nebulae",
)


@dataclass
class Entities:
    """All entities of one run; collections are keyed by entity id."""

    bodies: dict[str, Body] = field(default_factory=dict)
    root_ids: list[str] = field(default_factory=list)
    groups: dict[str, Group] = field(default_factory=dict)
    root_group_ids: list[str] = field(default_factory=list)
    belts: dict[str, AsteroidBelt] = field(default_factory=dict)
    small_body_fields: dict[str, SmallBodyField] = field(default_factory=dict)
    protoplanetary_disks: dict[str, ProtoplanetaryDisk] = field(default_factory=dict)
    nebulae: dict[str, NebulaRegion] = field(default_factory=dict)

    def add_body(self, body: Body) -> Body:
        if body.parent_id is not None:
            parent = self.bodies.get(body.parent_id)
            if parent is None:
                raise InternalInvariantViolation(
                    f"body {body.id!r} references missing parent {body.parent_id!r}"
                )
            parent.children.append(body.id)
        self.bodies[body.id] = body
        return body

    def merge(self, other: Entities) -> None:
        """Absorb another run's entities; overlapping ids are a defect."""
        for name in KEYED_COLLECTIONS:
            mine: dict[str, object] = getattr(self, name)
            theirs: dict[str, object] = getattr(other, name)
            overlap = mine.keys() & theirs.keys()
            if overlap:
                raise InternalInvariantViolation(f"{name} ids collide: {sorted(overlap)}")
            mine.update(theirs)
        self.root_ids.extend(other.root_ids)
        self.root_group_ids.extend(other.root_group_ids)

    def bodies_of(self, body_type: BodyType) -> list[Body]:
        return [b for b in self.bodies.values() if b.body_type is body_type]

    def for_system(self, system_index: int) -> Entities:
        """Sub-view of the entities that belong to one system."""
        out = Entities()
        out.bodies = {k: b for k, b in self.bodies.items() if b.system_index == system_index}
        out.root_ids = [r for r in self.root_ids if r in out.bodies]
        out.belts = {k: b for k, b in self.belts.items() if b.parent_id in out.bodies}
        out.small_body_fields = {
            k: f for k, f in self.small_body_fields.items() if f.system_index == system_index
        }
        out.protoplanetary_disks = {
            k: d for k, d in self.protoplanetary_disks.items() if d.system_index == system_index
        }
        return out

    def to_dict(self) -> dict[str, object]:
        return to_plain(self)  # type: ignore[return-value]
