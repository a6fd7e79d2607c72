"""Turn an abstract topology tree into stars, planets and moons.

Every tree node draws its attributes from its own fork
(``body:{node key}``) of the system stream, so a node's attributes depend
only on the seed, the system index and the node's path in the tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cosmogen.config.constants import (
    CONSTELLATIONS,
    GREEK_LETTERS,
    MASS_MU,
    MASS_SIGMA,
    MOON_COLOR,
    MOON_MASS_MULTIPLIER,
    MOON_NAMES,
    PLANET_COLORS,
    PLANET_MASS_MULTIPLIER,
    PLANET_NAMES,
    RADIUS_POWER,
    RADIUS_SCALE,
    STAR_COLOR_BY_MASS,
    STAR_MASS_MULTIPLIER,
    SUBMOON_MASS_MULTIPLIER,
)
from cosmogen.domain.entities import Body, BodyType, Entities, PlanetaryRing, Vector3
from cosmogen.domain.grammar import AbstractNode, GrammarSymbol, NodeType
from cosmogen.domain.prng import Generator
from cosmogen.errors import InternalInvariantViolation
from cosmogen.mapping import InternalParams
from cosmogen.mapping.orbits import OrbitParams
from cosmogen.mapping.rings import RingParams

SUBMOON_DISTANCE_SCALE = 0.35
MOON_CLEARANCE = 1.5
"""Moon orbits start this many parent radii out."""

STAR_SUFFIXES = "ABC"


@dataclass
class SystemContext:
    """Assembled core of one system, shared by the secondary populations."""

    index: int
    rng: Generator
    params: InternalParams
    tree: AbstractNode
    entities: Entities = field(default_factory=Entities)
    center: Body | None = None
    stars: list[Body] = field(default_factory=list)
    planets: list[Body] = field(default_factory=list)
    moons: list[Body] = field(default_factory=list)

    @property
    def prefix(self) -> str:
        return f"s{self.index}"

    def entity_id(self, key: str) -> str:
        return f"{self.prefix}/{key}"

    @property
    def primary(self) -> Body:
        if self.center is None:
            raise InternalInvariantViolation("system has no central star yet")
        return self.center

    def outermost_distance(self) -> float:
        """Largest planet orbit, or a nominal distance for planetless systems."""
        if self.planets:
            return max(p.orbital_distance for p in self.planets)
        orbits = self.params.orbits
        return orbits.orbit_base * orbits.orbit_growth ** max(len(self.stars), 1)


# ---------------------------------------------------------------------------
# Physics helpers
# ---------------------------------------------------------------------------


def body_radius(mass: float) -> float:
    return mass**RADIUS_POWER * RADIUS_SCALE


def star_color(mass: float) -> str:
    for threshold, color in STAR_COLOR_BY_MASS:
        if mass > threshold:
            return color
    return STAR_COLOR_BY_MASS[-1][1]


def star_name(system_index: int, star_ordinal: int, star_count: int) -> str:
    greek = GREEK_LETTERS[system_index % len(GREEK_LETTERS)]
    constellation = CONSTELLATIONS[(system_index // len(GREEK_LETTERS)) % len(CONSTELLATIONS)]
    name = f"{greek} {constellation}"
    if star_count > 1:
        name = f"{name} {STAR_SUFFIXES[star_ordinal]}"
    return name


def planet_name(ordinal: int) -> str:
    return PLANET_NAMES[ordinal] if ordinal < len(PLANET_NAMES) else f"Planet {ordinal + 1}"


def moon_name(ordinal: int) -> str:
    return MOON_NAMES[ordinal] if ordinal < len(MOON_NAMES) else f"Moon {ordinal + 1}"


@dataclass(frozen=True)
class _OrbitDraw:
    """Uniforms for one orbit, always drawn in the same order."""

    jitter: float
    phase: float
    eccentricity: float
    inclination: float
    node: float
    offset: tuple[float, float, float]

    @classmethod
    def draw(cls, rng: Generator) -> _OrbitDraw:
        return cls(
            jitter=rng.float01(),
            phase=rng.float01(),
            eccentricity=rng.float01(),
            inclination=rng.float01(),
            node=rng.float01(),
            offset=(rng.float01(), rng.float01(), rng.float01()),
        )


def _apply_orbit(
    body: Body, distance: float, draw: _OrbitDraw, orbits: OrbitParams, phase: float | None = None
) -> None:
    body.orbital_distance = distance
    body.semi_major_axis = distance
    body.orbital_speed = orbits.speed(distance)
    body.orbital_phase = draw.phase * 360.0 if phase is None else phase
    body.eccentricity = orbits.eccentricity.at(draw.eccentricity)
    body.inclination = (2.0 * draw.inclination - 1.0) * orbits.inclination_max
    body.longitude_of_node = draw.node * 360.0 if orbits.inclination_max > 0 else 0.0
    m = orbits.offset_magnitude
    if m > 0:
        ox, oy, oz = draw.offset
        body.orbit_offset = Vector3((2 * ox - 1) * m, (2 * oy - 1) * m, (2 * oz - 1) * m)


def _draw_ring(rng: Generator, rings: RingParams) -> PlanetaryRing | None:
    if not rng.chance(rings.probability):
        return None
    return PlanetaryRing(
        inner_radius_multiplier=rings.inner_multiplier.sample(rng),
        outer_radius_multiplier=rings.outer_multiplier.sample(rng),
        thickness=rings.thickness.sample(rng),
        opacity=rings.opacity.sample(rng),
        albedo=rings.albedo.sample(rng),
        color=rng.choice(rings.palette),
        density=rings.density.sample(rng),
        warp_factor=rings.warp_factor.sample(rng),
        seed=rng.next_u32(),
    )


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


def assemble_bodies(
    tree: AbstractNode, rng: Generator, params: InternalParams, system_index: int
) -> SystemContext:
    """Build star, planet and moon entities for one expanded tree."""
    ctx = SystemContext(index=system_index, rng=rng, params=params, tree=tree)
    orbits = params.orbits
    entities = ctx.entities
    by_key: dict[str, Body] = {}

    star_nodes = [n for n in tree.children if n.node_type is NodeType.STAR]
    star_draws: list[tuple[AbstractNode, Body, _OrbitDraw]] = []
    for ordinal, node in enumerate(star_nodes):
        node_rng = rng.fork(f"body:{node.key}")
        mass = node_rng.log_normal(MASS_MU, MASS_SIGMA) * STAR_MASS_MULTIPLIER
        body = Body(
            id=ctx.entity_id(node.key),
            name=star_name(system_index, ordinal, len(star_nodes)),
            body_type=BodyType.STAR,
            mass=mass,
            radius=body_radius(mass),
            color=star_color(mass),
            system_index=system_index,
        )
        star_draws.append((node, body, _OrbitDraw.draw(node_rng)))
        by_key[node.key] = body

    if not star_draws:
        return ctx
    _, center, _ = max(star_draws, key=lambda item: item[1].mass)
    ctx.center = center
    entities.add_body(center)
    entities.root_ids.append(center.id)
    ctx.stars.append(center)

    companions = [item for item in star_draws if item[1] is not center]
    for i, (_, body, draw) in enumerate(companions):
        body.parent_id = center.id
        distance = orbits.distance(i, draw.jitter)
        _apply_orbit(body, distance, draw, orbits, phase=360.0 * i / len(companions))
        entities.add_body(body)
        ctx.stars.append(body)

    planet_ordinal = 0
    moon_total = 0
    moon_ordinals: dict[str, int] = {}
    for node in tree.walk():
        if node.node_type is NodeType.PLANET:
            node_rng = rng.fork(f"body:{node.key}")
            mass = node_rng.log_normal(MASS_MU, MASS_SIGMA) * PLANET_MASS_MULTIPLIER
            draw = _OrbitDraw.draw(node_rng)
            body = Body(
                id=ctx.entity_id(node.key),
                name=planet_name(planet_ordinal),
                body_type=BodyType.PLANET,
                mass=mass,
                radius=body_radius(mass),
                color=node_rng.choice(PLANET_COLORS),
                parent_id=center.id,
                system_index=system_index,
            )
            orbit_index = planet_ordinal + len(companions)
            _apply_orbit(body, orbits.distance(orbit_index, draw.jitter), draw, orbits)
            if params.rings.enabled:
                body.ring = _draw_ring(node_rng.fork("ring"), params.rings)
            planet_ordinal += 1
            entities.add_body(body)
            ctx.planets.append(body)
            by_key[node.key] = body
        elif node.node_type is NodeType.MOON:
            parent = by_key.get(node.parent.key) if node.parent is not None else None
            if parent is None:
                raise InternalInvariantViolation(f"moon {node.key!r} has no assembled parent")
            node_rng = rng.fork(f"body:{node.key}")
            is_sub = node.symbol is GrammarSymbol.SUBMOON
            multiplier = SUBMOON_MASS_MULTIPLIER if is_sub else MOON_MASS_MULTIPLIER
            mass = node_rng.log_normal(MASS_MU, MASS_SIGMA) * multiplier
            draw = _OrbitDraw.draw(node_rng)
            sibling = moon_ordinals.get(parent.id, 0)
            moon_ordinals[parent.id] = sibling + 1
            body = Body(
                id=ctx.entity_id(node.key),
                name=moon_name(moon_total),
                body_type=BodyType.MOON,
                mass=mass,
                radius=body_radius(mass),
                color=MOON_COLOR,
                parent_id=parent.id,
                system_index=system_index,
            )
            scale = SUBMOON_DISTANCE_SCALE if is_sub else 1.0
            distance = parent.radius * MOON_CLEARANCE + orbits.moon_distance(
                sibling, draw.jitter, scale
            )
            _apply_orbit(body, distance, draw, orbits)
            moon_total += 1
            entities.add_body(body)
            ctx.moons.append(body)
            by_key[node.key] = body

    return ctx
