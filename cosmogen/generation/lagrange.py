"""Lagrange point markers and Trojan bodies.

Markers are placed for star-planet and/or planet-moon pairs at the classic
restricted three-body positions; Trojans cluster around the stable L4/L5
points and reference their marker through ``lagrange_host_id``.
"""

from __future__ import annotations

from cosmogen.config.constants import LAGRANGE_MARKER_COLOR, TROJAN_COLOR
from cosmogen.domain.entities import Body, BodyType, LagrangePointMeta
from cosmogen.domain.prng import Generator
from cosmogen.generation.bodies import SystemContext
from cosmogen.mapping.lagrange import LagrangeParams

MARKER_RADIUS = 0.05
TROJAN_RADIUS = 0.03
TROJAN_MASS = 0.001
TROJAN_RADIAL_SIGMA = 0.02


def lagrange_position(
    point_index: int, distance: float, phase: float, mass_ratio: float
) -> tuple[float, float]:
    """``(distance, phase)`` of point L1..L5 for a secondary at ``distance``/``phase``.

    ``mass_ratio`` is ``m2 / (m1 + m2)``.
    """
    hill = distance * (mass_ratio / 3.0) ** (1.0 / 3.0)
    if point_index == 1:
        return distance - hill, phase
    if point_index == 2:
        return distance + hill, phase
    if point_index == 3:
        return distance * (1.0 + 5.0 / 12.0 * mass_ratio), (phase + 180.0) % 360.0
    if point_index == 4:
        return distance, (phase + 60.0) % 360.0
    if point_index == 5:
        return distance, (phase - 60.0) % 360.0
    raise ValueError(f"point_index must be in 1..5, got {point_index}")


def _place_pair(
    ctx: SystemContext,
    rng: Generator,
    primary: Body,
    secondary: Body,
    pair_type: str,
    lagrange: LagrangeParams,
) -> None:
    mass_ratio = secondary.mass / (primary.mass + secondary.mass)
    for n in lagrange.point_indices:
        distance, phase = lagrange_position(
            n, secondary.orbital_distance, secondary.orbital_phase, mass_ratio
        )
        stable = n in (4, 5)
        marker = ctx.entities.add_body(
            Body(
                id=f"{secondary.id}/L{n}",
                name=f"{secondary.name} L{n}",
                body_type=BodyType.LAGRANGE_POINT,
                mass=0.0,
                radius=MARKER_RADIUS,
                color=LAGRANGE_MARKER_COLOR,
                parent_id=primary.id,
                system_index=ctx.index,
                orbital_distance=distance,
                orbital_speed=secondary.orbital_speed,
                orbital_phase=phase,
                semi_major_axis=distance,
                inclination=secondary.inclination,
                longitude_of_node=secondary.longitude_of_node,
                lagrange_point=LagrangePointMeta(
                    primary_id=primary.id,
                    secondary_id=secondary.id,
                    point_index=n,
                    stable=stable,
                    pair_type=pair_type,
                    label=f"L{n}",
                ),
            )
        )
        if not stable or not rng.chance(lagrange.trojan_probability):
            continue
        for j in range(lagrange.trojan_count.sample(rng)):
            spread = rng.normal(0.0, lagrange.trojan_spread_degrees / 2.0)
            radial = 1.0 + rng.normal(0.0, TROJAN_RADIAL_SIGMA)
            trojan_distance = distance * radial
            ctx.entities.add_body(
                Body(
                    id=f"{marker.id}/trojan:{j}",
                    name=f"{marker.name} Trojan {j + 1}",
                    body_type=BodyType.ASTEROID,
                    mass=TROJAN_MASS,
                    radius=TROJAN_RADIUS,
                    color=TROJAN_COLOR,
                    parent_id=primary.id,
                    system_index=ctx.index,
                    orbital_distance=trojan_distance,
                    orbital_speed=secondary.orbital_speed,
                    orbital_phase=(phase + spread) % 360.0,
                    semi_major_axis=trojan_distance,
                    inclination=secondary.inclination,
                    longitude_of_node=secondary.longitude_of_node,
                    lagrange_host_id=marker.id,
                )
            )


def generate_lagrange_points(ctx: SystemContext) -> None:
    lagrange = ctx.params.lagrange
    if not lagrange.enabled or ctx.center is None:
        return
    rng = ctx.rng.fork("lagrange")
    pairs: list[tuple[Body, Body, str]] = []
    if lagrange.star_planet:
        pairs.extend((ctx.primary, planet, "starPlanet") for planet in ctx.planets)
    if lagrange.planet_moon:
        planets = {p.id: p for p in ctx.planets}
        for moon in ctx.moons:
            if moon.parent_id in planets:
                pairs.append((planets[moon.parent_id], moon, "planetMoon"))
    for primary, secondary, pair_type in pairs:
        _place_pair(ctx, rng.fork(secondary.id), primary, secondary, pair_type, lagrange)
