"""Black holes added to systems as companions of the central star."""

from __future__ import annotations

import math

from cosmogen.config.constants import BLACK_HOLE_COLOR
from cosmogen.domain.entities import BlackHoleClass, BlackHoleProperties, Body, BodyType
from cosmogen.generation.bodies import SystemContext
from cosmogen.mapping.black_holes import MASS_RANGES

MASS_CLASSES = (BlackHoleClass.STELLAR, BlackHoleClass.INTERMEDIATE, BlackHoleClass.SUPERMASSIVE)


def shadow_radius(mass: float) -> float:
    """Display radius of the event-horizon shadow; grows slowly with mass."""
    return 0.5 + 0.15 * math.log10(mass)


def generate_black_holes(ctx: SystemContext) -> None:
    params = ctx.params.black_holes
    if not params.enabled or ctx.center is None:
        return
    rng = ctx.rng.fork("black_holes")
    if not rng.chance(params.system_probability):
        return
    count = rng.integer(1, params.max_per_system)
    orbits = ctx.params.orbits
    for j in range(count):
        b_rng = rng.fork(f"black_hole:{j}")
        mass_class = b_rng.weighted(MASS_CLASSES, params.mass_class_weights)
        span = MASS_RANGES[mass_class]
        mass = math.exp(b_rng.uniform(math.log(span.lo), math.log(span.hi)))
        shadow = shadow_radius(mass)
        has_disk = b_rng.chance(params.disk_probability)
        has_jet = b_rng.chance(params.jet_probability)
        has_ring = b_rng.chance(params.photon_ring_probability)
        inner = shadow * b_rng.uniform(2.5, 3.5)
        outer = inner * b_rng.uniform(3.0, 6.0)
        disk_values = (
            params.disk_thickness.sample(b_rng),
            params.disk_brightness.sample(b_rng),
            params.disk_opacity.sample(b_rng),
            params.disk_temperature.sample(b_rng),
            params.disk_clumpiness.sample(b_rng),
        )
        jet_values = (
            params.jet_length.sample(b_rng),
            params.jet_opening_angle.sample(b_rng),
            params.jet_brightness.sample(b_rng),
        )
        if not has_disk:
            inner = outer = 0.0
            disk_values = (0.0, 0.0, 0.0, 0.0, 0.0)
        if not has_jet:
            jet_values = (0.0, 0.0, 0.0)
        properties = BlackHoleProperties(
            mass_class=mass_class,
            has_accretion_disk=has_disk,
            has_relativistic_jet=has_jet,
            has_photon_ring=has_ring,
            spin=params.spin.sample(b_rng),
            shadow_radius=shadow,
            accretion_inner_radius=inner,
            accretion_outer_radius=outer,
            disk_thickness=disk_values[0],
            disk_brightness=disk_values[1],
            disk_opacity=disk_values[2],
            disk_temperature=disk_values[3],
            disk_clumpiness=disk_values[4],
            jet_length=jet_values[0],
            jet_opening_angle=jet_values[1],
            jet_brightness=jet_values[2],
            doppler_beaming_strength=params.doppler_beaming.sample(b_rng),
            lensing_strength=params.lensing.sample(b_rng),
            rotation_speed_multiplier=params.rotation_speed.sample(b_rng),
            quasar=params.quasar and has_disk,
            seed=b_rng.next_u32(),
        )
        distance = orbits.orbit_base * b_rng.uniform(0.3, 0.6) * (j + 1)
        ctx.entities.add_body(
            Body(
                id=ctx.entity_id(f"black_hole:{j}"),
                name=f"{ctx.primary.name} X-{j + 1}",
                body_type=BodyType.BLACK_HOLE,
                mass=mass,
                radius=shadow,
                color=BLACK_HOLE_COLOR,
                parent_id=ctx.primary.id,
                system_index=ctx.index,
                orbital_distance=distance,
                orbital_speed=orbits.speed(distance),
                orbital_phase=b_rng.uniform(0.0, 360.0),
                semi_major_axis=distance,
                black_hole=properties,
            )
        )
