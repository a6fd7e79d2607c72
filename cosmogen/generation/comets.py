"""Comets on eccentric orbits around the central star."""

from __future__ import annotations

from cosmogen.config.constants import COMET_COLOR
from cosmogen.domain.entities import Body, BodyType, CometMeta
from cosmogen.generation.bodies import SystemContext

COMET_RADIUS = 0.05
COMET_MASS = 0.01


def generate_comets(ctx: SystemContext) -> None:
    comets = ctx.params.comets
    if not comets.enabled or ctx.center is None:
        return
    rng = ctx.rng.fork("comets")
    count = min(rng.poisson(comets.mean_per_system), comets.max_per_system)
    ref = ctx.outermost_distance()
    orbits = ctx.params.orbits
    for i in range(count):
        c_rng = rng.fork(f"comet:{i}")
        short = c_rng.chance(comets.short_period_fraction)
        a = ref * (comets.short_semi_major if short else comets.long_semi_major).sample(c_rng)
        e = (comets.short_eccentricity if short else comets.long_eccentricity).sample(c_rng)
        incl_max = comets.short_inclination_max if short else comets.long_inclination_max
        inclination = c_rng.uniform(-incl_max, incl_max)
        node = c_rng.uniform(0.0, 360.0)
        phase = c_rng.uniform(0.0, 360.0)
        has_tail = c_rng.chance(comets.tail_probability)
        meta = CometMeta(
            is_periodic=short,
            perihelion_distance=a * (1.0 - e),
            aphelion_distance=a * (1.0 + e),
            has_tail=has_tail,
            tail_length_base=comets.tail_length.sample(c_rng),
            tail_width_base=comets.tail_width.sample(c_rng),
            tail_color=c_rng.choice(comets.tail_colors),
            tail_opacity_base=comets.tail_opacity.sample(c_rng),
            activity_falloff_distance=ref * comets.activity_falloff.sample(c_rng),
            seed=c_rng.next_u32(),
        )
        mass = COMET_MASS * c_rng.uniform(0.5, 2.0)
        ctx.entities.add_body(
            Body(
                id=ctx.entity_id(f"comet:{i}"),
                name=f"C/{ctx.index}-{i + 1} {ctx.primary.name}",
                body_type=BodyType.COMET,
                mass=mass,
                radius=COMET_RADIUS,
                color=COMET_COLOR,
                parent_id=ctx.primary.id,
                system_index=ctx.index,
                orbital_distance=a,
                orbital_speed=orbits.speed(a),
                orbital_phase=phase,
                semi_major_axis=a,
                eccentricity=e,
                inclination=inclination,
                longitude_of_node=node,
                comet=meta,
            )
        )
