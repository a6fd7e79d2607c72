"""Protoplanetary disks around central stars."""

from __future__ import annotations

from cosmogen.domain.entities import ProtoplanetaryDisk
from cosmogen.generation.bodies import SystemContext
from cosmogen.mapping.disks import DISK_STYLES, STYLE_THICKNESS


def generate_protoplanetary_disk(ctx: SystemContext) -> None:
    disks = ctx.params.protoplanetary_disks
    if not disks.enabled or ctx.center is None:
        return
    rng = ctx.rng.fork("disks")
    if not rng.chance(disks.probability):
        return
    base = ctx.params.orbits.orbit_base
    style = rng.weighted(DISK_STYLES, disks.style_weights)
    inner = max(base * disks.inner_radius_factor.sample(rng), ctx.primary.radius * 1.5)
    outer = max(base * disks.outer_radius_factor.sample(rng), inner * 1.5)
    base_color, highlight_color = rng.choice(disks.palette)
    disk = ProtoplanetaryDisk(
        id=ctx.entity_id("disk:0"),
        system_index=ctx.index,
        central_star_id=ctx.primary.id,
        inner_radius=inner,
        outer_radius=outer,
        thickness=STYLE_THICKNESS[style].sample(rng),
        particle_count=disks.particle_count.sample(rng),
        base_color=base_color,
        highlight_color=highlight_color,
        opacity=disks.opacity.sample(rng),
        brightness=disks.brightness.sample(rng),
        clumpiness=disks.clumpiness.sample(rng),
        rotation_speed_multiplier=rng.uniform(0.5, 1.5),
        style=style,
        band_strength=disks.band_strength.sample(rng),
        band_frequency=disks.band_frequency.sample(rng),
        gap_sharpness=disks.gap_sharpness.sample(rng),
        inner_glow_strength=rng.uniform(0.3, 0.8),
        noise_scale=disks.noise_scale.sample(rng),
        noise_strength=disks.noise_strength.sample(rng),
        spiral_strength=disks.spiral_strength.sample(rng),
        spiral_arm_count=disks.spiral_arms.sample(rng),
        edge_softness=rng.uniform(0.2, 0.6),
        temperature_gradient=rng.uniform(0.3, 1.0),
        seed=rng.next_u32(),
    )
    ctx.entities.protoplanetary_disks[disk.id] = disk
