"""Arrow schema definitions for every entity table.

Vector fields are flattened into ``<name>_x``/``_y``/``_z`` columns and
per-body metadata (rings, comets, Lagrange markers, black holes, rogue
trajectories) lives in side tables keyed by ``body_id``.
"""

from __future__ import annotations

import pyarrow as pa

ENTITY_TABLE_SCHEMA_VERSION = 1


def _vector(name: str) -> list[tuple[str, pa.DataType]]:
    return [(f"{name}_{axis}", pa.float64()) for axis in "xyz"]


# ---------------------------------------------------------------------------
# Bodies and per-body metadata
# ---------------------------------------------------------------------------

BODIES_SCHEMA = pa.schema(
    [
        ("id", pa.string()),
        ("name", pa.string()),
        ("body_type", pa.string()),
        ("mass", pa.float64()),
        ("radius", pa.float64()),
        ("color", pa.string()),
        ("parent_id", pa.string()),
        ("children", pa.list_(pa.string())),
        ("system_index", pa.int64()),
        ("orbital_distance", pa.float64()),
        ("orbital_speed", pa.float64()),
        ("orbital_phase", pa.float64()),
        ("semi_major_axis", pa.float64()),
        ("eccentricity", pa.float64()),
        ("inclination", pa.float64()),
        ("orbit_rotation_y", pa.float64()),
        ("longitude_of_node", pa.float64()),
    ]
    + _vector("orbit_offset")
    + [
        ("lagrange_host_id", pa.string()),
        ("is_rogue_planet", pa.bool_()),
    ]
)

RINGS_SCHEMA = pa.schema(
    [
        ("body_id", pa.string()),
        ("inner_radius_multiplier", pa.float64()),
        ("outer_radius_multiplier", pa.float64()),
        ("thickness", pa.float64()),
        ("opacity", pa.float64()),
        ("albedo", pa.float64()),
        ("color", pa.string()),
        ("density", pa.float64()),
        ("warp_factor", pa.float64()),
        ("seed", pa.int64()),
    ]
)

COMETS_SCHEMA = pa.schema(
    [
        ("body_id", pa.string()),
        ("is_periodic", pa.bool_()),
        ("perihelion_distance", pa.float64()),
        ("aphelion_distance", pa.float64()),
        ("has_tail", pa.bool_()),
        ("tail_length_base", pa.float64()),
        ("tail_width_base", pa.float64()),
        ("tail_color", pa.string()),
        ("tail_opacity_base", pa.float64()),
        ("activity_falloff_distance", pa.float64()),
        ("seed", pa.int64()),
    ]
)

LAGRANGE_POINTS_SCHEMA = pa.schema(
    [
        ("body_id", pa.string()),
        ("primary_id", pa.string()),
        ("secondary_id", pa.string()),
        ("point_index", pa.int64()),
        ("stable", pa.bool_()),
        ("pair_type", pa.string()),
        ("label", pa.string()),
    ]
)

BLACK_HOLES_SCHEMA = pa.schema(
    [
        ("body_id", pa.string()),
        ("mass_class", pa.string()),
        ("has_accretion_disk", pa.bool_()),
        ("has_relativistic_jet", pa.bool_()),
        ("has_photon_ring", pa.bool_()),
        ("spin", pa.float64()),
        ("shadow_radius", pa.float64()),
        ("accretion_inner_radius", pa.float64()),
        ("accretion_outer_radius", pa.float64()),
        ("disk_thickness", pa.float64()),
        ("disk_brightness", pa.float64()),
        ("disk_opacity", pa.float64()),
        ("disk_temperature", pa.float64()),
        ("disk_clumpiness", pa.float64()),
        ("jet_length", pa.float64()),
        ("jet_opening_angle", pa.float64()),
        ("jet_brightness", pa.float64()),
        ("doppler_beaming_strength", pa.float64()),
        ("lensing_strength", pa.float64()),
        ("rotation_speed_multiplier", pa.float64()),
        ("quasar", pa.bool_()),
        ("seed", pa.int64()),
    ]
)

ROGUE_PLANETS_SCHEMA = pa.schema(
    [("body_id", pa.string()), ("seed", pa.int64())]
    + _vector("initial_position")
    + _vector("velocity")
    + [
        ("color_override", pa.string()),
        ("path_curvature", pa.float64()),
        ("semi_major_axis", pa.float64()),
        ("eccentricity", pa.float64()),
    ]
    + _vector("path_offset")
    + _vector("path_rotation")
    + [
        ("path_period", pa.float64()),
        ("show_trajectory", pa.bool_()),
        ("trajectory_past_window", pa.float64()),
        ("trajectory_future_window", pa.float64()),
    ]
)

# ---------------------------------------------------------------------------
# Containers and secondary populations
# ---------------------------------------------------------------------------

GROUPS_SCHEMA = pa.schema(
    [
        ("id", pa.string()),
        ("name", pa.string()),
        ("color", pa.string()),
    ]
    + _vector("position")
    + [
        ("parent_group_id", pa.string()),
        ("child_ids", pa.list_(pa.string())),
        ("child_kinds", pa.list_(pa.string())),
        ("is_root", pa.bool_()),
    ]
)

SMALL_BODY_FIELDS_SCHEMA = pa.schema(
    [
        ("id", pa.string()),
        ("system_index", pa.int64()),
        ("host_star_id", pa.string()),
        ("inner_radius", pa.float64()),
        ("outer_radius", pa.float64()),
        ("thickness", pa.float64()),
        ("particle_count", pa.int64()),
        ("base_color", pa.string()),
        ("highlight_color", pa.string()),
        ("opacity", pa.float64()),
        ("brightness", pa.float64()),
        ("clumpiness", pa.float64()),
        ("rotation_speed_multiplier", pa.float64()),
        ("belt_type", pa.string()),
        ("region_label", pa.string()),
        ("is_icy", pa.bool_()),
        ("inclination_sigma", pa.float64()),
        ("eccentricity", pa.float64()),
        ("style", pa.string()),
        ("seed", pa.int64()),
    ]
)

BELTS_SCHEMA = pa.schema(
    [
        ("id", pa.string()),
        ("name", pa.string()),
        ("parent_id", pa.string()),
        ("field_id", pa.string()),
        ("inner_radius", pa.float64()),
        ("outer_radius", pa.float64()),
        ("thickness", pa.float64()),
        ("eccentricity", pa.float64()),
        ("inclination", pa.float64()),
        ("asteroid_count", pa.int64()),
        ("color", pa.string()),
        ("belt_type", pa.string()),
        ("region_label", pa.string()),
        ("is_icy", pa.bool_()),
        ("inclination_sigma", pa.float64()),
        ("seed", pa.int64()),
        ("asteroid_ids", pa.list_(pa.string())),
    ]
)

PROTOPLANETARY_DISKS_SCHEMA = pa.schema(
    [
        ("id", pa.string()),
        ("system_index", pa.int64()),
        ("central_star_id", pa.string()),
        ("inner_radius", pa.float64()),
        ("outer_radius", pa.float64()),
        ("thickness", pa.float64()),
        ("particle_count", pa.int64()),
        ("base_color", pa.string()),
        ("highlight_color", pa.string()),
        ("opacity", pa.float64()),
        ("brightness", pa.float64()),
        ("clumpiness", pa.float64()),
        ("rotation_speed_multiplier", pa.float64()),
        ("style", pa.string()),
        ("band_strength", pa.float64()),
        ("band_frequency", pa.float64()),
        ("gap_sharpness", pa.float64()),
        ("inner_glow_strength", pa.float64()),
        ("noise_scale", pa.float64()),
        ("noise_strength", pa.float64()),
        ("spiral_strength", pa.float64()),
        ("spiral_arm_count", pa.int64()),
        ("edge_softness", pa.float64()),
        ("temperature_gradient", pa.float64()),
        ("seed", pa.int64()),
    ]
)

NEBULAE_SCHEMA = pa.schema(
    [
        ("id", pa.string()),
        ("name", pa.string()),
    ]
    + _vector("position")
    + [("radius", pa.float64())]
    + _vector("dimensions")
    + [
        ("density", pa.float64()),
        ("brightness", pa.float64()),
        ("base_color", pa.string()),
        ("accent_color", pa.string()),
        ("noise_scale", pa.float64()),
        ("noise_detail", pa.int64()),
        ("seed", pa.int64()),
        ("associated_group_ids", pa.list_(pa.string())),
    ]
)

ENTITY_TABLE_SCHEMAS: dict[str, pa.Schema] = {
    "bodies": BODIES_SCHEMA,
    "rings": RINGS_SCHEMA,
    "comets": COMETS_SCHEMA,
    "lagrange_points": LAGRANGE_POINTS_SCHEMA,
    "black_holes": BLACK_HOLES_SCHEMA,
    "rogue_planets": ROGUE_PLANETS_SCHEMA,
    "groups": GROUPS_SCHEMA,
    "small_body_fields": SMALL_BODY_FIELDS_SCHEMA,
    "belts": BELTS_SCHEMA,
    "protoplanetary_disks": PROTOPLANETARY_DISKS_SCHEMA,
    "nebulae": NEBULAE_SCHEMA,
}
