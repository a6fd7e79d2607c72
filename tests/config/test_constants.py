import re

from cosmogen.config.constants import (
    BLACK_HOLE_COLOR,
    CONSTELLATIONS,
    DEFAULT_TOPOLOGY_PRESET,
    GREEK_LETTERS,
    GROUP_COLORS,
    INTERMEDIATE_BLACK_HOLE_MAX_MASS,
    MAX_BELTS_PER_SYSTEM,
    MAX_DEPTH_LIMIT,
    MAX_REPEAT_COUNT,
    MAX_STARS_PER_SYSTEM,
    MAX_SYSTEMS,
    MOON_COLOR,
    PLANET_COLORS,
    POISSON_NORMAL_THRESHOLD,
    STAR_COLOR_BY_MASS,
    STELLAR_BLACK_HOLE_MAX_MASS,
)
from cosmogen.domain.presets import default_registry

HEX_COLOR = re.compile(r"^#[0-9A-F]{6}$")


def test_limits_are_positive_ints() -> None:
    for value in (MAX_SYSTEMS, MAX_DEPTH_LIMIT, MAX_BELTS_PER_SYSTEM, MAX_REPEAT_COUNT):
        assert isinstance(value, int) and value > 0


def test_star_multiplicity_is_ternary() -> None:
    assert MAX_STARS_PER_SYSTEM == 3


def test_poisson_threshold_is_positive() -> None:
    assert POISSON_NORMAL_THRESHOLD > 0


def test_default_preset_is_registered() -> None:
    assert default_registry().get(DEFAULT_TOPOLOGY_PRESET).id == DEFAULT_TOPOLOGY_PRESET


def test_star_colors_descend_to_zero_fallback() -> None:
    thresholds = [mass for mass, _ in STAR_COLOR_BY_MASS]
    assert thresholds == sorted(thresholds, reverse=True)
    assert thresholds[-1] == 0.0


def test_palette_entries_are_hex_colors() -> None:
    colors = [color for _, color in STAR_COLOR_BY_MASS]
    colors += [*PLANET_COLORS, *GROUP_COLORS, MOON_COLOR, BLACK_HOLE_COLOR]
    assert all(HEX_COLOR.match(color) for color in colors)


def test_black_hole_class_bounds_are_ordered() -> None:
    assert 0 < STELLAR_BLACK_HOLE_MAX_MASS < INTERMEDIATE_BLACK_HOLE_MAX_MASS


def test_name_tables_are_non_empty() -> None:
    assert GREEK_LETTERS and CONSTELLATIONS
