"""Grouping mapper: how many galaxy groups and how deeply they nest."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cosmogen.config.constants import GROUP_POSITION_SIGMA
from cosmogen.config.types import GroupStructureMode
from cosmogen.mapping.common import CountRange

NESTING_PROBABILITY: dict[GroupStructureMode, float] = {
    GroupStructureMode.FLAT: 0.0,
    GroupStructureMode.GALAXY_CLUSTER: 0.2,
    GroupStructureMode.DEEP_HIERARCHY: 0.5,
}


@dataclass(frozen=True)
class GroupingSettings:
    enable_groups: bool
    target_galaxy_count: int
    group_structure_mode: GroupStructureMode


@dataclass(frozen=True)
class GroupingParams:
    enabled: bool
    group_count: CountRange
    nesting_probability: float
    position_sigma: float


def group_count_range(target: int, mode: GroupStructureMode) -> CountRange:
    if mode is GroupStructureMode.GALAXY_CLUSTER:
        lo = max(2, math.floor(target * 0.7))
        return CountRange(lo, max(lo, target))
    if mode is GroupStructureMode.DEEP_HIERARCHY:
        return CountRange(max(1, math.floor(target * 0.5)), math.ceil(target * 1.5))
    return CountRange(target, target)


def map_grouping(settings: GroupingSettings) -> GroupingParams:
    return GroupingParams(
        enabled=settings.enable_groups,
        group_count=group_count_range(settings.target_galaxy_count, settings.group_structure_mode),
        nesting_probability=NESTING_PROBABILITY[settings.group_structure_mode],
        position_sigma=GROUP_POSITION_SIGMA,
    )
