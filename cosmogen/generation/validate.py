"""Structural checks on an assembled entity set.

Any failure is a programming error in assembly and raises
``InternalInvariantViolation``; a generation call never returns an entity
set that fails these checks.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping

import networkx as nx

from cosmogen.domain.entities import KEYED_COLLECTIONS, BodyType, Entities
from cosmogen.domain.grammar import NodeType
from cosmogen.errors import InternalInvariantViolation

_TREE_BODY_TYPES: dict[NodeType, BodyType] = {
    NodeType.STAR: BodyType.STAR,
    NodeType.PLANET: BodyType.PLANET,
    NodeType.MOON: BodyType.MOON,
}


def _check_unique_ids(entities: Entities) -> None:
    counts: Counter[str] = Counter()
    for name in KEYED_COLLECTIONS:
        collection: Mapping[str, object] = getattr(entities, name)
        for key, record in collection.items():
            record_id = getattr(record, "id", key)
            if record_id != key:
                raise InternalInvariantViolation(
                    f"{name} record keyed {key!r} has id {record_id!r}"
                )
            counts[key] += 1
    duplicates = sorted(k for k, n in counts.items() if n > 1)
    if duplicates:
        raise InternalInvariantViolation(f"entity ids collide: {', '.join(duplicates)}")


def _check_acyclic(graph: nx.DiGraph, what: str) -> None:
    if not nx.is_directed_acyclic_graph(graph):
        cycle = nx.find_cycle(graph)
        raise InternalInvariantViolation(f"{what} hierarchy has a cycle: {cycle}")


def _check_bodies(entities: Entities) -> None:
    bodies = entities.bodies
    graph = nx.DiGraph()
    graph.add_nodes_from(bodies)
    for body in bodies.values():
        if body.parent_id is not None:
            if body.parent_id not in bodies:
                raise InternalInvariantViolation(
                    f"body {body.id!r} references missing parent {body.parent_id!r}"
                )
            graph.add_edge(body.parent_id, body.id)
    # Parent links are checked before any child list.
    for body in bodies.values():
        for child_id in body.children:
            child = bodies.get(child_id)
            if child is None or child.parent_id != body.id:
                raise InternalInvariantViolation(
                    f"body {body.id!r} lists {child_id!r} as a child it does not own"
                )
        if body.lagrange_host_id is not None:
            host = bodies.get(body.lagrange_host_id)
            if host is None or host.body_type is not BodyType.LAGRANGE_POINT:
                raise InternalInvariantViolation(
                    f"body {body.id!r} references missing Lagrange marker {body.lagrange_host_id!r}"
                )
        meta = body.lagrange_point
        if meta is not None and (meta.primary_id not in bodies or meta.secondary_id not in bodies):
            raise InternalInvariantViolation(f"Lagrange marker {body.id!r} has a dangling pair")
    for root_id in entities.root_ids:
        root = bodies.get(root_id)
        if root is None or root.parent_id is not None:
            raise InternalInvariantViolation(f"root {root_id!r} is missing or has a parent")
    _check_acyclic(graph, "body")


def _check_groups(entities: Entities) -> None:
    groups = entities.groups
    roots = set(entities.root_ids)
    graph = nx.DiGraph()
    graph.add_nodes_from(groups)
    for group in groups.values():
        if group.parent_group_id is not None:
            if group.parent_group_id not in groups:
                raise InternalInvariantViolation(
                    f"group {group.id!r} references missing parent {group.parent_group_id!r}"
                )
            graph.add_edge(group.parent_group_id, group.id)
        for child in group.children:
            known = roots if child.kind == "system" else groups
            if child.id not in known:
                raise InternalInvariantViolation(
                    f"group {group.id!r} references missing {child.kind} {child.id!r}"
                )
    for root_group_id in entities.root_group_ids:
        if root_group_id not in groups or groups[root_group_id].parent_group_id is not None:
            raise InternalInvariantViolation(f"root group {root_group_id!r} is not a root")
    _check_acyclic(graph, "group")


def _check_attachments(entities: Entities) -> None:
    bodies = entities.bodies
    for small_field in entities.small_body_fields.values():
        if small_field.host_star_id not in bodies:
            raise InternalInvariantViolation(f"field {small_field.id!r} has no host star")
    for belt in entities.belts.values():
        if belt.parent_id not in bodies or belt.field_id not in entities.small_body_fields:
            raise InternalInvariantViolation(f"belt {belt.id!r} has a dangling reference")
    for disk in entities.protoplanetary_disks.values():
        if disk.central_star_id not in bodies:
            raise InternalInvariantViolation(f"disk {disk.id!r} has no central star")
    for nebula in entities.nebulae.values():
        missing = [g for g in nebula.associated_group_ids if g not in entities.groups]
        if missing:
            raise InternalInvariantViolation(f"nebula {nebula.id!r} references missing groups")


def check_tree_counts(
    entities: Entities, tree_counts: Mapping[int, Mapping[NodeType, int]]
) -> None:
    """Per system, tree node counts must equal the matching entity counts."""
    actual: dict[int, Counter[BodyType]] = {}
    for body in entities.bodies.values():
        if body.system_index is not None and not body.is_rogue_planet:
            actual.setdefault(body.system_index, Counter())[body.body_type] += 1
    for index, counts in tree_counts.items():
        seen = actual.get(index, Counter())
        for node_type, body_type in _TREE_BODY_TYPES.items():
            if counts.get(node_type, 0) != seen[body_type]:
                raise InternalInvariantViolation(
                    f"system {index}: tree has {counts.get(node_type, 0)} {node_type.value} "
                    f"nodes but {seen[body_type]} entities"
                )


def check_integrity(
    entities: Entities, tree_counts: Mapping[int, Mapping[NodeType, int]] | None = None
) -> None:
    """Run every structural check; raises ``InternalInvariantViolation``."""
    _check_unique_ids(entities)
    _check_bodies(entities)
    _check_groups(entities)
    _check_attachments(entities)
    if tree_counts is not None:
        check_tree_counts(entities, tree_counts)
