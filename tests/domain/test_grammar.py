"""Tests for cosmogen.domain.grammar module."""

from __future__ import annotations

import pytest

from cosmogen.domain.grammar import (
    AbstractNode,
    ExpansionParams,
    FixedRepeat,
    GeometricRepeat,
    Grammar,
    GrammarSymbol,
    NodeType,
    PoissonRepeat,
    ProductionRule,
    StarCountTable,
    UniformRepeat,
    expand,
)
from cosmogen.domain.presets import CLASSIC, DEEP_HIERARCHY, MOON_RICH, TopologyPreset
from cosmogen.domain.prng import Generator
from cosmogen.errors import InternalInvariantViolation

S = GrammarSymbol


def _grammar(**productions: tuple[ProductionRule, ...]) -> Grammar:
    base = {
        S.SYSTEM: (ProductionRule(weight=1.0, expand=(S.STARS, S.PLANETS)),),
        S.STARS: (ProductionRule(weight=1.0, expand=(S.STAR,), max_count=1),),
        S.PLANETS: (ProductionRule(weight=1.0, expand=(S.PLANET,), repeat=FixedRepeat(2)),),
    }
    base.update({S[name.upper()]: rules for name, rules in productions.items()})
    return Grammar(productions=base, max_depth=4, star_count=StarCountTable(1.0, 0.0, 0.0))


def _depths(root: AbstractNode) -> list[int]:
    return [node.depth for node in root.walk()]


class TestGrammarValidation:
    def test_valid_grammar_builds(self) -> None:
        grammar = _grammar()
        assert grammar.rules_for(S.PLANETS)
        assert grammar.rules_for(S.MOON) == ()

    def test_missing_group_productions_rejected(self) -> None:
        with pytest.raises(InternalInvariantViolation, match="moons"):
            _grammar(planet=(ProductionRule(weight=1.0, expand=(S.MOONS,)),))

    def test_negative_weight_rejected(self) -> None:
        with pytest.raises(InternalInvariantViolation):
            _grammar(
                planet=(
                    ProductionRule(weight=2.0),
                    ProductionRule(weight=-1.0),
                )
            )

    def test_all_zero_weights_rejected(self) -> None:
        with pytest.raises(InternalInvariantViolation, match="sum to zero"):
            _grammar(planet=(ProductionRule(weight=0.0),))

    def test_min_above_max_rejected(self) -> None:
        with pytest.raises(InternalInvariantViolation, match="min_count"):
            _grammar(
                planets=(
                    ProductionRule(
                        weight=1.0,
                        expand=(S.PLANET,),
                        repeat=FixedRepeat(1),
                        min_count=3,
                        max_count=2,
                    ),
                )
            )

    def test_bad_geometric_p_rejected(self) -> None:
        with pytest.raises(InternalInvariantViolation):
            _grammar(
                planets=(
                    ProductionRule(weight=1.0, expand=(S.PLANET,), repeat=GeometricRepeat(p=1.0)),
                )
            )

    def test_bad_uniform_repeat_rejected(self) -> None:
        with pytest.raises(InternalInvariantViolation):
            _grammar(
                planets=(
                    ProductionRule(weight=1.0, expand=(S.PLANET,), repeat=UniformRepeat(3, 1)),
                )
            )

    def test_negative_poisson_rejected(self) -> None:
        with pytest.raises(InternalInvariantViolation):
            _grammar(
                planets=(
                    ProductionRule(weight=1.0, expand=(S.PLANET,), repeat=PoissonRepeat(-1.0)),
                )
            )

    def test_nested_system_rejected(self) -> None:
        with pytest.raises(InternalInvariantViolation, match="nested"):
            _grammar(planet=(ProductionRule(weight=1.0, expand=(S.SYSTEM,)),))

    def test_star_table_needs_positive_sum(self) -> None:
        with pytest.raises(InternalInvariantViolation):
            Grammar(
                productions={S.SYSTEM: (ProductionRule(weight=1.0, expand=(S.STARS,)),)},
                max_depth=2,
                star_count=StarCountTable(0.0, 0.0, 0.0),
            )

    def test_zero_depth_rejected(self) -> None:
        with pytest.raises(InternalInvariantViolation):
            Grammar(
                productions={S.SYSTEM: (ProductionRule(weight=1.0, expand=(S.STARS,)),)},
                max_depth=0,
            )

    def test_productions_are_frozen(self) -> None:
        grammar = _grammar()
        with pytest.raises(TypeError):
            grammar.productions[S.MOON] = ()  # type: ignore[index]


class TestAbstractNode:
    def test_path_keys_and_ordinals(self) -> None:
        root = AbstractNode(NodeType.SYSTEM, "", 0, S.SYSTEM)
        star = root.add_child(S.STAR)
        planet_a = root.add_child(S.PLANET)
        planet_b = root.add_child(S.PLANET)
        moon = planet_b.add_child(S.MOON)
        assert star.key == "star:0"
        assert planet_a.key == "planet:0"
        assert planet_b.key == "planet:1"
        assert moon.key == "planet:1/moon:0"
        assert moon.depth == 2

    def test_submoon_is_a_moon_node(self) -> None:
        root = AbstractNode(NodeType.SYSTEM, "", 0, S.SYSTEM)
        moon = root.add_child(S.PLANET).add_child(S.MOON)
        sub = moon.add_child(S.SUBMOON)
        assert sub.node_type is NodeType.MOON
        assert sub.symbol is S.SUBMOON
        assert sub.key == "planet:0/moon:0/moon:0"

    def test_walk_is_depth_first_in_creation_order(self) -> None:
        root = AbstractNode(NodeType.SYSTEM, "", 0, S.SYSTEM)
        p0 = root.add_child(S.PLANET)
        p0.add_child(S.MOON)
        root.add_child(S.PLANET)
        assert [n.key for n in root.walk()] == ["", "planet:0", "planet:0/moon:0", "planet:1"]

    def test_system_ancestor(self) -> None:
        root = AbstractNode(NodeType.SYSTEM, "", 0, S.SYSTEM)
        moon = root.add_child(S.PLANET).add_child(S.MOON)
        assert moon.system_ancestor() is root


class TestExpand:
    def test_deterministic_for_same_stream(self) -> None:
        a = expand(CLASSIC.grammar, Generator.from_seed("alpha"))
        b = expand(CLASSIC.grammar, Generator.from_seed("alpha"))
        assert [n.key for n in a.walk()] == [n.key for n in b.walk()]

    def test_fixed_repeat_count(self) -> None:
        root = expand(_grammar(), Generator.from_seed(1))
        counts = root.count_by_type()
        assert counts[NodeType.STAR] == 1
        assert counts[NodeType.PLANET] == 2

    def test_planets_attach_to_system(self) -> None:
        grammar = _grammar(
            star=(ProductionRule(weight=1.0, expand=(S.PLANETS,)),),
        )
        root = expand(grammar, Generator.from_seed(2))
        planets = [n for n in root.walk() if n.node_type is NodeType.PLANET]
        assert planets
        assert all(p.parent is root and p.depth == 1 for p in planets)

    def test_empty_production_is_valid(self) -> None:
        grammar = _grammar(planets=(ProductionRule(weight=1.0),))
        root = expand(grammar, Generator.from_seed(3))
        assert root.count_by_type()[NodeType.PLANET] == 0

    def test_min_max_clamp_applies(self) -> None:
        grammar = _grammar(
            planet=(ProductionRule(weight=1.0, expand=(S.MOONS,)),),
            moons=(
                ProductionRule(
                    weight=1.0,
                    expand=(S.MOON,),
                    repeat=PoissonRepeat(40.0),
                    min_count=2,
                    max_count=5,
                ),
            ),
        )
        for seed in range(30):
            root = expand(grammar, Generator.from_seed(seed))
            for planet in root.children:
                if planet.node_type is NodeType.PLANET:
                    assert 2 <= len(planet.children) <= 5

    @pytest.mark.parametrize("preset", [CLASSIC, MOON_RICH, DEEP_HIERARCHY])
    def test_depth_never_exceeds_limit(self, preset: TopologyPreset) -> None:
        grammar = preset.grammar
        for seed in range(40):
            for limit in (1, 2, 3):
                root = expand(grammar, Generator.from_seed(seed), ExpansionParams(max_depth=limit))
                assert max(_depths(root)) <= limit

    def test_depth_one_has_no_moons(self) -> None:
        root = expand(MOON_RICH.grammar, Generator.from_seed(4), ExpansionParams(max_depth=1))
        counts = root.count_by_type()
        assert counts[NodeType.MOON] == 0
        assert counts[NodeType.PLANET] >= 3

    def test_submoons_only_when_allowed(self) -> None:
        found = False
        for seed in range(20):
            root = expand(DEEP_HIERARCHY.grammar, Generator.from_seed(seed))
            found = found or any(n.symbol is S.SUBMOON for n in root.walk())
        assert found
        for seed in range(20):
            root = expand(CLASSIC.grammar, Generator.from_seed(seed))
            assert not any(n.symbol is S.SUBMOON for n in root.walk())

    def test_star_count_capped_by_max_stars(self) -> None:
        params = ExpansionParams(star_weights=(0.0, 0.0, 1.0), max_stars=2)
        for seed in range(20):
            root = expand(CLASSIC.grammar, Generator.from_seed(seed), params)
            assert root.count_by_type()[NodeType.STAR] == 2

    def test_star_count_capped_by_rule_max(self) -> None:
        grammar = Grammar(
            productions={
                S.SYSTEM: (ProductionRule(weight=1.0, expand=(S.STARS,)),),
                S.STARS: (ProductionRule(weight=1.0, expand=(S.STAR,), max_count=1),),
            },
            max_depth=2,
        )
        params = ExpansionParams(star_weights=(0.0, 0.0, 1.0))
        root = expand(grammar, Generator.from_seed(5), params)
        assert root.count_by_type()[NodeType.STAR] == 1

    def test_classic_uses_caller_star_weights(self) -> None:
        params = ExpansionParams(star_weights=(0.0, 1.0, 0.0))
        for seed in range(10):
            root = expand(CLASSIC.grammar, Generator.from_seed(seed), params)
            assert root.count_by_type()[NodeType.STAR] == 2

    def test_classic_planet_count_follows_density(self) -> None:
        sparse = ExpansionParams(planet_geometric_p=0.9)
        dense = ExpansionParams(planet_geometric_p=0.2)

        def total(params: ExpansionParams) -> int:
            return sum(
                expand(CLASSIC.grammar, Generator.from_seed(s), params).count_by_type()[
                    NodeType.PLANET
                ]
                for s in range(200)
            )

        assert total(dense) > total(sparse)
