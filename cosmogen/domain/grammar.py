"""Stochastic grammar for system topology and its expansion engine.

A ``Grammar`` maps symbols to weighted ``ProductionRule`` lists. Expansion
starts from a ``system`` root and rewrites symbols into an abstract tree of
``AbstractNode`` objects (system / star / planet / moon). Two symbol kinds
exist:

- group symbols (``stars``, ``planets``, ``moons``, ``submoons``) pick one
  rule and instantiate a drawn number of member bodies;
- body symbols (``star``, ``planet``, ``moon``, ``submoon``) create one node
  and then expand with their own rules, if any.

Expansion uses an explicit work stack (depth-first, children in order), so
deep presets cannot exhaust the interpreter stack.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from cosmogen.config.constants import MAX_REPEAT_COUNT, MAX_STARS_PER_SYSTEM
from cosmogen.domain.prng import Generator
from cosmogen.errors import InternalInvariantViolation

DEFAULT_PLANET_GEOMETRIC_P = 0.4
DEFAULT_MOON_GEOMETRIC_P = 0.3
SUBMOON_P_FACTOR = 1.5
MAX_SUBMOON_GEOMETRIC_P = 0.95
DEFAULT_STAR_WEIGHTS = (0.65, 0.25, 0.10)


class GrammarSymbol(Enum):
    SYSTEM = "system"
    STAR = "star"
    STARS = "stars"
    PLANET = "planet"
    PLANETS = "planets"
    MOON = "moon"
    MOONS = "moons"
    SUBMOON = "submoon"
    SUBMOONS = "submoons"


class NodeType(Enum):
    SYSTEM = "system"
    STAR = "star"
    PLANET = "planet"
    MOON = "moon"


BODY_SYMBOLS: Mapping[GrammarSymbol, NodeType] = MappingProxyType(
    {
        GrammarSymbol.STAR: NodeType.STAR,
        GrammarSymbol.PLANET: NodeType.PLANET,
        GrammarSymbol.MOON: NodeType.MOON,
        GrammarSymbol.SUBMOON: NodeType.MOON,
    }
)
"""Symbols that create exactly one node, and the node type they create."""

GROUP_SYMBOLS: Mapping[GrammarSymbol, GrammarSymbol] = MappingProxyType(
    {
        GrammarSymbol.STARS: GrammarSymbol.STAR,
        GrammarSymbol.PLANETS: GrammarSymbol.PLANET,
        GrammarSymbol.MOONS: GrammarSymbol.MOON,
        GrammarSymbol.SUBMOONS: GrammarSymbol.SUBMOON,
    }
)
"""Symbols that resolve to a counted run of member bodies."""

# ---------------------------------------------------------------------------
# Repeat distributions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GeometricRepeat:
    """Geometric count; ``p=None`` defers to the density-derived default."""

    p: float | None = None

    def sample(self, rng: Generator, default_p: float) -> int:
        return rng.geometric(default_p if self.p is None else self.p)


@dataclass(frozen=True)
class FixedRepeat:
    count: int

    def sample(self, rng: Generator, default_p: float) -> int:
        return self.count


@dataclass(frozen=True)
class UniformRepeat:
    min: int
    max: int

    def sample(self, rng: Generator, default_p: float) -> int:
        return rng.integer(self.min, self.max)


@dataclass(frozen=True)
class PoissonRepeat:
    lam: float

    def sample(self, rng: Generator, default_p: float) -> int:
        return rng.poisson(self.lam)


RepeatDistribution = GeometricRepeat | FixedRepeat | UniformRepeat | PoissonRepeat

# ---------------------------------------------------------------------------
# Rules and grammar
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProductionRule:
    """One weighted rewrite; ``repeat`` multiplies the trailing symbol."""

    weight: float
    expand: tuple[GrammarSymbol, ...] = ()
    repeat: RepeatDistribution | None = None
    min_count: int | None = None
    max_count: int | None = None


@dataclass(frozen=True)
class StarCountTable:
    """Probabilities of single, binary and ternary systems."""

    single: float
    binary: float
    ternary: float

    def weights(self) -> tuple[float, float, float]:
        return (self.single, self.binary, self.ternary)


@dataclass(frozen=True)
class Grammar:
    """Immutable symbol table plus expansion limits.

    ``star_count=None`` means the star table comes from the caller's
    expansion parameters.
    """

    productions: Mapping[GrammarSymbol, tuple[ProductionRule, ...]]
    max_depth: int
    star_count: StarCountTable | None = None
    axiom: GrammarSymbol = GrammarSymbol.SYSTEM
    allow_sub_moons: bool = False
    default_planet_geometric_p: float | None = None
    default_moon_geometric_p: float | None = None

    def __post_init__(self) -> None:
        frozen = MappingProxyType({sym: tuple(rules) for sym, rules in self.productions.items()})
        object.__setattr__(self, "productions", frozen)
        validate_grammar(self)

    def rules_for(self, symbol: GrammarSymbol) -> tuple[ProductionRule, ...]:
        return self.productions.get(symbol, ())


def _validate_repeat(symbol: GrammarSymbol, repeat: RepeatDistribution) -> None:
    if isinstance(repeat, GeometricRepeat):
        if repeat.p is not None and not 0.0 < repeat.p < 1.0:
            raise InternalInvariantViolation(f"{symbol.value}: geometric p must be in (0, 1)")
    elif isinstance(repeat, FixedRepeat):
        if repeat.count < 0:
            raise InternalInvariantViolation(f"{symbol.value}: fixed count must be >= 0")
    elif isinstance(repeat, UniformRepeat):
        if not 0 <= repeat.min <= repeat.max:
            raise InternalInvariantViolation(
                f"{symbol.value}: uniform repeat needs 0 <= min <= max"
            )
    elif isinstance(repeat, PoissonRepeat):
        if not math.isfinite(repeat.lam) or repeat.lam < 0:
            raise InternalInvariantViolation(f"{symbol.value}: poisson lambda must be >= 0")
    else:
        raise InternalInvariantViolation(f"{symbol.value}: unknown repeat distribution {repeat!r}")


def validate_grammar(grammar: Grammar) -> None:
    """Raise ``InternalInvariantViolation`` if the grammar is malformed."""
    if grammar.axiom is not GrammarSymbol.SYSTEM:
        raise InternalInvariantViolation("grammar axiom must be the system symbol")
    if grammar.max_depth < 1:
        raise InternalInvariantViolation("grammar max_depth must be >= 1")
    if grammar.star_count is not None:
        weights = grammar.star_count.weights()
        if any(w < 0 or not math.isfinite(w) for w in weights) or sum(weights) <= 0:
            raise InternalInvariantViolation("star count weights must be >= 0 with a positive sum")
    if not grammar.rules_for(GrammarSymbol.SYSTEM):
        raise InternalInvariantViolation("grammar has no productions for the system symbol")

    referenced: set[GrammarSymbol] = set()
    for symbol, rules in grammar.productions.items():
        if not isinstance(symbol, GrammarSymbol):
            raise InternalInvariantViolation(f"undeclared grammar symbol {symbol!r}")
        if not rules:
            raise InternalInvariantViolation(f"{symbol.value}: empty production list")
        if sum(rule.weight for rule in rules) <= 0:
            raise InternalInvariantViolation(f"{symbol.value}: rule weights sum to zero")
        for rule in rules:
            if not math.isfinite(rule.weight) or rule.weight < 0:
                raise InternalInvariantViolation(f"{symbol.value}: rule weight must be >= 0")
            for expanded in rule.expand:
                if not isinstance(expanded, GrammarSymbol):
                    raise InternalInvariantViolation(
                        f"{symbol.value}: rule references undeclared symbol {expanded!r}"
                    )
                if expanded is GrammarSymbol.SYSTEM:
                    raise InternalInvariantViolation(f"{symbol.value}: system cannot be nested")
                referenced.add(expanded)
            if rule.repeat is not None:
                _validate_repeat(symbol, rule.repeat)
            if rule.min_count is not None and rule.min_count < 0:
                raise InternalInvariantViolation(f"{symbol.value}: min_count must be >= 0")
            if (
                rule.min_count is not None
                and rule.max_count is not None
                and rule.min_count > rule.max_count
            ):
                raise InternalInvariantViolation(f"{symbol.value}: min_count exceeds max_count")

    for symbol in referenced - {GrammarSymbol.STARS}:
        if symbol in GROUP_SYMBOLS and not grammar.rules_for(symbol):
            raise InternalInvariantViolation(
                f"rule references group symbol {symbol.value!r} without productions"
            )


# ---------------------------------------------------------------------------
# Abstract tree
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class AbstractNode:
    """Node of the abstract topology tree.

    ``key`` is a stable path such as ``planet:2/moon:1``; the root's key is
    empty. Ordinals count siblings of the same node type.
    """

    node_type: NodeType
    key: str
    depth: int
    symbol: GrammarSymbol
    parent: AbstractNode | None = field(default=None, repr=False)
    children: list[AbstractNode] = field(default_factory=list, repr=False)
    _ordinals: Counter[NodeType] = field(default_factory=Counter, repr=False)

    def add_child(self, symbol: GrammarSymbol) -> AbstractNode:
        node_type = BODY_SYMBOLS[symbol]
        ordinal = self._ordinals[node_type]
        self._ordinals[node_type] += 1
        segment = f"{node_type.value}:{ordinal}"
        child = AbstractNode(
            node_type=node_type,
            key=f"{self.key}/{segment}" if self.key else segment,
            depth=self.depth + 1,
            symbol=symbol,
            parent=self,
        )
        self.children.append(child)
        return child

    def walk(self) -> Iterator[AbstractNode]:
        """Pre-order traversal, children in creation order."""
        stack: list[AbstractNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def count_by_type(self) -> Counter[NodeType]:
        return Counter(node.node_type for node in self.walk())

    def system_ancestor(self) -> AbstractNode:
        node: AbstractNode | None = self
        while node is not None and node.node_type is not NodeType.SYSTEM:
            node = node.parent
        if node is None:
            raise InternalInvariantViolation(f"node {self.key!r} has no system ancestor")
        return node


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ExpansionParams:
    """Caller-side knobs layered over a grammar (usually mapped from config)."""

    star_weights: tuple[float, float, float] | None = None
    planet_geometric_p: float | None = None
    moon_geometric_p: float | None = None
    max_depth: int | None = None
    max_stars: int = MAX_STARS_PER_SYSTEM


class _Expander:
    def __init__(self, grammar: Grammar, rng: Generator, params: ExpansionParams) -> None:
        self.grammar = grammar
        self.rng = rng
        self.params = params
        self.max_depth = (
            grammar.max_depth
            if params.max_depth is None
            else min(grammar.max_depth, params.max_depth)
        )
        planet_p = params.planet_geometric_p
        if planet_p is None:
            planet_p = grammar.default_planet_geometric_p or DEFAULT_PLANET_GEOMETRIC_P
        moon_p = params.moon_geometric_p
        if moon_p is None:
            moon_p = grammar.default_moon_geometric_p or DEFAULT_MOON_GEOMETRIC_P
        self.default_p = {
            GrammarSymbol.PLANETS: planet_p,
            GrammarSymbol.MOONS: moon_p,
            GrammarSymbol.SUBMOONS: min(MAX_SUBMOON_GEOMETRIC_P, moon_p * SUBMOON_P_FACTOR),
        }

    def run(self) -> AbstractNode:
        root = AbstractNode(NodeType.SYSTEM, "", 0, GrammarSymbol.SYSTEM)
        stack: list[tuple[AbstractNode, GrammarSymbol]] = []
        self._push(stack, root, self._rule_symbols(GrammarSymbol.SYSTEM, None))
        while stack:
            parent, symbol = stack.pop()
            if symbol is GrammarSymbol.STARS:
                self._push(stack, parent, [GrammarSymbol.STAR] * self._star_count())
            elif symbol in GROUP_SYMBOLS:
                if symbol is GrammarSymbol.SUBMOONS and not self.grammar.allow_sub_moons:
                    continue
                self._push(stack, parent, self._rule_symbols(symbol, self.default_p[symbol]))
            else:
                attach_to = parent.system_ancestor() if symbol is GrammarSymbol.PLANET else parent
                if attach_to.depth + 1 > self.max_depth:
                    continue
                node = attach_to.add_child(symbol)
                if node.depth < self.max_depth and self.grammar.rules_for(symbol):
                    self._push(stack, node, self._rule_symbols(symbol, None))
        return root

    @staticmethod
    def _push(
        stack: list[tuple[AbstractNode, GrammarSymbol]],
        parent: AbstractNode,
        symbols: list[GrammarSymbol],
    ) -> None:
        stack.extend((parent, symbol) for symbol in reversed(symbols))

    def _select(self, symbol: GrammarSymbol) -> ProductionRule | None:
        rules = self.grammar.rules_for(symbol)
        if not rules:
            return None
        if len(rules) == 1:
            return rules[0]
        return self.rng.weighted(rules, [rule.weight for rule in rules])

    def _rule_symbols(
        self,
        symbol: GrammarSymbol,
        default_p: float | None,
    ) -> list[GrammarSymbol]:
        rule = self._select(symbol)
        if rule is None or not rule.expand:
            return []
        if rule.repeat is None and default_p is None:
            return list(rule.expand)
        repeat = rule.repeat if rule.repeat is not None else GeometricRepeat()
        count = repeat.sample(self.rng, default_p if default_p is not None else 0.5)
        if rule.max_count is not None:
            count = min(count, rule.max_count)
        if rule.min_count is not None:
            count = max(count, rule.min_count)
        count = min(max(count, 0), MAX_REPEAT_COUNT)
        return list(rule.expand[:-1]) + [rule.expand[-1]] * count

    def _star_count(self) -> int:
        table = self.grammar.star_count
        weights = table.weights() if table is not None else self.params.star_weights
        if weights is None:
            weights = DEFAULT_STAR_WEIGHTS
        count = self.rng.weighted((1, 2, 3), weights)
        cap = min(self.params.max_stars, MAX_STARS_PER_SYSTEM)
        stars_rules = self.grammar.rules_for(GrammarSymbol.STARS)
        if stars_rules and stars_rules[0].max_count is not None:
            cap = min(cap, stars_rules[0].max_count)
        return max(1, min(count, cap))


def expand(
    grammar: Grammar, rng: Generator, params: ExpansionParams | None = None
) -> AbstractNode:
    """Expand ``grammar`` from its axiom into an abstract system tree."""
    return _Expander(grammar, rng, params or ExpansionParams()).run()
