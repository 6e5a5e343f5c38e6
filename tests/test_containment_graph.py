"""Tests for ContainmentGraph — construction, BFS and DFS queries."""

import pytest

from puzzles.core.errors import InvalidState
from puzzles.days.day_07 import parse_rule
from puzzles.solver.containment_graph import (
    Bag,
    ContainmentGraph,
    ContainmentRule,
    build_graph,
)

EXAMPLE_RULES = [
    "light red bags contain 1 bright white bag, 2 muted yellow bags.",
    "dark orange bags contain 3 bright white bags, 4 muted yellow bags.",
    "bright white bags contain 1 shiny gold bag.",
    "muted yellow bags contain 2 shiny gold bags, 9 faded blue bags.",
    "shiny gold bags contain 1 dark olive bag, 2 vibrant plum bags.",
    "dark olive bags contain 3 faded blue bags, 4 dotted black bags.",
    "vibrant plum bags contain 5 faded blue bags, 6 dotted black bags.",
    "faded blue bags contain no other bags.",
    "dotted black bags contain no other bags.",
]


def _example_graph() -> ContainmentGraph:
    return build_graph(parse_rule(line) for line in EXAMPLE_RULES)


def test_reverse_map_covers_every_bag():
    """Every container and every item gets an entry, even if empty."""
    graph = build_graph([
        parse_rule("dark orange bags contain 3 bright white bags, 4 muted yellow bags."),
        parse_rule("bright white bags contain 1 shiny gold bag."),
        parse_rule("faded blue bags contain no other bags."),
    ])

    assert len(graph.items_to_containers) == 5
    assert graph.items_to_containers[Bag("dark orange")] == set()
    assert graph.items_to_containers[Bag("faded blue")] == set()
    assert graph.items_to_containers[Bag("shiny gold")] == {Bag("bright white")}
    assert graph.items_to_containers[Bag("muted yellow")] == {Bag("dark orange")}


def test_rules_for_same_container_are_merged():
    graph = build_graph([
        ContainmentRule(Bag("a a"), ((1, Bag("b b")),)),
        ContainmentRule(Bag("a a"), ((2, Bag("c c")),)),
    ])
    assert graph.containers_to_items[Bag("a a")] == {(1, Bag("b b")), (2, Bag("c c"))}


def test_count_containing_bags():
    assert _example_graph().count_containing_bags(Bag("shiny gold")) == 4


def test_count_containing_bags_top_level_bag():
    """Nothing holds 'light red', so the answer is zero."""
    assert _example_graph().count_containing_bags(Bag("light red")) == 0


def test_count_containing_bags_isolated_leaf():
    graph = build_graph([parse_rule("faded blue bags contain no other bags.")])
    assert graph.count_containing_bags(Bag("faded blue")) == 0


def test_count_containing_bags_unknown_bag():
    with pytest.raises(InvalidState):
        _example_graph().count_containing_bags(Bag("neon pink"))


def test_count_item_bags():
    graph = _example_graph()
    assert graph.count_item_bags(Bag("shiny gold")) == 32
    assert graph.count_item_bags(Bag("faded blue")) == 0
    # 3 faded blue + 4 dotted black
    assert graph.count_item_bags(Bag("dark olive")) == 7


def test_count_item_bags_undefined_child():
    """'muted yellow' is referenced but never defined as a container."""
    graph = build_graph([parse_rule("bright white bags contain 2 muted yellow bags.")])
    with pytest.raises(InvalidState):
        graph.count_item_bags(Bag("bright white"))
    with pytest.raises(InvalidState):
        graph.count_item_bags(Bag("muted yellow"))


def test_ensure_acyclic_passes_on_example():
    _example_graph().ensure_acyclic()


def test_ensure_acyclic_detects_cycle():
    graph = build_graph([
        parse_rule("shiny gold bags contain 1 dark red bag."),
        parse_rule("dark red bags contain 2 shiny gold bags."),
    ])
    with pytest.raises(InvalidState, match="cycle"):
        graph.ensure_acyclic()


def test_to_networkx_edges_carry_counts():
    g = _example_graph().to_networkx()
    assert g.number_of_nodes() == 9
    assert g.edges[Bag("shiny gold"), Bag("vibrant plum")]["count"] == 2
