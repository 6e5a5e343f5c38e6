"""
ContainmentGraph — which bags hold which, in both directions.

Two adjacency maps are materialized up front from the parsed rules:

* ``items_to_containers``: reverse edges, unweighted, walked by a
  frontier BFS to answer "how many bags can eventually hold X".
* ``containers_to_items``: forward edges weighted by count, walked by a
  recursive DFS to answer "how many bags does X hold in total".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

import networkx as nx

from puzzles.core.errors import InvalidState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bag:
    """A bag, identified by its color (e.g. ``"shiny gold"``)."""

    color: str

    def __str__(self) -> str:
        return self.color


@dataclass(frozen=True)
class ContainmentRule:
    """One input line: *container* directly holds each ``(count, bag)`` in *items*."""

    container: Bag
    items: tuple[tuple[int, Bag], ...] = ()


@dataclass
class ContainmentGraph:
    """Both directions of the containment relation, built once from a rule set."""

    items_to_containers: dict[Bag, set[Bag]] = field(default_factory=dict)
    containers_to_items: dict[Bag, set[tuple[int, Bag]]] = field(default_factory=dict)

    # ── Construction ───────────────────────────────────────────────

    @classmethod
    def from_rules(cls, rules: Iterable[ContainmentRule]) -> "ContainmentGraph":
        graph = cls()
        for rule in rules:
            container = rule.container
            for count, item in rule.items:
                graph.items_to_containers.setdefault(item, set()).add(container)
            # Leaf bags still need an entry so the BFS never misses a key.
            graph.items_to_containers.setdefault(container, set())

            # Rules naming the same container are merged, not overwritten.
            graph.containers_to_items.setdefault(container, set()).update(rule.items)

        logger.debug(
            "Built containment graph: %d bags, %d containers",
            len(graph.items_to_containers),
            len(graph.containers_to_items),
        )
        return graph

    # ── Queries ────────────────────────────────────────────────────

    def count_containing_bags(self, bag: Bag) -> int:
        """
        Breadth-first search over the reverse edges.

        Each round expands the frontier to every direct container of the
        frontier's bags that has not been visited yet.  Returns the number
        of distinct bags that can eventually hold *bag*.
        """
        to_visit: set[Bag] = {bag}
        visited: set[Bag] = set()

        while to_visit:
            to_visit_next: set[Bag] = set()
            for item_bag in to_visit:
                containers = self.items_to_containers.get(item_bag)
                if containers is None:
                    raise InvalidState(
                        f"Item bag is not found in our bag map! {item_bag}"
                    )
                to_visit_next.update(containers)

            visited.update(to_visit)
            to_visit = to_visit_next - visited

        visited.discard(bag)
        return len(visited)

    def count_item_bags(self, bag: Bag) -> int:
        """
        Depth-first sum of every bag held (transitively) inside *bag*.

        A container with an empty entry is a leaf and contributes 0; a bag
        with no entry at all was referenced but never defined by a rule.
        Assumes the relation is acyclic (see ``ensure_acyclic``).
        """
        items = self.containers_to_items.get(bag)
        if items is None:
            raise InvalidState(f"Container bag is not found in our bag map! {bag}")
        return sum(count + count * self.count_item_bags(child) for count, child in items)

    # ── Consistency ────────────────────────────────────────────────

    def to_networkx(self) -> nx.DiGraph:
        """Forward edges (container -> item) as a networkx DiGraph weighted by count."""
        g = nx.DiGraph()
        g.add_nodes_from(self.items_to_containers)
        for container, items in self.containers_to_items.items():
            for count, item in items:
                g.add_edge(container, item, count=count)
        return g

    def ensure_acyclic(self) -> None:
        """Raise InvalidState if some bag (transitively) contains itself."""
        try:
            cycle = nx.find_cycle(self.to_networkx())
        except nx.NetworkXNoCycle:
            return
        path = " -> ".join(str(u) for u, _v in cycle)
        raise InvalidState(f"Containment rules form a cycle: {path} -> {cycle[0][0]}")

    def __len__(self) -> int:
        return len(self.items_to_containers)


def build_graph(rules: Iterable[ContainmentRule]) -> ContainmentGraph:
    """Fold a rule set into a ContainmentGraph."""
    return ContainmentGraph.from_rules(rules)
