"""Day 7 — Handy Haversacks: bag containment rules."""

from __future__ import annotations

import logging
import re
from typing import IO

from puzzles.core.errors import InvalidInput
from puzzles.core.reader import U8_MAX, parse_uint, read_lines
from puzzles.solver.containment_graph import (
    Bag,
    ContainmentGraph,
    ContainmentRule,
    build_graph,
)

logger = logging.getLogger(__name__)

TARGET_BAG = Bag("shiny gold")

# eg: "dark orange bags contain 3 bright white bags, 4 muted yellow bags."
CONTAINER_RE = re.compile(
    r"""
    (?P<color>\S+\s\S+)
    \s
    bags
    """,
    re.VERBOSE,
)
ITEM_RE = re.compile(
    r"""
    (?P<count>\d+)
    \s
    (?P<color>\S+\s\S+)
    \s
    bag
    """,
    re.VERBOSE,
)


def parse_rule(line: str) -> ContainmentRule:
    """
    Parse one rule line.

    >>> parse_rule("bright white bags contain 1 shiny gold bag.")
    ContainmentRule(container=Bag(color='bright white'), items=((1, Bag(color='shiny gold')),))
    """
    rule_parts = line.split("contain")
    if len(rule_parts) != 2:
        raise InvalidInput(f"Invalid rule length: {len(rule_parts)}")
    container_input, items_input = rule_parts

    container_caps = CONTAINER_RE.search(container_input)
    if container_caps is None:
        raise InvalidInput(f"Invalid container capture on input: {container_input}")
    container = Bag(container_caps["color"])

    # eg: "faded blue bags contain no other bags."
    if "no other bags" in items_input:
        return ContainmentRule(container)

    items: list[tuple[int, Bag]] = []
    for item_str in items_input.split(","):
        caps = ITEM_RE.search(item_str)
        if caps is None:
            raise InvalidInput(f"Invalid item input: {item_str}")
        items.append((parse_uint(caps["count"], U8_MAX), Bag(caps["color"])))
    return ContainmentRule(container, tuple(items))


def parse_graph(stream: IO[bytes]) -> ContainmentGraph:
    rules = [parse_rule(line) for line in read_lines(stream)]
    logger.debug("Parsed %d containment rules", len(rules))
    return build_graph(rules)


def part_1(stream: IO[bytes]) -> int:
    return parse_graph(stream).count_containing_bags(TARGET_BAG)


def part_2(stream: IO[bytes]) -> int:
    graph = parse_graph(stream)
    graph.ensure_acyclic()
    return graph.count_item_bags(TARGET_BAG)
