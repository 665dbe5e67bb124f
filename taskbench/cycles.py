"""Find cycles in a dependency graph by depth-first search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Dependency:
    """A directed edge from source to target."""

    source: str
    target: str


SAMPLE_DEPENDENCIES = (
    Dependency("A", "B"), Dependency("B", "C"), Dependency("C", "D"), Dependency("D", "A"),
    Dependency("E", "F"), Dependency("F", "G"), Dependency("G", "E"),
)

_DONE = object()


def build_graph(dependencies: Iterable[Dependency]) -> dict[str, list[str]]:
    """Build an adjacency list keyed by source, in key order.

    Targets keep the order in which their edges were given.
    """
    graph: dict[str, list[str]] = {}
    for dep in dependencies:
        graph.setdefault(dep.source, []).append(dep.target)
    return dict(sorted(graph.items()))


def find_cycles(dependencies: Iterable[Dependency]) -> list[list[str]]:
    """Return the cycles met by a depth-first search from each source in order.

    Each cycle lists its nodes from where it was entered; a back edge to a
    node on the current path yields the path from that node onwards.
    """
    graph = build_graph(dependencies)
    visited: set[str] = set()
    position: dict[str, int] = {}
    path: list[str] = []
    cycles: list[list[str]] = []

    for root in graph:
        if root in visited:
            continue
        visited.add(root)
        position[root] = 0
        path.append(root)
        stack: list[Iterator[str]] = [iter(graph.get(root, ()))]
        while stack:
            neighbour = next(stack[-1], _DONE)
            if neighbour is _DONE:
                stack.pop()
                del position[path.pop()]
            elif neighbour in position:
                cycles.append(path[position[neighbour]:])
            elif neighbour not in visited:
                visited.add(neighbour)
                position[neighbour] = len(path)
                path.append(neighbour)
                stack.append(iter(graph.get(neighbour, ())))
    return cycles


def demo() -> None:
    """Print the cycles of the built-in sample graph."""
    print("Циклы:")
    for cycle in find_cycles(SAMPLE_DEPENDENCIES):
        print("".join(f"{node} " for node in cycle) + (cycle[0] if cycle else ""))