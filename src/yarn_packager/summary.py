"""Human-readable rendering of a dependency graph."""

from __future__ import annotations

from .models import DependencyGraph, DependencyNode


def _render_nodes(
    nodes: dict[str, DependencyNode],
    depth: int,
    max_depth: int | None,
    lines: list[str],
) -> None:
    for name in sorted(nodes):
        node = nodes[name]
        version = node.version or "(unresolved)"
        lines.append(f"{'  ' * depth}{name}@{version}")
        if max_depth is None or depth + 1 < max_depth:
            _render_nodes(node.dependencies, depth + 1, max_depth, lines)


def render_tree(graph: DependencyGraph, max_depth: int | None = None) -> str:
    """Return an indented ``name@version`` listing, children sorted by name."""
    if not graph.dependencies:
        return "(no production dependencies)\n"

    lines: list[str] = []
    _render_nodes(graph.dependencies, 0, max_depth, lines)
    return "\n".join(lines) + "\n"
