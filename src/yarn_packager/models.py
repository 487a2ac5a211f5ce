"""Dependency graph models produced by the tree parser."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DependencyNode:
    """A resolved package and the packages it depends on."""

    name: str
    version: str | None
    dependencies: dict[str, DependencyNode] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be non-empty")

    def to_dict(self) -> dict[str, object]:
        return {
            "version": self.version,
            "dependencies": {
                name: child.to_dict() for name, child in self.dependencies.items()
            },
        }


@dataclass(frozen=True)
class DependencyGraph:
    """Production dependency listing handed to the build pipeline.

    ``problems`` stays empty for yarn; other packagers report diagnostics there.
    """

    dependencies: dict[str, DependencyNode] = field(default_factory=dict)
    problems: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.dependencies)

    def names(self) -> list[str]:
        return sorted(self.dependencies)

    def to_dict(self) -> dict[str, object]:
        return {
            "problems": list(self.problems),
            "dependencies": {
                name: node.to_dict() for name, node in self.dependencies.items()
            },
        }
