"""
Declaration set builder.

Rejects duplicate names, builds the name-reference dependency graph and
orders declarations so that every declaration comes after everything it
references.
"""

from __future__ import annotations

import logging

from ..errors import CircularDependencyError, DuplicateDeclarationError
from .ir_nodes import IRDeclaration

logger = logging.getLogger(__name__)


class DeclarationSetBuilder:
    """Validates and orders a set of IR declarations."""

    def build(self, declarations: list[IRDeclaration]) -> list[IRDeclaration]:
        """
        Validate and topologically sort declarations.

        Args:
            declarations: Resolved declarations in input order

        Returns:
            Declarations ordered dependency-first

        Raises:
            DuplicateDeclarationError: If two declarations share a name
            CircularDependencyError: If the references form a cycle
        """
        by_name = self._index(declarations)
        graph = self._dependency_graph(declarations, by_name)

        ordered: list[IRDeclaration] = []
        visited: set[str] = set()
        visiting: set[str] = set()

        for declaration in declarations:
            if declaration.name in visited:
                continue
            # (name, remaining dependencies) pairs; no recursion, so chain length is unbounded
            visiting.add(declaration.name)
            stack = [(declaration.name, iter(graph[declaration.name]))]
            while stack:
                name, dependencies = stack[-1]
                for dependency in dependencies:
                    if dependency in visited:
                        continue
                    if dependency in visiting:
                        raise CircularDependencyError(dependency)
                    visiting.add(dependency)
                    stack.append((dependency, iter(graph[dependency])))
                    break
                else:
                    stack.pop()
                    visiting.remove(name)
                    visited.add(name)
                    ordered.append(by_name[name])

        logger.debug(f"Emission order: {[declaration.name for declaration in ordered]}")
        return ordered

    def _index(self, declarations: list[IRDeclaration]) -> dict[str, IRDeclaration]:
        by_name: dict[str, IRDeclaration] = {}
        for declaration in declarations:
            if declaration.name in by_name:
                raise DuplicateDeclarationError(declaration.name)
            by_name[declaration.name] = declaration
        return by_name

    def _dependency_graph(
        self,
        declarations: list[IRDeclaration],
        by_name: dict[str, IRDeclaration],
    ) -> dict[str, list[str]]:
        """Map each name to its dependencies, listed in input declaration order."""
        position = {declaration.name: index for index, declaration in enumerate(declarations)}
        graph = {}
        for declaration in declarations:
            # Names outside the set were already rejected by the type resolver
            dependencies = [name for name in declaration.dependencies() if name in by_name]
            graph[declaration.name] = sorted(dependencies, key=position.__getitem__)
        return graph
