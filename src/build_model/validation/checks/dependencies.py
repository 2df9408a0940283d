"""Dependency validation check.

Every dependency of the effective model must be fully addressed so that it can
be resolved. The same check runs over direct dependencies and over managed
dependencies, only the reported path differs.
"""

from __future__ import annotations

from typing import Callable, List, Tuple

from build_model.core.enums import ValidationMode
from build_model.core.model import Dependency, Model
from ..config import SYSTEM_SCOPE
from ..models import Finding
from ..paths import DEPENDENCIES, MANAGED_DEPENDENCIES, FieldPath
from ._common import is_blank, require, require_id


class DependenciesCheck:
    """Validate each element of a dependency collection."""

    def __init__(
        self,
        path: FieldPath,
        select: Callable[[Model], Tuple[Dependency, ...]],
    ) -> None:
        self._path = path
        self._select = select

    def validate(self, model: Model) -> List[Finding]:
        """Check coordinates of every dependency in element order.

        Args:
            model: Effective descriptor to inspect.

        Returns:
            Findings per dependency in groupId, artifactId, version, systemPath order.
        """
        findings: List[Finding] = []
        path = self._path

        for dependency in self._select(model):
            require_id(
                findings,
                "dependency_required",
                "dependency_id_pattern",
                path.field("groupId"),
                dependency.group_id,
            )
            require_id(
                findings,
                "dependency_required",
                "dependency_id_pattern",
                path.field("artifactId"),
                dependency.artifact_id,
            )
            require(findings, "dependency_required", path.field("version"), dependency.version)

            if dependency.scope == SYSTEM_SCOPE and is_blank(dependency.system_path):
                findings.append(
                    Finding(
                        "dependency_system_path",
                        f"'{path.field('systemPath')}' for "
                        f"{dependency.management_key} is missing.",
                    )
                )

        return findings

    def applies_to_mode(self, mode: ValidationMode) -> bool:
        """Versions may come from inherited management; check the effective view only."""
        return mode == ValidationMode.EFFECTIVE


def direct_dependencies_check() -> DependenciesCheck:
    return DependenciesCheck(DEPENDENCIES, lambda model: model.dependencies)


def managed_dependencies_check() -> DependenciesCheck:
    return DependenciesCheck(MANAGED_DEPENDENCIES, lambda model: model.managed_dependencies)
