"""Project identity validation checks.

A project is addressed by its groupId:artifactId:version coordinates. Missing
or malformed coordinates make the project impossible to reference, install or
deploy. Packaging is only required once inheritance has supplied its default.
"""

from __future__ import annotations

from typing import List

from build_model.core.enums import ValidationMode
from build_model.core.model import Model
from ..models import Finding
from ._common import require, require_id


class ProjectIdentityCheck:
    """Validate the project's groupId, artifactId and version."""

    def validate(self, model: Model) -> List[Finding]:
        """Check the identity triple in groupId, artifactId, version order.

        Args:
            model: Descriptor to inspect.

        Returns:
            One finding per missing or malformed coordinate.
        """
        findings: List[Finding] = []

        require_id(findings, "project_id_required", "project_id_pattern", "groupId", model.group_id)
        require_id(
            findings, "project_id_required", "project_id_pattern", "artifactId", model.artifact_id
        )
        require(findings, "project_id_required", "version", model.version)

        return findings

    def applies_to_mode(self, mode: ValidationMode) -> bool:
        """Check applies to both views."""
        return True


class PackagingCheck:
    """Validate that the effective model has a packaging."""

    def validate(self, model: Model) -> List[Finding]:
        findings: List[Finding] = []
        require(findings, "packaging_required", "packaging", model.packaging)
        return findings

    def applies_to_mode(self, mode: ValidationMode) -> bool:
        """Raw descriptors may omit packaging; the super model supplies it."""
        return mode == ValidationMode.EFFECTIVE
