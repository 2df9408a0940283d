"""Parent reference validation check.

Inheritance can only be resolved when the parent is fully addressed, and a
project inheriting from itself would never resolve. Both are authoring
mistakes, so they are reported on the raw descriptor before inheritance runs.
"""

from __future__ import annotations

from typing import List

from build_model.core.enums import ValidationMode
from build_model.core.model import Model
from ..models import Finding
from ..paths import PARENT
from ._common import is_blank, require


class ParentCheck:
    """Validate the parent reference of a raw descriptor."""

    def validate(self, model: Model) -> List[Finding]:
        """Check parent coordinates and self-reference.

        Args:
            model: Raw descriptor to inspect.

        Returns:
            One finding per missing parent coordinate, then a self-reference
            finding if the parent points at the project itself. Empty if the
            descriptor declares no parent.
        """
        parent = model.parent
        if parent is None:
            return []

        findings: List[Finding] = []
        require(findings, "parent_required", PARENT.field("groupId"), parent.group_id)
        require(findings, "parent_required", PARENT.field("artifactId"), parent.artifact_id)
        require(findings, "parent_required", PARENT.field("version"), parent.version)

        if (
            not is_blank(parent.group_id)
            and not is_blank(parent.artifact_id)
            and parent.group_id == model.group_id
            and parent.artifact_id == model.artifact_id
        ):
            findings.append(
                Finding(
                    "parent_self_reference",
                    "The parent element cannot have the same groupId:artifactId as the project.",
                )
            )

        return findings

    def applies_to_mode(self, mode: ValidationMode) -> bool:
        """Check applies to raw descriptors only."""
        return mode == ValidationMode.RAW
