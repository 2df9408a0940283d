"""Resource validation check.

A resource entry without a directory has nothing to copy and points at a
mistake in the build section.
"""

from __future__ import annotations

from typing import List

from build_model.core.enums import ValidationMode
from build_model.core.model import Model
from ..models import Finding
from ..paths import RESOURCES, TEST_RESOURCES
from ._common import require


class ResourcesCheck:
    """Validate build.resources and build.testResources."""

    def validate(self, model: Model) -> List[Finding]:
        findings: List[Finding] = []

        for path, resources in (
            (RESOURCES, model.resources),
            (TEST_RESOURCES, model.test_resources),
        ):
            for resource in resources:
                require(
                    findings, "resource_directory_required", path.field("directory"),
                    resource.directory,
                )

        return findings

    def applies_to_mode(self, mode: ValidationMode) -> bool:
        """Check applies to the effective view only."""
        return mode == ValidationMode.EFFECTIVE
