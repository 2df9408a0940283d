"""Model version validation check.

Every descriptor must state which format version it is written in, and only
versions this validator understands can be checked reliably.
"""

from __future__ import annotations

from typing import List

from build_model.core.enums import ValidationMode
from build_model.core.model import Model
from ..config import SUPPORTED_MODEL_VERSIONS
from ..models import Finding
from ._common import require


class ModelVersionCheck:
    """Validate that modelVersion is present and supported."""

    def validate(self, model: Model) -> List[Finding]:
        """Check modelVersion.

        Args:
            model: Descriptor to inspect.

        Returns:
            At most one finding: missing or unsupported modelVersion.
        """
        findings: List[Finding] = []

        if not require(findings, "model_version_required", "modelVersion", model.model_version):
            return findings

        version = model.model_version.strip()
        if version not in SUPPORTED_MODEL_VERSIONS:
            supported = ", ".join(SUPPORTED_MODEL_VERSIONS)
            findings.append(
                Finding(
                    "model_version_supported",
                    f"'modelVersion' must be one of [{supported}] but is '{version}'.",
                )
            )

        return findings

    def applies_to_mode(self, mode: ValidationMode) -> bool:
        """Check applies to both views."""
        return True
