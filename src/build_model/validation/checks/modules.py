"""Aggregator validation check.

Projects that list modules only group sub-projects and produce no artifact of
their own, so they must use the aggregator packaging.
"""

from __future__ import annotations

from typing import List

from build_model.core.enums import ValidationMode
from build_model.core.model import Model
from ..config import AGGREGATOR_PACKAGING
from ..models import Finding
from ..paths import MODULES
from ._common import is_blank, require


class ModulesCheck:
    """Validate module entries and aggregator packaging."""

    def validate(self, model: Model) -> List[Finding]:
        """Check modules of the effective model.

        Args:
            model: Effective descriptor to inspect.

        Returns:
            One finding per blank module entry, then at most one packaging finding.
            A blank packaging is left to the packaging check.
        """
        if not model.modules:
            return []

        findings: List[Finding] = []
        for module in model.modules:
            require(findings, "module_required", str(MODULES), module)

        if not is_blank(model.packaging) and model.packaging != AGGREGATOR_PACKAGING:
            findings.append(
                Finding(
                    "aggregator_packaging",
                    f"'packaging' with value '{model.packaging}' is invalid. "
                    f"Aggregator projects require '{AGGREGATOR_PACKAGING}' as packaging.",
                )
            )

        return findings

    def applies_to_mode(self, mode: ValidationMode) -> bool:
        """Packaging is only settled in the effective view."""
        return mode == ValidationMode.EFFECTIVE
