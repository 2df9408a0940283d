"""Build plugin validation check.

Plugins must be addressable to be resolved. A plugin without a version makes
the build depend on whatever release is newest at build time, which is only
tolerated at older validation levels (see PLUGIN_VERSION_REQUIRED_SEVERITY).
"""

from __future__ import annotations

from typing import List

from build_model.core.enums import ValidationMode
from build_model.core.model import Model
from ..models import Finding
from ..paths import PLUGINS
from ._common import is_blank, require


class PluginsCheck:
    """Validate each plugin under build.plugins."""

    def validate(self, model: Model) -> List[Finding]:
        """Check groupId, artifactId and version of every plugin.

        Args:
            model: Effective descriptor to inspect.

        Returns:
            Findings per plugin in groupId, artifactId, version order.
        """
        findings: List[Finding] = []

        for plugin in model.plugins:
            require(findings, "plugin_required", PLUGINS.field("groupId"), plugin.group_id)
            require(findings, "plugin_required", PLUGINS.field("artifactId"), plugin.artifact_id)

            if is_blank(plugin.version):
                findings.append(
                    Finding(
                        "plugin_version_required",
                        f"'{PLUGINS.field('version')}' is missing for {plugin.key}",
                    )
                )

        return findings

    def applies_to_mode(self, mode: ValidationMode) -> bool:
        """Check applies to the effective view only."""
        return mode == ValidationMode.EFFECTIVE
