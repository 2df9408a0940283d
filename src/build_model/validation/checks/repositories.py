"""Repository validation check.

Repositories are needed before anything else can be resolved, including the
parent descriptor, so incomplete entries are reported in both views.
"""

from __future__ import annotations

from typing import List

from build_model.core.enums import ValidationMode
from build_model.core.model import Model
from ..config import RESERVED_REPOSITORY_ID
from ..models import Finding
from ..paths import PLUGIN_REPOSITORIES, REPOSITORIES
from ._common import require


class RepositoriesCheck:
    """Validate repositories and pluginRepositories."""

    def validate(self, model: Model) -> List[Finding]:
        """Check id and url of every repository.

        Args:
            model: Descriptor to inspect.

        Returns:
            Findings for repositories first, then pluginRepositories; per
            element the id finding precedes the url finding.
        """
        findings: List[Finding] = []

        for path, repositories in (
            (REPOSITORIES, model.repositories),
            (PLUGIN_REPOSITORIES, model.plugin_repositories),
        ):
            for repository in repositories:
                id_path = path.field("id")
                if require(findings, "repository_required", id_path, repository.id):
                    if repository.id.strip() == RESERVED_REPOSITORY_ID:
                        findings.append(
                            Finding(
                                "repository_id_reserved",
                                f"'{id_path}' must not be '{RESERVED_REPOSITORY_ID}', "
                                "this identifier is reserved for the local repository, "
                                "using it for other repositories will corrupt your "
                                "repository metadata.",
                            )
                        )
                require(findings, "repository_required", path.field("url"), repository.url)

        return findings

    def applies_to_mode(self, mode: ValidationMode) -> bool:
        """Check applies to both views."""
        return True
