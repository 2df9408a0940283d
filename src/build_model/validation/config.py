"""Validation configuration constants.

This module centralizes the validation constants and the severity matrix.
Adjust these constants to tune validation behavior for a validation level.

Severity Levels:
    - "error": The descriptor cannot be used to plan a build
    - "warning": Reported but not fatal
    - "suppressed": Not reported at all at that validation level

Validation Levels:
    - MINIMAL: Oldest, most lenient behavior
    - MAVEN_2_0, MAVEN_3_0: Intermediate compatibility tiers
    - MAVEN_3_1 (STRICT): Current behavior
"""

from __future__ import annotations

import re
from typing import Dict, List, Union

from build_model.core.enums import ValidationLevel

# ============================================================================
# MODEL CONSTANTS
# ============================================================================

# Identifiers must be safe in file system paths and URLs
ID_PATTERN = re.compile(r"[A-Za-z0-9_\-.]+")

# Descriptor format versions this validator understands
SUPPORTED_MODEL_VERSIONS = ("4.0.0",)

# Packaging required for projects that declare modules
AGGREGATOR_PACKAGING = "pom"

# Scope whose dependencies must name a file on disk
SYSTEM_SCOPE = "system"

# Repository id reserved for the local repository
RESERVED_REPOSITORY_ID = "local"

SEVERITIES = ("error", "warning", "suppressed")


# ============================================================================
# SEVERITY RULES
# ============================================================================
# Format: {rule_id: {validation_level: severity}}
# Every level of ValidationLevel must have an entry.

# Level-invariant rules
ALWAYS_ERROR_SEVERITY = {level: "error" for level in ValidationLevel}

# Missing plugin version - only fatal for current builds, older builds resolved
# the latest plugin release instead
PLUGIN_VERSION_REQUIRED_SEVERITY = {
    ValidationLevel.MINIMAL: "warning",
    ValidationLevel.MAVEN_2_0: "warning",
    ValidationLevel.MAVEN_3_0: "warning",
    ValidationLevel.MAVEN_3_1: "error",
}

# Repository declared with the reserved "local" id
REPOSITORY_ID_RESERVED_SEVERITY = {
    ValidationLevel.MINIMAL: "suppressed",
    ValidationLevel.MAVEN_2_0: "warning",
    ValidationLevel.MAVEN_3_0: "error",
    ValidationLevel.MAVEN_3_1: "error",
}


# ============================================================================
# SEVERITY MAP (for get_severity helper)
# ============================================================================

_SEVERITY_MAP: Dict[str, Dict[ValidationLevel, str]] = {
    "model_version_required": ALWAYS_ERROR_SEVERITY,
    "model_version_supported": ALWAYS_ERROR_SEVERITY,
    "project_id_required": ALWAYS_ERROR_SEVERITY,
    "project_id_pattern": ALWAYS_ERROR_SEVERITY,
    "packaging_required": ALWAYS_ERROR_SEVERITY,
    "parent_required": ALWAYS_ERROR_SEVERITY,
    "parent_self_reference": ALWAYS_ERROR_SEVERITY,
    "dependency_required": ALWAYS_ERROR_SEVERITY,
    "dependency_id_pattern": ALWAYS_ERROR_SEVERITY,
    "dependency_system_path": ALWAYS_ERROR_SEVERITY,
    "plugin_required": ALWAYS_ERROR_SEVERITY,
    "plugin_version_required": PLUGIN_VERSION_REQUIRED_SEVERITY,
    "resource_directory_required": ALWAYS_ERROR_SEVERITY,
    "repository_required": ALWAYS_ERROR_SEVERITY,
    "repository_id_reserved": REPOSITORY_ID_RESERVED_SEVERITY,
    "module_required": ALWAYS_ERROR_SEVERITY,
    "aggregator_packaging": ALWAYS_ERROR_SEVERITY,
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def coerce_level(level: Union[ValidationLevel, int, str]) -> ValidationLevel:
    """Resolve a validation level given as enum member, integer value or name.

    Raises:
        ValueError: If the level is unknown.

    Examples:
        >>> coerce_level(30)
        <ValidationLevel.MAVEN_3_0: 30>
        >>> coerce_level("strict")
        <ValidationLevel.MAVEN_3_1: 31>
    """
    if isinstance(level, ValidationLevel):
        return level
    if isinstance(level, str):
        try:
            return ValidationLevel[level.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown validation level: {level!r}") from None
    if isinstance(level, bool) or not isinstance(level, int):
        raise ValueError(f"Unknown validation level: {level!r}")
    try:
        return ValidationLevel(level)
    except ValueError:
        raise ValueError(f"Unknown validation level: {level!r}") from None


def get_severity(rule_id: str, level: ValidationLevel) -> str:
    """Get the severity of a rule's findings at a validation level.

    Args:
        rule_id: Rule identifier (e.g., "plugin_version_required").
        level: Validation level of the current run.

    Returns:
        Severity: "error", "warning" or "suppressed".

    Raises:
        ValueError: If rule_id is unknown or level is invalid.

    Examples:
        >>> get_severity("plugin_version_required", ValidationLevel.STRICT)
        'error'
        >>> get_severity("plugin_version_required", ValidationLevel.MAVEN_3_0)
        'warning'
    """
    if rule_id not in _SEVERITY_MAP:
        raise ValueError(f"Unknown rule_id: {rule_id}")

    severity_config = _SEVERITY_MAP[rule_id]

    if level not in severity_config:
        raise ValueError(
            f"Invalid validation level '{level}' for rule '{rule_id}'. "
            f"Valid levels: {[lvl.name for lvl in severity_config]}"
        )

    return severity_config[level]


def get_rule_ids() -> List[str]:
    """Return all rule identifiers known to the severity matrix, in catalog order."""
    return list(_SEVERITY_MAP)
