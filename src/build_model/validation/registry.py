"""Validation check registry and runner.

This module orchestrates validation checks:
- ALL_CHECKS: All check instances, in descriptor walk order
- validate_raw(): Validates a descriptor as authored
- validate_effective(): Validates a descriptor after inheritance
- print_report(): Displays validation results to console
"""

from __future__ import annotations

import logging
from typing import List, Union

from build_model.core.enums import ValidationLevel, ValidationMode
from build_model.core.model import Model
from .checks.dependencies import direct_dependencies_check, managed_dependencies_check
from .checks.identity import PackagingCheck, ProjectIdentityCheck
from .checks.model_version import ModelVersionCheck
from .checks.modules import ModulesCheck
from .checks.parent import ParentCheck
from .checks.plugins import PluginsCheck
from .checks.repositories import RepositoriesCheck
from .checks.resources import ResourcesCheck
from .config import coerce_level, get_severity
from .models import ValidationResult

logger = logging.getLogger(__name__)


# Registry of all available validation checks
# Order is the descriptor walk order and fixes the order of reported messages
ALL_CHECKS = [
    # Project identity
    ModelVersionCheck(),
    ProjectIdentityCheck(),
    PackagingCheck(),
    # Inheritance
    ParentCheck(),
    # Dependencies
    direct_dependencies_check(),
    managed_dependencies_check(),
    # Build
    PluginsCheck(),
    ResourcesCheck(),
    # Repositories
    RepositoriesCheck(),
    # Aggregation
    ModulesCheck(),
]


def _run(
    model: Model, level: Union[ValidationLevel, int, str], mode: ValidationMode
) -> ValidationResult:
    if model is None:
        raise TypeError("A model is required for validation")
    if not isinstance(model, Model):
        raise TypeError(f"Expected a Model, got {type(model).__name__}")
    level = coerce_level(level)

    errors: List[str] = []
    warnings: List[str] = []
    for check in ALL_CHECKS:
        if not check.applies_to_mode(mode):
            continue
        for finding in check.validate(model):
            severity = get_severity(finding.rule_id, level)
            if severity == "error":
                errors.append(finding.message)
            elif severity == "warning":
                warnings.append(finding.message)

    logger.debug(
        "Validated %s (%s, %s): %d errors, %d warnings",
        model.key,
        mode.value,
        level.name,
        len(errors),
        len(warnings),
    )

    return ValidationResult(
        errors=tuple(errors),
        warnings=tuple(warnings),
        level=level,
        mode=mode,
    )


def validate_raw(
    model: Model, level: Union[ValidationLevel, int, str] = ValidationLevel.STRICT
) -> ValidationResult:
    """Validate a descriptor as authored, before inheritance and interpolation.

    Catches authoring mistakes early, before the inheritance collaborator runs.

    Args:
        model: The raw model.
        level: Validation level, as enum member, integer value or name.

    Returns:
        ValidationResult with errors and warnings in walk order. Violations are
        never raised.

    Raises:
        TypeError: If no model is given.
        ValueError: If the level is unknown.

    Examples:
        >>> result = validate_raw(model, ValidationLevel.STRICT)
        >>> result.errors
        ("'repositories.repository.id' is missing.",)
    """
    return _run(model, level, ValidationMode.RAW)


def validate_effective(
    model: Model, level: Union[ValidationLevel, int, str] = ValidationLevel.STRICT
) -> ValidationResult:
    """Validate a fully resolved descriptor.

    Fields that inheritance fills in (such as the default packaging) no longer
    produce findings here, while checks that need resolved values (dependency
    versions, plugins, modules) run only in this view.

    Args:
        model: The effective model.
        level: Validation level, as enum member, integer value or name.

    Returns:
        ValidationResult with errors and warnings in walk order.

    Raises:
        TypeError: If no model is given.
        ValueError: If the level is unknown.

    Examples:
        >>> result = validate_effective(model.with_defaults(), ValidationLevel.MAVEN_3_0)
        >>> result.has_errors()
        False
    """
    return _run(model, level, ValidationMode.EFFECTIVE)


def print_report(result: ValidationResult) -> None:
    """Print validation result to console.

    Displays a summary followed by every error and warning in order.

    Args:
        result: ValidationResult to display.

    Examples:
        >>> print_report(validate_effective(model))
        Validation Summary:
          Mode: effective (level MAVEN_3_1)
          Issues: 1 errors, 0 warnings

        ❌ 'version' is missing.
    """
    print(result.to_console_summary())
