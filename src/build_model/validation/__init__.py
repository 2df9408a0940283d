"""Validation system for Build Model Tools.

This module provides the rule-based validator for project descriptors:

- **Models**: Finding, ValidationResult - validation result data structures
- **Checks**: Individual check implementations (see validation/checks/)
- **Config**: Model constants and the severity matrix (import from .config)
- **Registry**: validate_raw(), validate_effective(), print_report() - check orchestration

Public API:
    Finding: A single violation reported by a check
    ValidationResult: Ordered errors and warnings of one validation run
    validate_raw: Validate a descriptor as authored
    validate_effective: Validate a descriptor after inheritance
    print_report: Display validation results to console

Usage:
    >>> from build_model.validation import validate_effective, print_report, ValidationLevel
    >>> from build_model.ingestion.descriptor import load_model
    >>> model = load_model(Path("project.yaml"))
    >>> result = validate_effective(model.with_defaults(), ValidationLevel.STRICT)
    >>> print_report(result)

For implementation details:
    - See validation/checks/__init__.py for check interface conventions
    - See validation/config.py for the severity matrix
    - See validation/registry.py for check orchestration
"""

from __future__ import annotations

from build_model.core.enums import ValidationLevel, ValidationMode

from .models import Finding, ValidationResult
from .registry import print_report, validate_effective, validate_raw

__all__ = [
    # Data models
    "Finding",
    "ValidationResult",
    # Runner functions
    "validate_raw",
    "validate_effective",
    "print_report",
    # Enums
    "ValidationLevel",
    "ValidationMode",
]
