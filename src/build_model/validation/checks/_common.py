"""Shared helpers for validation checks."""

from __future__ import annotations

from typing import List, Optional

from ..config import ID_PATTERN
from ..models import Finding
from ..paths import invalid_id, missing


def is_blank(value: Optional[str]) -> bool:
    """Returns True if value is None, empty or whitespace only."""
    return value is None or not value.strip()


def require(findings: List[Finding], rule_id: str, path: str, value: Optional[str]) -> bool:
    """Append a missing-field finding when value is blank.

    Returns:
        True if the value is present.
    """
    if is_blank(value):
        findings.append(Finding(rule_id, missing(path)))
        return False
    return True


def require_id(
    findings: List[Finding],
    required_rule: str,
    pattern_rule: str,
    path: str,
    value: Optional[str],
) -> bool:
    """Check an identifier is present and matches the id pattern.

    A missing identifier only yields the missing-field finding.

    Returns:
        True if the identifier is present and valid.
    """
    if not require(findings, required_rule, path, value):
        return False
    if ID_PATTERN.fullmatch(value):
        return True
    findings.append(Finding(pattern_rule, invalid_id(path, value)))
    return False
