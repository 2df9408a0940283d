"""Validation data models.

This module defines core data structures for validation results:
- Finding: A single violation reported by a check
- ValidationResult: Classified errors and warnings from one validation run
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from build_model.core.enums import ValidationLevel, ValidationMode


@dataclass(frozen=True)
class Finding:
    """A violation reported by a check, before severity classification.

    Attributes:
        rule_id: Identifier of the rule that fired, used to look up the severity.
        message: Human-readable message, starting with the quoted field path
            when the violation is field-scoped.

    Examples:
        >>> Finding(rule_id="project_id_required", message="'groupId' is missing.")
    """

    rule_id: str
    message: str

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if not self.rule_id:
            raise ValueError("Finding requires a rule_id")
        if not self.message:
            raise ValueError(f"Finding for rule '{self.rule_id}' requires a message")


@dataclass(frozen=True)
class ValidationResult:
    """Classified findings of one validation run.

    Errors and warnings keep the order in which the rules were evaluated.

    Attributes:
        errors: Messages of findings classified as errors.
        warnings: Messages of findings classified as warnings.
        level: Validation level the run used.
        mode: Which view of the descriptor was validated.

    Examples:
        >>> result = ValidationResult(errors=("'version' is missing.",))
        >>> result.has_errors()
        True
        >>> result.get_error_count()
        1
    """

    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    level: Optional[ValidationLevel] = None
    mode: Optional[ValidationMode] = None

    def has_errors(self, strict: bool = False) -> bool:
        """Check if validation failed.

        Args:
            strict: If True, treat warnings as errors. Default False.

        Returns:
            True if any errors found (or warnings in strict mode), False otherwise.
        """
        if self.errors:
            return True
        return strict and bool(self.warnings)

    def get_error_count(self) -> int:
        return len(self.errors)

    def get_warning_count(self) -> int:
        return len(self.warnings)

    def summary(self) -> str:
        """Generate a concise text summary of validation results.

        Examples:
            >>> print(result.summary())
            Validation Summary:
              Mode: effective (level MAVEN_3_1)
              Issues: 1 errors, 0 warnings
        """
        mode = self.mode.value if self.mode else "unknown"
        level = self.level.name if self.level is not None else "unknown"
        return (
            f"Validation Summary:\n"
            f"  Mode: {mode} (level {level})\n"
            f"  Issues: {self.get_error_count()} errors, {self.get_warning_count()} warnings"
        )

    def to_markdown(self, title: str = "descriptor") -> str:
        """Generate a detailed Markdown validation report.

        Args:
            title: Name of the validated descriptor, used in the heading.

        Returns:
            Markdown with a summary section followed by the errors and warnings
            in evaluation order.
        """
        from datetime import datetime

        errors = self.get_error_count()
        warnings = self.get_warning_count()
        lines = [
            f"# Validation Report: {title}",
            "",
            f"**Mode:** {self.mode.value if self.mode else 'unknown'}",
            f"**Level:** {self.level.name if self.level is not None else 'unknown'}",
            f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            "## Summary",
            "",
            f"- **Errors:** {errors} ❌" if errors > 0 else f"- **Errors:** {errors}",
            f"- **Warnings:** {warnings} ⚠️" if warnings > 0 else f"- **Warnings:** {warnings}",
            "",
        ]

        if not self.errors and not self.warnings:
            lines.append("## ✅ No Issues Found")
            lines.append("")
        else:
            if self.errors:
                lines.append("## ❌ Errors")
                lines.append("")
                for msg in self.errors:
                    lines.append(f"- {msg}")
                lines.append("")
            if self.warnings:
                lines.append("## ⚠️ Warnings")
                lines.append("")
                for msg in self.warnings:
                    lines.append(f"- {msg}")
                lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        """Generate a JSON validation report."""
        import json

        report_data = {
            "metadata": {
                "mode": self.mode.value if self.mode else None,
                "level": self.level.name if self.level is not None else None,
            },
            "summary": {
                "errors": self.get_error_count(),
                "warnings": self.get_warning_count(),
            },
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)

    def to_console_summary(self) -> str:
        """Generate the summary followed by every error and warning."""
        lines = [self.summary(), ""]

        if not self.errors and not self.warnings:
            lines.append("✅ No validation issues found!")
        else:
            for msg in self.errors:
                lines.append(f"❌ {msg}")
            for msg in self.warnings:
                lines.append(f"⚠️ {msg}")

        return "\n".join(lines)
