"""Validation checks base interface.

This module defines the protocol (interface) that all validation checks must implement.
Each check is responsible for one part of the descriptor (e.g., project identity,
dependencies, repositories) and reports what it finds as ``Finding`` objects.
Checks never decide severity: the registry classifies every finding through the
severity matrix in ``validation/config.py``.

To implement a new validation check:

1. Create a new file in this directory (e.g., `my_check.py`)
2. Define a class that implements the ModelCheck protocol
3. Implement the required methods: `validate()` and `applies_to_mode()`
4. Add its rule ids to the severity map in config.py
5. Add the check to the ALL_CHECKS list in registry.py, at its place in the walk order

Example:
    ```python
    # checks/my_check.py
    from typing import List
    from build_model.core.enums import ValidationMode
    from build_model.core.model import Model
    from ..models import Finding

    class MyCheck:
        def validate(self, model: Model) -> List[Finding]:
            # Validation logic here
            return [Finding("my_rule", "'name' is missing.")]

        def applies_to_mode(self, mode: ValidationMode) -> bool:
            # Return True if check applies to this view of the descriptor
            return mode == ValidationMode.EFFECTIVE
    ```
"""

from __future__ import annotations

from typing import List, Protocol

from build_model.core.enums import ValidationMode
from build_model.core.model import Model
from ..models import Finding


class ModelCheck(Protocol):
    """Protocol defining the interface for validation checks.

    Use duck typing (Protocol) for flexibility - no need to inherit from a base class.
    Checks must be pure: no side effects on the model, no I/O, no state kept
    between calls.

    Methods:
        validate: Run the check and return findings.
        applies_to_mode: Determine if the check runs for a view of the descriptor.
    """

    def validate(self, model: Model) -> List[Finding]:
        """Run the validation check.

        Args:
            model: The descriptor to inspect.

        Returns:
            Findings in evaluation order. Empty list if the check passes.

        Examples:
            >>> findings = check.validate(model)
            >>> [f.message for f in findings]
            ["'dependencies.dependency.version' is missing."]
        """
        ...

    def applies_to_mode(self, mode: ValidationMode) -> bool:
        """Check if this validation applies to a view of the descriptor.

        Some checks only make sense once inheritance has been applied (e.g.
        packaging, dependency versions), others catch authoring mistakes in
        the raw descriptor only (e.g. incomplete parent references).

        Args:
            mode: Raw or effective view.

        Returns:
            True if check should run for this mode, False to skip.
        """
        ...


__all__ = ["ModelCheck"]
