"""Tests for the ModulesCheck validation."""

from dataclasses import replace

from build_model.core.enums import ValidationMode
from build_model.validation.checks.modules import ModulesCheck


def test_no_modules_passes_with_any_packaging(valid_model):  # pylint: disable=redefined-outer-name
    assert ModulesCheck().validate(replace(valid_model, packaging="war")) == []


def test_aggregator_with_pom_packaging_passes(valid_model):  # pylint: disable=redefined-outer-name
    model = replace(valid_model, packaging="pom", modules=("core", "cli"))
    assert ModulesCheck().validate(model) == []


def test_aggregator_requires_pom_packaging(valid_model):  # pylint: disable=redefined-outer-name
    model = replace(valid_model, packaging="jar", modules=("core",))
    findings = ModulesCheck().validate(model)

    assert len(findings) == 1
    assert findings[0].rule_id == "aggregator_packaging"
    assert "Aggregator projects require 'pom' as packaging." in findings[0].message
    assert "'jar'" in findings[0].message


def test_blank_module_entries(valid_model):  # pylint: disable=redefined-outer-name
    model = replace(valid_model, packaging="pom", modules=("core", "", " "))
    findings = ModulesCheck().validate(model)

    assert [f.message for f in findings] == [
        "'modules.module' is missing.",
        "'modules.module' is missing.",
    ]


def test_applies_to_effective_only():
    assert ModulesCheck().applies_to_mode(ValidationMode.RAW) is False
    assert ModulesCheck().applies_to_mode(ValidationMode.EFFECTIVE) is True


def test_blank_packaging_left_to_packaging_check(valid_model):  # pylint: disable=redefined-outer-name
    """Test that an absent packaging is not reported as the value 'None'."""
    for packaging in (None, ""):
        model = replace(valid_model, packaging=packaging, modules=("core",))
        assert ModulesCheck().validate(model) == []
