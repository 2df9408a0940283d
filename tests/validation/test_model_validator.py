"""End-to-end tests for descriptor validation.

Each test loads a descriptor fixture from tests/fixtures/poms/validation and
validates it through the public entry points. Unless stated otherwise, the
effective view is validated at the strict level, with the super-model defaults
applied to stand in for inheritance.
"""

from dataclasses import replace

import pytest

from build_model.core.enums import ValidationLevel
from build_model.validation import validate_effective, validate_raw
from conftest import read_model


def validate(pom):
    return validate_effective_at(pom, ValidationLevel.STRICT)


def validate_effective_at(pom, level):
    return validate_effective(read_model(pom).with_defaults(), level)


def validate_raw_at(pom, level):
    return validate_raw(read_model(pom), level)


def assert_violations(result, errors, warnings):
    assert len(result.errors) == errors, result.errors
    assert len(result.warnings) == warnings, result.warnings


def test_valid_descriptor_has_no_violations():
    """A complete descriptor passes in both views at every level."""
    for level in ValidationLevel:
        assert_violations(validate_effective_at("valid-pom.yaml", level), 0, 0)
        assert_violations(validate_raw_at("valid-pom.yaml", level), 0, 0)


def test_missing_model_version():
    result = validate("missing-modelVersion-pom.yaml")

    assert_violations(result, 1, 0)
    assert result.errors[0] == "'modelVersion' is missing."


def test_missing_artifact_id():
    result = validate("missing-artifactId-pom.yaml")

    assert_violations(result, 1, 0)
    assert result.errors[0] == "'artifactId' is missing."


def test_missing_group_id():
    result = validate("missing-groupId-pom.yaml")

    assert_violations(result, 1, 0)
    assert result.errors[0] == "'groupId' is missing."


def test_invalid_ids():
    result = validate("invalid-ids-pom.yaml")

    assert_violations(result, 2, 0)
    assert result.errors[0] == "'groupId' with value 'o/a/m' does not match a valid id pattern."
    assert result.errors[1] == "'artifactId' with value 'm$-do$' does not match a valid id pattern."


def test_missing_type():
    result = validate("missing-type-pom.yaml")

    assert_violations(result, 1, 0)
    assert result.errors[0] == "'packaging' is missing."


def test_missing_version():
    result = validate("missing-version-pom.yaml")

    assert_violations(result, 1, 0)
    assert result.errors[0] == "'version' is missing."


def test_invalid_aggregator_packaging():
    result = validate("invalid-aggregator-packaging-pom.yaml")

    assert_violations(result, 1, 0)
    assert "Aggregator projects require 'pom' as packaging." in result.errors[0]


@pytest.mark.parametrize(
    "pom, expected",
    [
        ("missing-dependency-artifactId-pom.yaml", "'dependencies.dependency.artifactId' is missing."),
        ("missing-dependency-groupId-pom.yaml", "'dependencies.dependency.groupId' is missing."),
        ("missing-dependency-version-pom.yaml", "'dependencies.dependency.version' is missing"),
        (
            "missing-dependency-mgmt-artifactId-pom.yaml",
            "'dependencyManagement.dependencies.dependency.artifactId' is missing.",
        ),
        (
            "missing-dependency-mgmt-groupId-pom.yaml",
            "'dependencyManagement.dependencies.dependency.groupId' is missing.",
        ),
    ],
)
def test_missing_dependency_fields(pom, expected):
    result = validate(pom)

    assert_violations(result, 1, 0)
    assert expected in result.errors[0]


def test_missing_all():
    result = validate("missing-1-pom.yaml")

    assert_violations(result, 4, 0)
    assert list(result.errors) == [
        "'modelVersion' is missing.",
        "'groupId' is missing.",
        "'artifactId' is missing.",
        "'version' is missing.",
    ]
    # packaging comes from the super model
    assert "'packaging' is missing." not in result.errors


def test_missing_plugin_artifact_id():
    result = validate("missing-plugin-artifactId-pom.yaml")

    assert_violations(result, 1, 0)
    assert result.errors[0] == "'build.plugins.plugin.artifactId' is missing."


def test_missing_plugin_version():
    result = validate_effective_at("missing-plugin-version-pom.yaml", ValidationLevel.MAVEN_3_1)

    assert_violations(result, 1, 0)
    assert result.errors[0] == (
        "'build.plugins.plugin.version' is missing for org.apache.maven.plugins:maven-it-plugin"
    )

    result = validate_effective_at("missing-plugin-version-pom.yaml", ValidationLevel.MAVEN_3_0)

    assert_violations(result, 0, 1)


def test_missing_repository_id():
    result = validate_raw_at("missing-repository-id-pom.yaml", ValidationLevel.STRICT)

    assert_violations(result, 4, 0)
    assert result.errors[0] == "'repositories.repository.id' is missing."
    assert result.errors[1] == "'repositories.repository.url' is missing."
    assert result.errors[2] == "'pluginRepositories.pluginRepository.id' is missing."
    assert result.errors[3] == "'pluginRepositories.pluginRepository.url' is missing."


def test_missing_resource_directory():
    result = validate("missing-resource-directory-pom.yaml")

    assert_violations(result, 2, 0)
    assert result.errors[0] == "'build.resources.resource.directory' is missing."
    assert result.errors[1] == "'build.testResources.testResource.directory' is missing."


def test_unsupported_model_version():
    result = validate("unsupported-modelVersion-pom.yaml")

    assert_violations(result, 1, 0)
    assert result.errors[0] == "'modelVersion' must be one of [4.0.0] but is '3.0.0'."


def test_missing_system_path():
    result = validate("missing-system-path-pom.yaml")

    assert_violations(result, 1, 0)
    assert result.errors[0] == (
        "'dependencies.dependency.systemPath' for com.example:native-bridge:jar is missing."
    )


def test_reserved_repository_id_depends_on_level():
    result = validate_raw_at("reserved-repository-id-pom.yaml", ValidationLevel.STRICT)
    assert_violations(result, 1, 0)
    assert result.errors[0].startswith("'repositories.repository.id' must not be 'local'")

    result = validate_raw_at("reserved-repository-id-pom.yaml", ValidationLevel.MAVEN_2_0)
    assert_violations(result, 0, 1)

    result = validate_raw_at("reserved-repository-id-pom.yaml", ValidationLevel.MINIMAL)
    assert_violations(result, 0, 0)


def test_missing_parent_fields_in_raw_view():
    result = validate_raw_at("missing-parent-fields-pom.yaml", ValidationLevel.STRICT)

    assert_violations(result, 2, 0)
    assert list(result.errors) == [
        "'parent.groupId' is missing.",
        "'parent.version' is missing.",
    ]


def test_self_referencing_parent_in_raw_view():
    result = validate_raw_at("self-referencing-parent-pom.yaml", ValidationLevel.STRICT)

    assert_violations(result, 1, 0)
    assert result.errors[0] == (
        "The parent element cannot have the same groupId:artifactId as the project."
    )


def test_raw_and_effective_views_can_disagree():
    """Packaging is only required once inheritance had the chance to supply it."""
    raw = validate_raw_at("missing-type-pom.yaml", ValidationLevel.STRICT)
    effective = validate("missing-type-pom.yaml")

    assert_violations(raw, 0, 0)
    assert_violations(effective, 1, 0)


def test_validation_is_repeatable():
    first = validate("missing-1-pom.yaml")
    second = validate("missing-1-pom.yaml")

    assert first == second
    assert first.errors == second.errors


def test_expression_ids_are_pattern_checked_in_both_views(valid_model):  # pylint: disable=redefined-outer-name
    model = replace(valid_model, group_id="o/a/${x}")
    expected = "'groupId' with value 'o/a/${x}' does not match a valid id pattern."

    assert validate_raw(model, ValidationLevel.STRICT).errors == (expected,)
    assert validate_effective(model, ValidationLevel.STRICT).errors == (expected,)
