"""Shared pytest configuration, fixtures, and utilities for descriptor validation testing."""

from pathlib import Path
from typing import Callable

import pytest

from build_model.core.model import (
    Build,
    Dependency,
    DependencyManagement,
    Model,
    Plugin,
    Repository,
    Resource,
)
from build_model.ingestion.descriptor import load_model

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "poms" / "validation"


def read_model(pom: str) -> Model:
    """Load a descriptor fixture from tests/fixtures/poms/validation."""
    path = FIXTURES_DIR / pom
    assert path.exists(), f"missing resource: {path}"
    return load_model(path)


@pytest.fixture
def read() -> Callable[[str], Model]:
    """Fixture giving tests the fixture loader."""
    return read_model


@pytest.fixture
def valid_model() -> Model:
    """A complete effective model that passes every check at every level."""
    return Model(
        model_version="4.0.0",
        group_id="org.example.build",
        artifact_id="demo-app",
        version="1.0.0",
        packaging="jar",
        dependencies=(
            Dependency(group_id="junit", artifact_id="junit", version="4.13.2", scope="test"),
        ),
        dependency_management=DependencyManagement(
            dependencies=(
                Dependency(group_id="org.slf4j", artifact_id="slf4j-api", version="2.0.9"),
            )
        ),
        build=Build(
            plugins=(Plugin(artifact_id="maven-compiler-plugin", version="3.11.0"),),
            resources=(Resource(directory="src/main/resources"),),
            test_resources=(Resource(directory="src/test/resources"),),
        ),
        repositories=(Repository(id="central", url="https://repo.maven.apache.org/maven2"),),
    )
