"""Descriptor loading.

Reads a YAML (or JSON) rendition of a project descriptor into the in-memory
``Model`` tree. Keys follow the descriptor's element names::

    modelVersion: "4.0.0"
    groupId: org.example
    artifactId: demo
    version: "1.0"
    dependencies:
      - groupId: junit
        artifactId: junit
        version: "4.13.2"
        scope: test
    build:
      plugins:
        - artifactId: maven-compiler-plugin
          version: "3.11.0"
      resources:
        - directory: src/main/resources
    repositories:
      - id: central
        url: https://repo.maven.apache.org/maven2

Scalars are read as written: ``version: 1.10`` stays ``"1.10"`` and only
``null``, ``~`` and empty values become None.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml

from build_model.core.model import (
    DEFAULT_PLUGIN_GROUP_ID,
    Build,
    Dependency,
    DependencyManagement,
    Model,
    Parent,
    Plugin,
    Repository,
    Resource,
)

logger = logging.getLogger(__name__)


class DescriptorLoader(yaml.SafeLoader):
    """SafeLoader that resolves nulls only, keeping every other scalar as text."""


DescriptorLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag == "tag:yaml.org,2002:null"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _text(value: Any) -> Optional[str]:
    """Convert a scalar to a string, keeping None as None."""
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise ValueError(f"Expected a scalar value, got {type(value).__name__}: {value!r}")
    return str(value)


def _flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() == "true"


def _section(data: Mapping[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be a mapping, got {type(value).__name__}")
    return value


def _entries(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def _mappings(data: Mapping[str, Any], key: str) -> List[Dict[str, Any]]:
    entries = _entries(data, key)
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f"Entries of '{key}' must be mappings, got {entry!r}")
    return entries


def _dependency(entry: Mapping[str, Any]) -> Dependency:
    return Dependency(
        group_id=_text(entry.get("groupId")),
        artifact_id=_text(entry.get("artifactId")),
        version=_text(entry.get("version")),
        type=_text(entry.get("type")) or "jar",
        scope=_text(entry.get("scope")),
        system_path=_text(entry.get("systemPath")),
        optional=_flag(entry.get("optional")),
    )


def _plugin(entry: Mapping[str, Any]) -> Plugin:
    group_id = entry.get("groupId", DEFAULT_PLUGIN_GROUP_ID)
    return Plugin(
        group_id=_text(group_id),
        artifact_id=_text(entry.get("artifactId")),
        version=_text(entry.get("version")),
    )


def _resource(entry: Mapping[str, Any]) -> Resource:
    return Resource(
        directory=_text(entry.get("directory")),
        target_path=_text(entry.get("targetPath")),
        filtering=_flag(entry.get("filtering")),
    )


def _repository(entry: Mapping[str, Any]) -> Repository:
    return Repository(
        id=_text(entry.get("id")),
        url=_text(entry.get("url")),
        name=_text(entry.get("name")),
        layout=_text(entry.get("layout")) or "default",
    )


def _parent(data: Mapping[str, Any]) -> Optional[Parent]:
    if data.get("parent") is None:
        return None
    section = _section(data, "parent")
    return Parent(
        group_id=_text(section.get("groupId")),
        artifact_id=_text(section.get("artifactId")),
        version=_text(section.get("version")),
        relative_path=_text(section.get("relativePath")) or "../pom.xml",
    )


def _build(data: Mapping[str, Any]) -> Optional[Build]:
    if data.get("build") is None:
        return None
    section = _section(data, "build")
    return Build(
        plugins=tuple(_plugin(e) for e in _mappings(section, "plugins")),
        resources=tuple(_resource(e) for e in _mappings(section, "resources")),
        test_resources=tuple(_resource(e) for e in _mappings(section, "testResources")),
    )


def _modules(data: Mapping[str, Any]) -> Tuple[str, ...]:
    # A blank entry is kept as "" so validation can report it
    return tuple(_text(m) or "" for m in _entries(data, "modules"))


def model_from_dict(data: Mapping[str, Any]) -> Model:
    """Build a ``Model`` from a descriptor mapping.

    Args:
        data: Parsed descriptor using the descriptor's element names as keys.

    Returns:
        The raw model. Absent elements stay None or empty; no defaults beyond
        those of the descriptor format itself are applied.

    Raises:
        ValueError: If the document is not a mapping or a section has the wrong shape.

    Examples:
        >>> model = model_from_dict({"modelVersion": "4.0.0", "artifactId": "demo"})
        >>> model.artifact_id
        'demo'
        >>> model.group_id is None
        True
    """
    if not isinstance(data, dict):
        raise ValueError(f"Descriptor must be a mapping, got {type(data).__name__}")

    dependency_management = None
    if data.get("dependencyManagement") is not None:
        section = _section(data, "dependencyManagement")
        dependency_management = DependencyManagement(
            dependencies=tuple(_dependency(e) for e in _mappings(section, "dependencies"))
        )

    return Model(
        model_version=_text(data.get("modelVersion")),
        group_id=_text(data.get("groupId")),
        artifact_id=_text(data.get("artifactId")),
        version=_text(data.get("version")),
        packaging=_text(data.get("packaging")),
        name=_text(data.get("name")),
        parent=_parent(data),
        dependencies=tuple(_dependency(e) for e in _mappings(data, "dependencies")),
        dependency_management=dependency_management,
        build=_build(data),
        repositories=tuple(_repository(e) for e in _mappings(data, "repositories")),
        plugin_repositories=tuple(
            _repository(e) for e in _mappings(data, "pluginRepositories")
        ),
        modules=_modules(data),
    )


def load_model(path: Path) -> Model:
    """Load a descriptor file into a raw ``Model``.

    Args:
        path: Path to a YAML or JSON descriptor.

    Returns:
        The raw model as authored.

    Raises:
        FileNotFoundError: If the descriptor does not exist.
        ValueError: If the file cannot be read or parsed, or has the wrong shape.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Descriptor not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.load(f, Loader=DescriptorLoader)
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to read descriptor {path}: {e}") from e

    if data is None:
        raise ValueError(f"Descriptor {path} is empty")

    try:
        model = model_from_dict(data)
    except ValueError as e:
        raise ValueError(f"Invalid descriptor {path}: {e}") from e

    logger.debug("Loaded descriptor %s (%s)", path, model.key)
    return model


__all__ = ["load_model", "model_from_dict"]
