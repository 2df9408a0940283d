"""In-memory project model.

This module defines the descriptor tree that validation operates on. All types
are frozen dataclasses and every collection is a tuple, so a model cannot be
changed once built. Field names are the snake_case forms of the descriptor's
element names (``groupId`` -> ``group_id``).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

# Packaging assumed by the super model when a descriptor declares none
DEFAULT_PACKAGING = "jar"

# Group applied by the descriptor format to plugins declared without one
DEFAULT_PLUGIN_GROUP_ID = "org.apache.maven.plugins"


@dataclass(frozen=True)
class Parent:
    """Reference to the descriptor this project inherits from."""

    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    version: Optional[str] = None
    relative_path: str = "../pom.xml"

    @property
    def key(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


@dataclass(frozen=True)
class Dependency:
    """A dependency declaration, direct or managed."""

    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    version: Optional[str] = None
    type: str = "jar"
    scope: Optional[str] = None
    system_path: Optional[str] = None
    optional: bool = False

    @property
    def management_key(self) -> str:
        """Coordinates used in messages, e.g. ``junit:junit:jar``."""
        return f"{self.group_id}:{self.artifact_id}:{self.type}"


@dataclass(frozen=True)
class Plugin:
    group_id: Optional[str] = DEFAULT_PLUGIN_GROUP_ID
    artifact_id: Optional[str] = None
    version: Optional[str] = None

    @property
    def key(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


@dataclass(frozen=True)
class Resource:
    directory: Optional[str] = None
    target_path: Optional[str] = None
    filtering: bool = False


@dataclass(frozen=True)
class Repository:
    """A remote repository entry from ``repositories`` or ``pluginRepositories``."""

    id: Optional[str] = None
    url: Optional[str] = None
    name: Optional[str] = None
    layout: str = "default"


@dataclass(frozen=True)
class DependencyManagement:
    dependencies: Tuple[Dependency, ...] = ()


@dataclass(frozen=True)
class Build:
    plugins: Tuple[Plugin, ...] = ()
    resources: Tuple[Resource, ...] = ()
    test_resources: Tuple[Resource, ...] = ()


@dataclass(frozen=True)
class Model:
    """A project descriptor, either as authored (raw) or fully resolved (effective).

    Attributes:
        model_version: Descriptor format version (e.g. "4.0.0").
        group_id: Project group identifier.
        artifact_id: Project artifact identifier.
        version: Project version.
        packaging: Packaging type. None when the descriptor omits it; the
            effective view gets the super-model default from ``with_defaults()``.
        modules: Relative paths of aggregated sub-projects.

    Examples:
        >>> model = Model(model_version="4.0.0", group_id="org.example",
        ...               artifact_id="demo", version="1.0")
        >>> model.with_defaults().packaging
        'jar'
    """

    model_version: Optional[str] = None
    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    version: Optional[str] = None
    packaging: Optional[str] = None
    name: Optional[str] = None
    parent: Optional[Parent] = None
    dependencies: Tuple[Dependency, ...] = ()
    dependency_management: Optional[DependencyManagement] = None
    build: Optional[Build] = None
    repositories: Tuple[Repository, ...] = ()
    plugin_repositories: Tuple[Repository, ...] = ()
    modules: Tuple[str, ...] = ()

    @property
    def key(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"

    @property
    def managed_dependencies(self) -> Tuple[Dependency, ...]:
        if self.dependency_management is None:
            return ()
        return self.dependency_management.dependencies

    @property
    def plugins(self) -> Tuple[Plugin, ...]:
        return self.build.plugins if self.build is not None else ()

    @property
    def resources(self) -> Tuple[Resource, ...]:
        return self.build.resources if self.build is not None else ()

    @property
    def test_resources(self) -> Tuple[Resource, ...]:
        return self.build.test_resources if self.build is not None else ()

    def with_defaults(self) -> "Model":
        """Return a copy with the super-model defaults applied.

        Only an absent packaging is filled in; an explicitly blank packaging is
        kept so that validation can still report it.
        """
        if self.packaging is not None:
            return self
        return replace(self, packaging=DEFAULT_PACKAGING)


__all__ = [
    "DEFAULT_PACKAGING",
    "DEFAULT_PLUGIN_GROUP_ID",
    "Build",
    "Dependency",
    "DependencyManagement",
    "Model",
    "Parent",
    "Plugin",
    "Repository",
    "Resource",
]
