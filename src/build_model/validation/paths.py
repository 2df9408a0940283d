"""Dotted field paths and the messages built from them.

Paths are composed from the collection name, the singular element name and the
field name, so the same required-field check produces
``'groupId' is missing.`` at the top level and
``'dependencyManagement.dependencies.dependency.groupId' is missing.`` inside a
nested collection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FieldPath:
    """An immutable dotted path into the descriptor."""

    parts: Tuple[str, ...] = ()

    def child(self, name: str) -> "FieldPath":
        return FieldPath(self.parts + (name,))

    def collection(self, name: str, element: str) -> "FieldPath":
        """Path of an element inside a collection, e.g. ``repositories.repository``."""
        return self.child(name).child(element)

    def field(self, name: str) -> str:
        return str(self.child(name))

    def __str__(self) -> str:
        return ".".join(self.parts)


ROOT = FieldPath()
PARENT = ROOT.child("parent")
DEPENDENCIES = ROOT.collection("dependencies", "dependency")
MANAGED_DEPENDENCIES = ROOT.child("dependencyManagement").collection(
    "dependencies", "dependency"
)
BUILD = ROOT.child("build")
PLUGINS = BUILD.collection("plugins", "plugin")
RESOURCES = BUILD.collection("resources", "resource")
TEST_RESOURCES = BUILD.collection("testResources", "testResource")
REPOSITORIES = ROOT.collection("repositories", "repository")
PLUGIN_REPOSITORIES = ROOT.collection("pluginRepositories", "pluginRepository")
MODULES = ROOT.collection("modules", "module")


def missing(path: str) -> str:
    """Message for a required field without a value.

    Examples:
        >>> missing(DEPENDENCIES.field("version"))
        "'dependencies.dependency.version' is missing."
    """
    return f"'{path}' is missing."


def invalid_id(path: str, value: str) -> str:
    """Message for an identifier that does not match the id pattern."""
    return f"'{path}' with value '{value}' does not match a valid id pattern."
