"""Build Model Tools: structural validation for project descriptors.

The package validates an in-memory project model (the descriptor of a build
project) in its raw and effective views. Parsing the serialized descriptor and
resolving inheritance are left to collaborators; a YAML loader and a
super-model defaults step are provided for the CLI and for tests.
"""

__all__ = [
    "__version__",
]

__version__ = "0.3.0"
