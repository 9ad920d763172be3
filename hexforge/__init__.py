"""
hexforge

Scaffolds hexagonal-architecture components (domains, handlers, services,
ports and adapters) with file names and layout driven by a project
configuration file.
"""

__version__ = "0.1.0"

from .core.committer import (
    CommitReport,
    FileSystemCommitter,
    MemoryCommitter,
    OutputCommitter,
)
from .core.config import ConfigManager, ScaffoldConfig, load_config
from .core.generator import (
    ComponentGenerator,
    GenerationResult,
    GeneratorError,
    generate_component,
)
from .core.schema import GeneratedArtifact, GenerationOptions
from .registry import (
    ComponentRegistry,
    RegistryError,
    get_generator,
    list_component_types,
)


def generate(kind, name, config=None, **options):
    """
    Generate a component without writing anything.

    Args:
        kind: Component kind or alias ('domain', 'cd', ...)
        name: Component name
        config: ScaffoldConfig, dict of overrides, or config directory
        **options: Remaining GenerationOptions fields

    Returns:
        GenerationResult with the artifacts
    """
    generator = get_generator(kind, config)
    return generate_component(generator, GenerationOptions(name=name, **options))


__all__ = [
    "CommitReport",
    "ComponentGenerator",
    "ComponentRegistry",
    "ConfigManager",
    "FileSystemCommitter",
    "GeneratedArtifact",
    "GenerationOptions",
    "GenerationResult",
    "GeneratorError",
    "MemoryCommitter",
    "OutputCommitter",
    "RegistryError",
    "ScaffoldConfig",
    "generate",
    "generate_component",
    "get_generator",
    "list_component_types",
    "load_config",
]
