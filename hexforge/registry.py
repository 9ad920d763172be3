"""
Component registry for managing available generators.

Maps component kinds (and their short aliases) to generator classes and
builds configured generator instances.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import ScaffoldConfig, load_config
from .core.generator import ComponentGenerator


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class ComponentRegistry:
    """Registry for managing available component generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[ComponentGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        kind: str,
        generator_class: Type[ComponentGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a component kind.

        Args:
            kind: Primary kind name (e.g., 'domain', 'handler')
            generator_class: Class implementing ComponentGenerator
            aliases: Alternative names for this kind
            replace: If True, replace an existing registration. If False, skip.

        Raises:
            RegistryError: If the class is invalid or an alias conflicts
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, ComponentGenerator
        ):
            raise RegistryError("Generator class must inherit from ComponentGenerator")

        kind_key = kind.lower()

        if kind_key in self._generators and not replace:
            return

        self._generators[kind_key] = generator_class

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == kind_key:
                continue

            if not replace:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing component kind"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != kind_key:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

            self._aliases[alias_key] = kind_key

    def canonical_name(self, kind: str) -> str:
        """
        Resolve an alias to its primary kind name.

        Raises:
            RegistryError: If the kind is not registered
        """
        kind_key = kind.lower()
        if kind_key in self._generators:
            return kind_key
        if kind_key in self._aliases:
            return self._aliases[kind_key]

        raise RegistryError(
            f"No generator registered for component: {kind}. "
            f"Available: {', '.join(self.list_components())}"
        )

    def get_generator_class(self, kind: str) -> Type[ComponentGenerator]:
        """
        Get generator class for a component kind.

        Args:
            kind: Kind name or alias

        Returns:
            Generator class

        Raises:
            RegistryError: If the kind is not found
        """
        return self._generators[self.canonical_name(kind)]

    def create_generator(
        self,
        kind: str,
        config: Optional[Union[ScaffoldConfig, Dict[str, Any], str, Path]] = None,
    ) -> ComponentGenerator:
        """
        Create a generator instance.

        Args:
            kind: Kind name or alias
            config: A resolved configuration, a dict of overrides merged over
                the project configuration, or the directory holding the
                configuration file

        Returns:
            Configured generator instance

        Raises:
            RegistryError: If the kind is unknown or the config type is invalid
        """
        generator_class = self.get_generator_class(kind)

        if isinstance(config, ScaffoldConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(base_path=config)
        elif isinstance(config, dict):
            final_config = load_config(custom_config=config)
        elif config is None:
            final_config = load_config()
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return generator_class(final_config)

    def list_components(self) -> List[str]:
        """Get the registered primary kind names."""
        return sorted(self._generators.keys())

    def get_aliases(self, kind: str) -> List[str]:
        """Get all aliases of a primary kind."""
        kind_key = kind.lower()
        return sorted(a for a, target in self._aliases.items() if target == kind_key)

    def get_component_info(self, kind: str) -> Dict[str, Any]:
        """
        Describe a registered component kind.

        Returns:
            Dict with name, description, roles, optional roles, aliases and class
        """
        kind_key = self.canonical_name(kind)
        generator_class = self._generators[kind_key]
        descriptor = generator_class(ScaffoldConfig()).descriptor

        return {
            "name": kind_key,
            "description": descriptor.description,
            "roles": list(descriptor.roles),
            "optional_roles": list(descriptor.optional_roles),
            "aliases": self.get_aliases(kind_key),
            "class": generator_class.__name__,
        }


_global_registry: Optional[ComponentRegistry] = None


def get_registry() -> ComponentRegistry:
    """Get the global registry, initializing it on first use."""
    global _global_registry
    if _global_registry is None:
        _global_registry = ComponentRegistry()
        _register_builtin_generators(_global_registry)
    return _global_registry


def _register_builtin_generators(registry: ComponentRegistry):
    """Register the built-in component kinds with their short aliases."""
    from .components import (
        AdapterGenerator,
        DomainGenerator,
        HandlerGenerator,
        PortGenerator,
        ServiceGenerator,
    )

    registry.register("domain", DomainGenerator, aliases=["cd"])
    registry.register("handler", HandlerGenerator, aliases=["ch"])
    registry.register("service", ServiceGenerator, aliases=["cs"])
    registry.register("port", PortGenerator, aliases=["cp"])
    registry.register("adapter", AdapterGenerator, aliases=["ca"])


# Public API functions using the global registry


def get_generator(
    kind: str,
    config: Optional[Union[ScaffoldConfig, Dict[str, Any], str, Path]] = None,
) -> ComponentGenerator:
    """Get a generator instance from the global registry."""
    return get_registry().create_generator(kind, config)


def list_component_types() -> List[str]:
    """List all registered component kinds."""
    return get_registry().list_components()


def get_component_info(kind: str) -> Dict[str, Any]:
    """Describe a registered component kind."""
    return get_registry().get_component_info(kind)
