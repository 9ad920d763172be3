"""
Core data structures for scaffolding.

Component kinds, adapter types, file roles and the records passed between
the command layer, the resolution engine and the output committer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class ComponentType(Enum):
    """Kinds of component that can be generated."""

    DOMAIN = "domain"
    HANDLER = "handler"
    SERVICE = "service"
    PORT = "port"
    ADAPTER = "adapter"


class AdapterType(Enum):
    """Technologies an adapter can implement a port for."""

    REPOSITORY = "repository"
    REST = "rest"
    GRAPHQL = "graphql"
    QUEUE = "queue"
    CACHE = "cache"
    STORAGE = "storage"
    NONE = "none"

    @classmethod
    def values(cls) -> list[str]:
        return [adapter.value for adapter in cls]


# File roles
HANDLER_FILE = "handlerFile"
SCHEMA_FILE = "schemaFile"
DTO_FILE = "dtoFile"
MODEL_FILE = "modelFile"
SERVICE_FILE = "serviceFile"
PORT_FILE = "portFile"
ADAPTER_FILE = "adapterFile"


@dataclass
class GenerationOptions:
    """
    Everything a generator needs besides the configuration.

    ``custom_names`` and ``custom_paths`` are keyed by file role. A custom
    path is relative to the output root and replaces the configured
    directory and file-name patterns for that role.
    """

    name: str
    output_path: str = ""
    domain: Optional[str] = None
    adapter_type: str = AdapterType.REPOSITORY.value
    port_name: Optional[str] = None

    # Domain sub-artifact toggles
    model: bool = True
    service: bool = True
    port: bool = True

    # Handler extras
    schema: bool = False
    dto: bool = False
    service_name: Optional[str] = None

    custom_names: Dict[str, str] = field(default_factory=dict)
    custom_paths: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class GeneratedArtifact:
    """A file to be written: path relative to the output root, and its text."""

    path: str
    content: str
    role: str = ""
    symbol: str = ""


@dataclass(frozen=True)
class ComponentDescriptor:
    """Declares the file roles a component kind produces."""

    component_type: ComponentType
    description: str
    roles: Tuple[str, ...]
    optional_roles: Tuple[str, ...] = ()
    # importer role -> roles it imports
    imports: Dict[str, Tuple[str, ...]] = field(default_factory=dict)


# Variables available to directory and file-name patterns
TEMPLATE_VARIABLES = (
    "name",
    "pascalName",
    "camelName",
    "dashName",
    "snakeName",
    "domainName",
    "serviceName",
    "adapterType",
)
