"""
Project inspection helpers.

Look at what already exists under the configured base path so the command
layer can warn about missing prerequisites before generating.
"""

from pathlib import Path
from typing import List, Union

from .core.config import ScaffoldConfig
from .core.naming import to_camel_case, to_pascal_case
from .core.paths import (
    FileResolutionRequest,
    TemplateVariables,
    resolve_file_info,
    split_extension,
)
from .core.schema import PORT_FILE, ComponentType
from .logging_config import get_logger

logger = get_logger(__name__)

# Directories under the base path that never hold a domain
NON_DOMAIN_DIRECTORIES = frozenset({"infra", "handlers", "shared", "config"})


def find_existing_domains(root: Union[str, Path], config: ScaffoldConfig) -> List[str]:
    """
    List the domain directories under ``<root>/<basePath>``.

    Hidden directories and infrastructure folders are skipped.
    """
    base = Path(root) / config.base_path
    if not base.is_dir():
        return []

    return sorted(
        entry.name
        for entry in base.iterdir()
        if entry.is_dir()
        and not entry.name.startswith(".")
        and entry.name not in NON_DOMAIN_DIRECTORIES
    )


def domain_exists(root: Union[str, Path], domain: str, config: ScaffoldConfig) -> bool:
    return to_camel_case(domain) in find_existing_domains(root, config)


def find_ports_in_domain(
    root: Union[str, Path], domain: str, config: ScaffoldConfig
) -> List[str]:
    """
    List the port symbols found in a domain's port directory.

    The directory is resolved from the configuration, so custom layouts
    are inspected where generated ports would actually be. File names in
    any naming case are mapped back to their PascalCase symbol.

    Returns:
        Sorted port symbols, e.g. ``["PaymentRepositoryPort"]``
    """
    location = resolve_file_info(
        FileResolutionRequest(
            component_type=ComponentType.PORT.value,
            file_role=PORT_FILE,
            variables=TemplateVariables(name=domain, domain=domain),
        ),
        config,
    )
    port_dir = Path(root) / location.directory
    if not port_dir.is_dir():
        logger.debug("No port directory at %s", port_dir)
        return []

    ports = []
    for entry in port_dir.iterdir():
        if not entry.is_file():
            continue
        symbol = to_pascal_case(split_extension(entry.name)[0])
        if symbol.endswith("Port"):
            ports.append(symbol)
    return sorted(ports)
