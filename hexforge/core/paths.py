"""
Path and name resolution.

Turns a component name, a file role and the configuration into the exact
directory, file name and output path of a generated file, and derives the
symbol names and relative import paths that tie generated files together.

File names follow ``fileNameCase``; symbol names (classes, interfaces) are
always PascalCase.
"""

import posixpath
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..logging_config import get_logger
from .config import ScaffoldConfig
from .naming import (
    NamingCase,
    convert_case,
    ensure_suffix,
    strip_suffix,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)
from .schema import (
    ADAPTER_FILE,
    DTO_FILE,
    HANDLER_FILE,
    MODEL_FILE,
    PORT_FILE,
    SCHEMA_FILE,
    SERVICE_FILE,
)
from .templates import resolve_placeholders

logger = get_logger(__name__)


@dataclass(frozen=True)
class FileRoleSpec:
    """Where a file role looks up its templates, and its built-in fallbacks."""

    directory_component: str
    directory_role: str
    default_directory: str
    default_pattern: str


FILE_ROLES: Dict[Tuple[str, str], FileRoleSpec] = {
    ("handler", HANDLER_FILE): FileRoleSpec(
        "handler", "base", "handlers", "{{dashName}}.handler.ts"
    ),
    ("handler", SCHEMA_FILE): FileRoleSpec(
        "handler", "schema", "handlers/schemas", "{{pascalName}}Schema.ts"
    ),
    ("handler", DTO_FILE): FileRoleSpec(
        "handler", "schema", "handlers/schemas", "{{dashName}}.dto.ts"
    ),
    ("domain", MODEL_FILE): FileRoleSpec(
        "domain", "model", "{{domainName}}/models", "{{pascalName}}.ts"
    ),
    ("domain", SERVICE_FILE): FileRoleSpec(
        "domain", "service", "{{domainName}}/services", "{{pascalName}}Service.ts"
    ),
    ("domain", PORT_FILE): FileRoleSpec(
        "domain", "port", "{{domainName}}/ports", "{{pascalName}}{{adapterType}}Port.ts"
    ),
    # Domain adapters live with the other infrastructure code
    ("domain", ADAPTER_FILE): FileRoleSpec(
        "adapter", "base", "infra/{{adapterType}}", "{{pascalName}}{{adapterType}}Adapter.ts"
    ),
    ("service", SERVICE_FILE): FileRoleSpec(
        "service", "base", "{{domainName}}/services", "{{pascalName}}Service.ts"
    ),
    ("port", PORT_FILE): FileRoleSpec(
        "port", "base", "{{domainName}}/ports", "{{pascalName}}Port.ts"
    ),
    ("port", ADAPTER_FILE): FileRoleSpec(
        "adapter", "base", "infra/{{adapterType}}", "{{pascalName}}Adapter.ts"
    ),
    ("adapter", ADAPTER_FILE): FileRoleSpec(
        "adapter", "base", "infra/{{adapterType}}", "{{pascalName}}{{adapterType}}Adapter.ts"
    ),
}


def file_role_spec(component_type: str, file_role: str) -> FileRoleSpec:
    """
    Return the lookup rules for a file role.

    Unknown roles fall back to the component's ``base`` directory
    (default ``<component>s``) and a ``{{pascalName}}<Role>.ts`` file name,
    where ``<Role>`` is the role without its ``File`` suffix.
    """
    spec = FILE_ROLES.get((component_type, file_role))
    if spec is not None:
        return spec

    role_label = to_pascal_case(strip_suffix(file_role, "File"))
    return FileRoleSpec(
        component_type,
        "base",
        f"{component_type}s",
        f"{{{{pascalName}}}}{role_label}.ts",
    )


@dataclass(frozen=True)
class TemplateVariables:
    """
    Values substituted into directory and file-name patterns.

    ``adapterType`` renders lowercase in directories (``infra/repository``)
    and PascalCase in file names (``PaymentRepositoryPort.ts``).
    """

    name: str
    domain: str = ""
    service: str = ""
    adapter_type: str = ""

    @property
    def pascal_name(self) -> str:
        return to_pascal_case(self.name)

    @property
    def camel_name(self) -> str:
        return to_camel_case(self.name)

    @property
    def dash_name(self) -> str:
        return to_kebab_case(self.name)

    @property
    def snake_name(self) -> str:
        return to_snake_case(self.name)

    @property
    def domain_name(self) -> str:
        return to_camel_case(self.domain)

    def to_mapping(self, for_file_name: bool = False) -> Dict[str, str]:
        """Return the placeholder mapping for directory or file-name patterns."""
        if for_file_name:
            adapter_type = to_pascal_case(self.adapter_type)
        else:
            adapter_type = to_kebab_case(self.adapter_type)

        return {
            "name": self.name,
            "pascalName": self.pascal_name,
            "camelName": self.camel_name,
            "dashName": self.dash_name,
            "snakeName": self.snake_name,
            "domainName": self.domain_name,
            "serviceName": to_pascal_case(self.service),
            "adapterType": adapter_type,
        }


@dataclass(frozen=True)
class FileResolutionRequest:
    """One file to place: which role of which component, with which names."""

    component_type: str
    file_role: str
    variables: TemplateVariables
    output_path: str = ""
    custom_path: Optional[str] = None


@dataclass(frozen=True)
class FileResolution:
    """Where a file goes. ``directory`` and ``file_path`` include every prefix."""

    directory: str
    file_name: str
    file_path: str

    @property
    def stem(self) -> str:
        """File name without its final extension."""
        return split_extension(self.file_name)[0]


def split_extension(file_name: str) -> Tuple[str, str]:
    """Split at the last dot: ``a.handler.ts`` -> (``a.handler``, ``.ts``)."""
    index = file_name.rfind(".")
    if index == -1:
        return file_name, ""
    return file_name[:index], file_name[index:]


def apply_file_name_case(file_name: str, file_name_case: NamingCase) -> str:
    """
    Re-case the name portion of a resolved file name.

    The extension after the last dot is kept verbatim. Names without an
    extension are left untouched. PascalCase is a no-op because default
    patterns are already written in it.
    """
    if file_name_case == NamingCase.PASCAL_CASE:
        return file_name

    name_part, extension = split_extension(file_name)
    if not extension:
        return file_name
    return convert_case(name_part, file_name_case) + extension


def join_path(*fragments: Optional[str]) -> str:
    """
    Join path fragments POSIX-style.

    Leading separators are stripped from every fragment so that no fragment
    can reset the path to the filesystem root.
    """
    parts = []
    for fragment in fragments:
        if not fragment:
            continue
        fragment = fragment.replace("\\", "/").lstrip("/")
        if fragment:
            parts.append(fragment)

    if not parts:
        return "."
    return posixpath.normpath(posixpath.join(*parts))


def resolve_file_info(
    request: FileResolutionRequest, config: ScaffoldConfig
) -> FileResolution:
    """
    Resolve directory, file name and path for one file role.

    Args:
        request: Component type, file role, variables and output prefix
        config: Effective configuration

    Returns:
        The resolved location
    """
    if request.custom_path:
        file_path = join_path(request.custom_path)
        resolution = FileResolution(
            directory=posixpath.dirname(file_path) or ".",
            file_name=posixpath.basename(file_path),
            file_path=file_path,
        )
        logger.debug(
            "%s.%s -> %s (custom path)",
            request.component_type,
            request.file_role,
            resolution.file_path,
        )
        return resolution

    spec = file_role_spec(request.component_type, request.file_role)

    directory_template = config.directory_template(
        spec.directory_component, spec.directory_role
    )
    if directory_template is None:
        directory_template = spec.default_directory
    directory = resolve_placeholders(directory_template, request.variables.to_mapping())

    pattern = config.file_pattern(request.component_type, request.file_role)
    if pattern is None:
        pattern = spec.default_pattern
    file_name = resolve_placeholders(
        pattern, request.variables.to_mapping(for_file_name=True)
    )
    file_name = apply_file_name_case(file_name, config.file_name_case)

    full_directory = join_path(request.output_path, config.base_path, directory)
    resolution = FileResolution(
        directory=full_directory,
        file_name=file_name,
        file_path=join_path(full_directory, file_name),
    )
    logger.debug(
        "%s.%s -> %s", request.component_type, request.file_role, resolution.file_path
    )
    return resolution


def relative_import_path(importer_path: str, importee_path: str) -> str:
    """
    Module specifier for importing ``importee_path`` from ``importer_path``.

    Both are file paths relative to the same root. The result is the POSIX
    relative path between their directories joined with the importee's file
    name minus its extension, always starting with ``./`` or ``../``.
    """
    importer_dir = posixpath.dirname(importer_path) or "."
    importee_dir = posixpath.dirname(importee_path) or "."
    stem = split_extension(posixpath.basename(importee_path))[0]

    relative_dir = posixpath.relpath(importee_dir, importer_dir)
    specifier = stem if relative_dir == "." else posixpath.join(relative_dir, stem)

    if not specifier.startswith("."):
        specifier = f"./{specifier}"
    return specifier


@dataclass(frozen=True)
class RoleName:
    """Name of one sub-artifact: the base fed to patterns and its symbol."""

    base: str
    symbol: str


def derive_role_name(
    default_name: str, suffix: str = "", custom_name: Optional[str] = None
) -> RoleName:
    """
    Work out the symbol name for a role and the base name behind it.

    Without a custom name the symbol is the PascalCase default name plus
    ``suffix``. A custom name keeps any part of ``suffix`` it already ends
    with, so the suffix is never doubled. The base is the symbol with the
    suffix removed, which keeps patterns like ``{{pascalName}}Port.ts`` in
    step with the symbol.

    Args:
        default_name: Name used when no custom name is given
        suffix: Conventional suffix such as ``Service`` or ``RepositoryPort``
        custom_name: Caller-supplied override

    Returns:
        Base name and symbol name
    """
    if custom_name:
        symbol = ensure_suffix(to_pascal_case(custom_name), suffix)
        base = strip_suffix(symbol, suffix) if suffix else symbol
    else:
        base = to_pascal_case(default_name)
        symbol = base + suffix

    return RoleName(base=base, symbol=symbol)
