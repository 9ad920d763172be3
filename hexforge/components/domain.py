"""
Domain component generator.

A domain is generated as one unit: model, service, port and the adapter
implementing the port, each independently toggled and named, with the
service and adapter importing the files generated next to them.
"""

from typing import Dict, List, Optional

from ..core.generator import ComponentGenerator
from ..core.naming import to_camel_case, to_pascal_case, strip_suffix
from ..core.paths import (
    FileResolution,
    RoleName,
    TemplateVariables,
    derive_role_name,
    relative_import_path,
)
from ..core.schema import (
    ADAPTER_FILE,
    MODEL_FILE,
    PORT_FILE,
    SERVICE_FILE,
    AdapterType,
    ComponentDescriptor,
    ComponentType,
    GeneratedArtifact,
    GenerationOptions,
)
from ..logging_config import get_logger

logger = get_logger(__name__)

DOMAIN_DESCRIPTOR = ComponentDescriptor(
    component_type=ComponentType.DOMAIN,
    description="Domain model, service, port and adapter",
    roles=(MODEL_FILE, SERVICE_FILE, PORT_FILE, ADAPTER_FILE),
    optional_roles=(MODEL_FILE, SERVICE_FILE, PORT_FILE, ADAPTER_FILE),
    imports={
        SERVICE_FILE: (MODEL_FILE, PORT_FILE),
        PORT_FILE: (MODEL_FILE,),
        ADAPTER_FILE: (PORT_FILE, MODEL_FILE),
    },
)


def adapter_type_label(adapter_type: str) -> str:
    """PascalCase adapter type for symbol names; empty for ``none``."""
    if adapter_type == AdapterType.NONE.value:
        return ""
    return to_pascal_case(adapter_type)


class DomainGenerator(ComponentGenerator):
    """Generates the files of a whole domain."""

    @property
    def descriptor(self) -> ComponentDescriptor:
        return DOMAIN_DESCRIPTOR

    def enabled_roles(self, options: GenerationOptions) -> List[str]:
        """Roles produced for these options, in write order."""
        roles = []
        if options.model:
            roles.append(MODEL_FILE)
        if options.service:
            roles.append(SERVICE_FILE)
        if options.port:
            roles.append(PORT_FILE)
            if options.adapter_type != AdapterType.NONE.value:
                roles.append(ADAPTER_FILE)
        return roles

    def role_names(self, options: GenerationOptions) -> Dict[str, RoleName]:
        """Base and symbol names for every role, custom names applied."""
        label = adapter_type_label(options.adapter_type)
        suffixes = {
            MODEL_FILE: "",
            SERVICE_FILE: "Service",
            PORT_FILE: f"{label}Port",
            ADAPTER_FILE: f"{label}Adapter",
        }
        return {
            role: derive_role_name(options.name, suffix, options.custom_names.get(role))
            for role, suffix in suffixes.items()
        }

    def generate(self, options: GenerationOptions) -> List[GeneratedArtifact]:
        roles = self.enabled_roles(options)
        names = self.role_names(options)
        adapter_type = (
            "" if options.adapter_type == AdapterType.NONE.value else options.adapter_type
        )

        locations: Dict[str, FileResolution] = {}
        for role in roles:
            variables = TemplateVariables(
                name=names[role].base,
                domain=options.name,
                service=names[SERVICE_FILE].base,
                adapter_type=adapter_type,
            )
            locations[role] = self.resolve(role, variables, options)

        def reference(importer: str, importee: str) -> Optional[Dict[str, str]]:
            if importee not in locations:
                return None
            symbol = names[importee].symbol
            return {
                "symbol": symbol,
                "path": relative_import_path(
                    locations[importer].file_path, locations[importee].file_path
                ),
                "variable": to_camel_case(strip_suffix(symbol, "Port")),
            }

        artifacts = []
        for role in roles:
            context = {
                "subject": names[MODEL_FILE].symbol,
                "adapter_type": adapter_type,
                "adapter_label": adapter_type_label(options.adapter_type) or "Domain",
            }

            if role == MODEL_FILE:
                template = "model.ts.j2"
                context["class_name"] = names[MODEL_FILE].symbol
            elif role == SERVICE_FILE:
                template = "service.ts.j2"
                model = reference(role, MODEL_FILE)
                port = reference(role, PORT_FILE)
                context.update(
                    class_name=names[SERVICE_FILE].symbol,
                    model=model,
                    port=port,
                    imports=[item for item in (model, port) if item],
                )
            elif role == PORT_FILE:
                template = "port.ts.j2"
                context.update(
                    interface_name=names[PORT_FILE].symbol,
                    model=reference(role, MODEL_FILE),
                )
            else:
                template = "adapter.ts.j2"
                port = reference(role, PORT_FILE)
                model = reference(role, MODEL_FILE)
                context.update(
                    class_name=names[ADAPTER_FILE].symbol,
                    port_symbol=names[PORT_FILE].symbol,
                    model=model,
                    imports=[item for item in (port, model) if item],
                )

            artifacts.append(
                GeneratedArtifact(
                    path=locations[role].file_path,
                    content=self.render(template, context),
                    role=role,
                    symbol=names[role].symbol,
                )
            )

        logger.debug("Domain %s: %d artifact(s)", options.name, len(artifacts))
        return artifacts
