"""
Port component generator.

Generates a port interface inside a domain and, unless the adapter type
is ``none``, the infrastructure adapter that implements it.
"""

from typing import List

from ..core.generator import ComponentGenerator
from ..core.naming import to_pascal_case
from ..core.paths import TemplateVariables, derive_role_name, relative_import_path
from ..core.schema import (
    ADAPTER_FILE,
    PORT_FILE,
    AdapterType,
    ComponentDescriptor,
    ComponentType,
    GeneratedArtifact,
    GenerationOptions,
)
from .service import effective_domain

PORT_DESCRIPTOR = ComponentDescriptor(
    component_type=ComponentType.PORT,
    description="Port interface and its infrastructure adapter",
    roles=(PORT_FILE, ADAPTER_FILE),
    optional_roles=(ADAPTER_FILE,),
    imports={ADAPTER_FILE: (PORT_FILE,)},
)


class PortGenerator(ComponentGenerator):
    """Generates a port and, optionally, its adapter."""

    @property
    def descriptor(self) -> ComponentDescriptor:
        return PORT_DESCRIPTOR

    def validate_options(self, options: GenerationOptions) -> List[str]:
        warnings = super().validate_options(options)
        if not options.domain:
            warnings.append(
                f"No domain given for port '{options.name}', using '{options.name}'"
            )
        return warnings

    def generate(self, options: GenerationOptions) -> List[GeneratedArtifact]:
        custom_port = options.port_name or options.custom_names.get(PORT_FILE)
        port = derive_role_name(options.name, "Port", custom_port)
        adapter = derive_role_name(
            port.base, "Adapter", options.custom_names.get(ADAPTER_FILE)
        )
        domain = effective_domain(options)

        port_location = self.resolve(
            PORT_FILE,
            TemplateVariables(
                name=port.base, domain=domain, adapter_type=options.adapter_type
            ),
            options,
        )
        artifacts = [
            GeneratedArtifact(
                path=port_location.file_path,
                content=self.render(
                    "port.ts.j2",
                    {
                        "adapter_label": to_pascal_case(options.adapter_type),
                        "interface_name": port.symbol,
                        "model": None,
                    },
                ),
                role=PORT_FILE,
                symbol=port.symbol,
            )
        ]

        if options.adapter_type == AdapterType.NONE.value:
            return artifacts

        adapter_location = self.resolve(
            ADAPTER_FILE,
            TemplateVariables(
                name=adapter.base, domain=domain, adapter_type=options.adapter_type
            ),
            options,
        )
        port_import = {
            "symbol": port.symbol,
            "path": relative_import_path(
                adapter_location.file_path, port_location.file_path
            ),
        }
        artifacts.append(
            GeneratedArtifact(
                path=adapter_location.file_path,
                content=self.render(
                    "adapter.ts.j2",
                    {
                        "adapter_label": to_pascal_case(options.adapter_type),
                        "adapter_type": options.adapter_type,
                        "class_name": adapter.symbol,
                        "port_symbol": port.symbol,
                        "model": None,
                        "imports": [port_import],
                    },
                ),
                role=ADAPTER_FILE,
                symbol=adapter.symbol,
            )
        )
        return artifacts
