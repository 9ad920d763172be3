"""
Adapter component generator.

Generates one adapter implementing an existing port. The port is located
with the same rules the port generator uses, so the import path follows
the configured layout.
"""

from typing import List

from ..core.generator import ComponentGenerator, GeneratorError
from ..core.naming import to_pascal_case
from ..core.paths import (
    FileResolution,
    FileResolutionRequest,
    RoleName,
    TemplateVariables,
    derive_role_name,
    relative_import_path,
    resolve_file_info,
)
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

ADAPTER_DESCRIPTOR = ComponentDescriptor(
    component_type=ComponentType.ADAPTER,
    description="Adapter implementing an existing port",
    roles=(ADAPTER_FILE,),
    imports={ADAPTER_FILE: (PORT_FILE,)},
)


class AdapterGenerator(ComponentGenerator):
    """Generates an adapter for a port."""

    @property
    def descriptor(self) -> ComponentDescriptor:
        return ADAPTER_DESCRIPTOR

    def validate_options(self, options: GenerationOptions) -> List[str]:
        warnings = super().validate_options(options)
        if options.adapter_type == AdapterType.NONE.value:
            raise GeneratorError("An adapter needs an adapter type other than 'none'.")
        if not options.domain:
            warnings.append(
                f"No domain given for adapter '{options.name}', using '{options.name}'"
            )
        return warnings

    def port_name(self, options: GenerationOptions) -> RoleName:
        """Name of the port the adapter implements."""
        return derive_role_name(options.name, "Port", options.port_name)

    def port_location(self, options: GenerationOptions) -> FileResolution:
        """Where the implemented port lives (or would live)."""
        port = self.port_name(options)
        request = FileResolutionRequest(
            component_type=ComponentType.PORT.value,
            file_role=PORT_FILE,
            variables=TemplateVariables(
                name=port.base,
                domain=effective_domain(options),
                adapter_type=options.adapter_type,
            ),
            output_path=options.output_path,
            custom_path=options.custom_paths.get(PORT_FILE),
        )
        return resolve_file_info(request, self.config)

    def generate(self, options: GenerationOptions) -> List[GeneratedArtifact]:
        label = to_pascal_case(options.adapter_type)
        adapter = derive_role_name(
            options.name, f"{label}Adapter", options.custom_names.get(ADAPTER_FILE)
        )
        port = self.port_name(options)

        location = self.resolve(
            ADAPTER_FILE,
            TemplateVariables(
                name=adapter.base,
                domain=effective_domain(options),
                adapter_type=options.adapter_type,
            ),
            options,
        )
        port_import = {
            "symbol": port.symbol,
            "path": relative_import_path(
                location.file_path, self.port_location(options).file_path
            ),
        }

        content = self.render(
            "adapter.ts.j2",
            {
                "adapter_label": label,
                "adapter_type": options.adapter_type,
                "class_name": adapter.symbol,
                "port_symbol": port.symbol,
                "model": None,
                "imports": [port_import],
            },
        )
        return [
            GeneratedArtifact(
                path=location.file_path,
                content=content,
                role=ADAPTER_FILE,
                symbol=adapter.symbol,
            )
        ]
