"""Service component generator."""

from typing import List

from ..core.generator import ComponentGenerator
from ..core.paths import TemplateVariables, derive_role_name
from ..core.schema import (
    SERVICE_FILE,
    ComponentDescriptor,
    ComponentType,
    GeneratedArtifact,
    GenerationOptions,
)

SERVICE_DESCRIPTOR = ComponentDescriptor(
    component_type=ComponentType.SERVICE,
    description="Service class inside an existing domain",
    roles=(SERVICE_FILE,),
)


def effective_domain(options: GenerationOptions) -> str:
    """Domain the component belongs to; the component name when none is given."""
    return options.domain or options.name


class ServiceGenerator(ComponentGenerator):
    """Generates a standalone service file."""

    @property
    def descriptor(self) -> ComponentDescriptor:
        return SERVICE_DESCRIPTOR

    def validate_options(self, options: GenerationOptions) -> List[str]:
        warnings = super().validate_options(options)
        if not options.domain:
            warnings.append(
                f"No domain given for service '{options.name}', using '{options.name}'"
            )
        return warnings

    def generate(self, options: GenerationOptions) -> List[GeneratedArtifact]:
        service = derive_role_name(
            options.name, "Service", options.custom_names.get(SERVICE_FILE)
        )
        variables = TemplateVariables(
            name=service.base,
            domain=effective_domain(options),
            service=service.base,
            adapter_type=options.adapter_type,
        )
        location = self.resolve(SERVICE_FILE, variables, options)

        content = self.render(
            "service.ts.j2",
            {
                "subject": options.name,
                "class_name": service.symbol,
                "imports": [],
                "model": None,
                "port": None,
            },
        )
        return [
            GeneratedArtifact(
                path=location.file_path,
                content=content,
                role=SERVICE_FILE,
                symbol=service.symbol,
            )
        ]
