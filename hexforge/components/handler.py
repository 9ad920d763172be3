"""
Handler component generator.

Generates a Middy Lambda handler with an optional Zod schema and request
and response DTOs. When the handler belongs to a domain it imports the
domain service from wherever the configuration places services.
"""

from typing import Dict, List, Optional

from ..core.generator import ComponentGenerator
from ..core.naming import to_camel_case, to_pascal_case
from ..core.paths import (
    FileResolution,
    TemplateVariables,
    derive_role_name,
    relative_import_path,
)
from ..core.schema import (
    DTO_FILE,
    HANDLER_FILE,
    SCHEMA_FILE,
    SERVICE_FILE,
    ComponentDescriptor,
    ComponentType,
    GeneratedArtifact,
    GenerationOptions,
)

HANDLER_DESCRIPTOR = ComponentDescriptor(
    component_type=ComponentType.HANDLER,
    description="Lambda handler with optional Zod schema and DTOs",
    roles=(HANDLER_FILE, SCHEMA_FILE, DTO_FILE),
    optional_roles=(SCHEMA_FILE, DTO_FILE),
    imports={HANDLER_FILE: (SCHEMA_FILE, DTO_FILE, SERVICE_FILE)},
)


class HandlerGenerator(ComponentGenerator):
    """Generates a handler and its validation files."""

    @property
    def descriptor(self) -> ComponentDescriptor:
        return HANDLER_DESCRIPTOR

    def service_location(
        self, options: GenerationOptions
    ) -> Optional[tuple[str, FileResolution]]:
        """Symbol and location of the domain service, if the handler uses one."""
        if not options.domain:
            return None

        service = derive_role_name(options.service_name or options.domain, "Service")
        location = self.resolve(
            SERVICE_FILE,
            TemplateVariables(
                name=service.base, domain=options.domain, service=service.base
            ),
            options,
            component_type=ComponentType.SERVICE.value,
        )
        return service.symbol, location

    def generate(self, options: GenerationOptions) -> List[GeneratedArtifact]:
        handler_name = to_camel_case(options.name)
        pascal_name = to_pascal_case(options.name)
        variables = TemplateVariables(
            name=options.name,
            domain=options.domain or "",
            service=options.service_name or options.domain or "",
            adapter_type=options.adapter_type,
        )

        handler_location = self.resolve(HANDLER_FILE, variables, options)
        handler_path = handler_location.file_path
        artifacts = []

        schema: Optional[Dict[str, str]] = None
        if options.schema:
            schema_name = f"{handler_name}Schema"
            schema_location = self.resolve(SCHEMA_FILE, variables, options)
            schema = {
                "symbol": schema_name,
                "path": relative_import_path(handler_path, schema_location.file_path),
            }
            artifacts.append(
                GeneratedArtifact(
                    path=schema_location.file_path,
                    content=self.render(
                        "schema.ts.j2",
                        {
                            "handler_name": handler_name,
                            "schema_name": schema_name,
                            "type_name": f"{pascal_name}Payload",
                        },
                    ),
                    role=SCHEMA_FILE,
                    symbol=schema_name,
                )
            )

        dto: Optional[Dict[str, str]] = None
        if options.dto:
            dto_location = self.resolve(DTO_FILE, variables, options)
            dto = {
                "request": f"{pascal_name}RequestDto",
                "response": f"{pascal_name}ResponseDto",
                "path": relative_import_path(handler_path, dto_location.file_path),
            }
            artifacts.append(
                GeneratedArtifact(
                    path=dto_location.file_path,
                    content=self.render(
                        "dto.ts.j2",
                        {
                            "handler_name": handler_name,
                            "request_name": dto["request"],
                            "response_name": dto["response"],
                        },
                    ),
                    role=DTO_FILE,
                    symbol=dto["request"],
                )
            )

        service = None
        service_target = self.service_location(options)
        if service_target is not None:
            symbol, location = service_target
            service = {
                "symbol": symbol,
                "path": relative_import_path(handler_path, location.file_path),
            }

        handler = GeneratedArtifact(
            path=handler_path,
            content=self.render(
                "handler.ts.j2",
                {
                    "handler_name": handler_name,
                    "service": service,
                    "schema": schema,
                    "dto": dto,
                },
            ),
            role=HANDLER_FILE,
            symbol="handler",
        )
        return [handler] + artifacts
