"""
Test cases for the handler generator.
"""

import pytest

from hexforge.components.handler import HandlerGenerator
from hexforge.core.schema import (
    DTO_FILE,
    HANDLER_FILE,
    SCHEMA_FILE,
    SERVICE_FILE,
    GenerationOptions,
)


def by_role(artifacts):
    return {artifact.role: artifact for artifact in artifacts}


@pytest.fixture
def generator(default_config):
    return HandlerGenerator(default_config)


class TestHandler:
    """Test handler files and their imports."""

    def test_plain_handler(self, generator):
        artifacts = generator.generate(GenerationOptions(name="createUser"))
        assert len(artifacts) == 1
        handler = artifacts[0]
        assert handler.path == "src/handlers/create-user.handler.ts"
        assert "export const handler = middy(baseHandler)" in handler.content
        assert "Error in createUser handler" in handler.content
        assert "ZodError" not in handler.content

    def test_schema_and_dto(self, generator):
        options = GenerationOptions(name="createUser", schema=True, dto=True)
        artifacts = by_role(generator.generate(options))
        assert set(artifacts) == {HANDLER_FILE, SCHEMA_FILE, DTO_FILE}
        assert artifacts[SCHEMA_FILE].path == "src/handlers/schemas/CreateUserSchema.ts"
        assert artifacts[DTO_FILE].path == "src/handlers/schemas/create-user.dto.ts"

        handler = artifacts[HANDLER_FILE].content
        assert "import { createUserSchema } from './schemas/CreateUserSchema';" in handler
        assert (
            "import { CreateUserRequestDto, CreateUserResponseDto } "
            "from './schemas/create-user.dto';" in handler
        )
        assert "if (error.name === 'ZodError')" in handler

    def test_schema_content(self, generator):
        options = GenerationOptions(name="createUser", schema=True)
        schema = by_role(generator.generate(options))[SCHEMA_FILE]
        assert "export const createUserSchema = z.object({" in schema.content
        assert "export type CreateUserPayload = z.infer<typeof createUserSchema>;" in (
            schema.content
        )

    def test_imports_domain_service(self, generator):
        options = GenerationOptions(name="createUser", domain="user")
        handler = generator.generate(options)[0]
        assert "import { UserService } from '../user/services/UserService';" in handler.content
        assert "const service = new UserService();" in handler.content

    def test_service_name_override(self, generator):
        options = GenerationOptions(name="createUser", domain="user", service_name="Account")
        handler = generator.generate(options)[0]
        assert (
            "import { AccountService } from '../user/services/AccountService';"
            in handler.content
        )

    def test_service_import_follows_custom_service_path(self, generator):
        options = GenerationOptions(
            name="createUser",
            domain="user",
            custom_paths={SERVICE_FILE: "src/core/UserService.ts"},
        )
        handler = generator.generate(options)[0]
        assert "from '../core/UserService';" in handler.content

    def test_snake_case(self, make_config):
        generator = HandlerGenerator(make_config(fileNameCase="snake"))
        options = GenerationOptions(name="createUser", dto=True)
        paths = [artifact.path for artifact in generator.generate(options)]
        assert paths == [
            "src/handlers/create_user.handler.ts",
            "src/handlers/schemas/create_user.dto.ts",
        ]

    def test_custom_handler_path(self, generator):
        options = GenerationOptions(
            name="createUser",
            schema=True,
            custom_paths={HANDLER_FILE: "functions/createUser.ts"},
        )
        handler = by_role(generator.generate(options))[HANDLER_FILE]
        assert handler.path == "functions/createUser.ts"
        assert "from '../src/handlers/schemas/CreateUserSchema';" in handler.content
