"""
Test cases for the domain generator.

Tests cover:
- The full default domain and its cross-file imports
- Sub-artifact toggles and the 'none' adapter type
- Custom names and custom paths
- File-name case independent of symbol names
"""

import pytest

from hexforge.components.domain import DomainGenerator
from hexforge.core.generator import generate_component
from hexforge.core.schema import (
    ADAPTER_FILE,
    MODEL_FILE,
    PORT_FILE,
    SERVICE_FILE,
    GenerationOptions,
)


def by_role(artifacts):
    return {artifact.role: artifact for artifact in artifacts}


@pytest.fixture
def generator(default_config):
    return DomainGenerator(default_config)


class TestDefaultDomain:
    """Test the default 'payment' domain."""

    def test_paths(self, generator):
        artifacts = generator.generate(GenerationOptions(name="payment"))
        assert [artifact.path for artifact in artifacts] == [
            "src/payment/models/Payment.ts",
            "src/payment/services/PaymentService.ts",
            "src/payment/ports/PaymentRepositoryPort.ts",
            "src/infra/repository/PaymentRepositoryAdapter.ts",
        ]

    def test_symbols(self, generator):
        artifacts = by_role(generator.generate(GenerationOptions(name="payment")))
        assert artifacts[MODEL_FILE].symbol == "Payment"
        assert artifacts[SERVICE_FILE].symbol == "PaymentService"
        assert artifacts[PORT_FILE].symbol == "PaymentRepositoryPort"
        assert artifacts[ADAPTER_FILE].symbol == "PaymentRepositoryAdapter"

    def test_service_imports_model_and_port(self, generator):
        service = by_role(generator.generate(GenerationOptions(name="payment")))[SERVICE_FILE]
        assert "export class PaymentService {" in service.content
        assert "import { Payment } from '../models/Payment';" in service.content
        assert (
            "import { PaymentRepositoryPort } from '../ports/PaymentRepositoryPort';"
            in service.content
        )
        assert "private readonly paymentRepository: PaymentRepositoryPort," in service.content

    def test_adapter_imports_port_and_model(self, generator):
        adapter = by_role(generator.generate(GenerationOptions(name="payment")))[ADAPTER_FILE]
        assert (
            "import { PaymentRepositoryPort } from "
            "'../../payment/ports/PaymentRepositoryPort';" in adapter.content
        )
        assert "import { Payment } from '../../payment/models/Payment';" in adapter.content
        assert (
            "export class PaymentRepositoryAdapter implements PaymentRepositoryPort {"
            in adapter.content
        )

    def test_port_imports_model(self, generator):
        port = by_role(generator.generate(GenerationOptions(name="payment")))[PORT_FILE]
        assert "export interface PaymentRepositoryPort {" in port.content
        assert "import { Payment } from '../models/Payment';" in port.content

    def test_multi_word_name(self, generator):
        artifacts = generator.generate(GenerationOptions(name="order-item", adapter_type="rest"))
        assert [artifact.path for artifact in artifacts] == [
            "src/orderItem/models/OrderItem.ts",
            "src/orderItem/services/OrderItemService.ts",
            "src/orderItem/ports/OrderItemRestPort.ts",
            "src/infra/rest/OrderItemRestAdapter.ts",
        ]


class TestToggles:
    """Test independent sub-artifact toggles."""

    def test_no_model(self, generator):
        artifacts = by_role(generator.generate(GenerationOptions(name="payment", model=False)))
        assert set(artifacts) == {SERVICE_FILE, PORT_FILE, ADAPTER_FILE}
        assert "models/Payment" not in artifacts[SERVICE_FILE].content
        assert "models/Payment" not in artifacts[ADAPTER_FILE].content

    def test_no_port_skips_adapter(self, generator):
        artifacts = by_role(generator.generate(GenerationOptions(name="payment", port=False)))
        assert set(artifacts) == {MODEL_FILE, SERVICE_FILE}
        assert "Port" not in artifacts[SERVICE_FILE].content

    def test_no_service(self, generator):
        artifacts = by_role(generator.generate(GenerationOptions(name="payment", service=False)))
        assert set(artifacts) == {MODEL_FILE, PORT_FILE, ADAPTER_FILE}

    def test_adapter_type_none(self, generator):
        artifacts = by_role(
            generator.generate(GenerationOptions(name="payment", adapter_type="none"))
        )
        assert set(artifacts) == {MODEL_FILE, SERVICE_FILE, PORT_FILE}
        assert artifacts[PORT_FILE].path == "src/payment/ports/PaymentPort.ts"
        assert artifacts[PORT_FILE].symbol == "PaymentPort"

    def test_nothing_enabled(self, generator):
        options = GenerationOptions(name="payment", model=False, service=False, port=False)
        assert generator.generate(options) == []


class TestCustomNames:
    """Test per-role name overrides."""

    def test_custom_port_name_not_doubled(self, generator):
        options = GenerationOptions(name="user", custom_names={PORT_FILE: "UserRepository"})
        artifacts = by_role(generator.generate(options))
        assert artifacts[PORT_FILE].symbol == "UserRepositoryPort"
        assert artifacts[PORT_FILE].path == "src/user/ports/UserRepositoryPort.ts"
        assert "UserRepositoryPortPort" not in artifacts[SERVICE_FILE].content

    def test_custom_port_name_with_suffix(self, generator):
        options = GenerationOptions(
            name="user", custom_names={PORT_FILE: "UserRepositoryPort"}
        )
        port = by_role(generator.generate(options))[PORT_FILE]
        assert port.symbol == "UserRepositoryPort"

    def test_custom_port_name_ending_in_port(self, generator):
        options = GenerationOptions(name="user", custom_names={PORT_FILE: "UserPort"})
        artifacts = by_role(generator.generate(options))
        port = artifacts[PORT_FILE]
        assert port.symbol == "UserRepositoryPort"
        assert port.symbol.count("Port") == 1
        assert port.path == "src/user/ports/UserRepositoryPort.ts"
        assert "UserPortRepositoryPort" not in artifacts[ADAPTER_FILE].content

    def test_custom_model_and_service_names(self, generator):
        options = GenerationOptions(
            name="billing",
            custom_names={MODEL_FILE: "Invoice", SERVICE_FILE: "InvoicingService"},
        )
        artifacts = by_role(generator.generate(options))
        assert artifacts[MODEL_FILE].path == "src/billing/models/Invoice.ts"
        assert artifacts[SERVICE_FILE].path == "src/billing/services/InvoicingService.ts"
        assert "import { Invoice } from '../models/Invoice';" in artifacts[SERVICE_FILE].content

    def test_custom_adapter_name(self, generator):
        options = GenerationOptions(name="payment", custom_names={ADAPTER_FILE: "Dynamo"})
        adapter = by_role(generator.generate(options))[ADAPTER_FILE]
        assert adapter.symbol == "DynamoRepositoryAdapter"
        assert adapter.path == "src/infra/repository/DynamoRepositoryAdapter.ts"


class TestCustomPaths:
    """Test that imports follow overridden locations."""

    def test_imports_recomputed_from_custom_port_path(self, generator):
        options = GenerationOptions(
            name="payment", custom_paths={PORT_FILE: "src/contracts/PaymentPort.ts"}
        )
        artifacts = by_role(generator.generate(options))
        assert artifacts[PORT_FILE].path == "src/contracts/PaymentPort.ts"
        assert (
            "import { PaymentRepositoryPort } from '../../contracts/PaymentPort';"
            in artifacts[SERVICE_FILE].content
        )
        assert "from '../../contracts/PaymentPort';" in artifacts[ADAPTER_FILE].content


class TestFileNameCase:
    """Test that file names follow the configured case and symbols do not."""

    def test_kebab(self, make_config):
        generator = DomainGenerator(make_config(fileNameCase="kebab"))
        artifacts = by_role(generator.generate(GenerationOptions(name="payment")))
        assert artifacts[PORT_FILE].path == "src/payment/ports/payment-repository-port.ts"
        assert artifacts[PORT_FILE].symbol == "PaymentRepositoryPort"
        assert (
            "import { PaymentRepositoryPort } from '../ports/payment-repository-port';"
            in artifacts[SERVICE_FILE].content
        )

    def test_snake(self, make_config):
        generator = DomainGenerator(make_config(fileNameCase="snake"))
        paths = [a.path for a in generator.generate(GenerationOptions(name="payment"))]
        assert paths == [
            "src/payment/models/payment.ts",
            "src/payment/services/payment_service.ts",
            "src/payment/ports/payment_repository_port.ts",
            "src/infra/repository/payment_repository_adapter.ts",
        ]


class TestGenerateComponent:
    """Test the error-handling wrapper."""

    def test_success_metadata(self, generator):
        result = generate_component(generator, GenerationOptions(name="payment"))
        assert result.success
        assert result.metadata["component"] == "domain"
        assert result.metadata["artifact_count"] == 4
        assert result.metadata["file_name_case"] == "pascal"

    def test_empty_name_fails(self, generator):
        result = generate_component(generator, GenerationOptions(name="  "))
        assert not result.success
        assert result.artifacts == []
        assert "name" in result.error_message

    def test_unknown_adapter_type_fails(self, generator):
        result = generate_component(
            generator, GenerationOptions(name="payment", adapter_type="ftp")
        )
        assert not result.success
        assert "ftp" in result.error_message
