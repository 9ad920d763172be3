"""
Test cases for the service, port and adapter generators.
"""

from hexforge.components.adapter import AdapterGenerator
from hexforge.components.port import PortGenerator
from hexforge.components.service import ServiceGenerator
from hexforge.core.generator import generate_component
from hexforge.core.schema import ADAPTER_FILE, PORT_FILE, GenerationOptions


class TestServiceGenerator:
    """Test standalone services."""

    def test_service_in_domain(self, default_config):
        result = generate_component(
            ServiceGenerator(default_config), GenerationOptions(name="refund", domain="payment")
        )
        assert result.success
        assert result.warnings == []
        service = result.artifacts[0]
        assert service.path == "src/payment/services/RefundService.ts"
        assert "export class RefundService {" in service.content

    def test_missing_domain_warns_and_uses_name(self, default_config):
        result = generate_component(
            ServiceGenerator(default_config), GenerationOptions(name="refund")
        )
        assert result.success
        assert result.artifacts[0].path == "src/refund/services/RefundService.ts"
        assert len(result.warnings) == 1

    def test_kebab_case(self, make_config):
        generator = ServiceGenerator(make_config(fileNameCase="kebab"))
        service = generator.generate(GenerationOptions(name="orderProcessing", domain="order"))[0]
        assert service.path == "src/order/services/order-processing-service.ts"
        assert "export class OrderProcessingService {" in service.content


class TestPortGenerator:
    """Test ports with their adapters."""

    def test_port_and_adapter(self, default_config):
        artifacts = PortGenerator(default_config).generate(
            GenerationOptions(name="paymentGateway", domain="payment", adapter_type="rest")
        )
        assert [artifact.path for artifact in artifacts] == [
            "src/payment/ports/PaymentGatewayPort.ts",
            "src/infra/rest/PaymentGatewayAdapter.ts",
        ]
        adapter = artifacts[1]
        assert (
            "import { PaymentGatewayPort } from '../../payment/ports/PaymentGatewayPort';"
            in adapter.content
        )
        assert "export class PaymentGatewayAdapter implements PaymentGatewayPort {" in (
            adapter.content
        )

    def test_custom_port_name_not_doubled(self, default_config):
        artifacts = PortGenerator(default_config).generate(
            GenerationOptions(name="user", domain="user", port_name="UserRepositoryPort")
        )
        assert artifacts[0].symbol == "UserRepositoryPort"
        assert artifacts[0].path == "src/user/ports/UserRepositoryPort.ts"
        assert artifacts[1].symbol == "UserRepositoryAdapter"

    def test_adapter_type_none_skips_adapter(self, default_config):
        artifacts = PortGenerator(default_config).generate(
            GenerationOptions(name="clock", domain="time", adapter_type="none")
        )
        assert [artifact.role for artifact in artifacts] == [PORT_FILE]


class TestAdapterGenerator:
    """Test adapters for existing ports."""

    def test_adapter(self, default_config):
        artifacts = AdapterGenerator(default_config).generate(
            GenerationOptions(name="user", domain="user", adapter_type="cache")
        )
        assert len(artifacts) == 1
        adapter = artifacts[0]
        assert adapter.path == "src/infra/cache/UserCacheAdapter.ts"
        assert adapter.symbol == "UserCacheAdapter"
        assert "import { UserPort } from '../../user/ports/UserPort';" in adapter.content

    def test_adapter_for_named_port(self, default_config):
        adapter = AdapterGenerator(default_config).generate(
            GenerationOptions(name="user", domain="user", port_name="UserRepository")
        )[0]
        assert "implements UserRepositoryPort" in adapter.content
        assert "'../../user/ports/UserRepositoryPort'" in adapter.content

    def test_custom_adapter_name(self, default_config):
        adapter = AdapterGenerator(default_config).generate(
            GenerationOptions(
                name="user", domain="user", custom_names={ADAPTER_FILE: "DynamoUser"}
            )
        )[0]
        assert adapter.symbol == "DynamoUserRepositoryAdapter"

    def test_none_adapter_type_is_rejected(self, default_config):
        result = generate_component(
            AdapterGenerator(default_config),
            GenerationOptions(name="user", domain="user", adapter_type="none"),
        )
        assert not result.success
        assert "none" in result.error_message

    def test_missing_domain_warns(self, default_config):
        result = generate_component(
            AdapterGenerator(default_config), GenerationOptions(name="user")
        )
        assert result.success
        assert result.warnings
