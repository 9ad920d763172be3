"""
Test cases for placeholder resolution and the code-body template engine.
"""

import pytest

from hexforge.core.templates import (
    TemplateEngine,
    TemplateError,
    find_placeholders,
    resolve_placeholders,
)


class TestResolvePlaceholders:
    """Test {{variable}} substitution in path and file-name patterns."""

    def test_single_placeholder(self):
        assert resolve_placeholders("{{pascalName}}Service.ts", {"pascalName": "Order"}) == (
            "OrderService.ts"
        )

    def test_many_and_adjacent_placeholders(self):
        variables = {"pascalName": "Payment", "adapterType": "Repository"}
        assert (
            resolve_placeholders("{{pascalName}}{{adapterType}}Port.ts", variables)
            == "PaymentRepositoryPort.ts"
        )

    def test_missing_variable_resolves_to_empty_string(self):
        assert resolve_placeholders("{{pascalNmae}}Service.ts", {"pascalName": "X"}) == (
            "Service.ts"
        )

    def test_none_value_resolves_to_empty_string(self):
        assert resolve_placeholders("a/{{domainName}}/b", {"domainName": None}) == "a//b"

    def test_substituted_values_are_not_rescanned(self):
        variables = {"name": "{{other}}", "other": "boom"}
        assert resolve_placeholders("{{name}}.ts", variables) == "{{other}}.ts"

    @pytest.mark.parametrize(
        "template", ["", "handlers", "src/infra/repository", "plain.handler.ts", "{x}"]
    )
    def test_no_placeholders_is_identity(self, template):
        assert resolve_placeholders(template, {"x": "y"}) == template

    def test_find_placeholders(self):
        assert find_placeholders("{{domainName}}/{{adapterType}}/{{domainName}}") == [
            "domainName",
            "adapterType",
            "domainName",
        ]


class TestTemplateEngine:
    """Test the Jinja2 wrapper used for file bodies."""

    @pytest.fixture
    def engine(self, tmp_path):
        (tmp_path / "greeting.j2").write_text("export class {{ name | pascal_case }} {}")
        (tmp_path / "cases.j2").write_text(
            "{{ n | camel_case }} {{ n | kebab_case }} {{ n | snake_case }}"
        )
        (tmp_path / "broken.j2").write_text("{{ missing }}")
        return TemplateEngine(tmp_path)

    def test_render_file_template(self, engine):
        assert engine.render_template("greeting.j2", {"name": "order-item"}) == (
            "export class OrderItem {}"
        )

    def test_case_filters(self, engine):
        rendered = engine.render_template("cases.j2", {"n": "OrderItem"})
        assert rendered == "orderItem order-item order_item"

    def test_undefined_variable_raises(self, engine):
        with pytest.raises(TemplateError):
            engine.render_template("broken.j2", {})

    def test_missing_template_raises(self, engine):
        with pytest.raises(TemplateError):
            engine.render_template("nope.j2", {})

    def test_no_template_directory(self):
        with pytest.raises(TemplateError):
            TemplateEngine().render_template("greeting.j2", {})
