"""End-to-end tests: interface text through the registry to a mock response."""

import json
from datetime import datetime
from pathlib import Path

from click.testing import CliRunner

from interface_mock.cli import main
from interface_mock.registry import CreateProjectRequest, ProjectRegistry, respond

FIXTURES = Path(__file__).parent / "fixtures"


def _order_source() -> str:
    return (FIXTURES / "order.ts").read_text(encoding="utf-8")


class TestRegistryPipeline:
    def test_order_project(self):
        registry = ProjectRegistry()
        project = registry.create_project(
            CreateProjectRequest(name="Orders", interface_code=_order_source())
        )

        status, response = respond(registry, project.id, 20)
        assert status == 200
        assert len(response.data) == 20

        for order in response.data:
            assert {"orderId", "createdAt", "customer", "items"} <= set(order)
            assert set(order) <= {"orderId", "createdAt", "note", "customer", "items"}
            datetime.fromisoformat(order["createdAt"])
            assert {"fullName", "email"} <= set(order["customer"])
            assert "@" in order["customer"]["email"]
            assert 1 <= len(order["items"]) <= 3
            for item in order["items"]:
                assert set(item) == {"sku", "quantity", "price"}
                assert 1 <= item["quantity"] <= 1000

        # The envelope must serialize as plain JSON.
        json.loads(response.model_dump_json())


class TestCliPipeline:
    def test_parse_then_generate(self):
        runner = CliRunner()
        parsed = runner.invoke(main, ["parse", str(FIXTURES / "order.ts")])
        assert parsed.exit_code == 0
        model = json.loads(parsed.output)
        assert model["properties"]["items"]["type"] == "object"
        assert model["properties"]["orderId"]["stringFormat"] == "uuid"

        generated = runner.invoke(main, ["generate", str(FIXTURES / "order.ts"), "-n", "2", "--seed", "5"])
        assert generated.exit_code == 0
        assert len(json.loads(generated.output)) == 2
