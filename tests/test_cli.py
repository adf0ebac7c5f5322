"""Tests for the command-line interface."""

import importlib.util
import json
import os

import pytest

from shortlink.database.memory import InMemoryLinkStore


CLI_PATH = os.path.join(os.path.dirname(__file__), "..", "scripts", "cli", "shortlink_cli.py")


@pytest.fixture(scope="module")
def cli_module():
    spec = importlib.util.spec_from_file_location("shortlink_cli", CLI_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.asyncio
class TestCLI:
    """Run CLI commands against an injected in-memory store."""

    async def test_shorten_then_get(self, cli_module, capsys):
        store = InMemoryLinkStore()

        code = await cli_module.main(
            ["shorten", "example.com/path", "--username", "bob", "--notification-type", "sms"],
            store=store,
        )
        assert code == 0
        created = json.loads(capsys.readouterr().out)
        assert created["success"]
        assert created["original_url"] == "https://example.com/path"

        code = await cli_module.main(["get", created["short_code"]], store=store)
        assert code == 0
        resolved = json.loads(capsys.readouterr().out)
        assert resolved["original_url"] == "https://example.com/path"

        code = await cli_module.main(["delete", created["short_code"]], store=store)
        assert code == 0
        capsys.readouterr()

        code = await cli_module.main(["count"], store=store)
        assert json.loads(capsys.readouterr().out)["count"] == 0

    async def test_get_missing(self, cli_module, capsys):
        code = await cli_module.main(["get", "000000000000"], store=InMemoryLinkStore())

        assert code == 1
        assert json.loads(capsys.readouterr().err)["success"] is False

    async def test_shorten_invalid_type(self, cli_module, capsys):
        code = await cli_module.main(
            ["shorten", "https://a.com", "--username", "bob", "--notification-type", "fax"],
            store=InMemoryLinkStore(),
        )

        assert code == 1
        assert "Incorrect notification type" in json.loads(capsys.readouterr().err)["error"]

    async def test_health(self, cli_module, capsys):
        code = await cli_module.main(["health"], store=InMemoryLinkStore())

        assert code == 0
        assert json.loads(capsys.readouterr().out)["health"]["overall"] is True

    async def test_no_command(self, cli_module, capsys):
        assert await cli_module.main([]) == 1
