"""End-to-end test: config -> fetch (mocked HTTP) -> tree -> JSON file."""

import json
from pathlib import Path
from unittest.mock import patch

import httpx
from click.testing import CliRunner

from api_extractor.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestEndToEnd:
    @patch("api_extractor.loader.httpx.get")
    def test_full_pipeline_petstore(self, mock_get, tmp_path):
        url = "http://petstore.example.com/v2/api-docs"
        mock_get.return_value = httpx.Response(
            200,
            text=(FIXTURES / "petstore.json").read_text(encoding="utf-8"),
            request=httpx.Request("GET", url),
        )

        runner = CliRunner()
        with runner.isolated_filesystem(temp_dir=tmp_path):
            init = runner.invoke(main, ["init"], input="http://petstore.example.com\nout/api\npetstore\n")
            assert init.exit_code == 0

            result = runner.invoke(main, ["extract"])
            assert result.exit_code == 0
            assert mock_get.call_args[0][0] == url

            data = json.loads((Path("out") / "api" / "petstore.json").read_text(encoding="utf-8"))

        assert data["pet"]["url"] == "/pet"
        assert data["pet"]["findByStatus"]["method"] == "get"
        assert data["pet"]["{petId}"]["uploadImage"]["data"]["additionalMetadata"] == {
            "type": "string",
            "description": "Additional data to pass to server",
        }
        assert data["store"]["inventory"]["error"] == {}
