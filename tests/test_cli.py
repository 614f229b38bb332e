"""
Tests for the metaverse CLI with the HTTP layer mocked.
"""

from unittest.mock import patch

import httpx
import pytest
from typer.testing import CliRunner

from metaverse.cli.main import app

runner = CliRunner()

API_URL = "http://api.test/api/v1"


def make_response(method: str, path: str, status_code: int = 200, json=None) -> httpx.Response:
    return httpx.Response(
        status_code,
        json=json if json is not None else {},
        request=httpx.Request(method, f"{API_URL}{path}"),
    )


@pytest.fixture(autouse=True)
def api_url(monkeypatch):
    monkeypatch.setenv("METAVERSE_API_URL", API_URL)
    monkeypatch.delenv("METAVERSE_TOKEN", raising=False)


class TestAuthCommands:
    def test_signin_prints_token(self):
        with patch("metaverse.cli.main.httpx.request") as mock_request:
            mock_request.return_value = make_response("POST", "/signin", json={"token": "abc.def"})
            result = runner.invoke(app, ["signin", "alice", "pw"])

        assert result.exit_code == 0
        assert "abc.def" in result.stdout
        args, kwargs = mock_request.call_args
        assert args == ("POST", f"{API_URL}/signin")
        assert kwargs["json"] == {"username": "alice", "password": "pw"}

    def test_signup_admin_sends_role(self):
        with patch("metaverse.cli.main.httpx.request") as mock_request:
            mock_request.return_value = make_response("POST", "/signup", json={"userId": "u-1"})
            result = runner.invoke(app, ["signup", "root", "pw", "--admin"])

        assert result.exit_code == 0
        assert mock_request.call_args.kwargs["json"]["type"] == "Admin"

    def test_server_error_message_and_exit_code(self):
        with patch("metaverse.cli.main.httpx.request") as mock_request:
            mock_request.return_value = make_response(
                "POST", "/signin", status_code=403, json={"message": "Invalid username or password"}
            )
            result = runner.invoke(app, ["signin", "alice", "bad"])

        assert result.exit_code == 1
        assert "Invalid username or password" in result.stdout


class TestSpaceCommands:
    def test_protected_command_needs_token(self):
        with patch("metaverse.cli.main.httpx.request") as mock_request:
            result = runner.invoke(app, ["spaces"])

        assert result.exit_code == 1
        mock_request.assert_not_called()

    def test_token_from_environment(self, monkeypatch):
        monkeypatch.setenv("METAVERSE_TOKEN", "tok")
        with patch("metaverse.cli.main.httpx.request") as mock_request:
            mock_request.return_value = make_response(
                "GET",
                "/space/all",
                json={"spaces": [{"id": "s-1", "name": "Room", "dimensions": "10x10", "thumbnail": None}]},
            )
            result = runner.invoke(app, ["spaces"])

        assert result.exit_code == 0
        assert "Room" in result.stdout
        assert mock_request.call_args.kwargs["headers"] == {"Authorization": "Bearer tok"}

    def test_space_create_from_map(self):
        with patch("metaverse.cli.main.httpx.request") as mock_request:
            mock_request.return_value = make_response("POST", "/space", json={"spaceId": "s-1"})
            result = runner.invoke(
                app, ["space-create", "Copy", "--map-id", "m-1", "--token", "tok"]
            )

        assert result.exit_code == 0
        assert "s-1" in result.stdout
        assert mock_request.call_args.kwargs["json"] == {"name": "Copy", "mapId": "m-1"}

    def test_element_remove_sends_body(self):
        with patch("metaverse.cli.main.httpx.request") as mock_request:
            mock_request.return_value = make_response(
                "DELETE", "/space/element", json={"message": "Element removed from space"}
            )
            result = runner.invoke(app, ["element-remove", "s-1", "e-1", "--token", "tok"])

        assert result.exit_code == 0
        args, kwargs = mock_request.call_args
        assert args == ("DELETE", f"{API_URL}/space/element")
        assert kwargs["json"] == {"spaceId": "s-1", "elementId": "e-1"}
