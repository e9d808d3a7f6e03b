"""Integration tests for the calculate endpoint."""

import json

import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from calc_api.config import Settings, get_settings
from calc_api.main import app

client = TestClient(app)

URL = "/api/v1/calculate"
INVALID = {"error": "Expression is not valid"}


class TestCalculateSuccess:
    """Tests for successful evaluations."""

    def test_precedence(self):
        """Test multiplication is applied before addition."""
        response = client.post(URL, json={"expression": "2+3*4"})
        assert response.status_code == 200
        assert response.json() == {"result": "14"}

    def test_parentheses(self):
        """Test parentheses override precedence."""
        response = client.post(URL, json={"expression": "(2+3)*4"})
        assert response.status_code == 200
        assert response.json() == {"result": "20"}

    def test_fractional_result(self):
        """Test non-integral results keep their shortest digits."""
        response = client.post(URL, json={"expression": "1/4"})
        assert response.json() == {"result": "0.25"}

    def test_scientific_result(self):
        """Test large results switch to scientific notation."""
        response = client.post(URL, json={"expression": "1000*1000"})
        assert response.json() == {"result": "1e+06"}

    def test_overflow_result(self):
        """Test overflow is reported as a normal infinite result."""
        response = client.post(URL, json={"expression": "1e308*10"})
        assert response.status_code == 200
        assert response.json() == {"result": "+Inf"}

    def test_unknown_fields_ignored(self):
        """Test extra body fields do not affect evaluation."""
        response = client.post(URL, json={"expression": "1+1", "precision": 3})
        assert response.status_code == 200
        assert response.json() == {"result": "2"}

    @pytest.mark.parametrize(
        "content_type",
        ["application/x-www-form-urlencoded", "text/plain", None],
    )
    def test_body_decoded_regardless_of_content_type(self, content_type):
        """Test a JSON body is accepted whatever Content-Type is sent."""
        headers = {"Content-Type": content_type} if content_type else {}
        response = client.post(URL, content=b'{"expression":"2+2"}', headers=headers)
        assert response.status_code == 200
        assert response.json() == {"result": "4"}


class TestCalculateErrors:
    """Tests for rejected requests and error mapping."""

    @pytest.mark.parametrize("expression", ["1/0", "10/(5-5)", "2+", "(1+2", "-5+2", "abc", ""])
    def test_invalid_expression(self, expression):
        """Test evaluator failures return 422."""
        response = client.post(URL, json={"expression": expression})
        assert response.status_code == 422
        assert response.json() == INVALID

    def test_malformed_json(self):
        """Test a body that is not JSON returns 422."""
        response = client.post(
            URL,
            content=b'{"expression": ',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422
        assert response.json() == INVALID

    @pytest.mark.parametrize("body", [{}, {"expression": 5}, {"expression": None}, ["2+2"]])
    def test_wrong_shape(self, body):
        """Test missing or non-string expressions return 422."""
        response = client.post(
            URL,
            content=json.dumps(body),
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422
        assert response.json() == INVALID

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    def test_method_not_allowed(self, method):
        """Test non-POST methods return a plain text 405."""
        response = client.request(method, URL)
        assert response.status_code == 405
        assert response.text == "Method Not Allowed"
        assert response.headers["content-type"].startswith("text/plain")

    def test_internal_error(self):
        """Test unexpected exceptions return 500 without details."""
        failing_client = TestClient(app, raise_server_exceptions=False)
        with patch("calc_api.calculate.router.calc", side_effect=RuntimeError("boom")):
            response = failing_client.post(URL, json={"expression": "1+1"})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_body_too_large(self):
        """Test bodies above the configured limit return 413."""
        expression = "1+" * get_settings().MAX_BODY_BYTES + "1"
        response = client.post(URL, json={"expression": expression})
        assert response.status_code == 413
        assert response.json() == {"error": "request body too large"}

    def test_streamed_body_too_large(self):
        """Test chunked bodies without Content-Length are capped with 413."""
        def chunks():
            yield b'{"expression": "'
            for _ in range(40):
                yield b"1+" * 512
            yield b'1"}'

        response = client.post(
            URL,
            content=chunks(),
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 413
        assert response.json() == {"error": "request body too large"}

    def test_streamed_body_within_limit(self):
        """Test chunked bodies under the limit reach the evaluator."""
        def chunks():
            yield b'{"expression": '
            yield b'"(2+3)*4"}'

        response = client.post(URL, content=chunks())
        assert response.status_code == 200
        assert response.json() == {"result": "20"}


class TestRoutes:
    """Tests for the exposed route set."""

    @pytest.mark.parametrize("path", ["/docs", "/openapi.json", "/health"])
    def test_only_calculate_is_routed(self, path):
        """Test no routes other than calculate are mounted."""
        response = client.get(path)
        assert response.status_code == 404


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Test defaults match the listening address and limits."""
        for name in ("PORT", "DEBUG", "MAX_BODY_BYTES"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.PORT == 8080
        assert settings.DEBUG is False
        assert settings.MAX_BODY_BYTES == 16384

    def test_env_override(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("PORT", "9090")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.PORT == 9090
        assert settings.LOG_LEVEL == "DEBUG"
