"""
Testes para o mock local da API do bot (tools/mock_gateway.py).
"""
from unittest.mock import MagicMock, patch

import pytest

from miniapp.services.bot_gateway import send_bot_message
from tools.mock_gateway import app as mock_app


@pytest.fixture
def mock_client():
    mock_app.config["TESTING"] = True
    return mock_app.test_client()


class TestMockGateway:
    """Testes para o endpoint sendMessage simulado."""

    def test_send_message(self, mock_client):
        response = mock_client.post("/bot123:abc/sendMessage", json={"chat_id": 42, "text": "hi"})
        assert response.status_code == 200
        assert response.get_json() == {"ok": True, "result": {"chat": {"id": 42}, "text": "hi"}}

    @pytest.mark.parametrize("body", [{}, {"chat_id": 42}, {"text": "hi"}])
    def test_missing_fields(self, mock_client, body):
        response = mock_client.post("/bot123:abc/sendMessage", json=body)
        assert response.status_code == 400
        assert response.get_json()["ok"] is False

    def test_gateway_against_mock(self, mock_client):
        """send_bot_message conversa com o mock através do test client."""

        def _post(url, json=None, headers=None, timeout=None):
            path = url.split("http://mock.local", 1)[1]
            test_resp = mock_client.post(path, json=json, headers=headers)
            resp = MagicMock()
            resp.status_code = test_resp.status_code
            resp.text = test_resp.get_data(as_text=True)
            return resp

        with patch("miniapp.services.bot_gateway.requests.post", side_effect=_post):
            ok, err = send_bot_message(42, "hi", token="123:abc", api_base="http://mock.local")
        assert ok is True
        assert err == ""
