"""
Configuração compartilhada para testes pytest.
"""
import os

import pytest

# Configurar variáveis de ambiente para testes
os.environ.setdefault("TESTING", "true")
os.environ.setdefault("FLASK_LOG_LEVEL", "INFO")

INDEX_HTML = "<!DOCTYPE html>\n<html><body><h1>Mini App teste</h1>\n</body></html>\n".encode("utf-8")


@pytest.fixture
def static_root(tmp_path):
    """Diretório temporário com um index.html conhecido."""
    (tmp_path / "index.html").write_bytes(INDEX_HTML)
    return tmp_path


@pytest.fixture
def app(static_root, monkeypatch):
    """Cria uma instância da aplicação para testes."""
    for name in ("BOT_TOKEN", "BOT_RELAY_ENABLED", "BOT_API_BASE", "PORT", "STATIC_ROOT"):
        monkeypatch.delenv(name, raising=False)

    from miniapp import create_app

    app = create_app(
        {
            "TESTING": True,
            "STATIC_ROOT": str(static_root),
            "BOT_RELAY_ENABLED": False,
            "BOT_TOKEN": "",
        }
    )
    yield app


@pytest.fixture
def client(app):
    """Cria um cliente de teste."""
    return app.test_client()
