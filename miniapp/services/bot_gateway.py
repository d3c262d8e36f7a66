import os
import logging
from typing import Any, Tuple

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.telegram.org"


def _bot_token(token: str | None = None) -> str:
    return (token if token is not None else (os.getenv("BOT_TOKEN") or "")).strip()


def _api_base(api_base: str | None = None) -> str:
    base = (api_base or os.getenv("BOT_API_BASE") or DEFAULT_API_BASE).strip()
    return base.rstrip("/")


def _send_url(token: str, api_base: str | None = None) -> str:
    return f"{_api_base(api_base)}/bot{token}/sendMessage"


def get_gateway_display_url(token: str | None = None, api_base: str | None = None) -> str:
    """URL do endpoint sendMessage com o token mascarado, para logs e diagnóstico."""
    tok = _bot_token(token)
    if not tok:
        return "não configurado"
    return _send_url("***", api_base)


def _timeout_seconds() -> float:
    try:
        return float(os.getenv("BOT_API_TIMEOUT", "8"))
    except (TypeError, ValueError):
        return 8.0


def send_bot_message(
    chat_id: Any, text: str, token: str | None = None, api_base: str | None = None
) -> Tuple[bool, str]:
    msg = (text or "").strip()
    if not msg:
        return False, "Mensagem vazia."

    tok = _bot_token(token)
    if not tok:
        return False, "Token do bot não configurado."

    payload = {"chat_id": chat_id, "text": msg}
    headers = {"Content-Type": "application/json"}
    try:
        resp = requests.post(
            _send_url(tok, api_base), json=payload, headers=headers, timeout=_timeout_seconds()
        )  # nosec B113: timeout definido explicitamente
    except requests.RequestException as exc:
        detail = str(exc).replace(tok, "***")
        return False, f"Falha ao contatar a API do bot: {detail}"

    if resp.status_code >= 400:
        snippet = (resp.text or "").strip().replace("\n", " ")[:200]
        return False, f"Erro do serviço ({resp.status_code}): {snippet or 'resposta vazia'}"

    logger.info(f"Mensagem enviada via {get_gateway_display_url(tok, api_base)} ({len(msg)} chars)")
    return True, ""
