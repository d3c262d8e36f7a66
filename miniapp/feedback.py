import json
from typing import Any

SUCCESS_MESSAGE = 'Data received and processed successfully by the backend.'


def render_value(value: Any) -> str:
    """Texto de um valor JSON como aparece na mensagem: ``null``, ``true``, ``42``."""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return json.dumps(value, ensure_ascii=False)


def compose_bot_feedback(identifier: Any, message: Any) -> str:
    return f'User {render_value(identifier)} submitted: "{render_value(message)}". Action taken.'


def compose_relay_text(message: Any) -> str:
    return f"Data received: {render_value(message)}"


def success_body(bot_feedback: str) -> dict:
    return {
        'status': 'success',
        'message': SUCCESS_MESSAGE,
        'bot_feedback': bot_feedback,
    }


def error_body(reason: str) -> dict:
    return {'status': 'error', 'message': reason}
