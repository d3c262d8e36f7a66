import json
from flask import Blueprint, current_app, jsonify, request
from ..feedback import compose_bot_feedback, compose_relay_text, error_body, success_body
from ..init_data import UNKNOWN_USER, validate_init_data
from ..services.bot_gateway import send_bot_message

bp = Blueprint('submit', __name__, url_prefix='/api')


def _relay_to_bot(identifier, message):
    if not current_app.config.get('BOT_RELAY_ENABLED'):
        return
    if identifier == UNKNOWN_USER:
        current_app.logger.info("Relay ignorado: usuário desconhecido")
        return
    ok, err = send_bot_message(
        identifier,
        compose_relay_text(message),
        token=current_app.config.get('BOT_TOKEN') or '',
        api_base=current_app.config.get('BOT_API_BASE'),
    )
    if not ok:
        current_app.logger.warning(f"Falha ao enviar mensagem via API do bot: {err}")


@bp.route('/submit_data', methods=['POST'])
def submit_data():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    token = data.get('token')
    if token is None:
        token = data.get('initData')
    payload = data.get('payload')
    if not isinstance(payload, dict):
        payload = {}

    current_app.logger.info(f"Received data from Mini App. Payload: {json.dumps(payload)}")

    verdict = validate_init_data(token)
    if not verdict.valid:
        current_app.logger.warning(f"Validation Failed: {verdict.failure_reason}")
        return jsonify(error_body(verdict.failure_reason)), 401

    message = payload.get('message', '')
    bot_feedback = compose_bot_feedback(verdict.identifier, message)
    current_app.logger.info(f"Mock Bot API Action: {bot_feedback}")
    _relay_to_bot(verdict.identifier, message)

    return jsonify(success_body(bot_feedback))
