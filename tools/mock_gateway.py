import logging

from flask import Flask, jsonify, request

app = Flask(__name__)
logging.basicConfig(level=logging.INFO)


@app.route("/bot<token>/sendMessage", methods=["POST"])
def send_message(token):
    data = request.get_json(silent=True) or {}
    app.logger.info(f"/sendMessage payload: {data}")
    chat_id = data.get("chat_id")
    text = data.get("text")
    if chat_id is None or not text:
        return jsonify({"ok": False, "error_code": 400, "description": "Bad Request: chat_id and text are required"}), 400
    # Simula sucesso do envio
    return jsonify({"ok": True, "result": {"chat": {"id": chat_id}, "text": text}}), 200


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=3001)
