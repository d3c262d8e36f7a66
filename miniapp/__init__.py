import os
import time
import logging
from flask import Flask, request, g, got_request_exception
from flask_cors import CORS

DEFAULT_PORT = 3000
SENSITIVE_KEYS = {'password', 'senha', 'token', 'initdata', 'authorization', 'secret'}


def _load_env(path):
    if not os.path.exists(path):
        return
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#') or '=' not in line:
                continue
            k, v = line.split('=', 1)
            os.environ.setdefault(k.strip(), v.strip())


def _env_flag(name: str, default: str = 'false') -> bool:
    return (os.getenv(name, default) or default).strip().lower() == 'true'


def _parse_port(value) -> int:
    try:
        port = int(str(value).strip())
    except (TypeError, ValueError):
        return DEFAULT_PORT
    if port <= 0 or port > 65535:
        return DEFAULT_PORT
    return port


def _mask(data):
    if not isinstance(data, dict):
        return data
    return {k: ('***' if str(k).lower() in SENSITIVE_KEYS else v) for k, v in data.items()}


def load_config(base_dir: str) -> dict:
    """Monta a configuração a partir das variáveis de ambiente."""
    return {
        'PORT': _parse_port(os.getenv('PORT', str(DEFAULT_PORT))),
        'HOST': os.getenv('HOST', '0.0.0.0'),
        'STATIC_ROOT': os.getenv('STATIC_ROOT') or base_dir,
        'INDEX_FILE': 'index.html',
        'LOG_BODY': _env_flag('FLASK_LOG_BODY', 'true'),
        'BOT_TOKEN': (os.getenv('BOT_TOKEN') or '').strip(),
        'BOT_API_BASE': (os.getenv('BOT_API_BASE') or 'https://api.telegram.org').strip(),
        'BOT_RELAY_ENABLED': _env_flag('BOT_RELAY_ENABLED'),
    }


def _configure_logging(app: Flask) -> None:
    level_name = (os.getenv('FLASK_LOG_LEVEL') or '').strip().upper()
    if not level_name:
        level_name = 'DEBUG' if _env_flag('DEBUG') else 'INFO'
    level = getattr(logging, level_name, logging.INFO)
    app.logger.setLevel(level)
    logging.getLogger('werkzeug').setLevel(level)

    @app.before_request
    def _http_log_req():
        g._req_start = time.time()
        info = {'args': dict(request.args)}
        if bool(app.config.get('LOG_BODY', False)):
            ct = (request.headers.get('Content-Type') or '').lower()
            if 'application/json' in ct:
                info['body'] = _mask(request.get_json(silent=True))
            else:
                info['body'] = _mask(request.form.to_dict())
        app.logger.info(f"REQ {request.method} {request.path} {info}")

    @app.after_request
    def _http_log_resp(resp):
        dur = time.time() - getattr(g, '_req_start', time.time())
        app.logger.info(f"RES {resp.status_code} {request.method} {request.path} dur={dur:.3f}s")
        return resp

    def _on_exc(sender, exception, **extra):
        app.logger.exception(f"ERR {request.method} {request.path}: {exception}")

    got_request_exception.connect(_on_exc, app, weak=False)


def create_app(config: dict | None = None) -> Flask:
    """Cria a aplicação Flask do backend do Mini App.

    A configuração vem do ambiente (incluindo um ``.env.txt`` opcional ao lado
    de ``app.py``) e pode ser sobrescrita pelo dicionário ``config``.
    """
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    _load_env(os.path.join(base_dir, '.env.txt'))

    app = Flask(__name__, static_folder=None)
    app.config.update(load_config(base_dir))
    if config:
        app.config.update(config)
    # a ordem das chaves faz parte do contrato da resposta
    app.json.sort_keys = False

    CORS(app)
    _configure_logging(app)

    from .routes.home import bp as home_bp
    from .routes.submit import bp as submit_bp

    app.register_blueprint(home_bp)
    app.register_blueprint(submit_bp)

    return app
