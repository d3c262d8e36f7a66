from flask import Blueprint, current_app, send_from_directory

bp = Blueprint('home', __name__)


@bp.route('/')
def index():
    return send_from_directory(current_app.config['STATIC_ROOT'], current_app.config['INDEX_FILE'])
