import os

from flask import Blueprint, current_app, jsonify, send_from_directory

main = Blueprint('main', __name__)


@main.route('/')
def index():
    static_dir = current_app.config.get('STATIC_DIR')
    if static_dir and os.path.isfile(os.path.join(static_dir, 'index.html')):
        return send_from_directory(os.path.abspath(static_dir), 'index.html')
    return jsonify({'message': 'Welcome to the quiz broker!'})
