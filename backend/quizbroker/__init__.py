import os

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from quizbroker.config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(raw):
    if not raw or raw.strip() == '*':
        return '*'
    return [o.strip() for o in raw.split(',') if o.strip()]


def create_app(config_class=Config):
    static_dir = getattr(config_class, 'STATIC_DIR', None)
    if static_dir:
        flask_app = Flask(__name__, static_folder=os.path.abspath(static_dir), static_url_path='')
    else:
        flask_app = Flask(__name__, static_folder=None)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    origins = _allowed_origins(flask_app.config.get('ALLOWED_ORIGINS'))
    CORS(flask_app, origins=origins)
    socketio.init_app(
        flask_app,
        cors_allowed_origins=origins,
        max_http_buffer_size=flask_app.config.get('MAX_HTTP_BUFFER_SIZE', int(1e8)),
    )

    from quizbroker.routes import main
    flask_app.register_blueprint(main)

    # One registry, catalog and router per app; nothing lives at module level
    from quizbroker.router import EventRouter
    from quizbroker.services import AdminKeyPolicy, QuizCatalog, RoomRegistry
    from quizbroker.transport import SocketIOTransport

    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    id_length = flask_app.config.get('ID_LENGTH', 6)
    router = EventRouter(
        registry=RoomRegistry(
            default_capacity=flask_app.config.get('DEFAULT_ROOM_CAPACITY', 20),
            id_length=id_length,
        ),
        catalog=QuizCatalog(id_length=id_length),
        policy=AdminKeyPolicy(flask_app.config['ADMIN_KEY']),
        transport=SocketIOTransport(socketio, namespace=namespace),
        logger=flask_app.logger,
    )
    flask_app.extensions['quizbroker'] = router

    from quizbroker.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    return flask_app
