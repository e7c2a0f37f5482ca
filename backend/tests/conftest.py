import os
import sys
import pytest

# Ensure the backend root (containing the `quizbroker` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from quizbroker import create_app, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = 'test-secret'
    ADMIN_KEY = '1453'
    DEFAULT_ROOM_CAPACITY = 20
    ID_LENGTH = 6
    MAX_HTTP_BUFFER_SIZE = int(1e8)
    SOCKETIO_NAMESPACE = '/'
    ALLOWED_ORIGINS = '*'
    STATIC_DIR = None
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def router(flask_app):
    return flask_app.extensions['quizbroker']


@pytest.fixture()
def sio_client(flask_app):
    """Factory for connected Socket.IO test clients; all are closed afterwards."""
    clients = []

    def _connect():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        clients.append(test_client)
        return test_client

    yield _connect
    for test_client in clients:
        if test_client.is_connected():
            test_client.disconnect()
