from flask import current_app, request

from quizbroker import socketio

INBOUND_EVENTS = (
    'get_public_quizzes',
    'publish_quiz',
    'create_room',
    'host_update_game',
    'host_game_start',
    'host_game_over',
    'join_check',
    'join_room',
    'player_answer',
)


def _router():
    return current_app.extensions['quizbroker']


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect():
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    _router().disconnect(_get_sid())


def _make_handler(event: str):
    def handler(data=None):
        _router().dispatch(event, _get_sid(), data)
    handler.__name__ = f"handle_{event}"
    return handler


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``.

    Handlers resolve the router from the current app, so re-registering for
    a new app simply rebinds them on the fresh server.
    """
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    for event in INBOUND_EVENTS:
        socketio.on_event(event, _make_handler(event), namespace=namespace)
