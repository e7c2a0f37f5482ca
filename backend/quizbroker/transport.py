from typing import Optional


class SocketIOTransport:
    """Outbound side of the broker, backed by a Flask-SocketIO server.

    Emits are queued by Socket.IO and never wait on the recipient.
    """

    def __init__(self, socketio, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def _emit(self, event: str, payload, **kwargs) -> None:
        args = () if payload is None else (payload,)
        self.socketio.emit(event, *args, namespace=self.namespace, **kwargs)

    def emit_to(self, sid: str, event: str, payload=None) -> None:
        self._emit(event, payload, to=sid)

    def emit_to_room(self, room_id: str, event: str, payload=None, skip_sid: Optional[str] = None) -> None:
        self._emit(event, payload, to=room_id, skip_sid=skip_sid)

    def emit_to_all(self, event: str, payload=None) -> None:
        self._emit(event, payload)

    def add_to_room(self, sid: str, room_id: str) -> None:
        self.socketio.server.enter_room(sid, room_id, namespace=self.namespace)

    def close_room(self, room_id: str) -> None:
        self.socketio.server.close_room(room_id, namespace=self.namespace)
