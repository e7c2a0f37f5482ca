import logging
import threading
from typing import Any, Callable, Dict, Optional

from quizbroker.models import Room, PHASE_PLAYING, PHASE_FINISHED
from quizbroker.reconciler import DisconnectReconciler
from quizbroker.services import (
    AccessDenied,
    AlreadyInRoom,
    BrokerError,
    QuizCatalog,
    RoomCreationPolicy,
    RoomRegistry,
)
from quizbroker.sessions import ConnectionContexts


def _payload(data) -> Dict[str, Any]:
    return data if isinstance(data, dict) else {}


class EventRouter:
    """Dispatch inbound Socket.IO events to the registry and catalog.

    Each event name maps to exactly one handler. Handlers take the sender's
    connection id and its payload, mutate state, and emit through the
    transport. A ``BrokerError`` raised by a handler is reported to the
    sender alone as ``error_msg``.

    Dispatch is serialised with a lock so every handler sees the registry as
    if events arrived one at a time, whatever worker thread delivers them.
    """

    def __init__(self, registry: RoomRegistry, catalog: QuizCatalog,
                 policy: RoomCreationPolicy, transport, logger=None):
        self.registry = registry
        self.catalog = catalog
        self.policy = policy
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.contexts = ConnectionContexts()
        self.reconciler = DisconnectReconciler(registry, transport, self.logger)
        self._lock = threading.RLock()
        self.handlers: Dict[str, Callable[[str, Dict[str, Any]], None]] = {
            'get_public_quizzes': self.list_quizzes,
            'publish_quiz': self.publish_quiz,
            'create_room': self.create_room,
            'host_update_game': self.host_update_game,
            'host_game_start': self.host_game_start,
            'host_game_over': self.host_game_over,
            'join_check': self.list_rooms,
            'join_room': self.join_room,
            'player_answer': self.player_answer,
        }

    def dispatch(self, event: str, sid: str, data=None) -> None:
        handler = self.handlers.get(event)
        if handler is None:
            return
        with self._lock:
            try:
                handler(sid, _payload(data))
            except BrokerError as exc:
                self.logger.info(f"[denied] event={event} sid={sid} reason={exc.message!r}")
                self.transport.emit_to(sid, 'error_msg', {'message': exc.message})

    def disconnect(self, sid: str) -> None:
        with self._lock:
            self.reconciler.reconcile(sid, self.contexts.pop(sid))

    # ---- helpers ----

    def _current_room(self, sid: str) -> Optional[Room]:
        ctx = self.contexts.get(sid)
        if ctx is None or not ctx.room_id:
            return None
        room = self.registry.get_room(ctx.room_id)
        if room is None:
            return None
        # a reused id must not adopt members of a torn-down room
        if room.host_id != sid and not room.has_player(sid):
            return None
        return room

    def _hosted_room(self, sid: str) -> Optional[Room]:
        room = self._current_room(sid)
        if room is None or room.host_id != sid:
            return None
        return room

    def _broadcast_rooms(self) -> None:
        self.transport.emit_to_all('rooms_list', self.registry.list_active())

    def _catalog_payload(self):
        return [q.to_dict() for q in self.catalog.list()]

    # ---- catalog ----

    def list_quizzes(self, sid, data):
        self.transport.emit_to(sid, 'public_quizzes_list', self._catalog_payload())

    def publish_quiz(self, sid, data):
        quiz = self.catalog.publish(data.get('data'), title=data.get('title'), author=data.get('author'))
        self.logger.info(f"[publish] quiz={quiz.id} title={quiz.title!r} questions={quiz.question_count}")
        self.transport.emit_to_all('public_quizzes_list', self._catalog_payload())
        self.transport.emit_to(sid, 'publish_success', {'id': quiz.id})

    # ---- host ----

    def create_room(self, sid, data):
        if not self.policy.may_create_room(sid, data):
            raise AccessDenied()
        if self._current_room(sid) is not None:
            raise AlreadyInRoom()
        room = self.registry.create_room(sid, capacity=data.get('capacity'), password=data.get('password'))
        self.contexts.bind_host(sid, room.id)
        self.transport.add_to_room(sid, room.id)
        self.transport.emit_to(sid, 'room_created', {'roomId': room.id})
        self.logger.info(f"[room-create] room={room.id} host={sid} capacity={room.capacity} locked={room.locked}")
        self._broadcast_rooms()

    def host_update_game(self, sid, data):
        room = self._hosted_room(sid)
        if room is None:
            return
        self.transport.emit_to_room(room.id, 'game_update', data, skip_sid=sid)

    def host_game_start(self, sid, data):
        room = self._hosted_room(sid)
        if room is None:
            return
        self.registry.set_phase(room.id, PHASE_PLAYING)
        self.transport.emit_to_room(room.id, 'game_start', skip_sid=sid)
        self.logger.info(f"[start] room={room.id} players={len(room.players)}")
        self._broadcast_rooms()

    def host_game_over(self, sid, data):
        room = self._hosted_room(sid)
        if room is None:
            return
        self.registry.set_phase(room.id, PHASE_FINISHED)
        self.logger.info(f"[finish] room={room.id}")
        self._broadcast_rooms()

    # ---- player ----

    def list_rooms(self, sid, data):
        self.transport.emit_to(sid, 'rooms_list', self.registry.list_active())

    def join_room(self, sid, data):
        if self._current_room(sid) is not None:
            raise AlreadyInRoom()
        room_id = data.get('roomId')
        nickname = data.get('nickname')
        room = self.registry.join_room(room_id, sid, nickname, password=data.get('password'))
        self.contexts.bind_player(sid, room.id, nickname)
        self.transport.add_to_room(sid, room.id)
        self.transport.emit_to(room.host_id, 'player_joined', {'name': nickname, 'id': sid})
        self.transport.emit_to(sid, 'joined_success', {'roomId': room.id})
        self.logger.info(f"[join] room={room.id} player={sid} name={nickname!r} count={len(room.players)}/{room.capacity}")

    def player_answer(self, sid, data):
        room = self._current_room(sid)
        if room is None or room.host_id == sid:
            return
        self.transport.emit_to(room.host_id, 'player_answer', {
            'playerId': sid,
            'answer': data.get('answer'),
        })
