import hmac
from typing import Dict, List, Optional

from quizbroker.models import Room, Player, PHASE_WAITING
from .errors import RoomNotFound, RoomFull, WrongPassword
from .identifiers import generate_id

DEFAULT_CAPACITY = 20


def _coerce_capacity(value, default: int) -> int:
    try:
        capacity = int(value) if value is not None else default
    except (TypeError, ValueError):
        return default
    return capacity if capacity > 0 else default


def _normalise_password(value) -> Optional[str]:
    if value is None or value == '':
        return None
    return str(value)


def _password_matches(expected: str, supplied) -> bool:
    if supplied is None:
        return False
    supplied = str(supplied)
    return hmac.compare_digest(expected.encode('utf-8'), supplied.encode('utf-8'))


class RoomRegistry:
    """Owns every live Room, keyed by its session id.

    Membership and phase live here only; connections keep a room id, never
    the Room itself.
    """

    def __init__(self, default_capacity: int = DEFAULT_CAPACITY, id_length: int = 6):
        self.default_capacity = default_capacity
        self.id_length = id_length
        self._rooms: Dict[str, Room] = {}

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, room_id) -> bool:
        return room_id in self._rooms

    def create_room(self, host_id: str, capacity=None, password=None) -> Room:
        room_id = generate_id(taken=self.__contains__, length=self.id_length)
        room = Room(
            id=room_id,
            host_id=host_id,
            capacity=_coerce_capacity(capacity, self.default_capacity),
            password=_normalise_password(password),
        )
        self._rooms[room_id] = room
        return room

    def get_room(self, room_id) -> Optional[Room]:
        return self._rooms.get(room_id)

    def list_active(self) -> List[dict]:
        return [r.summary() for r in self._rooms.values() if r.phase == PHASE_WAITING]

    def join_room(self, room_id, connection_id: str, nickname, password=None) -> Room:
        if not isinstance(room_id, str):
            raise RoomNotFound()
        room = self._rooms.get(room_id)
        if room is None:
            raise RoomNotFound()
        if room.is_full:
            raise RoomFull()
        if room.password is not None and not _password_matches(room.password, password):
            raise WrongPassword()
        room.players.append(Player(id=connection_id, name=nickname))
        return room

    def remove_player(self, room_id, connection_id: str) -> None:
        room = self._rooms.get(room_id)
        if room is None:
            return
        room.players = [p for p in room.players if p.id != connection_id]

    def set_phase(self, room_id, phase: str) -> None:
        room = self._rooms.get(room_id)
        if room is not None:
            room.phase = phase

    def destroy_room(self, room_id) -> Optional[Room]:
        return self._rooms.pop(room_id, None)
