import logging

from quizbroker.services import RoomRegistry

HOST_LOST_MESSAGE = 'Host disconnected. Game over.'


class DisconnectReconciler:
    """Bring the registry back in line after a connection goes away.

    - host lost: the room is destroyed, its members are told the game is
      over and everyone gets a fresh lobby list
    - player lost: the membership record is dropped and only the host hears
      about it; the lobby list is not re-sent
    - connection never joined anything: nothing to do
    """

    def __init__(self, registry: RoomRegistry, transport, logger=None):
        self.registry = registry
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)

    def reconcile(self, sid: str, ctx) -> None:
        if ctx is None or not ctx.room_id:
            return
        if ctx.is_host:
            self._host_lost(sid, ctx.room_id)
        else:
            self._player_lost(sid, ctx.room_id)

    def _host_lost(self, sid: str, room_id: str) -> None:
        room = self.registry.get_room(room_id)
        if room is None or room.host_id != sid:
            return
        self.registry.destroy_room(room_id)
        self.transport.emit_to_room(room_id, 'error_msg', {'message': HOST_LOST_MESSAGE})
        self.transport.close_room(room_id)
        self.transport.emit_to_all('rooms_list', self.registry.list_active())
        self.logger.info(f"[host-lost] room={room_id} host={sid} closed")

    def _player_lost(self, sid: str, room_id: str) -> None:
        room = self.registry.get_room(room_id)
        if room is None or not room.has_player(sid):
            return
        self.registry.remove_player(room_id, sid)
        self.transport.emit_to(room.host_id, 'player_left', {'id': sid})
        self.logger.info(f"[player-left] room={room_id} player={sid} remaining={len(room.players)}")
