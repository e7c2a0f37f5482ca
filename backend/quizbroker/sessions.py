from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class ConnectionContext:
    """What the broker knows about one live connection."""
    room_id: Optional[str] = None
    is_host: bool = False
    nickname: Optional[str] = None
    score: int = 0


class ConnectionContexts:
    """Connection id -> ConnectionContext, owned by the event router."""

    def __init__(self):
        self._by_sid: Dict[str, ConnectionContext] = {}

    def __len__(self) -> int:
        return len(self._by_sid)

    def get(self, sid: str) -> Optional[ConnectionContext]:
        return self._by_sid.get(sid)

    def bind_host(self, sid: str, room_id: str) -> ConnectionContext:
        ctx = ConnectionContext(room_id=room_id, is_host=True)
        self._by_sid[sid] = ctx
        return ctx

    def bind_player(self, sid: str, room_id: str, nickname) -> ConnectionContext:
        ctx = ConnectionContext(room_id=room_id, is_host=False, nickname=nickname, score=0)
        self._by_sid[sid] = ctx
        return ctx

    def pop(self, sid: str) -> Optional[ConnectionContext]:
        return self._by_sid.pop(sid, None)
