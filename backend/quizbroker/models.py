from dataclasses import dataclass, field
from typing import Any, List, Optional
import time

PHASE_WAITING = 'waiting'
PHASE_PLAYING = 'playing'
PHASE_FINISHED = 'finished'


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class Player:
    id: str
    name: str
    score: int = 0

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'score': self.score,
        }


@dataclass
class Room:
    id: str
    host_id: str
    capacity: int
    password: Optional[str] = None
    phase: str = PHASE_WAITING  # waiting, playing, finished
    players: List[Player] = field(default_factory=list)
    created_at: int = field(default_factory=now_ms)

    @property
    def locked(self) -> bool:
        return self.password is not None

    @property
    def is_full(self) -> bool:
        return len(self.players) >= self.capacity

    def has_player(self, connection_id: str) -> bool:
        return any(p.id == connection_id for p in self.players)

    def summary(self):
        """Public lobby view: no password, no player identities."""
        return {
            'id': self.id,
            'count': len(self.players),
            'capacity': self.capacity,
            'locked': self.locked,
        }


@dataclass
class Quiz:
    id: str
    title: str
    author: str
    data: List[Any]
    created_at: int = field(default_factory=now_ms)

    @property
    def question_count(self) -> int:
        return len(self.data)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'author': self.author,
            'questionCount': self.question_count,
            'createdAt': self.created_at,
            'data': self.data,
        }
