"""Broker domain services: room registry, quiz catalog and identifiers.

Everything here is plain in-memory state with no knowledge of Socket.IO,
so the event router can be built and tested against fresh instances.
"""

from .errors import (
    BrokerError,
    AccessDenied,
    AlreadyInRoom,
    RoomNotFound,
    RoomFull,
    WrongPassword,
)
from .identifiers import generate_id
from .registry import RoomRegistry
from .catalog import QuizCatalog
from .policy import AdminKeyPolicy, RoomCreationPolicy
