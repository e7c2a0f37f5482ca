class BrokerError(Exception):
    """Base for errors reported back to the requesting connection."""

    message = 'Something went wrong'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class AccessDenied(BrokerError):
    message = 'Access Denied: Incorrect Admin Key'


class RoomNotFound(BrokerError):
    message = 'Room not found'


class RoomFull(BrokerError):
    message = 'Room is full'


class WrongPassword(BrokerError):
    message = 'Incorrect Password'


class AlreadyInRoom(BrokerError):
    message = 'Already in a room'
