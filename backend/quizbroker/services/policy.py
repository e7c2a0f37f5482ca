import hmac


class RoomCreationPolicy:
    """Decides whether a connection may create a room.

    Swap in a different subclass to replace the shared secret with real
    authentication; the router only calls ``may_create_room``.
    """

    def may_create_room(self, connection_id: str, payload: dict) -> bool:
        raise NotImplementedError


class AdminKeyPolicy(RoomCreationPolicy):
    def __init__(self, admin_key: str):
        self.admin_key = admin_key

    def may_create_room(self, connection_id, payload):
        supplied = payload.get('adminKey')
        if not isinstance(supplied, str):
            return False
        return hmac.compare_digest(supplied.encode('utf-8'), self.admin_key.encode('utf-8'))
