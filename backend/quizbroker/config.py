import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Shared secret gating room creation
    ADMIN_KEY = os.environ.get('ADMIN_KEY') or '1453'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    DEFAULT_ROOM_CAPACITY = int(os.environ.get('DEFAULT_ROOM_CAPACITY', '20'))
    ID_LENGTH = int(os.environ.get('ID_LENGTH', '6'))
    # Quiz payloads may embed images; allow up to 100 MB per message
    MAX_HTTP_BUFFER_SIZE = int(float(os.environ.get('MAX_HTTP_BUFFER_SIZE', '1e8')))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    ALLOWED_ORIGINS = os.environ.get('ALLOWED_ORIGINS', '*')
    # Optional directory holding index.html and client assets
    STATIC_DIR = os.environ.get('STATIC_DIR')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
