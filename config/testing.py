import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "ponto_inteligente_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

PAGE_SIZE = 25
MAX_PAGE_SIZE = 100

PASSWORD_HASH_METHOD = "pbkdf2:sha256"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
