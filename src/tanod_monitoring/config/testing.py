import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "tanod_monitoring_test"),
}

AUTH_TOKEN_KEY = "test-token-key"
AUTH_TOKEN_ALGORITHMS = ["HS256"]
AUTH_TOKEN_AUDIENCE = None
AUTH_TOKEN_ISSUER = None

ALLOW_FUTURE_REPORTS = True
SUPPORT_EMAIL = "support@example.com"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
LOG_JSON = False

AUTO_INIT_DB = False
