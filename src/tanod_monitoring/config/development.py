import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "tanod_monitoring"),
}

# ID tokens issued by the identity provider
AUTH_TOKEN_KEY = os.getenv("AUTH_TOKEN_KEY", "dev-token-key")
AUTH_TOKEN_ALGORITHMS = os.getenv("AUTH_TOKEN_ALGORITHMS", "HS256").split(",")
AUTH_TOKEN_AUDIENCE = os.getenv("AUTH_TOKEN_AUDIENCE") or None
AUTH_TOKEN_ISSUER = os.getenv("AUTH_TOKEN_ISSUER") or None

ALLOW_FUTURE_REPORTS = bool(int(os.getenv("ALLOW_FUTURE_REPORTS", "1")))
SUPPORT_EMAIL = os.getenv("SUPPORT_EMAIL", "support@example.com")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = False

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
