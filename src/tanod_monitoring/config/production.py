import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "tanod"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "tanod_monitoring"),
}

AUTH_TOKEN_KEY = os.getenv("AUTH_TOKEN_KEY", "")
AUTH_TOKEN_ALGORITHMS = os.getenv("AUTH_TOKEN_ALGORITHMS", "RS256").split(",")
AUTH_TOKEN_AUDIENCE = os.getenv("AUTH_TOKEN_AUDIENCE") or None
AUTH_TOKEN_ISSUER = os.getenv("AUTH_TOKEN_ISSUER") or None

ALLOW_FUTURE_REPORTS = bool(int(os.getenv("ALLOW_FUTURE_REPORTS", "1")))
SUPPORT_EMAIL = os.getenv("SUPPORT_EMAIL", "support@example.com")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
