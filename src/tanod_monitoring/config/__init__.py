import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module; anything unrecognised means development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "tanod_monitoring.config.production"

    if env in {"test", "testing"}:
        return "tanod_monitoring.config.testing"

    return "tanod_monitoring.config.development"
