import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "enrollment_system.config.production"

    if env in {"test", "testing"}:
        return "enrollment_system.config.testing"

    return "enrollment_system.config.development"
