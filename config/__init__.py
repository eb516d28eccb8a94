import os


def get_settings_module() -> str:
    """Map APP_ENV to a settings module: prod/production, test/testing, else development."""
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"
