import os

SETTINGS_MODULES = {
    "production": "config.production",
    "testing": "config.testing",
    "development": "config.development",
}


def get_settings_module() -> str:
    # APP_ENV picks the settings module; anything unrecognised means development
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return SETTINGS_MODULES["production"]

    if env in {"test", "testing"}:
        return SETTINGS_MODULES["testing"]

    return SETTINGS_MODULES["development"]
