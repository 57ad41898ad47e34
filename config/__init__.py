import os

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    """Dotted path of the settings module for this process.

    ``ROSTER_SETTINGS_MODULE`` names a module explicitly (e.g. a deployment's
    own settings file); otherwise ``APP_ENV`` picks one of the bundled ones.
    Anything unrecognised falls back to development.
    """

    explicit = os.getenv("ROSTER_SETTINGS_MODULE", "").strip()
    if explicit:
        return explicit

    env = os.getenv("APP_ENV", "development").strip().lower()
    return _ENV_MODULES.get(env, "config.development")
