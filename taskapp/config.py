import os

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    HOST = os.environ.get("HOST", "127.0.0.1")
    PORT = int(os.environ.get("PORT", 5000))
    DEBUG = _env_flag("FLASK_DEBUG", False)
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")
        if origin.strip()
    ]
    CORS_METHODS = ["GET", "POST", "PUT", "DELETE"]

    # Load the four demo tasks on startup
    SEED_SAMPLE_TASKS = _env_flag("SEED_SAMPLE_TASKS", True)


class TestingConfig(Config):
    TESTING = True
    SEED_SAMPLE_TASKS = False
