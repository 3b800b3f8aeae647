import os
from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv())


class Config:
    """Base configuration shared across environments."""

    # Flask
    SECRET_KEY = os.environ.get("FLASK_KEY", "dev_key_not_for_production")
    DEBUG = False
    TESTING = False

    # Flask-WTF
    WTF_CSRF_ENABLED = True

    # Subscriptions
    SUBSCRIPTIONS_FILE = os.environ.get("SUBSCRIPTIONS_FILE", "email_subscriptions.json")
    TIMEZONE = os.environ.get("TIMEZONE", "UTC")

    # Bootstrap-Flask
    BOOTSTRAP_SERVE_LOCAL = os.environ.get("BOOTSTRAP_SERVE_LOCAL", "false").lower() in ("1", "true", "yes")


class DevelopmentConfig(Config):
    """Configuration for development environment."""
    DEBUG = True


class ProductionConfig(Config):
    """Configuration for production environment."""
    SECRET_KEY = os.environ.get("FLASK_KEY")
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    WTF_CSRF_ENABLED = False


# Environment mapping
config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig
}


def get_config():
    """Return the configuration class based on FLASK_ENV."""
    env = os.environ.get("FLASK_ENV", "default")
    return config.get(env, config["default"])
