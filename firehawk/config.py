"""Flask configuration."""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration."""
    # Secret key for session signing
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')

    # CSRF is enforced for any form posted by the site itself; the JSON
    # contact API is exempted when the blueprint is registered
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600  # 1 hour

    # Keep record field order in JSON responses
    JSON_SORT_KEYS = False

    # Contact API
    CONTACT_ROUTING = os.environ.get('CONTACT_ROUTING', 'path')  # path or query
    ADMIN_API_TOKEN = os.environ.get('ADMIN_API_TOKEN') or None
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False

    # Use environment variables for sensitive data
    SECRET_KEY = os.environ.get('SECRET_KEY')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    WTF_CSRF_ENABLED = False
    ADMIN_API_TOKEN = None
    CONTACT_ROUTING = 'path'
    LOG_LEVEL = 'WARNING'


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
