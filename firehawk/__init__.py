"""Flask application factory."""

import os
from flask import Flask
from .config import config
from .extensions import csrf, cors
from .storage import MessageStore


def create_app(config_name=None, overrides=None, store=None):
    """Create and configure the Flask application.

    ``store`` lets callers share or pre-populate a MessageStore; by default
    each application gets its own empty one.
    """
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    if overrides:
        app.config.update(overrides)

    app.json.sort_keys = app.config['JSON_SORT_KEYS']
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    csrf.init_app(app)
    cors.init_app(app, resources={r'/api/*': {'origins': app.config['CORS_ORIGINS']}})

    app.extensions['message_store'] = store if store is not None else MessageStore()

    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)

    # Error handlers
    from .errors import register_error_handlers
    register_error_handlers(app)

    app.logger.info('Contact API ready (%s routing)', app.config['CONTACT_ROUTING'])
    return app
