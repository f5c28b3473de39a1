"""Routes package - register all blueprints."""

from flask import Flask

ROUTING_STRATEGIES = ('path', 'query')


def register_blueprints(app: Flask):
    """Register the contact API using the configured routing strategy."""
    from firehawk.extensions import csrf
    from .contact import contact_bp, contact_query_bp

    routing = app.config['CONTACT_ROUTING']
    if routing not in ROUTING_STRATEGIES:
        raise ValueError(f'CONTACT_ROUTING must be one of {ROUTING_STRATEGIES}, got {routing!r}')

    blueprint = contact_bp if routing == 'path' else contact_query_bp
    csrf.exempt(blueprint)
    app.register_blueprint(blueprint, url_prefix='/api')
