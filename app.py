"""Entry point for the HubSpot custom object practicum server."""

import logging

from flask import Flask

from crm_client import HubSpotClient
from modules import blueprints
from settings import Settings

logger = logging.getLogger(__name__)


def create_app(settings=None, client=None):
    """Build the Flask app around one settings object and one HubSpot client."""
    settings = settings or Settings()
    if not settings.private_app_access_token:
        logger.warning('PRIVATE_APP_ACCESS_TOKEN is not set; HubSpot calls will be rejected')

    # Static files are served from the site root, next to the routes.
    app = Flask(__name__, static_url_path='')
    app.config['LIST_PROPERTIES'] = settings.list_properties
    app.config['LIST_LIMIT'] = settings.list_limit
    app.extensions['hubspot'] = client or HubSpotClient(settings)

    # Register each blueprint module with the app
    for bp in blueprints:
        app.register_blueprint(bp)

    return app


def main():
    """Run the development server on the configured port.

    WSGI servers build the app through the factory instead, e.g.
    ``gunicorn 'app:create_app()'`` or ``flask --app app run``.
    """
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    server = create_app(settings)
    logger.info('Listening on http://localhost:%s', settings.port)
    server.run(host='0.0.0.0', port=settings.port, threaded=True)


if __name__ == '__main__':
    main()
