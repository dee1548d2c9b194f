from flask import Flask, request
from flask_cors import CORS

from .models.catalog import Catalog
from .routes.responses import server_error
from .services.catalog_repository import load_catalog

# CORS for everything except the /img passthrough
CORS_RESOURCES = {r"^/(?!img).*": {"origins": "*"}}
CORS_METHODS = ['GET', 'OPTIONS']
CORS_HEADERS = ['Content-Type']


def create_app(config_object=None, catalog: Catalog = None):
    """创建 Flask 应用

    The catalog is loaded once here (or passed in) and kept read-only in
    ``app.extensions['catalog']`` for the lifetime of the process.
    """
    from config import Config

    app = Flask(__name__)
    app.config.from_object(Config)
    if config_object is not None:
        app.config.from_object(config_object)

    app.logger.setLevel(app.config['LOG_LEVEL'])

    app.json.sort_keys = False
    app.json.ensure_ascii = False

    # flask-cors sends these on preflights only; hooks run in reverse order,
    # so this one runs after flask-cors
    @app.after_request
    def add_cors_allow_headers(response):
        if not request.path.startswith(app.config['IMAGE_PREFIX']):
            response.headers['Access-Control-Allow-Methods'] = ', '.join(CORS_METHODS)
            response.headers['Access-Control-Allow-Headers'] = ', '.join(CORS_HEADERS)
        return response

    CORS(
        app,
        resources=CORS_RESOURCES,
        send_wildcard=True,
        methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    if catalog is None:
        catalog = load_catalog(app.config['DATA_FILE'])
    app.extensions['catalog'] = catalog

    app.register_error_handler(Exception, server_error)

    from .routes.goods import goods_bp
    app.register_blueprint(goods_bp)

    return app
