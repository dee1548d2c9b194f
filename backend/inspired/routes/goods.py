"""
Catch-all blueprint for the catalog API.

Routes:
- GET  /img/<path>          image passthrough (no JSON, no CORS)
- GET  /api/goods           goods list (filters, search, pagination)
- GET  /api/goods/<id>      single item
- GET  /api/categories      category list
- GET  /api/colors          color list
- OPTIONS <any>             CORS preflight
"""

import os
from urllib.parse import quote

from flask import Blueprint, Response, current_app, request
from werkzeug.exceptions import MethodNotAllowed

from .responses import to_response
from .router import dispatch

goods_bp = Blueprint('goods', __name__)

HTTP_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS', 'TRACE', 'CONNECT']
IMAGE_MIMETYPE = 'image/jpeg'


def _request_url() -> str:
    """The request target as the client sent it, still percent-encoded."""
    raw = request.environ.get('RAW_URI') or request.environ.get('REQUEST_URI')
    if raw and raw.startswith('/'):
        return raw
    url = quote(request.path)
    if request.query_string:
        url = f"{url}?{request.query_string.decode('utf-8', 'replace')}"
    return url


def _serve_image(path: str) -> Response:
    # The request path is joined as-is; nothing here stops ``..`` segments.
    file_path = os.path.join(current_app.config['IMAGE_ROOT'], path.lstrip('/'))
    try:
        with open(file_path, 'rb') as f:
            body = f.read()
    except OSError as e:
        current_app.logger.warning('Image read failed for %s: %s', path, e)
        body = b''
    return Response(body, status=200, mimetype=IMAGE_MIMETYPE)


@goods_bp.route('/', defaults={'path': ''}, methods=HTTP_METHODS)
@goods_bp.route('/<path:path>', methods=HTTP_METHODS)
def handle(path=''):
    """Route every request through the catalog dispatcher."""
    config = current_app.config
    if request.path.startswith(config['IMAGE_PREFIX']):
        return _serve_image(request.path)

    result = dispatch(
        current_app.extensions['catalog'],
        request.method,
        _request_url(),
        api_prefix=config['API_PREFIX'],
        categories_marker=config['CATEGORIES_MARKER'],
        colors_marker=config['COLORS_MARKER'],
    )
    return to_response(result)


@goods_bp.app_errorhandler(MethodNotAllowed)
def handle_other_methods(error):
    """Methods outside HTTP_METHODS go through the same dispatcher."""
    return handle()
