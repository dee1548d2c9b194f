from flask import Response, current_app
from werkzeug.exceptions import HTTPException

from ..models.result import Err, Ok, Result

JSON_MIMETYPE = 'application/json'


def json_response(value, status: int = 200) -> Response:
    if value is None:
        return Response('', status=status, mimetype=JSON_MIMETYPE)
    response = current_app.json.response(value)
    response.status_code = status
    return response


def to_response(result: Result) -> Response:
    """Serialize a handler result."""
    if isinstance(result, Err):
        return json_response(result.payload, result.status_code)
    if isinstance(result, Ok):
        return json_response(result.value)
    raise TypeError(f'unexpected handler result: {result!r}')


def server_error(error: Exception):
    """Fallback for anything a handler raised: log it, hide the details."""
    if isinstance(error, HTTPException):
        return error
    current_app.logger.exception('Unhandled error: %s', error)
    return json_response({'message': 'Server Error'}, 500)
