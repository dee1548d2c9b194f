"""
Request dispatch for the JSON API.

``dispatch`` walks a fixed decision tree over the method and the raw request
URL (path plus query string) and returns an ``Ok``/``Err`` result. It keeps
no state between requests.
"""

from typing import Dict, Optional
from urllib.parse import unquote

from ..models.catalog import Catalog
from ..models.goods_query import GoodsQuery
from ..models.result import Err, Ok, Result
from ..services import goods_service

API_PREFIX = '/api/goods'
CATEGORIES_MARKER = '/api/categories'
COLORS_MARKER = '/api/colors'


def parse_query_string(query: Optional[str]) -> Dict[str, str]:
    """Decode ``a=b&c=d`` into a dict.

    A piece without a value decodes to ``""``; only the value is
    percent-decoded. Repeated keys keep the last value.
    """
    params: Dict[str, str] = {}
    if not query:
        return params
    for piece in query.split('&'):
        parts = piece.split('=')
        key = parts[0]
        value = parts[1] if len(parts) > 1 else ''
        params[key] = unquote(value) if value else ''
    return params


def split_url(url: str, prefix: str = API_PREFIX):
    """Strip ``prefix`` and split the rest into (sub_path, query_string)."""
    rest = url[len(prefix):]
    sub_path, _, query = rest.partition('?')
    return sub_path, query


def dispatch(catalog: Catalog, method: str, url: str, api_prefix: str = API_PREFIX,
             categories_marker: str = CATEGORIES_MARKER,
             colors_marker: str = COLORS_MARKER) -> Result:
    if method == 'OPTIONS':
        return Ok(None)

    if categories_marker in url:
        return Ok(catalog.categories)

    if colors_marker in url:
        return Ok(catalog.colors)

    if not url or not url.startswith(api_prefix):
        return Err.message(404, 'Not Found')

    sub_path, query = split_url(url, api_prefix)
    params = parse_query_string(query)

    # Non-GET requests under the prefix get an empty 200, not a 405.
    if method != 'GET':
        return Ok(None)

    if sub_path in ('', '/'):
        return goods_service.list_goods(catalog, GoodsQuery.from_params(params))

    return goods_service.get_item(catalog, sub_path[1:])
